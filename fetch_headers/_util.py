__all__ = [
    "HeadersError",
    "InvalidHeaderName",
    "InvalidHeaderValue",
    "InvalidInitializer",
    "InvalidPairEntry",
    "InvalidPairLength",
    "InvalidIteratorReceiver",
    "validate",
    "make_sentinel",
    "textify",
]


class HeadersError(TypeError):
    """Exception indicating that a :class:`Headers` operation was given
    something it can't accept.

    This is an abstract base class; the concrete subclasses say exactly what
    was wrong (:exc:`InvalidHeaderName`, :exc:`InvalidHeaderValue`, ...).

    It derives from :exc:`TypeError`, because that's what the Fetch standard
    says a ``Headers`` object throws, and existing ``except TypeError``
    clauses keep working.

    Every operation that raises one of these leaves the :class:`Headers`
    object exactly as it was before the call.

    """

    def __init__(self, msg):
        if type(self) is HeadersError:
            raise TypeError("tried to directly instantiate HeadersError")
        TypeError.__init__(self, msg)


class InvalidHeaderName(HeadersError):
    pass


class InvalidHeaderValue(HeadersError):
    pass


# Raised by the Headers constructor, for an initializer that is neither a
# mapping nor a sequence of pairs.
class InvalidInitializer(HeadersError):
    pass


class InvalidPairEntry(HeadersError):
    pass


class InvalidPairLength(HeadersError):
    pass


class InvalidIteratorReceiver(HeadersError):
    pass


def validate(regex, data, error, msg="malformed data"):
    if not regex.fullmatch(data):
        raise error(msg)


# Sentinel values
#
# - Inherit identity-based comparison and hashing from object
# - Have a nice repr
# - Have a *bonus property*: type(sentinel) is sentinel
#
# The bonus property means an iterator kind can be used directly as a dict
# key or compared with "is", no matter how it was obtained.
class _SentinelBase(type):
    def __repr__(self):
        return self.__name__


def make_sentinel(name):
    cls = _SentinelBase(name, (_SentinelBase,), {})
    cls.__class__ = cls
    return cls


# Used for header names and header values. Accepts strings, or
# bytes/bytearray/memoryview/..., and always returns a str. Bytes are decoded
# as latin-1, so every octet maps to exactly one code point and nothing is
# lost. Anything else is stringified, the same way the Fetch standard
# converts its arguments to ByteStrings.
def textify(s):
    if isinstance(s, str):
        return s
    if isinstance(s, (bytes, bytearray, memoryview)):
        return bytes(s).decode("latin-1")
    return str(s)

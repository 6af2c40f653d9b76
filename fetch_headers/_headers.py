# The Headers class of the Fetch standard:
#
#     https://fetch.spec.whatwg.org/#headers-class
#
# Facts:
#
# Names are case-insensitive tokens. We store them lowercased, which is also
# what the standard's "sort and combine" algorithm hands back to callers.
#
# Values keep their case. Repeated values for one name are kept in order, and
# joined with "," (no space!) whenever they're read back out. That's
# different from the ", " that RFC 7230 suggests for combining field values,
# but it's what browsers do, and it's what the standard says.
#
# Iteration is NOT in insertion order. It's in order of the lowercased names,
# compared code point by code point. And it's live: every step of an
# iterator re-sorts whatever is in the Headers object *right now*, so if you
# add or delete names while iterating you can skip entries or see new ones.
# That's how the standard defines "value pairs to iterate over", and callers
# can depend on it, so don't "fix" it by snapshotting.

import re
import types
from collections.abc import Iterable, Mapping, Set

from ._abnf import field_name, field_value
from ._util import (
    InvalidHeaderName,
    InvalidHeaderValue,
    InvalidInitializer,
    InvalidIteratorReceiver,
    InvalidPairEntry,
    InvalidPairLength,
    make_sentinel,
    textify,
    validate,
)

__all__ = [
    "Headers",
    "HeadersIterator",
    "KEY",
    "VALUE",
    "KEY_VALUE",
    "sanitize_name",
    "sanitize_value",
]

field_name_re = re.compile(field_name)
field_value_re = re.compile(field_value)

# Iterator kinds
KEY = make_sentinel("KEY")
VALUE = make_sentinel("VALUE")
KEY_VALUE = make_sentinel("KEY_VALUE")

_KINDS = (KEY, VALUE, KEY_VALUE)

_TEXT_LIKE = (str, bytes, bytearray, memoryview)


def sanitize_name(name):
    name = textify(name)
    validate(
        field_name_re,
        name,
        InvalidHeaderName,
        "{!r} is not a legal HTTP header name".format(name),
    )
    return name.lower()


def sanitize_value(value):
    value = textify(value)
    validate(
        field_value_re,
        value,
        InvalidHeaderValue,
        "{!r} is not a legal HTTP header value".format(value),
    )
    return value


def _is_pair_source(obj):
    # Strings are iterable, but a string is never a list of pairs (or a
    # pair).
    return isinstance(obj, Iterable) and not isinstance(obj, _TEXT_LIKE)


def _header_pairs(headers, kind):
    names = sorted(headers._map)
    if kind is KEY:
        return [(name,) for name in names]
    return [(name, ",".join(headers._map[name])) for name in names]


class _RawView(Mapping):
    # Read-only window onto the live storage of a Headers object.
    __slots__ = ("_map",)

    def __init__(self, map):
        self._map = map

    def __getitem__(self, name):
        return tuple(self._map[name])

    def __iter__(self):
        return iter(self._map)

    def __len__(self):
        return len(self._map)

    def __repr__(self):
        return "{}({})".format(self.__class__.__name__, dict(self.items()))


class Headers:
    """A case-insensitive, multi-valued collection of HTTP header fields.

    Names are validated against the RFC 7230 ``token`` grammar and stored
    lowercased; values are validated to contain no CR, LF, NUL or other
    characters that can't appear in a header field, and are stored as-is.
    Names and values can be given as :class:`str`, or as :term:`bytes-like
    objects <bytes-like object>` (which are decoded as latin-1); anything
    else is converted with :func:`str`.

    The optional *init* argument can be:

    * ``None``: start out empty.

    * A :class:`~collections.abc.Mapping`: equivalent to
      :meth:`from_mapping`.

    * Any other iterable of ``(name, value)`` pairs, including another
      :class:`Headers` object: equivalent to :meth:`from_pairs`.

    Anything else raises :exc:`InvalidInitializer`.

    Iterating over a :class:`Headers` object gives the same live
    ``(name, value)`` iterator as :meth:`entries`; see :class:`HeadersIterator`.

    """

    __slots__ = ("_map",)

    def __init__(self, init=None):
        self._map = {}
        if init is None:
            return
        if isinstance(init, Mapping):
            self._extend_from_mapping(init)
        elif _is_pair_source(init):
            self._extend_from_pairs(init)
        else:
            raise InvalidInitializer(
                "Headers initializer must be a mapping or an iterable of "
                "pairs, not {}".format(type(init).__name__)
            )

    @classmethod
    def from_pairs(cls, pairs):
        """Build a :class:`Headers` object from an iterable of ``(name,
        value)`` pairs, appending them in order.

        The whole iterable is consumed before anything is appended. Each item
        must itself be an iterable (but not a string) with exactly two
        elements, or else :exc:`InvalidPairEntry` or
        :exc:`InvalidPairLength` is raised.

        """
        self = cls()
        self._extend_from_pairs(pairs)
        return self

    @classmethod
    def from_mapping(cls, mapping):
        """Build a :class:`Headers` object from a mapping, appending each
        item in the mapping's iteration order.

        """
        self = cls()
        self._extend_from_mapping(mapping)
        return self

    def _extend_from_pairs(self, pairs):
        if not _is_pair_source(pairs):
            raise InvalidInitializer(
                "header pairs must be iterable, not {}".format(
                    type(pairs).__name__
                )
            )
        # Exhaust the outer iterable (and each pair) before appending
        # anything, in case iterating it has side effects.
        materialized = []
        for pair in pairs:
            # A mapping or a set has no order, so it can't be a (name, value)
            # pair.
            if not _is_pair_source(pair) or isinstance(pair, (Mapping, Set)):
                raise InvalidPairEntry("Each header pair must be iterable")
            materialized.append(list(pair))
        for pair in materialized:
            if len(pair) != 2:
                raise InvalidPairLength(
                    "Each header pair must be a name/value tuple, got {} "
                    "item(s)".format(len(pair))
                )
        for name, value in materialized:
            self.append(name, value)

    def _extend_from_mapping(self, mapping):
        if not isinstance(mapping, Mapping):
            raise InvalidInitializer(
                "expected a mapping, not {}".format(type(mapping).__name__)
            )
        for name in mapping:
            self.append(name, mapping[name])

    def get(self, name):
        "Returns all values for *name*, joined with a comma, or None"
        values = self._map.get(sanitize_name(name))
        if values is None:
            return None
        return ",".join(values)

    def set(self, name, value):
        "Replaces all existing values for *name* with *value*"
        # Both sanitized before we touch the map, so a bad value can't leave
        # a half-done update behind.
        name = sanitize_name(name)
        value = sanitize_value(value)
        self._map[name] = [value]

    def append(self, name, value):
        "Adds *value* after any existing values for *name*"
        name = sanitize_name(name)
        value = sanitize_value(value)
        values = self._map.get(name)
        if values is None:
            self._map[name] = [value]
        else:
            values.append(value)

    def has(self, name):
        return sanitize_name(name) in self._map

    def __contains__(self, name):
        return self.has(name)

    def __getitem__(self, name):
        value = self.get(name)
        if value is None:
            raise KeyError(name)
        return value

    def delete(self, name):
        "Discards all values for *name*; does nothing if there aren't any"
        self._map.pop(sanitize_name(name), None)

    def raw(self):
        """Returns a read-only view of the underlying storage.

        This is not part of the Fetch standard. The view maps each lowercased
        name to a tuple of its values, in the order they were added, and
        tracks later changes to this object.

        """
        return _RawView(self._map)

    def keys(self):
        return HeadersIterator(self, KEY)

    def values(self):
        return HeadersIterator(self, VALUE)

    def entries(self):
        return HeadersIterator(self, KEY_VALUE)

    __iter__ = entries

    def for_each(self, callback, this_arg=None):
        """Calls ``callback(value, name, self)`` for each header, in sorted
        order.

        If *this_arg* is given, *callback* is bound to it first, so it will
        receive *this_arg* as an extra leading argument.

        Like the iterators, this re-reads the headers after every call, so
        changes that *callback* makes are seen by the rest of the loop.

        """
        if this_arg is not None:
            callback = types.MethodType(callback, this_arg)
        pairs = _header_pairs(self, KEY_VALUE)
        i = 0
        while i < len(pairs):
            name, value = pairs[i]
            callback(value, name, self)
            pairs = _header_pairs(self, KEY_VALUE)
            i += 1

    def __repr__(self):
        return "{}({!r})".format(self.__class__.__name__, self._map)


class HeadersIterator:
    """A live iterator over a :class:`Headers` object.

    Returned by :meth:`Headers.keys`, :meth:`Headers.values`,
    :meth:`Headers.entries` and ``iter(headers)``. It remembers only its
    position; each call to :func:`next` sorts the headers as they are at
    that moment and returns the item at that position -- a name for
    :data:`KEY`, a joined value for :data:`VALUE`, or a ``(name, value)``
    tuple for :data:`KEY_VALUE`.

    Running off the end raises :exc:`StopIteration`, but that isn't
    permanent: if more headers are added, a later :func:`next` will return
    them.

    """

    __slots__ = ("_target", "_kind", "_index")

    def __init__(self, target, kind=KEY_VALUE):
        if not isinstance(target, Headers):
            raise InvalidIteratorReceiver(
                "HeadersIterator target must be a Headers object, not {}".format(
                    type(target).__name__
                )
            )
        if kind not in _KINDS:
            raise InvalidIteratorReceiver(
                "unknown HeadersIterator kind {!r}".format(kind)
            )
        self._target = target
        self._kind = kind
        self._index = 0

    def __iter__(self):
        return self

    def __next__(self):
        if not isinstance(self, HeadersIterator):
            raise InvalidIteratorReceiver("receiver is not a HeadersIterator")
        try:
            target, kind, index = self._target, self._kind, self._index
        except AttributeError:
            raise InvalidIteratorReceiver(
                "HeadersIterator was never initialized"
            ) from None

        pairs = _header_pairs(target, kind)
        if index >= len(pairs):
            raise StopIteration
        pair = pairs[index]
        self._index = index + 1

        if kind is KEY:
            return pair[0]
        elif kind is VALUE:
            return pair[1]
        else:
            return pair

    def __repr__(self):
        return "{}(kind={!r}, index={})".format(
            self.__class__.__name__,
            getattr(self, "_kind", None),
            getattr(self, "_index", None),
        )

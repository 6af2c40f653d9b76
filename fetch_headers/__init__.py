# An implementation of the Headers class from the WHATWG Fetch standard: a
# case-insensitive, multi-valued collection of HTTP header fields, with the
# standard's validation rules, sorted iteration order, and live iterators. It
# contains no networking code at all -- it's meant to be the thing that a
# request/response serializer reads from, and that a response parser writes
# into.

from ._util import (
    HeadersError,
    InvalidHeaderName,
    InvalidHeaderValue,
    InvalidInitializer,
    InvalidPairEntry,
    InvalidPairLength,
    InvalidIteratorReceiver,
)
from ._headers import *
from ._version import __version__

__all__ = [
    "__version__",
    "HeadersError",
    "InvalidHeaderName",
    "InvalidHeaderValue",
    "InvalidInitializer",
    "InvalidPairEntry",
    "InvalidPairLength",
    "InvalidIteratorReceiver",
]
__all__ += _headers.__all__

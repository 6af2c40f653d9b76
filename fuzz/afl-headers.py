# Invariant tested: No matter what random garbage gets thrown at a Headers
# object, it either accepts it, or else raises a HeadersError, never any
# other error.

import os
import sys

import afl

import fetch_headers


def exercise(h):
    for _ in h.keys():
        pass
    for _ in h.values():
        pass
    for name, value in h:
        assert h.get(name) == value
    h.raw()


afl.init()

data = sys.stdin.detach().read()

# Treat the input as "name: value" lines, the way a response parser would
# feed them in.
h = fetch_headers.Headers()
pairs = []
for line in data.split(b"\n"):
    name, _, value = line.partition(b":")
    pairs.append((name, value))
    try:
        h.append(name, value)
    except fetch_headers.HeadersError:
        pass
    try:
        h.set(value, name)
    except fetch_headers.HeadersError:
        pass
exercise(h)

try:
    exercise(fetch_headers.Headers(pairs))
except fetch_headers.HeadersError:
    pass

# Suggested by the afl-python docs -- this substantially speeds up fuzzing, at
# the risk of missing bugs that would cause the interpreter to crash on
# exit. fetch_headers is pure python, so I'm pretty sure it doesn't have any
# bugs that would cause the interpreter to crash on exit.
os._exit(0)

# Write the benchmarking functions here.
# See "Writing benchmarks" in the asv docs for more information.

import fetch_headers

REALISTIC_HEADERS = [
    ("Host", "example.com"),
    ("User-Agent", "Mozilla/5.0 (X11; Linux x86_64; rv:45.0) Gecko/20100101 Firefox/45.0"),
    ("Accept", "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"),
    ("Accept-Language", "en-US,en;q=0.5"),
    ("Accept-Encoding", "gzip, deflate, br"),
    ("DNT", "1"),
    ("Cookie", "ID=" + "A" * 200),
    ("Set-Cookie", "a=1"),
    ("Set-Cookie", "b=2"),
    ("Connection", "keep-alive"),
]


# Basic ASV benchmark of core functionality
def time_construct_realistic_headers():
    fetch_headers.Headers(REALISTIC_HEADERS)


def time_iterate_realistic_headers():
    h = fetch_headers.Headers(REALISTIC_HEADERS)
    for name, value in h:
        pass


def time_lookup_realistic_headers():
    h = fetch_headers.Headers(REALISTIC_HEADERS)
    for name, _ in REALISTIC_HEADERS:
        h.get(name)

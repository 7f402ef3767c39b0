"""Header key ordering strategies.

Strategies operate on header *names* only and return a new list. Values
never influence the order.
"""

import itertools
import random
from collections.abc import Callable
from types import MappingProxyType

from guise._options import HeaderOrder

PSEUDO_HEADERS = (":method", ":authority", ":scheme", ":path")

# Lower values go first. Lookup is on the lowercased name; names absent
# from this table sort after every known name.
HEADER_PRIORITY = MappingProxyType({
    # pseudo headers
    ":authority": 0,
    ":method": 1,
    ":path": 2,
    ":scheme": 3,
    ":status": 4,
    # connection
    "host": 10,
    "connection": 11,
    "upgrade": 12,
    "upgrade-insecure-requests": 13,
    "user-agent": 14,
    # client hints
    "sec-ch-ua": 15,
    "sec-ch-ua-arch": 16,
    "sec-ch-ua-bitness": 17,
    "sec-ch-ua-full-version": 18,
    "sec-ch-ua-full-version-list": 19,
    "sec-ch-ua-mobile": 20,
    "sec-ch-ua-model": 21,
    "sec-ch-ua-platform": 22,
    "sec-ch-ua-platform-version": 23,
    "sec-ch-ua-wow64": 24,
    # credentials and request context
    "authorization": 30,
    "proxy-authorization": 31,
    "cookie": 32,
    "sec-gpc": 33,
    "expect": 34,
    "max-forwards": 35,
    "from": 36,
    # content negotiation
    "accept": 40,
    "accept-charset": 41,
    "accept-encoding": 42,
    "accept-language": 43,
    "te": 44,
    # conditionals
    "if-match": 50,
    "if-none-match": 51,
    "if-modified-since": 52,
    "if-unmodified-since": 53,
    "if-range": 54,
    "range": 60,
    # fetch metadata
    "sec-fetch-site": 65,
    "sec-fetch-mode": 66,
    "sec-fetch-user": 67,
    "sec-fetch-dest": 68,
    "referer": 70,
    # entity
    "content-type": 80,
    "content-length": 81,
    "content-encoding": 82,
    "content-language": 83,
    "content-location": 84,
    "content-md5": 85,
    "content-range": 86,
    "transfer-encoding": 87,
    # response and caching
    "date": 100,
    "location": 101,
    "retry-after": 102,
    "set-cookie": 103,
    "expires": 104,
    "pragma": 105,
    "cache-control": 106,
    "etag": 107,
    "last-modified": 108,
    "age": 109,
    "vary": 110,
    "accept-ranges": 111,
    "allow": 112,
    "server": 113,
    "via": 114,
    "warning": 115,
    # security policy
    "strict-transport-security": 120,
    "content-security-policy": 121,
    "permissions-policy": 123,
    "cross-origin-opener-policy": 124,
    "cross-origin-resource-policy": 125,
    "cross-origin-embedder-policy": 126,
    "x-frame-options": 127,
    "x-content-type-options": 128,
    "x-xss-protection": 129,
    "report-to": 130,
    "reporting-endpoints": 131,
    # authentication challenges
    "www-authenticate": 140,
    "proxy-authenticate": 141,
    "accept-ch": 150,
    "alt-svc": 160,
    "trailer": 170,
    "x-ua-compatible": 171,
})

_UNKNOWN = max(HEADER_PRIORITY.values()) + 1

OrderStrategy = Callable[[list[str]], list[str]]


def _rank(name: str) -> int:
    return HEADER_PRIORITY.get(name.lower(), _UNKNOWN)


def priority_order(keys: list[str]) -> list[str]:
    """Stable sort by the priority table. Unknown names keep input order."""
    return sorted(keys, key=_rank)


def shuffled_priority_order(keys: list[str]) -> list[str]:
    """Priority order with each run of equal priority shuffled in place.

    All unknown names share one rank and so form a single run.
    """
    result = []
    for _, run in itertools.groupby(priority_order(keys), key=_rank):
        run = list(run)
        random.shuffle(run)
        result.extend(run)
    return result


def random_order(keys: list[str]) -> list[str]:
    result = list(keys)
    random.shuffle(result)
    return result


_STRATEGIES = {
    HeaderOrder.PRIORITY: priority_order,
    HeaderOrder.SHUFFLED_PRIORITY: shuffled_priority_order,
    HeaderOrder.RANDOM: random_order,
}


def resolve_strategy(order: "HeaderOrder | str | OrderStrategy") -> OrderStrategy:
    """Map a HeaderOrder (or its value) to a strategy; callables pass through."""
    if callable(order):
        return order
    return _STRATEGIES[HeaderOrder(order)]


def ordered_keys(keys: list[str], strategy: OrderStrategy) -> list[str]:
    """Pseudo headers followed by ``keys`` ordered with ``strategy``."""
    return [*PSEUDO_HEADERS, *strategy(list(keys))]

"""
Ordered merging of query and header pairs
"""

import heapq
from operator import itemgetter
from typing import Iterable, Iterator, Tuple

Pair = Tuple[str, str]

_by_key = itemgetter(0)


def merge_sorted(first: Iterable[Pair], second: Iterable[Pair]) -> Iterator[Pair]:
    """
    Lazily merge two sequences of key-value pairs into one ascending by key.

    Neither input has to be sorted. Pairs with equal keys keep their source
    order: everything from ``first`` comes before ``second``, and pairs from
    the same source keep their relative order.
    """
    # sorted() and heapq.merge are both stable, which gives the tie order.
    return heapq.merge(
        sorted(first, key=_by_key),
        sorted(second, key=_by_key),
        key=_by_key,
    )

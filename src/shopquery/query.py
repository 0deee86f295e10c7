"""
Query helpers for in-memory collections.

Join and grouping primitives used by the report service. All of them keep
encounter order: results follow the outer sequence, and within one outer
row the matching inner rows appear in their original order.
"""

from typing import Callable, Dict, Hashable, Iterable, List, Optional, Tuple, TypeVar

L = TypeVar("L")
R = TypeVar("R")
K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def to_lookup(items: Iterable[V], key: Callable[[V], K]) -> Dict[K, List[V]]:
    """Index items by key; each bucket keeps encounter order."""
    lookup: Dict[K, List[V]] = {}
    for item in items:
        lookup.setdefault(key(item), []).append(item)
    return lookup


def inner_join(
    outer: Iterable[L],
    inner: Iterable[R],
    outer_key: Callable[[L], K],
    inner_key: Callable[[R], K],
    result: Callable[[L, R], V],
) -> List[V]:
    """Pair every outer row with each inner row sharing its key; unmatched rows are dropped."""
    lookup = to_lookup(inner, inner_key)
    return [
        result(left, right)
        for left in outer
        for right in lookup.get(outer_key(left), [])
    ]


def group_join(
    outer: Iterable[L],
    inner: Iterable[R],
    outer_key: Callable[[L], K],
    inner_key: Callable[[R], K],
    result: Callable[[L, List[R]], V],
) -> List[V]:
    """One result per outer row, carrying the (possibly empty) list of matching inner rows."""
    lookup = to_lookup(inner, inner_key)
    return [result(left, list(lookup.get(outer_key(left), []))) for left in outer]


def left_join(
    outer: Iterable[L],
    inner: Iterable[R],
    outer_key: Callable[[L], K],
    inner_key: Callable[[R], K],
    result: Callable[[L, Optional[R]], V],
) -> List[V]:
    """
    Left outer join built from a group join.

    Every outer row yields one result per match, or exactly one result with
    ``None`` in place of the inner row when nothing matches.
    """
    groups = group_join(outer, inner, outer_key, inner_key, lambda left, rights: (left, rights))
    rows: List[V] = []
    for left, rights in groups:
        if not rights:
            rows.append(result(left, None))
            continue
        rows.extend(result(left, right) for right in rights)
    return rows


def group_by(items: Iterable[V], key: Callable[[V], K]) -> List[Tuple[K, List[V]]]:
    """Partition items by key, groups ordered by first appearance of their key."""
    return list(to_lookup(items, key).items())


def order_by_desc(items: Iterable[V], key: Callable[[V], object]) -> List[V]:
    """Sort descending; ties keep their original relative order."""
    return sorted(items, key=key, reverse=True)

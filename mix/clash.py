"""Clash-preserving composition.

Where compose_two drops the losing implementation of a shared name,
merge_clashing keeps both as a Chain:

    c = compose_with_clashes([o1, o2])
    dispatch(c, "get")               # o1's get
    dispatch_at(c, "get", [], 2)     # o2's get

Chains are kept flat. Folding three objects that all define `get`
gives a chain of three members in object order, never a chain holding
another chain, so indexed dispatch can reach every implementation.
"""

from __future__ import annotations

from typing import Sequence

from mix.objects import EMPTY, Object, chain_of


def merge_clashing(left: Object, right: Object) -> Object:
    """Union of both tables; shared names become a chain, left first."""
    table = dict(left.table)
    for name, entry in right.table.items():
        if name in table:
            table[name] = chain_of(table[name], entry)
        else:
            table[name] = entry
    return Object(table)


def compose_with_clashes(objects: Sequence[Object]) -> Object:
    """Fold merge_clashing from the right: objects[k] with merge(objects[k+1:])."""
    if not objects:
        return EMPTY
    result = Object(objects[-1].table)
    for obj in reversed(objects[:-1]):
        result = merge_clashing(obj, result)
    return result

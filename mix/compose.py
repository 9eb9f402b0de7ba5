"""Override composition.

Like Nix's `//` on attribute sets, but left-biased: when two objects
define the same name, the first one wins and the other implementation
is dropped.

    compose_two(overrides, base)
    compose_list([top, middle, base])    # top beats middle beats base

compose_list folds from the head of the list; compose_pairwise recurses
from the tail. Both give every object precedence over all objects after
it, so they always agree.
"""

from __future__ import annotations

from typing import Sequence

from mix.objects import EMPTY, Object


def compose_two(primary: Object, secondary: Object) -> Object:
    """All methods of both objects; primary's entry wins a collision."""
    table = dict(primary.table)
    for name, entry in secondary.table.items():
        table.setdefault(name, entry)
    return Object(table)


def compose_list(objects: Sequence[Object]) -> Object:
    """Fold compose_two over objects, seeded with the first one.

    The empty list gives the empty object. A single object gives a copy
    of itself.
    """
    if not objects:
        return EMPTY
    result = Object(objects[0].table)
    for obj in objects[1:]:
        result = compose_two(result, obj)
    return result


def compose_pairwise(objects: Sequence[Object]) -> Object:
    """compose_two(head, compose_pairwise(tail)), bottoming out at EMPTY."""
    if not objects:
        return EMPTY
    return compose_two(objects[0], compose_pairwise(objects[1:]))

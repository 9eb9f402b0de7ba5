"""Delegating composition.

Instead of copying entries, compose_by_delegation keeps the list of
objects and gives each name a forwarding closure, the way a
__getattr__ chain hands a lookup to the next layer:

    d = compose_by_delegation([o1, o2])
    dispatch(d, "get")    # the first of o1, o2 that has "get" answers

The owner is looked up again on every call. Forwarded calls are always
nullary: whatever arguments reach the closure are dropped before the
delegate's method runs.
"""

from __future__ import annotations

from typing import Any, Sequence

from mix.dispatch import MethodNotFound, dispatch
from mix.objects import Object, Single


def _forwarder(delegates: tuple[Object, ...], name: str):
    def forward(*_args: Any) -> Any:
        for delegate in delegates:
            if name in delegate.table:
                return dispatch(delegate, name)
        raise MethodNotFound(name)

    forward.__name__ = name
    forward.__qualname__ = f"delegate.{name}"
    return forward


def compose_by_delegation(objects: Sequence[Object]) -> Object:
    """An object forwarding every name to the first delegate that owns it."""
    delegates = tuple(objects)
    names: dict[str, None] = {}
    for obj in delegates:
        for name in obj.table:
            names.setdefault(name)
    return Object(
        {name: Single(_forwarder(delegates, name)) for name in names},
        delegates=delegates,
    )

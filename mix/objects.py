"""Objects as method tables.

An object is nothing more than a table from method name to entry:

    counter = create({"increment": inc, "get_count": get})

Each entry is either a Single (one callable) or a Chain (several
callables that collided under clash-preserving composition). There are
no classes and no inheritance; every meta-operation here returns a new
Object and leaves its input untouched.

The callables are shared, never copied. A factory closes its methods
over a private state record, so every object built from those methods,
however composed, reads and writes the same record.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Union


@dataclass(frozen=True)
class Single:
    """One implementation of a method."""

    fn: Callable[..., Any]


@dataclass(frozen=True)
class Chain:
    """Colliding implementations of a method, in object order.

    Always flat and at least two long; see chain_of().
    """

    members: tuple[Callable[..., Any], ...]

    def __post_init__(self):
        if len(self.members) < 2:
            raise ValueError(f"a chain needs at least 2 members, got {len(self.members)}")

    def __len__(self) -> int:
        return len(self.members)


Entry = Union[Single, Chain]


def chain_of(left: Entry, right: Entry) -> Chain:
    """Join two entries into one flat chain, left's members first."""
    return Chain(members(left) + members(right))


def members(entry: Entry) -> tuple[Callable[..., Any], ...]:
    if isinstance(entry, Chain):
        return entry.members
    return (entry.fn,)


def head(entry: Entry) -> Callable[..., Any]:
    """The callable answering a plain (non-indexed) call."""
    return members(entry)[0]


@dataclass(frozen=True, eq=False)
class Object:
    """A method table, plus the delegate list of a delegating composite."""

    table: Mapping[str, Entry]
    delegates: tuple[Object, ...] = field(default=(), repr=False)

    def __post_init__(self):
        object.__setattr__(self, "table", MappingProxyType(dict(self.table)))

    def __contains__(self, name: str) -> bool:
        return name in self.table

    def __len__(self) -> int:
        return len(self.table)

    def __repr__(self) -> str:
        return f"Object({', '.join(self.table)})"


def _box(name: str, value: Any) -> Entry:
    if isinstance(value, (Single, Chain)):
        return value
    if not callable(value):
        raise TypeError(f"method {name!r} is not callable: {value!r}")
    return Single(value)


def create(table: Mapping[str, Any]) -> Object:
    """Build an Object from a mapping of names to callables or entries."""
    return Object({name: _box(name, value) for name, value in table.items()})


EMPTY = create({})


def add_method(obj: Object, name: str, fn: Any) -> Object:
    """Return a copy of obj with name added, replacing any existing entry."""
    return Object({**obj.table, name: _box(name, fn)})


def remove_method(obj: Object, name: str) -> Object:
    """Return a copy of obj without name. Absent names are ignored."""
    return Object({k: v for k, v in obj.table.items() if k != name})


def has_method(obj: Object, name: str) -> bool:
    return name in obj.table


def method_names(obj: Object) -> set[str]:
    return set(obj.table)


def attributes(obj: Object) -> dict[str, Any]:
    """Snapshot of obj's observable state, or {} if it has no attributes method.

    The attributes entry is an ordinary method: after a clash it is a
    chain and only its head answers here.
    """
    entry = obj.table.get("attributes")
    if entry is None:
        return {}
    return dict(head(entry)())

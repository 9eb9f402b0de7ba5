"""Method dispatch on Objects.

    dispatch(obj, "deposit", [50])          # head of the entry
    dispatch_at(obj, "get", [], 2)          # second member of a chain
    call_next(obj, "get", [], 1)            # same as dispatch_at(..., 2)

Arguments are passed with a capped calling convention: up to two
arguments are passed positionally, three or more are passed together as
a single list. A method that wants three separate parameters cannot be
called through the dispatcher.

Running off the end of a chain is not an error: dispatch_at returns the
END_OF_CHAIN sentinel, and chain-aware callers test for it. A missing
name is an error and raises MethodNotFound.
"""

from __future__ import annotations

from typing import Any, Callable, Sequence

from mix.objects import Chain, Object, head


class MethodNotFound(LookupError):
    """No entry (or delegate) answers the requested name."""

    def __init__(self, name: str):
        super().__init__(f"method not found: {name!r}")
        self.name = name


class _EndOfChain:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "END_OF_CHAIN"


END_OF_CHAIN = _EndOfChain()


def invoke(fn: Callable[..., Any], args: Sequence[Any] = ()) -> Any:
    """Call fn using the capped calling convention."""
    if len(args) == 0:
        return fn()
    if len(args) == 1:
        return fn(args[0])
    if len(args) == 2:
        return fn(args[0], args[1])
    return fn(list(args))


def _resolve(obj: Object, name: str):
    try:
        return obj.table[name]
    except KeyError:
        raise MethodNotFound(name) from None


def dispatch(obj: Object, name: str, args: Sequence[Any] = ()) -> Any:
    """Invoke name on obj. For a chain only the first member runs."""
    return invoke(head(_resolve(obj, name)), args)


def dispatch_at(obj: Object, name: str, args: Sequence[Any], index: int) -> Any:
    """Invoke the index-th (1-based) implementation of name.

    A single implementation is invoked whatever the index. Past the end
    of a chain, END_OF_CHAIN is returned instead.
    """
    entry = _resolve(obj, name)
    if not isinstance(entry, Chain):
        return invoke(entry.fn, args)
    if index < 1:
        raise ValueError(f"chain index is 1-based, got {index}")
    if index > len(entry):
        return END_OF_CHAIN
    return invoke(entry.members[index - 1], args)


def call_next(obj: Object, name: str, args: Sequence[Any], current_index: int) -> Any:
    """Invoke the implementation after current_index. Like super() for chains."""
    return dispatch_at(obj, name, args, current_index + 1)


def dispatch_all(obj: Object, name: str, args: Sequence[Any] = ()) -> list[Any]:
    """Invoke every implementation of name in order and collect the results."""
    entry = _resolve(obj, name)
    if not isinstance(entry, Chain):
        return [invoke(entry.fn, args)]
    results = [dispatch_at(obj, name, args, 1)]
    index = 1
    while True:
        result = call_next(obj, name, args, index)
        if result is END_OF_CHAIN:
            return results
        results.append(result)
        index += 1

"""Call tracing for Objects.

traced() returns a copy of an object whose methods report every call
through logging. The originals still do the work, so state is shared
with the untraced object exactly as composition shares it:

    logging.basicConfig(level=logging.DEBUG)
    account = traced(make_bank_account("ada", 100))
    dispatch(account, "deposit", [5])
    # DEBUG:mix.trace:deposit(5) -> 105

Nothing in the engine logs on its own; wrap an object here to watch it.
"""

from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Callable

from mix.objects import Chain, Entry, Object, Single

logger = logging.getLogger(__name__)


def _wrap(name: str, fn: Callable[..., Any], log: logging.Logger, level: int):
    @wraps(fn)
    def wrapper(*args: Any) -> Any:
        shown = ", ".join(repr(a) for a in args)
        try:
            result = fn(*args)
        except Exception as e:
            log.log(level, f"{name}({shown}) raised {type(e).__name__}: {e}")
            raise
        log.log(level, f"{name}({shown}) -> {result!r}")
        return result

    return wrapper


def _wrap_entry(name: str, entry: Entry, log: logging.Logger, level: int) -> Entry:
    if isinstance(entry, Chain):
        return Chain(tuple(
            _wrap(f"{name}#{i}", fn, log, level)
            for i, fn in enumerate(entry.members, start=1)
        ))
    return Single(_wrap(name, entry.fn, log, level))


def traced(obj: Object, log: logging.Logger | None = None, level: int = logging.DEBUG) -> Object:
    """Copy of obj with every implementation wrapped to log its calls.

    Args:
        obj: The object to watch.
        log: Logger to report to (defaults to this module's logger).
        level: Level of the call records.
    """
    log = log or logger
    return Object(
        {name: _wrap_entry(name, entry, log, level) for name, entry in obj.table.items()},
        delegates=obj.delegates,
    )

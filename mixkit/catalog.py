"""Named demo objects for the command line.

Each entry builds a fresh object, so two kits named on one command line
never share state unless the same factory call is reused.
"""

from typing import Callable

from mix.objects import Object
from mixkit.bank_account import make_bank_account
from mixkit.counter import make_counter
from mixkit.employer import make_employer
from mixkit.person import make_person

KITS: dict[str, Callable[[], Object]] = {
    "counter": lambda: make_counter(),
    "account": lambda: make_bank_account("alice", 100),
    "person": lambda: make_person("alice", 30),
    "employer": lambda: make_employer("Initech", 50000),
}


def build(name: str) -> Object:
    try:
        factory = KITS[name]
    except KeyError:
        raise ValueError(
            f"unknown kit {name!r} (choose from {', '.join(sorted(KITS))})"
        ) from None
    return factory()

"""bank_account: an object whose mutators can refuse.

deposit() and withdraw() raise ValueError for non-positive amounts, and
withdraw() also refuses to overdraw. The balance is left untouched when
they do.
"""

from dataclasses import dataclass, asdict

from mix.objects import Object, create


@dataclass
class AccountState:
    owner: str
    balance: float = 0


def make_bank_account(owner: str, balance: float = 0) -> Object:
    """Build an account for owner holding an opening balance."""
    state = AccountState(owner, balance)

    def deposit(amount):
        if amount <= 0:
            raise ValueError(f"deposit must be positive, got {amount}")
        state.balance += amount
        return state.balance

    def withdraw(amount):
        if amount <= 0:
            raise ValueError(f"withdrawal must be positive, got {amount}")
        if amount > state.balance:
            raise ValueError(
                f"insufficient funds: balance {state.balance}, requested {amount}"
            )
        state.balance -= amount
        return state.balance

    return create({
        "deposit": deposit,
        "withdraw": withdraw,
        "get_balance": lambda: state.balance,
        "get_owner": lambda: state.owner,
        "attributes": lambda: asdict(state),
    })

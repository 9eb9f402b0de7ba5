"""counter: the smallest stateful object.

    c = make_counter()
    dispatch(c, "increment")   # 1
    dispatch(c, "add", [10])   # 11
"""

from dataclasses import dataclass, asdict

from mix.objects import Object, create


@dataclass
class CounterState:
    count: int = 0


def make_counter(start: int = 0) -> Object:
    state = CounterState(start)

    def increment():
        state.count += 1
        return state.count

    def decrement():
        state.count -= 1
        return state.count

    def add(n):
        state.count += n
        return state.count

    def get_count():
        return state.count

    def reset():
        state.count = start
        return state.count

    return create({
        "increment": increment,
        "decrement": decrement,
        "add": add,
        "get_count": get_count,
        "reset": reset,
        "attributes": lambda: asdict(state),
    })

"""person: name and age, with a describe() that employer also defines.

Composing a person with an employer is the usual clash example: both
answer describe, and which one wins depends on the compositor.
"""

from dataclasses import dataclass, asdict

from mix.objects import Object, create


@dataclass
class PersonState:
    name: str
    age: int


def make_person(name: str, age: int) -> Object:
    state = PersonState(name, age)

    def set_name(new_name):
        state.name = new_name
        return state.name

    def birthday():
        state.age += 1
        return state.age

    def describe():
        return f"{state.name}, aged {state.age}"

    return create({
        "get_name": lambda: state.name,
        "get_age": lambda: state.age,
        "set_name": set_name,
        "birthday": birthday,
        "describe": describe,
        "attributes": lambda: asdict(state),
    })

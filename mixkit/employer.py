"""employer: a company and the salary it pays."""

from dataclasses import dataclass, asdict

from mix.objects import Object, create


@dataclass
class EmployerState:
    company: str
    salary: float


def make_employer(company: str, salary: float) -> Object:
    state = EmployerState(company, salary)

    def give_raise(percent):
        # Rounded to cents so repeated raises stay printable.
        state.salary = round(state.salary * (1 + percent / 100), 2)
        return state.salary

    def describe():
        return f"works at {state.company} for {state.salary}"

    return create({
        "get_company": lambda: state.company,
        "get_salary": lambda: state.salary,
        "give_raise": give_raise,
        "describe": describe,
        "attributes": lambda: asdict(state),
    })

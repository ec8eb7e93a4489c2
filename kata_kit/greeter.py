"""A self-introduction assembled from facts in the order they were first given."""

from __future__ import annotations


class Dinglemouse:
    """Collects an age, a sex and a name, and introduces itself with them."""

    def __init__(self) -> None:
        self._facts: dict[str, object] = {}

    def set_age(self, age: int) -> Dinglemouse:
        """Record the age; returns self for chaining."""
        self._facts["age"] = age
        return self

    def set_sex(self, sex: str) -> Dinglemouse:
        """Record the sex, ``"M"`` for male and anything else for female."""
        self._facts["sex"] = sex
        return self

    def set_name(self, name: str) -> Dinglemouse:
        """Record the name; returns self for chaining."""
        self._facts["name"] = name
        return self

    def hello(self) -> str:
        """Introduce, mentioning facts in the order each was first set."""
        parts = ["Hello."]
        for key, value in self._facts.items():
            if key == "age":
                parts.append(f"I am {value}.")
            elif key == "sex":
                parts.append("I am male." if value == "M" else "I am female.")
            else:
                parts.append(f"My name is {value}.")
        return " ".join(parts)
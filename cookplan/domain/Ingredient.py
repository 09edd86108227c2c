"""Ingredient domain entity: name, amount, opaque unit string."""
from typing import Tuple, Union

Number = Union[int, float]


def _format_amount(amount: Number) -> str:
    if isinstance(amount, float) and amount.is_integer():
        return str(int(amount))
    return str(amount)


class Ingredient:
    def __init__(self, name: str = "", amount: Number = 0, unit: str = ""):
        if amount < 0:
            raise ValueError(f"Amount cannot be negative: {amount}")
        self.name = name
        self.amount = amount
        self.unit = unit or ""

    @property
    def merge_key(self) -> Tuple[str, str]:
        return self.name, self.unit

    def add_amount(self, amount: Number):
        '''Accumulates another occurrence of the same ingredient into this one.'''
        if amount < 0:
            raise ValueError(f"Cannot merge a negative amount: {amount}")
        self.amount += amount

    def copy(self) -> "Ingredient":
        return Ingredient(self.name, self.amount, self.unit)

    def __str__(self) -> str:
        return " ".join(f"{_format_amount(self.amount)} {self.unit} {self.name}".split())

    def __repr__(self) -> str:
        return f"Ingredient({self.name!r}, {self.amount!r}, {self.unit!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Ingredient):
            return NotImplemented
        return (self.name, self.amount, self.unit) == (other.name, other.amount, other.unit)

    __hash__ = None

    @staticmethod
    def from_dict(data):
        '''Creates an Ingredient object from a dictionary. Ignores unknown keys.'''
        d = dict(data) if isinstance(data, dict) else {}
        return Ingredient(
            name=d.get("name", "") or "",
            amount=d.get("amount", 0) or 0,
            unit=d.get("unit", "") or "",
        )

    def to_dict(self):
        return {
            "name": self.name,
            "amount": self.amount,
            "unit": self.unit,
        }

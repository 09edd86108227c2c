"""User domain entity."""
from typing import Optional


class User:
    def __init__(self, id: Optional[str], name: str, email: str):
        self.id = id
        self.name = name
        self.email = email

    def __repr__(self) -> str:
        return f"User({self.id!r}, {self.name!r}, {self.email!r})"

    def to_dict(self):
        return {"id": self.id, "name": self.name, "email": self.email}

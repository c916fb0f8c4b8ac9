import logging
from dataclasses import dataclass, field
from typing import Any

from bae_tools.addressbook.tag import Tag

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Person:
    name: str
    phone: str = ""
    email: str = ""
    address: str = ""
    tags: frozenset[Tag] = field(default_factory=frozenset)

    def __str__(self) -> str:
        tags = ", ".join(sorted(str(t) for t in self.tags))
        return (
            f"{self.name}; Phone: {self.phone}; Email: {self.email}; "
            f"Address: {self.address}; Tags: [{tags}]"
        )

    def tags_named(self, name: str) -> list[Tag]:
        return [t for t in self.tags if t.name == name]

    @classmethod
    def from_json(cls, obj: dict[str, Any]) -> "Person":
        if "name" not in obj:
            raise ValueError(f"Person is missing a name: {obj!r}")

        return cls(
            name=obj["name"],
            phone=obj.get("phone", ""),
            email=obj.get("email", ""),
            address=obj.get("address", ""),
            tags=frozenset(Tag.from_json(t) for t in obj.get("tags", [])),
        )

    def to_json(self) -> dict[str, Any]:
        # Sort tags so that snapshots are stable between saves
        tags = sorted(self.tags, key=lambda t: (t.name, t.value or ""))
        return {
            "name": self.name,
            "phone": self.phone,
            "email": self.email,
            "address": self.address,
            "tags": [t.to_json() for t in tags],
        }

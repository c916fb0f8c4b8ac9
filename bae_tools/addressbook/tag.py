import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tag:
    """
    A label attached to a person, like "friends" or "priority : high"

    The value is optional. A tag without one only marks presence.
    """

    name: str
    value: Optional[str] = None

    def __str__(self) -> str:
        if self.value is None:
            return self.name
        return f"{self.name} : {self.value}"

    @staticmethod
    def is_valid_name(name: str) -> bool:
        return name.isalnum()

    @classmethod
    def parse(cls, text: str) -> "Tag":
        """
        Parse a tag typed by a user, either "key" or "key:value"
        """
        name, sep, value = text.partition(":")
        name = name.strip()
        if not cls.is_valid_name(name):
            raise ValueError(f"Tag names should be alphanumeric: '{name}'")

        if not sep:
            return cls(name)

        value = value.strip()
        if not value:
            raise ValueError(f"Tag '{name}' has an empty value")
        return cls(name, value)

    @classmethod
    def from_json(cls, obj: Union[str, dict[str, Any]]) -> "Tag":
        """
        Build a tag from its snapshot form, {"key": "value"}, {"key": null} or a plain
        "key" string
        """
        if isinstance(obj, str):
            return cls.parse(obj)
        if isinstance(obj, dict) and len(obj) == 1:
            name, value = next(iter(obj.items()))
            return cls(name, None if value is None else str(value))
        raise ValueError(f"Invalid tag: {obj!r}")

    def to_json(self) -> dict[str, Optional[str]]:
        return {self.name: self.value}

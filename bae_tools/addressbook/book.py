import json
import logging
from copy import copy
from dataclasses import dataclass, field
from io import StringIO
from pathlib import Path
from typing import Callable, Optional, TextIO

from bae_tools.addressbook.person import Person

logger = logging.getLogger(__name__)


@dataclass
class AddressBook:
    persons: list[Person] = field(default_factory=list)

    def __str__(self) -> str:
        s = StringIO()
        self._to_file_obj(s)
        return s.getvalue()

    @classmethod
    def from_string(cls, contents: str) -> "AddressBook":
        """
        Parse from a string
        """
        return cls._from_file_obj(StringIO(contents))

    @classmethod
    def from_file(cls, file_path: Path) -> "AddressBook":
        """
        Parse from a JSON snapshot on disk
        """
        with file_path.open(encoding="utf-8") as f:
            return cls._from_file_obj(f)

    @classmethod
    def _from_file_obj(cls, f: TextIO) -> "AddressBook":
        doc = json.load(f)
        persons = doc.get("persons") if isinstance(doc, dict) else None
        if not isinstance(persons, list):
            raise ValueError("Address book snapshot has no 'persons' list")

        book = cls(persons=[Person.from_json(p) for p in persons])
        logger.debug(f"Loaded {len(book.persons)} persons")
        return book

    def to_file(self, file_path: Path) -> None:
        with file_path.open("w", encoding="utf-8") as f:
            self._to_file_obj(f)

    def _to_file_obj(self, f: TextIO) -> None:
        """
        Write the address book as a JSON snapshot to the given file object
        """
        doc = {"persons": [p.to_json() for p in self.persons]}
        json.dump(doc, f, indent=2)
        f.write("\n")

    def copy(self) -> "AddressBook":
        new = copy(self)
        new.persons = list(self.persons)
        return new


class Model:
    """
    Holds the full collection of persons along with the filtered view of it that is
    shown to the user. Filtering only ever changes the view.
    """

    def __init__(self, address_book: Optional[AddressBook] = None) -> None:
        self.address_book = address_book.copy() if address_book else AddressBook()
        self._filtered = list(self.address_book.persons)

    @property
    def persons(self) -> tuple[Person, ...]:
        return tuple(self.address_book.persons)

    @property
    def filtered_persons(self) -> list[Person]:
        return list(self._filtered)

    def update_filtered_persons(
        self, predicate: Optional[Callable[[Person], bool]]
    ) -> None:
        """
        Replace the view with the persons matching the predicate, in their original
        order. A predicate of None shows everybody.
        """
        if predicate is None:
            self._filtered = list(self.address_book.persons)
        else:
            self._filtered = [p for p in self.address_book.persons if predicate(p)]
        logger.debug(f"Filtered view has {len(self._filtered)} persons")

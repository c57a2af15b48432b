"""Data classes for family tree entities and GEDCOM names."""

from dataclasses import dataclass, field
from enum import Enum
import re


class Sex(str, Enum):
    MALE = "M"
    FEMALE = "F"
    UNKNOWN = "U"

    @classmethod
    def coerce(cls, value) -> "Sex":
        """Map 'M'/'F'/anything else (including None) onto a Sex."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            value = value.strip().upper()
            if value in ("M", "F"):
                return cls(value)
        return cls.UNKNOWN


@dataclass(frozen=True)
class GedcomName:
    """
    A GEDCOM NAME value such as "Gabriel /Garcia/ /Iglesias/".

    Surnames are the text between each pair of slashes, in order. Anything
    before the first slash is the given name, anything after the last one the
    suffix. A name without slashes is all given name.
    """

    given: str = ""
    surnames: tuple[str, ...] = field(default_factory=tuple)
    suffix: str = ""

    @classmethod
    def parse(cls, raw: "str | GedcomName | None") -> "GedcomName":
        if isinstance(raw, GedcomName):
            return raw
        if not raw:
            return cls()

        s = str(raw).strip()
        first = s.find("/")
        if first < 0:
            return cls(given=" ".join(s.split()))

        last = s.rfind("/")
        surnames = tuple(" ".join(m.split()) for m in re.findall(r"/([^/]*)/", s[first : last + 1]))
        return cls(
            given=" ".join(s[:first].split()),
            surnames=surnames,
            suffix=" ".join(s[last + 1 :].split()),
        )

    @property
    def first_surname(self) -> str:
        return self.surnames[0] if self.surnames else ""

    @property
    def given_words(self) -> list[str]:
        return self.given.split()

    def is_empty(self) -> bool:
        return not (self.given or any(self.surnames) or self.suffix)

    def __str__(self) -> str:
        parts = [self.given] if self.given else []
        parts.extend(f"/{s}/" for s in self.surnames)
        if self.suffix:
            parts.append(self.suffix)
        return " ".join(parts)


@dataclass
class Person:
    id: int
    name: str
    given_name: str | None
    surname: str | None
    sex: str | None
    birth_date_string: str | None
    birth_date: str | None  # ISO format YYYY-MM-DD or None
    death_date_string: str | None
    death_date: str | None  # ISO format YYYY-MM-DD or None
    gedcom_name: str = ""  # NAME value as written in the file, slashes included


@dataclass
class Relationship:
    person1_id: int
    person2_id: int
    relationship_type: str  # PARENT_OF, SPOUSE_OF

"""
Surname traditions: how a new relative's name is derived from an existing one.

Each tradition answers three questions for the "add a relative" forms:
what a new child is called given both parents, what a new father or mother
is called given a child, and what a new spouse is called given the other
spouse. Results are dicts of GEDCOM name fields ("NAME", "SURN", "SPFX",
"GIVN", "_MARNM"). Optional fields that would be empty are left out.

Name content never raises: a missing or malformed name just contributes
nothing to the result.
"""

from abc import ABC, abstractmethod
import logging
import re

from models import GedcomName, Sex

logger = logging.getLogger(__name__)

# Words that join the two halves of a double surname ("Garcia y Iglesias")
CONJUNCTIONS = frozenset({"y", "e", "i"})

# Lower-case words that prefix a surname and are stored apart from it (SPFX)
SURNAME_PREFIXES = frozenset(
    {
        "a", "aan", "ab", "af", "al", "ap", "as", "auf", "av", "bat", "bath", "ben", "bet",
        "bin", "bint", "da", "de", "del", "den", "dei", "der", "di", "du", "el", "fitz",
        "ibn", "la", "las", "le", "les", "los", "mac", "mc", "op", "ter", "ten", "van",
        "ver", "von", "y", "zu", "zur",
    }
)  # fmt: skip

NameLike = str | GedcomName | None


class UnknownSurnameTradition(KeyError):
    """Raised when a tradition tag has no implementation."""


def _surname_words(surname: str) -> list[str]:
    """Words of a surname, without joining conjunctions."""
    return [w for w in surname.split() if w.lower() not in CONJUNCTIONS]


def _double_surname(name: GedcomName) -> tuple[str, str]:
    """
    First word of each of the two surnames in a Spanish-style name.

    Accepts both "/Garcia/ /Iglesias/" and the compound "/Garcia Iglesias/" or
    "/Garcia y Iglesias/" spellings.
    """
    surnames = list(name.surnames)
    first_words = _surname_words(surnames[0]) if surnames else []
    surn1 = first_words[0] if first_words else ""

    if len(surnames) > 1:
        second_words = _surname_words(surnames[1])
        surn2 = second_words[0] if second_words else ""
    else:
        surn2 = first_words[1] if len(first_words) > 1 else ""

    return surn1, surn2


def _last_surname(name: GedcomName) -> str:
    """Last word of the last non-empty surname."""
    for surname in reversed(name.surnames):
        words = _surname_words(surname)
        if words:
            return words[-1]
    return ""


def _split_prefix(surname: str) -> tuple[str, str]:
    """Split "van der Berg" into ("van der", "Berg"). The last word is never a prefix."""
    words = surname.split()
    i = 0
    while i < len(words) - 1 and words[i].lower() in SURNAME_PREFIXES:
        i += 1
    return " ".join(words[:i]), " ".join(words[i:])


def _inflect(text: str, rules: list[tuple[str, str]]) -> str:
    """Apply the first matching ending rule to text."""
    for pattern, replacement in rules:
        inflected, count = re.subn(pattern, replacement, text)
        if count:
            return inflected
    return text


def _drop_empty(fields: dict[str, str]) -> dict[str, str]:
    """Drop empty optional fields; NAME is always kept."""
    return {k: v for k, v in fields.items() if k == "NAME" or v}


class SurnameTradition(ABC):
    """Common interface for all surname traditions."""

    tag: str = ""
    label: str = ""

    def has_surnames(self) -> bool:
        """Whether individuals in this tradition carry surnames at all."""
        return True

    def has_married_names(self) -> bool:
        """Whether a spouse takes a new name on marriage."""
        return False

    @abstractmethod
    def new_child_names(self, father_name: NameLike, mother_name: NameLike, child_sex) -> dict[str, str]:
        """Name fields for a new child of the given parents."""

    @abstractmethod
    def new_parent_names(self, child_name: NameLike, parent_sex) -> dict[str, str]:
        """Name fields for a new father (M) or mother (F) of the given child."""

    @abstractmethod
    def new_spouse_names(self, spouse_name: NameLike, spouse_sex) -> dict[str, str]:
        """Name fields for a new spouse of the given individual."""


class DefaultSurnameTradition(SurnameTradition):
    """No tradition: nothing is inherited."""

    tag = "none"
    label = "None"

    def new_child_names(self, father_name, mother_name, child_sex):
        return {"NAME": "//"}

    def new_parent_names(self, child_name, parent_sex):
        return {"NAME": "//"}

    def new_spouse_names(self, spouse_name, spouse_sex):
        return {"NAME": "//"}


class PatrilinealSurnameTradition(SurnameTradition):
    """Children take their father's surname."""

    tag = "patrilineal"
    label = "Patrilineal"

    def _inherited(self, name: NameLike) -> dict[str, str]:
        surname = GedcomName.parse(name).first_surname
        if not surname:
            return {"NAME": "//"}
        spfx, surn = _split_prefix(surname)
        return _drop_empty({"NAME": f"/{surname}/", "SPFX": spfx, "SURN": surn})

    def new_child_names(self, father_name, mother_name, child_sex):
        return self._inherited(father_name)

    def new_parent_names(self, child_name, parent_sex):
        if Sex.coerce(parent_sex) is Sex.MALE:
            return self._inherited(child_name)
        return {"NAME": "//"}

    def new_spouse_names(self, spouse_name, spouse_sex):
        return {"NAME": "//"}


class MatrilinealSurnameTradition(PatrilinealSurnameTradition):
    """Children take their mother's surname."""

    tag = "matrilineal"
    label = "Matrilineal"

    def new_child_names(self, father_name, mother_name, child_sex):
        return self._inherited(mother_name)

    def new_parent_names(self, child_name, parent_sex):
        if Sex.coerce(parent_sex) is Sex.FEMALE:
            return self._inherited(child_name)
        return {"NAME": "//"}


class PaternalSurnameTradition(PatrilinealSurnameTradition):
    """Children take their father's surname; wives take their husband's."""

    tag = "paternal"
    label = "Paternal"

    def has_married_names(self) -> bool:
        return True

    def new_spouse_names(self, spouse_name, spouse_sex):
        if Sex.coerce(spouse_sex) is Sex.FEMALE:
            surname = GedcomName.parse(spouse_name).first_surname
            if surname:
                return {"NAME": "//", "_MARNM": f"/{surname}/"}
        return {"NAME": "//"}


class PolishSurnameTradition(PaternalSurnameTradition):
    """Paternal, with gendered -ski/-ska style surname endings."""

    tag = "polish"
    label = "Polish"

    MALE_TO_FEMALE = [(r"cki\b", "cka"), (r"dzki\b", "dzka"), (r"ski\b", "ska"), (r"żki\b", "żka")]
    FEMALE_TO_MALE = [(r"cka\b", "cki"), (r"dzka\b", "dzki"), (r"ska\b", "ski"), (r"żka\b", "żki")]

    def _inflected(self, name: NameLike, rules) -> dict[str, str]:
        fields = self._inherited(name)
        return {k: (_inflect(v, rules) if k in ("NAME", "SURN") else v) for k, v in fields.items()}

    def new_child_names(self, father_name, mother_name, child_sex):
        if Sex.coerce(child_sex) is Sex.FEMALE:
            return self._inflected(father_name, self.MALE_TO_FEMALE)
        return self._inherited(father_name)

    def new_parent_names(self, child_name, parent_sex):
        if Sex.coerce(parent_sex) is Sex.MALE:
            return self._inflected(child_name, self.FEMALE_TO_MALE)
        return {"NAME": "//"}

    def new_spouse_names(self, spouse_name, spouse_sex):
        names = super().new_spouse_names(spouse_name, spouse_sex)
        if "_MARNM" in names:
            names["_MARNM"] = _inflect(names["_MARNM"], self.MALE_TO_FEMALE)
        return names


class LithuanianSurnameTradition(PolishSurnameTradition):
    """Paternal, with Lithuanian daughter and wife surname endings."""

    tag = "lithuanian"
    label = "Lithuanian"

    MALE_TO_FEMALE = [
        (r"as\b", "aitė"),
        (r"ius\b", "iūtė"),
        (r"us\b", "utė"),
        (r"ys\b", "ytė"),
        (r"is\b", "ytė"),
    ]
    FEMALE_TO_MALE = [(r"aitė\b", "as"), (r"iūtė\b", "ius"), (r"utė\b", "us"), (r"ytė\b", "is")]
    MALE_TO_WIFE = [
        (r"as\b", "ienė"),
        (r"ius\b", "ienė"),
        (r"us\b", "uvienė"),
        (r"ys\b", "ienė"),
        (r"is\b", "ienė"),
    ]

    def new_spouse_names(self, spouse_name, spouse_sex):
        names = PaternalSurnameTradition.new_spouse_names(self, spouse_name, spouse_sex)
        if "_MARNM" in names:
            names["_MARNM"] = _inflect(names["_MARNM"], self.MALE_TO_WIFE)
        return names


class SpanishSurnameTradition(SurnameTradition):
    """
    Children take one surname from each parent: the father's first surname
    followed by the mother's first surname. Nothing changes on marriage.
    """

    tag = "spanish"
    label = "Spanish"

    def new_child_names(self, father_name, mother_name, child_sex):
        father_surname, _ = _double_surname(GedcomName.parse(father_name))
        mother_surname, _ = _double_surname(GedcomName.parse(mother_name))
        return {
            "NAME": f"/{father_surname}/ /{mother_surname}/",
            "SURN": ",".join(s for s in (father_surname, mother_surname) if s),
        }

    def new_parent_names(self, child_name, parent_sex):
        surn1, surn2 = _double_surname(GedcomName.parse(child_name))
        sex = Sex.coerce(parent_sex)
        if sex is Sex.MALE and surn1:
            return {"NAME": f"/{surn1}/ //", "SURN": surn1}
        if sex is Sex.FEMALE and surn2:
            return {"NAME": f"/{surn2}/ //", "SURN": surn2}
        return {"NAME": "// //"}

    def new_spouse_names(self, spouse_name, spouse_sex):
        return {"NAME": "// //"}


class PortugueseSurnameTradition(SurnameTradition):
    """
    Children take the mother's last surname followed by the father's last
    surname. Nothing changes on marriage.
    """

    tag = "portuguese"
    label = "Portuguese"

    def new_child_names(self, father_name, mother_name, child_sex):
        father_surname = _last_surname(GedcomName.parse(father_name))
        mother_surname = _last_surname(GedcomName.parse(mother_name))
        return {
            "NAME": f"/{mother_surname}/ /{father_surname}/",
            "SURN": ",".join(s for s in (mother_surname, father_surname) if s),
        }

    def new_parent_names(self, child_name, parent_sex):
        surn1, surn2 = _double_surname(GedcomName.parse(child_name))
        sex = Sex.coerce(parent_sex)
        if sex is Sex.MALE and surn2:
            return {"NAME": f"// /{surn2}/", "SURN": surn2}
        if sex is Sex.FEMALE and surn1:
            return {"NAME": f"// /{surn1}/", "SURN": surn1}
        return {"NAME": "// //"}

    def new_spouse_names(self, spouse_name, spouse_sex):
        return {"NAME": "// //"}


class IcelandicSurnameTradition(SurnameTradition):
    """Patronymics instead of surnames: Jon Einarsson is Einar's son."""

    tag = "icelandic"
    label = "Icelandic"

    PATRONYMIC = re.compile(r"^(?P<GIVN>\w+?)s(?:son|dottir|dóttir)$")

    def has_surnames(self) -> bool:
        return False

    def new_child_names(self, father_name, mother_name, child_sex):
        words = GedcomName.parse(father_name).given_words
        if not words:
            return {}
        sex = Sex.coerce(child_sex)
        if sex is Sex.MALE:
            return {"NAME": f"{words[0]}sson"}
        if sex is Sex.FEMALE:
            return {"NAME": f"{words[0]}sdottir"}
        return {}

    def new_parent_names(self, child_name, parent_sex):
        words = GedcomName.parse(child_name).given_words
        if Sex.coerce(parent_sex) is Sex.MALE and len(words) > 1:
            match = self.PATRONYMIC.match(words[-1])
            if match:
                return {"NAME": match["GIVN"], "GIVN": match["GIVN"]}
        return {}

    def new_spouse_names(self, spouse_name, spouse_sex):
        return {}


_TRADITIONS: dict[str, type[SurnameTradition]] = {
    cls.tag: cls
    for cls in (
        DefaultSurnameTradition,
        PaternalSurnameTradition,
        PatrilinealSurnameTradition,
        MatrilinealSurnameTradition,
        SpanishSurnameTradition,
        PortugueseSurnameTradition,
        IcelandicSurnameTradition,
        PolishSurnameTradition,
        LithuanianSurnameTradition,
    )
}


def surname_traditions() -> dict[str, str]:
    """Available tradition tags and their display labels."""
    return {tag: cls.label for tag, cls in _TRADITIONS.items()}


def create_surname_tradition(tag: str) -> SurnameTradition:
    """Instantiate the tradition registered under tag (case-insensitive)."""
    try:
        cls = _TRADITIONS[tag.strip().lower()]
    except (KeyError, AttributeError):
        raise UnknownSurnameTradition(f"Unknown surname tradition: {tag!r}") from None
    logger.debug("Using %s surname tradition", cls.label)
    return cls()

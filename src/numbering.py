"""
Sosa-Stradonitz and d'Aboville numbering.

Sosa numbers index ancestors: the root is 1, the father of n is 2n and the
mother of n is 2n + 1. d'Aboville numbers index descendants as a dotted path
of birth orders, one segment per generation, always ending in ".", e.g.
"1.2.1." is the first child of the second child of the root.
"""

from dataclasses import dataclass
from enum import Enum
import re


class InvalidArgument(ValueError):
    """Raised for Sosa numbers below 1 and malformed d'Aboville paths."""


class Step(str, Enum):
    FATHER = "father"
    MOTHER = "mother"


DABOVILLE_RE = re.compile(r"^(?:[1-9][0-9]*\.)+$")


def _check_sosa(n) -> int:
    # bool is an int subclass but never a pedigree position
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgument(f"Sosa number must be an integer, got {n!r}")
    if n < 1:
        raise InvalidArgument(f"Sosa number must be at least 1, got {n}")
    return n


def sosa_of_father(n: int) -> int:
    return 2 * _check_sosa(n)


def sosa_of_mother(n: int) -> int:
    return 2 * _check_sosa(n) + 1


def sosa_of_child(n: int) -> int:
    """Sosa number of the descendant through whom n is an ancestor."""
    if _check_sosa(n) == 1:
        raise InvalidArgument("The root individual has no child in the pedigree")
    return n // 2


def sosa_generation(n: int) -> int:
    """Generation of n, counting the root as generation 1."""
    return _check_sosa(n).bit_length()


def sosa_generation_range(generation: int) -> range:
    """All Sosa numbers in a generation; generation 3 is 4..7."""
    if isinstance(generation, bool) or not isinstance(generation, int) or generation < 1:
        raise InvalidArgument(f"Generation must be a positive integer, got {generation!r}")
    return range(2 ** (generation - 1), 2**generation)


def is_paternal_line(n: int) -> bool:
    """True when n is reached through the root's father."""
    path = relationship_path(n)
    return len(path) > 0 and path[0] is Step.FATHER


@dataclass(frozen=True)
class RelationshipPath:
    """
    The father/mother steps from the root to a Sosa position, nearest the
    root first. Steps are computed on iteration, so the same path can be
    walked any number of times.
    """

    sosa: int

    def __post_init__(self):
        _check_sosa(self.sosa)

    def __iter__(self):
        # The bits after the leading 1 spell the path, most significant first
        for shift in range(self.sosa.bit_length() - 2, -1, -1):
            yield Step.MOTHER if (self.sosa >> shift) & 1 else Step.FATHER

    def __len__(self) -> int:
        return self.sosa.bit_length() - 1

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [self[i] for i in range(*index.indices(len(self)))]
        if index < 0:
            index += len(self)
        if not 0 <= index < len(self):
            raise IndexError("relationship path index out of range")
        shift = len(self) - 1 - index
        return Step.MOTHER if (self.sosa >> shift) & 1 else Step.FATHER

    def __repr__(self) -> str:
        return f"RelationshipPath({self.sosa}: {[s.value for s in self]})"


def relationship_path(n: int) -> RelationshipPath:
    return RelationshipPath(n)


def sosa_from_path(steps) -> int:
    """Inverse of relationship_path: the Sosa number reached by following steps."""
    n = 1
    for step in steps:
        n = sosa_of_mother(n) if Step(step) is Step.MOTHER else sosa_of_father(n)
    return n


def relationship_name(n: int, namer, locale: str, root_label: str = "") -> str:
    """
    Kinship label for Sosa number n, e.g. 5 -> "paternal grandmother".

    namer is any object with name_for_path(steps, locale); see kinship.py.
    The root individual gets root_label without consulting the namer.
    """
    path = relationship_path(n)
    if not len(path):
        return root_label
    return namer.name_for_path(list(path), locale)


def daboville_segments(path: str) -> list[int]:
    """Birth orders in a d'Aboville path: "1.2.1." -> [1, 2, 1]."""
    if not isinstance(path, str) or not DABOVILLE_RE.match(path):
        raise InvalidArgument(f"Malformed d'Aboville number: {path!r}")
    return [int(segment) for segment in path[:-1].split(".")]


def daboville_depth(path: str) -> int:
    return len(daboville_segments(path))


def daboville_child(path: str, birth_order: int) -> str:
    """Path of the birth_order-th child (1-based) of the individual at path."""
    daboville_segments(path)
    if isinstance(birth_order, bool) or not isinstance(birth_order, int) or birth_order < 1:
        raise InvalidArgument(f"Birth order must be a positive integer, got {birth_order!r}")
    return f"{path}{birth_order}."


def daboville_complement(path: str) -> str:
    """
    Path of the parent through whom path descends: "1.2.1." -> "1.2.".
    The root "1." has no parent in the booklet and gives "".
    """
    segments = daboville_segments(path)
    return "".join(f"{s}." for s in segments[:-1])


def daboville_label(path: str) -> str:
    """Display form without the trailing dot: "1.2.1." -> "1.2.1"."""
    daboville_segments(path)
    return path[:-1]

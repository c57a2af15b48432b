"""Kinship labels for direct-ancestor relationship paths."""

from collections.abc import Sequence
import logging
from typing import Protocol

from numbering import Step

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "en"


class KinshipNamer(Protocol):
    def name_for_path(self, steps: Sequence[Step], locale: str) -> str: ...


def path_code(steps: Sequence[Step]) -> str:
    """Compact form of a path, three letters per step: [father, mother] -> "fatmot"."""
    return "".join("mot" if Step(s) is Step.MOTHER else "fat" for s in steps)


def _english(steps: Sequence[Step]) -> str:
    parent = "mother" if steps[-1] is Step.MOTHER else "father"
    if len(steps) == 1:
        return parent
    if len(steps) == 2:
        side = "maternal" if steps[0] is Step.MOTHER else "paternal"
        return f"{side} grand{parent}"

    greats = len(steps) - 2
    if greats <= 2:
        return "great-" * greats + f"grand{parent}"
    return f"{greats}× great-grand{parent}"


def _spanish(steps: Sequence[Step]) -> str:
    female = steps[-1] is Step.MOTHER
    if len(steps) == 1:
        return "madre" if female else "padre"
    if len(steps) == 2:
        side = "materna" if steps[0] is Step.MOTHER else "paterna"
        if female:
            return f"abuela {side}"
        return f"abuelo {side[:-1]}o"

    prefixes = {3: "bis", 4: "tatar", 5: "trastatar"}
    ending = "abuela" if female else "abuelo"
    if len(steps) in prefixes:
        return prefixes[len(steps)] + ending
    ordinal = "ª" if female else "º"
    return f"{len(steps) - 1}.{ordinal} {ending}"


class DirectLineKinshipNamer:
    """
    Names ancestors in the direct line (parents, grandparents, ...) from a
    list of father/mother steps. Regional locales use their language's terms;
    unsupported languages fall back to English.
    """

    LANGUAGES = {"en": _english, "es": _spanish}

    def name_for_path(self, steps: Sequence[Step], locale: str = DEFAULT_LOCALE) -> str:
        steps = [Step(s) for s in steps]
        if not steps:
            return ""
        return self._formatter(locale)(steps)

    def _formatter(self, locale: str):
        language = (locale or DEFAULT_LOCALE).replace("_", "-").split("-")[0].lower()
        if language not in self.LANGUAGES:
            logger.debug("No kinship terms for locale %r, using %r", locale, DEFAULT_LOCALE)
            language = DEFAULT_LOCALE
        return self.LANGUAGES[language]

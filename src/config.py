"""
Settings shared by the chart and naming commands.

Values come from GEDCHARTS_* environment variables (TRADITION, LOCALE,
GENERATIONS, ROOT_LABEL), then command-line flags override them. The
dataclass is immutable and validated on construction.
"""

from dataclasses import dataclass, replace
import os

from surname_tradition import surname_traditions


class ConfigError(ValueError):
    """Raised for settings that cannot be used."""


@dataclass(frozen=True)
class ChartConfig:
    """
    Attributes:
        surname_tradition: Tag of the surname tradition used for name suggestions
        locale: Locale of kinship labels, e.g. "en" or "es-MX"
        generations: How many generations ancestor and descendant listings cover
        root_label: Label shown for the root individual in kinship columns
    """

    surname_tradition: str = "paternal"
    locale: str = "en"
    generations: int = 5
    root_label: str = ""

    def __post_init__(self):
        tag = self.surname_tradition.strip().lower()
        if tag not in surname_traditions():
            raise ConfigError(
                f"Unknown surname tradition {self.surname_tradition!r}; "
                f"choose from {', '.join(surname_traditions())}"
            )
        object.__setattr__(self, "surname_tradition", tag)

        if not self.locale.strip():
            raise ConfigError("Locale must not be empty")
        if self.generations < 1:
            raise ConfigError(f"Generations must be at least 1, got {self.generations}")

    @classmethod
    def from_env(cls, environ=None) -> "ChartConfig":
        env = os.environ if environ is None else environ
        values = {}
        if env.get("GEDCHARTS_TRADITION"):
            values["surname_tradition"] = env["GEDCHARTS_TRADITION"]
        if env.get("GEDCHARTS_LOCALE"):
            values["locale"] = env["GEDCHARTS_LOCALE"]
        if env.get("GEDCHARTS_ROOT_LABEL"):
            values["root_label"] = env["GEDCHARTS_ROOT_LABEL"]
        if env.get("GEDCHARTS_GENERATIONS"):
            try:
                values["generations"] = int(env["GEDCHARTS_GENERATIONS"])
            except ValueError:
                raise ConfigError(
                    f"GEDCHARTS_GENERATIONS must be an integer, got {env['GEDCHARTS_GENERATIONS']!r}"
                ) from None
        return cls(**values)

    def with_overrides(self, **overrides) -> "ChartConfig":
        """Copy with the given fields replaced; None values are ignored."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

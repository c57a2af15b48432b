"""Tests for ChartConfig."""

import dataclasses

import pytest

from config import ChartConfig, ConfigError


def test_defaults():
    config = ChartConfig()
    assert config.surname_tradition == "paternal"
    assert config.locale == "en"
    assert config.generations == 5


def test_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        ChartConfig().locale = "es"


def test_tradition_is_normalized():
    assert ChartConfig(surname_tradition=" Spanish").surname_tradition == "spanish"


@pytest.mark.parametrize(
    "kwargs",
    [{"surname_tradition": "klingon"}, {"locale": " "}, {"generations": 0}],
)
def test_invalid_settings(kwargs):
    with pytest.raises(ConfigError):
        ChartConfig(**kwargs)


def test_from_env():
    config = ChartConfig.from_env(
        {"GEDCHARTS_TRADITION": "spanish", "GEDCHARTS_LOCALE": "es", "GEDCHARTS_GENERATIONS": "7"}
    )
    assert config == ChartConfig(surname_tradition="spanish", locale="es", generations=7)


def test_from_env_uses_os_environ(monkeypatch):
    monkeypatch.setenv("GEDCHARTS_LOCALE", "es-MX")
    monkeypatch.delenv("GEDCHARTS_TRADITION", raising=False)
    monkeypatch.delenv("GEDCHARTS_GENERATIONS", raising=False)
    assert ChartConfig.from_env().locale == "es-MX"


def test_from_env_bad_generations():
    with pytest.raises(ConfigError):
        ChartConfig.from_env({"GEDCHARTS_GENERATIONS": "many"})


def test_with_overrides_ignores_none():
    config = ChartConfig().with_overrides(locale="es", generations=None)
    assert config.locale == "es"
    assert config.generations == 5


def test_from_env_root_label():
    assert ChartConfig.from_env({"GEDCHARTS_ROOT_LABEL": "self"}).root_label == "self"
    assert ChartConfig.from_env({}).root_label == ""
    assert ChartConfig().with_overrides(root_label="yo").root_label == "yo"

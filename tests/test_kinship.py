"""Tests for the direct-line kinship namer."""

import logging

import pytest

from kinship import DirectLineKinshipNamer, path_code
from numbering import relationship_path

F, M = "father", "mother"


@pytest.fixture
def namer():
    return DirectLineKinshipNamer()


@pytest.mark.parametrize(
    "steps, expected",
    [
        ([F], "father"),
        ([M], "mother"),
        ([F, F], "paternal grandfather"),
        ([F, M], "paternal grandmother"),
        ([M, F], "maternal grandfather"),
        ([M, M], "maternal grandmother"),
        ([M, F, M], "great-grandmother"),
        ([F, F, F, F], "great-great-grandfather"),
        ([F, M, F, M, F], "3× great-grandfather"),
        ([], ""),
    ],
)
def test_english(namer, steps, expected):
    assert namer.name_for_path(steps, "en") == expected


@pytest.mark.parametrize(
    "steps, expected",
    [
        ([F], "padre"),
        ([M], "madre"),
        ([F, F], "abuelo paterno"),
        ([M, M], "abuela materna"),
        ([F, M], "abuela paterna"),
        ([F, F, M], "bisabuela"),
        ([F, F, F, F], "tatarabuelo"),
        ([F, F, F, F, M], "trastatarabuela"),
        ([F, F, F, F, F, F], "5.º abuelo"),
    ],
)
def test_spanish(namer, steps, expected):
    assert namer.name_for_path(steps, "es") == expected


def test_regional_locale_uses_language(namer):
    assert namer.name_for_path([F, M], "es-MX") == "abuela paterna"
    assert namer.name_for_path([F, M], "en_GB") == "paternal grandmother"


def test_unknown_locale_falls_back_to_english(namer, caplog):
    with caplog.at_level(logging.DEBUG, logger="kinship"):
        assert namer.name_for_path([M], "tlh") == "mother"
    assert "No kinship terms" in caplog.text


def test_path_code():
    assert path_code(relationship_path(5)) == "fatmot"
    assert path_code([]) == ""

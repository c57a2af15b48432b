"""Shared fixtures: a small three-generation Spanish family."""

import pytest

from graph import build_graph
from models import Person, Relationship

SAMPLE_GEDCOM = """\
0 HEAD
1 SOUR TEST
1 GEDC
2 VERS 5.5.1
2 FORM LINEAGE-LINKED
1 CHAR UTF-8
0 @I10@ INDI
1 NAME Juan /Garcia/
1 SEX M
0 @I20@ INDI
1 NAME Gabriel /Garcia/
1 SEX M
0 @I30@ INDI
1 NAME Maria /Ruiz/
1 SEX F
0 @I40@ INDI
1 NAME Pedro /Garcia/
1 SEX M
0 @I80@ INDI
1 NAME Rosa /Garcia/
1 SEX F
0 @F1@ FAM
1 HUSB @I20@
1 WIFE @I30@
1 CHIL @I80@
1 CHIL @I10@
0 @F2@ FAM
1 HUSB @I40@
1 CHIL @I20@
0 TRLR
"""


def person(pid, gedcom_name, sex, birth=None, death=None) -> Person:
    given, _, rest = gedcom_name.partition(" /")
    surname = rest.replace("/", "").strip() or None
    return Person(
        id=pid,
        name=gedcom_name.replace("/", "").replace("  ", " ").strip(),
        given_name=given or None,
        surname=surname,
        sex=sex,
        birth_date_string=birth,
        birth_date=birth,
        death_date_string=death,
        death_date=death,
        gedcom_name=gedcom_name,
    )


def family(husb, wife, *children) -> list[Relationship]:
    rels = []
    if husb and wife:
        rels.append(Relationship(husb, wife, "SPOUSE_OF"))
    for child in children:
        for parent in (husb, wife):
            if parent:
                rels.append(Relationship(parent, child, "PARENT_OF"))
    return rels


@pytest.fixture
def persons() -> list[Person]:
    return [
        person(10, "Juan /Garcia/ /Ruiz/", "M", "1950-03-02"),
        person(20, "Gabriel /Garcia/ /Iglesias/", "M", "1920-01-01", "1990-05-05"),
        person(30, "Maria /Ruiz/ /Lorca/", "F", "1925-06-01"),
        person(40, "Pedro /Garcia/ /Lopez/", "M", "1890-01-01"),
        person(50, "Ana /Iglesias/ /Diaz/", "F", "1895-01-01"),
        person(70, "Carmen /Lorca/ /Vega/", "F", "1900-01-01"),
        person(80, "Rosa /Garcia/ /Ruiz/", "F", "1948-07-07"),
        person(90, "Elena /Martin/ /Sanz/", "F", "1952-01-01"),
        person(11, "Luis /Garcia/ /Martin/", "M", "1980-01-01"),
        person(12, "Sofia /Garcia/ /Martin/", "F"),
    ]


@pytest.fixture
def relationships() -> list[Relationship]:
    # Sofia (12) is listed first but has no birth date
    return (
        family(40, 50, 20)
        + family(None, 70, 30)
        + family(20, 30, 10, 80)
        + family(10, 90, 12, 11)
    )


@pytest.fixture
def family_graph(persons, relationships):
    return build_graph(persons, relationships)


@pytest.fixture
def gedcom_file(tmp_path):
    path = tmp_path / "sample.ged"
    path.write_text(SAMPLE_GEDCOM, encoding="utf-8")
    return path

"""GEDCOM parsing and date handling utilities."""

import logging
from pathlib import Path
import re

from ged4py import GedcomReader

from models import GedcomName, Person, Relationship

logger = logging.getLogger(__name__)


# Month name mappings (handle abbreviations and full names)
MONTH_MAP = {
    "JAN": 1,
    "JANUARY": 1,
    "FEB": 2,
    "FEBRUARY": 2,
    "MAR": 3,
    "MARCH": 3,
    "APR": 4,
    "APRIL": 4,
    "MAY": 5,
    "JUN": 6,
    "JUNE": 6,
    "JUL": 7,
    "JULY": 7,
    "AUG": 8,
    "AUGUST": 8,
    "SEP": 9,
    "SEPT": 9,
    "SEPTEMBER": 9,
    "OCT": 10,
    "OCTOBER": 10,
    "NOV": 11,
    "NOVEMBER": 11,
    "DEC": 12,
    "DECEMBER": 12,
}

QUALIFIER_RE = re.compile(
    r"^(ABT\.?|ABOUT|BEF\.?|BEFORE|AFT\.?|AFTER|EST\.?|CAL\.?|FROM|TO|BET\.?|AND|CIRCA|CA\.?|AROUND):?\s*",
    flags=re.IGNORECASE,
)


def extract_numeric_id(xref_id: str) -> int:
    """Extract numeric part from GEDCOM xref_id like '@I_347421849@' or 'I674624289'."""
    digits = re.sub(r"[^0-9]", "", xref_id)
    if not digits:
        raise ValueError(f"No numeric ID found in: {xref_id}")
    return int(digits)


def _iso(year: int, month: int | None, day: int | None) -> str | None:
    if month is None or not 1 <= month <= 12:
        return None
    if day is None or not 1 <= day <= 31:
        return None
    return f"{year:04d}-{month:02d}-{day:02d}"


def parse_date_string(date_str: str | None) -> str | None:
    """
    Parse a GEDCOM date string into ISO format (YYYY-MM-DD), or None.

    Missing month or day default to 1, so "1698" sorts as 1698-01-01.
    Handles "25 NOV 1954", "ABT 1905", "JAN 1905", "(05/15/1923)",
    "(1839-08-29)", "(SEPT. 17,1910)", "(May, 1837)", "(1789?)" and similar
    free-form spellings.
    """
    if not date_str:
        return None

    s = date_str.strip().strip("()").rstrip("?")
    s = QUALIFIER_RE.sub("", s).strip()
    if not s:
        return None

    # "1839-08-29", "1746-00-00"
    match = re.match(r"^(\d{4})-(\d{2})-(\d{2})$", s)
    if match:
        year, month, day = (int(g) for g in match.groups())
        return _iso(year, month or 1, day or 1)

    # "25 NOV 1954", "02 May1838", "11 Aug. 1968"
    match = re.match(r"^(\d{1,2})\s+([A-Za-z]+)\.?\s*(\d{4})$", s)
    if match:
        month = MONTH_MAP.get(match.group(2).upper())
        return _iso(int(match.group(3)), month, int(match.group(1)))

    # "NOV 1954", "May, 1837"
    match = re.match(r"^([A-Za-z]+)\.?,?\s*(\d{4})$", s)
    if match:
        month = MONTH_MAP.get(match.group(1).upper())
        return _iso(int(match.group(2)), month, 1)

    # "1698"
    match = re.match(r"^(\d{4})$", s)
    if match:
        return f"{int(match.group(1)):04d}-01-01"

    # "01-27-1920", "1/15/1957", "04 05 1911" (month first)
    match = re.match(r"^(\d{1,2})[-/\s]+(\d{1,2})[-/\s]+(\d{4})$", s)
    if match:
        return _iso(int(match.group(3)), int(match.group(1)), int(match.group(2)))

    # "April 17, 1850", "SEPT. 17,1910", "Oct.12,1929"
    match = re.match(r"^([A-Za-z]+)\.?\s*(\d{1,2}),?\s*(\d{4})$", s)
    if match:
        month = MONTH_MAP.get(match.group(1).upper())
        return _iso(int(match.group(3)), month, int(match.group(2)))

    return None


def parse_gedcom(filepath: Path) -> GedcomReader:
    """Parse a GEDCOM file and return the reader object."""
    return GedcomReader(str(filepath))


def extract_gedcom_name(indi) -> GedcomName:
    """NAME of an individual record as a GedcomName, slashes and all."""
    name_rec = indi.sub_tag("NAME")
    if name_rec is None or name_rec.value is None:
        return GedcomName()

    name_value = name_rec.value

    # ged4py returns NAME as tuple: (given, surname, suffix). A second
    # "/surname/" pair is left in the suffix.
    if isinstance(name_value, tuple):
        given, surname, suffix = (part or "" for part in name_value[:3])
        if surname or "/" in suffix:
            return GedcomName.parse(f"{given} /{surname}/ {suffix}")
        return GedcomName.parse(f"{given} {suffix}")

    return GedcomName.parse(str(name_value))


def extract_event_date(indi, tag: str) -> str | None:
    """Date of an event tag (BIRT, DEAT, etc.) as written in the file."""
    event = indi.sub_tag(tag)
    if event is None:
        return None

    date_rec = event.sub_tag("DATE")
    # ged4py may return DateValue objects
    if date_rec and date_rec.value:
        return str(date_rec.value)
    return None


def extract_sex(indi) -> str | None:
    """Extract sex from an individual record."""
    sex_rec = indi.sub_tag("SEX")
    return sex_rec.value if sex_rec else None


def build_person(indi) -> Person:
    gedcom_name = extract_gedcom_name(indi)
    surname = " ".join(s for s in gedcom_name.surnames if s)
    full_name = " ".join(p for p in (gedcom_name.given, surname, gedcom_name.suffix) if p)
    birth_date_string = extract_event_date(indi, "BIRT")
    death_date_string = extract_event_date(indi, "DEAT")

    return Person(
        id=extract_numeric_id(indi.xref_id),
        name=full_name or "Unknown",
        given_name=gedcom_name.given or None,
        surname=surname or None,
        sex=extract_sex(indi),
        birth_date_string=birth_date_string,
        birth_date=parse_date_string(birth_date_string),
        death_date_string=death_date_string,
        death_date=parse_date_string(death_date_string),
        gedcom_name=str(gedcom_name),
    )


def normalize_data(reader: GedcomReader) -> tuple[list[Person], list[Relationship]]:
    """
    Extract persons and relationships from parsed GEDCOM data.

    Children keep the order of the CHIL lines of their family, which
    descendant numbering falls back on when birth dates are missing.
    Non-standard tags (starting with _) are ignored.
    """
    persons = [build_person(rec) for rec in reader.records0("INDI") if rec.xref_id is not None]
    relationships: list[Relationship] = []

    for rec in reader.records0("FAM"):
        if rec.xref_id is None:
            continue

        husb = rec.sub_tag("HUSB")
        wife = rec.sub_tag("WIFE")
        husb_id = extract_numeric_id(husb.xref_id) if husb and husb.xref_id else None
        wife_id = extract_numeric_id(wife.xref_id) if wife and wife.xref_id else None

        if husb_id and wife_id:
            relationships.append(Relationship(husb_id, wife_id, "SPOUSE_OF"))

        for child in rec.sub_tags("CHIL"):
            if not child.xref_id:
                continue
            child_id = extract_numeric_id(child.xref_id)
            for parent_id in (husb_id, wife_id):
                if parent_id:
                    relationships.append(Relationship(parent_id, child_id, "PARENT_OF"))

    logger.info("Loaded %d persons and %d relationships", len(persons), len(relationships))
    return persons, relationships


def load_gedcom(filepath: Path) -> tuple[list[Person], list[Relationship]]:
    """Read a GEDCOM file into persons and relationships."""
    logger.debug("Reading GEDCOM file %s", filepath)
    with parse_gedcom(filepath) as reader:
        return normalize_data(reader)

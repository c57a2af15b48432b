"""Name suggestions for a new relative of someone already in the tree."""

import logging

import networkx as nx

from graph import get_spouses
from models import GedcomName, Sex
from surname_tradition import SurnameTradition

logger = logging.getLogger(__name__)

RELATIONS = ("child", "father", "mother", "spouse")


def gedcom_name_of(G: nx.DiGraph, person_id: int | None) -> GedcomName:
    if person_id is None:
        return GedcomName()
    return GedcomName.parse(G.nodes[person_id].get("gedcom_name"))


def suggest_names(
    G: nx.DiGraph,
    person_id: int,
    relation: str,
    tradition: SurnameTradition,
    child_sex: str = "U",
) -> dict[str, str]:
    """
    Name fields for a new `relation` of person_id.

    For a new child the other parent is the person's first recorded spouse;
    with no spouse that side contributes nothing. A new spouse is assumed to
    be of the opposite sex.
    """
    if person_id not in G:
        raise ValueError(f"Person ID {person_id} not found in graph")
    if relation not in RELATIONS:
        raise ValueError(f"Unknown relation {relation!r}; choose from {', '.join(RELATIONS)}")

    sex = Sex.coerce(G.nodes[person_id].get("sex"))
    name = gedcom_name_of(G, person_id)

    if relation == "father":
        return tradition.new_parent_names(name, Sex.MALE)
    if relation == "mother":
        return tradition.new_parent_names(name, Sex.FEMALE)
    if relation == "spouse":
        spouse_sex = {Sex.MALE: Sex.FEMALE, Sex.FEMALE: Sex.MALE}.get(sex, Sex.UNKNOWN)
        return tradition.new_spouse_names(name, spouse_sex)

    spouses = get_spouses(G, person_id)
    other = gedcom_name_of(G, spouses[0] if spouses else None)
    logger.debug("New child of %s with %d recorded spouse(s)", person_id, len(spouses))
    if sex is Sex.FEMALE:
        return tradition.new_child_names(other, name, child_sex)
    return tradition.new_child_names(name, other, child_sex)

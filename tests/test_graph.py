"""Tests for the family graph and ahnentafel/descendancy numbering."""

import pytest

from graph import (
    find_person,
    get_children,
    get_parents,
    get_pedigree_subgraph,
    get_spouses,
    number_ancestors,
    number_descendants,
)


def test_build_graph(family_graph):
    assert family_graph.number_of_nodes() == 10
    assert family_graph.nodes[20]["person_name"] == "Gabriel Garcia Iglesias"
    assert family_graph.nodes[20]["gedcom_name"] == "Gabriel /Garcia/ /Iglesias/"
    assert family_graph.edges[20, 10]["relationship_type"] == "PARENT_OF"
    assert family_graph.edges[20, 30]["relationship_type"] == "SPOUSE_OF"


@pytest.mark.parametrize("ref", ["@I20@", "I20", "20", 20])
def test_find_person(family_graph, ref):
    assert find_person(family_graph, ref) == 20


def test_find_person_unknown(family_graph):
    with pytest.raises(ValueError):
        find_person(family_graph, "@I999@")
    with pytest.raises(ValueError):
        find_person(family_graph, "nobody")


def test_get_parents(family_graph):
    assert get_parents(family_graph, 10) == (20, 30)
    assert get_parents(family_graph, 30) == (None, 70)
    assert get_parents(family_graph, 70) == (None, None)


def test_parent_of_unknown_sex_fills_free_slot(family_graph):
    family_graph.nodes[70]["sex"] = None
    assert get_parents(family_graph, 30) == (70, None)


def test_children_in_birth_order(family_graph):
    # Rosa (80) was born before Juan (10); undated Sofia (12) goes last
    assert get_children(family_graph, 20) == [80, 10]
    assert get_children(family_graph, 10) == [11, 12]


def test_get_spouses(family_graph):
    assert get_spouses(family_graph, 30) == [20]
    assert get_spouses(family_graph, 20) == [30]
    assert get_spouses(family_graph, 70) == []


def test_number_ancestors(family_graph):
    assert number_ancestors(family_graph, 10, generations=3) == {
        1: 10,
        2: 20,
        3: 30,
        4: 40,
        5: 50,
        7: 70,
    }
    assert number_ancestors(family_graph, 10, generations=2) == {1: 10, 2: 20, 3: 30}
    assert number_ancestors(family_graph, 10, generations=1) == {1: 10}


def test_number_ancestors_keeps_collapsed_slots(family_graph):
    # Make Pedro also Maria's father: he then holds two Sosa numbers
    family_graph.add_edge(40, 30, relationship_type="PARENT_OF")
    numbering = number_ancestors(family_graph, 10, generations=3)
    assert numbering[4] == 40
    assert numbering[6] == 40


def test_number_ancestors_terminates_on_cycles(family_graph):
    family_graph.add_edge(10, 40, relationship_type="PARENT_OF")
    numbering = number_ancestors(family_graph, 10, generations=6)
    assert max(numbering) < 2**6


def test_number_descendants(family_graph):
    numbering = number_descendants(family_graph, 20, generations=3)
    assert list(numbering.items()) == [
        ("1.", 20),
        ("1.1.", 80),
        ("1.2.", 10),
        ("1.2.1.", 11),
        ("1.2.2.", 12),
    ]
    assert number_descendants(family_graph, 20, generations=2) == {"1.": 20, "1.1.": 80, "1.2.": 10}


def test_numbering_unknown_root(family_graph):
    with pytest.raises(ValueError):
        number_ancestors(family_graph, 999)
    with pytest.raises(ValueError):
        number_descendants(family_graph, 999)


def test_pedigree_subgraph(family_graph):
    sub = get_pedigree_subgraph(family_graph, number_ancestors(family_graph, 10, 2))
    assert set(sub.nodes) == {10, 20, 30}

"""NetworkX family graph and pedigree/descendancy numbering over it."""

import logging

import networkx as nx

from models import Person, Relationship
from numbering import daboville_child, sosa_generation, sosa_of_father, sosa_of_mother

logger = logging.getLogger(__name__)


def build_graph(persons: list[Person], relationships: list[Relationship]) -> nx.DiGraph:
    """Build a NetworkX directed graph from persons and relationships."""
    G = nx.DiGraph()

    # Note: use 'person_name' instead of 'name' to avoid conflict with pydot
    for p in persons:
        G.add_node(
            p.id,
            person_name=p.name,
            gedcom_name=p.gedcom_name,
            sex=p.sex,
            birth_date=p.birth_date,
            death_date=p.death_date,
            given_name=p.given_name,
            surname=p.surname,
        )

    for r in relationships:
        G.add_edge(r.person1_id, r.person2_id, relationship_type=r.relationship_type)

    return G


def find_person(G: nx.DiGraph, ref: str | int) -> int:
    """Resolve a person id or GEDCOM xref ('@I12@', 'I12', '12') to a node."""
    digits = "".join(ch for ch in str(ref) if ch.isdigit())
    if not digits or int(digits) not in G:
        raise ValueError(f"Person {ref!r} not found in graph")
    return int(digits)


def _related(G: nx.DiGraph, nodes, relationship_type: str) -> list[int]:
    return [n for n, edge in nodes if edge.get("relationship_type") == relationship_type]


def get_parents(G: nx.DiGraph, person_id: int) -> tuple[int | None, int | None]:
    """
    (father, mother) of a person. A parent of unrecorded sex fills whichever
    slot is still free, father first.
    """
    if person_id not in G:
        raise ValueError(f"Person ID {person_id} not found in graph")

    # PARENT_OF edges go from parent → child, so parents are predecessors
    parents = _related(
        G, ((p, G.edges[p, person_id]) for p in G.predecessors(person_id)), "PARENT_OF"
    )

    father = next((p for p in parents if G.nodes[p].get("sex") == "M"), None)
    mother = next((p for p in parents if G.nodes[p].get("sex") == "F"), None)
    for p in parents:
        if p in (father, mother):
            continue
        if father is None:
            father = p
        elif mother is None:
            mother = p
    return father, mother


def get_children(G: nx.DiGraph, person_id: int) -> list[int]:
    """Children in birth order; undated children keep their family order."""
    if person_id not in G:
        raise ValueError(f"Person ID {person_id} not found in graph")

    children = _related(
        G, ((c, G.edges[person_id, c]) for c in G.successors(person_id)), "PARENT_OF"
    )
    def birth_key(child: int) -> tuple[bool, str]:
        # ISO dates compare as strings; undated children go last
        birth_date = G.nodes[child].get("birth_date")
        return (birth_date is None, birth_date or "")

    return sorted(children, key=birth_key)


def get_spouses(G: nx.DiGraph, person_id: int) -> list[int]:
    if person_id not in G:
        raise ValueError(f"Person ID {person_id} not found in graph")

    spouses = _related(G, ((s, G.edges[person_id, s]) for s in G.successors(person_id)), "SPOUSE_OF")
    spouses += _related(G, ((s, G.edges[s, person_id]) for s in G.predecessors(person_id)), "SPOUSE_OF")
    return list(dict.fromkeys(spouses))


def number_ancestors(G: nx.DiGraph, root_id: int, generations: int = 5) -> dict[int, int]:
    """
    Ahnentafel of root_id: Sosa number -> person id, covering `generations`
    generations including the root. With pedigree collapse the same person
    appears under several numbers.
    """
    if root_id not in G:
        raise ValueError(f"Person ID {root_id} not found in graph")

    numbering = {1: root_id}
    queue = [1]
    for sosa in queue:
        if sosa_generation(sosa) >= generations:
            continue
        father, mother = get_parents(G, numbering[sosa])
        for parent, parent_sosa in ((father, sosa_of_father(sosa)), (mother, sosa_of_mother(sosa))):
            if parent is not None:
                numbering[parent_sosa] = parent
                queue.append(parent_sosa)

    logger.debug("Numbered %d ancestor slots for %s", len(numbering), root_id)
    return dict(sorted(numbering.items()))


def number_descendants(G: nx.DiGraph, root_id: int, generations: int = 5) -> dict[str, int]:
    """
    Descendancy booklet of root_id: d'Aboville number -> person id, root "1.",
    in depth-first order (each person followed by their descendants).
    """
    if root_id not in G:
        raise ValueError(f"Person ID {root_id} not found in graph")

    numbering: dict[str, int] = {}
    stack = [("1.", root_id, 1)]
    while stack:
        path, person_id, depth = stack.pop()
        numbering[path] = person_id
        if depth >= generations:
            continue
        children = get_children(G, person_id)
        for birth_order, child in reversed(list(enumerate(children, start=1))):
            stack.append((daboville_child(path, birth_order), child, depth + 1))

    logger.debug("Numbered %d descendants of %s", len(numbering) - 1, root_id)
    return numbering


def get_pedigree_subgraph(G: nx.DiGraph, numbering: dict[int, int]) -> nx.DiGraph:
    """The directed subgraph induced by the people in an ahnentafel."""
    return G.subgraph(set(numbering.values())).copy()

"""Consistency checks for a numbered pedigree."""

import networkx as nx

from numbering import sosa_of_child


def find_parent_cycle(G: nx.DiGraph) -> list[int] | None:
    """Nodes of a cycle in the PARENT_OF edges, or None."""
    parent_edges = [
        (u, v) for u, v, d in G.edges(data=True) if d.get("relationship_type") == "PARENT_OF"
    ]
    parent_graph = nx.DiGraph(parent_edges)
    try:
        cycle = nx.find_cycle(parent_graph, orientation="original")
    except nx.NetworkXNoCycle:
        return None
    return [edge[0] for edge in cycle]


def validate_pedigree(G: nx.DiGraph, numbering: dict[int, int]) -> list[str]:
    """
    Validate an ahnentafel (Sosa number -> person id) against the graph:
    - Cycles in parent-child relationships
    - Fathers (even numbers) recorded as female, mothers (odd) as male
    - Ancestors born after the descendant they are numbered through
    - Deaths before births

    Returns a list of warning messages.
    """
    warnings: list[str] = []

    cycle = find_parent_cycle(G)
    if cycle:
        warnings.append(f"Cycle detected in parent-child relationships: {cycle}")

    for sosa, person_id in numbering.items():
        data = G.nodes[person_id]
        name = data.get("person_name")
        sex = data.get("sex")

        if sosa > 1:
            if sosa % 2 == 0 and sex == "F":
                warnings.append(f"Sosa {sosa} ({name}) is a father but recorded as female")
            elif sosa % 2 == 1 and sex == "M":
                warnings.append(f"Sosa {sosa} ({name}) is a mother but recorded as male")

            child_sosa = sosa_of_child(sosa)
            child_id = numbering.get(child_sosa)
            child_birth = G.nodes[child_id].get("birth_date") if child_id is not None else None
            birth = data.get("birth_date")
            # ISO dates compare as strings
            if birth and child_birth and child_birth < birth:
                warnings.append(
                    f"Impossible: Sosa {sosa} ({name}) born after Sosa {child_sosa} "
                    f"({G.nodes[child_id].get('person_name')})"
                )

        death = data.get("death_date")
        birth = data.get("birth_date")
        if birth and death and death < birth:
            warnings.append(f"Impossible: Sosa {sosa} ({name}) died before being born")

    return warnings

"""Pedigree chart rendering with Graphviz."""

import logging
from pathlib import Path

import networkx as nx
import pydot

from kinship import DirectLineKinshipNamer
from numbering import relationship_name, sosa_generation, sosa_of_child

logger = logging.getLogger(__name__)


def build_pedigree_dot(
    G: nx.DiGraph,
    numbering: dict[int, int],
    namer=None,
    locale: str = "en",
    root_label: str = "",
) -> pydot.Dot:
    """
    Build a left-to-right pedigree chart: the root on the left, each
    generation one rank further right, fathers above mothers.

    Each box shows the Sosa number, the kinship label, the name and the
    life years. A person reached through several Sosa numbers (pedigree
    collapse) gets one box per number.
    """
    namer = namer or DirectLineKinshipNamer()

    P = pydot.Dot(graph_type="digraph")
    P.set("rankdir", "RL")  # Parents right of children, arrows point to the child
    P.set("splines", "ortho")
    P.set("nodesep", "0.2")
    P.set("ranksep", "0.6")

    generations: dict[int, list[int]] = {}
    for sosa, person_id in numbering.items():
        data = G.nodes[person_id]
        birth_date = data.get("birth_date") or ""
        death_date = data.get("death_date") or ""
        kinship = relationship_name(sosa, namer, locale, root_label=root_label)

        label = f"{sosa}. {kinship}\n{data.get('person_name', '')}\n{birth_date[:4]}-{death_date[:4]}"

        sex = data.get("sex")
        if sex == "M":
            fillcolor = "lightblue"
        elif sex == "F":
            fillcolor = "lightpink"
        else:
            fillcolor = "lightgray"

        P.add_node(
            pydot.Node(
                f"sosa{sosa}",
                label=label,
                shape="box",
                style="rounded,filled",
                fillcolor=fillcolor,
                fontsize="10",
            )
        )
        generations.setdefault(sosa_generation(sosa), []).append(sosa)

        if sosa > 1 and sosa_of_child(sosa) in numbering:
            P.add_edge(pydot.Edge(f"sosa{sosa}", f"sosa{sosa_of_child(sosa)}", color="darkgray"))

    # One rank per generation, ordered by Sosa number so fathers sit above mothers
    for generation, members in sorted(generations.items()):
        sg = pydot.Subgraph(f"generation_{generation}", rank="same")
        for sosa in sorted(members):
            sg.add_node(pydot.Node(f"sosa{sosa}"))
        P.add_subgraph(sg)

    return P


def plot_pedigree(
    G: nx.DiGraph,
    numbering: dict[int, int],
    output_path: Path | None = None,
    namer=None,
    locale: str = "en",
    root_label: str = "",
):
    """
    Render the pedigree chart to output_path (PNG, SVG or PDF by extension,
    PNG otherwise). If output_path is None, displays it with matplotlib.
    """
    P = build_pedigree_dot(G, numbering, namer=namer, locale=locale, root_label=root_label)

    if output_path:
        ext = output_path.suffix.lower().lstrip(".")
        if ext not in ("png", "svg", "pdf"):
            ext = "png"

        P.write(str(output_path), format=ext)
        logger.info("Pedigree chart saved to %s", output_path)
    else:
        # Save to temporary file and display
        import tempfile

        import matplotlib.image as mpimg
        import matplotlib.pyplot as plt

        with tempfile.NamedTemporaryFile(suffix=".png", delete=False) as f:
            P.write(f.name, format="png")
            img = mpimg.imread(f.name)
            plt.figure(figsize=(20, 16))
            plt.imshow(img)
            plt.axis("off")
            plt.tight_layout()
            plt.show()

"""
Command-line entry point.

    gedcharts ancestors tree.ged I1          Sosa-numbered ancestor list
    gedcharts descendants tree.ged I1        d'Aboville-numbered descendants
    gedcharts names tree.ged I1 child        suggested name for a new relative
    gedcharts chart tree.ged I1 -o out.svg   pedigree chart
    gedcharts traditions                     available surname traditions

Settings default from GEDCHARTS_TRADITION, GEDCHARTS_LOCALE,
GEDCHARTS_GENERATIONS and GEDCHARTS_ROOT_LABEL; flags override them.
"""

import argparse
import logging
from pathlib import Path
import sys

from config import ChartConfig
from graph import build_graph, find_person, number_ancestors, number_descendants
from kinship import DirectLineKinshipNamer
from naming import RELATIONS, suggest_names
from numbering import daboville_depth, daboville_label, relationship_name
from parsing import load_gedcom
from plotting import plot_pedigree
from surname_tradition import create_surname_tradition, surname_traditions
from validation import validate_pedigree

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gedcharts", description=__doc__.splitlines()[1])
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    def tree_command(name: str, help_text: str) -> argparse.ArgumentParser:
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("gedcom", type=Path, help="GEDCOM file")
        sub.add_argument("person", help="xref or numeric id of the root individual")
        sub.add_argument("-g", "--generations", type=int, help="generations to cover")
        sub.add_argument("--locale", help="locale of kinship labels")
        sub.add_argument("--root-label", help="kinship label of the root individual")
        return sub

    tree_command("ancestors", "list ancestors with Sosa numbers")
    tree_command("descendants", "list descendants with d'Aboville numbers")
    chart = tree_command("chart", "draw a pedigree chart")
    chart.add_argument(
        "-o", "--output", type=Path, help="PNG/SVG/PDF file; shows the chart if omitted"
    )
    names = tree_command("names", "suggest names for a new relative")
    names.add_argument("relation", choices=RELATIONS)
    names.add_argument("--tradition", help="surname tradition tag")
    names.add_argument("--child-sex", default="U", choices=("M", "F", "U"))

    subparsers.add_parser("traditions", help="list surname traditions")
    return parser


def _years(data: dict) -> str:
    birth = (data.get("birth_date") or "")[:4]
    death = (data.get("death_date") or "")[:4]
    return f"({birth}-{death})" if birth or death else ""


def cmd_ancestors(G, root_id: int, config: ChartConfig):
    namer = DirectLineKinshipNamer()
    numbering = number_ancestors(G, root_id, config.generations)
    for sosa, person_id in numbering.items():
        data = G.nodes[person_id]
        kinship = relationship_name(sosa, namer, config.locale, root_label=config.root_label)
        print(f"{sosa:>6}  {kinship:<32} {data.get('person_name')} {_years(data)}".rstrip())

    warnings = validate_pedigree(G, numbering)
    if warnings:
        print(f"\nFound {len(warnings)} validation warnings:")
        for w in warnings[:10]:
            print(f"  - {w}")
        if len(warnings) > 10:
            print(f"  ... and {len(warnings) - 10} more")


def cmd_descendants(G, root_id: int, config: ChartConfig):
    for path, person_id in number_descendants(G, root_id, config.generations).items():
        data = G.nodes[person_id]
        indent = "  " * (daboville_depth(path) - 1)
        print(f"{indent}{daboville_label(path)}  {data.get('person_name')} {_years(data)}".rstrip())


def cmd_names(G, root_id: int, config: ChartConfig, relation: str, child_sex: str):
    tradition = create_surname_tradition(config.surname_tradition)
    fields = suggest_names(G, root_id, relation, tradition, child_sex=child_sex)
    print(f"{tradition.label} tradition, new {relation} of {G.nodes[root_id].get('person_name')}:")
    for key, value in fields.items():
        print(f"  {key} {value}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "traditions":
        for tag, label in surname_traditions().items():
            print(f"{tag:<12} {label}")
        return 0

    try:
        config = ChartConfig.from_env().with_overrides(
            generations=args.generations,
            locale=args.locale,
            root_label=args.root_label,
            surname_tradition=getattr(args, "tradition", None),
        )
        if not args.gedcom.exists():
            raise ValueError(f"GEDCOM file not found: {args.gedcom}")

        persons, relationships = load_gedcom(args.gedcom)
        G = build_graph(persons, relationships)
        logger.debug("Graph has %d nodes and %d edges", G.number_of_nodes(), G.number_of_edges())
        root_id = find_person(G, args.person)

        if args.command == "ancestors":
            cmd_ancestors(G, root_id, config)
        elif args.command == "descendants":
            cmd_descendants(G, root_id, config)
        elif args.command == "names":
            cmd_names(G, root_id, config, args.relation, args.child_sex)
        elif args.command == "chart":
            numbering = number_ancestors(G, root_id, config.generations)
            plot_pedigree(
                G,
                numbering,
                args.output,
                locale=config.locale,
                root_label=config.root_label,
            )
    except ValueError as e:
        print(f"gedcharts: {e}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())

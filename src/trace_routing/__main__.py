"""CLI entry point for trace-routing."""

import json
import logging
import sys

import click

from trace_routing import parse_membership, parse_style, route_diagram
from trace_routing.errors import RoutingError
from trace_routing.ir.graph import DiagramIR
from trace_routing.layout.overlap import resolve_overlaps
from trace_routing.routing.intersection import find_intersections

logger = logging.getLogger(__name__)


@click.command()
@click.argument("input", required=False, type=click.Path(exists=True))
@click.option("--style", "-s", "style", type=click.Choice(["smooth", "tight"]), default="smooth", help="Curve style for same-cluster edges")
@click.option("--membership", "-m", "membership", type=click.Choice(["first", "last", "strict"]), default="first", help="Which cluster keeps a node listed twice")
@click.option("--resolve-overlaps", "resolve", is_flag=True, help="Push overlapping nodes apart before routing")
@click.option("--check-intersections", "check", is_flag=True, help="Report crossing edge pairs")
@click.option("--output", "-o", "output", type=str, default=None, help="Write output to this file instead of stdout")
@click.option("--verbose", "-v", "verbose", is_flag=True, help="Log routing decisions to stderr")
def main(
    input: str | None,
    style: str,
    membership: str,
    resolve: bool,
    check: bool,
    output: str | None,
    verbose: bool,
) -> None:
    """Route origin-tracing diagram edges from a JSON layout to SVG path data."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)

    if input:
        try:
            with open(input) as f:
                text = f.read()
        except OSError as e:
            click.echo(f"error: cannot read '{input}': {e}", err=True)
            sys.exit(1)
    else:
        text = sys.stdin.read()

    try:
        diagram = DiagramIR.from_dict(json.loads(text))
    except json.JSONDecodeError as e:
        click.echo(f"error: invalid JSON: {e}", err=True)
        sys.exit(1)
    except RoutingError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    logger.debug(
        "loaded %d node(s), %d edge(s); without position: %s",
        diagram.node_count(),
        diagram.edge_count(),
        diagram.unpositioned_nodes(),
    )

    if resolve:
        diagram = DiagramIR.from_parts(resolve_overlaps(diagram.node_positions()), diagram.clusters, diagram.edges())

    try:
        result = route_diagram(diagram, parse_style(style), parse_membership(membership))
    except RoutingError as e:
        click.echo(f"error: {e}", err=True)
        sys.exit(1)

    doc = result.to_dict()
    if check:
        doc["intersections"] = [list(pair) for pair in find_intersections(result.paths.values())]
    rendered = json.dumps(doc, indent=2) + "\n"

    if output:
        try:
            with open(output, "w") as f:
                f.write(rendered)
        except OSError as e:
            click.echo(f"error: cannot write '{output}': {e}", err=True)
            sys.exit(1)
    else:
        click.echo(rendered, nl=False)


if __name__ == "__main__":
    main()

"""CLI for bundleburst (outline, segments, hover)."""

import json
from pathlib import Path
from typing import Annotated, Any

import typer
from loguru import logger

from bundleburst.config import resolve_stats_file
from bundleburst.core.importer.stats_reader import read_stats_file
from bundleburst.core.interaction.breadcrumbs import breadcrumb_points
from bundleburst.core.interaction.controller import HoverController
from bundleburst.core.layout.geometry import segments as layout_segments
from bundleburst.core.layout.partition import compute_layout
from bundleburst.core.tree.builder import build_tree
from bundleburst.core.tree.navigation import find_node
from bundleburst.core.tree.outline import render_outline
from bundleburst.logging_config import configure_logging
from bundleburst.models.node import LayoutResult

app = typer.Typer(help="Bundleburst: explore the composition of a bundle as a sunburst.")

StatsArgument = Annotated[
    Path | None,
    typer.Argument(help="Build stats (.json) or path,size rows (.csv)"),
]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    configure_logging(verbose=verbose)


def _load_layout(stats: Path | None, *, radius: float = 1.0) -> LayoutResult:
    """Read, build and lay out the stats file, exiting on unreadable input."""
    path = stats or resolve_stats_file()
    if path is None:
        logger.error("No stats file given and none found in the current directory")
        raise typer.Exit(1)

    try:
        records = read_stats_file(path)
    except (FileNotFoundError, ValueError) as e:
        logger.error("{}", e)
        raise typer.Exit(1) from e

    return compute_layout(build_tree(records), radius=radius)


@app.command()
def outline(
    stats: StatsArgument = None,
    max_depth: Annotated[
        int | None,
        typer.Option("--max-depth", "-m", help="Max depth levels to render"),
    ] = None,
    visible_only: bool = typer.Option(
        False, "--visible-only", help="Omit segments too narrow to draw"
    ),
) -> None:
    """Print the bundle tree, largest entries first."""
    layout = _load_layout(stats)
    text = render_outline(layout, max_depth=max_depth, include_hidden=not visible_only)
    typer.echo(text, nl=False)


@app.command()
def segments(
    stats: StatsArgument = None,
    radius: float = typer.Option(1.0, "--radius", "-r", help="Outer chart radius"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """List the arc geometry of every drawable segment."""
    layout = _load_layout(stats, radius=radius)
    result = layout_segments(layout)

    if output_json:
        data = [
            {
                "name": s.node.name,
                "depth": s.node.depth,
                "value": s.node.value,
                "start_angle": s.start_angle,
                "end_angle": s.end_angle,
                "inner_radius": s.inner_radius,
                "outer_radius": s.outer_radius,
                "color": s.color,
            }
            for s in result
        ]
        typer.echo(json.dumps(data, indent=2))
        return

    typer.echo(f"{len(result)} segments (total {layout.total_value:g} bytes):\n")
    for s in result:
        indent = "  " * s.node.depth
        typer.echo(
            f"{indent}{s.node.name}  [{s.start_angle:.4f}, {s.end_angle:.4f}) "
            f"r=[{s.inner_radius:.3f}, {s.outer_radius:.3f}]  {s.color}"
        )


@app.command()
def hover(
    path: str = typer.Argument(..., help="Module path to hover, e.g. src/app.js"),
    stats: StatsArgument = None,
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
) -> None:
    """Show what hovering a segment would display."""
    layout = _load_layout(stats)
    node = find_node(layout.root, path)
    if node is None or node.depth == 0:
        typer.echo(f"Path '{path}' not found in bundle.")
        raise typer.Exit(1)

    state = HoverController(layout).on_hover(node)

    if output_json:
        data: dict[str, Any] = {
            "name": state.name,
            "path": state.path_string,
            "percentage": state.percentage_label,
            "size": state.size_label,
            "breadcrumbs": [
                {
                    "name": b.name,
                    "depth": b.depth_index,
                    "x": b.x,
                    "width": b.width,
                    "points": breadcrumb_points(b, i),
                }
                for i, b in enumerate(state.breadcrumbs)
            ],
            "end_label_x": state.end_label_x,
        }
        typer.echo(json.dumps(data, indent=2))
        return

    typer.echo(state.path_string)
    typer.echo(f"  {state.percentage_label} of your bundle")
    typer.echo(f"  Size: {state.size_label}")
    typer.echo("  " + " > ".join(b.name for b in state.breadcrumbs))

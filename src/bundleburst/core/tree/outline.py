"""Render a laid-out tree as an indented text outline."""

import io

from bundleburst.core.interaction.formatting import format_percentage, format_size
from bundleburst.models.node import LayoutResult


def render_outline(
    layout: LayoutResult,
    *,
    max_depth: int | None = None,
    include_hidden: bool = True,
) -> str:
    """Render every node below the synthetic root as a bullet list.

    Args:
        layout: Computed layout to render.
        max_depth: Max levels below the root to include (None = unlimited).
        include_hidden: Whether to list nodes too narrow to be drawn.

    Returns:
        Outline text, one node per line, largest children first.
    """
    visible = set(layout.visible)
    out = io.StringIO()
    for node in layout.root.descendants():
        if node.depth == 0:
            continue
        if max_depth is not None and node.depth > max_depth:
            continue
        if not include_hidden and node not in visible:
            continue

        indent = "    " * (node.depth - 1)
        name = node.name + "/" if node.children else node.name
        size = format_size(node.value)
        share = format_percentage(node.value, layout.total_value)
        out.write(f"{indent}- {name}  {size}  ({share})\n")

        # Truncation indicator when children are cut off by max_depth
        if max_depth is not None and node.depth == max_depth and node.children:
            count = len(node.children)
            noun = "child" if count == 1 else "children"
            out.write(f"{indent}    - ... ({count} more {noun})\n")

    return out.getvalue()

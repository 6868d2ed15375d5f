"""Breadcrumb trail: ancestor chains, path strings and trail diffing."""

from collections.abc import Sequence

from bundleburst.config import (
    BREADCRUMB_HEIGHT,
    BREADCRUMB_TIP,
    BREADCRUMB_WIDTH,
    CHAR_WIDTH,
    END_LABEL_GAP,
)
from bundleburst.models.node import BreadcrumbDiff, BreadcrumbEntry, LayoutNode


def ancestor_chain(node: LayoutNode) -> tuple[LayoutNode, ...]:
    """Ancestors of node in root-to-node order, excluding the synthetic root."""
    chain = node.ancestors()
    chain.reverse()
    return tuple(chain[1:])


def path_string(chain: Sequence[LayoutNode]) -> str:
    """Render a chain as "./a/b/c", with a trailing "/" for directories."""
    text = "./" + "/".join(node.name for node in chain)
    if chain and chain[-1].children:
        text += "/"
    return text


def breadcrumb_width(name: str) -> float:
    """Rendered width of a breadcrumb polygon including its tip."""
    return BREADCRUMB_WIDTH + len(name) * CHAR_WIDTH + BREADCRUMB_TIP


def breadcrumb_points(entry: BreadcrumbEntry, index: int) -> str:
    """SVG polygon points for a breadcrumb; all but the first get a tail notch."""
    body = BREADCRUMB_WIDTH + len(entry.name) * CHAR_WIDTH
    half = BREADCRUMB_HEIGHT / 2
    points = [
        "0,0",
        f"{body:g},0",
        f"{body + BREADCRUMB_TIP:g},{half:g}",
        f"{body:g},{BREADCRUMB_HEIGHT:g}",
        f"0,{BREADCRUMB_HEIGHT:g}",
    ]
    if index > 0:
        points.append(f"{BREADCRUMB_TIP:g},{half:g}")
    return " ".join(points)


def layout_trail(chain: Sequence[LayoutNode]) -> tuple[BreadcrumbEntry, ...]:
    """Project a chain onto breadcrumb entries laid out left to right."""
    entries: list[BreadcrumbEntry] = []
    x = 0.0
    for depth_index, node in enumerate(chain):
        width = breadcrumb_width(node.name)
        entries.append(BreadcrumbEntry(name=node.name, depth_index=depth_index, x=x, width=width))
        x += width
    return tuple(entries)


def end_label_x(trail: Sequence[BreadcrumbEntry]) -> float:
    """Horizontal position of the percentage label after the last breadcrumb."""
    if not trail:
        return 0.0
    last = trail[-1]
    return last.x + last.width + END_LABEL_GAP


def diff_breadcrumbs(
    previous: Sequence[BreadcrumbEntry],
    chain: Sequence[LayoutNode],
) -> BreadcrumbDiff:
    """Diff the displayed trail against the trail for a new ancestor chain.

    Entries are matched on (name, depth_index). Matching entries are kept
    and moved to their new offset; the rest are removed or added.

    Args:
        previous: Trail currently on display.
        chain: Ancestor chain of the newly hovered node.

    Returns:
        BreadcrumbDiff with the new trail and what changed.
    """
    trail = layout_trail(chain)
    new_keys = {entry.key for entry in trail}
    old_keys = {entry.key for entry in previous}

    removed = tuple(entry for entry in previous if entry.key not in new_keys)
    added = tuple(entry for entry in trail if entry.key not in old_keys)
    kept = tuple(entry for entry in trail if entry.key in old_keys)

    return BreadcrumbDiff(
        trail=trail,
        added=added,
        removed=removed,
        kept=kept,
        end_label_x=end_label_x(trail),
    )

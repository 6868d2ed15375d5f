"""Project a partition layout onto drawable arc segments."""

import math

from bundleburst.config import PALETTE
from bundleburst.models.node import LayoutNode, LayoutResult, Segment


def segment_color(index: int) -> str:
    """Palette colour for the index-th drawn segment.

    The cycle starts at the second palette entry and wraps around.
    """
    return PALETTE[(index + 1) % len(PALETTE)]


def arc_radii(node: LayoutNode) -> tuple[float, float]:
    """Inner and outer radius after the equal-area square-root transform."""
    return math.sqrt(node.y0), math.sqrt(node.y1)


def segments(layout: LayoutResult) -> tuple[Segment, ...]:
    """Return arc geometry for every visible node except the synthetic root.

    Colours are assigned in the same pre-order as ``layout.visible``, with
    the root consuming the first slot as it does when it is drawn hidden.
    """
    result: list[Segment] = []
    for index, node in enumerate(layout.visible):
        if node.depth == 0:
            continue
        inner, outer = arc_radii(node)
        result.append(
            Segment(
                node=node,
                start_angle=node.x0,
                end_angle=node.x1,
                inner_radius=inner,
                outer_radius=outer,
                color=segment_color(index),
            )
        )
    return tuple(result)

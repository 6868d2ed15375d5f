"""Partition layout: angular spans proportional to value, radial bands by depth."""

from loguru import logger

from bundleburst.config import FULL_CIRCLE, VISIBILITY_EPSILON
from bundleburst.models.node import LayoutNode, LayoutResult, TreeNode


def _wrap(node: TreeNode, parent: LayoutNode | None, depth: int) -> LayoutNode:
    wrapped = LayoutNode(node=node, parent=parent, depth=depth)
    wrapped.children = [_wrap(child, wrapped, depth + 1) for child in node.children]
    return wrapped


def _aggregate(node: LayoutNode) -> None:
    """Post-order sum of leaf sizes, plus subtree height."""
    for child in node.children:
        _aggregate(child)
    if node.children:
        node.value = sum(child.value for child in node.children)
        node.height = 1 + max(child.height for child in node.children)
    else:
        node.value = node.node.size or 0.0
        node.height = 0


def _sort(node: LayoutNode) -> None:
    # sorted() is stable, so equal values keep builder order.
    node.children = sorted(node.children, key=lambda child: child.value, reverse=True)
    for child in node.children:
        _sort(child)


def _partition(node: LayoutNode, band: float) -> None:
    scale = (node.x1 - node.x0) / node.value if node.value else 0.0
    last = len(node.children) - 1
    x = node.x0
    for index, child in enumerate(node.children):
        child.x0 = x
        x += child.value * scale
        # Pin the last edge so the children tile the parent exactly.
        if index == last:
            x = node.x1 if scale else node.x0
        child.x1 = x
        child.y0 = child.depth * band
        child.y1 = (child.depth + 1) * band
        _partition(child, band)


def is_visible(node: LayoutNode) -> bool:
    """Return True when the node's arc is wide enough to draw."""
    return node.x1 - node.x0 > VISIBILITY_EPSILON


def compute_layout(root: TreeNode, *, radius: float = 1.0) -> LayoutResult:
    """Annotate a built tree with values and sunburst partition bounds.

    The input tree is left untouched; a parallel LayoutNode tree is returned.
    Radial extent spans [0, radius**2] split into one equal band per depth
    level, so painters take the square root to get equal-area rings.

    Args:
        root: Synthetic root produced by build_tree.
        radius: Outer radius of the chart in painter units.

    Returns:
        LayoutResult with the annotated root, its total value and the
        pre-ordered nodes that pass the visibility test.
    """
    layout_root = _wrap(root, None, 0)
    _aggregate(layout_root)
    _sort(layout_root)

    band = radius * radius / (layout_root.height + 1)
    layout_root.x0 = 0.0
    layout_root.x1 = FULL_CIRCLE
    layout_root.y0 = 0.0
    layout_root.y1 = band
    _partition(layout_root, band)

    visible = tuple(node for node in layout_root.descendants() if is_visible(node))
    logger.debug(
        "Layout: total value {}, {} visible nodes, height {}",
        layout_root.value, len(visible), layout_root.height,
    )
    return LayoutResult(
        root=layout_root,
        total_value=layout_root.value,
        radius=radius,
        visible=visible,
    )

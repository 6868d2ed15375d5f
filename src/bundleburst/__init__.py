"""Sunburst layout and hover interaction for bundle composition."""

from bundleburst.core.interaction.controller import HoverController
from bundleburst.core.layout.geometry import segments
from bundleburst.core.layout.partition import compute_layout, is_visible
from bundleburst.core.tree.builder import build_tree
from bundleburst.models.node import DisplayState, LayoutNode, LayoutResult, TreeNode
from bundleburst.session import SunburstSession

__all__ = [
    "DisplayState",
    "HoverController",
    "LayoutNode",
    "LayoutResult",
    "SunburstSession",
    "TreeNode",
    "build_tree",
    "compute_layout",
    "is_visible",
    "segments",
]

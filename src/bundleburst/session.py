"""Rebuild-on-change wrapper tying the builder, layout and controller together."""

from collections.abc import Iterable, Sequence
from typing import Any

from loguru import logger

from bundleburst.core.interaction.controller import HoverController, PathListener
from bundleburst.core.layout.geometry import segments
from bundleburst.core.layout.partition import compute_layout
from bundleburst.core.tree.builder import build_tree
from bundleburst.models.node import LayoutResult, Segment, TreeNode


class SunburstSession:
    """Keep one layout per distinct record snapshot.

    update() compares the incoming records with the previous snapshot and
    only rebuilds when they differ. A rebuild starts a fresh HoverController,
    discarding any breadcrumb trail from the old data.
    """

    def __init__(self, *, radius: float = 1.0, on_path_change: PathListener | None = None) -> None:
        self.radius = radius
        self.on_path_change = on_path_change
        self._records: tuple[tuple[Any, ...], ...] | None = None
        self._tree: TreeNode | None = None
        self._layout: LayoutResult | None = None
        self._controller: HoverController | None = None

    @property
    def tree(self) -> TreeNode | None:
        return self._tree

    @property
    def layout(self) -> LayoutResult | None:
        return self._layout

    @property
    def controller(self) -> HoverController | None:
        return self._controller

    def update(self, records: Iterable[Sequence[Any]]) -> bool:
        """Load a record snapshot. Returns True if the layout was rebuilt."""
        snapshot = tuple(tuple(row) for row in records)
        if snapshot == self._records:
            logger.debug("Records unchanged, keeping current layout")
            return False

        self._records = snapshot
        self._tree = build_tree(snapshot)
        self._layout = compute_layout(self._tree, radius=self.radius)
        self._controller = HoverController(self._layout, on_path_change=self.on_path_change)
        return True

    def segments(self) -> tuple[Segment, ...]:
        """Drawable segments for the current layout, empty before update()."""
        if self._layout is None:
            return ()
        return segments(self._layout)

"""Hover session state for an interactive sunburst."""

from collections.abc import Callable

from loguru import logger

from bundleburst.config import DIM_OPACITY, TRANSITION_MS
from bundleburst.core.interaction.breadcrumbs import ancestor_chain, diff_breadcrumbs, path_string
from bundleburst.core.interaction.formatting import format_percentage, format_size
from bundleburst.models.node import (
    BreadcrumbDiff,
    BreadcrumbEntry,
    DisplayState,
    LayoutNode,
    LayoutResult,
)

PathListener = Callable[[str | None], None]


class HoverController:
    """Derive display state from hover events over one computed layout.

    Holds the breadcrumb trail currently on display and the highlighted
    ancestor set. Each event replaces both in one step. After a hover-end the
    painter fades segments back in and reports completion through
    finish_transition(); only the most recent hover-end re-arms hover.
    """

    def __init__(
        self,
        layout: LayoutResult,
        *,
        on_path_change: PathListener | None = None,
        transition_ms: int = TRANSITION_MS,
    ) -> None:
        self.layout = layout
        self.on_path_change = on_path_change
        self.transition_ms = transition_ms
        self._trail: tuple[BreadcrumbEntry, ...] = ()
        self._state = DisplayState.cleared()
        self._last_diff: BreadcrumbDiff | None = None
        self._armed = True
        self._generation = 0

    @property
    def state(self) -> DisplayState:
        return self._state

    @property
    def trail(self) -> tuple[BreadcrumbEntry, ...]:
        """Breadcrumbs currently recorded, visible or not."""
        return self._trail

    @property
    def last_diff(self) -> BreadcrumbDiff | None:
        return self._last_diff

    @property
    def armed(self) -> bool:
        """False while a hover-end fade-in is still running."""
        return self._armed

    @property
    def generation(self) -> int:
        return self._generation

    def on_hover(self, node: LayoutNode) -> DisplayState:
        """Select node: labels, highlight set, path and breadcrumb trail."""
        if not self._armed:
            logger.debug("Hover on {!r} while fade-in is pending", node.name)

        chain = ancestor_chain(node)
        path = path_string(chain)
        percentage = format_percentage(node.value, self.layout.total_value)
        diff = diff_breadcrumbs(self._trail, chain)

        state = DisplayState(
            name=node.name,
            percentage_label=percentage,
            size_label=format_size(node.value),
            path_string=path,
            breadcrumbs=diff.trail,
            end_label_x=diff.end_label_x,
            highlighted=frozenset(chain),
            trail_visible=True,
        )
        self._trail = diff.trail
        self._last_diff = diff
        self._state = state
        logger.debug("Hover {} ({})", path, percentage)

        self._notify(path)
        return state

    def on_hover_end(self) -> DisplayState:
        """Clear the selection and start a fade-in transition.

        The recorded trail is kept (only hidden) so the next hover diffs
        against it. Returns the cleared state; the transition generation is
        available as ``generation`` for the painter to hand back.
        """
        self._generation += 1
        self._armed = False
        self._state = DisplayState.cleared(self._trail)
        self._notify(None)
        return self._state

    def finish_transition(self, generation: int) -> bool:
        """Re-arm hover when the fade-in for ``generation`` has completed.

        Completions of superseded transitions are ignored.
        """
        if generation != self._generation:
            logger.debug("Ignoring stale transition {} (current {})", generation, self._generation)
            return False
        self._armed = True
        return True

    def opacity(self, node: LayoutNode) -> float:
        """Target opacity for a segment under the current state."""
        highlighted = self._state.highlighted
        if not highlighted or node in highlighted:
            return 1.0
        return DIM_OPACITY

    def _notify(self, path: str | None) -> None:
        if self.on_path_change is not None:
            self.on_path_change(path)

"""Tests for the hover controller session state."""

import pytest

from bundleburst.config import DIM_OPACITY
from bundleburst.core.interaction.controller import HoverController
from bundleburst.core.layout.partition import compute_layout
from bundleburst.core.tree.builder import build_tree
from bundleburst.core.tree.navigation import find_node
from bundleburst.models.node import DisplayState, LayoutNode, LayoutResult
from tests.unit.fakes import RecordingPathListener


def _node(layout: LayoutResult, path: str) -> LayoutNode:
    node = find_node(layout.root, path)
    assert node is not None
    return node


@pytest.fixture
def listener() -> RecordingPathListener:
    return RecordingPathListener()


@pytest.fixture
def controller(sample_layout: LayoutResult, listener: RecordingPathListener) -> HoverController:
    return HoverController(sample_layout, on_path_change=listener)


def test_hover_leaf_builds_display_state(
    controller: HoverController, sample_layout: LayoutResult
) -> None:
    state = controller.on_hover(_node(sample_layout, "a/b/c"))

    assert state.name == "c"
    assert state.percentage_label == "5.00%"
    assert state.size_label == "100.00"
    assert state.path_string == "./a/b/c"
    assert [b.name for b in state.breadcrumbs] == ["a", "b", "c"]
    assert state.trail_visible
    assert state.end_label_x == pytest.approx(45.5 * 3 + 15)


def test_hover_directory_reports_aggregate(
    controller: HoverController, sample_layout: LayoutResult
) -> None:
    state = controller.on_hover(_node(sample_layout, "a"))
    assert state.percentage_label == "50.0%"
    assert state.size_label == "1.00 KiB"
    assert state.path_string == "./a/"


def test_highlight_set_is_ancestor_chain(
    controller: HoverController, sample_layout: LayoutResult
) -> None:
    c = _node(sample_layout, "a/b/c")
    state = controller.on_hover(c)

    expected = {_node(sample_layout, "a"), _node(sample_layout, "a/b"), c}
    assert state.highlighted == expected
    assert sample_layout.root not in state.highlighted


def test_opacity_dims_everything_outside_chain(
    controller: HoverController, sample_layout: LayoutResult
) -> None:
    f = _node(sample_layout, "f")
    assert controller.opacity(f) == 1.0

    controller.on_hover(_node(sample_layout, "a/e"))
    assert controller.opacity(_node(sample_layout, "a")) == 1.0
    assert controller.opacity(f) == DIM_OPACITY

    controller.on_hover_end()
    assert controller.opacity(f) == 1.0


def test_hover_notifies_path_listener(
    controller: HoverController,
    sample_layout: LayoutResult,
    listener: RecordingPathListener,
) -> None:
    controller.on_hover(_node(sample_layout, "a/b"))
    controller.on_hover_end()
    assert listener.calls == ["./a/b/", None]


def test_hover_without_listener(sample_layout: LayoutResult) -> None:
    controller = HoverController(sample_layout)
    state = controller.on_hover(_node(sample_layout, "f"))
    assert state.path_string == "./f"


def test_consecutive_hovers_diff_the_trail(
    controller: HoverController, sample_layout: LayoutResult
) -> None:
    controller.on_hover(_node(sample_layout, "a/b/c"))
    controller.on_hover(_node(sample_layout, "a/e"))

    diff = controller.last_diff
    assert diff is not None
    assert [e.key for e in diff.removed] == [("b", 1), ("c", 2)]
    assert [e.key for e in diff.added] == [("e", 1)]
    assert [e.key for e in diff.kept] == [("a", 0)]
    assert [e.name for e in controller.trail] == ["a", "e"]


def test_hover_end_clears_state_but_keeps_trail(
    controller: HoverController, sample_layout: LayoutResult
) -> None:
    controller.on_hover(_node(sample_layout, "a/b"))
    state = controller.on_hover_end()

    assert state.path_string is None
    assert state.highlighted == frozenset()
    assert not state.trail_visible
    assert [b.name for b in state.breadcrumbs] == ["a", "b"]
    assert controller.state == state
    assert state == DisplayState.cleared(state.breadcrumbs)


def test_hover_end_disarms_until_transition_finishes(controller: HoverController) -> None:
    assert controller.armed
    controller.on_hover_end()
    assert not controller.armed

    assert controller.finish_transition(controller.generation)
    assert controller.armed


def test_interrupted_transition_is_ignored(controller: HoverController) -> None:
    controller.on_hover_end()
    first = controller.generation
    controller.on_hover_end()
    second = controller.generation

    assert not controller.finish_transition(first)
    assert not controller.armed
    assert controller.finish_transition(second)
    assert controller.armed


def test_hover_during_fade_diffs_against_recorded_trail(
    controller: HoverController, sample_layout: LayoutResult
) -> None:
    controller.on_hover(_node(sample_layout, "a/b/d"))
    controller.on_hover_end()

    state = controller.on_hover(_node(sample_layout, "a/b/c"))

    diff = controller.last_diff
    assert diff is not None
    assert [e.key for e in diff.removed] == [("d", 2)]
    assert [e.key for e in diff.added] == [("c", 2)]
    assert state.trail_visible


def test_hover_zero_value_node() -> None:
    layout = compute_layout(build_tree([("empty", 0), ("full", 500)]))
    controller = HoverController(layout)
    state = controller.on_hover(_node(layout, "empty"))
    assert state.size_label == "0.00"
    assert state.percentage_label == "< 0.1%"

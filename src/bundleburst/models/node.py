"""Domain models for the bundle sunburst."""

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class TreeNode:
    """A single path segment: a directory (has children) or a file (has size)."""

    name: str
    children: list["TreeNode"] = field(default_factory=list)
    size: float | None = None

    @property
    def is_directory(self) -> bool:
        return bool(self.children)


@dataclass(eq=False)
class LayoutNode:
    """A TreeNode annotated with aggregate value and partition bounds.

    Compared by identity, so nodes can be collected in sets for highlighting.
    """

    node: TreeNode
    parent: "LayoutNode | None" = field(default=None, repr=False)
    children: list["LayoutNode"] = field(default_factory=list, repr=False)
    value: float = 0.0
    depth: int = 0
    height: int = 0
    x0: float = 0.0
    x1: float = 0.0
    y0: float = 0.0
    y1: float = 0.0

    @property
    def name(self) -> str:
        return self.node.name

    def ancestors(self) -> list["LayoutNode"]:
        """Return this node followed by each parent up to the root."""
        chain: list[LayoutNode] = []
        current: LayoutNode | None = self
        while current is not None:
            chain.append(current)
            current = current.parent
        return chain

    def descendants(self) -> Iterator["LayoutNode"]:
        """Yield this node and all of its descendants in pre-order."""
        yield self
        for child in self.children:
            yield from child.descendants()


@dataclass(frozen=True)
class LayoutResult:
    """A computed partition with its cumulative total."""

    root: LayoutNode
    total_value: float
    radius: float
    visible: tuple[LayoutNode, ...] = ()


@dataclass(frozen=True)
class Segment:
    """Arc geometry for one visible node, ready for a painter."""

    node: LayoutNode
    start_angle: float
    end_angle: float
    inner_radius: float
    outer_radius: float
    color: str


@dataclass(frozen=True)
class BreadcrumbEntry:
    """A single ancestor in the breadcrumb trail."""

    name: str
    depth_index: int
    x: float = 0.0
    width: float = 0.0

    @property
    def key(self) -> tuple[str, int]:
        return (self.name, self.depth_index)


@dataclass(frozen=True)
class BreadcrumbDiff:
    """Result of diffing the displayed trail against a new ancestor chain."""

    trail: tuple[BreadcrumbEntry, ...]
    added: tuple[BreadcrumbEntry, ...]
    removed: tuple[BreadcrumbEntry, ...]
    kept: tuple[BreadcrumbEntry, ...]
    end_label_x: float


@dataclass(frozen=True)
class DisplayState:
    """Derived hover state consumed by the painter."""

    name: str
    percentage_label: str
    size_label: str
    path_string: str | None
    breadcrumbs: tuple[BreadcrumbEntry, ...]
    end_label_x: float
    highlighted: frozenset[LayoutNode]
    trail_visible: bool

    @classmethod
    def cleared(cls, breadcrumbs: tuple[BreadcrumbEntry, ...] = ()) -> "DisplayState":
        """State after hover-end: nothing selected, trail hidden."""
        return cls(
            name="",
            percentage_label="",
            size_label="",
            path_string=None,
            breadcrumbs=breadcrumbs,
            end_label_x=0.0,
            highlighted=frozenset(),
            trail_visible=False,
        )

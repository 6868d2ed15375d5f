"""Tree navigation: resolve paths to laid-out nodes."""

from bundleburst.models.node import LayoutNode


def split_path(path: str) -> list[str]:
    """Split "./a/b/" style paths into segments, dropping "." and empty parts."""
    return [part for part in path.split("/") if part not in ("", ".")]


def _resolve(node: LayoutNode, parts: list[str]) -> LayoutNode | None:
    if not parts:
        return node
    head, rest = parts[0], parts[1:]
    for child in node.children:
        if child.name != head:
            continue
        # A file can't hold the rest of the path; try the next same-named child.
        found = _resolve(child, rest)
        if found is not None:
            return found
    return None


def find_node(root: LayoutNode, path: str) -> LayoutNode | None:
    """Find the first node reached by following path from the synthetic root.

    Returns the root itself for an empty path and None when no chain of
    children matches every segment. When siblings share a name, each is
    tried in layout order and the first one that resolves the whole path wins.
    """
    return _resolve(root, split_path(path))

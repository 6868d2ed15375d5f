"""Build a nested path tree from flat (path, size) records."""

import math
from collections.abc import Iterable, Sequence
from typing import Any

from loguru import logger

from bundleburst.models.node import TreeNode

ROOT_NAME = "root"


def parse_size(raw: Any) -> float | None:
    """Coerce a record's size column to a number.

    Returns None for anything that is not a usable size: unparsable values
    (e.g. a header row), NaN, infinities and negative numbers.
    """
    if isinstance(raw, bool):
        return None
    try:
        size = float(raw)
    except (TypeError, ValueError):
        return None
    if math.isnan(size):
        return None
    if math.isinf(size) or size < 0:
        logger.warning("Rejecting out-of-range size {!r}", raw)
        return None
    return size


def build_tree(records: Iterable[Sequence[Any]]) -> TreeNode:
    """Turn (path, size) rows into a tree rooted at a synthetic "root" node.

    Directory segments are shared between records; the final segment of each
    record always becomes a new leaf, so duplicate file names under one
    directory are kept side by side. Children keep encounter order.

    Args:
        records: Rows whose first two columns are a "/"-separated path and a
            byte size. Further columns are ignored.

    Returns:
        The synthetic root node.
    """
    root = TreeNode(name=ROOT_NAME)
    skipped = 0
    leaves = 0

    for row in records:
        path, raw_size = row[0], row[1]
        size = parse_size(raw_size)
        if size is None:
            skipped += 1
            continue

        parts = str(path).split("/")
        current = root
        for part in parts[:-1]:
            for child in current.children:
                # Only descend into directories; a file never gains children.
                if child.name == part and child.size is None:
                    current = child
                    break
            else:
                directory = TreeNode(name=part)
                current.children.append(directory)
                current = directory

        current.children.append(TreeNode(name=parts[-1], size=size))
        leaves += 1

    logger.debug("Built tree with {} leaves, skipped {} rows", leaves, skipped)
    return root

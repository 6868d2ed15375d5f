"""Shared test fixtures."""

import json
from pathlib import Path

import pytest

from bundleburst.core.layout.partition import compute_layout
from bundleburst.core.tree.builder import build_tree
from bundleburst.models.node import LayoutResult, TreeNode

# Total 2000. Root: a=1000, f=1000 (tie, builder order). a: e=700, b=300. b: d=200, c=100.
SAMPLE_RECORDS = [
    ("path", "size"),
    ("a/b/c", 100),
    ("a/b/d", 200),
    ("a/e", 700),
    ("f", 1000),
]

SAMPLE_STATS = {
    "timeStamp": 1575426090404,
    "hash": "546142ce1b49a6ba7d6f",
    "size": 10375,
    "assets": [{"name": "bundle.js", "chunks": ["main"], "size": 10375}],
    "chunks": [
        {
            "size": 10375,
            "files": ["bundle.js"],
            "modules": [
                {"name": "./client/App.jsx", "size": 6375, "id": "./client/App.jsx"},
                {"name": "./client/index.js", "size": 1000, "id": "./client/index.js"},
                {
                    "name": "./node_modules/react/index.js",
                    "size": 3000,
                    "id": "./node_modules/react/index.js",
                },
            ],
        }
    ],
}


@pytest.fixture
def sample_tree() -> TreeNode:
    return build_tree(SAMPLE_RECORDS)


@pytest.fixture
def sample_layout(sample_tree: TreeNode) -> LayoutResult:
    """Layout of SAMPLE_RECORDS with unit radius."""
    return compute_layout(sample_tree)


@pytest.fixture
def stats_file(tmp_path: Path) -> Path:
    """Write SAMPLE_STATS to a stats.json and return its path."""
    path = tmp_path / "stats.json"
    path.write_text(json.dumps(SAMPLE_STATS))
    return path

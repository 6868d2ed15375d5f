"""Read build-stats artifacts into (path, size) records."""

import csv
import json
from pathlib import Path
from typing import Any

from loguru import logger

Record = tuple[str, Any]


def normalize_module_path(name: str) -> str:
    """Strip the "./" prefix bundlers put in front of module names."""
    return name.removeprefix("./")


def records_from_stats(data: dict[str, Any]) -> list[Record]:
    """Extract module records from a webpack-style stats dict.

    Modules are read from every entry in ``chunks``; when the stats carry no
    chunks, the top-level ``modules`` list is used instead.

    Args:
        data: Parsed stats JSON.

    Returns:
        List of (module path, size) records. Sizes are passed through as-is.
    """
    modules: list[dict[str, Any]] = []
    chunks = data.get("chunks") or []
    for chunk in chunks:
        modules.extend(chunk.get("modules") or [])
    if not chunks:
        modules = list(data.get("modules") or [])

    if not modules:
        msg = "Stats data has no modules in 'chunks' or 'modules'"
        raise ValueError(msg)

    records: list[Record] = []
    for module in modules:
        name = module.get("name")
        if not isinstance(name, str):
            logger.debug("Skipping module without a name: {!r}", module)
            continue
        records.append((normalize_module_path(name), module.get("size")))
    return records


def read_csv_rows(path: Path) -> list[Record]:
    """Read a two-column CSV. Header rows are left for the tree builder to skip."""
    with path.open(newline="", encoding="utf-8") as f:
        return [(row[0], row[1]) for row in csv.reader(f) if len(row) >= 2]


def read_stats_file(path: Path) -> list[Record]:
    """Load records from a .json stats artifact or a .csv of path,size rows.

    Raises:
        FileNotFoundError: If path does not exist.
        ValueError: If a JSON artifact is not a stats object or has no modules.
    """
    if not path.is_file():
        msg = f"Stats file not found: {path}"
        raise FileNotFoundError(msg)

    if path.suffix.lower() == ".csv":
        records = read_csv_rows(path)
    else:
        data = json.loads(path.read_text(encoding="utf-8"))
        # Some tools export a list of builds; use the latest one.
        if isinstance(data, list):
            if not data:
                msg = f"Stats file {path} contains an empty build list"
                raise ValueError(msg)
            data = data[-1]
        if not isinstance(data, dict):
            msg = f"Stats file {path} does not hold a stats object"
            raise ValueError(msg)
        records = records_from_stats(data)

    logger.debug("Read {} records from {}", len(records), path.name)
    return records

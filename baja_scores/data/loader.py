"""JSON loader for the Baja results dataset.

The dataset is a single JSON object shaped
``{competition: {record_id: team_record}}``.  It is read once and frozen
into read-only mappings so that nothing downstream can modify it.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH: Path = Path(__file__).parent / "baja-data.json"


def freeze(value: Any) -> Any:
    """Recursively convert dicts to read-only mappings and lists to tuples."""
    if isinstance(value, dict):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    if isinstance(value, list):
        return tuple(freeze(v) for v in value)
    return value


def load_dataset(path: Path | str | None = None) -> Mapping[str, Any]:
    """Read and freeze the dataset at *path*.

    Parameters
    ----------
    path:
        JSON file to read.  Falls back to ``DEFAULT_DATA_PATH`` when *None*.

    Raises
    ------
    FileNotFoundError
        If *path* does not exist.
    ValueError
        If the top level of the file is not a JSON object (includes
        :class:`json.JSONDecodeError`).
    """
    path = Path(path) if path is not None else DEFAULT_DATA_PATH
    if not path.is_file():
        raise FileNotFoundError(f"dataset file not found: {path}")

    with path.open(encoding="utf-8") as fh:
        raw = json.load(fh)

    if not isinstance(raw, dict):
        raise ValueError(
            f"dataset must be a JSON object of competitions, got {type(raw).__name__}"
        )

    dataset = freeze(raw)
    logger.info("Loaded %d competitions from %s", len(dataset), path)
    return dataset

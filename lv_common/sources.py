"""Row loading from files.

Rows normally arrive already fetched from an API client. The CLI and tests
read them from disk instead, and this module is the only place that knows
about file formats.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd
import yaml

from lv_common.errors import RowSourceError, wrap_error

logger = logging.getLogger(__name__)

_ROW_CONTAINER_KEYS = ("rows", "data", "items")


def _extract_rows(payload: Any, path: Path) -> List[Dict[str, Any]]:
    if isinstance(payload, dict):
        for key in _ROW_CONTAINER_KEYS:
            if isinstance(payload.get(key), list):
                payload = payload[key]
                break
    if not isinstance(payload, list):
        raise RowSourceError(
            "Row file must contain a list of records",
            context={"path": path, "found": type(payload).__name__},
        )
    rows: List[Dict[str, Any]] = []
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise RowSourceError(
                "Every row must be a mapping",
                context={"path": path, "index": index},
            )
        rows.append(item)
    return rows


def _read_csv(path: Path) -> List[Dict[str, Any]]:
    df = pd.read_csv(path)
    # Empty cells come back as NaN; rows expose them as missing values.
    df = df.astype(object).where(pd.notna(df), None)
    return df.to_dict(orient="records")


def load_rows(path: Path) -> List[Dict[str, Any]]:
    """Load a list of row mappings from a JSON, YAML or CSV file."""
    suffix = path.suffix.lower()
    try:
        if suffix == ".json":
            rows = _extract_rows(json.loads(path.read_text()), path)
        elif suffix in {".yaml", ".yml"}:
            rows = _extract_rows(yaml.safe_load(path.read_text()), path)
        elif suffix == ".csv":
            rows = _read_csv(path)
        else:
            raise RowSourceError(
                f"Unsupported row file type '{suffix or path.name}'",
                context={"path": path},
            )
    except RowSourceError:
        raise
    except (OSError, ValueError, yaml.YAMLError, pd.errors.ParserError) as exc:
        raise wrap_error(
            RowSourceError, f"Cannot read rows from {path}", context={"path": path}, cause=exc
        ) from exc
    logger.debug("Loaded %d rows from %s", len(rows), path)
    return rows

"""Tests for loading rows from files."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from lv_common.errors import RowSourceError
from lv_common.sources import load_rows

pytestmark = pytest.mark.unit_common


def test_json_list(tmp_path: Path) -> None:
    path = tmp_path / "rows.json"
    path.write_text(json.dumps([{"a": 1}, {"a": 2}]))

    assert load_rows(path) == [{"a": 1}, {"a": 2}]


def test_json_wrapped_rows(tmp_path: Path) -> None:
    path = tmp_path / "rows.json"
    path.write_text(json.dumps({"items": [{"a": 1}], "total": 1}))

    assert load_rows(path) == [{"a": 1}]


def test_yaml_rows(tmp_path: Path) -> None:
    path = tmp_path / "rows.yml"
    path.write_text("rows:\n  - name: A\n    hours: 2\n")

    assert load_rows(path) == [{"name": "A", "hours": 2}]


def test_csv_blank_cells_become_none(tmp_path: Path) -> None:
    path = tmp_path / "rows.csv"
    path.write_text("name,hours\nA,2\nB,\n")

    rows = load_rows(path)

    assert [row["name"] for row in rows] == ["A", "B"]
    assert rows[0]["hours"] == 2
    assert rows[1]["hours"] is None


def test_unsupported_suffix(tmp_path: Path) -> None:
    path = tmp_path / "rows.xml"
    path.write_text("<rows/>")

    with pytest.raises(RowSourceError, match="Unsupported"):
        load_rows(path)


def test_non_list_payload(tmp_path: Path) -> None:
    path = tmp_path / "rows.json"
    path.write_text(json.dumps({"total": 1}))

    with pytest.raises(RowSourceError) as excinfo:
        load_rows(path)

    assert excinfo.value.context["found"] == "dict"


def test_broken_json(tmp_path: Path) -> None:
    path = tmp_path / "rows.json"
    path.write_text("[{")

    with pytest.raises(RowSourceError) as excinfo:
        load_rows(path)

    assert isinstance(excinfo.value.__cause__, ValueError)


def test_missing_file(tmp_path: Path) -> None:
    with pytest.raises(RowSourceError):
        load_rows(tmp_path / "absent.json")

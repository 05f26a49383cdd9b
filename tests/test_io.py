"""Tests for JSON IO helpers."""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from assetwise.io import load_json_file, write_json_atomic


def test_write_json_atomic_writes_sorted_payload(tmp_path: Path) -> None:
    out_path = tmp_path / "entry.json"

    write_json_atomic(path=out_path, payload={"b": 1, "a": [1, 2]}, temp_prefix=".tmp-", temp_suffix=".tmp")

    assert load_json_file(out_path) == {"a": [1, 2], "b": 1}
    assert out_path.read_text(encoding="utf-8").index('"a"') < out_path.read_text(encoding="utf-8").index('"b"')
    assert [item.name for item in tmp_path.iterdir()] == ["entry.json"]


def test_write_json_atomic_cleans_temp_file_on_error(tmp_path: Path) -> None:
    out_path = tmp_path / "entry.json"
    temp_prefix = ".tmp-"
    temp_suffix = ".tmp"

    with pytest.raises(TypeError):
        write_json_atomic(
            path=out_path,
            payload={"bad": object()},
            temp_prefix=temp_prefix,
            temp_suffix=temp_suffix,
        )

    leftovers = [
        item for item in tmp_path.iterdir() if item.name.startswith(temp_prefix) and item.name.endswith(temp_suffix)
    ]
    assert not leftovers
    assert not out_path.exists()


def test_write_json_atomic_keeps_previous_file_when_rename_fails(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    out_path = tmp_path / "entry.json"
    out_path.write_text(json.dumps({"version": 1}), encoding="utf-8")

    def _fail_replace(src: str, dst: Path) -> None:
        raise OSError("rename failed")

    monkeypatch.setattr(os, "replace", _fail_replace)

    with pytest.raises(OSError, match="rename failed"):
        write_json_atomic(path=out_path, payload={"version": 2}, temp_prefix=".tmp-", temp_suffix=".tmp")

    assert load_json_file(out_path) == {"version": 1}
    assert [item.name for item in tmp_path.iterdir()] == ["entry.json"]

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

import pytest

from liquidglass.core.presets import PreferenceStore, default_preferences_path
from liquidglass.core.runtime_config import set_config_path


def test_set_get_remove(tmp_path: Path) -> None:
    store = PreferenceStore(tmp_path / "nested" / "preferences.json")
    assert store.get("a") is None

    store.set("a", "1")
    store.set("b", "2")
    assert store.get("a") == "1"
    assert store.keys() == ["a", "b"]

    store.remove("a")
    store.remove("missing")
    assert store.get("a") is None
    assert store.keys() == ["b"]

    on_disk = json.loads(store.path.read_text(encoding="utf-8"))
    assert on_disk == {"b": "2"}


def test_broken_json_is_treated_as_empty(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "preferences.json"
    path.write_text("{broken-json", encoding="utf-8")

    store = PreferenceStore(path)
    with caplog.at_level(logging.WARNING, logger="liquidglass.core.presets.preferences"):
        assert store.get("a") is None
    assert any("破損" in r.getMessage() for r in caplog.records)


def test_non_mapping_json_is_treated_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "preferences.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    assert PreferenceStore(path).keys() == []


def test_failed_write_keeps_previous_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "preferences.json"
    store = PreferenceStore(path)
    store.set("a", "old")

    def _boom(src: str, dst: object) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(os, "replace", _boom)
    with pytest.raises(OSError):
        store.set("a", "new")
    monkeypatch.undo()

    assert store.get("a") == "old"
    # 一時ファイルは残らない
    assert [p.name for p in tmp_path.iterdir()] == ["preferences.json"]


def test_default_preferences_path_uses_data_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    set_config_path(None)
    try:
        assert default_preferences_path() == Path("data") / "preferences.json"
    finally:
        set_config_path(None)

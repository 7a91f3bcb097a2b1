from pathlib import Path

import pytest

from liquidglass.core.runtime_config import data_root_dir, runtime_config, set_config_path


@pytest.fixture(autouse=True)
def _reset_runtime_config() -> None:
    set_config_path(None)
    yield
    set_config_path(None)


def _isolate_config_discovery(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_packaged_defaults(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    assert data_root_dir() == Path("data")
    cfg = runtime_config()
    assert cfg.config_path is None
    assert cfg.preset_storage_key == "com.liquidglass.playground.presets"
    assert cfg.max_saved_presets == 100
    assert cfg.history_max_entries == 50
    assert cfg.export_indent_width == 4
    assert cfg.export_use_tabs is False
    assert cfg.export_view_name == "GlassCard"


def test_discovered_config_overrides_only_given_keys(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)
    discovered = _write(
        tmp_path / ".liquidglass" / "config.yaml",
        'paths:\n  data_dir: "./state"\nhistory:\n  max_entries: 10\n',
    )

    cfg = runtime_config()
    assert cfg.config_path == discovered
    assert cfg.data_dir == Path("state")
    assert cfg.history_max_entries == 10
    # 同じセクション外のキーは既定値のまま
    assert cfg.max_saved_presets == 100


def test_home_config_is_discovered(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)
    home_cfg = _write(
        tmp_path / ".config" / "liquidglass" / "config.yaml",
        "export:\n  indent: tab\n",
    )

    cfg = runtime_config()
    assert cfg.config_path == home_cfg
    assert cfg.export_use_tabs is True
    assert cfg.export_view_name == "GlassCard"


def test_explicit_config_overrides_discovered_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)
    _write(tmp_path / ".liquidglass" / "config.yaml", "presets:\n  max_saved: 30\n")
    explicit = _write(tmp_path / "explicit.yaml", "presets:\n  max_saved: 7\n")

    set_config_path(explicit)
    cfg = runtime_config()
    assert cfg.config_path == explicit
    assert cfg.max_saved_presets == 7


def test_runtime_config_is_cached_until_path_changes(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)

    first = runtime_config()
    assert runtime_config() is first

    explicit = _write(tmp_path / "explicit.yaml", "export:\n  view_name: Card\n")
    set_config_path(explicit)
    assert runtime_config().export_view_name == "Card"


def test_missing_explicit_config_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)
    set_config_path(tmp_path / "missing.yaml")
    with pytest.raises(FileNotFoundError):
        runtime_config()


@pytest.mark.parametrize(
    "text",
    [
        "version: 2\n",
        "history:\n  max_entries: zero\n",
        "presets: [1, 2]\n",
        "- just\n- a list\n",
        "export:\n  view_name: '  '\n",
    ],
)
def test_invalid_config_raises_runtime_error(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, text: str
):
    _isolate_config_discovery(tmp_path, monkeypatch)
    set_config_path(_write(tmp_path / "bad.yaml", text))
    with pytest.raises(RuntimeError):
        runtime_config()


def test_non_positive_limit_raises_value_error(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _isolate_config_discovery(tmp_path, monkeypatch)
    set_config_path(_write(tmp_path / "bad.yaml", "history:\n  max_entries: 0\n"))
    with pytest.raises(ValueError):
        runtime_config()

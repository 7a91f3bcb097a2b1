# どこで: `src/liquidglass/core/runtime_config.py`。
# 何を: config.yaml による実行時設定（探索・ロード・キャッシュ）を提供する。
# なぜ: 保存先や履歴上限、export 書式をコード変更なしでユーザーが指定できるようにするため。

from __future__ import annotations

import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """liquidglass の実行時設定。"""

    config_path: Path | None
    data_dir: Path
    preset_storage_key: str
    max_saved_presets: int
    history_max_entries: int
    export_indent_width: int
    export_use_tabs: bool
    export_view_name: str


_EXPLICIT_CONFIG_PATH: Path | None = None
_CONFIG_CACHE: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """以降の設定探索で使う明示 config パスを設定する。

    Notes
    -----
    `path` を None にすると明示指定を解除し、既定の探索に戻る。
    """

    global _EXPLICIT_CONFIG_PATH, _CONFIG_CACHE
    if path is None:
        _EXPLICIT_CONFIG_PATH = None
        _CONFIG_CACHE = None
        return
    p = Path(str(path)).expanduser()
    _EXPLICIT_CONFIG_PATH = p
    _CONFIG_CACHE = None


def _default_config_candidates() -> tuple[Path, ...]:
    cwd = Path.cwd()
    home = Path.home()
    return (
        cwd / ".liquidglass" / "config.yaml",
        home / ".config" / "liquidglass" / "config.yaml",
    )


def _expand_path_text(text: str) -> str:
    return os.path.expandvars(os.path.expanduser(str(text)))


def _as_optional_path(value: Any) -> Path | None:
    if value is None:
        return None
    s = str(value).strip()
    if not s:
        return None
    return Path(_expand_path_text(s))


def _as_mapping(value: Any, *, key: str) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, dict):
        return dict(value)
    raise RuntimeError(f"{key} は mapping である必要があります: got={value!r}")


def _as_positive_int(value: Any, *, key: str) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool):
        raise RuntimeError(f"{key} は整数である必要があります: got={value!r}")
    try:
        iv = int(value)
    except Exception as exc:
        raise RuntimeError(f"{key} は整数である必要があります: got={value!r}") from exc
    if iv < 1:
        raise ValueError(f"{key} は 1 以上である必要があります: got={iv}")
    return iv


def _as_text(value: Any, *, key: str) -> str | None:
    if value is None:
        return None
    s = str(value).strip()
    if not s:
        raise RuntimeError(f"{key} は空でない文字列である必要があります: got={value!r}")
    return s


def _as_indent(value: Any, *, key: str) -> tuple[int, bool] | None:
    """`export.indent` を (width, use_tabs) へ正規化して返す。"""

    if value is None:
        return None
    if isinstance(value, str) and value.strip().lower() in ("tab", "tabs", "\t"):
        return (1, True)
    width = _as_positive_int(value, key=key)
    if width is None:
        return None
    return (width, False)


def _load_yaml_text(text: str, *, source: str) -> dict[str, Any]:
    try:
        import yaml  # type: ignore[import-untyped]
    except Exception as exc:  # pragma: no cover
        raise RuntimeError(f"PyYAML を import できません: {exc}") from exc

    try:
        data = yaml.safe_load(text)
    except Exception as exc:
        raise RuntimeError(f"config.yaml の読み込みに失敗しました: source={source}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml は mapping である必要があります: source={source}")

    return dict(data)


def _load_yaml_config(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    return _load_yaml_text(text, source=str(path))


def _load_packaged_default_config() -> dict[str, Any]:
    """同梱デフォルト config をロードして dict を返す。"""

    try:
        blob = (
            resources.files("liquidglass")
            .joinpath("resource", "default_config.yaml")
            .read_text(encoding="utf-8")
        )
    except Exception as exc:  # pragma: no cover
        raise RuntimeError(
            "同梱 default_config.yaml の読み込みに失敗しました"
            "（パッケージ配布物の package-data を確認してください）"
        ) from exc

    return _load_yaml_text(blob, source="liquidglass/resource/default_config.yaml")


def _merge_sections(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """トップレベルの mapping セクションだけ 1 段マージして返す。"""

    out = dict(base)
    for key, value in override.items():
        current = out.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged = dict(current)
            merged.update(value)
            out[key] = merged
        else:
            out[key] = value
    return out


def runtime_config() -> RuntimeConfig:
    """実行時設定をロードして返す（キャッシュ）。"""

    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    explicit_path = _EXPLICIT_CONFIG_PATH
    if explicit_path is not None and not explicit_path.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit_path}")

    discovered_path: Path | None = None
    for p in _default_config_candidates():
        if p.is_file():
            discovered_path = p
            break

    payload = _load_packaged_default_config()
    if discovered_path is not None:
        payload = _merge_sections(payload, _load_yaml_config(discovered_path))
    if explicit_path is not None:
        payload = _merge_sections(payload, _load_yaml_config(explicit_path))

    version = payload.get("version")
    if version is None:
        raise RuntimeError(
            "config.yaml の version が未設定です（同梱 default_config.yaml を確認してください）"
        )
    try:
        version_i = int(version)
    except Exception as exc:
        raise RuntimeError(f"config.yaml の version は整数である必要があります: got={version!r}") from exc
    if version_i != 1:
        raise RuntimeError(f"未対応の config.yaml version です: got={version_i}")

    paths = _as_mapping(payload.get("paths"), key="paths")
    data_dir = _as_optional_path(paths.get("data_dir"))
    if data_dir is None:
        raise RuntimeError(
            "paths.data_dir が未設定です（同梱 default_config.yaml を確認してください）"
        )

    presets = _as_mapping(payload.get("presets"), key="presets")
    storage_key = _as_text(presets.get("storage_key"), key="presets.storage_key")
    if storage_key is None:
        raise RuntimeError(
            "presets.storage_key が未設定です（同梱 default_config.yaml を確認してください）"
        )
    max_saved = _as_positive_int(presets.get("max_saved"), key="presets.max_saved")
    if max_saved is None:
        raise RuntimeError(
            "presets.max_saved が未設定です（同梱 default_config.yaml を確認してください）"
        )

    history = _as_mapping(payload.get("history"), key="history")
    max_entries = _as_positive_int(history.get("max_entries"), key="history.max_entries")
    if max_entries is None:
        raise RuntimeError(
            "history.max_entries が未設定です（同梱 default_config.yaml を確認してください）"
        )

    export = _as_mapping(payload.get("export"), key="export")
    indent = _as_indent(export.get("indent"), key="export.indent")
    if indent is None:
        raise RuntimeError(
            "export.indent が未設定です（同梱 default_config.yaml を確認してください）"
        )
    view_name = _as_text(export.get("view_name"), key="export.view_name")
    if view_name is None:
        raise RuntimeError(
            "export.view_name が未設定です（同梱 default_config.yaml を確認してください）"
        )

    cfg = RuntimeConfig(
        config_path=explicit_path or discovered_path,
        data_dir=data_dir,
        preset_storage_key=storage_key,
        max_saved_presets=max_saved,
        history_max_entries=max_entries,
        export_indent_width=indent[0],
        export_use_tabs=indent[1],
        export_view_name=view_name,
    )
    _CONFIG_CACHE = cfg
    return cfg


def data_root_dir() -> Path:
    """プリファレンス等を保存する既定ルートディレクトリを返す。

    上書き順（後勝ち）:
    1) 同梱 default_config.yaml
    2) `./.liquidglass/config.yaml` / `~/.config/liquidglass/config.yaml`
    3) `set_config_path(...)` の明示パス
    """

    cfg = runtime_config()
    return Path(cfg.data_dir)


__all__ = ["RuntimeConfig", "data_root_dir", "runtime_config", "set_config_path"]

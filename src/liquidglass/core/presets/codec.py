# どこで: `src/liquidglass/core/presets/codec.py`。
# 何を: Preset リストの JSON encode/decode を提供する。
# なぜ: PresetStore から保存形式を切り離し、export/import と永続化で同じ形式を使うため。

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import Any

from liquidglass.core.parameters import decode_parameters, encode_parameters

from .preset import Preset


def encode_preset(preset: Preset) -> dict[str, Any]:
    """Preset を JSON 化可能な dict に変換して返す。"""

    return {
        # id は name から導出できるが、保存データを人が読めるように残す。
        "id": preset.id,
        "name": preset.name,
        "parameters": encode_parameters(preset.parameters),
        "created_at": preset.created_at.isoformat(),
        "tags": list(preset.tags),
        "is_favorite": bool(preset.is_favorite),
    }


def dumps_presets(presets: list[Preset]) -> str:
    """Preset のリストを JSON 文字列へ変換して返す。

    Raises
    ------
    ValueError
        NaN/inf を含むなど、厳密な JSON にできない場合。
    """

    return json.dumps([encode_preset(p) for p in presets], allow_nan=False)


def _parse_created_at(raw: object) -> datetime:
    if not isinstance(raw, str):
        raise TypeError(f"created_at は ISO-8601 文字列である必要があります: got={raw!r}")
    dt = datetime.fromisoformat(raw)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def decode_preset(obj: object) -> Preset:
    """JSON 由来の dict から Preset を復元して返す。"""

    if not isinstance(obj, dict):
        raise TypeError("Preset payload must be a dict")

    name = obj.get("name")
    if not isinstance(name, str) or not name:
        raise ValueError(f"preset name は空でない文字列である必要があります: got={name!r}")

    tags_raw = obj.get("tags", [])
    if not isinstance(tags_raw, list):
        raise TypeError(f"tags は list である必要があります: got={tags_raw!r}")

    is_favorite = obj.get("is_favorite", False)
    if not isinstance(is_favorite, bool):
        raise TypeError(f"is_favorite は bool である必要があります: got={is_favorite!r}")

    return Preset(
        name=name,
        parameters=decode_parameters(obj.get("parameters", {})),
        created_at=_parse_created_at(obj.get("created_at")),
        tags=tuple(str(t) for t in tags_raw),
        is_favorite=is_favorite,
    )


def loads_presets(text: str) -> list[Preset]:
    """JSON 文字列から Preset のリストを復元して返す。

    1 件でも壊れていれば例外にする（部分的な復元はしない）。
    """

    obj = json.loads(text)
    if not isinstance(obj, list):
        raise TypeError("Preset list payload must be a list")
    return [decode_preset(item) for item in obj]


__all__ = ["decode_preset", "dumps_presets", "encode_preset", "loads_presets"]

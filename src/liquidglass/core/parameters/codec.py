# どこで: `src/liquidglass/core/parameters/codec.py`。
# 何を: GlassParameters / Color の JSON encode/decode を提供する。
# なぜ: 永続化仕様を値オブジェクト本体から分離し、スキーマ変更の影響範囲を局所化するため。

from __future__ import annotations

import dataclasses
import math
from enum import Enum
from typing import Any

from .color import Color
from .model import COLOR_FIELDS, ENUM_FIELDS, PARAMETER_RANGES, GlassParameters

_DEFAULTS = GlassParameters()
_BOOL_FIELDS: frozenset[str] = frozenset(
    f.name for f in dataclasses.fields(GlassParameters) if isinstance(getattr(_DEFAULTS, f.name), bool)
)


def encode_color(color: Color) -> dict[str, float]:
    """Color を JSON 化可能な dict に変換して返す。"""

    return {
        "red": float(color.red),
        "green": float(color.green),
        "blue": float(color.blue),
        "opacity": float(color.opacity),
    }


def encode_parameters(params: GlassParameters) -> dict[str, Any]:
    """GlassParameters をフラットな dict（フィールド名 -> 値）に変換して返す。"""

    out: dict[str, Any] = {}
    for f in dataclasses.fields(GlassParameters):
        value = getattr(params, f.name)
        if isinstance(value, Color):
            out[f.name] = encode_color(value)
        elif isinstance(value, Enum):
            out[f.name] = value.value
        elif isinstance(value, bool):
            out[f.name] = bool(value)
        else:
            out[f.name] = float(value)
    return out


def _as_finite_float(value: object, *, key: str) -> float:
    # bool は int のサブクラスなので明示的に弾く。
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{key} は数値である必要があります: got={value!r}")
    fv = float(value)
    if not math.isfinite(fv):
        raise ValueError(f"{key} は有限値である必要があります: got={value!r}")
    return fv


def decode_color(obj: object, *, key: str = "color") -> Color:
    """JSON 由来の dict から Color を復元して返す（clamp しない）。"""

    if not isinstance(obj, dict):
        raise TypeError(f"{key} は dict である必要があります: got={obj!r}")
    try:
        red = obj["red"]
        green = obj["green"]
        blue = obj["blue"]
    except KeyError as exc:
        raise ValueError(f"{key} に成分 {exc.args[0]!r} がありません") from exc
    return Color(
        red=_as_finite_float(red, key=f"{key}.red"),
        green=_as_finite_float(green, key=f"{key}.green"),
        blue=_as_finite_float(blue, key=f"{key}.blue"),
        opacity=_as_finite_float(obj.get("opacity", 1.0), key=f"{key}.opacity"),
    )


def decode_parameters(obj: object) -> GlassParameters:
    """JSON 由来の dict から GlassParameters を復元して返す。

    Notes
    -----
    - 欠けているキーは既定値、未知のキーは無視する。
    - 型違い・未知の列挙タグ・非有限値は例外にする（部分的な復元はしない）。
    - 信頼できない入力なので、最後に `validate()` で全フィールドを clamp する。

    Raises
    ------
    TypeError
        obj が dict でない、またはフィールドの型が違う場合。
    ValueError
        列挙タグが未知、または数値が非有限の場合。
    """

    if not isinstance(obj, dict):
        raise TypeError("GlassParameters payload must be a dict")

    kwargs: dict[str, Any] = {}
    for f in dataclasses.fields(GlassParameters):
        name = f.name
        if name not in obj:
            continue
        raw = obj[name]
        if name in PARAMETER_RANGES:
            kwargs[name] = _as_finite_float(raw, key=name)
        elif name in COLOR_FIELDS:
            kwargs[name] = decode_color(raw, key=name)
        elif name in ENUM_FIELDS:
            enum_cls = ENUM_FIELDS[name]
            try:
                kwargs[name] = enum_cls(raw)
            except ValueError as exc:
                raise ValueError(f"{name} の値が未知です: got={raw!r}") from exc
        elif name in _BOOL_FIELDS:
            if not isinstance(raw, bool):
                raise TypeError(f"{name} は bool である必要があります: got={raw!r}")
            kwargs[name] = raw
    return GlassParameters(**kwargs).validate()


__all__ = ["decode_color", "decode_parameters", "encode_color", "encode_parameters"]

"""
どこで: `src/liquidglass/core/parameters/color.py`。
何を: 正規化 RGBA（各成分 0..1）の Color 値と変換ユーティリティを定義する。
なぜ: tint/border/shadow などの色フィールドを同じ表現で扱い、clamp と永続化を 1 箇所に寄せるため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass


def _clamp01(v: float) -> float:
    fv = float(v)
    if math.isnan(fv):
        return 0.0
    return 0.0 if fv < 0.0 else 1.0 if fv > 1.0 else fv


@dataclass(frozen=True, slots=True)
class Color:
    """各成分が 0..1 の RGBA 色。

    生成時には clamp しない（範囲外の値は `clamped()` で正規化する）。
    """

    red: float
    green: float
    blue: float
    opacity: float = 1.0

    def clamped(self) -> Color:
        """全成分を 0..1 に clamp した Color を返す。"""

        return Color(
            red=_clamp01(self.red),
            green=_clamp01(self.green),
            blue=_clamp01(self.blue),
            opacity=_clamp01(self.opacity),
        )

    def with_opacity(self, opacity: float) -> Color:
        return Color(self.red, self.green, self.blue, float(opacity))

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (float(self.red), float(self.green), float(self.blue), float(self.opacity))


def rgb01_to_rgb255(rgb: tuple[float, float, float]) -> tuple[int, int, int]:
    """0..1 float の RGB を 0..255 int の RGB に変換して返す。"""

    r, g, b = rgb
    out: list[int] = []
    for v in (r, g, b):
        out.append(int(round(_clamp01(v) * 255.0)))
    return int(out[0]), int(out[1]), int(out[2])


def color_to_hex(color: Color) -> str:
    """Color を #RRGGBB に変換して返す（opacity は無視）。"""

    r, g, b = rgb01_to_rgb255((color.red, color.green, color.blue))
    return f"#{r:02X}{g:02X}{b:02X}"


WHITE = Color(1.0, 1.0, 1.0)
BLACK = Color(0.0, 0.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)


__all__ = ["BLACK", "BLUE", "Color", "WHITE", "color_to_hex", "rgb01_to_rgb255"]

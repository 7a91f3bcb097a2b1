# どこで: `src/liquidglass/core/presets/library.py`。
# 何を: 同梱の組み込みプリセット（20 種）を定義する。
# なぜ: 初回起動時や保存データ破損時に、常に同じ既定セットへ戻せるようにするため。

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from liquidglass.core.parameters import Color, GlassParameters

from .preset import Preset

# 組み込みプリセットの作成日時は固定にして、export 結果を決定的にする。
BUILTIN_CREATED_AT = datetime(2025, 1, 1, tzinfo=timezone.utc)


def _p(**changes: Any) -> GlassParameters:
    return GlassParameters().replace(**changes)


def _rgb(red: float, green: float, blue: float) -> Color:
    return Color(red, green, blue)


# (name, parameters) を表示順に並べる。
_BUILTINS: tuple[tuple[str, GlassParameters], ...] = (
    ("Frosted", _p(blur_radius=20.0, tint_opacity=0.15)),
    ("Aqua", _p(blur_radius=12.0, tint_color=_rgb(0.0, 0.6, 1.0), tint_opacity=0.2)),
    ("Neon", _p(blur_radius=8.0, border_width=2.0, border_opacity=0.8, brightness=0.1)),
    ("Smoke", _p(blur_radius=25.0, tint_color=_rgb(0.1, 0.1, 0.1), tint_opacity=0.5)),
    ("Crystal", _p(blur_radius=5.0, refraction_index=0.9, saturation=1.5)),
    ("Ice", _p(blur_radius=18.0, tint_color=_rgb(0.7, 0.9, 1.0), tint_opacity=0.25)),
    ("Amber", _p(blur_radius=15.0, tint_color=_rgb(1.0, 0.8, 0.3), tint_opacity=0.2)),
    ("Rose", _p(blur_radius=16.0, tint_color=_rgb(1.0, 0.5, 0.6), tint_opacity=0.18)),
    (
        "Midnight",
        _p(blur_radius=30.0, tint_color=_rgb(0.05, 0.05, 0.15), tint_opacity=0.6, brightness=-0.1),
    ),
    ("Vapor", _p(blur_radius=4.0, tint_opacity=0.05, border_width=0.25)),
    ("Ocean", _p(blur_radius=22.0, tint_color=_rgb(0.0, 0.3, 0.7), tint_opacity=0.3)),
    (
        "Sunset",
        _p(blur_radius=14.0, tint_color=_rgb(1.0, 0.5, 0.2), tint_opacity=0.22, brightness=0.08),
    ),
    ("Forest", _p(blur_radius=18.0, tint_color=_rgb(0.2, 0.7, 0.3), tint_opacity=0.2)),
    ("Lavender", _p(blur_radius=16.0, tint_color=_rgb(0.6, 0.4, 0.9), tint_opacity=0.18)),
    ("Pearl", _p(blur_radius=10.0, tint_opacity=0.08, saturation=1.4, brightness=0.12)),
    (
        "Obsidian",
        _p(blur_radius=28.0, tint_color=_rgb(0.0, 0.0, 0.0), tint_opacity=0.7, brightness=-0.15),
    ),
    (
        "Copper",
        _p(blur_radius=14.0, tint_color=_rgb(0.8, 0.5, 0.2), tint_opacity=0.25, saturation=1.3),
    ),
    (
        "Arctic",
        _p(blur_radius=20.0, tint_color=_rgb(0.8, 0.95, 1.0), tint_opacity=0.2, brightness=0.1),
    ),
    (
        "Sandstone",
        _p(blur_radius=22.0, tint_color=_rgb(0.7, 0.6, 0.4), tint_opacity=0.3, saturation=0.8),
    ),
    (
        "Prism",
        _p(
            blur_radius=6.0,
            refraction_index=1.0,
            saturation=1.8,
            brightness=0.08,
            border_width=1.5,
        ),
    ),
)

BUILTIN_PRESET_NAMES: tuple[str, ...] = tuple(name for name, _ in _BUILTINS)


def builtin_presets() -> list[Preset]:
    """組み込みプリセットの新しいリストを表示順で返す。"""

    return [
        Preset(name=name, parameters=params, created_at=BUILTIN_CREATED_AT)
        for name, params in _BUILTINS
    ]


__all__ = ["BUILTIN_CREATED_AT", "BUILTIN_PRESET_NAMES", "builtin_presets"]

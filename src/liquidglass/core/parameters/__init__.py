# どこで: `src/liquidglass/core/parameters/__init__.py`。
# 何を: パラメータモデルの公開エイリアスをまとめる。
# なぜ: プリセット/履歴/export 層から最小インポートで使えるようにするため。

from .color import Color, color_to_hex, rgb01_to_rgb255
from .codec import decode_color, decode_parameters, encode_color, encode_parameters
from .controls import ALL_CONTROLS, ParameterControl, control_for
from .model import (
    COLOR_FIELDS,
    ENUM_FIELDS,
    PARAMETER_RANGES,
    AnimationCurve,
    BlurStyle,
    GlassParameters,
    GlassVariant,
    clamp,
    field_names,
)

__all__ = [
    "ALL_CONTROLS",
    "AnimationCurve",
    "BlurStyle",
    "COLOR_FIELDS",
    "Color",
    "ENUM_FIELDS",
    "GlassParameters",
    "GlassVariant",
    "PARAMETER_RANGES",
    "ParameterControl",
    "clamp",
    "color_to_hex",
    "control_for",
    "decode_color",
    "decode_parameters",
    "encode_color",
    "encode_parameters",
    "field_names",
    "rgb01_to_rgb255",
]

# どこで: `src/liquidglass/core/parameters/model.py`。
# 何を: ガラス効果のパラメータ値オブジェクト GlassParameters とレンジ表・列挙型を定義する。
# なぜ: プリセット/履歴/チュートリアル/export が同じ不変スナップショットを共有できるようにするため。

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .color import BLACK, BLUE, WHITE, Color


class BlurStyle(str, Enum):
    """背景ブラーのマテリアル種別。値は永続化タグとして使う。"""

    SYSTEM_MATERIAL = "systemMaterial"
    SYSTEM_ULTRA_THIN_MATERIAL = "systemUltraThinMaterial"
    SYSTEM_THIN_MATERIAL = "systemThinMaterial"
    SYSTEM_THICK_MATERIAL = "systemThickMaterial"
    SYSTEM_CHROME_MATERIAL = "systemChromeMaterial"

    @property
    def display_name(self) -> str:
        return _BLUR_STYLE_NAMES[self]


_BLUR_STYLE_NAMES = {
    BlurStyle.SYSTEM_MATERIAL: "Regular",
    BlurStyle.SYSTEM_ULTRA_THIN_MATERIAL: "Ultra Thin",
    BlurStyle.SYSTEM_THIN_MATERIAL: "Thin",
    BlurStyle.SYSTEM_THICK_MATERIAL: "Thick",
    BlurStyle.SYSTEM_CHROME_MATERIAL: "Chrome",
}


class AnimationCurve(str, Enum):
    """アニメーションのタイミングカーブ。"""

    LINEAR = "linear"
    EASE_IN = "easeIn"
    EASE_OUT = "easeOut"
    EASE_IN_OUT = "easeInOut"
    SPRING = "spring"

    @property
    def display_name(self) -> str:
        return _ANIMATION_CURVE_NAMES[self]


_ANIMATION_CURVE_NAMES = {
    AnimationCurve.LINEAR: "Linear",
    AnimationCurve.EASE_IN: "Ease In",
    AnimationCurve.EASE_OUT: "Ease Out",
    AnimationCurve.EASE_IN_OUT: "Ease In-Out",
    AnimationCurve.SPRING: "Spring",
}


class GlassVariant(str, Enum):
    REGULAR = "regular"
    CLEAR = "clear"


# 各数値フィールドの閉区間 [lo, hi]。validate() はこの表だけを見て clamp する。
PARAMETER_RANGES: dict[str, tuple[float, float]] = {
    "blur_radius": (0.0, 50.0),
    "variable_blur_min": (0.0, 25.0),
    "variable_blur_max": (25.0, 50.0),
    "tint_opacity": (0.0, 1.0),
    "gradient_angle": (0.0, 360.0),
    "saturation": (0.0, 2.0),
    "brightness": (-1.0, 1.0),
    "contrast": (0.5, 2.0),
    "light_intensity": (0.0, 1.0),
    "light_angle": (0.0, 360.0),
    "specular_size": (0.0, 1.0),
    "specular_softness": (0.0, 1.0),
    "refraction_intensity": (0.0, 1.0),
    "refraction_index": (0.0, 1.0),
    "shadow_radius": (0.0, 30.0),
    "shadow_offset_x": (-20.0, 20.0),
    "shadow_offset_y": (-20.0, 20.0),
    "corner_radius": (0.0, 50.0),
    "border_width": (0.0, 10.0),
    "border_opacity": (0.0, 1.0),
    "animation_duration": (0.1, 5.0),
    "depth": (0.0, 1.0),
    "parallax_intensity": (0.0, 1.0),
}

COLOR_FIELDS: tuple[str, ...] = (
    "tint_color",
    "gradient_secondary_color",
    "specular_color",
    "shadow_color",
    "border_color",
)

ENUM_FIELDS: dict[str, type[Enum]] = {
    "blur_style": BlurStyle,
    "animation_curve": AnimationCurve,
    "variant": GlassVariant,
}


def clamp(value: float, lo: float, hi: float) -> float:
    """value を [lo, hi] に飽和させて返す（NaN は lo、±inf は対応する端）。"""

    fv = float(value)
    if math.isnan(fv):
        return lo
    return max(min(fv, hi), lo)


@dataclass(frozen=True, slots=True)
class GlassParameters:
    """ガラス効果 1 つぶんの全パラメータ（不変）。

    Notes
    -----
    - 変更は `replace()` で新しいインスタンスを作る。
    - 生成時にはレンジ検査しない。外部入力を取り込んだ後は `validate()` を呼ぶ。
    - 等価性/ハッシュは全フィールドの構造比較。
    """

    # --- blur ---
    blur_radius: float = 20.0
    blur_style: BlurStyle = BlurStyle.SYSTEM_MATERIAL
    use_variable_blur: bool = False
    variable_blur_min: float = 5.0
    variable_blur_max: float = 40.0

    # --- tint ---
    tint_color: Color = WHITE
    tint_opacity: float = 0.15
    use_gradient_tint: bool = False
    gradient_secondary_color: Color = BLUE
    gradient_angle: float = 45.0

    # --- color adjust ---
    saturation: float = 1.2
    desaturate_background: bool = False
    brightness: float = 0.05
    contrast: float = 1.0

    # --- light ---
    light_intensity: float = 0.3
    light_angle: float = 315.0
    show_specular_highlight: bool = True
    specular_size: float = 0.5
    specular_softness: float = 0.7
    specular_color: Color = WHITE

    # --- refraction ---
    enable_refraction: bool = True
    refraction_intensity: float = 0.2
    refraction_index: float = 0.5

    # --- shadow ---
    show_shadow: bool = True
    shadow_color: Color = BLACK.with_opacity(0.3)
    shadow_radius: float = 8.0
    shadow_offset_x: float = 0.0
    shadow_offset_y: float = 5.0

    # --- shape / border ---
    corner_radius: float = 16.0
    border_width: float = 0.5
    border_opacity: float = 0.3
    border_color: Color = WHITE.with_opacity(0.3)
    use_gradient_border: bool = True

    # --- animation ---
    enable_animation: bool = False
    animation_duration: float = 1.0
    animation_curve: AnimationCurve = AnimationCurve.EASE_IN_OUT
    loop_animation: bool = True
    auto_reverse_animation: bool = True

    # --- depth ---
    depth: float = 0.5
    enable_parallax: bool = False
    parallax_intensity: float = 0.3

    variant: GlassVariant = GlassVariant.REGULAR

    def replace(self, **changes: Any) -> GlassParameters:
        """changes を適用した新しい GlassParameters を返す（clamp しない）。

        Raises
        ------
        TypeError
            未知のフィールド名を含む場合。
        """

        return dataclasses.replace(self, **changes)

    def validate(self) -> GlassParameters:
        """全レンジフィールドと色成分を clamp した GlassParameters を返す。

        冪等: `p.validate().validate() == p.validate()`。失敗しない。
        """

        changes: dict[str, Any] = {}
        for name, (lo, hi) in PARAMETER_RANGES.items():
            value = getattr(self, name)
            clamped = clamp(value, lo, hi)
            if clamped != value or type(value) is not float:
                changes[name] = clamped
        for name in COLOR_FIELDS:
            color = getattr(self, name)
            clamped_color = color.clamped()
            if clamped_color != color:
                changes[name] = clamped_color
        if not changes:
            return self
        return dataclasses.replace(self, **changes)

    def is_valid(self) -> bool:
        """全フィールドがレンジ内なら True を返す。"""

        return self.validate() == self


def field_names() -> tuple[str, ...]:
    """GlassParameters のフィールド名を宣言順で返す。"""

    return tuple(f.name for f in dataclasses.fields(GlassParameters))


__all__ = [
    "AnimationCurve",
    "BlurStyle",
    "COLOR_FIELDS",
    "ENUM_FIELDS",
    "GlassParameters",
    "GlassVariant",
    "PARAMETER_RANGES",
    "clamp",
    "field_names",
]

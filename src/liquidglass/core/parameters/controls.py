# どこで: `src/liquidglass/core/parameters/controls.py`。
# 何を: スライダー表示用の ParameterControl（ラベル/レンジ/刻み/アイコン）を定義する。
# なぜ: UI 層がフィールドごとの表示情報を推測せずに済むよう、静的な表として一元管理するため。

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ParameterControl:
    """調整可能パラメータ 1 つぶんのスライダー情報。

    min_value/max_value はスライダーのレンジを示すだけで、実値をクランプしない。
    """

    id: str
    label: str
    min_value: float
    max_value: float
    step: float = 0.1
    icon_name: str = "slider.horizontal.3"


ALL_CONTROLS: tuple[ParameterControl, ...] = (
    ParameterControl("blur_radius", "Blur Radius", 0.0, 50.0, step=1.0, icon_name="aqi.medium"),
    ParameterControl("refraction_index", "Refraction", 0.0, 1.0, step=0.05, icon_name="light.recessed"),
    ParameterControl("tint_opacity", "Tint Opacity", 0.0, 1.0, step=0.05, icon_name="drop.halffull"),
    ParameterControl("corner_radius", "Corner Radius", 0.0, 40.0, step=1.0, icon_name="square.on.square"),
    ParameterControl("saturation", "Saturation", 0.0, 2.0, step=0.1, icon_name="paintpalette"),
    ParameterControl("brightness", "Brightness", -0.5, 0.5, step=0.05, icon_name="sun.max"),
    ParameterControl("shadow_radius", "Shadow", 0.0, 30.0, step=1.0, icon_name="shadow"),
    ParameterControl("border_width", "Border Width", 0.0, 4.0, step=0.25, icon_name="square.dashed"),
    ParameterControl("border_opacity", "Border Opacity", 0.0, 1.0, step=0.05, icon_name="circle.dotted"),
)


def control_for(field: str) -> ParameterControl | None:
    """field 名に対応する ParameterControl を返す。無ければ None。"""

    for control in ALL_CONTROLS:
        if control.id == str(field):
            return control
    return None


__all__ = ["ALL_CONTROLS", "ParameterControl", "control_for"]

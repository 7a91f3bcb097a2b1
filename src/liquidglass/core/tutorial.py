# どこで: `src/liquidglass/core/tutorial.py`。
# 何を: 基本チュートリアルのステップ定義と、ステップを進める TutorialSequencer を提供する。
# なぜ: 手順ごとのパラメータ例を静的データとして持ち、UI から状態遷移だけを呼べるようにするため。

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from liquidglass.core.parameters import Color, GlassParameters


@dataclass(frozen=True, slots=True)
class TutorialStep:
    """チュートリアル 1 ステップ。"""

    id: int
    title: str
    explanation: str
    configuration: GlassParameters
    highlighted_parameter: str | None = None


_DEFAULT = GlassParameters()

BASIC_TUTORIAL_STEPS: tuple[TutorialStep, ...] = (
    TutorialStep(
        id=1,
        title="The Basics",
        explanation=(
            "Start with a simple frosted glass panel. "
            "The material modifier provides the translucent backdrop effect."
        ),
        configuration=_DEFAULT,
    ),
    TutorialStep(
        id=2,
        title="Blur Radius",
        explanation=(
            "Blur radius controls how much the background content is blurred. "
            "Higher values create a more frosted look."
        ),
        configuration=_DEFAULT.replace(blur_radius=35.0),
        highlighted_parameter="blur_radius",
    ),
    TutorialStep(
        id=3,
        title="Tint & Color",
        explanation=(
            "Add a color tint to the glass surface. "
            "Adjust opacity to control how prominent the tint appears."
        ),
        configuration=_DEFAULT.replace(tint_color=Color(0.3, 0.5, 1.0), tint_opacity=0.25),
        highlighted_parameter="tint_opacity",
    ),
    TutorialStep(
        id=4,
        title="Refraction",
        explanation=(
            "Refraction simulates light bending through the glass surface. "
            "It adds a subtle distortion effect."
        ),
        configuration=_DEFAULT.replace(refraction_index=0.8, blur_radius=10.0),
        highlighted_parameter="refraction_index",
    ),
    TutorialStep(
        id=5,
        title="Borders & Edges",
        explanation=(
            "A thin border stroke enhances the glass edge. "
            "Adjust width and opacity for subtle or bold outlines."
        ),
        configuration=_DEFAULT.replace(border_width=1.5, border_opacity=0.6),
        highlighted_parameter="border_width",
    ),
    TutorialStep(
        id=6,
        title="Shadow & Depth",
        explanation=(
            "Shadows create the illusion of depth. "
            "A larger radius produces a softer, more diffused shadow."
        ),
        configuration=_DEFAULT.replace(shadow_radius=20.0, brightness=0.05),
        highlighted_parameter="shadow_radius",
    ),
    TutorialStep(
        id=7,
        title="Putting It Together",
        explanation=(
            "Combine all parameters to craft your perfect glass effect. "
            "Experiment freely and export when ready!"
        ),
        configuration=_DEFAULT.replace(
            blur_radius=18.0,
            refraction_index=0.5,
            tint_color=Color(0.4, 0.6, 1.0),
            tint_opacity=0.15,
            corner_radius=20.0,
            saturation=1.3,
            border_width=0.75,
            border_opacity=0.4,
            shadow_radius=12.0,
        ),
    ),
)


class TutorialSequencer:
    """チュートリアルの進行状態（Inactive / Active(i)）を管理する。

    Notes
    -----
    - `start()` で Active(0)、`exit()` で Inactive に戻る。
    - `next()` は最終ステップで止まる（範囲外へは進まない）。
    - 最終ステップでも自動終了はしない。
    """

    def __init__(self, steps: Sequence[TutorialStep] = BASIC_TUTORIAL_STEPS) -> None:
        steps_t = tuple(steps)
        if not steps_t:
            raise ValueError("steps は 1 つ以上必要です")
        self._steps = steps_t
        self._index: int | None = None

    @property
    def steps(self) -> tuple[TutorialStep, ...]:
        return self._steps

    @property
    def total_steps(self) -> int:
        return len(self._steps)

    @property
    def is_active(self) -> bool:
        return self._index is not None

    @property
    def step_index(self) -> int | None:
        return self._index

    @property
    def current_step(self) -> TutorialStep | None:
        if self._index is None:
            return None
        return self._steps[self._index]

    @property
    def is_last_step(self) -> bool:
        return self._index is not None and self._index == len(self._steps) - 1

    def start(self) -> TutorialStep:
        """先頭ステップから開始し、そのステップを返す。"""

        self._index = 0
        return self._steps[0]

    def next(self) -> bool:
        """次のステップへ進む。非アクティブ/最終ステップなら何もせず False を返す。"""

        if self._index is None or self._index >= len(self._steps) - 1:
            return False
        self._index += 1
        return True

    def exit(self) -> None:
        self._index = None


__all__ = ["BASIC_TUTORIAL_STEPS", "TutorialSequencer", "TutorialStep"]

# どこで: `src/liquidglass/core/presets/preset.py`。
# 何を: 名前付きスナップショット Preset を定義する。
# なぜ: 保存/検索/一覧表示で共通の識別子（name 由来の id）と説明文の導出規則を持たせるため。

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from liquidglass.core.parameters import GlassParameters


def preset_id_for_name(name: str) -> str:
    """表示名から安定 id を導出して返す（小文字化 + 空白をハイフンへ）。"""

    return str(name).lower().replace(" ", "-")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, slots=True, eq=False)
class Preset:
    """名前付きの GlassParameters スナップショット。

    Notes
    -----
    - 同一性は `id` で判定する（parameters が違っても id が同じなら等しい）。
    - `description` は保存せず、parameters から毎回導出する。
    """

    name: str
    parameters: GlassParameters = field(default_factory=GlassParameters)
    created_at: datetime = field(default_factory=_utcnow)
    tags: tuple[str, ...] = ()
    is_favorite: bool = False

    @property
    def id(self) -> str:
        return preset_id_for_name(self.name)

    @property
    def description(self) -> str:
        p = self.parameters
        parts: list[str] = []
        if p.blur_radius > 30:
            parts.append("Heavy blur")
        elif p.blur_radius > 15:
            parts.append("Medium blur")
        else:
            parts.append("Light blur")
        if p.tint_opacity > 0.3:
            parts.append("Strong tint")
        if p.show_specular_highlight:
            parts.append("Specular")
        return " • ".join(parts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Preset):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


__all__ = ["Preset", "preset_id_for_name"]

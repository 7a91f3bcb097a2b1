# どこで: `src/liquidglass/core/presets/store.py`。
# 何を: Preset リストの load/save と CRUD（add/remove/update/find_by_name）を提供する。
# なぜ: 保存データの破損や書き込み失敗を呼び出し側へ漏らさず、常に安全な状態へ縮退させるため。

from __future__ import annotations

import logging

from .codec import dumps_presets, loads_presets
from .library import builtin_presets
from .preferences import PreferenceStore
from .preset import Preset

_logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "com.liquidglass.playground.presets"
DEFAULT_MAX_PRESETS = 100


class PresetStore:
    """PreferenceStore の 1 キーに Preset リスト全体を保存するストア。

    Notes
    -----
    - 変更系は毎回「全件 load → 変更 → 全件 save」で行う（部分更新しない）。
    - 排他制御はしない。単一スレッドから使い、最後の書き込みが勝つ。
    - 失敗は例外にせず、ログを出して既定値/無変更へ縮退する。
    """

    def __init__(
        self,
        preferences: PreferenceStore,
        *,
        key: str = DEFAULT_STORAGE_KEY,
        max_presets: int = DEFAULT_MAX_PRESETS,
    ) -> None:
        if int(max_presets) < 1:
            raise ValueError(f"max_presets は 1 以上である必要があります: got={max_presets}")
        self._preferences = preferences
        self._key = str(key)
        self._max_presets = int(max_presets)

    @property
    def key(self) -> str:
        return self._key

    @property
    def max_presets(self) -> int:
        return self._max_presets

    def load(self) -> list[Preset]:
        """保存済みプリセットを返す。未保存/破損時は組み込みプリセットを返す。"""

        raw = self._preferences.get(self._key)
        if raw is None:
            return builtin_presets()
        try:
            return loads_presets(raw)
        except (TypeError, ValueError) as exc:
            # json.JSONDecodeError は ValueError のサブクラス。
            _logger.warning("プリセットの復元に失敗したため既定セットを使います: key=%s error=%s", self._key, exc)
            return builtin_presets()

    def save(self, presets: list[Preset]) -> bool:
        """presets 全体で保存データを置き換える。失敗時は既存データを残して False を返す。"""

        try:
            payload = dumps_presets(list(presets))
        except (TypeError, ValueError) as exc:
            _logger.warning("プリセットの encode に失敗しました（保存しません）: error=%s", exc)
            return False
        try:
            self._preferences.set(self._key, payload)
        except OSError as exc:
            _logger.warning(
                "プリセットの書き込みに失敗しました: path=%s error=%s", self._preferences.path, exc
            )
            return False
        return True

    def add(self, preset: Preset) -> bool:
        """preset を末尾に追加して保存する。上限到達時は追加しない。"""

        presets = self.load()
        if len(presets) >= self._max_presets:
            _logger.warning(
                "プリセット数が上限に達しているため追加しません: name=%s max=%d",
                preset.name,
                self._max_presets,
            )
            return False
        presets.append(preset)
        return self.save(presets)

    def remove(self, preset_id: str) -> bool:
        """id が一致するプリセットを全て削除して保存する。"""

        presets = self.load()
        kept = [p for p in presets if p.id != str(preset_id)]
        return self.save(kept)

    def update(self, preset: Preset) -> bool:
        """同じ id の最初のプリセットを置き換えて保存する。見つからなければ何もしない。"""

        presets = self.load()
        for i, existing in enumerate(presets):
            if existing.id == preset.id:
                presets[i] = preset
                return self.save(presets)
        return False

    def find_by_name(self, name: str) -> Preset | None:
        """name に大文字小文字を無視して完全一致する最初のプリセットを返す。"""

        target = str(name).lower()
        for preset in self.load():
            if preset.name.lower() == target:
                return preset
        return None

    def export_presets(self, presets: list[Preset]) -> str | None:
        """presets を共有用の JSON 文字列にして返す。encode できなければ None。"""

        try:
            return dumps_presets(list(presets))
        except (TypeError, ValueError) as exc:
            _logger.warning("プリセットの export に失敗しました: error=%s", exc)
            return None

    def import_presets(self, text: str) -> list[Preset] | None:
        """JSON 文字列からプリセットを復元して返す。壊れていれば None。"""

        try:
            return loads_presets(text)
        except (TypeError, ValueError) as exc:
            _logger.warning("プリセットの import に失敗しました: error=%s", exc)
            return None

    def reset_to_defaults(self) -> bool:
        """保存データを組み込みプリセットで置き換える。"""

        return self.save(builtin_presets())


__all__ = ["DEFAULT_MAX_PRESETS", "DEFAULT_STORAGE_KEY", "PresetStore"]

# どこで: `src/liquidglass/core/history.py`。
# 何を: GlassParameters スナップショットの上限付き undo/redo 履歴を提供する。
# なぜ: 値オブジェクトの差し替えだけで、線形な undo/redo を UI から独立に扱えるようにするため。

from __future__ import annotations

from liquidglass.core.parameters import GlassParameters

DEFAULT_MAX_ENTRIES = 50


class HistoryStack:
    """スナップショット列とカーソルからなる線形履歴。

    Notes
    -----
    - 不変条件: 空なら cursor == -1、空でなければ 0 <= cursor < len。
    - 上限を超えたら先頭（最古）から捨てる。末尾は捨てない。
    """

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES) -> None:
        if int(max_entries) < 1:
            raise ValueError(f"max_entries は 1 以上である必要があります: got={max_entries}")
        self._max_entries = int(max_entries)
        self._entries: list[GlassParameters] = []
        self._cursor = -1

    @property
    def max_entries(self) -> int:
        return self._max_entries

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def entries(self) -> tuple[GlassParameters, ...]:
        return tuple(self._entries)

    @property
    def current(self) -> GlassParameters | None:
        """cursor 位置のスナップショットを返す。空なら None。"""

        if self._cursor < 0:
            return None
        return self._entries[self._cursor]

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return self._cursor < len(self._entries) - 1

    def __len__(self) -> int:
        return len(self._entries)

    def push(self, snapshot: GlassParameters) -> None:
        """snapshot を末尾に積む。cursor より後ろ（redo 側）は破棄する。"""

        if self._cursor < len(self._entries) - 1:
            del self._entries[self._cursor + 1 :]
        self._entries.append(snapshot)
        self._cursor = len(self._entries) - 1
        if len(self._entries) > self._max_entries:
            del self._entries[0]
            self._cursor -= 1

    def undo(self) -> GlassParameters | None:
        """1 つ戻ったスナップショットを返す。戻れなければ None（無変更）。"""

        if not self.can_undo:
            return None
        self._cursor -= 1
        return self._entries[self._cursor]

    def redo(self) -> GlassParameters | None:
        """1 つ進んだスナップショットを返す。進めなければ None（無変更）。"""

        if not self.can_redo:
            return None
        self._cursor += 1
        return self._entries[self._cursor]

    def clear(self) -> None:
        self._entries.clear()
        self._cursor = -1


__all__ = ["DEFAULT_MAX_ENTRIES", "HistoryStack"]

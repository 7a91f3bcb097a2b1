# どこで: `src/liquidglass/core/state.py`。
# 何を: 現在の GlassParameters・履歴・購読者をまとめた PlaygroundState を提供する。
# なぜ: グローバルな共有状態を持たず、明示的に生成した状態コンテナを UI 層へ注入できるようにするため。

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from liquidglass.core.history import HistoryStack
from liquidglass.core.parameters import GlassParameters
from liquidglass.core.presets import Preset
from liquidglass.core.runtime_config import runtime_config

Subscriber = Callable[[GlassParameters], None]


class PlaygroundState:
    """編集中パラメータの状態コンテナ。

    Notes
    -----
    - 値の変更は必ず `validate()` を通し、履歴へ積み、購読者へ通知する。
    - undo/redo は履歴を移動するだけで、新しいエントリは積まない。
    - 生成時の初期値を履歴の先頭に積む（最初の変更を undo できるように）。
    """

    def __init__(
        self,
        *,
        history: HistoryStack | None = None,
        initial: GlassParameters | None = None,
    ) -> None:
        self._history = history if history is not None else HistoryStack()
        self._parameters = (initial if initial is not None else GlassParameters()).validate()
        self._subscribers: list[Subscriber] = []
        self._active_preset_name: str | None = None
        self._has_unsaved_changes = False
        self._history.clear()
        self._history.push(self._parameters)

    @classmethod
    def from_config(cls, *, initial: GlassParameters | None = None) -> PlaygroundState:
        """実行時設定（history.max_entries）に従う PlaygroundState を返す。"""

        cfg = runtime_config()
        return cls(history=HistoryStack(cfg.history_max_entries), initial=initial)

    @property
    def parameters(self) -> GlassParameters:
        return self._parameters

    @property
    def history(self) -> HistoryStack:
        return self._history

    @property
    def active_preset_name(self) -> str | None:
        return self._active_preset_name

    @property
    def has_unsaved_changes(self) -> bool:
        return self._has_unsaved_changes

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """変更通知の購読を登録し、解除関数を返す。"""

        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            try:
                self._subscribers.remove(callback)
            except ValueError:
                pass

        return _unsubscribe

    def _notify(self) -> None:
        # 通知中の購読解除に備えてコピーを回す。
        for callback in list(self._subscribers):
            callback(self._parameters)

    def _apply(self, params: GlassParameters, *, record: bool) -> bool:
        validated = params.validate()
        if validated == self._parameters:
            return False
        self._parameters = validated
        if record:
            self._history.push(validated)
        self._notify()
        return True

    def set_parameters(self, params: GlassParameters) -> bool:
        """params を現在値にする。値が変わらなければ何もせず False を返す。"""

        changed = self._apply(params, record=True)
        if changed:
            self._active_preset_name = None
            self._has_unsaved_changes = True
        return changed

    def update(self, **changes: Any) -> bool:
        """現在値の一部フィールドを書き換える。

        Raises
        ------
        TypeError
            未知のフィールド名を含む場合。
        """

        return self.set_parameters(self._parameters.replace(**changes))

    def load_preset(self, preset: Preset) -> None:
        """preset の parameters を適用し、アクティブプリセット名を記録する。"""

        self._apply(preset.parameters, record=True)
        self._active_preset_name = preset.name
        self._has_unsaved_changes = False

    def reset(self) -> None:
        """既定値に戻す（履歴には積む）。"""

        self._apply(GlassParameters(), record=True)
        self._active_preset_name = None
        self._has_unsaved_changes = False

    def new_experiment(self) -> None:
        """既定値から始め直す（履歴も消す）。"""

        self._history.clear()
        self._history.push(GlassParameters().validate())
        self._active_preset_name = None
        self._has_unsaved_changes = False
        self._apply(GlassParameters(), record=False)

    def undo(self) -> bool:
        snapshot = self._history.undo()
        if snapshot is None:
            return False
        self._active_preset_name = None
        self._apply(snapshot, record=False)
        return True

    def redo(self) -> bool:
        snapshot = self._history.redo()
        if snapshot is None:
            return False
        self._active_preset_name = None
        self._apply(snapshot, record=False)
        return True

    def snapshot_preset(self, name: str, *, tags: tuple[str, ...] = ()) -> Preset:
        """現在値から Preset を作って返す（保存は呼び出し側で行う）。"""

        return Preset(name=str(name), parameters=self._parameters, tags=tuple(tags))

    def mark_saved(self) -> None:
        self._has_unsaved_changes = False


__all__ = ["PlaygroundState", "Subscriber"]

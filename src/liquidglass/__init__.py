# どこで: `src/liquidglass/__init__.py`。
# 何を: ルート `liquidglass` パッケージを定義する。
# なぜ: import 起点を `liquidglass` に統一するため。

from __future__ import annotations

from liquidglass.core.history import HistoryStack
from liquidglass.core.parameters import Color, GlassParameters
from liquidglass.core.presets import PreferenceStore, Preset, PresetStore
from liquidglass.core.state import PlaygroundState
from liquidglass.core.tutorial import TutorialSequencer
from liquidglass.export import CodeExporter, IndentStyle

__all__ = [
    "CodeExporter",
    "Color",
    "GlassParameters",
    "HistoryStack",
    "IndentStyle",
    "PlaygroundState",
    "PreferenceStore",
    "Preset",
    "PresetStore",
    "TutorialSequencer",
]

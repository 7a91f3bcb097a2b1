# どこで: `src/liquidglass/core/presets/__init__.py`。
# 何を: プリセット関連（Preset / 組み込みセット / 永続化）の公開エイリアスをまとめる。
# なぜ: 呼び出し側が内部モジュール構成に依存しないようにするため。

from .codec import decode_preset, dumps_presets, encode_preset, loads_presets
from .library import BUILTIN_CREATED_AT, BUILTIN_PRESET_NAMES, builtin_presets
from .preferences import PreferenceStore, default_preferences_path
from .preset import Preset, preset_id_for_name
from .store import DEFAULT_MAX_PRESETS, DEFAULT_STORAGE_KEY, PresetStore

__all__ = [
    "BUILTIN_CREATED_AT",
    "BUILTIN_PRESET_NAMES",
    "DEFAULT_MAX_PRESETS",
    "DEFAULT_STORAGE_KEY",
    "PreferenceStore",
    "Preset",
    "PresetStore",
    "builtin_presets",
    "decode_preset",
    "default_preferences_path",
    "dumps_presets",
    "encode_preset",
    "loads_presets",
    "preset_id_for_name",
]

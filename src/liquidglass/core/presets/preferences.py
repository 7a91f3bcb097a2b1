# どこで: `src/liquidglass/core/presets/preferences.py`。
# 何を: key -> 文字列値を JSON ファイル 1 つに保持する PreferenceStore を提供する。
# なぜ: プラットフォームのプリファレンス領域の代わりに、名前空間付きキーで保存できるようにするため。

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from liquidglass.core.runtime_config import data_root_dir

_logger = logging.getLogger(__name__)


def default_preferences_path() -> Path:
    """PreferenceStore の既定保存パスを返す。

    Notes
    -----
    パスは `{data_dir}/preferences.json`。
    """

    return data_root_dir() / "preferences.json"


class PreferenceStore:
    """JSON ファイル上の小さな key-value ストア。

    Notes
    -----
    - 値は文字列に限る（呼び出し側で encode 済みのものを置く）。
    - 書き込みは毎回ファイル全体を一時ファイル経由で置き換える。
      途中で失敗しても既存ファイルは壊れない。
    - スレッドセーフではない（単一スレッドからの利用を前提とする）。
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        try:
            payload = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except (OSError, UnicodeDecodeError) as exc:
            _logger.warning("プリファレンスを読み込めません: path=%s error=%s", self._path, exc)
            return {}

        try:
            obj = json.loads(payload)
        except json.JSONDecodeError:
            # 破損した JSON は利便性のため空として扱う。
            _logger.warning("破損したプリファレンスを無視します: path=%s", self._path)
            return {}
        if not isinstance(obj, dict):
            _logger.warning("プリファレンスが mapping ではありません: path=%s", self._path)
            return {}
        return {str(k): v for k, v in obj.items() if isinstance(v, str)}

    def _write_all(self, values: dict[str, str]) -> None:
        text = json.dumps(values, indent=2, sort_keys=True) + "\n"
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._path.name}.", suffix=".tmp", dir=str(self._path.parent)
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(text)
            os.replace(tmp_name, self._path)
        except BaseException:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            raise

    def get(self, key: str) -> str | None:
        """key の値を返す。未設定なら None。"""

        return self._read_all().get(str(key))

    def set(self, key: str, value: str) -> None:
        """key に value を保存する（ファイル全体を書き換える）。

        Raises
        ------
        OSError
            書き込みに失敗した場合（既存ファイルはそのまま残る）。
        """

        values = self._read_all()
        values[str(key)] = str(value)
        self._write_all(values)

    def remove(self, key: str) -> None:
        """key を削除する。未設定なら何もしない。"""

        values = self._read_all()
        if str(key) not in values:
            return
        del values[str(key)]
        self._write_all(values)

    def keys(self) -> list[str]:
        return sorted(self._read_all())


__all__ = ["PreferenceStore", "default_preferences_path"]

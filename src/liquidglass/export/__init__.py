# どこで: `src/liquidglass/export/__init__.py`。
# 何を: export 系（コード生成）の公開エイリアスをまとめる。
# なぜ: core に依存し CLI には依存しない headless な出力層として切り出すため。

from .code import CodeExporter, IndentStyle, format_number

__all__ = ["CodeExporter", "IndentStyle", "format_number"]

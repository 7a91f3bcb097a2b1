# どこで: `src/liquidglass/core/__init__.py`。
# 何を: `liquidglass.core` サブパッケージ（モデル/プリセット/履歴/チュートリアル）を定義する。
# なぜ: export や CLI に依存しない中核層を 1 つにまとめるため。

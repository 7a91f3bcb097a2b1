# どこで: `src/liquidglass/__main__.py`。
# 何を: `python -m liquidglass` のエントリポイント。

from __future__ import annotations

from liquidglass.cli import main

if __name__ == "__main__":
    raise SystemExit(main())

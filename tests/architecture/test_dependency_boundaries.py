"""依存境界（core/export/cli）の破りを検出するテスト。"""

from __future__ import annotations

import ast
from importlib.util import resolve_name
from pathlib import Path

_PACKAGE = "liquidglass"


def _src_root() -> Path:
    for parent in Path(__file__).resolve().parents:
        if (parent / "src" / _PACKAGE).is_dir():
            return parent / "src"
    raise RuntimeError("src/liquidglass が見つからない")


def _package_of(path: Path, src_root: Path) -> str:
    """path が属するパッケージ名（相対 import の基点）を返す。"""

    # `pkg/__init__.py` も `pkg/mod.py` も基点は `pkg`。
    parts = path.relative_to(src_root).with_suffix("").parts
    return ".".join(parts[:-1])


def _imported_modules(source: str, *, package: str) -> set[str]:
    modules: set[str] = set()
    for node in ast.walk(ast.parse(source)):
        if isinstance(node, ast.Import):
            modules.update(alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom):
            name = "." * int(node.level or 0) + (node.module or "")
            base = resolve_name(name, package) if node.level else name
            modules.add(base)
            modules.update(f"{base}.{a.name}" for a in node.names if a.name != "*")
    return modules


def _violations(subpackage: str, forbidden: tuple[str, ...]) -> list[str]:
    src_root = _src_root()
    out: list[str] = []
    for path in sorted((src_root / _PACKAGE / subpackage).rglob("*.py")):
        found = _imported_modules(
            path.read_text(encoding="utf-8"), package=_package_of(path, src_root)
        )
        bad = sorted(m for m in found if m.startswith(forbidden))
        if bad:
            out.append(f"{path.relative_to(src_root)}: {', '.join(bad)}")
    return out


def test_core_does_not_depend_on_export_or_cli() -> None:
    bad = _violations("core", ("liquidglass.export", "liquidglass.cli"))
    assert not bad, "依存境界違反の import:\n" + "\n".join(bad)


def test_export_does_not_depend_on_cli() -> None:
    bad = _violations("export", ("liquidglass.cli",))
    assert not bad, "依存境界違反の import:\n" + "\n".join(bad)


def test_relative_imports_are_resolved() -> None:
    got = _imported_modules("from ..export import code\n", package="liquidglass.core")
    assert "liquidglass.export" in got
    assert "liquidglass.export.code" in got

    got = _imported_modules("from . import model\n", package="liquidglass.core.parameters")
    assert "liquidglass.core.parameters.model" in got

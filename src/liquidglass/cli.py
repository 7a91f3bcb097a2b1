"""
どこで: `src/liquidglass/cli.py`。
何を: プリセット一覧・コード export・チュートリアル表示のコマンドラインを提供する。
なぜ: GUI なしでも保存済みプリセットや export 結果を確認・再利用できるようにするため。
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from liquidglass.core.parameters import ALL_CONTROLS, PARAMETER_RANGES, GlassParameters, color_to_hex
from liquidglass.core.presets import PreferenceStore, PresetStore, default_preferences_path
from liquidglass.core.runtime_config import runtime_config, set_config_path
from liquidglass.core.tutorial import BASIC_TUTORIAL_STEPS
from liquidglass.export import CodeExporter, IndentStyle

_logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="liquidglass")
    p.add_argument("--config", default=None, help="明示 config.yaml のパス")
    p.add_argument("-v", "--verbose", action="store_true", help="DEBUG ログを出す")
    sub = p.add_subparsers(dest="command", required=True)

    sub.add_parser("presets", help="保存済みプリセットを一覧表示する")

    ex = sub.add_parser("export", help="パラメータを SwiftUI コードとして出力する")
    ex.add_argument("--preset", default=None, help="プリセット名（大文字小文字は無視）")
    ex.add_argument(
        "--view",
        nargs="?",
        const="",
        default=None,
        help="View 定義で包む（名前省略時は config の export.view_name）",
    )
    indent = ex.add_mutually_exclusive_group()
    indent.add_argument("--tabs", action="store_true", help="タブでインデントする")
    indent.add_argument("--indent", type=int, default=None, help="インデント幅（スペース数）")

    sub.add_parser("tutorial", help="チュートリアルのステップを表示する")
    sub.add_parser("controls", help="スライダー定義を表示する")
    return p.parse_args(argv)


def _open_preset_store() -> PresetStore:
    cfg = runtime_config()
    return PresetStore(
        PreferenceStore(default_preferences_path()),
        key=cfg.preset_storage_key,
        max_presets=cfg.max_saved_presets,
    )


def _cmd_presets(out: TextIO) -> int:
    store = _open_preset_store()
    for preset in store.load():
        tint = color_to_hex(preset.parameters.tint_color)
        fav = "*" if preset.is_favorite else " "
        out.write(f"{fav} {preset.name:<12} {preset.id:<12} {tint}  {preset.description}\n")
    return 0


def _cmd_export(args: argparse.Namespace, out: TextIO, err: TextIO) -> int:
    params = GlassParameters()
    if args.preset is not None:
        preset = _open_preset_store().find_by_name(str(args.preset))
        if preset is None:
            err.write(f"preset が見つかりません: {args.preset}\n")
            return 1
        params = preset.parameters

    if args.tabs:
        exporter = CodeExporter(IndentStyle.tabs())
    elif args.indent is not None:
        exporter = CodeExporter(IndentStyle.spaces(int(args.indent)))
    else:
        exporter = CodeExporter.from_config()

    if args.view is None:
        code = exporter.export(params)
    else:
        view_name = str(args.view) or runtime_config().export_view_name
        code = exporter.export_view(params, view_name=view_name)
    out.write(code + "\n")
    return 0


def _cmd_tutorial(out: TextIO) -> int:
    total = len(BASIC_TUTORIAL_STEPS)
    for step in BASIC_TUTORIAL_STEPS:
        out.write(f"[{step.id}/{total}] {step.title}\n")
        out.write(f"    {step.explanation}\n")
        if step.highlighted_parameter is not None:
            value = getattr(step.configuration, step.highlighted_parameter)
            out.write(f"    -> {step.highlighted_parameter} = {value}\n")
    return 0


def _cmd_controls(out: TextIO) -> int:
    for control in ALL_CONTROLS:
        lo, hi = PARAMETER_RANGES[control.id]
        out.write(
            f"{control.id:<18} {control.label:<16} "
            f"slider={control.min_value:g}..{control.max_value:g} step={control.step:g} "
            f"valid={lo:g}..{hi:g}\n"
        )
    return 0


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.config is not None:
        set_config_path(args.config)

    out = sys.stdout
    err = sys.stderr
    command = str(args.command)
    _logger.debug("command=%s", command)
    if command == "presets":
        return _cmd_presets(out)
    if command == "export":
        return _cmd_export(args, out, err)
    if command == "tutorial":
        return _cmd_tutorial(out)
    if command == "controls":
        return _cmd_controls(out)
    raise AssertionError(f"未知のコマンド: {command}")  # pragma: no cover


__all__ = ["main"]

"""
どこで: `src/liquidglass/export/code.py`。
何を: GlassParameters から「コピペ可能な SwiftUI コード文字列」を生成する純粋関数群を提供する。
なぜ: クリップボード等の UI から分離し、出力仕様をユニットテストで担保するため。
"""

from __future__ import annotations

from dataclasses import dataclass

from liquidglass.core.parameters import GlassParameters
from liquidglass.core.runtime_config import runtime_config

_SHAPE = "RoundedRectangle(cornerRadius: {corner}, style: .continuous)"


@dataclass(frozen=True, slots=True)
class IndentStyle:
    """出力コードのインデント単位。"""

    width: int = 4
    use_tabs: bool = False

    @classmethod
    def spaces(cls, width: int = 4) -> IndentStyle:
        if int(width) < 0:
            raise ValueError(f"indent width は 0 以上である必要があります: got={width}")
        return cls(width=int(width), use_tabs=False)

    @classmethod
    def tabs(cls) -> IndentStyle:
        return cls(width=1, use_tabs=True)

    @property
    def unit(self) -> str:
        return "\t" if self.use_tabs else " " * self.width


def format_number(value: float) -> str:
    """整数値なら小数 0 桁、それ以外は小数 2 桁で返す（例: 20 -> "20", 20.5 -> "20.50"）。"""

    fv = float(value)
    if fv.is_integer():
        return f"{fv:.0f}"
    return f"{fv:.2f}"


class CodeExporter:
    """GlassParameters を SwiftUI の modifier チェーンとして書き出す。

    出力は決定的（時刻や乱数を含まない）。
    """

    def __init__(self, indent_style: IndentStyle | None = None) -> None:
        self._indent_style = indent_style if indent_style is not None else IndentStyle.spaces(4)

    @classmethod
    def from_config(cls) -> CodeExporter:
        """実行時設定（export.indent）に従う CodeExporter を返す。"""

        cfg = runtime_config()
        if cfg.export_use_tabs:
            return cls(IndentStyle.tabs())
        return cls(IndentStyle.spaces(cfg.export_indent_width))

    @property
    def indent_style(self) -> IndentStyle:
        return self._indent_style

    def export(self, params: GlassParameters) -> str:
        """params を modifier チェーンのコード文字列にして返す。"""

        i = self._indent_style.unit
        corner = format_number(params.corner_radius)
        shape = _SHAPE.format(corner=corner)
        tint = params.tint_color

        lines: list[str] = [
            "// Liquid Glass Effect",
            "// Export from LiquidGlass-Playground",
            f"// Blur radius: {format_number(params.blur_radius)}",
            "",
            shape,
            f"{i}.fill(.ultraThinMaterial)",
            f"{i}.overlay {{",
            f"{i}{i}{shape}",
            (
                f"{i}{i}{i}.fill(Color(red: {format_number(tint.red)}, "
                f"green: {format_number(tint.green)}, blue: {format_number(tint.blue)})"
                f".opacity({format_number(params.tint_opacity)}))"
            ),
            f"{i}}}",
        ]

        # border 幅 0 のときは overlay ブロックごと出さない。
        if params.border_width > 0:
            lines += [
                f"{i}.overlay {{",
                f"{i}{i}{shape}",
                (
                    f"{i}{i}{i}.strokeBorder(.white.opacity({format_number(params.border_opacity)}), "
                    f"lineWidth: {format_number(params.border_width)})"
                ),
                f"{i}}}",
            ]

        lines += [
            f"{i}.saturation({format_number(params.saturation)})",
            f"{i}.brightness({format_number(params.brightness)})",
            (
                f"{i}.shadow(color: .black.opacity(0.2), radius: {format_number(params.shadow_radius)}, "
                f"x: 0, y: {format_number(params.shadow_radius / 3)})"
            ),
        ]
        return "\n".join(lines)

    def export_view(self, params: GlassParameters, view_name: str = "GlassCard") -> str:
        """`export()` の結果を名前付き View 定義で包んで返す。

        内側の各行（空行も含む）をインデント 2 段ぶん下げる。
        """

        i = self._indent_style.unit
        body = self.export(params).replace("\n", f"\n{i}{i}")
        lines = [
            "import SwiftUI",
            "",
            f"struct {view_name}: View {{",
            f"{i}var body: some View {{",
            f"{i}{i}{body}",
            f"{i}}}",
            "}",
        ]
        return "\n".join(lines)


__all__ = ["CodeExporter", "IndentStyle", "format_number"]

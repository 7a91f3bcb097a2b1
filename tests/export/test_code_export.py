from __future__ import annotations

from pathlib import Path

import pytest

from liquidglass.core.parameters import Color, GlassParameters
from liquidglass.core.runtime_config import set_config_path
from liquidglass.export import CodeExporter, IndentStyle, format_number

_DEFAULT_EXPORT = """\
// Liquid Glass Effect
// Export from LiquidGlass-Playground
// Blur radius: 20

RoundedRectangle(cornerRadius: 16, style: .continuous)
    .fill(.ultraThinMaterial)
    .overlay {
        RoundedRectangle(cornerRadius: 16, style: .continuous)
            .fill(Color(red: 1, green: 1, blue: 1).opacity(0.15))
    }
    .overlay {
        RoundedRectangle(cornerRadius: 16, style: .continuous)
            .strokeBorder(.white.opacity(0.30), lineWidth: 0.50)
    }
    .saturation(1.20)
    .brightness(0.05)
    .shadow(color: .black.opacity(0.2), radius: 8, x: 0, y: 2.67)"""


def test_default_export_matches_template() -> None:
    assert CodeExporter().export(GlassParameters()) == _DEFAULT_EXPORT


def test_export_is_deterministic() -> None:
    p = GlassParameters().replace(blur_radius=33.0, tint_color=Color(0.1, 0.2, 0.3))
    exporter = CodeExporter()
    assert exporter.export(p) == exporter.export(p)


def test_zero_border_omits_border_overlay() -> None:
    code = CodeExporter().export(GlassParameters().replace(border_width=0.0))
    assert ".strokeBorder" not in code
    assert code.count(".overlay {") == 1


def test_positive_border_emits_border_overlay() -> None:
    code = CodeExporter().export(GlassParameters().replace(border_width=2.0, border_opacity=0.8))
    assert ".strokeBorder(.white.opacity(0.80), lineWidth: 2)" in code
    assert code.count(".overlay {") == 2


@pytest.mark.parametrize(
    ("value", "expected"),
    [(20.0, "20"), (20.5, "20.50"), (0.0, "0"), (-0.1, "-0.10"), (1.0 / 3.0, "0.33")],
)
def test_format_number(value: float, expected: str) -> None:
    assert format_number(value) == expected


def test_fractional_corner_radius_uses_two_decimals() -> None:
    code = CodeExporter().export(GlassParameters().replace(corner_radius=20.5))
    assert "RoundedRectangle(cornerRadius: 20.50, style: .continuous)" in code


def test_tint_color_components_are_exported() -> None:
    code = CodeExporter().export(GlassParameters().replace(tint_color=Color(0.0, 0.6, 1.0)))
    assert ".fill(Color(red: 0, green: 0.60, blue: 1).opacity(0.15))" in code


def test_tab_indent() -> None:
    code = CodeExporter(IndentStyle.tabs()).export(GlassParameters())
    lines = code.split("\n")
    assert "\t.fill(.ultraThinMaterial)" in lines
    assert "\t\t\t.fill(Color(red: 1, green: 1, blue: 1).opacity(0.15))" in lines


def test_export_view_wraps_and_indents() -> None:
    exporter = CodeExporter(IndentStyle.spaces(2))
    code = exporter.export_view(GlassParameters(), view_name="HeroCard")
    lines = code.split("\n")

    assert lines[:4] == [
        "import SwiftUI",
        "",
        "struct HeroCard: View {",
        "  var body: some View {",
    ]
    assert lines[4] == "    // Liquid Glass Effect"
    assert "      .fill(.ultraThinMaterial)" in lines
    assert lines[-2:] == ["  }", "}"]


def test_negative_indent_rejected() -> None:
    with pytest.raises(ValueError):
        IndentStyle.spaces(-1)


def test_from_config_reads_indent(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    cfg = tmp_path / "config.yaml"
    cfg.write_text("export:\n  indent: tab\n", encoding="utf-8")

    set_config_path(cfg)
    try:
        exporter = CodeExporter.from_config()
    finally:
        set_config_path(None)
    assert exporter.indent_style == IndentStyle.tabs()

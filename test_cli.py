#!/usr/bin/env python3
"""Tests for the command-line runner and font discovery."""

import json
import sys

import pytest

from fontier.cli import build_arg_parser, run_cli
from fontier.config import ConfigManager
from fontier.font_manager import FontManager
from fontier.raster import PILFontResource


@pytest.fixture
def config(tmp_path):
    return ConfigManager(config_dir=tmp_path / "config")


def run(argv, config):
    args = build_arg_parser().parse_args(argv)
    return run_cli(args, config)


def test_builds_atlas_from_font_file(test_ttf, tmp_path, config, capsys):
    out_dir = tmp_path / "out"

    code = run([str(test_ttf), "--size", "20", "--chars", "128", "--out", str(out_dir)], config)

    assert code == 0
    assert (out_dir / "TestSans-Regular.png").exists()
    meta = json.loads((out_dir / "TestSans-Regular.json").read_text(encoding="utf-8"))
    assert len(meta["glyph_width"]) == 128
    assert "Rendered 2/128 glyphs" in capsys.readouterr().out


def test_glyphs_and_preview_without_atlas(test_ttf, tmp_path, config):
    out_dir = tmp_path / "out"

    code = run(
        [str(test_ttf), "-n", "128", "-o", str(out_dir), "--name", "t",
         "--glyphs", "--no-atlas", "--preview", "A A"],
        config,
    )

    assert code == 0
    assert (out_dir / "t_glyphs.json").exists()
    assert (out_dir / "t_0041.png").exists()
    assert (out_dir / "t_preview.png").exists()
    assert not (out_dir / "t.png").exists()


def test_preview_without_any_glyphs(test_ttf, tmp_path, config, capsys):
    out_dir = tmp_path / "out"

    code = run(
        [str(test_ttf), "-n", "128", "-o", str(out_dir), "--name", "t",
         "--glyphs", "--no-atlas", "--preview", "zz"],
        config,
    )

    assert code == 1
    assert "none of the preview characters have glyphs" in capsys.readouterr().out
    assert not (out_dir / "t_preview.png").exists()
    assert not (out_dir / "t_glyphs.json").exists()


def test_family_lookup_uses_configured_dirs(test_ttf, tmp_path, config):
    config.set("font_dirs", [str(test_ttf.parent)])

    code = run(["--family", "TestSans", "-n", "100", "-o", str(tmp_path / "out")], config)

    assert code == 0
    assert (tmp_path / "out" / "TestSans.png").exists()


def test_missing_font_argument(config, capsys):
    assert run([], config) == 2
    assert "required" in capsys.readouterr().out


def test_missing_font_file(tmp_path, config):
    assert run([str(tmp_path / "missing.ttf")], config) == 1


def test_non_positive_char_count(test_ttf, tmp_path, config):
    assert run([str(test_ttf), "--chars", "0", "-o", str(tmp_path)], config) == 2


def test_unknown_family(config):
    assert run(["--family", "NoSuchFamily123"], config) == 1


def test_font_manager_matching(test_ttf):
    manager = FontManager(custom_dirs=[test_ttf.parent], include_system=False)

    assert manager.get_available_families() == ["TestSans"]
    assert manager.select_font_file(["Missing", "testsans"]) == test_ttf
    assert manager.select_font_file(["Sans"]) == test_ttf
    assert manager.select_font_file(["Serif"]) is None
    assert isinstance(manager.load_font(["TestSans"], 16), PILFontResource)
    assert manager.load_font(["Serif"], 16) is None


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))

"""
Tests for render parameters and the command line.
"""

import pytest
from PIL import Image

import endless_knot
from endless_knot import RenderConfig, build_parser, grid_label, main


class TestRenderConfig:
    def test_defaults(self) -> None:
        cfg = RenderConfig().validate()
        assert (cfg.depth, cfg.scale, cfg.tiling) == (2, 3.0, "auto")

    @pytest.mark.parametrize("depth,scale", [(0, 1.0), (4, 5.0), (3, 2.3), (1, 4.9)])
    def test_in_range(self, depth, scale) -> None:
        RenderConfig(depth=depth, scale=scale).validate()

    @pytest.mark.parametrize("depth,scale", [
        (-1, 1.0), (5, 1.0), (1, 0.9), (1, 5.1), (1, 2.25), (True, 1.0), (1.0, 1.0)])
    def test_out_of_range(self, depth, scale) -> None:
        with pytest.raises(ValueError):
            RenderConfig(depth=depth, scale=scale).validate()

    def test_bad_tiling(self) -> None:
        with pytest.raises(ValueError):
            RenderConfig(tiling="mosaic").validate()

    def test_copy_tiling_needs_whole_scale(self) -> None:
        RenderConfig(scale=3.0, tiling="copy").validate()
        with pytest.raises(ValueError, match="whole-number"):
            RenderConfig(scale=2.5, tiling="copy").validate()

    @pytest.mark.parametrize("scale", ["2", None, True, [2.0]])
    def test_non_numeric_scale(self, scale) -> None:
        with pytest.raises(ValueError, match="scale"):
            RenderConfig(scale=scale).validate()


def test_grid_label() -> None:
    assert grid_label(0) == "1 × 1"
    assert grid_label(4) == "16 × 16"


class TestMain:
    def test_parser_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.depth == 2
        assert args.scale == 3.0
        assert args.out is None

    def test_writes_png(self, tmp_path, capsys) -> None:
        out = tmp_path / "knot.png"
        assert main(["--depth", "1", "--scale", "2", "--out", str(out)]) == 0
        with Image.open(out) as img:
            assert img.size == (108, 108)
            assert img.mode == "RGB"
        printed = capsys.readouterr().out
        assert "2 × 2" in printed
        assert str(out) in printed

    def test_fractional_scale_png(self, tmp_path) -> None:
        out = tmp_path / "knot.png"
        assert main(["--depth", "1", "--scale", "2.5", "--show-path", "--out", str(out)]) == 0
        with Image.open(out) as img:
            assert img.size == (135, 135)

    def test_print_path(self, capsys) -> None:
        assert main(["--depth", "1", "--print-path"]) == 0
        lines = capsys.readouterr().out.split("\n")
        assert lines[:4] == ["0 0", "0 1", "1 1", "1 0"]

    def test_rejects_out_of_range(self, capsys) -> None:
        assert main(["--depth", "7"]) == 2
        assert "depth" in capsys.readouterr().err

    def test_rejects_copy_tiling_at_fractional_scale(self, tmp_path, capsys) -> None:
        out = tmp_path / "knot.png"
        argv = ["--depth", "1", "--scale", "2.5", "--tiling", "copy", "--out", str(out)]
        assert main(argv) == 2
        assert "whole-number" in capsys.readouterr().err
        assert not out.exists()

    def test_shows_without_out(self, monkeypatch) -> None:
        shown = []
        monkeypatch.setattr(Image.Image, "show", lambda self, *a, **k: shown.append(self.size))
        assert endless_knot.main(["--depth", "0", "--scale", "1"]) == 0
        assert shown == [(27, 27)]

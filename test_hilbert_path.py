"""
Tests for the Hilbert polyline generator.
"""

import pytest

from hilbert_path import generate, grid_side, path_steps


class TestGenerate:
    def test_depth_zero_is_origin(self) -> None:
        assert generate(0) == [(0, 0)]

    def test_depth_one(self) -> None:
        # first turn is +90 from +x, so the walk heads +y first
        assert generate(1) == [(0, 0), (0, 1), (1, 1), (1, 0)]

    @pytest.mark.parametrize("depth", range(5))
    def test_one_point_per_cell(self, depth: int) -> None:
        assert len(generate(depth)) == 4 ** depth

    @pytest.mark.parametrize("depth", range(5))
    def test_covers_grid_exactly_once(self, depth: int) -> None:
        n = grid_side(depth)
        points = generate(depth)
        assert len(set(points)) == len(points)
        assert set(points) == {(x, y) for x in range(n) for y in range(n)}

    @pytest.mark.parametrize("depth", range(5))
    def test_unit_axis_aligned_steps(self, depth: int) -> None:
        for (xo, yo), (xn, yn) in path_steps(generate(depth)):
            dx, dy = xn - xo, yn - yo
            assert (abs(dx), abs(dy)) in ((1, 0), (0, 1))

    def test_starts_at_origin(self) -> None:
        assert generate(3)[0] == (0, 0)

    def test_deterministic(self) -> None:
        assert generate(4) == generate(4)

    def test_depth_two_ends_on_bottom_edge(self) -> None:
        # the depth-1 walk ends at (1, 0); the same corner pattern scales up
        assert generate(2)[-1] == (3, 0)


class TestDepthValidation:
    @pytest.mark.parametrize("depth", [-1, -5])
    def test_negative_depth_rejected(self, depth: int) -> None:
        with pytest.raises(ValueError):
            generate(depth)

    @pytest.mark.parametrize("depth", [1.0, "2", None, True])
    def test_non_integer_depth_rejected(self, depth) -> None:
        with pytest.raises(ValueError):
            generate(depth)

    def test_grid_side(self) -> None:
        assert [grid_side(d) for d in range(5)] == [1, 2, 4, 8, 16]
        with pytest.raises(ValueError):
            grid_side(-1)


class TestPathSteps:
    def test_empty_and_single(self) -> None:
        assert list(path_steps([])) == []
        assert list(path_steps([(0, 0)])) == []

    def test_pairs(self) -> None:
        pts = [(0, 0), (0, 1), (1, 1)]
        assert list(path_steps(pts)) == [((0, 0), (0, 1)), ((0, 1), (1, 1))]

    def test_step_count(self) -> None:
        assert len(list(path_steps(generate(3)))) == 4 ** 3 - 1

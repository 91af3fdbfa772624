# tests/map/test_cost_grid.py
import numpy as np
import pytest

from crucible.map.cost_grid import CostGrid
from crucible.map.base import GridFormatError
from crucible.types import Position


def test_parse_rows_and_cols():
    grid = CostGrid.from_text("123\n456\n")
    assert grid.rows == 2
    assert grid.cols == 3
    assert grid.cost_at(Position(0, 0)) == 1
    assert grid.cost_at(Position(2, 1)) == 6
    assert grid.origin == Position(0, 0)
    assert grid.destination == Position(2, 1)


def test_parse_ignores_surrounding_whitespace():
    grid = CostGrid.from_text("\n  12\n  34  \n\n")
    assert grid.to_text() == "12\n34"


@pytest.mark.parametrize("text, fragment", [
    ("12a\n456", "row 0, column 2"),
    ("123\n4-6", "row 1, column 1"),
    ("123\n45", "Row 1 has length 2"),
    ("", "at least one cell"),
])
def test_malformed_input_rejected_at_construction(text, fragment):
    with pytest.raises(GridFormatError) as excinfo:
        CostGrid.from_text(text)
    assert fragment in str(excinfo.value)


def test_array_constructor_validation():
    with pytest.raises(GridFormatError):
        CostGrid([[1, 2], [3]])
    with pytest.raises(GridFormatError):
        CostGrid([1, 2, 3])
    with pytest.raises(GridFormatError):
        CostGrid([[1, -2]])
    # GridFormatError 仍然是 ValueError
    with pytest.raises(ValueError):
        CostGrid([[]])


def test_cost_at_out_of_bounds_does_not_wrap():
    grid = CostGrid.from_text("12\n34")
    assert not grid.is_inside(Position(-1, 0))
    assert not grid.is_inside(Position(2, 0))
    with pytest.raises(IndexError):
        grid.cost_at(Position(-1, 0))
    with pytest.raises(IndexError):
        grid.cost_at(Position(0, 2))


def test_grid_is_immutable():
    source = np.array([[1, 2], [3, 4]])
    grid = CostGrid(source)
    source[0, 0] = 9  # 构造后修改源数组不影响 grid
    assert grid.cost_at(Position(0, 0)) == 1
    with pytest.raises(ValueError):
        grid.data[0, 0] = 5


def test_multi_digit_costs_cannot_render_as_text():
    grid = CostGrid([[10, 1]])
    assert grid.cost_at(Position(0, 0)) == 10
    with pytest.raises(ValueError):
        grid.to_text()


@pytest.mark.parametrize("data", [
    [[1.7, 2.0]],          # 浮点不能被静默截断
    [[2 ** 63]],           # uint64，超出 int64
    [[2 ** 70]],           # object dtype
    [[True, False]],
])
def test_non_int64_costs_rejected(data):
    with pytest.raises(GridFormatError):
        CostGrid(data)


def test_unsigned_costs_accepted():
    grid = CostGrid(np.array([[1, 2], [3, 4]], dtype=np.uint8))
    assert grid.data.dtype == np.int64
    assert grid.cost_at(Position(1, 1)) == 4


def test_from_lines_strips_line_terminators():
    grid = CostGrid.from_lines(["12\n", "34\r\n"])
    assert grid.to_text() == "12\n34"


def test_from_lines_accepts_open_file(tmp_path):
    path = tmp_path / "grid.txt"
    path.write_text("123\n456\n789\n", encoding="utf-8")
    with open(path, "r", encoding="utf-8") as f:
        grid = CostGrid.from_lines(f)
    assert (grid.rows, grid.cols) == (3, 3)
    assert grid.cost_at(grid.destination) == 9

from ascii_raster.text_grid import TextGrid, as_text_grid, split_lines


def test_ragged_rows_keep_their_length() -> None:
    grid = TextGrid.from_text("ab\nabcd\nc")
    assert grid.lines == ("ab", "abcd", "c")
    assert grid.columns == 4
    assert grid.rows == 3


def test_reads_past_row_end_are_blank() -> None:
    grid = TextGrid.from_text("ab\nabcd")
    assert grid.char_at(1, 0) == "b"
    assert grid.char_at(3, 0) == " "
    assert grid.lines[0] == "ab"


def test_trailing_carriage_return_does_not_shift_columns() -> None:
    grid = TextGrid.from_text("ab\r\ncd\r\n")
    assert grid.lines == ("ab", "cd", "")
    assert grid.columns == 2


def test_only_one_trailing_carriage_return_is_stripped() -> None:
    assert split_lines("a\r\rb\r\r") == ("a\r\rb\r",)


def test_trailing_newline_yields_empty_last_row() -> None:
    grid = TextGrid.from_text("A\n")
    assert grid.rows == 2
    assert grid.columns == 1


def test_empty_text() -> None:
    grid = TextGrid.from_text("")
    assert grid.rows == 1
    assert grid.columns == 0
    assert grid.is_empty
    assert list(grid.cells()) == []


def test_cells_are_row_major_and_padded() -> None:
    grid = TextGrid.from_text("ab\nc")
    assert list(grid.cells()) == [
        (0, 0, "a"),
        (1, 0, "b"),
        (0, 1, "c"),
        (1, 1, " "),
    ]


def test_as_text_grid_passes_grids_through() -> None:
    grid = TextGrid(lines=("x",))
    assert as_text_grid(grid) is grid
    assert as_text_grid("x") == grid

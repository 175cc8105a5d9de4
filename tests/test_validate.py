import pytest

from maze_search import (
    Cell,
    DuplicateEnd,
    DuplicateStart,
    EmptyGrid,
    EndNotFound,
    InvalidCharacter,
    MangledRows,
    StartNotFound,
    load_maze,
    parse_rows,
    validate_rows,
)


def test_empty_grid():
    with pytest.raises(EmptyGrid):
        validate_rows([])
    with pytest.raises(EmptyGrid):
        load_maze("")


def test_mangled_rows():
    with pytest.raises(MangledRows) as exc:
        load_maze("A  \n B")
    assert exc.value.row == 1


def test_mangled_rows_wins_over_missing_markers():
    with pytest.raises(MangledRows):
        load_maze("   \n x")


def test_start_not_found():
    with pytest.raises(StartNotFound):
        load_maze("  \n B")


def test_start_not_found_wins_over_invalid_character():
    with pytest.raises(StartNotFound):
        load_maze("xB")


def test_end_not_found():
    with pytest.raises(EndNotFound):
        load_maze("A ")


def test_end_not_found_wins_over_invalid_character():
    with pytest.raises(EndNotFound):
        load_maze("Ax")


def test_invalid_character():
    with pytest.raises(InvalidCharacter) as exc:
        load_maze("AxB")
    assert exc.value.char == "x"
    assert exc.value.coord == (0, 1)


@pytest.mark.parametrize("symbol", ["*", "@", ".", "\t"])
def test_output_and_foreign_symbols_are_rejected(symbol):
    with pytest.raises(InvalidCharacter):
        load_maze("A" + symbol + "B")


def test_hash_walls_are_accepted():
    maze = load_maze("A#B")
    assert maze[(0, 1)] is Cell.WALL


def test_duplicate_start():
    with pytest.raises(DuplicateStart) as exc:
        load_maze("A A\n  B")
    assert exc.value.coord == (0, 2)


def test_duplicate_end():
    with pytest.raises(DuplicateEnd) as exc:
        load_maze("AB\nB ")
    assert exc.value.coord == (1, 0)


def test_valid_grid_has_exactly_one_start_and_end():
    rows = parse_rows("A  \n █ \n  B")
    assert validate_rows(rows) is None
    maze = load_maze("A  \n █ \n  B")
    assert maze.count(Cell.START) == 1
    assert maze.count(Cell.END) == 1


@pytest.mark.parametrize("sep", ["\x0c", "\x0b", "\r", "\u2028", "\x85", "\x1c"])
def test_only_newline_breaks_rows(sep):
    with pytest.raises(InvalidCharacter) as exc:
        load_maze("A " + sep + " B")
    assert exc.value.char == sep
    assert exc.value.coord == (0, 2)


def test_crlf_line_endings_are_accepted():
    maze = load_maze("A \r\n B\r\n")
    assert (maze.height, maze.width) == (2, 2)

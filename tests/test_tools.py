import pytest

from aoc2015 import tools


def test_read_lines(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("first\nsecond\n", encoding="utf-8")
    assert tools.read_lines(path) == ["first", "second"]


def test_read_lines_without_trailing_newline(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("only", encoding="utf-8")
    assert tools.read_lines(path) == ["only"]


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        tools.read_lines(tmp_path / "missing.txt")


def test_split_string():
    assert tools.split_string("1x2x3", "x") == ["1", "2", "3"]
    assert tools.split_string("a => b", " => ") == ["a", "b"]


@pytest.mark.parametrize("text", ["", "abc", ",,", "a,b,,c,"])
def test_split_string_round_trip(text):
    assert ",".join(tools.split_string(text, ",")) == text


def test_split_string_empty_delimiter():
    with pytest.raises(ValueError):
        tools.split_string("abc", "")


def test_remove_nonalpha():
    assert tools.remove_nonalpha("a1b!C d") == "abCd"


def test_remove_nonalphanumeric():
    assert tools.remove_nonalphanumeric("a1-b!C 9") == "a1bC9"


def test_integers_in_text():
    assert tools.integers_in_text("10 abc 20 7x -4") == [10, 20, 7, -4]


def test_integers_in_text_skips_out_of_range():
    assert tools.integers_in_text("99999999999 5") == [5]


def test_parse_ints():
    assert tools.parse_ints([" 1 2", "", "3", "   "]) == [12, 3]


def test_parse_ints_rejects_text():
    with pytest.raises(ValueError):
        tools.parse_ints(["abc"])


def test_combine_ints_in_text():
    assert tools.combine_ints_in_text("Time: 7 15 30") == 71530


def test_combine_ints_in_text_without_numbers():
    with pytest.raises(ValueError):
        tools.combine_ints_in_text("no numbers")


def test_strings_to_chars():
    assert tools.strings_to_chars(["ab", ""]) == [["a", "b"], []]


def test_subtract_grid_from_itself_is_zero():
    grid = [[1, 2, 3], [4, 5, 6]]
    assert tools.subtract_grids(grid, grid) == [[0, 0, 0], [0, 0, 0]]


def test_multiply_by_ones_is_identity():
    grid = [[1, -2], [3, 4]]
    ones = [[1, 1], [1, 1]]
    assert tools.multiply_grids(grid, ones) == grid


def test_grid_size_mismatch():
    with pytest.raises(ValueError):
        tools.subtract_grids([[1]], [[1], [2]])
    with pytest.raises(ValueError):
        tools.multiply_grids([[1, 2]], [[1]])


def test_is_digits():
    assert tools.is_digits("0123456789") is True
    assert tools.is_digits("12a") is False
    assert tools.is_digits("") is True


@pytest.mark.parametrize("base", [2, 8, 10, 16, 36])
@pytest.mark.parametrize("num", [1, 7, 255, 1000, 123456])
def test_to_base_round_trip(num, base):
    assert int(tools.to_base(num, base), base) == num


def test_to_base_uses_upper_case():
    assert tools.to_base(255, 16) == format(255, "X")


def test_to_base_zero():
    assert tools.to_base(0, 2) == "0"


@pytest.mark.parametrize("base", [1, 37])
def test_to_base_invalid(base):
    with pytest.raises(ValueError):
        tools.to_base(10, base)


def test_format_duration_units():
    assert tools.format_duration(0.0005) == "Time: 500 microseconds"
    assert tools.format_duration(0.25) == "Time: 250 milliseconds"
    assert tools.format_duration(3.5) == "Time: 3 seconds"
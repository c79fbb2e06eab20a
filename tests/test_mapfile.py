import pytest

from solong.mapfile import (
    MapError,
    check_arguments,
    count_elements,
    load_map,
    read_lines,
    validate_map,
)

GOOD_ROWS = [
    "1111111",
    "1P0C0E1",
    "1000001",
    "1111111",
]


def _write(tmp_path, text, name="map.ber"):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_check_arguments_returns_path():
    assert check_arguments(["maps/level.ber"]) == "maps/level.ber"


@pytest.mark.parametrize("args", [[], ["a.ber", "b.ber"]])
def test_check_arguments_wrong_count(args):
    with pytest.raises(MapError) as info:
        check_arguments(args)
    assert str(info.value) == "parameter error!"


@pytest.mark.parametrize(
    "path", ["map", "map.txt", "map.ber.ber", "map.be", "./map.ber", "map.berx"]
)
def test_check_arguments_bad_extension(path):
    with pytest.raises(MapError) as info:
        check_arguments([path])
    assert str(info.value) == "check extension!"


def test_read_lines_strips_newlines(tmp_path):
    path = _write(tmp_path, "\n".join(GOOD_ROWS) + "\n")
    assert read_lines(path) == GOOD_ROWS


def test_read_lines_without_final_newline(tmp_path):
    path = _write(tmp_path, "\n".join(GOOD_ROWS))
    assert read_lines(path) == GOOD_ROWS


def test_read_lines_keeps_empty_lines(tmp_path):
    path = _write(tmp_path, "ab\n\ncd\n")
    assert read_lines(path) == ["ab", "", "cd"]


def test_read_lines_empty_file(tmp_path):
    path = _write(tmp_path, "")
    assert read_lines(path) == []


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(MapError) as info:
        read_lines(tmp_path / "absent.ber")
    assert str(info.value) == "map not found!"


def test_count_elements_ignores_border_rows():
    rows = ["1PCE1", "1PCE1", "1C0X1", "1PCE1"]
    assert count_elements(rows) == {"C": 2, "E": 1, "P": 1, "other": 1}


def test_count_elements_good_map_is_consistent():
    counts = count_elements(GOOD_ROWS)
    inner = "".join(GOOD_ROWS[1:-1])
    assert counts["C"] == inner.count("C")
    assert counts["E"] == inner.count("E")
    assert counts["P"] == inner.count("P")
    assert counts["other"] == 0


def test_validate_good_map():
    assert validate_map(GOOD_ROWS) is None


@pytest.mark.parametrize(
    "rows",
    [
        [],
        ["111", "1P1"],
        ["1111", "1PC1", "1E01", "1111"],
    ],
)
def test_validate_not_rectangular(rows):
    with pytest.raises(MapError) as info:
        validate_map(rows)
    assert str(info.value) == "The map must be rectangular!"


def test_validate_uneven_lines():
    rows = ["1111111", "1P0C0E1", "10001", "1111111"]
    with pytest.raises(MapError) as info:
        validate_map(rows)
    assert str(info.value) == "check length of lines!"


@pytest.mark.parametrize(
    "rows",
    [
        ["1101111", "1P0C0E1", "1000001", "1111111"],
        ["1111111", "1P0C0E1", "1000001", "1111011"],
        ["1111111", "0P0C0E1", "1000001", "1111111"],
        ["1111111", "1P0C0E0", "1000001", "1111111"],
    ],
)
def test_validate_open_walls(rows):
    with pytest.raises(MapError) as info:
        validate_map(rows)
    assert str(info.value) == "The map must be closed/surrounded by walls!"


@pytest.mark.parametrize(
    "rows",
    [
        ["1111111", "1P000E1", "1000001", "1111111"],
        ["1111111", "1P0C001", "1000001", "1111111"],
        ["1111111", "100C0E1", "1000001", "1111111"],
        ["1111111", "1P0C0E1", "100P001", "1111111"],
        ["1111111", "1P0C0E1", "100X001", "1111111"],
    ],
)
def test_validate_bad_elements(rows):
    with pytest.raises(MapError) as info:
        validate_map(rows)
    assert str(info.value) == "map must contain at least 1 E, 1 C, and 1 P!"


def test_validate_allows_several_exits_and_coins():
    rows = ["11111111", "1PCCEE01", "11111111"]
    assert validate_map(rows) is None


def test_load_map_round_trip(tmp_path):
    path = _write(tmp_path, "\n".join(GOOD_ROWS) + "\n")
    assert load_map(path) == GOOD_ROWS


def test_load_map_empty_file(tmp_path):
    path = _write(tmp_path, "")
    with pytest.raises(MapError) as info:
        load_map(path)
    assert str(info.value) == "map not found!"


def test_load_map_trailing_blank_line_breaks_walls(tmp_path):
    path = _write(tmp_path, "\n".join(GOOD_ROWS) + "\n\n")
    with pytest.raises(MapError) as info:
        load_map(path)
    assert str(info.value) == "check length of lines!"


def test_load_map_invalid_contents(tmp_path):
    path = _write(tmp_path, "111\n1P1\n111\n")
    with pytest.raises(MapError) as info:
        load_map(path)
    assert str(info.value) == "The map must be rectangular!"


def test_map_error_message_attribute():
    error = MapError("check extension!")
    assert error.message == "check extension!"
    assert str(error) == "check extension!"
import pytest

from solong.mapfile import (
    MapError,
    check_extension,
    check_reachable,
    flood_fill,
    line_width,
    load_map,
    read_lines,
    validate_map,
)

VALID = "1111111\n1P0C0E1\n1111111\n"
BLOCKED = "1111111\n1P01C01\n1001E01\n1111111\n"


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return path


def _message(excinfo):
    return str(excinfo.value)


def test_load_map_returns_file_lines(tmp_path):
    path = _write(tmp_path, "level.ber", VALID)
    assert load_map(path) == VALID.splitlines(keepends=True)


def test_read_lines_round_trip(tmp_path):
    text = "11\n1P\n11"
    path = _write(tmp_path, "a.ber", text)
    rows = read_lines(path)
    assert "".join(rows) == text
    assert rows[-1] == "11"
    assert all(row.endswith("\n") for row in rows[:-1])


def test_read_lines_missing_file(tmp_path):
    with pytest.raises(MapError) as excinfo:
        read_lines(tmp_path / "absent.ber")
    assert _message(excinfo) == "le fichier n'est pas lisible"


def test_check_extension_rejects_wrong_suffix(tmp_path):
    path = _write(tmp_path, "level.txt", VALID)
    with pytest.raises(MapError) as excinfo:
        check_extension(path)
    assert _message(excinfo) == "Mauvaise extension"


def test_check_extension_rejects_longer_suffix(tmp_path):
    path = _write(tmp_path, "level.bert", VALID)
    with pytest.raises(MapError) as excinfo:
        check_extension(path)
    assert _message(excinfo) == "Mauvaise extension"


def test_check_extension_rejects_empty_file(tmp_path):
    path = _write(tmp_path, "empty.ber", "")
    with pytest.raises(MapError) as excinfo:
        check_extension(path)
    assert _message(excinfo) == "C'est un dossier / le fichier est vide"


def test_check_extension_rejects_directory(tmp_path):
    folder = tmp_path / "maps.ber"
    folder.mkdir()
    with pytest.raises(MapError) as excinfo:
        check_extension(folder)
    assert _message(excinfo) == "C'est un dossier / le fichier est vide"


def test_check_extension_requires_argument():
    with pytest.raises(MapError) as excinfo:
        check_extension(None)
    assert _message(excinfo) == "Veuillez inserer un argument"


def test_check_extension_missing_file(tmp_path):
    with pytest.raises(MapError) as excinfo:
        check_extension(tmp_path / "nothing.ber")
    assert _message(excinfo) == "le fichier n'est pas lisible"


def test_line_width_stops_at_newline():
    assert line_width("1111\n") == 4
    assert line_width("11") == 2


def test_validate_map_accepts_valid_map():
    assert validate_map(VALID.splitlines(keepends=True)) is True


def test_validate_map_empty_is_false():
    assert validate_map([]) is False


@pytest.mark.parametrize(
    "rows, message",
    [
        (["1111\n", "0PCE\n", "1111\n"], "la map n'est pas fermer"),
        (["1111\n", "1PC0\n", "1111\n"], "la map n'est pas fermer"),
        (["11111\n", "1PXE1\n", "1C001\n", "11111\n"], "la map n'a pas les bon items"),
        (["11111\n", "1PCE1\n", "101\n", "11111\n"], "la map n'est pas rectangle"),
        (["10111\n", "1PCE1\n", "11111\n"], "la map n'est pas fermer"),
        (["11111\n", "1PCE1\n", "11101\n"], "la map n'est pas fermer"),
        (["111111\n", "1PPCE1\n", "111111\n"], "Les items ne sont pas bons"),
        (["11111\n", "1P0E1\n", "11111\n"], "Les items ne sont pas bons"),
        (["111111\n", "1PCEE1\n", "111111\n"], "Les items ne sont pas bons"),
    ],
)
def test_validate_map_errors(rows, message):
    with pytest.raises(MapError) as excinfo:
        validate_map(rows)
    assert _message(excinfo) == message


def test_flood_fill_marks_reachable_cells_only():
    rows = BLOCKED.splitlines(keepends=True)
    grid = [list(row) for row in rows]
    flood_fill(grid, 1, 1)
    assert grid[1][1] == "A"
    assert grid[2][1] == "A"
    assert grid[1][4] == "C"
    assert grid[2][4] == "E"
    assert all(
        cell == original
        for line, row in zip(grid, rows)
        for cell, original in zip(line, row)
        if original in "1\n"
    )


def test_flood_fill_on_wall_changes_nothing():
    grid = [list(row) for row in VALID.splitlines(keepends=True)]
    before = [line[:] for line in grid]
    flood_fill(grid, 0, 0)
    assert grid == before


def test_flood_fill_reaches_everything_in_open_map():
    grid = [list(row) for row in VALID.splitlines(keepends=True)]
    flood_fill(grid, 1, 1)
    assert not any(cell in "0CEP" for line in grid for cell in line)


def test_check_reachable_rejects_blocked_map():
    with pytest.raises(MapError) as excinfo:
        check_reachable(BLOCKED.splitlines(keepends=True))
    assert _message(excinfo) == "le chemin n'est pas valide"


def test_check_reachable_leaves_rows_untouched():
    rows = VALID.splitlines(keepends=True)
    check_reachable(rows)
    assert "".join(rows) == VALID


def test_load_map_rejects_blocked_path(tmp_path):
    path = _write(tmp_path, "blocked.ber", BLOCKED)
    with pytest.raises(MapError) as excinfo:
        load_map(path)
    assert _message(excinfo) == "le chemin n'est pas valide"


def test_load_map_rejects_open_border(tmp_path):
    path = _write(tmp_path, "open.ber", "1111111\n1P0C0E0\n1111111\n")
    with pytest.raises(MapError) as excinfo:
        load_map(path)
    assert _message(excinfo) == "la map n'est pas fermer"
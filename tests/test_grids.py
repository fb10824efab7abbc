import pytest

from contestalgos.grids import count_ships, hex_winner


def test_count_ships_sample():
    grid = ["x...", "..x.", "@.@.", "...."]
    assert count_ships(grid) == 2


def test_count_ships_isolated_cells():
    grid = ["x.x", ".x.", "x.x"]
    assert count_ships(grid) == sum(row.count("x") for row in grid)


def test_count_ships_sunk_only():
    assert count_ships(["@@.", "...", ".@@"]) == count_ships(["...", "...", "..."])


def test_count_ships_joined_through_hits():
    assert count_ships(["x@x", "...", "x.."]) == count_ships(["x..", "...", "x.."])


def test_count_ships_diagonal_not_joined():
    grid = ["x.", ".x"]
    assert count_ships(grid) == sum(row.count("x") for row in grid)


def test_count_ships_leaves_input_alone():
    grid = ["xx", "x@"]
    copy = list(grid)
    count_ships(grid)
    assert grid == copy


def test_hex_winner_sample():
    assert hex_winner(["bbwb", "bwbw", "wbwb", "bwwb"]) == "B"


@pytest.mark.parametrize("size", [1, 3, 5])
def test_hex_winner_uniform_boards(size):
    assert hex_winner(["b" * size] * size) == "B"
    assert hex_winner(["w" * size] * size) == "W"


def test_hex_winner_follows_hex_diagonal():
    assert hex_winner(["bw", "wb"]) == "B"
    assert hex_winner(["wb", "bw"]) == "W"


def test_hex_winner_blocked_column():
    assert hex_winner(["bww", "www", "bww"]) == "W"
    assert hex_winner(["bww", "bww", "bww"]) == "B"
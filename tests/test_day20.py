import pytest

from yuletide.day20 import (
    count_long_cheats,
    count_wall_cheats,
    find_cheats,
    find_first,
    improvement,
    manhattan_distance,
    parse_map,
    path_cost,
    shortest_path_nodes,
)

EXAMPLE = """###############
#...#...#.....#
#.#.#.#.#.###.#
#S#...#.#.#...#
#######.#.#.###
#######.#.#...#
#######.#.###.#
###..E#...#...#
###.#######.###
#...###...#...#
#.#####.#.###.#
#.#...#.#.#...#
#.#.#.#.#.#.###
#...#...#...###
###############
"""


@pytest.fixture
def grid():
    return parse_map(EXAMPLE)


def test_manhattan():
    assert manhattan_distance((1, 1), (2, 5)) == 5


def test_manhattan_is_symmetric():
    assert manhattan_distance((2, 5), (1, 1)) == manhattan_distance((1, 1), (2, 5))


def test_improvement_never_negative():
    assert improvement(5, 4, 3) == 0


def test_improvement_rejects_reversed_costs():
    with pytest.raises(ValueError):
        improvement(0, 82, 6)


def test_find_first_locates_start(grid):
    assert find_first(grid, "S") == (3, 1)
    assert find_first(grid, "E") == (7, 5)


def test_find_first_missing_value(grid):
    with pytest.raises(ValueError):
        find_first(grid, "X")


def test_example_path_cost(grid):
    assert path_cost(grid) == 84


def test_path_nodes_run_from_end_to_start(grid):
    start, end = find_first(grid, "S"), find_first(grid, "E")
    path = shortest_path_nodes(grid, start, end)
    assert path[0][0] == end
    assert path[-1] == (start, 0)
    assert len(path) == path[0][1] + 1
    for (pos, cost), (prev_pos, prev_cost) in zip(path, path[1:]):
        assert manhattan_distance(pos, prev_pos) == 1
        assert cost == prev_cost + 1


def test_path_nodes_empty_when_unreachable():
    closed = parse_map("#####\n#S#E#\n#####")
    assert shortest_path_nodes(closed, (1, 1), (1, 3)) == []
    assert path_cost(closed) is None


def test_wall_cheats_example(grid):
    assert count_wall_cheats(grid, 64) == 1
    assert count_wall_cheats(grid, 40) == 2


def test_wall_cheats_need_a_path():
    closed = parse_map("#####\n#S#E#\n#####")
    with pytest.raises(ValueError):
        count_wall_cheats(closed, 1)


def test_short_cheats_match_wall_cheats(grid):
    path = shortest_path_nodes(grid, find_first(grid, "S"), find_first(grid, "E"))
    assert find_cheats(path, 2, 40) == {40: 1, 64: 1}


def test_long_cheats_example(grid):
    path = shortest_path_nodes(grid, find_first(grid, "S"), find_first(grid, "E"))
    assert find_cheats(path, 20, 74) == {74: 4, 76: 3}
    assert count_long_cheats(grid, 20, 76) == 3
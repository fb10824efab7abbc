import pytest

from contestalgos.graphs import (
    camera_cities,
    can_travel,
    count_articulation_points,
    is_bipartite,
    longest_chain,
    longest_path_from,
    max_trip_profit,
    most_reachable_node,
)


def test_longest_path_chain():
    edges = [(1, 2), (2, 3), (3, 4)]
    assert longest_path_from(edges, 1) == (len(edges), 4)


def test_longest_path_no_edges_stays_at_start():
    assert longest_path_from([], 7) == (0, 7)


def test_longest_path_tie_picks_smallest_end():
    length, end = longest_path_from([(1, 5), (1, 3)], 1)
    assert end == min(5, 3)
    assert length == len([(1, 3)])


def test_longest_path_prefers_longer_branch():
    edges = [(1, 2), (1, 3), (3, 4)]
    length, end = longest_path_from(edges, 1)
    assert end == 4
    assert length == len([(1, 3), (3, 4)])


def test_camera_cities_chain():
    names = ["a", "b", "c"]
    assert camera_cities(names, [("a", "b"), ("b", "c")]) == ["b"]


def test_camera_cities_cycle_has_none():
    names = ["a", "b", "c"]
    assert camera_cities(names, [("a", "b"), ("b", "c"), ("c", "a")]) == []


def test_camera_cities_sorted_output():
    names = ["zeta", "alpha", "mid", "x", "y"]
    routes = [("x", "zeta"), ("zeta", "alpha"), ("alpha", "mid"), ("mid", "y")]
    result = camera_cities(names, routes)
    assert result == sorted(result)
    assert set(result) == {"zeta", "alpha", "mid"}


def test_camera_cities_unknown_name():
    with pytest.raises(ValueError):
        camera_cities(["a"], [("a", "b")])


def test_count_articulation_points_matches_named_version():
    edges = [(1, 2), (2, 3), (3, 4), (2, 5)]
    names = ["n1", "n2", "n3", "n4", "n5"]
    routes = [(f"n{a}", f"n{b}") for a, b in edges]
    assert count_articulation_points(5, edges) == len(camera_cities(names, routes))


def test_count_articulation_points_cycle():
    assert count_articulation_points(4, [(1, 2), (2, 3), (3, 4), (4, 1)]) == 0


def test_count_articulation_points_empty():
    assert count_articulation_points(0, []) == 0


def test_most_reachable_node_chain_start():
    assert most_reachable_node(3, [[2], [3], []]) == 1


def test_most_reachable_node_tie_smallest():
    assert most_reachable_node(3, [[], [], []]) == 1


def test_most_reachable_node_picks_best():
    assert most_reachable_node(3, [[], [1, 3], []]) == 2


def test_most_reachable_node_none():
    assert most_reachable_node(0, []) == 0


def test_bipartite_even_cycle():
    assert is_bipartite(4, [(1, 2), (2, 3), (3, 4), (4, 1)]) is True


def test_bipartite_triangle():
    assert is_bipartite(3, [(1, 2), (2, 3), (3, 1)]) is False


def test_bipartite_no_edges():
    assert is_bipartite(5, []) is True


def test_bipartite_odd_cycle_in_second_component():
    edges = [(1, 2), (3, 4), (4, 5), (5, 3)]
    assert is_bipartite(5, edges) is False


def test_longest_chain_path():
    n = 5
    edges = [(i, i + 1) for i in range(1, n)]
    assert longest_chain(n, edges) == n


def test_longest_chain_isolated_nodes():
    assert longest_chain(4, []) == len([1])


def test_longest_chain_empty():
    assert longest_chain(0, []) == 0


def test_longest_chain_independent_of_start_order():
    edges = [(3, 2), (2, 1)]
    assert longest_chain(3, edges) == longest_chain(3, [(1, 2), (2, 3)])


def test_can_travel_even_walk_back():
    assert can_travel([(1, 2)], 1, 1, 2) is True


def test_can_travel_odd_walk_back_impossible():
    assert can_travel([(1, 2)], 1, 1, 1) is False


def test_can_travel_zero_days():
    assert can_travel([], 3, 3, 0) is True
    assert can_travel([(3, 4)], 3, 4, 0) is False


def test_can_travel_isolated_start():
    assert can_travel([(2, 3)], 1, 2, 1) is False


def test_max_trip_profit_zero_days():
    assert max_trip_profit([[0, 5], [7, 0]], 1, [2], 0) == 0


def test_max_trip_profit_single_day_uses_edge():
    costs = [[0, 5], [7, 0]]
    assert max_trip_profit(costs, 1, [2], 1) == costs[0][1]
    assert max_trip_profit(costs, 2, [1], 1) == costs[1][0]


def test_max_trip_profit_never_negative_and_grows():
    costs = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    results = [max_trip_profit(costs, 1, [3], d) for d in range(5)]
    assert all(r >= 0 for r in results)
    assert results == sorted(results)
import math

import pytest

from mctsp import TSPInstance, edge_lengths, path_length


def test_square_perimeter(unit_square):
    D = unit_square.distance_matrix()
    assert path_length(D, [0, 1, 2, 3, 0]) == 4.0
    assert path_length(D, [0, 2, 1, 3, 0]) == pytest.approx(2 + 2 * math.sqrt(2))


def test_rotation_does_not_change_length():
    D = TSPInstance.random_euclidean(6, seed=3).distance_matrix()
    tour = [4, 0, 5, 2, 1, 3]
    base = path_length(D, tour + tour[:1])
    for k in range(1, len(tour)):
        rot = tour[k:] + tour[:k]
        assert path_length(D, rot + rot[:1]) == pytest.approx(base)


def test_reversal_does_not_change_length():
    D = TSPInstance.random_euclidean(6, seed=4).distance_matrix()
    path = [2, 5, 0, 3, 1, 4, 2]
    assert path_length(D, path[::-1]) == pytest.approx(path_length(D, path))


def test_edge_lengths_sum_to_path_length(two_cities):
    D = two_cities.distance_matrix()
    assert edge_lengths(D, [1, 0, 1]) == [5.0, 5.0]
    assert path_length(D, [1, 0, 1]) == 10.0


def test_single_city_tour_has_zero_length():
    D = TSPInstance(coords=[(2.0, 3.0)]).distance_matrix()
    assert path_length(D, [0, 0]) == 0.0

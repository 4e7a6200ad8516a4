import numpy as np
import pytest

from mctsp import DistanceTable, TSPInstance


@pytest.mark.parametrize("n", [1, 2, 5, 17])
def test_symmetric_with_zero_diagonal(n):
    D = TSPInstance.random_euclidean(n, seed=n).distance_matrix()
    M = D.matrix
    assert M.shape == (n, n)
    assert np.array_equal(M, M.T)
    assert np.all(np.diag(M) == 0.0)
    assert np.all(M >= 0.0)


def test_values_are_euclidean(two_cities):
    D = two_cities.distance_matrix()
    assert D[0, 1] == 5.0
    assert D[1, 0] == 5.0
    assert D[0, 0] == 0.0


def test_flat_layout_is_row_major(unit_square):
    D = unit_square.distance_matrix()
    flat = D.matrix.ravel()
    n = D.n
    for i in range(n):
        for j in range(n):
            assert flat[i * n + j] == D[i, j]


def test_same_coordinates_give_identical_tables(unit_square):
    a = DistanceTable(unit_square.coords)
    b = DistanceTable(unit_square.coords)
    assert np.array_equal(a.matrix, b.matrix)
    assert a.as_list() == b.as_list()


def test_read_only_and_bounds_checked(unit_square):
    D = unit_square.distance_matrix()
    with pytest.raises(ValueError):
        D.matrix[0, 1] = 42.0
    with pytest.raises(IndexError):
        D[0, 4]
    with pytest.raises(IndexError):
        D[-1, 0]


def test_empty_coordinates_give_empty_table():
    D = DistanceTable([])
    assert len(D) == 0
    assert D.matrix.shape == (0, 0)


def test_huge_coordinates_stay_finite():
    D = DistanceTable([(0.0, 0.0), (3e160, 4e160)])
    assert np.all(np.isfinite(D.matrix))
    assert D[0, 1] == pytest.approx(5e160)

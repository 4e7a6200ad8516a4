import pytest

from mctsp import TSPInstance


@pytest.fixture
def two_cities():
    return TSPInstance(coords=[(0.0, 0.0), (3.0, 4.0)], name="two")


@pytest.fixture
def unit_square():
    return TSPInstance(coords=[(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)], name="square")


@pytest.fixture
def write_cities(tmp_path):
    def _write(text, name="cities.txt"):
        p = tmp_path / name
        p.write_text(text)
        return str(p)
    return _write

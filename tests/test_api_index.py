import numpy as np
import pytest

from kdtreex import config as cx_config
from kdtreex.api import KDIndex
from tests.utils.datasets import K2_POINTS, as_row_set


@pytest.fixture(autouse=True)
def reset_runtime_config():
    cx_config.reset_runtime_config_cache()
    yield
    cx_config.reset_runtime_config_cache()


def test_index_fit_knn_roundtrip():
    points = np.asarray(
        [
            [0.0, 0.0],
            [1.0, 1.0],
            [2.0, 2.0],
        ],
        dtype=np.float64,
    )

    index = KDIndex().fit(points)
    assert len(index) == points.shape[0]

    indices, distances = index.knn([0.1, 0.1], k=2, return_distances=True)
    assert indices.tolist() == [0, 1]
    assert np.allclose(distances, [0.02, 1.62])

    nearest = index.nearest([1.9, 2.2])
    assert nearest == 2


def test_index_nearest_with_distance():
    index = KDIndex().fit(K2_POINTS)

    idx, dist = index.nearest([1, 1], return_distances=True)

    assert idx == 0
    assert dist == pytest.approx(5.0)


def test_index_points_returns_coordinates():
    index = KDIndex().fit(K2_POINTS)

    assert as_row_set(index.points([1, 1], 2)) == {(2.0, 3.0), (5.0, 4.0)}


def test_index_fit_returns_new_instance():
    empty = KDIndex()
    fitted = empty.fit(K2_POINTS)

    assert empty.tree is None
    assert fitted.tree is not None
    assert len(empty) == 0


def test_index_requires_fit_before_queries():
    with pytest.raises(ValueError):
        KDIndex().knn([0.0, 0.0], k=1)
    with pytest.raises(ValueError):
        KDIndex().points([0.0, 0.0])


def test_index_nearest_on_empty_fit_raises():
    index = KDIndex().fit([])

    assert len(index) == 0
    assert index.knn([0.0, 0.0], k=3).shape == (0,)
    with pytest.raises(ValueError):
        index.nearest([0.0, 0.0])

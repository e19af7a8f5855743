import dataclasses

import numpy as np
import pytest

from intpoints import IntegrationPoint, InvalidConfigurationError, PointSet


def test_integration_point_is_immutable():
    point = IntegrationPoint(coords=[0.5, -0.5], weight=1)
    assert point.coords == (0.5, -0.5)
    assert isinstance(point.weight, float)
    assert point.ndim == 2
    with pytest.raises(dataclasses.FrozenInstanceError):
        point.weight = 2.0


def test_point_set_from_arrays():
    point_set = PointSet.from_arrays("mid", [[0.0, 0.0]], [4.0])
    assert point_set.ndim == 2 and point_set.npts == 1
    assert point_set.key == ("mid", 1)
    assert point_set.integrate(lambda x: 3.0) == 12.0
    assert repr(point_set) == "PointSet(rule='mid', ndim=2, npts=1)"


def test_point_set_from_1d_arrays():
    point_set = PointSet.from_arrays("trapezoid", [[-1.0], [1.0]], [1.0, 1.0])
    np.testing.assert_array_equal(point_set.coordinates, [[-1.0], [1.0]])
    assert point_set.integrate(lambda x: x[0]**2) == 2.0


def test_point_count_must_match():
    points = (IntegrationPoint(coords=(0.0,), weight=2.0),)
    with pytest.raises(InvalidConfigurationError):
        PointSet(rule="bad", ndim=1, npts=2, points=points)


def test_point_dimension_must_match():
    points = (IntegrationPoint(coords=(0.0, 0.0), weight=4.0),)
    with pytest.raises(InvalidConfigurationError):
        PointSet(rule="bad", ndim=3, npts=1, points=points)


def test_array_lengths_must_match():
    with pytest.raises(InvalidConfigurationError):
        PointSet.from_arrays("bad", [[0.0], [1.0]], [1.0])


def test_point_set_from_flat_1d_coordinates():
    point_set = PointSet.from_arrays("trapezoid", [-1.0, 1.0], [1.0, 1.0])
    assert point_set.ndim == 1 and point_set.npts == 2
    np.testing.assert_array_equal(point_set.coordinates, [[-1.0], [1.0]])
    assert point_set[1].coords == (1.0,)


@pytest.mark.parametrize("coords, weights", [
    ([[1.0, 2.0, 3.0, 4.0]], [1.0]),
    (np.zeros((2, 0)), [1.0, 1.0]),
])
def test_dimension_must_be_supported(coords, weights):
    with pytest.raises(InvalidConfigurationError):
        PointSet.from_arrays("bad", coords, weights)


def test_point_set_must_not_be_empty():
    with pytest.raises(InvalidConfigurationError):
        PointSet(rule="bad", ndim=2, npts=0, points=())
    with pytest.raises(InvalidConfigurationError):
        PointSet.from_arrays("bad", [], [])

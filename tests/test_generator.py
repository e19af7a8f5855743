from math import inf, sqrt

import numpy as np
import pytest

from intpoints import (
    InvalidConfigurationError,
    MissingParameterError,
    Rule,
    RuleParameters,
    UnsupportedRuleError,
    generate,
)


def monomial_integral(powers):
    """Exact integral of prod(x_i**p_i) over [-1, +1]^ndim."""
    return np.prod([0.0 if p % 2 else 2.0 / (p + 1) for p in powers])


def integrate_monomial(point_set, powers):
    return point_set.integrate(lambda x: np.prod([xi**p for xi, p in zip(x, powers)]))


ALL_SHAPES = [
    ("LE", 1, 1), ("LE", 1, 4), ("LE", 2, 4), ("LE", 2, 9), ("LE", 3, 8), ("LE", 3, 27),
    ("W5corner", 2, 5), ("W4stable", 2, 5), ("W8fixed", 2, 8),
    ("W5", 2, 5), ("W8", 2, 8),
]


@pytest.mark.parametrize("rule, ndim, npts", ALL_SHAPES)
def test_shape_invariants(rule, ndim, npts):
    point_set = generate(rule, ndim, npts, {"w0": 2.0, "wb": 0.5})
    assert point_set.rule == rule
    assert point_set.ndim == ndim
    assert len(point_set.points) == npts
    assert all(len(p.coords) == ndim for p in point_set)
    assert point_set.coordinates.shape == (npts, ndim)


@pytest.mark.parametrize("ndim, n1d", [(1, 1), (1, 5), (2, 2), (2, 3), (2, 4), (3, 2), (3, 3)])
def test_tensor_product_weights_sum(ndim, n1d):
    point_set = generate(Rule.LE, ndim, n1d**ndim)
    assert np.isclose(point_set.total_weight, 2.0**ndim, rtol=1e-13)


@pytest.mark.parametrize("ndim, n1d", [(1, 3), (2, 2), (2, 3), (3, 2), (3, 3)])
def test_tensor_product_exactness(ndim, n1d):
    point_set = generate("LE", ndim, n1d**ndim)
    max_degree = 2 * n1d - 1
    for powers in np.ndindex(*([max_degree + 1] * ndim)):
        assert np.isclose(
            integrate_monomial(point_set, powers), monomial_integral(powers), atol=1e-12
        ), powers


def test_tensor_product_not_exact_beyond_degree():
    point_set = generate("LE", 2, 4)
    assert not np.isclose(integrate_monomial(point_set, (4, 0)), monomial_integral((4, 0)))


def test_tensor_product_ordering_2d():
    x, w = np.array([-1 / sqrt(3), 1 / sqrt(3)]), np.array([1.0, 1.0])
    point_set = generate("LE", 2, 4)
    expected = [(x[0], x[0]), (x[1], x[0]), (x[0], x[1]), (x[1], x[1])]
    np.testing.assert_allclose(point_set.coordinates, expected, atol=1e-14)
    np.testing.assert_allclose(point_set.weights, [1.0, 1.0, 1.0, 1.0], rtol=1e-14)


def test_tensor_product_ordering_3d():
    point_set = generate("LE", 3, 27)
    x = np.array([-sqrt(3 / 5), 0.0, sqrt(3 / 5)])
    w = np.array([5 / 9, 8 / 9, 5 / 9])
    for k in range(3):
        for j in range(3):
            for i in range(3):
                m = i + 3 * j + 9 * k
                np.testing.assert_allclose(point_set[m].coords, (x[i], x[j], x[k]), atol=1e-14)
                assert np.isclose(point_set[m].weight, w[i] * w[j] * w[k], rtol=1e-13)
    # centre point
    np.testing.assert_allclose(point_set[13].coords, (0.0, 0.0, 0.0), atol=1e-14)


def test_tensor_product_uses_provider():
    calls = []

    def provider(a, b, n):
        calls.append((a, b, n))
        return np.array([-0.5, 0.5]), np.array([1.0, 1.0])

    point_set = generate("LE", 2, 4, provider=provider)
    assert calls == [(-1.0, 1.0, 2)]
    np.testing.assert_allclose(point_set[1].coords, (0.5, -0.5))


def test_w5corner():
    point_set = generate("W5corner", 2, 5)
    np.testing.assert_allclose(
        point_set.coordinates, [(-1, -1), (1, -1), (0, 0), (-1, 1), (1, 1)]
    )
    np.testing.assert_allclose(point_set.weights, [1 / 3, 1 / 3, 8 / 3, 1 / 3, 1 / 3])
    assert np.isclose(point_set.total_weight, 4.0, rtol=1e-14)


@pytest.mark.parametrize("rule, params", [
    ("W5corner", None),
    ("W4stable", None),
    ("W5", {"w0": 1.0}),
    ("W5", RuleParameters(w0=3.5)),
])
def test_five_point_rules_exact_for_cubics(rule, params):
    point_set = generate(rule, 2, 5, params)
    tol = 1e-6 if rule == "W4stable" else 1e-12
    for p in range(4):
        for q in range(4 - p):
            assert np.isclose(
                integrate_monomial(point_set, (p, q)), monomial_integral((p, q)), atol=tol
            ), (p, q)


def test_w4stable_constants():
    point_set = generate("W4stable", 2, 5)
    np.testing.assert_allclose(point_set.weights, [0.999, 0.999, 0.004, 0.999, 0.999])
    assert point_set[4].coords == (0.5776391, 0.5776391)


def test_w5_reproduces_w5corner():
    fixed = generate("W5corner", 2, 5)
    variable = generate("W5", 2, 5, {"w0": 8.0 / 3.0})
    np.testing.assert_allclose(variable.coordinates, fixed.coordinates, atol=1e-10)
    np.testing.assert_allclose(variable.weights, fixed.weights, atol=1e-10)


@pytest.mark.parametrize("rule, params", [("W8fixed", None), ("W8", {"wb": 0.3})])
def test_eight_point_rules_exact_for_cubics(rule, params):
    point_set = generate(rule, 2, 8, params)
    assert np.isclose(point_set.total_weight, 4.0, rtol=1e-14)
    for p in range(4):
        for q in range(4 - p):
            assert np.isclose(
                integrate_monomial(point_set, (p, q)), monomial_integral((p, q)), atol=1e-12
            ), (p, q)


def test_w8fixed_exact_for_quintics():
    point_set = generate("W8fixed", 2, 8)
    for p in range(6):
        for q in range(6 - p):
            assert np.isclose(
                integrate_monomial(point_set, (p, q)), monomial_integral((p, q)), atol=1e-12
            ), (p, q)


def test_w8_reproduces_w8fixed():
    fixed = generate("W8fixed", 2, 8)
    variable = generate("W8", 2, 8, {"wb": 40.0 / 49.0})
    np.testing.assert_allclose(variable.coordinates, fixed.coordinates, atol=1e-10)
    np.testing.assert_allclose(variable.weights, fixed.weights, atol=1e-10)
    a, b = sqrt(7 / 9), sqrt(7 / 15)
    np.testing.assert_allclose(
        fixed.coordinates,
        [(-a, -a), (0, -b), (a, -a), (-b, 0), (b, 0), (-a, a), (0, b), (a, a)],
    )
    np.testing.assert_allclose(fixed.weights, [9 / 49, 40 / 49] * 2 + [40 / 49, 9 / 49] * 2)


@pytest.mark.parametrize("rule, npts, params", [
    ("W5", 5, {}),
    ("W5", 5, None),
    ("W8", 8, {}),
    ("W8", 8, RuleParameters(w0=1.0)),
])
def test_missing_parameter(rule, npts, params):
    with pytest.raises(MissingParameterError):
        generate(rule, 2, npts, params)


@pytest.mark.parametrize("rule, ndim, npts", [
    ("W5corner", 3, 5),
    ("W4stable", 2, 4),
    ("W8fixed", 2, 5),
    ("W8fixed", 1, 8),
    ("LE", 2, 5),
    ("LE", 3, 9),
    ("LE", 4, 16),
    ("LE", 0, 1),
    ("LE", 1, 0),
])
def test_invalid_configuration(rule, ndim, npts):
    with pytest.raises(InvalidConfigurationError):
        generate(rule, ndim, npts)


@pytest.mark.parametrize("rule, npts, params", [
    ("W5", 5, {"w0": 4.0}),
    ("W8", 8, {"wb": 0.0}),
    ("W8", 8, {"wb": 1.0}),
    ("W5", 5, {"w": 1.0}),
    ("W5", 5, {"w0": float("nan")}),
    ("W5", 5, {"w0": -inf}),
    ("W5", 5, RuleParameters(w0=inf)),
    ("W8", 8, {"wb": float("nan")}),
    ("W8", 8, {"wb": -inf}),
    ("W5", 5, {"w0": "abc"}),
])
def test_invalid_parameter_value(rule, npts, params):
    with pytest.raises(InvalidConfigurationError):
        generate(rule, 2, npts, params)


@pytest.mark.parametrize("rule", ["XYZ", "LO", "le", ""])
def test_unsupported_rule(rule):
    with pytest.raises(UnsupportedRuleError):
        generate(rule, 1, 3)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        generate("XYZ", 1, 3)

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Mapping

import numpy as np

from intpoints.exceptions import InvalidConfigurationError
from intpoints.gauss import gauss_legendre_nodes_weights
from intpoints.points import SUPPORTED_DIMENSIONS, IntegrationPoint, PointSet
from intpoints.rules import Rule, RuleParameters, resolve_parameters

if TYPE_CHECKING:
    import numpy.typing as npt
    from intpoints.gauss import NodesWeightsProvider

# Wilson's 5-point rules: (w0, wa, a)
W5_CORNER_CONSTANTS: tuple[float, float, float] = (8.0 / 3.0, 1.0 / 3.0, 1.0)
W4_STABLE_CONSTANTS: tuple[float, float, float] = (0.004, 0.999, 0.5776391)

# Wilson's 8-point rule: (a, b, wa, wb)
W8_FIXED_CONSTANTS: tuple[float, float, float, float] = (
    math.sqrt(7.0 / 9.0),
    math.sqrt(7.0 / 15.0),
    9.0 / 49.0,
    40.0 / 49.0,
)


def generate(
    rule: Rule | str,
    ndim: int,
    npts: int,
    params: RuleParameters | Mapping[str, float] | None = None,
    provider: NodesWeightsProvider = gauss_legendre_nodes_weights,
) -> PointSet:
    """
    Generate integration points according to a rule.

    Args:
        rule: The rule; e.g. "LE", "W5corner" or "W8".
        ndim: Space dimension (1, 2 or 3).
        npts: Number of points.
        params: Parameters of the tunable rules ("w0" for "W5", "wb" for "W8").
        provider: 1D Gauss-Legendre nodes/weights provider used by "LE".

    Raises:
        UnsupportedRuleError: If the rule is unknown.
        InvalidConfigurationError: If `ndim`/`npts` do not fit the rule.
        MissingParameterError: If a tunable rule lacks its parameter.

    Returns:
        The generated point set.
    """
    rule = Rule.parse(rule)
    parameters = resolve_parameters(params)
    _check_shape(rule, ndim, npts)

    match rule:
        case Rule.LE:
            return _tensor_product_gauss_legendre(ndim, npts, provider)
        case Rule.W5_CORNER:
            return _wilson_five_points(rule, *W5_CORNER_CONSTANTS)
        case Rule.W4_STABLE:
            return _wilson_five_points(rule, *W4_STABLE_CONSTANTS)
        case Rule.W5:
            return _wilson_five_points(rule, *_w5_constants(parameters.require(rule)))
        case Rule.W8_FIXED:
            return _wilson_eight_points(rule, *W8_FIXED_CONSTANTS)
        case Rule.W8:
            return _wilson_eight_points(rule, *_w8_constants(parameters.require(rule)))


def _check_shape(rule: Rule, ndim: int, npts: int) -> None:
    if ndim not in SUPPORTED_DIMENSIONS:
        raise InvalidConfigurationError(
            f"Rule '{rule}' cannot be used with ndim={ndim}. "
            f"'ndim' must be 1, 2 or 3."
        )
    if npts < 1:
        raise InvalidConfigurationError(f"Rule '{rule}' requires npts >= 1; got npts={npts}.")
    shape = rule.fixed_shape
    if shape is not None and (ndim, npts) != shape:
        raise InvalidConfigurationError(
            f"Rule '{rule}' works only with ndim={shape[0]} and npts={shape[1]}. "
            f"ndim={ndim} or npts={npts} is invalid."
        )


def _points_per_direction(ndim: int, npts: int) -> int:
    n1d = int(math.floor(npts ** (1.0 / ndim) + 0.5))
    if n1d ** ndim != npts:
        raise InvalidConfigurationError(
            f"Rule 'LE' with ndim={ndim} requires npts to be a perfect power "
            f"n**{ndim}; npts={npts} is invalid."
        )
    return n1d


def _tensor_product_gauss_legendre(ndim: int, npts: int, provider: NodesWeightsProvider) -> PointSet:
    """Tensor product of the 1D Gauss-Legendre rule; point i + n*j + n*n*k sits at (x[i], x[j], x[k])."""
    n1d = _points_per_direction(ndim, npts)
    x, w = provider(-1.0, 1.0, n1d)
    x = np.asarray(x, dtype=np.float64)
    w = np.asarray(w, dtype=np.float64)

    # the first axis varies fastest
    axes = np.meshgrid(*([np.arange(n1d)] * ndim), indexing="ij")
    indices: npt.NDArray[np.int64] = np.stack([ax.ravel(order="F") for ax in axes], axis=1)

    points = tuple(
        IntegrationPoint(coords=tuple(x[idx]), weight=float(np.prod(w[idx])))
        for idx in indices
    )
    return PointSet(rule=Rule.LE, ndim=ndim, npts=npts, points=points)


def _w5_constants(w0: float) -> tuple[float, float, float]:
    wa = (4.0 - w0) / 4.0
    if not math.isfinite(w0) or wa <= 0.0:
        raise InvalidConfigurationError(
            f"Rule 'W5' requires a finite w0 < 4 so that the corner weights are positive; got w0={w0}."
        )
    a = math.sqrt(1.0 / (3.0 * wa))
    return w0, wa, a


def _w8_constants(wb: float) -> tuple[float, float, float, float]:
    if not math.isfinite(wb) or not 0.0 < wb < 1.0:
        raise InvalidConfigurationError(f"Rule 'W8' requires 0 < wb < 1; got wb={wb}.")
    wa = 1.0 - wb
    swa = math.sqrt(wa)
    a = 1.0 / math.sqrt(3.0 * swa)
    b = math.sqrt((2.0 - 2.0 * swa) / (3.0 * wb))
    return a, b, wa, wb


def _wilson_five_points(rule: Rule, w0: float, wa: float, a: float) -> PointSet:
    points = (
        IntegrationPoint(coords=(-a, -a), weight=wa),
        IntegrationPoint(coords=(+a, -a), weight=wa),
        IntegrationPoint(coords=(0.0, 0.0), weight=w0),
        IntegrationPoint(coords=(-a, +a), weight=wa),
        IntegrationPoint(coords=(+a, +a), weight=wa),
    )
    return PointSet(rule=rule, ndim=2, npts=5, points=points)


def _wilson_eight_points(rule: Rule, a: float, b: float, wa: float, wb: float) -> PointSet:
    points = (
        IntegrationPoint(coords=(-a, -a), weight=wa),
        IntegrationPoint(coords=(0.0, -b), weight=wb),
        IntegrationPoint(coords=(+a, -a), weight=wa),
        IntegrationPoint(coords=(-b, 0.0), weight=wb),
        IntegrationPoint(coords=(+b, 0.0), weight=wb),
        IntegrationPoint(coords=(-a, +a), weight=wa),
        IntegrationPoint(coords=(0.0, +b), weight=wb),
        IntegrationPoint(coords=(+a, +a), weight=wa),
    )
    return PointSet(rule=rule, ndim=2, npts=8, points=points)

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

import numpy as np
import scipy as sp

if TYPE_CHECKING:
    import numpy.typing as npt

NodesWeightsProvider = Callable[[float, float, int], "tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]"]


def gauss_legendre_nodes_weights(
    a: float,
    b: float,
    n_points: int
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    Generate Gauss-Legendre points and weights for a 1D integration on the interval [a, b].

    The nodes are the roots of the Legendre polynomial of degree `n_points`
    mapped from [-1, +1] onto [a, b]; the rule integrates polynomials of
    degree up to 2*n_points - 1 exactly.

    Args:
        a: Start of the interval.
        b: End of the interval.
        n_points: Number of integration points.

    Raises:
        ValueError: If `n_points` is smaller than 1 or the interval is empty.

    Returns:
        A tuple containing the Gauss points (ascending) and weights (summing to b - a).
    """
    if n_points < 1:
        raise ValueError(f"Unsupported number of Gauss points: {n_points}. "
                         f"'n_points' must be at least 1.")
    if not b > a:
        raise ValueError(f"Invalid interval [{a}, {b}]: 'b' must be greater than 'a'.")

    x, w = sp.special.roots_legendre(n_points)
    half_length = 0.5 * (b - a)
    midpoint = 0.5 * (a + b)
    nodes = half_length * np.asarray(x, dtype=np.float64) + midpoint
    weights = half_length * np.asarray(w, dtype=np.float64)
    return nodes, weights

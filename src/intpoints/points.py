from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterator, Sequence

import numpy as np

from intpoints.exceptions import InvalidConfigurationError

if TYPE_CHECKING:
    import numpy.typing as npt

SUPPORTED_DIMENSIONS: tuple[int, ...] = (1, 2, 3)


@dataclass(frozen=True)
class IntegrationPoint:
    """
    One integration (quadrature) point of a reference domain.

    Attributes:
        coords: Natural coordinates of the point, one value per dimension.
        weight: Integration weight of the point.
    """
    coords: tuple[float, ...]
    weight: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "coords", tuple(float(c) for c in self.coords))
        object.__setattr__(self, "weight", float(self.weight))

    @property
    def ndim(self) -> int:
        """Number of coordinates of the point."""
        return len(self.coords)


@dataclass(frozen=True)
class PointSet:
    """
    Ordered set of integration points generated according to one rule.

    The order of the points is reproducible, e.g. for the tensor-product
    rules point ``i + n*j`` lies at ``(x[i], x[j])``.

    Attributes:
        rule: Name of the rule (or domain tag for tabulated sets), e.g. "LE".
        ndim: Space dimension (1, 2 or 3).
        npts: Number of points.
        points: The integration points.
    """
    rule: str
    ndim: int
    npts: int
    points: tuple[IntegrationPoint, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "rule", str(self.rule))
        object.__setattr__(self, "points", tuple(self.points))
        if self.ndim not in SUPPORTED_DIMENSIONS:
            raise InvalidConfigurationError(
                f"Point set '{self.rule}' has ndim={self.ndim}. 'ndim' must be 1, 2 or 3."
            )
        if self.npts < 1:
            raise InvalidConfigurationError(
                f"Point set '{self.rule}' requires npts >= 1; got npts={self.npts}."
            )
        if len(self.points) != self.npts:
            raise InvalidConfigurationError(
                f"Point set '{self.rule}' declares {self.npts} points "
                f"but holds {len(self.points)}."
            )
        for index, point in enumerate(self.points):
            if point.ndim != self.ndim:
                raise InvalidConfigurationError(
                    f"Point {index} of point set '{self.rule}' has {point.ndim} "
                    f"coordinates; expected {self.ndim}."
                )

    @classmethod
    def from_arrays(
        cls,
        rule: str,
        coords: Sequence[Sequence[float]] | npt.NDArray[np.float64],
        weights: Sequence[float] | npt.NDArray[np.float64],
    ) -> PointSet:
        """
        Build a point set from a ``(npts, ndim)`` coordinate array and weights.

        Args:
            rule: Name of the rule.
            coords: Coordinates, one row per point.
            weights: Weights, one per point.

        Returns:
            The point set.
        """
        coords = np.asarray(coords, dtype=np.float64)
        if coords.ndim < 2:
            # flat coordinates of a 1D rule, one value per point
            coords = coords.reshape(-1, 1)
        weights = np.atleast_1d(np.asarray(weights, dtype=np.float64))
        if coords.shape[0] != weights.shape[0]:
            raise InvalidConfigurationError(
                f"Got {coords.shape[0]} coordinate rows but {weights.shape[0]} weights."
            )
        points = tuple(
            IntegrationPoint(coords=tuple(row), weight=w) for row, w in zip(coords, weights)
        )
        return cls(rule=rule, ndim=coords.shape[1], npts=len(points), points=points)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(rule='{self.rule}', ndim={self.ndim}, npts={self.npts})"

    def __len__(self) -> int:
        return self.npts

    def __iter__(self) -> Iterator[IntegrationPoint]:
        return iter(self.points)

    def __getitem__(self, index: int) -> IntegrationPoint:
        return self.points[index]

    @property
    def key(self) -> tuple[str, int]:
        """Registry key (rule name, number of points)."""
        return self.rule, self.npts

    @property
    def coordinates(self) -> npt.NDArray[np.float64]:
        """Coordinates as a ``(npts, ndim)`` array."""
        return np.array([p.coords for p in self.points], dtype=np.float64).reshape(self.npts, self.ndim)

    @property
    def weights(self) -> npt.NDArray[np.float64]:
        """Weights as a ``(npts,)`` array."""
        return np.array([p.weight for p in self.points], dtype=np.float64)

    @property
    def total_weight(self) -> float:
        """Sum of all weights, i.e. the measure of the reference domain."""
        return float(np.sum(self.weights))

    def integrate(self, func: Callable[[npt.NDArray[np.float64]], float]) -> float:
        """
        Approximate the integral of ``func`` over the reference domain.

        Args:
            func: Function of the natural coordinates (array of length ``ndim``).

        Returns:
            The weighted sum of ``func`` over the integration points.
        """
        return float(sum(w * func(x) for x, w in zip(self.coordinates, self.weights)))

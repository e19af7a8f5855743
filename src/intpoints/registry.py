"""
Point Set Registry
==================
Holds the point sets an application needs, generated once and served by
(rule name, number of points) afterwards.

The registry is filled by its constructor only; there is no way to add,
replace or remove an entry later, so concurrent lookups need no locking once
construction has finished.
"""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, Mapping, Optional

from intpoints.config import ELEMENT_FAMILY_POINT_SETS, PointSetConfig
from intpoints.exceptions import InvalidConfigurationError
from intpoints.generator import generate
from intpoints.points import PointSet
from intpoints.rules import Rule

logger = logging.getLogger(__name__)


class PointSetRegistry:
    """
    Read-only collection of point sets keyed by (rule name, number of points).
    """

    def __init__(self, configurations: Iterable[PointSetConfig] = ()) -> None:
        """
        Generate every configured point set and store the results.

        All point sets are generated before any is stored; a failing
        configuration therefore propagates its error and no registry exists.

        Args:
            configurations: The point sets to generate.

        Raises:
            IntegrationPointsError: If a configuration cannot be generated or
                two configurations share the same key.
        """
        point_sets = [
            generate(cfg.rule, cfg.ndim, cfg.npts, cfg.params) for cfg in configurations
        ]
        self._point_sets: dict[tuple[str, int], PointSet] = self._index(point_sets)
        logger.debug(f"Registry built with {len(self._point_sets)} point sets: {list(self._point_sets)}")

    @classmethod
    def from_point_sets(cls, point_sets: Iterable[PointSet]) -> PointSetRegistry:
        """Create a registry from already built point sets (e.g. tabulated ones)."""
        registry = cls.__new__(cls)
        registry._point_sets = cls._index(list(point_sets))
        return registry

    @staticmethod
    def _index(point_sets: list[PointSet]) -> dict[tuple[str, int], PointSet]:
        index: dict[tuple[str, int], PointSet] = {}
        for point_set in point_sets:
            if point_set.key in index:
                raise InvalidConfigurationError(
                    f"Duplicate point set for rule '{point_set.rule}' with {point_set.npts} points."
                )
            index[point_set.key] = point_set
        return index

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({sorted(self._point_sets)})"

    def __len__(self) -> int:
        return len(self._point_sets)

    def __iter__(self) -> Iterator[PointSet]:
        return iter(self._point_sets.values())

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        rule, npts = key
        return (str(rule), npts) in self._point_sets

    def keys(self) -> list[tuple[str, int]]:
        """Registered (rule name, number of points) pairs."""
        return list(self._point_sets)

    def find(self, rule: Rule | str, npts: int) -> Optional[PointSet]:
        """
        Find the point set of a rule with a given number of points.

        Args:
            rule: Rule name (or domain tag for tabulated sets).
            npts: Number of points.

        Returns:
            The stored point set, or None if it was not registered.
        """
        return self._point_sets.get((str(rule), npts))


def build_family_registries(
    families: Mapping[str, Iterable[PointSetConfig]] = ELEMENT_FAMILY_POINT_SETS,
) -> dict[str, PointSetRegistry]:
    """
    Build one registry per element family (e.g. "lin", "qua", "hex").

    Args:
        families: Point set configurations per family.

    Returns:
        Mapping family -> registry.
    """
    registries = {family: PointSetRegistry(configs) for family, configs in families.items()}
    for family, registry in registries.items():
        logger.info(f"Integration points for '{family}' elements: {registry.keys()}")
    return registries

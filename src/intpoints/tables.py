"""
Tabulated Integration Points
============================
Published integration points for the reference domains, stored as rows
``[r, s, t, weight]`` (unused coordinates are zero).

Reference domains:
    lin -- [-1, +1]
    qua -- [-1, +1]^2
    hex -- [-1, +1]^3
    tri -- unit triangle (0,0), (1,0), (0,1)
    tet -- unit tetrahedron (0,0,0), (1,0,0), (0,1,0), (0,0,1)
"""
from __future__ import annotations

import logging
from functools import lru_cache
from math import sqrt
from typing import Optional

from intpoints.points import IntegrationPoint, PointSet
from intpoints.registry import PointSetRegistry

logger = logging.getLogger(__name__)

QuadPoint = tuple[float, float, float, float]

SQ5 = sqrt(5.0)
SQ19by30 = sqrt(19.0 / 30.0)
SQ19by33 = sqrt(19.0 / 33.0)

DOMAIN_DIMENSIONS: dict[str, int] = {
    "lin": 1,
    "qua": 2,
    "hex": 3,
    "tri": 2,
    "tet": 3,
}

TABULATED_POINTS: dict[str, dict[int, tuple[QuadPoint, ...]]] = {
    "lin": {
        1: (
            (0, 0, 0, 2),
        ),
        2: (
            (-0.5773502691896257, 0, 0, 1),
            (+0.5773502691896257, 0, 0, 1),
        ),
        3: (
            (-0.7745966692414834, 0, 0, 0.5555555555555556),
            (+0.0000000000000000, 0, 0, 0.8888888888888888),
            (+0.7745966692414834, 0, 0, 0.5555555555555556),
        ),
        4: (
            (-0.8611363115940526, 0, 0, 0.3478548451374538),
            (-0.3399810435848562, 0, 0, 0.6521451548625462),
            (+0.3399810435848562, 0, 0, 0.6521451548625462),
            (+0.8611363115940526, 0, 0, 0.3478548451374538),
        ),
        5: (
            (-0.9061798459386640, 0, 0, 0.2369268850561891),
            (-0.5384693101056831, 0, 0, 0.4786286704993665),
            (+0.0000000000000000, 0, 0, 0.5688888888888889),
            (+0.5384693101056831, 0, 0, 0.4786286704993665),
            (+0.9061798459386640, 0, 0, 0.2369268850561891),
        ),
    },
    "qua": {
        4: (
            (-0.5773502691896257, -0.5773502691896257, 0, 1),
            (+0.5773502691896257, -0.5773502691896257, 0, 1),
            (-0.5773502691896257, +0.5773502691896257, 0, 1),
            (+0.5773502691896257, +0.5773502691896257, 0, 1),
        ),
        9: (
            (-0.7745966692414834, -0.7745966692414834, 0, 25.0 / 81.0),
            (+0.0000000000000000, -0.7745966692414834, 0, 40.0 / 81.0),
            (+0.7745966692414834, -0.7745966692414834, 0, 25.0 / 81.0),
            (-0.7745966692414834, +0.0000000000000000, 0, 40.0 / 81.0),
            (+0.0000000000000000, +0.0000000000000000, 0, 64.0 / 81.0),
            (+0.7745966692414834, +0.0000000000000000, 0, 40.0 / 81.0),
            (-0.7745966692414834, +0.7745966692414834, 0, 25.0 / 81.0),
            (+0.0000000000000000, +0.7745966692414834, 0, 40.0 / 81.0),
            (+0.7745966692414834, +0.7745966692414834, 0, 25.0 / 81.0),
        ),
    },
    "hex": {
        8: (
            (-0.5773502691896257, -0.5773502691896257, -0.5773502691896257, 1),
            (+0.5773502691896257, -0.5773502691896257, -0.5773502691896257, 1),
            (-0.5773502691896257, +0.5773502691896257, -0.5773502691896257, 1),
            (+0.5773502691896257, +0.5773502691896257, -0.5773502691896257, 1),
            (-0.5773502691896257, -0.5773502691896257, +0.5773502691896257, 1),
            (+0.5773502691896257, -0.5773502691896257, +0.5773502691896257, 1),
            (-0.5773502691896257, +0.5773502691896257, +0.5773502691896257, 1),
            (+0.5773502691896257, +0.5773502691896257, +0.5773502691896257, 1),
        ),
        14: (
            (SQ19by30, 0.0, 0.0, 320.0 / 361.0),
            (-SQ19by30, 0.0, 0.0, 320.0 / 361.0),
            (0.0, SQ19by30, 0.0, 320.0 / 361.0),
            (0.0, -SQ19by30, 0.0, 320.0 / 361.0),
            (0.0, 0.0, SQ19by30, 320.0 / 361.0),
            (0.0, 0.0, -SQ19by30, 320.0 / 361.0),
            (SQ19by33, SQ19by33, SQ19by33, 121.0 / 361.0),
            (-SQ19by33, SQ19by33, SQ19by33, 121.0 / 361.0),
            (SQ19by33, -SQ19by33, SQ19by33, 121.0 / 361.0),
            (-SQ19by33, -SQ19by33, SQ19by33, 121.0 / 361.0),
            (SQ19by33, SQ19by33, -SQ19by33, 121.0 / 361.0),
            (-SQ19by33, SQ19by33, -SQ19by33, 121.0 / 361.0),
            (SQ19by33, -SQ19by33, -SQ19by33, 121.0 / 361.0),
            (-SQ19by33, -SQ19by33, -SQ19by33, 121.0 / 361.0),
        ),
        27: (
            (-0.774596669241483, -0.774596669241483, -0.774596669241483, 0.171467764060357),
            (+0.000000000000000, -0.774596669241483, -0.774596669241483, 0.274348422496571),
            (+0.774596669241483, -0.774596669241483, -0.774596669241483, 0.171467764060357),
            (-0.774596669241483, +0.000000000000000, -0.774596669241483, 0.274348422496571),
            (+0.000000000000000, +0.000000000000000, -0.774596669241483, 0.438957475994513),
            (+0.774596669241483, +0.000000000000000, -0.774596669241483, 0.274348422496571),
            (-0.774596669241483, +0.774596669241483, -0.774596669241483, 0.171467764060357),
            (+0.000000000000000, +0.774596669241483, -0.774596669241483, 0.274348422496571),
            (+0.774596669241483, +0.774596669241483, -0.774596669241483, 0.171467764060357),
            (-0.774596669241483, -0.774596669241483, +0.000000000000000, 0.274348422496571),
            (+0.000000000000000, -0.774596669241483, +0.000000000000000, 0.438957475994513),
            (+0.774596669241483, -0.774596669241483, +0.000000000000000, 0.274348422496571),
            (-0.774596669241483, +0.000000000000000, +0.000000000000000, 0.438957475994513),
            (+0.000000000000000, +0.000000000000000, +0.000000000000000, 0.702331961591221),
            (+0.774596669241483, +0.000000000000000, +0.000000000000000, 0.438957475994513),
            (-0.774596669241483, +0.774596669241483, +0.000000000000000, 0.274348422496571),
            (+0.000000000000000, +0.774596669241483, +0.000000000000000, 0.438957475994513),
            (+0.774596669241483, +0.774596669241483, +0.000000000000000, 0.274348422496571),
            (-0.774596669241483, -0.774596669241483, +0.774596669241483, 0.171467764060357),
            (+0.000000000000000, -0.774596669241483, +0.774596669241483, 0.274348422496571),
            (+0.774596669241483, -0.774596669241483, +0.774596669241483, 0.171467764060357),
            (-0.774596669241483, +0.000000000000000, +0.774596669241483, 0.274348422496571),
            (+0.000000000000000, +0.000000000000000, +0.774596669241483, 0.438957475994513),
            (+0.774596669241483, +0.000000000000000, +0.774596669241483, 0.274348422496571),
            (-0.774596669241483, +0.774596669241483, +0.774596669241483, 0.171467764060357),
            (+0.000000000000000, +0.774596669241483, +0.774596669241483, 0.274348422496571),
            (+0.774596669241483, +0.774596669241483, +0.774596669241483, 0.171467764060357),
        ),
    },
    "tri": {
        1: (
            (1.0 / 3.0, 1.0 / 3.0, 0.0, 1.0 / 2.0),
        ),
        3: (
            (1.0 / 6.0, 1.0 / 6.0, 0.0, 1.0 / 6.0),
            (2.0 / 3.0, 1.0 / 6.0, 0.0, 1.0 / 6.0),
            (1.0 / 6.0, 2.0 / 3.0, 0.0, 1.0 / 6.0),
        ),
        12: (
            (0.873821971016996, 0.063089014491502, 0, 0.0254224531851035),
            (0.063089014491502, 0.873821971016996, 0, 0.0254224531851035),
            (0.063089014491502, 0.063089014491502, 0, 0.0254224531851035),
            (0.501426509658179, 0.249286745170910, 0, 0.0583931378631895),
            (0.249286745170910, 0.501426509658179, 0, 0.0583931378631895),
            (0.249286745170910, 0.249286745170910, 0, 0.0583931378631895),
            (0.053145049844817, 0.310352451033784, 0, 0.041425537809187),
            (0.310352451033784, 0.053145049844817, 0, 0.041425537809187),
            (0.053145049844817, 0.636502499121398, 0, 0.041425537809187),
            (0.310352451033784, 0.636502499121398, 0, 0.041425537809187),
            (0.636502499121398, 0.053145049844817, 0, 0.041425537809187),
            (0.636502499121398, 0.310352451033784, 0, 0.041425537809187),
        ),
        16: (
            (3.33333333333333E-01, 3.33333333333333E-01, 0.0, 7.21578038388935E-02),
            (8.14148234145540E-02, 4.59292588292723E-01, 0.0, 4.75458171336425E-02),
            (4.59292588292723E-01, 8.14148234145540E-02, 0.0, 4.75458171336425E-02),
            (4.59292588292723E-01, 4.59292588292723E-01, 0.0, 4.75458171336425E-02),
            (6.58861384496480E-01, 1.70569307751760E-01, 0.0, 5.16086852673590E-02),
            (1.70569307751760E-01, 6.58861384496480E-01, 0.0, 5.16086852673590E-02),
            (1.70569307751760E-01, 1.70569307751760E-01, 0.0, 5.16086852673590E-02),
            (8.98905543365938E-01, 5.05472283170310E-02, 0.0, 1.62292488115990E-02),
            (5.05472283170310E-02, 8.98905543365938E-01, 0.0, 1.62292488115990E-02),
            (5.05472283170310E-02, 5.05472283170310E-02, 0.0, 1.62292488115990E-02),
            (8.39477740995800E-03, 2.63112829634638E-01, 0.0, 1.36151570872175E-02),
            (7.28492392955404E-01, 8.39477740995800E-03, 0.0, 1.36151570872175E-02),
            (2.63112829634638E-01, 7.28492392955404E-01, 0.0, 1.36151570872175E-02),
            (8.39477740995800E-03, 7.28492392955404E-01, 0.0, 1.36151570872175E-02),
            (7.28492392955404E-01, 2.63112829634638E-01, 0.0, 1.36151570872175E-02),
            (2.63112829634638E-01, 8.39477740995800E-03, 0.0, 1.36151570872175E-02),
        ),
    },
    "tet": {
        1: (
            (1.0 / 4.0, 1.0 / 4.0, 1.0 / 4.0, 1.0 / 6.0),
        ),
        4: (
            ((5.0 + 3.0 * SQ5) / 20.0, (5.0 - SQ5) / 20.0, (5.0 - SQ5) / 20.0, 1.0 / 24),
            ((5.0 - SQ5) / 20.0, (5.0 + 3.0 * SQ5) / 20.0, (5.0 - SQ5) / 20.0, 1.0 / 24),
            ((5.0 - SQ5) / 20.0, (5.0 - SQ5) / 20.0, (5.0 + 3.0 * SQ5) / 20.0, 1.0 / 24),
            ((5.0 - SQ5) / 20.0, (5.0 - SQ5) / 20.0, (5.0 - SQ5) / 20.0, 1.0 / 24),
        ),
        5: (
            (1.0 / 4.0, 1.0 / 4.0, 1.0 / 4.0, -2.0 / 15.0),
            (1.0 / 6.0, 1.0 / 6.0, 1.0 / 6.0, 3.0 / 40.0),
            (1.0 / 6.0, 1.0 / 6.0, 1.0 / 2.0, 3.0 / 40.0),
            (1.0 / 6.0, 1.0 / 2.0, 1.0 / 6.0, 3.0 / 40.0),
            (1.0 / 2.0, 1.0 / 6.0, 1.0 / 6.0, 3.0 / 40.0),
        ),
        # NOTE: six points on the axes of [-1, +1]^3; weights sum to 8, not 1/6
        6: (
            (+1.0, +0.0, +0.0, 4.0 / 3.0),
            (-1.0, +0.0, +0.0, 4.0 / 3.0),
            (+0.0, +1.0, +0.0, 4.0 / 3.0),
            (+0.0, -1.0, +0.0, 4.0 / 3.0),
            (+0.0, +0.0, +1.0, 4.0 / 3.0),
            (+0.0, +0.0, -1.0, 4.0 / 3.0),
        ),
    },
}


def tabulated_point_set(domain: str, npts: int) -> PointSet:
    """
    Convert one table entry into a point set tagged with the domain name.

    Args:
        domain: Domain tag, e.g. "tri".
        npts: Number of points.

    Raises:
        KeyError: If the table has no such entry.

    Returns:
        The point set with ``rule == domain``.
    """
    ndim = DOMAIN_DIMENSIONS[domain]
    rows = TABULATED_POINTS[domain][npts]
    points = tuple(IntegrationPoint(coords=row[:ndim], weight=row[3]) for row in rows)
    return PointSet(rule=domain, ndim=ndim, npts=npts, points=points)


@lru_cache(maxsize=None)
def tabulated_registry() -> PointSetRegistry:
    """Registry with every tabulated point set, keyed by (domain tag, number of points)."""
    registry = PointSetRegistry.from_point_sets(
        tabulated_point_set(domain, npts)
        for domain, entries in TABULATED_POINTS.items()
        for npts in entries
    )
    logger.debug(f"Tabulated registry loaded with {len(registry)} point sets.")
    return registry


def find_tabulated(domain: str, npts: int) -> Optional[PointSet]:
    """Look up a tabulated point set; None if the domain or size is not tabulated."""
    return tabulated_registry().find(domain, npts)

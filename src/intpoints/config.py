"""
Configuration
=============
This module serves as the central registry for global constants.

Why is this file needed?
------------------------
1. Abstraction: It keeps the list of point sets each element family needs in
   one place instead of scattering rule/size pairs throughout the code.
2. Consistency: Plotting styles and the logger namespace are shared by all
   modules.

Exports:
    LOGGER_NAME (str): Namespace of the package logger.
    ELEMENT_FAMILY_POINT_SETS (dict): Point sets built for "lin", "qua" and "hex" elements.
    DEFAULT_POINT_STYLE (dict): Matplotlib style of drawn integration points.
    REFERENCE_SQUARE_STYLE (dict): Matplotlib style of the drawn reference square.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from intpoints.rules import Rule, RuleParameters


@dataclass(frozen=True)
class PointSetConfig:
    """
    Describes one point set to be generated when a registry is built.
    """
    rule: Rule | str
    ndim: int
    npts: int
    params: Optional[RuleParameters | Mapping[str, float]] = field(default=None, compare=False)


LOGGER_NAME: str = "intpoints"

ELEMENT_FAMILY_POINT_SETS: dict[str, tuple[PointSetConfig, ...]] = {
    "lin": tuple(PointSetConfig(Rule.LE, 1, n) for n in range(1, 6)),
    "qua": (
        PointSetConfig(Rule.LE, 2, 4),
        PointSetConfig(Rule.LE, 2, 9),
        PointSetConfig(Rule.W5_CORNER, 2, 5),
        PointSetConfig(Rule.W4_STABLE, 2, 5),
        PointSetConfig(Rule.W8_FIXED, 2, 8),
    ),
    "hex": (
        PointSetConfig(Rule.LE, 3, 8),
        PointSetConfig(Rule.LE, 3, 27),
    ),
}

DEFAULT_POINT_STYLE: dict[str, Any] = {
    "color": "r",
    "marker": "*",
    "markeredgecolor": "r",
    "linestyle": "none",
    "clip_on": False,
}

REFERENCE_SQUARE_STYLE: dict[str, Any] = {
    "facecolor": "none",
    "edgecolor": "#2645cb",
    "closed": True,
    "clip_on": False,
}

"""
Integration Rules
=================
Closed set of rules known to the generator, together with the parameters the
parameterised rules need.

Rules:
    LE       -- Gauss-Legendre, tensor product of the 1D rule (1D, 2D, 3D)
    W5corner -- Wilson's 5-point rule with corner points at the element corners
    W4stable -- Wilson's 5-point rule, stabilised (nearly vanishing centre weight)
    W5       -- Wilson's 5-point rule with variable centre weight "w0"
    W8fixed  -- Wilson's 8-point rule (Appendix G-6, Eqs. (G.20))
    W8       -- Wilson's 8-point rule with variable axis weight "wb"
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from enum import StrEnum
from typing import Mapping, Optional

from intpoints.exceptions import (
    InvalidConfigurationError,
    MissingParameterError,
    UnsupportedRuleError,
)


class Rule(StrEnum):
    LE = "LE"
    W5_CORNER = "W5corner"
    W4_STABLE = "W4stable"
    W5 = "W5"
    W8_FIXED = "W8fixed"
    W8 = "W8"

    @classmethod
    def parse(cls, rule: Rule | str) -> Rule:
        """Convert a rule name into a `Rule`."""
        try:
            return cls(rule)
        except ValueError:
            raise UnsupportedRuleError(
                f"Rule '{rule}' is not available. "
                f"Available rules: {', '.join(r.value for r in cls)}."
            ) from None

    @property
    def required_parameter(self) -> Optional[str]:
        """Name of the parameter the rule cannot be generated without."""
        return _REQUIRED_PARAMETER.get(self)

    @property
    def fixed_shape(self) -> Optional[tuple[int, int]]:
        """(ndim, npts) the rule is restricted to; None for tensor-product rules."""
        return _FIXED_SHAPE.get(self)


_REQUIRED_PARAMETER: dict[Rule, str] = {
    Rule.W5: "w0",
    Rule.W8: "wb",
}

_FIXED_SHAPE: dict[Rule, tuple[int, int]] = {
    Rule.W5_CORNER: (2, 5),
    Rule.W4_STABLE: (2, 5),
    Rule.W5: (2, 5),
    Rule.W8_FIXED: (2, 8),
    Rule.W8: (2, 8),
}


@dataclass(frozen=True)
class RuleParameters:
    """
    Tunable parameters of the Wilson rules.

    Attributes:
        w0: Weight of the centre point of the 5-point rule "W5".
        wb: Weight of the axis points of the 8-point rule "W8".
    """
    w0: Optional[float] = None
    wb: Optional[float] = None

    @classmethod
    def from_mapping(cls, params: Mapping[str, float]) -> RuleParameters:
        """
        Build the parameters from a name -> value mapping.

        Raises:
            InvalidConfigurationError: If the mapping contains an unknown name
                or a value that is not a number.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(params) - known)
        if unknown:
            raise InvalidConfigurationError(
                f"Unknown rule parameter(s): {', '.join(unknown)}. "
                f"Known parameters: {', '.join(sorted(known))}."
            )
        values: dict[str, float] = {}
        for name, value in params.items():
            try:
                values[name] = float(value)
            except (TypeError, ValueError):
                raise InvalidConfigurationError(
                    f"Rule parameter '{name}' must be a number; got {value!r}."
                ) from None
        return cls(**values)

    def require(self, rule: Rule) -> float:
        """
        Return the value of the parameter `rule` requires.

        Raises:
            MissingParameterError: If the parameter was not supplied.
        """
        name = rule.required_parameter
        if name is None:
            raise InvalidConfigurationError(f"Rule '{rule}' has no tunable parameter.")
        value = getattr(self, name)
        if value is None:
            raise MissingParameterError(f"Rule '{rule}' requires parameter '{name}'.")
        return float(value)


def resolve_parameters(params: RuleParameters | Mapping[str, float] | None) -> RuleParameters:
    """Normalize the accepted parameter containers into `RuleParameters`."""
    if params is None:
        return RuleParameters()
    if isinstance(params, RuleParameters):
        return params
    return RuleParameters.from_mapping(params)

from intpoints.exceptions import (
    IntegrationPointsError,
    InvalidConfigurationError,
    MissingParameterError,
    UnsupportedRuleError,
)
from intpoints.points import IntegrationPoint, PointSet
from intpoints.gauss import gauss_legendre_nodes_weights
from intpoints.rules import Rule, RuleParameters
from intpoints.generator import generate
from intpoints.config import PointSetConfig
from intpoints.registry import PointSetRegistry, build_family_registries
from intpoints.tables import find_tabulated, tabulated_registry

__all__ = [
    "IntegrationPointsError",
    "InvalidConfigurationError",
    "MissingParameterError",
    "UnsupportedRuleError",
    "IntegrationPoint",
    "PointSet",
    "gauss_legendre_nodes_weights",
    "Rule",
    "RuleParameters",
    "generate",
    "PointSetConfig",
    "PointSetRegistry",
    "build_family_registries",
    "find_tabulated",
    "tabulated_registry",
]

"""Errors raised while generating or registering integration point sets."""


class IntegrationPointsError(ValueError):
    """Base class for all configuration-class errors of this package."""


class UnsupportedRuleError(IntegrationPointsError):
    """The rule name is not one of the known integration rules."""


class InvalidConfigurationError(IntegrationPointsError):
    """The dimension/point count (or a parameter value) does not fit the rule."""


class MissingParameterError(IntegrationPointsError):
    """A parameterised rule was requested without its required parameter."""

# encoding: utf-8
# Author: Kyohei Atarashi
# License: MIT


class InvalidConfigurationError(ValueError):
    """Raised when a hyperparameter or an input shape is invalid.

    Values are never clamped into range; the caller has to fix them.
    """


class NumericalInstabilityError(FloatingPointError):
    """Raised when the bias or the cached scores stop being finite."""

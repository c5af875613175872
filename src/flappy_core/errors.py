"""
errors.py: Exceptions raised by the gameplay core.
"""


class FlappyError(Exception):
    """Base class for all gameplay core errors."""


class ConfigurationError(FlappyError):
    """A device profile cannot be used to run a round."""


class RoundStateError(FlappyError):
    """The round was driven with input it cannot accept."""

"""Public API surface for pc_common."""

from pc_common.errors import ConfigurationError, InvariantViolation, PCError
from pc_common.logging import configure_logging

__all__ = ["configure_logging", "PCError", "InvariantViolation", "ConfigurationError"]

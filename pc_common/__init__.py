"""Shared helpers for prompt-choices."""

from pc_common.api import (
    ConfigurationError,
    InvariantViolation,
    PCError,
    configure_logging,
)

__all__ = ["configure_logging", "PCError", "InvariantViolation", "ConfigurationError"]

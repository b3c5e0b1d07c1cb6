"""Exception definitions module."""

from src.core.exceptions.errors import (
    AaptCmdError,
    AndroidSdkError,
    CommandBuildError,
    ConfigurationError,
)

__all__ = ["AaptCmdError", "CommandBuildError", "AndroidSdkError", "ConfigurationError"]

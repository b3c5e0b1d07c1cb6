"""Custom exception definitions for aaptcmd."""

from typing import Any


class AaptCmdError(Exception):
    """Base exception for all aaptcmd errors."""

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Error message.
            details: Additional error details.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            return f"{self.message} - Details: {self.details}"
        return self.message


class CommandBuildError(AaptCmdError):
    """Exception raised while assembling or handing off an aapt command."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize command build error.

        Args:
            message: Error message.
            path: Filesystem path involved in the failure.
            details: Additional error details.
        """
        details = details or {}
        if path:
            details["path"] = path
        super().__init__(message, details)


class AndroidSdkError(AaptCmdError):
    """Exception raised when the Android SDK layout cannot be resolved."""

    def __init__(
        self,
        message: str,
        sdk_path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize SDK error.

        Args:
            message: Error message.
            sdk_path: SDK root that was inspected.
            details: Additional error details.
        """
        details = details or {}
        if sdk_path:
            details["sdk_path"] = sdk_path
        super().__init__(message, details)


class ConfigurationError(AaptCmdError):
    """Exception raised for configuration errors."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize configuration error.

        Args:
            message: Error message.
            config_key: Configuration key that caused the error.
            details: Additional error details.
        """
        details = details or {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)

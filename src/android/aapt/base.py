"""
Base aapt command builder.

Holds the growing argv for one aapt invocation. Subclasses add a verb and the
conditional option methods for it.
"""

import logging
import shlex
from abc import ABC
from os import PathLike
from pathlib import Path

from src.android.sdk import AndroidSdk
from src.core.logger.logger import get_logger

# Anything accepted where a filesystem path is expected
PathArg = str | PathLike[str]


def absolute_path(path: PathArg) -> str:
    """Absolute form of a path without resolving symlinks."""
    return str(Path(path).absolute())


def is_blank(value: str | None) -> bool:
    """True for None, empty and whitespace-only strings."""
    return value is None or not value.strip()


class AaptCommandBuilder(ABC):
    """
    Accumulates aapt command tokens.

    Token 0 is always the aapt executable. A builder is single-use and not
    thread-safe: configure it, call build(), then discard it.
    """

    def __init__(
        self,
        android_sdk: AndroidSdk,
        log: logging.Logger | None = None,
    ):
        """
        Initialize the builder.

        Args:
            android_sdk: Locator for the aapt executable.
            log: Logger for builder messages. Defaults to this module's logger.
        """
        self.log = log or get_logger(__name__)
        self.commands: list[str] = [android_sdk.get_aapt_path()]

    def build(self) -> list[str]:
        """
        Get the assembled command.

        Returns:
            A copy of the token list, executable first.
        """
        return list(self.commands)

    def __str__(self) -> str:
        return shlex.join(self.commands)

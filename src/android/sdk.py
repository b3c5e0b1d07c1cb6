"""
Android SDK locator.

Resolves the on-disk location of SDK build tools, most importantly the
``aapt`` executable that command builders put at argv[0].
"""

import sys
from pathlib import Path

from src.core.config import get_sdk_path
from src.core.config.settings import AndroidSettings, get_settings
from src.core.exceptions.errors import AndroidSdkError
from src.core.logger.logger import get_logger

logger = get_logger(__name__)

BUILD_TOOLS_DIR = "build-tools"
AAPT_BINARY = "aapt.exe" if sys.platform == "win32" else "aapt"


def _version_key(version: str) -> tuple[tuple[int, ...], bool, str]:
    """Sort key for build-tools directory names like "30.0.3" or "31.0.0-rc1".

    A release ranks above its pre-releases; non-numeric parts rank lowest.
    """
    base, _, suffix = version.partition("-")
    numbers = tuple(int(part) if part.isdigit() else -1 for part in base.split("."))
    return numbers, suffix == "", suffix


class AndroidSdk:
    """
    Handle to an installed Android SDK.

    Only the SDK root is checked on construction. The aapt binary itself is
    never checked; a missing executable surfaces when the command is run.
    """

    def __init__(
        self,
        sdk_path: Path | str | None,
        build_tools_version: str | None = None,
    ):
        """
        Initialize the SDK handle.

        Args:
            sdk_path: SDK root directory.
            build_tools_version: Pin a build-tools version instead of using
                the newest installed one.

        Raises:
            AndroidSdkError: If sdk_path is missing or not a directory.
        """
        if sdk_path is None:
            raise AndroidSdkError(
                "No Android SDK configured. Set AAPTCMD_ANDROID_SDK_PATH or ANDROID_HOME."
            )

        path = Path(sdk_path)
        if not path.is_dir():
            raise AndroidSdkError(
                f"Android SDK directory does not exist: {path}",
                sdk_path=str(path),
            )

        self.sdk_path = path.absolute()
        self.build_tools_version = build_tools_version

    @classmethod
    def from_settings(cls, settings: AndroidSettings | None = None) -> "AndroidSdk":
        """
        Create an SDK handle from configuration.

        Args:
            settings: Android settings. Uses global settings if not provided.

        Returns:
            AndroidSdk for the configured (or environment) SDK root.
        """
        if settings is None:
            settings = get_settings().android
        return cls(get_sdk_path(settings), settings.build_tools_version)

    def installed_build_tools(self) -> list[str]:
        """
        List installed build-tools versions.

        Returns:
            Version directory names, newest first.
        """
        root = self.sdk_path / BUILD_TOOLS_DIR
        if not root.is_dir():
            return []
        versions = [entry.name for entry in root.iterdir() if entry.is_dir()]
        return sorted(versions, key=_version_key, reverse=True)

    def get_build_tools_directory(self) -> Path:
        """
        Get the build-tools directory in use.

        Returns:
            Path to the pinned version, or the newest installed one.

        Raises:
            AndroidSdkError: If the pinned version or any build-tools are missing.
        """
        if self.build_tools_version:
            directory = self.sdk_path / BUILD_TOOLS_DIR / self.build_tools_version
            if not directory.is_dir():
                raise AndroidSdkError(
                    f"Build tools {self.build_tools_version} not installed",
                    sdk_path=str(self.sdk_path),
                    details={"build_tools_version": self.build_tools_version},
                )
            return directory

        versions = self.installed_build_tools()
        if not versions:
            raise AndroidSdkError(
                "No build tools installed in Android SDK",
                sdk_path=str(self.sdk_path),
            )

        logger.debug(f"Using build tools {versions[0]}")
        return self.sdk_path / BUILD_TOOLS_DIR / versions[0]

    def get_aapt_path(self) -> str:
        """Absolute path to the aapt executable."""
        return str(self.get_build_tools_directory() / AAPT_BINARY)

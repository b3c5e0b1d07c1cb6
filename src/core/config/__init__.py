"""Configuration management for aaptcmd."""

import os
from pathlib import Path

from src.core.config.loader import ConfigLoader
from src.core.config.settings import (
    AndroidSettings,
    ExecutorSettings,
    LoggingSettings,
    Settings,
    get_settings,
)

# Checked in order when no SDK path is configured
SDK_ENV_VARS = ("ANDROID_HOME", "ANDROID_SDK_ROOT")


def get_sdk_path(settings: AndroidSettings | None = None) -> Path | None:
    """Get the Android SDK root.

    Priority:
    1. AAPTCMD_ANDROID_SDK_PATH / config file (via AndroidSettings)
    2. ANDROID_HOME environment variable
    3. ANDROID_SDK_ROOT environment variable

    Args:
        settings: Android settings. Uses global settings if not provided.

    Returns:
        SDK root path or None.
    """
    if settings is None:
        settings = get_settings().android

    if settings.sdk_path is not None:
        return settings.sdk_path

    for var in SDK_ENV_VARS:
        value = os.environ.get(var)
        if value:
            return Path(value)

    return None


__all__ = [
    "AndroidSettings",
    "ConfigLoader",
    "ExecutorSettings",
    "LoggingSettings",
    "SDK_ENV_VARS",
    "Settings",
    "get_sdk_path",
    "get_settings",
]

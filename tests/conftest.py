"""Pytest configuration and shared fixtures."""

import shutil
import tempfile
from pathlib import Path
from typing import Generator
from unittest.mock import MagicMock

import pytest

from src.android.aapt.package import Aapt1PackageCommandBuilder
from src.android.sdk import AAPT_BINARY, AndroidSdk


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory that is cleaned up after the test.

    Yields:
        Path to the temporary directory.
    """
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def sdk_root(temp_dir: Path) -> Path:
    """Create a minimal Android SDK layout with two build-tools versions.

    Args:
        temp_dir: Temporary directory fixture.

    Returns:
        Path to the SDK root.
    """
    root = temp_dir / "android-sdk"
    for version in ("28.0.3", "30.0.3"):
        tools = root / "build-tools" / version
        tools.mkdir(parents=True)
        (tools / AAPT_BINARY).write_text("#!/bin/sh\n")
    return root


@pytest.fixture
def android_sdk(sdk_root: Path) -> AndroidSdk:
    """AndroidSdk pointing at the fake SDK."""
    return AndroidSdk(sdk_root)


@pytest.fixture
def aapt_path(android_sdk: AndroidSdk) -> str:
    """Resolved aapt path of the fake SDK."""
    return android_sdk.get_aapt_path()


@pytest.fixture
def mock_log() -> MagicMock:
    """Stand-in logger so tests can assert on log calls."""
    return MagicMock()


@pytest.fixture
def builder(android_sdk: AndroidSdk, mock_log: MagicMock) -> Aapt1PackageCommandBuilder:
    """Fresh package command builder."""
    return Aapt1PackageCommandBuilder(android_sdk, mock_log)


@pytest.fixture
def project_dir(temp_dir: Path) -> Path:
    """Create an Android project skeleton.

    Layout: AndroidManifest.xml, res/, overlay/, assets/ and libs/android.jar.

    Args:
        temp_dir: Temporary directory fixture.

    Returns:
        Path to the project directory.
    """
    project = temp_dir / "project"
    for name in ("res", "overlay", "assets", "libs"):
        (project / name).mkdir(parents=True)
    (project / "AndroidManifest.xml").write_text(
        '<manifest package="com.example.app"/>\n'
    )
    (project / "libs" / "android.jar").write_bytes(b"PK")
    return project

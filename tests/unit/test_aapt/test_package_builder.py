"""
Unit tests for Aapt1PackageCommandBuilder.

Tests cover:
- Verb seeding
- Each option's gate and emitted tokens
- Resource directory ordering
- ProGuard parent directory creation
- Chained end-to-end assembly
"""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from src.android.aapt import (
    Aapt1PackageCommandBuilder,
    AaptCommandBuilder,
    GenerateSourcesCommandBuilder,
    LinkCommandBuilder,
)
from src.core.exceptions.errors import CommandBuildError

BLANK_VALUES = [None, "", "   ", "\t\n"]


def tail(builder: Aapt1PackageCommandBuilder) -> list[str]:
    """Tokens after the executable and the verb."""
    return builder.build()[2:]


class TestConstruction:
    """Tests for builder construction."""

    def test_starts_with_aapt_and_verb(self, builder, aapt_path):
        """Test executable is token 0 and package is token 1."""
        assert builder.build() == [aapt_path, "package"]

    def test_implements_both_capabilities(self, builder):
        """Test the builder can stand in for either capability."""
        assert isinstance(builder, AaptCommandBuilder)
        assert isinstance(builder, GenerateSourcesCommandBuilder)
        assert isinstance(builder, LinkCommandBuilder)

    def test_default_logger_used_when_none_given(self, android_sdk):
        """Test a logger is supplied when the caller passes none."""
        builder = Aapt1PackageCommandBuilder(android_sdk)
        assert builder.log is not None

    def test_build_is_idempotent(self, builder, project_dir):
        """Test reading twice returns the same tokens."""
        builder.set_path_to_android_manifest(project_dir / "AndroidManifest.xml").set_verbose(True)
        assert builder.build() == builder.build()

    def test_build_returns_copy(self, builder):
        """Test mutating the result does not touch the builder."""
        result = builder.build()
        result.append("--bogus")
        assert "--bogus" not in builder.build()

    def test_str_is_shell_rendering(self, builder, aapt_path):
        """Test str() joins tokens for display."""
        builder.force_overwrite_existing_files()
        assert str(builder) == f"{aapt_path} package -f"


class TestFlagOptions:
    """Tests for options that always emit a single flag."""

    @pytest.mark.parametrize(
        "method, flag",
        [
            ("make_package_directories", "-m"),
            ("auto_add_overlay", "--auto-add-overlay"),
            ("force_overwrite_existing_files", "-f"),
            ("disable_png_crunching", "--no-crunch"),
        ],
    )
    def test_unconditional_flag(self, builder, method, flag):
        """Test each call adds exactly its flag."""
        result = getattr(builder, method)()
        assert result is builder
        assert tail(builder) == [flag]

    def test_non_constant_id_default(self, builder, mock_log):
        """Test non-constant-id defaults to on."""
        builder.make_resources_non_constant()
        assert tail(builder) == ["--non-constant-id"]
        mock_log.debug.assert_called_once_with("Adding non-constant-id")

    def test_non_constant_id_disabled(self, builder):
        """Test non-constant-id can be switched off."""
        builder.make_resources_non_constant(False)
        assert tail(builder) == []

    def test_verbose(self, builder):
        """Test verbose is gated on the boolean."""
        builder.set_verbose(False)
        assert tail(builder) == []
        builder.set_verbose(True)
        assert tail(builder) == ["-v"]


class TestDebugMode:
    """Tests for the debug/release toggle."""

    def test_debug_adds_flag(self, builder, mock_log):
        """Test debug mode adds one token and logs a debug build."""
        builder.set_debug_mode(True)
        assert tail(builder) == ["--debug-mode"]
        mock_log.info.assert_called_once_with("Generating debug apk.")

    def test_release_adds_nothing(self, builder, mock_log):
        """Test release mode only logs."""
        builder.set_debug_mode(False)
        assert tail(builder) == []
        mock_log.info.assert_called_once_with("Generating release apk.")


class TestStringOptions:
    """Tests for options gated on a non-blank string."""

    METHODS = [
        ("generate_r_into_package", "--custom-package", "com.example.r"),
        ("add_configurations", "-c", "port,land,en_US"),
        ("rename_manifest_package", "--rename-manifest-package", "com.example.renamed"),
        (
            "rename_instrumentation_target_package",
            "--rename-instrumentation-target-package",
            "com.example.target",
        ),
    ]

    @pytest.mark.parametrize("method, flag, value", METHODS)
    @pytest.mark.parametrize("blank", BLANK_VALUES)
    def test_blank_is_omitted(self, builder, method, flag, value, blank):
        """Test None, empty and whitespace values add nothing."""
        result = getattr(builder, method)(blank)
        assert result is builder
        assert tail(builder) == []

    @pytest.mark.parametrize("method, flag, value", METHODS)
    def test_value_emits_flag_and_value(self, builder, method, flag, value):
        """Test a real value adds flag then value at the tail."""
        builder.force_overwrite_existing_files()
        getattr(builder, method)(value)
        assert tail(builder) == ["-f", flag, value]

    def test_configurations_passed_through(self, builder):
        """Test the configuration list is not reformatted."""
        builder.add_configurations("port, land,zz_ZZ")
        assert tail(builder) == ["-c", "port, land,zz_ZZ"]


class TestPathOptions:
    """Tests for options that always emit a flag with an absolute path."""

    @pytest.mark.parametrize(
        "method, flag",
        [
            ("set_resource_constants_folder", "-J"),
            ("set_path_to_android_manifest", "-M"),
            ("add_existing_package_to_base_include_set", "-I"),
            ("generate_r_text_file", "--output-text-symbols"),
            ("set_output_apk_file", "-F"),
        ],
    )
    def test_emits_absolute_path(self, builder, temp_dir, method, flag):
        """Test the value is the absolute path, existing or not."""
        target = temp_dir / "does-not-exist-yet"
        getattr(builder, method)(target)
        assert tail(builder) == [flag, str(target.absolute())]

    def test_relative_path_made_absolute(self, builder, temp_dir, monkeypatch):
        """Test relative paths are resolved against the working directory."""
        monkeypatch.chdir(temp_dir)
        builder.set_output_apk_file("out/app.apk")
        assert tail(builder) == ["-F", str(Path.cwd() / "out" / "app.apk")]

    def test_accepts_string_paths(self, builder, project_dir):
        """Test str paths behave like Path objects."""
        manifest = project_dir / "AndroidManifest.xml"
        builder.set_path_to_android_manifest(str(manifest))
        assert tail(builder) == ["-M", str(manifest)]

    def test_includes_are_not_deduplicated(self, builder, project_dir):
        """Test every include call adds its own pair."""
        jar = project_dir / "libs" / "android.jar"
        builder.add_existing_package_to_base_include_set(jar)
        builder.add_existing_package_to_base_include_set(jar)
        assert tail(builder) == ["-I", str(jar), "-I", str(jar)]


class TestResourceDirectories:
    """Tests for existence-gated resource and asset directories."""

    def test_existing_directory(self, builder, project_dir):
        """Test an existing directory is added."""
        builder.add_resource_directory_if_exists(project_dir / "res")
        assert tail(builder) == ["-S", str(project_dir / "res")]

    def test_missing_directory_skipped(self, builder, project_dir):
        """Test a missing directory adds nothing."""
        builder.add_resource_directory_if_exists(project_dir / "missing")
        builder.add_resource_directory_if_exists(None)
        assert tail(builder) == []

    def test_order_preserved_and_missing_skipped(self, builder, project_dir):
        """Test [A, B, C] with B missing yields -S A -S C."""
        a = project_dir / "res"
        b = project_dir / "missing"
        c = project_dir / "overlay"
        builder.add_resource_directories_if_exists([a, b, c])
        assert tail(builder) == ["-S", str(a), "-S", str(c)]

    def test_order_is_not_sorted(self, builder, project_dir):
        """Test caller order wins over any canonical order."""
        builder.add_resource_directories_if_exists(
            (project_dir / "res", project_dir / "overlay")
        )
        builder.add_resource_directories_if_exists(
            (project_dir / "overlay", project_dir / "res")
        )
        assert tail(builder)[1::2] == [
            str(project_dir / "res"),
            str(project_dir / "overlay"),
            str(project_dir / "overlay"),
            str(project_dir / "res"),
        ]

    @pytest.mark.parametrize("as_str", [True, False])
    def test_single_path_not_split(self, builder, project_dir, as_str):
        """Test a lone path is one directory, not a sequence of characters."""
        res = project_dir / "res"
        builder.add_resource_directories_if_exists(str(res) if as_str else res)
        assert tail(builder) == ["-S", str(res)]

    def test_single_missing_path(self, builder, project_dir):
        """Test a lone missing path adds nothing."""
        builder.add_resource_directories_if_exists(str(project_dir / "missing"))
        assert tail(builder) == []

    def test_none_collection(self, builder):
        """Test a None collection adds nothing."""
        builder.add_resource_directories_if_exists(None)
        assert tail(builder) == []

    def test_none_entries_skipped(self, builder, project_dir):
        """Test None entries inside the collection are skipped."""
        builder.add_resource_directories_if_exists([None, project_dir / "res"])
        assert tail(builder) == ["-S", str(project_dir / "res")]

    def test_assets_directory(self, builder, project_dir, mock_log):
        """Test an existing assets folder is added and logged."""
        builder.add_raw_assets_directory_if_exists(project_dir / "assets")
        assert tail(builder) == ["-A", str(project_dir / "assets")]
        mock_log.debug.assert_called_once()

    def test_missing_assets_directory(self, builder, project_dir):
        """Test missing or None assets folders add nothing."""
        builder.add_raw_assets_directory_if_exists(project_dir / "missing")
        builder.add_raw_assets_directory_if_exists(None)
        assert tail(builder) == []


class TestExtraArguments:
    """Tests for the raw argument escape hatch."""

    def test_appended_verbatim(self, builder):
        """Test arguments keep their order and content."""
        builder.add_extra_arguments(["--min-sdk-version", "21", " spaced "])
        assert tail(builder) == ["--min-sdk-version", "21", " spaced "]

    def test_single_string_is_one_argument(self, builder):
        """Test a lone string is appended whole."""
        builder.add_extra_arguments("--min-sdk-version")
        assert tail(builder) == ["--min-sdk-version"]

    def test_none(self, builder):
        """Test None adds nothing."""
        builder.add_extra_arguments(None)
        assert tail(builder) == []

    def test_empty(self, builder):
        """Test an empty list adds nothing."""
        builder.add_extra_arguments([])
        assert tail(builder) == []


class TestProguardOutput:
    """Tests for the ProGuard options file."""

    def test_creates_parent_directory(self, builder, temp_dir):
        """Test the missing parent directory is created."""
        output = temp_dir / "build" / "proguard" / "aapt_rules.txt"
        assert not output.parent.exists()

        builder.set_proguard_options_output_file(output)

        assert output.parent.is_dir()
        assert not output.exists()
        assert builder.build()[-2:] == ["-G", str(output.absolute())]

    def test_existing_parent_directory(self, builder, temp_dir):
        """Test an existing parent directory is left alone."""
        output = temp_dir / "rules.txt"
        builder.set_proguard_options_output_file(output)
        assert tail(builder) == ["-G", str(output)]

    def test_none(self, builder):
        """Test None adds nothing."""
        builder.set_proguard_options_output_file(None)
        assert tail(builder) == []

    def test_mkdir_failure_raises(self, builder, temp_dir):
        """Test a filesystem failure is reported, not swallowed."""
        output = temp_dir / "locked" / "rules.txt"
        with patch.object(Path, "mkdir", side_effect=PermissionError("denied")):
            with pytest.raises(CommandBuildError, match="Cannot create directory") as exc_info:
                builder.set_proguard_options_output_file(output)

        assert isinstance(exc_info.value.__cause__, PermissionError)
        assert exc_info.value.details["path"] == str(output.parent)
        assert tail(builder) == []


class TestChainedBuild:
    """End-to-end chained assembly."""

    def test_tokens_follow_call_order(self, builder, project_dir, aapt_path):
        """Test tokens appear in call order, not a canonical order."""
        manifest = project_dir / "AndroidManifest.xml"
        output = project_dir / "bin" / "app.apk"

        commands = (
            builder.set_path_to_android_manifest(manifest)
            .force_overwrite_existing_files()
            .set_verbose(True)
            .set_output_apk_file(output)
            .build()
        )

        assert commands == [
            aapt_path,
            "package",
            "-M",
            str(manifest),
            "-f",
            "-v",
            "-F",
            str(output),
        ]

    def test_full_generate_sources_command(self, builder, project_dir, temp_dir, aapt_path):
        """Test a realistic R.java generation command."""
        gen = temp_dir / "generated-sources" / "r"
        commands = (
            builder.make_package_directories()
            .set_resource_constants_folder(gen)
            .set_path_to_android_manifest(project_dir / "AndroidManifest.xml")
            .add_resource_directories_if_exists(
                [project_dir / "overlay", project_dir / "res", project_dir / "gone"]
            )
            .auto_add_overlay()
            .add_raw_assets_directory_if_exists(project_dir / "assets")
            .add_existing_package_to_base_include_set(project_dir / "libs" / "android.jar")
            .add_configurations(None)
            .add_extra_arguments(None)
            .set_verbose(False)
            .generate_r_text_file(temp_dir / "r-txt")
            .make_resources_non_constant(False)
            .generate_r_into_package("")
            .set_debug_mode(False)
            .build()
        )

        assert commands == [
            aapt_path,
            "package",
            "-m",
            "-J",
            str(gen),
            "-M",
            str(project_dir / "AndroidManifest.xml"),
            "-S",
            str(project_dir / "overlay"),
            "-S",
            str(project_dir / "res"),
            "--auto-add-overlay",
            "-A",
            str(project_dir / "assets"),
            "-I",
            str(project_dir / "libs" / "android.jar"),
            "--output-text-symbols",
            str(temp_dir / "r-txt"),
        ]

    def test_flag_value_pairs_contiguous(self, builder, project_dir):
        """Test each value flag is directly followed by its value."""
        builder.add_resource_directory_if_exists(project_dir / "res")
        builder.generate_r_into_package("com.example.r")
        builder.add_configurations("en")
        commands = tail(builder)
        assert commands == [
            "-S",
            str(project_dir / "res"),
            "--custom-package",
            "com.example.r",
            "-c",
            "en",
        ]


def test_log_argument_is_used(android_sdk):
    """Test a caller-supplied logger receives builder messages."""
    log = MagicMock()
    Aapt1PackageCommandBuilder(android_sdk, log).set_debug_mode(True)
    log.info.assert_called_once_with("Generating debug apk.")

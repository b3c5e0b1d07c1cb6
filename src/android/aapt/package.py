"""
aapt ``package`` command builder.

Every option is a conditional emission rule. Missing or blank values are not
errors: the option is simply left out and aapt decides whether the resulting
command is complete.
"""

import logging
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from src.android.aapt.base import AaptCommandBuilder, PathArg, absolute_path, is_blank
from src.android.aapt.capabilities import GenerateSourcesCommandBuilder, LinkCommandBuilder
from src.android.sdk import AndroidSdk
from src.core.exceptions.errors import CommandBuildError


class Aapt1PackageCommandBuilder(
    AaptCommandBuilder,
    GenerateSourcesCommandBuilder,
    LinkCommandBuilder,
):
    """
    Builds ``aapt package`` commands for packaging resources.

    All configuration methods append at the tail of the command and return
    the builder, so calls chain and tokens appear in call order.
    """

    def __init__(
        self,
        android_sdk: AndroidSdk,
        log: logging.Logger | None = None,
    ):
        super().__init__(android_sdk, log)
        self.commands.append("package")

    def make_resources_non_constant(self, make: bool = True) -> "Aapt1PackageCommandBuilder":
        """
        Make the resource IDs non constant.

        Needed for library R classes whose values are assigned when the final
        application is packaged.

        Args:
            make: If False, nothing is added.
        """
        if make:
            self.log.debug("Adding non-constant-id")
            self.commands.append("--non-constant-id")
        return self

    def make_package_directories(self) -> "Aapt1PackageCommandBuilder":
        """Make package directories under the resource constants folder."""
        self.commands.append("-m")
        return self

    def set_resource_constants_folder(self, path: PathArg) -> "Aapt1PackageCommandBuilder":
        """
        Specify where R java resource constant definitions are generated.

        Args:
            path: Resource constants folder.
        """
        self.commands.extend(["-J", absolute_path(path)])
        return self

    def generate_r_into_package(self, package_name: str | None) -> "Aapt1PackageCommandBuilder":
        """
        Generate R java into a different package.

        Args:
            package_name: Target package; blank values are ignored.
        """
        if not is_blank(package_name):
            self.commands.extend(["--custom-package", package_name])
        return self

    def set_path_to_android_manifest(self, path: PathArg) -> "Aapt1PackageCommandBuilder":
        """
        Specify the AndroidManifest.xml to include in the package.

        Args:
            path: Path to AndroidManifest.xml.
        """
        self.commands.extend(["-M", absolute_path(path)])
        return self

    def add_resource_directory_if_exists(
        self,
        resource_directory: PathArg | None,
    ) -> "Aapt1PackageCommandBuilder":
        """
        Add a directory in which to find resources.

        aapt scans resource directories left to right and the first match
        wins, so earlier calls take precedence.

        Args:
            resource_directory: Resource directory; ignored if None or missing.
        """
        if resource_directory is not None and Path(resource_directory).exists():
            self.commands.extend(["-S", absolute_path(resource_directory)])
        return self

    def add_resource_directories_if_exists(
        self,
        resource_directories: Iterable[PathArg | None] | PathArg | None,
    ) -> "Aapt1PackageCommandBuilder":
        """
        Add several resource directories, keeping their order.

        Args:
            resource_directories: Directories in precedence order; missing
                entries are skipped. A single path is treated as a
                one-element list.
        """
        if isinstance(resource_directories, (str, PathLike)):
            resource_directories = [resource_directories]
        if resource_directories is not None:
            for resource_directory in resource_directories:
                self.add_resource_directory_if_exists(resource_directory)
        return self

    def auto_add_overlay(self) -> "Aapt1PackageCommandBuilder":
        """Automatically add resources that are only in overlays."""
        self.commands.append("--auto-add-overlay")
        return self

    def add_raw_assets_directory_if_exists(
        self,
        assets_folder: PathArg | None,
    ) -> "Aapt1PackageCommandBuilder":
        """
        Add a directory of raw asset files.

        Args:
            assets_folder: Folder with the combined raw assets; ignored if
                None or missing.
        """
        if assets_folder is not None and Path(assets_folder).exists():
            self.log.debug(f"Adding assets folder : {assets_folder}")
            self.commands.extend(["-A", absolute_path(assets_folder)])
        return self

    def add_existing_package_to_base_include_set(self, path: PathArg) -> "Aapt1PackageCommandBuilder":
        """
        Add an existing package (e.g. android.jar) to the base include set.

        May be called repeatedly; every call adds its own ``-I`` pair.
        """
        self.commands.extend(["-I", absolute_path(path)])
        return self

    def add_configurations(self, configurations: str | None) -> "Aapt1PackageCommandBuilder":
        """
        Restrict the configurations to include.

        The default is all configurations. The value is a comma separated list
        such as ``en``, ``port,en`` or ``port,land,en_US``. The special locale
        ``zz_ZZ`` pseudolocalizes the default locale.

        Args:
            configurations: Comma separated configurations, passed through as is.
        """
        if not is_blank(configurations):
            self.commands.extend(["-c", configurations])
        return self

    def add_extra_arguments(self, extra_arguments: Iterable[str] | str | None) -> "Aapt1PackageCommandBuilder":
        """
        Append raw aapt arguments that have no dedicated method.

        Args:
            extra_arguments: Arguments appended verbatim, in order. A single
                string is one argument.
        """
        if isinstance(extra_arguments, str):
            extra_arguments = [extra_arguments]
        if extra_arguments is not None:
            self.commands.extend(extra_arguments)
        return self

    def set_verbose(self, is_verbose: bool) -> "Aapt1PackageCommandBuilder":
        """Make aapt output verbose."""
        if is_verbose:
            self.commands.append("-v")
        return self

    def generate_r_text_file(self, folder_for_r: PathArg) -> "Aapt1PackageCommandBuilder":
        """
        Generate a text file with the resource symbols of the R class.

        Args:
            folder_for_r: Folder in which the text file is generated.
        """
        self.commands.extend(["--output-text-symbols", absolute_path(folder_for_r)])
        return self

    def force_overwrite_existing_files(self) -> "Aapt1PackageCommandBuilder":
        """Force overwrite of existing files."""
        self.commands.append("-f")
        return self

    def disable_png_crunching(self) -> "Aapt1PackageCommandBuilder":
        """Disable PNG crunching."""
        self.commands.append("--no-crunch")
        return self

    def set_output_apk_file(self, output_file: PathArg) -> "Aapt1PackageCommandBuilder":
        """Specify the apk file to output."""
        self.commands.extend(["-F", absolute_path(output_file)])
        return self

    def set_proguard_options_output_file(
        self,
        output_file: PathArg | None,
    ) -> "Aapt1PackageCommandBuilder":
        """
        Output ProGuard options to a file.

        The parent directory is created if it does not exist yet.

        Args:
            output_file: ProGuard rules file; ignored if None.

        Raises:
            CommandBuildError: If the parent directory cannot be created.
        """
        if output_file is not None:
            parent_folder = Path(output_file).absolute().parent
            try:
                parent_folder.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise CommandBuildError(
                    f"Cannot create directory for proguard options: {parent_folder}",
                    path=str(parent_folder),
                    details={"error": str(e)},
                ) from e
            self.log.debug(f"Adding proguard file : {output_file}")
            self.commands.extend(["-G", absolute_path(output_file)])
        return self

    def rename_manifest_package(self, manifest_package: str | None) -> "Aapt1PackageCommandBuilder":
        """
        Rewrite the manifest so that its package name is manifest_package.

        Relative class names (for example .Foo) become absolute names in the
        old package, so code does not need to change.
        """
        if not is_blank(manifest_package):
            self.commands.extend(["--rename-manifest-package", manifest_package])
        return self

    def rename_instrumentation_target_package(
        self,
        instrumentation_package: str | None,
    ) -> "Aapt1PackageCommandBuilder":
        """
        Rewrite the manifest so all instrumentation components target the
        given package.

        Used together with rename_manifest_package to keep tests pointing at a
        renamed package.
        """
        if not is_blank(instrumentation_package):
            self.commands.extend(
                ["--rename-instrumentation-target-package", instrumentation_package]
            )
        return self

    def set_debug_mode(self, is_debug_mode: bool) -> "Aapt1PackageCommandBuilder":
        """
        Insert android:debuggable="true" into the application node of the
        manifest, making the app debuggable even on production devices.

        Args:
            is_debug_mode: False adds nothing and only logs a release build.
        """
        if is_debug_mode:
            self.log.info("Generating debug apk.")
            self.commands.append("--debug-mode")
        else:
            self.log.info("Generating release apk.")
        return self

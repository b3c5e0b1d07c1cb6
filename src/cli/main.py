"""Main CLI entry point for aaptcmd."""

import json
import sys
from pathlib import Path

import click

from src.android.aapt import Aapt1PackageCommandBuilder, AaptExecutor
from src.android.sdk import AndroidSdk
from src.cli.display import show_aapt_path, show_command, show_error, show_result
from src.core.config.settings import AndroidSettings, get_settings
from src.core.exceptions.errors import AaptCmdError
from src.core.logger.logger import setup_logging


def resolve_sdk(sdk: str | None, build_tools: str | None) -> AndroidSdk:
    """Create the SDK handle, letting CLI options override configuration."""
    settings = get_settings().android
    overrides = {}
    if sdk:
        overrides["sdk_path"] = sdk
    if build_tools:
        overrides["build_tools_version"] = build_tools
    if overrides:
        settings = AndroidSettings(**{**settings.model_dump(), **overrides})
    return AndroidSdk.from_settings(settings)


def sdk_options(func):
    """Shared --sdk/--build-tools options."""
    func = click.option(
        "--build-tools", help="Build-tools version to use (default: newest installed)"
    )(func)
    func = click.option(
        "--sdk", type=click.Path(file_okay=False), help="Android SDK root (default: ANDROID_HOME)"
    )(func)
    return func


@click.group(invoke_without_command=True)
@click.option("--version", "-v", is_flag=True, help="Show version")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Override the configured log level",
)
@click.pass_context
def main(ctx: click.Context, version: bool, log_level: str | None) -> None:
    """aaptcmd - assemble Android Asset Packaging Tool commands."""
    if version:
        from src import __version__

        click.echo(f"aaptcmd version {__version__}")
        return

    if log_level:
        setup_logging(level=log_level)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command()
@sdk_options
def locate(sdk: str | None, build_tools: str | None) -> None:
    """Print the aapt executable that commands will use.

    Example:
        aaptcmd locate --sdk ~/Android/Sdk
    """
    try:
        show_aapt_path(resolve_sdk(sdk, build_tools).get_aapt_path())
    except AaptCmdError as e:
        show_error("SDK Error", str(e))
        sys.exit(1)


@main.command()
@sdk_options
@click.option("--manifest", "-M", type=click.Path(dir_okay=False), help="AndroidManifest.xml to package")
@click.option("--res", "-S", "resource_dirs", multiple=True, type=click.Path(), help="Resource directory (repeatable, first wins)")
@click.option("--assets", "-A", type=click.Path(), help="Raw assets directory")
@click.option("--include", "-I", "includes", multiple=True, type=click.Path(), help="Existing package to include, e.g. android.jar (repeatable)")
@click.option("--gen", "-J", "gen_dir", type=click.Path(file_okay=False), help="Output folder for R.java")
@click.option("--make-package-dirs", "-m", is_flag=True, help="Create package directories under --gen")
@click.option("--custom-package", help="Generate R.java into this package")
@click.option("--configurations", "-c", help="Comma separated configurations to include, e.g. port,en")
@click.option("--output", "-F", type=click.Path(dir_okay=False), help="Output apk file")
@click.option("--proguard", "-G", type=click.Path(dir_okay=False), help="Write ProGuard options to this file")
@click.option("--output-text-symbols", "text_symbols_dir", type=click.Path(file_okay=False), help="Folder for the R.txt symbol file")
@click.option("--rename-manifest-package", help="Rewrite the manifest package name")
@click.option("--rename-instrumentation-target-package", help="Rewrite the instrumentation target package")
@click.option("--non-constant-id", is_flag=True, help="Make resource IDs non constant")
@click.option("--auto-add-overlay", is_flag=True, help="Add resources that only exist in overlays")
@click.option("--no-crunch", is_flag=True, help="Disable PNG crunching")
@click.option("--force", "-f", is_flag=True, help="Overwrite existing files")
@click.option("--verbose", "-v", is_flag=True, help="Verbose aapt output")
@click.option("--debug/--release", default=False, help="Build a debuggable apk")
@click.option("--extra", "extra_args", multiple=True, help="Raw argument appended verbatim (repeatable)")
@click.option("--json", "as_json", is_flag=True, help="Print the command as a JSON array")
@click.option("--run", "run_aapt", is_flag=True, help="Execute the command")
def package(
    sdk: str | None,
    build_tools: str | None,
    manifest: str | None,
    resource_dirs: tuple[str, ...],
    assets: str | None,
    includes: tuple[str, ...],
    gen_dir: str | None,
    make_package_dirs: bool,
    custom_package: str | None,
    configurations: str | None,
    output: str | None,
    proguard: str | None,
    text_symbols_dir: str | None,
    rename_manifest_package: str | None,
    rename_instrumentation_target_package: str | None,
    non_constant_id: bool,
    auto_add_overlay: bool,
    no_crunch: bool,
    force: bool,
    verbose: bool,
    debug: bool,
    extra_args: tuple[str, ...],
    as_json: bool,
    run_aapt: bool,
) -> None:
    """Assemble an `aapt package` command.

    Resource directories that do not exist are skipped.

    Example:
        aaptcmd package -M AndroidManifest.xml -S res -I android.jar -F app.apk -f
    """
    try:
        builder = Aapt1PackageCommandBuilder(resolve_sdk(sdk, build_tools))

        builder.make_resources_non_constant(non_constant_id)
        if make_package_dirs:
            builder.make_package_directories()
        if gen_dir:
            builder.set_resource_constants_folder(gen_dir)
        builder.generate_r_into_package(custom_package)
        if manifest:
            builder.set_path_to_android_manifest(manifest)
        builder.add_resource_directories_if_exists([Path(d) for d in resource_dirs])
        if auto_add_overlay:
            builder.auto_add_overlay()
        builder.add_raw_assets_directory_if_exists(assets)
        for include in includes:
            builder.add_existing_package_to_base_include_set(include)
        builder.add_configurations(configurations)
        builder.add_extra_arguments(extra_args)
        builder.set_verbose(verbose)
        if text_symbols_dir:
            builder.generate_r_text_file(text_symbols_dir)
        if force:
            builder.force_overwrite_existing_files()
        if no_crunch:
            builder.disable_png_crunching()
        if output:
            builder.set_output_apk_file(output)
        builder.set_proguard_options_output_file(proguard)
        builder.rename_manifest_package(rename_manifest_package)
        builder.rename_instrumentation_target_package(rename_instrumentation_target_package)
        builder.set_debug_mode(debug)

        commands = builder.build()
    except AaptCmdError as e:
        show_error("Command Error", str(e))
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(commands))
    else:
        show_command(commands)

    if not run_aapt:
        return

    result = AaptExecutor().run(commands)
    if as_json:
        click.echo(json.dumps(result.to_dict()))
    else:
        show_result(result)
    if not result.success:
        sys.exit(result.return_code or 1)


if __name__ == "__main__":
    main()

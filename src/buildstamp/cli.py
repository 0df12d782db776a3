"""Command-line interface for buildstamp."""

import sys
import json
import click
from pathlib import Path

from buildstamp.version import get_version
from buildstamp.config import (
    get_config_file, get_git_backend, get_git_timeout, set_git_backend,
    get_resolve_settings, load_project_config, read_package_version, PROJECT_CONFIG_FILE
)
from buildstamp.factory import GitReaderFactory, GIT_BACKENDS
from buildstamp.core.resolver import resolve_commit_hash
from buildstamp.build.stamp import BuildStamp
from buildstamp.models.commit_hash import CommitHashSource
from buildstamp.utils.console import (
    _rich_success, _rich_error, _rich_info, _rich_warning, _rich_echo,
    _rich_panel, _create_table, _get_console, STATUS_SYMBOLS
)
from buildstamp.utils.helpers import has_git_directory, is_tool_available


def print_version(ctx, param, value):
    """Print version and exit."""
    if not value or ctx.resilient_parsing:
        return

    _rich_panel(f"buildstamp version {get_version()}", style="cyan")
    ctx.exit()


project_root_option = click.option(
    '--project-root', '-C',
    type=click.Path(file_okay=False, path_type=Path),
    default=Path('.'),
    show_default=True,
    help="Project root to resolve the commit hash for",
)
backend_option = click.option(
    '--backend',
    type=click.Choice(sorted(GIT_BACKENDS)),
    help="Git backend to read HEAD with (defaults to configured backend)",
)


def _resolve(project_root, backend=None):
    """Resolve the commit hash for a project root using the configured git backend.

    Returns:
        tuple: (ResolvedCommitHash, backend name used)
    """
    configured_backend, timeout = get_resolve_settings()
    backend = backend or configured_backend
    reader = GitReaderFactory.create_reader(backend, cwd=project_root, timeout=timeout)
    return resolve_commit_hash(project_root, reader=reader), backend


def _build_stamp(project_root, backend=None):
    """Resolve the commit hash and wrap it with the project's build settings."""
    resolved, _ = _resolve(project_root, backend)
    stamp = BuildStamp.from_config(
        resolved.value,
        load_project_config(project_root),
        fallback_version=read_package_version(project_root),
    )
    return resolved, stamp


def _report_attempts(resolved, project_root, backend):
    """Print how the commit hash was resolved."""
    for attempt in resolved.attempts:
        symbol = 'env' if attempt.source == CommitHashSource.ENVIRONMENT else 'git'
        color = "green" if attempt.accepted else "muted"
        _rich_echo(str(attempt), color=color, symbol=symbol, err=True)

    if resolved.source == CommitHashSource.UNKNOWN:
        if not has_git_directory(project_root):
            _rich_warning(f"No commit hash in environment and {project_root} is not a git checkout", symbol="warning")
        elif backend == "subprocess" and not is_tool_available("git"):
            _rich_warning("git is not available on PATH", symbol="warning")


@click.group(help="buildstamp: resolve the commit hash build artifacts are stamped with")
@click.option('--version', is_flag=True, callback=print_version,
              expose_value=False, is_eager=True, help="Show version and exit")
def cli():
    """Main entry point for the buildstamp CLI."""


@cli.command(help="Print the resolved commit hash")
@project_root_option
@backend_option
@click.option('--json', 'as_json', is_flag=True, help="Print commit hash, source and variable as JSON")
@click.option('--short', is_flag=True, help="Print the abbreviated commit hash")
@click.option('--verbose', '-v', is_flag=True, help="Show every source consulted")
@click.option('--strict', is_flag=True, help="Exit with status 1 when no commit hash can be determined")
def resolve(project_root, backend, as_json, short, verbose, strict):
    """Resolve and print the commit hash."""
    try:
        resolved, backend = _resolve(project_root, backend)
    except Exception as e:
        _rich_error(f"Error resolving commit hash: {e}")
        sys.exit(1)

    if verbose:
        _report_attempts(resolved, project_root, backend)

    if as_json:
        click.echo(json.dumps(resolved.to_dict()))
    else:
        click.echo(resolved.short() if short else resolved.value)

    if strict and not resolved.is_known:
        sys.exit(1)


@cli.command(help="Show output paths stamped with the commit hash")
@project_root_option
@backend_option
@click.option('--json', 'as_json', is_flag=True, help="Print paths as a JSON object")
def paths(project_root, backend, as_json):
    """Show the templated output path for each artifact kind."""
    try:
        resolved, stamp = _build_stamp(project_root, backend)
        output_paths = stamp.output_paths()
    except Exception as e:
        _rich_error(f"Error building output paths: {e}")
        sys.exit(1)

    if as_json:
        click.echo(json.dumps(output_paths, indent=2))
        return

    table = _create_table(
        sorted(output_paths.items()),
        ["Kind", "Output path"],
        title=f"{STATUS_SYMBOLS['list']} Output paths ({resolved.short()})",
    )
    console = _get_console()
    if table is not None and console:
        console.print(table)
    else:
        for kind, path in sorted(output_paths.items()):
            click.echo(f"{kind}: {path}")


@cli.command(help="Print constants to compile into the built application")
@project_root_option
@backend_option
@click.option('--define', is_flag=True, help="Print process.env.* define replacements instead")
def constants(project_root, backend, define):
    """Print build constants as JSON."""
    try:
        _, stamp = _build_stamp(project_root, backend)
        values = stamp.define_constants() if define else stamp.constants()
    except Exception as e:
        _rich_error(f"Error building constants: {e}")
        sys.exit(1)

    click.echo(json.dumps(values, indent=2, sort_keys=True))


@cli.command(help="Configure buildstamp")
@click.option('--show', is_flag=True, help="Show current configuration")
@click.option('--set-backend', type=click.Choice(sorted(GIT_BACKENDS)), help="Set the default git backend")
@project_root_option
def config(show, set_backend, project_root):
    """Show or update buildstamp settings."""
    try:
        if set_backend:
            set_git_backend(set_backend)
            _rich_success(f"Git backend set to {set_backend}", symbol="success")

        if show:
            git_backend = get_git_backend()
            git_timeout = get_git_timeout()
            project_config = load_project_config(project_root)

            timeout_display = f"{git_timeout:g}s" if git_timeout is not None else "none"
            if git_timeout is not None and git_backend != "subprocess":
                timeout_display += f" (ignored by the {git_backend} backend)"

            rows = [
                ("Global", "Config file", get_config_file()),
                ("", "Git backend", git_backend),
                ("", "Git timeout", timeout_display),
            ]
            if project_config:
                rows.append(("Project", "Version", project_config.get('version', 'unset')))
                rows.append(("", "Path overrides", len(project_config.get('paths') or {})))
                rows.append(("", "Extra constants", len(project_config.get('constants') or {})))
            else:
                rows.append(("Project", "Status", f"No {PROJECT_CONFIG_FILE} (using defaults)"))
            rows.append(("", "buildstamp version", get_version()))

            table = _create_table(rows, ["Category", "Setting", "Value"], title="Current buildstamp configuration")
            console = _get_console()
            if table is not None and console:
                console.print(table)
            else:
                for category, setting, value in rows:
                    click.echo(f"{category:<8} {setting}: {value}")
        elif not set_backend:
            _rich_info("Use --show to display configuration", symbol="info")

    except Exception as e:
        _rich_error(f"Error updating configuration: {e}")
        sys.exit(1)


def main():
    """Main entry point for the CLI."""
    try:
        cli()
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()

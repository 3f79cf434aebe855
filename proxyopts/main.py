"""
proxyopts — CLI entrypoint.

Usage:
    python -m proxyopts.main --help
    python -m proxyopts.main resolve --json
    python -m proxyopts.main detect
    python -m proxyopts.main get https-proxy
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click

from proxyopts import __version__
from proxyopts.core.config.loader import SettingsError, load_settings
from proxyopts.core.observability.logging_config import (
    FILE_ENV_VAR,
    FILE_LEVEL_ENV_VAR,
    resolve_level,
    setup_logging,
)

_cwd_option = click.option(
    "--cwd",
    "cwd",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Project directory (default: current directory).",
)


@click.group()
@click.version_option(version=__version__, prog_name="proxyopts")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output.")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output.")
@click.option("--debug", is_flag=True, help="Enable debug logging (very verbose).")
@click.option(
    "--settings",
    "settings_path",
    type=click.Path(exists=False, path_type=Path),
    default=None,
    help="Path to proxyopts.yml (default: auto-detect).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    debug: bool,
    settings_path: Path | None,
) -> None:
    """proxyopts — proxy and TLS settings from npm / yarn configuration."""
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["settings_path"] = settings_path

    # ── Logging setup (once, at process start) ──────────────────
    setup_logging(
        level=resolve_level(debug=debug, verbose=verbose, quiet=quiet),
        log_file=os.environ.get(FILE_ENV_VAR),
        log_file_level=os.environ.get(FILE_LEVEL_ENV_VAR),
    )


def _load_settings_or_exit(ctx: click.Context, cwd: Path):
    try:
        return load_settings(path=ctx.obj.get("settings_path"), start_dir=cwd)
    except SettingsError as e:
        click.secho(f"❌ {e}", fg="red", err=True)
        sys.exit(1)


@cli.command()
@_cwd_option
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.option("--env", "as_env", is_flag=True, help="Output as KEY=value lines.")
@click.pass_context
def resolve(ctx: click.Context, cwd: Path | None, as_json: bool, as_env: bool) -> None:
    """Resolve proxy and TLS options for a project."""
    from proxyopts.core.services.proxy_options import resolve_proxy_options

    cwd = cwd or Path.cwd()
    settings = _load_settings_or_exit(ctx, cwd)
    options = resolve_proxy_options(cwd, settings=settings)

    if as_json:
        click.echo(json.dumps(options.to_dict(), indent=2))
        return

    if as_env:
        for name, value in options.to_env().items():
            click.echo(f"{name}={value}")
        return

    if not ctx.obj.get("quiet"):
        click.secho(f"\n🌐 Proxy options for {cwd}", fg="cyan", bold=True)

    click.echo(f"   proxy:      {options.proxy or '-'}")
    click.echo(f"   no-proxy:   {', '.join(options.no_proxy) or '-'}")
    ssl_color = "green" if options.strict_ssl else "yellow"
    click.echo("   strict-ssl: ", nl=False)
    click.secho(str(options.strict_ssl).lower(), fg=ssl_color)
    click.echo(f"   cert:       {'set' if options.cert else '-'}")
    click.echo(f"   ca:         {len(options.ca or [])} certificate(s)")
    click.echo()


@cli.command()
@_cwd_option
@click.option("--json-output", "--json", "as_json", is_flag=True, help="Output as JSON.")
@click.pass_context
def detect(ctx: click.Context, cwd: Path | None, as_json: bool) -> None:
    """Detect which package manager owns a project."""
    from proxyopts.core.services.detection import find_up
    from proxyopts.core.models.options import PackageManagerKind

    cwd = cwd or Path.cwd()
    settings = _load_settings_or_exit(ctx, cwd)
    marker_dir = find_up(settings.alternate_markers, cwd)
    kind = PackageManagerKind.ALTERNATE if marker_dir else PackageManagerKind.DEFAULT

    if as_json:
        click.echo(json.dumps({
            "package_manager": kind.cli,
            "marker_dir": str(marker_dir) if marker_dir else None,
        }, indent=2))
        return

    click.echo(kind.cli)
    if marker_dir and not ctx.obj.get("quiet"):
        click.echo(f"   marker found in {marker_dir}")


@cli.command("get")
@click.argument("key")
@_cwd_option
@click.pass_context
def get_key(ctx: click.Context, key: str, cwd: Path | None) -> None:
    """Print one normalized configuration value."""
    from proxyopts.core.services.proxy_options import build_reader

    cwd = cwd or Path.cwd()
    settings = _load_settings_or_exit(ctx, cwd)
    reader = build_reader(cwd, settings=settings)
    result = reader.lookup(key)

    if result.present:
        click.echo(result.value)
        return

    if result.ok:
        click.secho(f"{key} is not set", fg="yellow", err=True)
    else:
        click.secho(f"{key} is unavailable: {result.error}", fg="red", err=True)
    sys.exit(1)


if __name__ == "__main__":
    cli()

"""CLI interface for routesitemap.

Command-line tool for generating sitemaps from route configuration files.
"""

import logging
import sys
from pathlib import Path
from typing import cast

import click

from routesitemap.config import Config
from routesitemap.core.routes import load_route_configuration
from routesitemap.errors import RouteSitemapError
from routesitemap.sitemap import Sitemap

_config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path, dir_okay=False),
    default=None,
    help="Path to configuration file (default: auto-discover routesitemap.toml)",
)

_routes_file_argument = click.argument(
    "routes_file",
    type=click.Path(exists=True, path_type=Path, dir_okay=False),
    required=False,
)

_strict_option = click.option(
    "--strict/--no-strict",
    default=None,
    help="Fail on paths with unbound dynamic segments (overrides config)",
)

_verbose_option = click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output (log every path)",
)


@click.group()
def cli() -> None:
    """routesitemap - Sitemaps from route trees."""


@cli.command()
@_routes_file_argument
@_config_option
@click.option(
    "--hostname",
    default=None,
    help="Site root URL, e.g. https://example.com (overrides config)",
)
@click.option(
    "--dest",
    "-o",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Sitemap file path (overrides config)",
)
@click.option(
    "--public-path",
    default=None,
    help="Public URL path of the sitemap files (overrides config, default: /)",
)
@click.option(
    "--limit",
    "limit_count_paths",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum number of URLs per sitemap file (overrides config)",
)
@_strict_option
@_verbose_option
def build(
    routes_file: Path | None,
    config_path: Path | None,
    hostname: str | None,
    dest: Path | None,
    public_path: str | None,
    limit_count_paths: int | None,
    strict: bool | None,
    verbose: bool,
) -> None:
    """Generate sitemap files from a route configuration file."""
    _configure_logging(verbose)

    try:
        config = Config.load(config_path).with_overrides(
            hostname=hostname,
            dest=dest,
            public_path=public_path,
            limit_count_paths=limit_count_paths,
            strict_params=strict,
            routes_file=routes_file,
        )
        effective_hostname = _require_hostname(config)
        sitemap = _run_pipeline(config)

        click.echo(f"Paths: {len(sitemap.paths)}")
        sitemap.build(
            effective_hostname,
            limit_count_paths=config.sitemap.limit_count_paths,
        )
        written = sitemap.save(config.sitemap.dest, config.sitemap.public_path)

        for path in written:
            click.echo(f"Wrote {path}")
        click.echo(click.style("\nSitemap generated successfully!", fg="green", bold=True))

    except (RouteSitemapError, ValueError, OSError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)


@cli.command()
@_routes_file_argument
@_config_option
@_strict_option
@_verbose_option
def paths(
    routes_file: Path | None,
    config_path: Path | None,
    strict: bool | None,
    verbose: bool,
) -> None:
    """Print the paths that would be listed in the sitemap."""
    _configure_logging(verbose)

    try:
        config = Config.load(config_path).with_overrides(
            strict_params=strict,
            routes_file=routes_file,
        )
        sitemap = _run_pipeline(config)
    except (RouteSitemapError, ValueError, OSError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    for path in sitemap.paths:
        click.echo(path)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _run_pipeline(config: Config) -> Sitemap:
    """Flatten routes, then apply configured filter and params.

    Args:
        config: Application config

    Returns:
        Sitemap with the final path list, not built yet
    """
    routes_file = _require_routes_file(config)
    sitemap = Sitemap.from_route_configuration(load_route_configuration(routes_file))

    if config.filter.rules or config.filter.is_valid:
        sitemap.filter_paths(config.filter.rules, config.filter.is_valid)
    if config.params or config.sitemap.strict_params:
        sitemap.apply_params(config.params, strict=config.sitemap.strict_params)

    return sitemap


def _require_routes_file(config: Config) -> Path:
    """Get routes file or exit with error.

    Raises:
        SystemExit: If no routes file is given
    """
    if config.routes.file is None:
        click.echo(
            click.style(
                "Error: routes file required (via ROUTES_FILE argument or config)",
                fg="red",
            ),
            err=True,
        )
        click.echo("\nAdd the following to your routesitemap.toml:")
        click.echo("\n[routes]")
        click.echo('file = "routes.json"')
        sys.exit(1)
    return cast(Path, config.routes.file)  # narrowing after sys.exit


def _require_hostname(config: Config) -> str:
    """Get hostname or exit with error.

    Raises:
        SystemExit: If hostname is not provided
    """
    if not config.sitemap.hostname:
        click.echo(
            click.style(
                "Error: hostname required (via --hostname or config)",
                fg="red",
            ),
            err=True,
        )
        sys.exit(1)
    return cast(str, config.sitemap.hostname)  # narrowing after sys.exit

"""
Click-based CLI for nginx-resolver.

This module only ORCHESTRATES: it loads settings, calls the service or
parser and formats output.
"""

import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from nginx_resolver import __version__
from nginx_resolver.config import Settings, load_settings
from nginx_resolver.errors import ConfigError, ParseFailure
from nginx_resolver.logging_config import init_logging
from nginx_resolver.parser.site_conf import SiteConfigParser
from nginx_resolver.scanner.domain import is_valid_domain
from nginx_resolver.scanner.sites import SiteConfigLocator
from nginx_resolver.service import ProxyResolutionService, ResolutionStatus
from nginx_resolver.web.routes.resolution import ERROR_MESSAGES

console = Console()
err_console = Console(stderr=True)

EXIT_CODES = {
    ResolutionStatus.FOUND: 0,
    ResolutionStatus.NOT_FOUND: 1,
    ResolutionStatus.INTERNAL_ERROR: 1,
    ResolutionStatus.INVALID_DOMAIN: 2,
}


@click.group()
@click.version_option(version=__version__, prog_name="nginx-resolver")
@click.option("--config", "-c", type=click.Path(dir_okay=False), help="Path to YAML settings file")
@click.pass_context
def main(ctx: click.Context, config: str | None) -> None:
    """nginx-resolver: inspect reverse proxy site configurations."""
    ctx.ensure_object(dict)
    try:
        settings = load_settings(config)
    except ConfigError as e:
        raise click.ClickException(str(e))
    init_logging(settings.log_level)
    ctx.obj["settings"] = settings


def _settings(ctx: click.Context, sites_dir: str | None) -> Settings:
    settings: Settings = ctx.obj["settings"]
    if sites_dir:
        settings.sites_dir = Path(sites_dir)
    return settings


@main.command()
@click.option("--host", default=None, help="Bind address (default from settings)")
@click.option("--port", "-p", type=int, default=None, help="Port (default from settings)")
@click.option("--sites-dir", type=click.Path(file_okay=False), help="Directory holding site configurations")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None, sites_dir: str | None) -> None:
    """Start the HTTP API."""
    from nginx_resolver.web.app import run_server

    settings = _settings(ctx, sites_dir)
    run_server(settings, host=host, port=port)


@main.command()
@click.argument("domain")
@click.option("--sites-dir", type=click.Path(file_okay=False), help="Directory holding site configurations")
@click.pass_context
def resolve(ctx: click.Context, domain: str, sites_dir: str | None) -> None:
    """Print the parsed site configuration for DOMAIN as JSON."""
    settings = _settings(ctx, sites_dir)
    resolution = ProxyResolutionService(settings.sites_dir).resolve(domain)

    if resolution.found:
        console.print_json(json.dumps({"message": resolution.result.to_dict()}))
    else:
        _, error = ERROR_MESSAGES[resolution.status]
        console.print_json(json.dumps({"error": error}))
    sys.exit(EXIT_CODES[resolution.status])


@main.command()
@click.argument("domain")
@click.option("--sites-dir", type=click.Path(file_okay=False), help="Directory holding site configurations")
@click.pass_context
def locate(ctx: click.Context, domain: str, sites_dir: str | None) -> None:
    """Show which configuration file serves DOMAIN."""
    settings = _settings(ctx, sites_dir)
    if not is_valid_domain(domain):
        raise click.ClickException(f"Invalid domain: {domain}")

    locator = SiteConfigLocator(settings.sites_dir)
    for candidate in locator.candidates(domain):
        mark = "[green]✓[/]" if candidate.is_file() else "[dim]✗[/]"
        console.print(f"{mark} {escape(str(candidate))}", soft_wrap=True)

    path = locator.locate(domain)
    if path is None:
        err_console.print(f"[red]No configuration for {escape(domain)}[/]")
        sys.exit(1)
    console.print(f"[bold]Using:[/] {escape(str(path))}", soft_wrap=True)


@main.command()
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False))
def parse(config_file: str) -> None:
    """Parse a site configuration file and print its server blocks."""
    try:
        result = SiteConfigParser().parse_file(config_file)
    except (OSError, UnicodeDecodeError, ParseFailure) as e:
        err_console.print(f"[red]{escape(config_file)}: {escape(str(e))}[/]")
        sys.exit(1)
    console.print_json(json.dumps([block.to_dict() for block in result.blocks]))


if __name__ == "__main__":
    main()

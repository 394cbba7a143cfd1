"""Tailspin CLI - Main entry point."""

import json
import logging

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tailspin import __version__

console = Console()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def _load_config(config_path, seed_file):
    """Load the web config, applying a --seed-file override."""
    from pathlib import Path

    from tailspin.config.loader import ConfigError, load_web_config

    try:
        config = load_web_config(Path(config_path) if config_path else None)
    except ConfigError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)

    if seed_file:
        config.seed_file = Path(seed_file)
    return config


@click.group()
@click.version_option(version=__version__, prog_name="Tailspin")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """Tailspin Toys - crowdfunding campaigns for the toys of tomorrow."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
    )


@cli.command()
@click.option("--port", type=int, help="Port for web UI")
@click.option("--host", help="Host to bind to")
@click.option("--config", "config_path", type=click.Path(exists=True), help="YAML config file")
@click.option("--seed-file", type=click.Path(exists=True), help="YAML file of seed campaigns")
@click.option("--debug", is_flag=True, help="Enable debug mode")
def web(port, host, config_path, seed_file, debug):
    """Launch the campaign web site."""
    from tailspin.config.loader import ConfigError
    from tailspin.web.app import create_app

    config = _load_config(config_path, seed_file)
    if port:
        config.port = port
    if host:
        config.host = host
    if debug:
        config.debug = True

    try:
        app = create_app(config)
    except ConfigError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)

    console.print("[bold]Tailspin Toys[/bold]")
    console.print(f"  URL: http://{config.host}:{config.port}")
    console.print(f"  Seed: {config.seed_file or 'built-in campaigns'}")
    console.print()

    app.run(host=config.host, port=config.port, debug=config.debug)


@cli.command()
@click.option("--config", "config_path", type=click.Path(exists=True), help="YAML config file")
@click.option("--seed-file", type=click.Path(exists=True), help="YAML file of seed campaigns")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def campaigns(config_path, seed_file, as_json):
    """Show the campaigns a fresh server would start with."""
    from tailspin.campaign.seed import resolve_dataset, seed_if_empty
    from tailspin.config.loader import ConfigError
    from tailspin.storage.memory_store import MemoryStore
    from tailspin.web.app import format_money

    config = _load_config(config_path, seed_file)
    try:
        dataset = resolve_dataset(config)
    except ConfigError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        raise SystemExit(1)

    store = MemoryStore()
    seed_if_empty(store, dataset)

    if as_json:
        click.echo(
            json.dumps([c.model_dump(mode="json") for c in store.list_all()], indent=2)
        )
        return

    table = Table(title="Campaigns")
    table.add_column("ID", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Raised", justify="right")
    table.add_column("Goal", justify="right")
    table.add_column("Funded", justify="right")

    symbol = config.currency_symbol
    for c in store.list_all():
        pct_style = "green" if c.is_funded else "yellow"
        table.add_row(
            str(c.id),
            c.name,
            format_money(c.current_amount, symbol),
            format_money(c.goal_amount, symbol),
            f"[{pct_style}]{c.percent_funded}%[/{pct_style}]",
        )
    console.print(table)


if __name__ == "__main__":
    cli()

"""
Command-line interface for the SRG20 token lookup tool.

This module provides a CLI for verifying a token, printing its market data,
and exporting its price history as a chart or CSV file.
"""

import logging
import os
import sys

import click
from rich.console import Console
from rich.table import Table

from ..data.lookup import LookupSession, TokenLookup
from ..data.networks import Network, build_network_table
from ..data.processor import DataProcessor, snapshot_rows
from ..settings import get_api_key, load_config, load_environment
from ..visualization.engine import VisualizationEngine

console = Console()
logger = logging.getLogger(__name__)


@click.group()
@click.option("--config", "-c", default="config.yaml", help="Path to configuration file")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx, config, verbose):
    """SRG20 Token Lookup CLI"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    load_environment()

    ctx.ensure_object(dict)
    ctx.obj["config"] = load_config(config)


@cli.command()
@click.argument("token_address")
@click.option("--network", "-n", default=Network.BNB.value,
              type=click.Choice([n.value for n in Network], case_sensitive=False))
@click.option("--chart", "-o", help="Write the price history chart to this file (HTML or image)")
@click.option("--export-csv", "-e", help="Export the price history to a CSV file")
@click.pass_context
def lookup(ctx, token_address, network, chart, export_csv):
    """Verify an SRG20 token and show its market data"""
    config = ctx.obj["config"]

    with console.status(f"[bold green]Looking up {token_address} on {network.upper()}..."):
        session = LookupSession(TokenLookup(config))
        state = session.submit(token_address, network)

    if state.error:
        console.print(f"[bold red]{state.error}[/bold red]")
        ctx.exit(1)

    table = Table(title="Token Information", show_header=True)
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="green")
    for label, value in snapshot_rows(state.snapshot):
        table.add_row(label, value)
    console.print(table)

    if not state.has_chart:
        console.print("[yellow]No price history available[/yellow]")
        if chart or export_csv:
            console.print("[yellow]Nothing to export: chart and CSV were not written[/yellow]")
        return

    processor = DataProcessor()
    summary = processor.summarize_history(state.history)

    history_table = Table(title="Price History", show_header=True)
    history_table.add_column("Metric", style="cyan")
    history_table.add_column("Value", style="green")
    history_table.add_row("Data Points", str(summary["points"]))
    history_table.add_row("First Price", f"${summary['first']:,.6f}")
    history_table.add_row("Last Price", f"${summary['last']:,.6f}")
    history_table.add_row("Min Price", f"${summary['min']:,.6f}")
    history_table.add_row("Max Price", f"${summary['max']:,.6f}")
    if "change_pct" in summary:
        history_table.add_row("Change", f"{summary['change_pct']:+.2f}%")
    console.print(history_table)

    if export_csv:
        df = processor.price_history_to_frame(state.history)
        if processor.export_to_csv(df, export_csv):
            console.print(f"[green]Data exported to {export_csv}[/green]")
        else:
            console.print("[red]Failed to export data[/red]")

    if chart:
        engine = VisualizationEngine(config)
        symbol = state.snapshot.symbol or "Token"
        fig = engine.create_price_chart(state.history, title=f"{symbol} Price History")
        format = os.path.splitext(chart)[1].lstrip(".").lower() or "html"
        if engine.export_figure(fig, chart, format):
            console.print(f"[green]Chart saved to {chart}[/green]")
        else:
            console.print("[red]Failed to save chart[/red]")


@cli.command()
@click.pass_context
def networks(ctx):
    """List supported networks and their endpoints"""
    table = Table(title="Supported Networks", show_header=True)
    table.add_column("Network", style="cyan")
    table.add_column("Explorer", style="yellow")
    table.add_column("Chain", style="green")
    table.add_column("API Key", style="magenta")

    for network, endpoints in build_network_table(ctx.obj["config"]).items():
        configured = "set" if get_api_key(endpoints.api_key_env) else f"missing ({endpoints.api_key_env})"
        table.add_row(network.value, endpoints.explorer_url, endpoints.chain_id, configured)

    console.print(table)


def main():
    """Main entry point for the CLI"""
    try:
        cli(obj={})
    except Exception as e:
        console.print(f"[bold red]Error: {e}[/bold red]")
        logger.error(f"CLI error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()

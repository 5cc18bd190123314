"""
IPv4 subnet CLI commands.
"""

import json
import logging

import click
from netaddr import IPAddress
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ipv4calc.config import OUTPUT_FORMATS, get_config
from ipv4calc.errors import IPv4CalcError
from ipv4calc.subnet.core import (
    NetworkInfo,
    analyze,
    classify,
    is_rfc1918,
    parse_address,
    parse_prefix_length,
    parse_target,
    prefix_to_mask,
)

logger = logging.getLogger(__name__)


def fail(error: Exception) -> None:
    """Report an input error on stderr and exit non-zero."""
    logger.debug(f"Rejected input: {error}")
    Console(stderr=True).print(f"[red]Error:[/red] {escape(str(error))}")
    raise SystemExit(1)


def render_plain(info: NetworkInfo) -> None:
    for name, value in info.to_dict().items():
        click.echo(f"{name}: {value}")


def render_json(info: NetworkInfo) -> None:
    click.echo(json.dumps(info.to_dict(), indent=2))


def render_table(info: NetworkInfo) -> None:
    console = Console()

    table = Table(
        title=f"Subnet Analysis: {info.ip_address}/{info.cidr}",
        show_header=False,
        box=None,
    )
    table.add_column("Property", style="cyan")
    table.add_column("Value", style="white")

    for label, value in info.rows():
        table.add_row(label, value)

    console.print(table)


RENDERERS = {
    "plain": render_plain,
    "table": render_table,
    "json": render_json,
}


@click.group()
def subnet():
    """IPv4 subnet analysis."""
    pass


@subnet.command("analyze")
@click.argument("address")
@click.argument("prefix_length", required=False)
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (default from IPV4CALC_OUTPUT, else plain)",
)
def analyze_cmd(address: str, prefix_length: str | None, output_format: str | None):
    """Analyze an IPv4 address within a subnet.

    Examples:
        ipv4calc subnet analyze 192.168.1.0 24
        ipv4calc subnet analyze 10.0.0.0/8 --format table
        ipv4-analyze 172.16.0.0 12
    """
    try:
        ip, prefix = parse_target(address, prefix_length)
        info = analyze(ip, prefix)
    except IPv4CalcError as e:
        fail(e)

    RENDERERS[output_format or get_config().output_format](info)


@subnet.command()
@click.argument("addresses", nargs=-1, required=True)
def check(addresses: tuple[str, ...]):
    """Show class, RFC1918 status and NAT requirement for addresses.

    Examples:
        ipv4calc subnet check 8.8.8.8 192.168.1.1 224.0.0.5
    """
    console = Console()

    table = Table(title="IPv4 Address Check", box=None)
    table.add_column("Address", style="white")
    table.add_column("Class", style="white")
    table.add_column("Private", style="white")
    table.add_column("NAT", style="white")

    failed = False
    for addr in addresses:
        try:
            ip = parse_address(addr)
        except IPv4CalcError as e:
            failed = True
            table.add_row(escape(addr), "[red]Error[/red]", "[red]Error[/red]", f"[red]{escape(str(e))}[/red]")
            continue

        private = is_rfc1918(ip)
        private_str = "[yellow]Yes[/yellow]" if private else "[green]No[/green]"
        nat_str = "[yellow]Required[/yellow]" if private else "[green]Not required[/green]"
        table.add_row(str(ip), classify(ip).value, private_str, nat_str)

    console.print(table)

    if failed:
        raise SystemExit(1)


@subnet.command()
@click.argument("prefix_length")
def mask(prefix_length: str):
    """Print the dotted subnet mask for a prefix length.

    Examples:
        ipv4calc subnet mask 24
        ipv4calc subnet mask /19
    """
    try:
        prefix = parse_prefix_length(prefix_length)
    except IPv4CalcError as e:
        fail(e)

    click.echo(str(IPAddress(prefix_to_mask(prefix), 4)))

"""
ipv4calc command line entry point.
"""

import click

from ipv4calc import __version__
from ipv4calc.config import get_config
from ipv4calc.logging_config import configure_logging
from ipv4calc.subnet.cli import subnet


@click.group()
@click.version_option(__version__, prog_name="ipv4calc")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also write logs to this file (default from IPV4CALC_LOG_FILE)",
)
def main(debug: bool, log_file: str | None):
    """IPv4 subnet calculator."""
    config = get_config()
    configure_logging(
        debug=debug,
        log_file=log_file or config.log_file,
        level=config.log_level,
    )


main.add_command(subnet)


if __name__ == "__main__":
    main()

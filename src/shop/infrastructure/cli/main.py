import click

from shop.infrastructure.bootstrap import catalog_controller, configure_logging
from shop.infrastructure.cli.dispatcher import CommandDispatcher


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log every operation.")
def cli(verbose: bool) -> None:
    """Online computer shop catalog."""
    configure_logging(verbose)


@cli.command("run")
@click.option(
    "--script",
    type=click.File("r"),
    default="-",
    show_default=True,
    help="File with one command per line ('-' reads stdin).",
)
def run(script) -> None:
    """Execute catalog commands until 'Close' or end of input."""
    dispatcher = CommandDispatcher(catalog_controller())
    for output in dispatcher.run(script):
        click.echo(output)

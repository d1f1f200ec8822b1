"""
Quizlet Downloader CLI.

Examples:
    qdl export https://quizlet.com/123456789/biology-flash-cards/
    qdl export saved_set.html --format csv --swap
    qdl options set custom_format_enabled true
"""

import logging

import click

from quizlet_downloader import __homepage__, __version__
from quizlet_downloader.branding import print_banner
from quizlet_downloader.config import AppConfig

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@click.group()
@click.version_option(version=__version__, prog_name="Quizlet Downloader")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """
    Quizlet Downloader - export flashcard sets to JSON, CSV or Word.
    """
    config = AppConfig.from_env()
    level = logging.DEBUG if verbose else getattr(logging, config.log_level, logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    ctx.obj = config


@cli.command()
def about():
    """Show name, version and project page."""
    print_banner()
    click.echo(f"Quizlet Downloader {__version__}")
    click.echo(__homepage__)


# Import command groups
from quizlet_downloader.cli.commands import export, options  # noqa: E402

cli.add_command(export.export)
cli.add_command(options.options)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()

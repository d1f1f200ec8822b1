"""Export command - scrape a set page and save it as JSON, CSV or DOCX."""

import logging
from pathlib import Path
from typing import Optional

import click

from quizlet_downloader.cli.colors import print_dim, print_error, print_success, print_warning, print_working
from quizlet_downloader.config import AppConfig
from quizlet_downloader.core.errors import (
    ConfigurationError,
    ExportError,
    NotAQuizletPageError,
    QuizletDownloaderError,
)
from quizlet_downloader.core.filename import generate_filename
from quizlet_downloader.core.options import OptionsStore, UserOptions
from quizlet_downloader.formatting import SUPPORTED_FORMATS, ExportConverter
from quizlet_downloader.scrape import open_channel
from quizlet_downloader.scrape.config import STRATEGIES
from quizlet_downloader.scrape.models import ScrapeFailure, ScrapeRequest

logger = logging.getLogger(__name__)

QUIZLET_HOST = "quizlet.com"


def check_target(target: str):
    """
    Accept a Quizlet URL or a saved HTML page.

    Raises:
        NotAQuizletPageError: Anything else
    """
    if Path(target).is_file():
        return
    if QUIZLET_HOST not in target:
        raise NotAQuizletPageError(target)


def apply_overrides(store: OptionsStore, current: UserOptions, **changes) -> UserOptions:
    """Apply command-line overrides and persist each one that changed."""
    updated = current
    for key, value in changes.items():
        if value is None or getattr(updated, key) == value:
            continue
        updated = updated.model_copy(update={key: value})
        store.save(updated)
        logger.debug(f"Option {key} set to {value!r}")
    return updated


def choose_destination(suggested: Path, assume_yes: bool) -> Optional[Path]:
    """Ask where to save (pre-filled with ``suggested``); None if the user declines."""
    if assume_yes:
        return suggested

    answer = click.prompt("Save as", default=str(suggested))
    destination = Path(answer).expanduser()
    if destination.is_dir():
        destination = destination / suggested.name
    if destination.exists() and not click.confirm(f"{destination} exists. Overwrite?", default=False):
        return None
    return destination


@click.command()
@click.argument("target")
@click.option("--format", "-f", "output_format", type=click.Choice(SUPPORTED_FORMATS), help="Output format (saved)")
@click.option("--swap/--no-swap", default=None, help="Put the definition column first (saved)")
@click.option("--images/--no-images", "include_images", default=None, help="Include definition images (saved)")
@click.option("--pattern", "-p", help="Custom filename pattern; enables custom naming (saved)")
@click.option("--output-dir", "-o", type=click.Path(file_okay=False), help="Directory suggested in the save prompt")
@click.option("--strategy", "-s", type=click.Choice(STRATEGIES), help="How to open the page")
@click.option("--yes", "-y", "assume_yes", is_flag=True, help="Accept the suggested file name")
@click.pass_context
def export(
    ctx: click.Context,
    target: str,
    output_format: Optional[str],
    swap: Optional[bool],
    include_images: Optional[bool],
    pattern: Optional[str],
    output_dir: Optional[str],
    strategy: Optional[str],
    assume_yes: bool,
):
    """
    Scrape a Quizlet set and save it to a file.

    TARGET is a set URL or an HTML page saved from the browser. Use
    "--strategy browser" to render the page in Chrome and expand sets with
    more than 100 terms.

    Examples:
        qdl export https://quizlet.com/123456789/biology-flash-cards/ -s browser
        qdl export biology.html --format docx --no-images
    """
    config: AppConfig = ctx.obj

    try:
        check_target(target)
    except NotAQuizletPageError as e:
        print_error(f"Error: {e.message}")
        ctx.exit(1)

    store = OptionsStore(config.export.options_path)
    opts = apply_overrides(
        store,
        store.load(),
        output_format=output_format,
        swap=swap,
        include_images=include_images,
        filename_pattern=pattern,
        custom_format_enabled=True if pattern else None,
    )

    scrape_config = config.scrape.with_strategy(strategy) if strategy else config.scrape

    print_working("Scraping data...")
    try:
        with open_channel(target, scrape_config) as channel:
            response = channel.send(ScrapeRequest(swap=opts.swap))
    except ConfigurationError as e:
        print_error(f"Error: {e.message}")
        ctx.exit(1)
    except QuizletDownloaderError as e:
        logger.error(f"Scrape failed: {e.to_dict()}")
        print_error("Error: Page not ready or blocked.")
        ctx.exit(1)

    if isinstance(response, ScrapeFailure):
        print_error(f"Error: {response.message}" if response.message else "Error: No data found or script failed.")
        ctx.exit(1)

    payload = response.payload
    converter = ExportConverter(
        include_images=opts.include_images,
        image_width=config.export.image_width,
        image_timeout=config.export.image_timeout,
    )
    try:
        exported = converter.convert(payload, opts.output_format)
    except ExportError as e:
        print_error(f"Error: {e.message}")
        ctx.exit(1)

    filename = generate_filename(opts.effective_pattern, payload.info, exported.extension)
    directory = Path(output_dir).expanduser() if output_dir else config.export.output_path
    destination = choose_destination(directory / filename, assume_yes)
    if destination is None:
        print_warning("Save cancelled.")
        return

    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_bytes(exported.content)

    print_success(f"Done! Found {payload.info.numberOfQuizzes} quizzes.")
    print_dim(f"Saved to {destination}")

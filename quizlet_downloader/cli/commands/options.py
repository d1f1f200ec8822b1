"""Options commands - show and change persisted export options."""

import click

from quizlet_downloader.branding import CHECK
from quizlet_downloader.cli.colors import print_error, print_options_table, print_success
from quizlet_downloader.core.errors import InvalidOptionError
from quizlet_downloader.core.options import OptionsStore, UserOptions, update_option


def _store(ctx: click.Context) -> OptionsStore:
    return OptionsStore(ctx.obj.export.options_path)


@click.group()
def options():
    """Show and change saved export options."""
    pass


@options.command()
@click.pass_context
def show(ctx: click.Context):
    """
    Show the saved options.

    Example:
        qdl options show
    """
    store = _store(ctx)
    current = store.load()
    print_options_table(current.model_dump())
    click.echo(f"Stored in {store.path}")


@options.command(name="set")
@click.argument("key", type=click.Choice(list(UserOptions.model_fields)))
@click.argument("value")
@click.pass_context
def set_option(ctx: click.Context, key: str, value: str):
    """
    Change one option and save immediately.

    Examples:
        qdl options set output_format docx
        qdl options set swap true
        qdl options set filename_pattern "{quizSetTitle}_YYYYMMDD"
    """
    store = _store(ctx)
    try:
        updated = update_option(store.load(), key, value)
    except InvalidOptionError as e:
        print_error(f"Error: {e.message}")
        ctx.exit(1)

    store.save(updated)
    print_success(f"{CHECK} {key} = {getattr(updated, key)}")


@options.command()
@click.pass_context
def reset(ctx: click.Context):
    """Restore default options."""
    store = _store(ctx)
    store.save(UserOptions())
    print_success(f"{CHECK} Options reset to defaults")

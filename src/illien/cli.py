"""Illien CLI - journal storage commands."""

import json
import logging
import sys
from datetime import date, datetime

import click

from .commands import (
    delete_journal,
    get_dark_mode,
    get_journal_directory,
    list_journal_dates,
    list_journal_entries,
    load_daily_journal,
    load_journal,
    save_journal,
    set_dark_mode,
    set_journal_directory,
)
from .core.entries import daily_filename
from .errors import IllienError

dir_option = click.option(
    "--dir", "-D", "directory", default=None,
    help="Journal directory, defaults to the saved setting",
)


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _resolve_directory(directory: str | None) -> str:
    """Explicit --dir, else the saved journal directory."""
    if directory:
        return directory
    saved = get_journal_directory()
    if not saved:
        _fail("no journal directory configured")
    return saved


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """Illien - Markdown journal storage."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@main.command()
@click.argument("filename")
@click.option("--content", "-c", default=None, help="Entry content, read from stdin if omitted")
@dir_option
def save(filename: str, content: str | None, directory: str | None):
    """Write an entry, replacing any existing one."""
    directory = _resolve_directory(directory)
    if content is None:
        content = click.get_text_stream("stdin").read()
    try:
        save_journal(filename, content, directory)
    except IllienError as e:
        _fail(str(e))
    click.echo(f"Saved {filename}")


@main.command()
@click.argument("filename")
@dir_option
def load(filename: str, directory: str | None):
    """Print an entry."""
    directory = _resolve_directory(directory)
    try:
        content = load_journal(filename, directory)
    except IllienError as e:
        _fail(str(e))

    if content is None:
        click.echo(f"No entry: {filename}", err=True)
        sys.exit(1)
    click.echo(content, nl=False)


@main.command()
@click.argument("filename")
@dir_option
def delete(filename: str, directory: str | None):
    """Delete an entry."""
    directory = _resolve_directory(directory)
    try:
        delete_journal(filename, directory)
    except IllienError as e:
        _fail(str(e))
    click.echo(f"Deleted {filename}")


@main.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--daily-only", is_flag=True, help="Only list dates of daily entries")
@dir_option
def list_cmd(as_json: bool, daily_only: bool, directory: str | None):
    """List entries: daily entries newest first, then titled entries A-Z."""
    directory = _resolve_directory(directory)
    try:
        if daily_only:
            dates = list_journal_dates(directory)
        else:
            entries = list_journal_entries(directory)
    except IllienError as e:
        _fail(str(e))

    if daily_only:
        if as_json:
            click.echo(json.dumps(dates, indent=2))
        else:
            for day in dates:
                click.echo(day)
        return

    if as_json:
        click.echo(json.dumps([e.to_dict() for e in entries], indent=2))
        return

    if not entries:
        click.echo("No journal entries.")
        return

    for entry in entries:
        marker = "D" if entry.is_daily else "T"
        click.echo(f"[{marker}] {entry.title}")


@main.command()
@click.option("--date", "-d", "target_date", default=None,
              type=click.DateTime(formats=["%Y-%m-%d"]),
              help="Date to view (YYYY-MM-DD), defaults to today")
@dir_option
def today(target_date: datetime | None, directory: str | None):
    """View the daily entry for today."""
    directory = _resolve_directory(directory)
    target = target_date.date() if target_date else date.today()
    try:
        content = load_daily_journal(target, directory)
    except IllienError as e:
        _fail(str(e))

    if content is None:
        click.echo(f"No journal entry for {target.strftime('%A, %b %d')}.")
        return

    click.echo(f"{daily_filename(target)}\n")
    click.echo(content.strip())


# ============== Settings ==============


@main.group()
def config():
    """Show or change saved settings."""
    pass


@config.command("journal-dir")
@click.argument("path", required=False)
def config_journal_dir(path: str | None):
    """Show the journal directory, or set it to PATH."""
    if path is None:
        click.echo(get_journal_directory() or "(not set)")
        return
    try:
        set_journal_directory(path)
    except IllienError as e:
        _fail(str(e))
    click.echo(f"Journal directory set to {path}")


@config.command("dark-mode")
@click.argument("value", required=False, type=click.Choice(["on", "off"]))
def config_dark_mode(value: str | None):
    """Show the dark mode preference, or set it."""
    if value is None:
        current = get_dark_mode()
        if current is None:
            click.echo("(not set)")
        else:
            click.echo("on" if current else "off")
        return
    try:
        set_dark_mode(value == "on")
    except IllienError as e:
        _fail(str(e))
    click.echo(f"Dark mode {value}")


if __name__ == "__main__":
    main()

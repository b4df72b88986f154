"""CLI entry point for the blocky mdbook preprocessor."""

import json
import sys

import click
from dotenv import load_dotenv

load_dotenv()
from rich.console import Console
from rich.markup import escape

from .book import ON_ERROR_CHOICES, ChapterError, process_book
from .preprocessor import ProtocolError, load_options, parse_input, supports_renderer, version_warning

# stdout carries the book JSON back to mdbook
console = Console(stderr=True)


@click.group(invoke_without_command=True)
@click.option(
    "--on-error",
    type=click.Choice(ON_ERROR_CHOICES),
    envvar="BLOCKY_ON_ERROR",
    default=None,
    help="Stop the build on a malformed chapter (abort) or leave it unchanged (skip).",
)
@click.pass_context
def main(ctx: click.Context, on_error: str | None) -> None:
    """A mdbook preprocessor that wraps marked sections in styled blocks.

    Without a subcommand, reads mdbook's [context, book] JSON from stdin and
    writes the processed book to stdout.
    """
    if ctx.invoked_subcommand is not None:
        return

    try:
        context, book = parse_input(sys.stdin)
        options = load_options(context)
    except ProtocolError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)

    warning = version_warning(context)
    if warning:
        console.print(f"[yellow]Warning: {escape(warning)}[/yellow]")

    policy = on_error or options.get("on_error", "abort")
    try:
        reports = process_book(book, on_error=policy)
    except ChapterError as e:
        console.print(f"[red]blocky error in {escape(e.chapter)}: {escape(str(e.error))}[/red]")
        sys.exit(1)

    for report in reports:
        label = escape(report.path or report.name)
        if report.error is not None:
            console.print(f"[yellow]Skipped {label}: {escape(str(report.error))}[/yellow]")
        elif report.open_blocks:
            console.print(f"[yellow]{label}: {report.open_blocks} block(s) left unclosed[/yellow]")

    click.echo(json.dumps(book))


@main.command()
@click.argument("renderer")
def supports(renderer: str) -> None:
    """Check whether a renderer is supported by this preprocessor."""
    sys.exit(0 if supports_renderer(renderer) else 1)


if __name__ == "__main__":
    main()

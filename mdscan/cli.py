"""
Prints the heading outline and unfenced-code warnings of a markdown file.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from .config import ConfigError, build_config
from .detector import check_content, detect_code_hints, locate_code_matches
from .outline import extract_headings
from .stats import count_words

__all__ = ["cli"]


@click.command()
@click.version_option()
@click.option("--hints/--no-hints", default=True, help="Show line-level code hints")
@click.option("--locate", is_flag=True, help="Show located code matches with offsets")
@click.option("--preserve-unicode", is_flag=True, help="Keep Unicode in anchors")
@click.option("-v", "--verbose", is_flag=True, help="Log analysis details to stderr")
@click.argument("filepath", type=click.Path(exists=True, dir_okay=False))
def cli(
    filepath: str,
    hints: bool = True,
    locate: bool = False,
    preserve_unicode: bool = False,
    verbose: bool = False,
):
    """
    Analyze a markdown file without modifying it.

    Args:
        filepath: Path to the markdown file to analyze.
        hints: Print line-level code hints.
        locate: Print located code matches with their offsets.
        preserve_unicode: Keep non-ASCII word characters in identifiers.
        verbose: Enable debug logging on stderr.

    Raises:
        click.BadParameter: If the configuration is invalid.
        click.ClickException: If the file cannot be read or decoded.

    Examples:
        mdscan README.md --locate
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    path = Path(filepath)
    try:
        config = build_config(path.resolve().parent, preserve_unicode=preserve_unicode or None)
    except ConfigError as error:
        raise click.BadParameter(str(error)) from error

    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as error:
        raise click.ClickException(f"Invalid UTF-8 sequence in {path}: {error}") from error
    except OSError as error:
        raise click.ClickException(str(error)) from error

    outline = extract_headings(content, config)
    click.echo(f"Outline ({len(outline)} headings, {count_words(content)} words)")
    for heading in outline:
        indent = "  " * (heading.level - 1)
        click.echo(f"{indent}- {heading.display_text} (#{heading.identifier})")

    if hints:
        code_hints = detect_code_hints(content, config)
        if code_hints:
            click.echo(f"\nCode hints ({len(code_hints)})")
        for hint in code_hints:
            click.echo(hint.message)

    if locate:
        matches = locate_code_matches(content, config)
        if matches:
            click.echo(f"\nLocated code ({len(matches)})")
        for match in matches:
            click.echo(
                f"{match.start_offset}-{match.end_offset} line {match.line_number}: "
                f'"{match.snippet}" -> wrap in ```'
            )

    for warning in check_content(content, config).warnings:
        click.echo(f"warning: {warning}", err=True)


if __name__ == "__main__":
    cli()

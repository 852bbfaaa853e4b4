"""
Command-line entry point for the Lox front end.

    lox            interactive prompt, one line scanned at a time
    lox FILE       scan a whole file and print its tokens

Author: xwest
"""

from typing import Optional, TextIO

import click

from . import __version__
from .lexer import ScanResult, scan_source, tokenize_file


def report(result: ScanResult):
    """Print every token, then every diagnostic (to stderr)."""
    for token in result.tokens:
        click.echo(str(token))
    for error in result.errors:
        click.echo(str(error), err=True, nl=False)


def run_file(path: str) -> bool:
    """Scan `path` and report; returns True when the file scanned cleanly."""
    try:
        result = tokenize_file(path)
    except UnicodeDecodeError as e:
        raise click.FileError(path, hint=f"not valid UTF-8 text ({e.reason} at byte {e.start})")
    report(result)
    return not result.has_errors()


def run_prompt(stream: TextIO):
    """Scan lines from `stream` until it is exhausted."""
    while True:
        click.echo("> ", nl=False)
        line = stream.readline()
        if not line:
            click.echo()
            break
        report(scan_source(line, "<stdin>"))


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("path", required=False, type=click.Path(exists=True, dir_okay=False))
@click.version_option(__version__, prog_name="lox")
def main(path: Optional[str]):
    """Scan Lox source and print the token stream.

    With no PATH, reads lines from standard input.
    """
    if path is None:
        run_prompt(click.get_text_stream("stdin"))
        return

    if not run_file(path):
        raise SystemExit(1)


if __name__ == "__main__":
    main()

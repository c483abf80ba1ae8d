"""chordnoob CLI entry point."""

import sys
from typing import TextIO

import click

from chordnoob import __version__
from chordnoob.models import PROG_NAME
from chordnoob.streaming import ChordNoobParser


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name=PROG_NAME)
@click.argument("input_file", type=click.File("r", encoding="utf-8"), default="-")
@click.option(
    "--output",
    "-o",
    type=click.File("w", encoding="utf-8"),
    default="-",
    show_default=True,
    metavar="PATH",
    help="Destination file. Defaults to standard output.",
)
@click.option(
    "--quiet",
    "-q",
    is_flag=True,
    help="Do not print warnings to standard error.",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with status 1 when any warning was recorded.",
)
def main(input_file: TextIO, output: TextIO, quiet: bool, strict: bool) -> None:
    """
    Expand Nashville numbers and chord queues in a ChordPro file.

    INPUT_FILE is read line by line (default: standard input); each line is
    written out as soon as it is processed.

    \b
    Examples:
      chordnoob song.cho -o song.chopro
      cat song.cho | chordnoob --strict > song.chopro
    """
    parser = ChordNoobParser()

    try:
        for line in input_file:
            output.write(parser.process_line(line.rstrip("\r\n")) + "\n")
            output.flush()
    except OSError as exc:
        click.echo(f"{PROG_NAME}: ERROR: {exc}", err=True)
        sys.exit(1)
    except ValueError as exc:
        click.echo(f"{PROG_NAME}: ERROR: Could not decode input — {exc}", err=True)
        sys.exit(1)

    warnings = parser.finalize()
    if not quiet:
        for warning in warnings:
            click.echo(warning.format(), err=True)

    if strict and warnings:
        sys.exit(1)


if __name__ == "__main__":
    main()

"""
tslex - tinyS Lexical Analyzer Command-Line Interface
=====================================================

This module implements the command-line driver for the tinyS scanner.
Each source file is scanned to the end and its token table is printed,
or the first lexical error is reported.

Usage Examples
--------------
Scan one file:
    $ tslex fibonacci.s

Scan every file in a test folder:
    $ tslex tests/lexical/fail/

Write the report to a file:
    $ tslex -o report.txt tests/lexical/pass/

Verbose mode (debug logging):
    $ tslex -v fibonacci.s

Output Format
-------------
    Analizando archivo: fibonacci.s
    CORRECTO: ANALISIS LEXICO
    | class | class | LINEA 1 (COLUMNA 1) |
    | idClass | Fibonacci | LINEA 1 (COLUMNA 7) |
    ...
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from tinys import __version__
from tinys.config import ScannerConfig
from tinys.errors import ScanError
from tinys.lexer import Token, scan_file
from tinys.cli.errors import ExitCode, handle_cli_exception

logger = logging.getLogger(__name__)

# 256-color palette index used for file headers
ORANGE = 202


# =============================================================================
# Report Output
# =============================================================================

class Report:
    """
    Destination for the scan report.

    Lines are echoed to the terminal (optionally colored) or collected
    and written to a file on close().
    """

    def __init__(self, output: Optional[Path] = None, color: bool = True):
        self.output = output
        self.color = color and output is None
        self._lines: list[str] = []

    def emit(self, text: str, **style) -> None:
        if self.output is not None:
            self._lines.append(text)
        elif self.color and style:
            click.echo(click.style(text, **style))
        else:
            click.echo(text)

    def close(self) -> None:
        if self.output is not None:
            self.output.write_text("\n".join(self._lines) + "\n")


def format_token_row(token: Token) -> str:
    """Format one token as a report table row."""
    return (
        f"| {token.type.value} | {token.lexeme} | "
        f"LINEA {token.line} (COLUMNA {token.column}) |"
    )


def collect_sources(paths: tuple[Path, ...]) -> list[Path]:
    """
    Expand directories into their regular files, in sorted order.

    Files are not filtered by extension so that a misnamed source in a
    batch folder is reported instead of silently skipped.
    """
    sources = []
    for path in paths:
        if path.is_dir():
            sources.extend(sorted(p for p in path.iterdir() if p.is_file()))
        else:
            sources.append(path)
    return sources


def scan_and_report(path: Path, config: ScannerConfig, report: Report) -> bool:
    """
    Scan one file and add its section to the report.

    Returns:
        True if the file scanned cleanly, False on a scan error
    """
    report.emit(f"\nAnalizando archivo: {path.name}", fg=ORANGE, bold=True)

    try:
        tokens = scan_file(path, config)
    except ScanError as e:
        logger.debug(f"{path}: {type(e).__name__} at {e.line}:{e.column}")
        report.emit(str(e), fg="red", bold=True)
        return False

    report.emit("CORRECTO: ANALISIS LEXICO", fg="green", bold=True)
    for token in tokens:
        report.emit(format_token_row(token))
    return True


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the report to a file instead of stdout",
)
@click.option(
    "--max-identifier-length",
    type=click.IntRange(min=1),
    default=None,
    help="Identifier length that is rejected (default: 1024)",
)
@click.option(
    "--max-string-length",
    type=click.IntRange(min=1),
    default=None,
    help="String literal length that is rejected (default: 1024)",
)
@click.option(
    "--color/--no-color",
    default=True,
    help="Colorize the terminal report",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug logging)",
)
@click.version_option(version=__version__, prog_name="tslex")
def main(
    paths: tuple[Path, ...],
    output: Optional[Path],
    max_identifier_length: Optional[int],
    max_string_length: Optional[int],
    color: bool,
    verbose: bool,
) -> None:
    """
    Run the tinyS lexical analyzer.

    PATHS are tinyS source files (.s) or directories. A directory is
    expanded to every file it contains, so a whole folder of test
    programs can be checked at once.

    \b
    Examples:
        tslex fibonacci.s            # Token table for one file
        tslex tests/lexical/fail/    # Every file in a folder
        tslex -o report.txt prog.s   # Report to a file

    Scanning of a file stops at its first lexical error; the remaining
    files of a batch are still scanned. The exit status is 1 if any file
    failed.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s: %(message)s",
        )

    config = ScannerConfig.from_env()
    if max_identifier_length is not None:
        config.max_identifier_length = max_identifier_length
    if max_string_length is not None:
        config.max_string_length = max_string_length

    sources = collect_sources(paths)
    if not sources:
        click.echo("Error: no source files found", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    report = Report(output, color=color)
    failures = 0

    try:
        for path in sources:
            if not scan_and_report(path, config, report):
                failures += 1
        report.close()
    except Exception as e:
        handle_cli_exception(e, verbose=verbose)

    if verbose:
        click.echo(f"Scanned {len(sources)} file(s), {failures} with errors", err=True)
    if output is not None:
        click.echo(f"Wrote report to {output}")

    if failures:
        sys.exit(ExitCode.SCAN_ERROR)


if __name__ == "__main__":
    main()

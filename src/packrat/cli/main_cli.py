"""
Top-level CLI: parses arguments, infers the command and runs it.
"""

import logging
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from packrat import __version__
from packrat.core.config import settings
from packrat.core.errors import PackratError
from packrat.core.settings import LOG_FORMAT
from packrat.evaluator import Evaluator
from packrat.inference import infer

logger = logging.getLogger(__name__)
console = Console(stderr=True)

main_app = typer.Typer(
    help="packrat is a unified compression & decompression utility",
    epilog=(
        "packrat infers what to do based on the extensions of the input files and output file received. "
        "Examples: `packrat movies.tar.gz classes.zip -o Videos/` decompresses into a folder; "
        "`packrat headers/ sources/ Makefile -o my-project.tar.gz` compresses into an archive."
    ),
    add_completion=False,
)


def _version_callback(value: bool):
    if value:
        typer.echo(f"packrat {__version__}")
        raise typer.Exit()


@main_app.command()
def run(
    inputs: List[str] = typer.Argument(..., help="The input files or directories."),
    output: Optional[str] = typer.Option(None, "--output", "-o", help="The output directory or compressed file."),
    overwrite: bool = typer.Option(False, "--overwrite", "-y", help="Replace output files that already exist."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit."
    ),
):
    """
    Compress INPUTS into OUTPUT, or decompress INPUTS (into OUTPUT if given).
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level.upper(),
        format=LOG_FORMAT,
    )

    try:
        command = infer(inputs, output)
        logger.debug(f"Inferred command: {command!r}")
        Evaluator(settings, overwrite=overwrite or settings.overwrite).evaluate(command)
    except PackratError as e:
        console.print(f"[bold red]error[/bold red]: {escape(str(e))}")
        raise typer.Exit(code=1)


def main():
    main_app()


if __name__ == "__main__":
    main()

"""Command line entry point: ``book-index INPUT_CSV [OUTPUT_HTML]``."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from book_index.errors import BookIndexError, UsageError
from book_index.logging_utils import configure_logging
from book_index.pipeline import generate_index

USAGE = "Usage: book-index INPUT_CSV [OUTPUT_HTML]"

app = typer.Typer(help="Generate a searchable static HTML index from a CSV book catalog", add_completion=False)


@app.command()
def run(
    input_csv: Optional[Path] = typer.Argument(None, help="CSV catalog whose first row holds the column headers"),
    output_html: Optional[Path] = typer.Argument(None, help="Where to write the page (default: generated-index.html)"),
) -> None:
    """Build the index page."""
    configure_logging()
    try:
        result = generate_index(input_csv, output_html)
    except UsageError:
        typer.echo(USAGE)
        raise typer.Exit(code=0)
    except BookIndexError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    for issue in result.issues:
        typer.secho(f"- {issue}", fg=typer.colors.YELLOW)
    typer.secho(f"Index of {result.record_count} books written to {result.output_path}", fg=typer.colors.GREEN)


if __name__ == "__main__":  # pragma: no cover
    app()

"""End-to-end generation: extract, sort, render, write."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from book_index.config import Settings
from book_index.errors import UsageError
from book_index.ingest.csv_loader import load_catalog_csv
from book_index.output.writer import write_document
from book_index.processing.sorting import sort_by_title
from book_index.render.page import render_document

logger = logging.getLogger(__name__)


@dataclass
class IndexResult:
    output_path: Path
    record_count: int
    issues: List[str] = field(default_factory=list)


def generate_index(
    input_path: Path | str,
    output_path: Path | str | None = None,
    settings: Optional[Settings] = None,
) -> IndexResult:
    """Run the whole pipeline once. Any failure aborts the run."""
    if not input_path:
        raise UsageError("an input CSV path is required")

    batch = load_catalog_csv(input_path, encoding=settings.encoding if settings else None)
    records = sort_by_title(batch.iter_records())
    logger.info("Sorted %d records by title", len(records))

    document = render_document(records, settings=settings)
    written = write_document(document, output_path, settings=settings)

    return IndexResult(output_path=written, record_count=len(records), issues=list(batch.issues))

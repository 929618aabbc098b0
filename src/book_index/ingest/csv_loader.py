"""CSV ingestion for book catalogs."""
from __future__ import annotations

import io
import logging
import re
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from book_index.config import get_settings
from book_index.errors import FileError, ParseError
from book_index.ingest.models import CSV_COLUMNS, BookRecord, CatalogBatch

logger = logging.getLogger(__name__)

_LINE_PATTERN = re.compile(r"\bline (\d+)")


def _parse_error_line(message: str) -> Optional[int]:
    match = _LINE_PATTERN.search(message)
    return int(match.group(1)) if match else None


def _cell(value: object) -> str:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    return str(value)


def _check_quoting(path: Path, text: str) -> None:
    """Reject quotes that do not open, escape or close a quoted field."""
    state = "start"
    line = 1
    quote_line = 1
    for char in text:
        if state == "quoted":
            if char == '"':
                state = "closing"
            elif char == "\n":
                line += 1
            continue
        if state == "closing":
            if char == '"':
                state = "quoted"
                continue
            if char == "\r":
                continue
            if char not in ",\n":
                raise ParseError(path, f"unexpected {char!r} after closing quote", line=line)
        if char == "\n":
            line += 1
            state = "start"
        elif char == ",":
            state = "start"
        elif char == '"':
            if state == "field":
                raise ParseError(path, "illegal quote inside unquoted field", line=line)
            state = "quoted"
            quote_line = line
        else:
            state = "field"
    if state == "quoted":
        raise ParseError(path, "unclosed quoted field", line=quote_line)


def _read_frame(path: Path, encoding: str) -> pd.DataFrame:
    if not path.exists():
        raise FileError(path, "file does not exist")
    if path.is_dir():
        raise FileError(path, "is a directory, expected a CSV file")

    # BOM-tolerant so the first header still matches exactly.
    if encoding.lower().replace("_", "-") == "utf-8":
        encoding = "utf-8-sig"

    try:
        text = path.read_text(encoding=encoding)
    except UnicodeDecodeError as exc:
        raise ParseError(path, f"not valid {encoding} text ({exc.reason})") from exc
    except OSError as exc:
        raise FileError(path, exc.strerror or str(exc)) from exc

    _check_quoting(path, text)

    options = dict(dtype=str, keep_default_na=False, na_filter=False, index_col=False)
    try:
        width = len(pd.read_csv(io.StringIO(text), nrows=0, **options).columns)
        # Fields past the header width are dropped instead of shifting columns or failing the row.
        return pd.read_csv(io.StringIO(text), usecols=list(range(width)), **options)
    except pd.errors.EmptyDataError:
        logger.warning("%s is empty; no records extracted", path)
        return pd.DataFrame(columns=list(CSV_COLUMNS))
    except pd.errors.ParserError as exc:
        message = str(exc)
        raise ParseError(path, message, line=_parse_error_line(message)) from exc


def load_catalog_csv(path: Path | str, encoding: Optional[str] = None) -> CatalogBatch:
    """Load catalog rows from CSV into book records, preserving file order."""
    path = Path(path)
    df = _read_frame(path, encoding or get_settings().encoding)

    columns = df.columns.tolist()
    column_cache: Dict[str, Optional[str]] = {
        field_name: (header if header in columns else None) for header, field_name in CSV_COLUMNS.items()
    }

    missing = [header for header, field_name in CSV_COLUMNS.items() if column_cache[field_name] is None]
    issues: List[str] = []
    for header in missing:
        issues.append(f"Column '{header}' not found; field left blank")
        logger.warning("Column %r missing from %s", header, path)

    records: List[BookRecord] = []
    for row in df.itertuples(index=False, name=None):
        values = dict(zip(columns, row))
        data = {
            field_name: (_cell(values.get(column_name)) if column_name else "")
            for field_name, column_name in column_cache.items()
        }
        records.append(BookRecord(**data))

    logger.info("Loaded %d records from %s", len(records), path)
    return CatalogBatch(source_path=str(path), records=records, missing_columns=missing, issues=issues)


def extract_records(path: Path | str) -> List[BookRecord]:
    return load_catalog_csv(path).records

"""Ordering of extracted records."""
from __future__ import annotations

from typing import Iterable, List

from book_index.ingest.models import BookRecord


def sort_by_title(records: Iterable[BookRecord]) -> List[BookRecord]:
    """Return a new list ordered by code point comparison of ``title``.

    ``sorted`` is stable, so records sharing a title keep their input order.
    No case folding or locale collation is applied: ``"Apple" < "Zebra" < "apple"``.
    """
    return sorted(records, key=lambda record: record.title)

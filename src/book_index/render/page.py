"""Rendering of sorted records into the static index page."""
from __future__ import annotations

import html
import json
import logging
import re
from typing import Any, Dict, Iterable, List, Optional

from book_index.config import Settings, get_settings
from book_index.ingest.models import BookRecord
from book_index.render.template import BOOK_INDEX_PLACEHOLDER, PAGE, SCRIPT, STYLE

logger = logging.getLogger(__name__)

# Characters that could end the <script> element or break a JS string literal.
_SCRIPT_UNSAFE = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}
_SCRIPT_UNSAFE_PATTERN = re.compile("[<>&\u2028\u2029]")

_EMBEDDED_PATTERN = re.compile(r"let bookIndex = (\[.*?\]);\n", re.DOTALL)


def serialize_records(records: Iterable[BookRecord]) -> str:
    """Serialize records as a JSON array that is safe to place inside a script block."""
    payload = json.dumps([record.to_index_entry() for record in records], ensure_ascii=False)
    return _SCRIPT_UNSAFE_PATTERN.sub(lambda match: _SCRIPT_UNSAFE[match.group(0)], payload)


def render_document(records: Iterable[BookRecord], settings: Optional[Settings] = None) -> str:
    settings = settings or get_settings()
    records = list(records)
    page = PAGE.format(
        title=html.escape(settings.page_title),
        style=STYLE,
        placeholder=html.escape(settings.search_placeholder),
        toggle_label=html.escape(settings.toggle_label),
        script=SCRIPT,
    )
    document = page.replace(BOOK_INDEX_PLACEHOLDER, serialize_records(records), 1)
    logger.debug("Rendered %d records into %d characters", len(records), len(document))
    return document


def extract_embedded_records(document: str) -> List[Dict[str, Any]]:
    """Decode the record literal back out of a rendered document."""
    match = _EMBEDDED_PATTERN.search(document)
    if match is None:
        raise ValueError("document does not contain an embedded book index")
    return json.loads(match.group(1))

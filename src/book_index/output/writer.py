"""Persisting the rendered document."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from book_index.config import Settings, get_settings
from book_index.errors import FileError

logger = logging.getLogger(__name__)


def write_document(text: str, output_path: Path | str | None = None, settings: Optional[Settings] = None) -> Path:
    """Write ``text`` to ``output_path`` (default file in the working directory), replacing any existing file.

    Missing parent directories are an error, they are never created.
    """
    settings = settings or get_settings()
    path = Path(output_path) if output_path else Path(settings.default_output)
    if not path.parent.is_dir():
        raise FileError(path, f"directory {path.parent} does not exist")

    try:
        path.write_text(text, encoding=settings.encoding)
    except OSError as exc:
        raise FileError(path, exc.strerror or str(exc)) from exc

    logger.info("Wrote %d characters to %s", len(text), path)
    return path

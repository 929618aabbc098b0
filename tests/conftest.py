from pathlib import Path

import pytest

HEADER = "Author,Book Title,Volume Number,Edition,Series Title,Subject Classification,OpenURL,DOI URL"


@pytest.fixture
def write_csv(tmp_path: Path):
    def _write(*lines: str, name: str = "books.csv") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write

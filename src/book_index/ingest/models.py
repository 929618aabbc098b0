"""Data models for the ingestion layer."""
from __future__ import annotations

from typing import Dict, Iterable, List

from pydantic import BaseModel, ConfigDict, Field

# CSV header -> model attribute, in serialization order.
CSV_COLUMNS: Dict[str, str] = {
    "Author": "author",
    "Book Title": "title",
    "Volume Number": "volume_number",
    "Edition": "edition",
    "Series Title": "series_title",
    "Subject Classification": "subject_classification",
    "OpenURL": "url",
    "DOI URL": "doi",
}

HAYSTACK_FIELDS = ("author", "title", "subject_classification", "series_title")


class BookRecord(BaseModel):
    """One catalog entry. Every field is optional and defaults to an empty string."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    author: str = ""
    title: str = Field(default="", description="Primary sort key")
    volume_number: str = Field(default="", alias="volumeNumber")
    edition: str = ""
    series_title: str = Field(default="", alias="seriesTitle")
    subject_classification: str = Field(default="", alias="subjectClassification")
    url: str = Field(default="", description="Canonical link target")
    doi: str = Field(default="", description="Persistent identifier, not displayed")

    def to_index_entry(self) -> Dict[str, str]:
        """Mapping embedded in the generated page, keyed by the client-side names."""
        return self.model_dump(by_alias=True)

    @property
    def haystack(self) -> str:
        return " ".join(getattr(self, name) for name in HAYSTACK_FIELDS).lower()


class CatalogBatch(BaseModel):
    """Container for extraction results along with provenance metadata."""

    source_path: str
    records: List[BookRecord]
    missing_columns: List[str] = Field(default_factory=list)
    issues: List[str] = Field(default_factory=list)

    def iter_records(self) -> Iterable[BookRecord]:
        return iter(self.records)

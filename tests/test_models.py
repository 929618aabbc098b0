"""Tests for the record model."""
import pydantic
import pytest

from book_index.ingest.models import BookRecord


def test_index_entry_uses_client_keys_in_order():
    record = BookRecord(title="T", volume_number="2", series_title="S", subject_classification="QA")

    entry = record.to_index_entry()

    assert list(entry) == [
        "author",
        "title",
        "volumeNumber",
        "edition",
        "seriesTitle",
        "subjectClassification",
        "url",
        "doi",
    ]
    assert entry["volumeNumber"] == "2"
    assert entry["author"] == ""


def test_accepts_client_keys():
    record = BookRecord(**{"seriesTitle": "Lecture Notes", "volumeNumber": "3"})

    assert record.series_title == "Lecture Notes"
    assert record.volume_number == "3"


def test_haystack_joins_searchable_fields():
    record = BookRecord(author="Jane Doe", title="Intro", subject_classification="QA", series_title="Test Series", url="X")

    assert record.haystack == "jane doe intro qa test series"


def test_records_are_immutable():
    record = BookRecord(title="Fixed")

    with pytest.raises(pydantic.ValidationError):
        record.title = "Changed"

"""Tests for the command line entry point."""
from typer.testing import CliRunner

from book_index.cli import app
from book_index.render.page import extract_embedded_records

from conftest import HEADER

runner = CliRunner()

JANE_DOE = "Jane Doe,Intro to Testing,1,2nd,Test Series,QA,http://example.com/book,http://doi.org/x"


def test_no_arguments_prints_usage_and_writes_nothing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert "Usage: book-index INPUT_CSV [OUTPUT_HTML]" in result.output
    assert list(tmp_path.iterdir()) == []


def test_generates_index_at_given_path(tmp_path, write_csv):
    source = write_csv(HEADER, JANE_DOE)
    target = tmp_path / "out.html"

    result = runner.invoke(app, [str(source), str(target)])

    assert result.exit_code == 0, result.output
    document = target.read_text(encoding="utf-8")
    assert "Intro to Testing" in document
    assert "http://example.com/book" in document
    [record] = extract_embedded_records(document)
    assert record["author"] == "Jane Doe"
    assert record["title"] == "Intro to Testing"
    assert record["url"] == "http://example.com/book"


def test_defaults_output_name(tmp_path, monkeypatch, write_csv):
    source = write_csv(HEADER, JANE_DOE)
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, [str(source)])

    assert result.exit_code == 0, result.output
    assert (tmp_path / "generated-index.html").exists()


def test_embeds_one_record_per_row_sorted(tmp_path, write_csv):
    source = write_csv(HEADER, "A,Zebra,,,,,,", "B,Apple,,,,,,", "C,apple,,,,,,", "D,Apple,,,,,,")
    target = tmp_path / "out.html"

    runner.invoke(app, [str(source), str(target)])

    embedded = extract_embedded_records(target.read_text(encoding="utf-8"))
    assert [(item["title"], item["author"]) for item in embedded] == [
        ("Apple", "B"),
        ("Apple", "D"),
        ("Zebra", "A"),
        ("apple", "C"),
    ]


def test_reports_missing_columns(tmp_path, write_csv):
    source = write_csv("Book Title", "Lonely")

    result = runner.invoke(app, [str(source), str(tmp_path / "out.html")])

    assert result.exit_code == 0
    assert "Column 'Author' not found" in result.output


def test_missing_input_fails(tmp_path):
    result = runner.invoke(app, [str(tmp_path / "absent.csv"), str(tmp_path / "out.html")])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert not (tmp_path / "out.html").exists()


def test_malformed_input_fails(tmp_path, write_csv):
    source = write_csv(HEADER, 'Jane,"Broken,,,,,,')

    result = runner.invoke(app, [str(source), str(tmp_path / "out.html")])

    assert result.exit_code == 1
    assert not (tmp_path / "out.html").exists()


def test_unwritable_output_fails(tmp_path, write_csv):
    source = write_csv(HEADER, JANE_DOE)

    result = runner.invoke(app, [str(source), str(tmp_path / "nope" / "out.html")])

    assert result.exit_code == 1
    assert "does not exist" in result.output

# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-02-04
# Description: test_record_sources.py
# -----------------------------------------------------------------------------
import json

import pytest

from errors.PipelineErrors import MalformedInputError, MissingFieldError
from source.CsvRecordSource import CsvRecordSource
from source.JsonRecordSource import JsonRecordSource


# ---------- CSV ----------


def test_csv_loads_rows_in_order(tmp_path):
    path = tmp_path / "records.csv"
    path.write_text('content,score\n"Hello  World",1\nHi,3\n', encoding="utf-8")

    records = CsvRecordSource().load(path)

    assert records == [
        {"content": "Hello  World", "score": "1"},
        {"content": "Hi", "score": "3"},
    ]
    assert list(records[0].keys()) == ["content", "score"]


def test_csv_tolerates_bom(tmp_path):
    path = tmp_path / "bom.csv"
    path.write_bytes(b"\xef\xbb\xbfcontent,score\nabc,2\n")

    records = CsvRecordSource().load(path)

    assert records == [{"content": "abc", "score": "2"}]


def test_csv_header_only_gives_no_records(tmp_path):
    path = tmp_path / "empty_rows.csv"
    path.write_text("content,score\n", encoding="utf-8")

    assert CsvRecordSource().load(path) == []


def test_csv_empty_file_is_malformed(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")

    with pytest.raises(MalformedInputError):
        CsvRecordSource().load(path)


def test_csv_without_content_column(tmp_path):
    path = tmp_path / "no_content.csv"
    path.write_text("text,score\nabc,1\n", encoding="utf-8")

    with pytest.raises(MissingFieldError) as exc:
        CsvRecordSource().load(path)

    assert exc.value.field == "content"


def test_csv_custom_content_field(tmp_path):
    path = tmp_path / "body.csv"
    path.write_text("body,score\nabc,1\n", encoding="utf-8")

    records = CsvRecordSource(content_field="body").load(path)

    assert records[0]["body"] == "abc"


@pytest.mark.parametrize("row", ["abc,1,extra", "abc"])
def test_csv_row_width_mismatch(tmp_path, row):
    path = tmp_path / "ragged.csv"
    path.write_text(f"content,score\n{row}\n", encoding="utf-8")

    with pytest.raises(MalformedInputError):
        CsvRecordSource().load(path)


def test_csv_missing_file(tmp_path):
    with pytest.raises(MalformedInputError) as exc:
        CsvRecordSource().load(tmp_path / "nope.csv")

    assert isinstance(exc.value.__cause__, OSError)


# ---------- JSON ----------


def _write_json(path, payload) -> None:
    path.write_text(json.dumps(payload), encoding="utf-8")


def test_json_loads_data_array(tmp_path):
    path = tmp_path / "records.json"
    _write_json(path, {"data": [{"content": "one", "score": 1}, {"content": "two", "score": 5}]})

    records = JsonRecordSource().load(path)

    assert records == [{"content": "one", "score": 1}, {"content": "two", "score": 5}]


def test_json_records_are_copies(tmp_path):
    path = tmp_path / "records.json"
    _write_json(path, {"data": [{"content": "one"}]})

    a = JsonRecordSource().load(path)
    a[0]["content"] = "changed"
    b = JsonRecordSource().load(path)

    assert b[0]["content"] == "one"


def test_json_missing_array_field(tmp_path):
    path = tmp_path / "records.json"
    _write_json(path, {"items": [{"content": "one"}]})

    with pytest.raises(MissingFieldError) as exc:
        JsonRecordSource().load(path)

    assert exc.value.field == "data"


def test_json_custom_array_field(tmp_path):
    path = tmp_path / "records.json"
    _write_json(path, {"items": [{"content": "one"}]})

    records = JsonRecordSource(array_field="items").load(path)

    assert records == [{"content": "one"}]


@pytest.mark.parametrize(
    "payload",
    [
        {"data": {"content": "not an array"}},
        {"data": "text"},
        [{"content": "top-level array"}],
        {"data": ["not", "objects"]},
    ],
)
def test_json_wrong_shape(tmp_path, payload):
    path = tmp_path / "records.json"
    _write_json(path, payload)

    with pytest.raises(MalformedInputError):
        JsonRecordSource().load(path)


def test_json_entry_without_content(tmp_path):
    path = tmp_path / "records.json"
    _write_json(path, {"data": [{"content": "ok"}, {"title": "no content"}]})

    with pytest.raises(MissingFieldError) as exc:
        JsonRecordSource().load(path)

    assert "entry 1" in str(exc.value)


def test_json_invalid_document(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text('{"data": [', encoding="utf-8")

    with pytest.raises(MalformedInputError):
        JsonRecordSource().load(path)


def test_json_missing_file(tmp_path):
    with pytest.raises(MalformedInputError):
        JsonRecordSource().load(tmp_path / "nope.json")

import json

import pytest

from data_loader import load_documents, load_records
from exporter import export_csv
from records import PassengerRecord


def test_load_documents_skips_non_images(tmp_path):
    (tmp_path / "b-passport.jpg").write_bytes(b"\xff\xd8one")
    (tmp_path / "a-ticket.png").write_bytes(b"\x89PNGtwo")
    (tmp_path / "notes.txt").write_text("not an image")

    documents = load_documents([tmp_path])

    assert [d.file_name for d in documents] == ["a-ticket.png", "b-passport.jpg"]
    assert documents[0].document_type == "Flight Ticket"
    assert documents[0].mime_type == "image/png"
    assert documents[1].content == b"\xff\xd8one"


def test_group_prefix_sets_document_type(tmp_path):
    image = tmp_path / "IMG_0001.jpg"
    image.write_bytes(b"\xff\xd8")

    documents = load_documents([image], group="visa")

    assert documents[0].file_name == "visa-IMG_0001.jpg"
    assert documents[0].document_type == "Visa"


def test_missing_document_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_documents([tmp_path / "missing.jpg"])


def test_load_records_json(tmp_path):
    path = tmp_path / "raw.json"
    path.write_text(json.dumps([
        {"name": "John Smith", "passportNumber": "P1"},
        {"name": "Jane Doe", "flightNumber": "EK600", "extra": 1},
    ]))

    records = load_records(path)

    assert [r.name for r in records] == ["John Smith", "Jane Doe"]
    assert records[1].flight_number == "EK600"


def test_load_records_from_previous_csv_export(tmp_path):
    path = tmp_path / "export.csv"
    export_csv([PassengerRecord(name="Doe, Jane", passport_number="P9",
                                date_of_birth="1990-03-15", seat_number="12C")], path)

    records = load_records(path)

    assert len(records) == 1
    assert records[0].name == "Doe, Jane"
    assert records[0].date_of_birth == "15-Mar-1990"
    assert records[0].seat_number == "12C"
    assert records[0].expiry_date == ""


def test_load_records_rejects_bad_files(tmp_path):
    bad_json = tmp_path / "bad.json"
    bad_json.write_text("{not json")
    with pytest.raises(ValueError):
        load_records(bad_json)

    other = tmp_path / "records.txt"
    other.write_text("x")
    with pytest.raises(ValueError):
        load_records(other)

    with pytest.raises(FileNotFoundError):
        load_records(tmp_path / "missing.json")


def test_csv_without_name_column_is_rejected(tmp_path):
    path = tmp_path / "other.csv"
    path.write_text("Foo,Bar\n1,2\n")

    with pytest.raises(ValueError, match="Missing critical columns"):
        load_records(path)


def test_reload_keeps_date_text_with_comma(tmp_path):
    path = tmp_path / "export.csv"
    export_csv([PassengerRecord(name="John Smith", passport_number="P1",
                                date_of_birth="unknown, see visa")], path)

    records = load_records(path)

    assert records[0].date_of_birth == "unknown, see visa"
    assert records[0].passport_number == "P1"

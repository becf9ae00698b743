import json

from main import main


def test_main_consolidates_saved_records(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    records = tmp_path / "raw.json"
    records.write_text(json.dumps([
        {"name": "John Smith", "passportNumber": "P1", "dateOfBirth": "1990-03-15"},
        {"name": "SMITH JOHN MR", "flightNumber": "EK600"},
        {"name": "Jane Doe", "flightNumber": "EK600"},
    ]))
    output = tmp_path / "passengers.csv"

    exit_code = main(["--records", str(records), "--output", str(output), "--excel"])

    assert exit_code == 0
    lines = output.read_text(encoding="utf-8-sig").split("\n")
    assert len(lines) == 3
    assert lines[1].startswith('John Smith,P1,="15-Mar-1990"')
    assert (tmp_path / "passengers.xlsx").exists()


def test_main_without_inputs_fails(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 1


def test_main_reports_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main(["--records", str(tmp_path / "nope.json")]) == 1


def test_excel_name_ignores_dots_in_directories(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    records = tmp_path / "raw.json"
    records.write_text(json.dumps([{"name": "John Smith", "passportNumber": "P1"}]))
    out_dir = tmp_path / "out.d"
    out_dir.mkdir()

    exit_code = main(["--records", str(records), "--output", str(out_dir / "passengers"), "--excel"])

    assert exit_code == 0
    assert (out_dir / "passengers").exists()
    assert (out_dir / "passengers.xlsx").exists()

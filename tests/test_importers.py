import io
from datetime import datetime, timezone

import pytest

from eventview.importers import (
    ImportError_,
    import_file,
    parse_csv_export,
    parse_xml_export,
)

EXPORT = (
    "<Events>"
    '<Event xmlns="urn:example:events">'
    "<System>"
    '<Provider Name="Service Control Manager"/>'
    "<EventID>7036</EventID>"
    "<Level>4</Level>"
    '<TimeCreated SystemTime="2023-06-01T12:00:00Z"/>'
    "<Computer>host.example.com</Computer>"
    "<UserID>S-1-5-18</UserID>"
    "</System>"
    "<EventData><Data>Print Spooler</Data><Data>running</Data></EventData>"
    "</Event>"
    "<Event>"
    '<System><TimeCreated SystemTime="2023-05-01 10:20:30.5"/><EventID>12</EventID></System>'
    "</Event>"
    "</Events>"
)


def test_parse_xml_export_fields():
    first, second = parse_xml_export(EXPORT)
    assert first.log_name == "Imported XML"
    assert first.source == "Service Control Manager"
    assert first.event_id == 7036
    assert first.level == "4"
    assert first.computer == "host.example.com"
    assert first.user == "S-1-5-18"
    assert first.description == "Print Spooler; running"
    assert first.time_created == datetime(2023, 6, 1, 12, 0, 0, tzinfo=timezone.utc)
    assert second.event_id == 12
    assert second.time_created.replace(tzinfo=None) == datetime(
        2023, 5, 1, 10, 20, 30, 500000
    )


def test_parse_xml_export_raw_xml():
    first, _ = parse_xml_export(EXPORT)
    assert first.raw_xml.startswith("<Event><System>")
    assert first.raw_xml.endswith("</Event>")
    assert '<Provider Name="Service Control Manager"></Provider>' in first.raw_xml
    assert "<EventID>7036</EventID>" in first.raw_xml


def test_parse_xml_export_stops_at_malformed_event():
    text = "<Events><Event><EventID>1</EventID></Event><Event><EventID>2</Oops>"
    records = parse_xml_export(text)
    assert [r.event_id for r in records] == [1]


def test_parse_xml_export_no_events():
    assert parse_xml_export("<Events></Events>") == []


def test_parse_csv_export():
    stream = io.StringIO("a,b,c\n1,2,3\n\nx,y,z\n")
    records = parse_csv_export(stream)
    assert [r.description for r in records] == ["1, 2, 3", "x, y, z"]
    assert all(r.log_name == "Imported CSV" for r in records)
    assert all((r.level, r.source) == ("Info", "Import") for r in records)


def test_parse_csv_export_skips_ragged_rows():
    records = parse_csv_export(io.StringIO("a,b\n1,2\n1,2,3\n4,5\n"))
    assert [r.raw_xml for r in records] == ["1, 2", "4, 5"]


def test_parse_csv_export_truncates_description():
    long_value = "v" * 500
    records = parse_csv_export(io.StringIO(f"msg\n{long_value}\n"))
    assert records[0].description == long_value[:200]
    assert records[0].raw_xml == long_value


def test_parse_csv_export_empty():
    assert parse_csv_export(io.StringIO("")) == []


def test_import_file_xml(tmp_path):
    path = tmp_path / "events.xml"
    path.write_text(EXPORT, encoding="utf-8")
    assert [r.event_id for r in import_file(path)] == [7036, 12]


def test_import_file_csv(tmp_path):
    path = tmp_path / "events.csv"
    path.write_text("h1,h2\nfoo,bar\n", encoding="utf-8")
    assert [r.description for r in import_file(str(path))] == ["foo, bar"]


def test_import_file_evtx_rejected(tmp_path):
    path = tmp_path / "events.evtx"
    path.write_bytes(b"ElfFile\x00")
    with pytest.raises(ImportError_):
        import_file(path)


def test_import_file_unknown_extension(tmp_path):
    path = tmp_path / "events.txt"
    path.write_text("hello", encoding="utf-8")
    with pytest.raises(ImportError_):
        import_file(path)


def test_import_file_missing_xml(tmp_path):
    with pytest.raises(FileNotFoundError):
        import_file(tmp_path / "absent.xml")
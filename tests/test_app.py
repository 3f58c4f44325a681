from datetime import datetime, timezone

import pytest

from eventview.app import format_details, format_row, main
from eventview.event_log import EventRecord


def _record():
    return EventRecord(
        log_name="System",
        time_created=datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        event_id=7,
        level="Warning",
        source="Disk",
        user="S-1-5-18",
        computer="host.example.com",
        description="first; second",
        raw_xml="<Event></Event>",
    )


def test_format_row_cells():
    assert format_row(_record()) == (
        "2024-01-02 03:04:05",
        "Warning",
        "7",
        "Disk",
        "S-1-5-18",
        "host.example.com",
    )


def test_format_row_has_six_columns():
    assert len(format_row(EventRecord())) == 6


def test_format_details_without_record():
    assert format_details(None) == "Select an event to see details"


def test_format_details_lists_fields():
    lines = format_details(_record()).splitlines()
    assert lines[0] == "Log: System"
    assert "Level: Warning" in lines
    assert "Event ID: 7" in lines
    assert "Source: Disk" in lines
    assert "Username: S-1-5-18" in lines
    assert "Computer: host.example.com" in lines
    assert "first; second" in lines
    assert lines[-1] == "<Event></Event>"


def test_format_details_time_has_offset():
    lines = format_details(_record()).splitlines()
    time_line = next(line for line in lines if line.startswith("Time: "))
    assert time_line == "Time: 2024-01-02 03:04:05 +00:00"


def test_main_rejects_bad_page_size():
    with pytest.raises(SystemExit) as info:
        main(["--page-size", "many"])
    assert info.value.code == 2
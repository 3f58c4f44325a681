from datetime import date, datetime, timezone

import pytest

from eventview.event_log import EventRecord
from eventview.filters import Filters, apply_filters


def _record(day, hour=0, **fields):
    moment = datetime(2024, 1, day, hour, tzinfo=timezone.utc)
    return EventRecord(time_created=moment, **fields)


@pytest.fixture
def events():
    return [
        _record(1, level="Error", source="Disk", event_id=7, user="alice",
                computer="alpha", description="disk failure", raw_xml="<x/>"),
        _record(3, level="Warning", source="Network", event_id=9, user="bob",
                computer="beta", description="link down", raw_xml="<net/>"),
        _record(2, level="Information", source="DiskMonitor", event_id=7,
                user="alice", computer="gamma", description="ok", raw_xml="<y/>"),
    ]


def test_empty_filters_keep_everything_newest_first(events):
    result = apply_filters(events, Filters())
    assert result == [events[1], events[2], events[0]]


def test_level_filter(events):
    result = apply_filters(events, Filters(levels=["Error", "Warning"]))
    assert result == [events[1], events[0]]


def test_source_substring(events):
    assert apply_filters(events, Filters(source="Disk")) == [events[2], events[0]]


def test_event_id(events):
    assert apply_filters(events, Filters(event_id=9)) == [events[1]]


def test_user_and_computer(events):
    filters = Filters(user="alice", computer="gam")
    assert apply_filters(events, filters) == [events[2]]


def test_keyword_matches_description_or_raw(events):
    assert apply_filters(events, Filters(keyword="failure")) == [events[0]]
    assert apply_filters(events, Filters(keyword="<net")) == [events[1]]


def test_date_range_is_inclusive(events):
    filters = Filters(date_from=date(2024, 1, 2), date_to=date(2024, 1, 3))
    assert apply_filters(events, filters) == [events[1], events[2]]


def test_date_to_only(events):
    assert apply_filters(events, Filters(date_to=date(2024, 1, 1))) == [events[0]]


def test_matches_single_record(events):
    assert Filters(levels=["Error"]).matches(events[0])
    assert not Filters(levels=["Error"]).matches(events[1])


def test_equal_times_keep_input_order():
    first = _record(5, description="first")
    second = _record(5, description="second")
    older = _record(4, description="older")
    result = apply_filters([older, first, second], Filters())
    assert [r.description for r in result] == ["first", "second", "older"]


def test_no_match_gives_empty(events):
    assert apply_filters(events, Filters(keyword="nothing-like-this")) == []
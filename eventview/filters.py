"""Filtering and ordering of event records."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date
from typing import Iterable

from eventview.event_log import EventRecord


@dataclass
class Filters:
    """Criteria an event must meet to be shown; empty criteria match all."""

    levels: list[str] = field(default_factory=list)
    source: str = ""
    event_id: int | None = None
    user: str = ""
    computer: str = ""
    keyword: str = ""
    date_from: date | None = None
    date_to: date | None = None

    def matches(self, record: EventRecord) -> bool:
        """Return whether ``record`` meets every criterion."""
        day = record.time_created.date()
        return (
            (not self.levels or record.level in self.levels)
            and self.source in record.source
            and (self.event_id is None or record.event_id == self.event_id)
            and self.user in record.user
            and self.computer in record.computer
            and (self.keyword in record.description or self.keyword in record.raw_xml)
            and (self.date_from is None or day >= self.date_from)
            and (self.date_to is None or day <= self.date_to)
        )


def _whole_seconds(record: EventRecord) -> int:
    return math.floor(record.time_created.timestamp())


def apply_filters(events: Iterable[EventRecord], filters: Filters) -> list[EventRecord]:
    """Return the matching events, most recent first; ties keep their order."""
    kept = [record for record in events if filters.matches(record)]
    return sorted(kept, key=_whole_seconds, reverse=True)
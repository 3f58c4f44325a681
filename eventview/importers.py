"""Importing events from exported XML and CSV files."""

from __future__ import annotations

import csv
import os
import re
import xml.etree.ElementTree as ET
from datetime import datetime
from typing import Iterable

from eventview.event_log import (
    EventRecord,
    _local_name,
    _parse_event_id,
    _parse_rfc3339,
    _pull_events,
)

XML_LOG_NAME = "Imported XML"
CSV_LOG_NAME = "Imported CSV"
DESCRIPTION_LIMIT = 200

_NAIVE_TIME = re.compile(r"(\d{4})-(\d{2})-(\d{2}) (\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?\Z")


class ImportError_(Exception):
    """Raised when a file cannot be imported."""


def _parse_naive_local(text: str) -> datetime | None:
    match = _NAIVE_TIME.match(text)
    if match is None:
        return None
    parts = [int(match[i]) for i in range(1, 7)]
    micros = int((match[7] or "")[:6].ljust(6, "0"))
    try:
        return datetime(*parts, micros).astimezone()
    except ValueError:
        return None


def _serialize(elem: ET.Element, is_root: bool = False) -> str:
    name = _local_name(elem.tag)
    if is_root:
        parts = ["<Event>"]
    else:
        attrs = "".join(f' {_local_name(k)}="{v}"' for k, v in elem.attrib.items())
        parts = [f"<{name}{attrs}>"]
    parts.append((elem.text or "").strip())
    for child in elem:
        parts.append(_serialize(child))
        parts.append((child.tail or "").strip())
    parts.append("</Event>" if is_root else f"</{name}>")
    return "".join(parts)


def _record_from_event(event: ET.Element) -> EventRecord:
    record = EventRecord(log_name=XML_LOG_NAME, raw_xml=_serialize(event, is_root=True))
    descriptions = []
    for elem in event.iter():
        if elem is event:
            continue
        name = _local_name(elem.tag)
        text = (elem.text or "").strip()
        if name == "TimeCreated":
            value = elem.get("SystemTime")
            if value is not None:
                moment = _parse_rfc3339(value) or _parse_naive_local(value)
                if moment is not None:
                    record.time_created = moment
        elif name == "Provider":
            if "Name" in elem.attrib:
                record.source = elem.attrib["Name"]
        elif not text:
            continue
        elif name == "EventID":
            record.event_id = _parse_event_id(text)
        elif name == "Level":
            record.level = text
        elif name == "Computer":
            record.computer = text
        elif name == "UserID":
            record.user = text
        elif name == "Data":
            descriptions.append(text)
    record.description = "; ".join(descriptions)
    return record


def parse_xml_export(text: str) -> list[EventRecord]:
    """Read every complete ``Event`` element of an exported XML document.

    Reading stops at the first malformed part; events completed before it
    are returned.
    """
    records = []
    depth = 0
    for kind, elem in _pull_events(text):
        if _local_name(elem.tag) != "Event":
            continue
        if kind == "start":
            depth += 1
            continue
        depth -= 1
        if depth == 0:
            records.append(_record_from_event(elem))
    return records


def parse_csv_export(stream: Iterable[str]) -> list[EventRecord]:
    """Read a CSV export with a header row; each data row becomes one event.

    Blank lines and rows whose field count differs from the header are skipped.
    """
    reader = csv.reader(stream)
    records = []
    try:
        header = next((row for row in reader if row), None)
        if header is None:
            return []
        for row in reader:
            if not row or len(row) != len(header):
                continue
            description = ", ".join(row)
            records.append(
                EventRecord(
                    log_name=CSV_LOG_NAME,
                    level="Info",
                    source="Import",
                    description=description[:DESCRIPTION_LIMIT],
                    raw_xml=description,
                )
            )
    except csv.Error:
        pass
    return records


def import_file(path: str | os.PathLike[str]) -> list[EventRecord]:
    """Import events from an ``.xml`` or ``.csv`` file, chosen by extension."""
    name = os.fspath(path)
    if name.endswith(".evtx"):
        raise ImportError_(f"binary event log files cannot be read: {name}")
    if name.endswith(".xml"):
        with open(name, encoding="utf-8") as handle:
            return parse_xml_export(handle.read())
    if name.endswith(".csv"):
        with open(name, newline="", encoding="utf-8", errors="replace") as handle:
            return parse_csv_export(handle)
    raise ImportError_(f"unsupported file type: {name}")
"""Reading events from the system's event logs."""

from __future__ import annotations

import logging
import re
import subprocess
import sys
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from itertools import islice

_logger = logging.getLogger(__name__)

WINDOWS_LOGS = ("Application", "Security", "System", "Setup")
MACOS_SYSLOG = "/var/log/system.log"
LINUX_SYSLOG = "/var/log/syslog"

LEVEL_NAMES = {
    "1": "Critical",
    "2": "Error",
    "3": "Warning",
    "4": "Information",
    "5": "Verbose",
}

_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?(Z|z|[+-]\d{2}:\d{2})\Z"
)
_EVENT_ID = re.compile(r"\+?[0-9]+\Z")


def _now() -> datetime:
    return datetime.now().astimezone()


@dataclass
class EventRecord:
    """One event as shown in the viewer."""

    log_name: str = ""
    time_created: datetime = field(default_factory=_now)
    event_id: int = 0
    level: str = ""
    source: str = ""
    user: str = ""
    computer: str = ""
    description: str = ""
    raw_xml: str = ""


def level_name(code: str) -> str:
    """Map a numeric event level to its name; unknown codes pass through."""
    return LEVEL_NAMES.get(code, code)


def list_event_logs() -> list[str]:
    """Return the names of the logs that can be queried on this platform."""
    if sys.platform.startswith("win"):
        return list(WINDOWS_LOGS)
    return ["system"]


def _local_name(tag: str) -> str:
    return tag.rpartition("}")[2]


def _parse_rfc3339(text: str) -> datetime | None:
    """Parse an RFC 3339 timestamp into local time, or return None."""
    match = _RFC3339.match(text)
    if match is None:
        return None
    year, month, day, hour, minute, second = (int(match[i]) for i in range(1, 7))
    micros = int((match[7] or "")[:6].ljust(6, "0"))
    offset = match[8]
    try:
        if offset in ("Z", "z"):
            tz = timezone.utc
        else:
            sign = -1 if offset[0] == "-" else 1
            tz = timezone(
                sign * timedelta(hours=int(offset[1:3]), minutes=int(offset[4:6]))
            )
        moment = datetime(year, month, day, hour, minute, second, micros, tzinfo=tz)
    except ValueError:
        return None
    return moment.astimezone()


def _parse_event_id(text: str) -> int:
    """Parse an unsigned 16-bit event id; anything else gives 0."""
    if _EVENT_ID.match(text):
        value = int(text)
        if value <= 0xFFFF:
            return value
    return 0


def _pull_events(xml: str):
    """Yield (kind, element) pairs up to the first parse error."""
    parser = ET.XMLPullParser(events=("start", "end"))
    try:
        parser.feed(xml)
        parser.close()
    except (ET.ParseError, ValueError):
        pass
    try:
        yield from parser.read_events()
    except ET.ParseError:
        return


def parse_event(xml: str) -> EventRecord:
    """Parse one event in the system's XML format.

    Parsing stops quietly at the first malformed part; whatever was read
    up to that point is kept.
    """
    record = EventRecord(raw_xml=xml)
    for kind, elem in _pull_events(xml):
        name = _local_name(elem.tag)
        if kind == "start":
            if name == "Provider" and "Name" in elem.attrib:
                record.source = elem.attrib["Name"]
            elif name == "TimeCreated" and "SystemTime" in elem.attrib:
                moment = _parse_rfc3339(elem.attrib["SystemTime"])
                if moment is not None:
                    record.time_created = moment
            elif name == "Security" and "UserID" in elem.attrib:
                record.user = elem.attrib["UserID"]
            continue
        text = (elem.text or "").strip()
        if not text:
            continue
        if name == "EventID":
            record.event_id = _parse_event_id(text)
        elif name == "Level":
            record.level = level_name(text)
        elif name == "Computer":
            record.computer = text
        elif name == "Data":
            record.description = (
                f"{record.description}; {text}" if record.description else text
            )
        elif name == "Channel":
            record.log_name = text
    return record


def split_events(xml: str) -> list[str]:
    """Split a stream of concatenated events into one string per event."""
    pieces = (piece.strip() for piece in xml.split("</Event>"))
    return [f"{piece}</Event>" for piece in pieces if piece]


def _decode_lines(data: bytes) -> list[str]:
    raw_lines = data.split(b"\n")
    if raw_lines and raw_lines[-1] == b"":
        raw_lines.pop()
    lines = []
    for raw in raw_lines:
        if raw.endswith(b"\r"):
            raw = raw[:-1]
        try:
            lines.append(raw.decode("utf-8"))
        except UnicodeDecodeError:
            continue
    return lines


def _query_windows(log: str, max_records: int) -> list[EventRecord]:
    args = ["wevtutil", "qe", log, "/f:xml", f"/c:{max_records}", "/rd:true"]
    completed = subprocess.run(args, capture_output=True)
    if completed.returncode != 0:
        _logger.error(
            "wevtutil qe error: %s", completed.stderr.decode("utf-8", errors="replace")
        )
        return []
    text = completed.stdout.decode("utf-8", errors="replace")
    return [parse_event(raw) for raw in split_events(text)]


def _query_syslog(log: str, max_records: int) -> list[EventRecord]:
    path = MACOS_SYSLOG if sys.platform == "darwin" else LINUX_SYSLOG
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError:
        _logger.error("Failed to open system log: %s", path)
        return []
    newest = islice(reversed(_decode_lines(data)), max_records)
    return [EventRecord(log_name=log, description=line, raw_xml=line) for line in newest]


def query_events(log: str, max_records: int) -> list[EventRecord]:
    """Return up to ``max_records`` of the newest events of ``log``, newest first."""
    if sys.platform.startswith("win"):
        return _query_windows(log, max_records)
    return _query_syslog(log, max_records)
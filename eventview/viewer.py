"""State of the event viewer: loaded events, filters, selection and live updates."""

from __future__ import annotations

import os
import queue
import threading
from typing import Callable, Iterable

from eventview.event_log import EventRecord, list_event_logs, query_events
from eventview.filters import Filters, apply_filters
from eventview.importers import import_file

LIVE_BATCH = 50
POLL_INTERVAL = 2.0
DEFAULT_PAGE_SIZE = 100

QueryFunction = Callable[[str, int], list[EventRecord]]


class EventViewer:
    """Holds the events on show and keeps them up to date."""

    def __init__(
        self,
        query: QueryFunction = query_events,
        logs: Iterable[str] | None = None,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        self._query = query
        self.available_logs = list(logs) if logs is not None else list_event_logs()
        self.selected_logs = list(self.available_logs)
        self.page_size = page_size
        self.current_page = 0
        self.filters = Filters()
        self.all_events: list[EventRecord] = []
        self.filtered_events: list[EventRecord] = []
        self.selected: int | None = None
        self.paused = False
        self._incoming: queue.SimpleQueue[EventRecord] = queue.SimpleQueue()
        self._stop = threading.Event()
        self._poller: threading.Thread | None = None
        self.refresh_page()

    def refresh_page(self) -> None:
        """Reload the newest events of every selected log."""
        self.current_page = 0
        self.all_events = [
            record
            for log in self.selected_logs
            for record in self._query(log, self.page_size)
        ]
        self.apply_filters()

    def apply_filters(self) -> None:
        """Recompute the events on show from all loaded events."""
        self.filtered_events = apply_filters(self.all_events, self.filters)

    def push_live(self, record: EventRecord) -> None:
        """Hand over a newly seen event; safe to call from any thread."""
        self._incoming.put(record)

    def update_live(self) -> int:
        """Take in the events handed over since the last call, unless paused.

        Returns the number of events taken in.
        """
        if self.paused:
            return 0
        taken = 0
        while True:
            try:
                record = self._incoming.get_nowait()
            except queue.Empty:
                break
            self.all_events.insert(0, record)
            taken += 1
        self.apply_filters()
        return taken

    def toggle_pause(self) -> bool:
        """Pause or resume live updates; returns the new paused state."""
        self.paused = not self.paused
        return self.paused

    def set_log_selected(self, log: str, selected: bool) -> None:
        """Include or exclude ``log`` from the logs that are loaded."""
        if selected:
            if log not in self.selected_logs:
                self.selected_logs.append(log)
        else:
            self.selected_logs = [name for name in self.selected_logs if name != log]

    def import_file(self, path: str | os.PathLike[str]) -> list[EventRecord]:
        """Show the events of an exported file instead of the live ones.

        Live updates are paused first. The first imported event is selected.
        """
        self.paused = True
        records = import_file(path)
        self.filtered_events = records
        if records:
            self.selected = 0
        return records

    def selected_record(self) -> EventRecord | None:
        """Return the selected event, or the first one when none is selected."""
        index = self.selected if self.selected is not None else 0
        if 0 <= index < len(self.filtered_events):
            return self.filtered_events[index]
        return None

    def start_polling(self, interval: float = POLL_INTERVAL) -> None:
        """Start a background thread that fetches new events periodically."""
        if self._poller is not None and self._poller.is_alive():
            return
        self._stop.clear()
        self._poller = threading.Thread(
            target=self._poll, args=(interval,), name="event-poller", daemon=True
        )
        self._poller.start()

    def stop_polling(self) -> None:
        """Stop the background thread and wait for it to finish."""
        self._stop.set()
        if self._poller is not None:
            self._poller.join()
            self._poller = None

    def _poll(self, interval: float) -> None:
        logs = ",".join(self.available_logs)
        while not self._stop.is_set():
            for record in reversed(self._query(logs, LIVE_BATCH)):
                self.push_live(record)
            self._stop.wait(interval)
# eventview

A small desktop viewer for system event logs.

On Windows it reads the `Application`, `Security`, `System` and `Setup`
channels with `wevtutil`. On other systems it reads the newest lines of
`/var/log/syslog` (Linux) or `/var/log/system.log` (macOS) as events of a log
called `system`. A background thread polls for new events every two seconds.
The table is ordered newest first.

## Features

- A table of events with time, level, event ID, source, user name and
  computer. Next to it, a details pane shows the description and the raw XML of
  the selected event.
- A check box for each log. *Refresh* reloads the logs that are ticked.
- *Pause* / *Resume* for live polling.
- *Import File* for exported `.xml` and `.csv` files.
- Colour themes: System, Gruvbox Dark, Gruvbox Light, Solarized Dark,
  Solarized Light, Arc-Theme, Dracula and Nord.

## Installation

```
pip install .
```

The package has no third-party dependencies. The window uses Tkinter from the
standard library.

## Running

```
eventview
eventview --page-size 500
```

`--page-size` sets how many of the newest events are loaded from each log. The
default is 100.

Importing a file pauses live polling, so the imported events stay on screen.
Press *Resume* to start polling again.

## Importing exports

- `.xml`: each complete `Event` element becomes one event. The importer reads
  the time from `TimeCreated/@SystemTime`. It accepts RFC 3339, or
  `YYYY-MM-DD HH:MM:SS[.fff]` in local time. It also reads `EventID`, `Level`,
  `Provider/@Name`, `Computer` and `UserID`. The `Data` elements are joined
  with `; ` to make the description. Reading stops at the first malformed part
  of the document, and the events completed before it are kept.
- `.csv`: the first row is a header. Each later row with the same number of
  fields becomes one event. Its fields are joined with `, ` to make the
  description, which is cut to 200 characters; the raw text keeps the full
  row.

Any other extension raises `eventview.importers.ImportError_`. In the window
this error is shown in a message box.

## Using it as a library

```python
from eventview.event_log import list_event_logs, query_events
from eventview.filters import Filters, apply_filters

events = [ev for log in list_event_logs() for ev in query_events(log, 100)]
errors = apply_filters(events, Filters(levels=["Error", "Critical"]))
for ev in errors:
    print(ev.time_created, ev.source, ev.description)
```

`Filters` can match on:

- level
- source
- event ID
- user
- computer
- a keyword in the description or raw text
- a date range (`date_from`, `date_to`)

Text criteria match when they are contained in the event's field.

Exports can be read without opening the window:

```python
from eventview.importers import import_file, parse_xml_export

records = import_file("exported.xml")
records = parse_xml_export(open("exported.xml", encoding="utf-8").read())
```

Other modules:

- `eventview.event_log`: `parse_event` and `split_events` parse the XML that
  `wevtutil qe /f:xml` prints.
- `eventview.themes`: the colour palettes. `ThemeMode.palette()` and
  `theme_from_label()` give access to them.
- `eventview.viewer`: `EventViewer` holds the viewer's state and does not
  depend on any GUI. That state is the selected logs, the filters, the
  selection, the pause flag and the live queue. Pass your own `query` function
  to feed it from elsewhere.

## What it does not do

- Binary `.evtx` files cannot be imported. Choosing one raises `ImportError_`,
  and no events are shown.
- The window has no controls for filters. Filtering is done in code through
  `EventViewer.filters` followed by `EventViewer.apply_filters()`.
- Only the newest `page_size` events of each log are loaded. There is no paging
  back to older events.
- Syslog lines are not parsed. Each line becomes an event with the time it was
  read and an empty level, source and ID.

## Tests

```
pip install ".[test]"
pytest
```
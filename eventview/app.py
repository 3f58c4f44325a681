"""Desktop window for browsing events."""

from __future__ import annotations

import argparse
from datetime import datetime

from eventview.event_log import EventRecord
from eventview.importers import ImportError_
from eventview.themes import Palette, ThemeMode, theme_from_label
from eventview.viewer import DEFAULT_PAGE_SIZE, EventViewer

WINDOW_TITLE = "Event Viewer"
COLUMNS = ("Time", "Level", "ID", "Source", "Username", "Computer")
COLUMN_WIDTHS = (150, 60, 60, 100, 120, 180)
NO_SELECTION = "Select an event to see details"
TICK_MS = 200


def _format_time(moment: datetime) -> str:
    text = moment.strftime("%Y-%m-%d %H:%M:%S")
    if moment.microsecond:
        text += f".{moment.microsecond:06d}".rstrip("0")
    offset = moment.strftime("%z")
    if offset:
        text += f" {offset[:3]}:{offset[3:5]}"
    return text


def format_row(record: EventRecord) -> tuple[str, str, str, str, str, str]:
    """Return the table cells shown for ``record``."""
    return (
        record.time_created.strftime("%Y-%m-%d %H:%M:%S"),
        record.level,
        str(record.event_id),
        record.source,
        record.user,
        record.computer,
    )


def format_details(record: EventRecord | None) -> str:
    """Return the text of the details pane for ``record``."""
    if record is None:
        return NO_SELECTION
    return "\n".join(
        [
            f"Log: {record.log_name}",
            "",
            f"Time: {_format_time(record.time_created)}",
            f"Level: {record.level}",
            f"Event ID: {record.event_id}",
            f"Source: {record.source}",
            f"Username: {record.user}",
            f"Computer: {record.computer}",
            "",
            "Description:",
            record.description,
            "",
            "Raw XML:",
            record.raw_xml,
        ]
    )


def _hex(rgb: tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


class EventViewerWindow:
    """The main window: controls, event table and details pane."""

    def __init__(self, root, viewer: EventViewer) -> None:
        import tkinter as tk
        from tkinter import ttk

        self.root = root
        self.viewer = viewer
        self.theme_mode = ThemeMode.SYSTEM
        self._style = ttk.Style(root)
        self._default_theme = self._style.theme_use()

        root.title(WINDOW_TITLE)
        controls = ttk.Frame(root, padding=4)
        controls.pack(side="top", fill="x")

        ttk.Label(controls, text="Logs:").pack(side="left")
        for log in viewer.available_logs:
            var = tk.BooleanVar(value=log in viewer.selected_logs)
            ttk.Checkbutton(
                controls,
                text=log,
                variable=var,
                command=lambda name=log, v=var: viewer.set_log_selected(name, v.get()),
            ).pack(side="left")
        ttk.Button(controls, text="Refresh", command=self._on_refresh).pack(side="left")
        self._pause_button = ttk.Button(controls, text="Pause", command=self._on_pause)
        self._pause_button.pack(side="left")
        ttk.Button(controls, text="Import File", command=self._on_import).pack(side="left")
        ttk.Separator(controls, orient="vertical").pack(side="left", fill="y", padx=6)
        ttk.Label(controls, text="Theme:").pack(side="left")
        self._theme_var = tk.StringVar(value=self.theme_mode.label())
        chooser = ttk.Combobox(
            controls,
            textvariable=self._theme_var,
            values=[mode.label() for mode in ThemeMode],
            state="readonly",
        )
        chooser.bind(
            "<<ComboboxSelected>>",
            lambda _event: self.apply_theme(theme_from_label(self._theme_var.get())),
        )
        chooser.pack(side="left")

        body = ttk.PanedWindow(root, orient="horizontal")
        body.pack(fill="both", expand=True)

        table = ttk.Frame(body)
        self._tree = ttk.Treeview(table, columns=COLUMNS, show="headings", selectmode="browse")
        for name, width in zip(COLUMNS, COLUMN_WIDTHS):
            self._tree.heading(name, text=name)
            self._tree.column(name, width=width, stretch=name == "Time")
        vertical = ttk.Scrollbar(table, orient="vertical", command=self._tree.yview)
        horizontal = ttk.Scrollbar(table, orient="horizontal", command=self._tree.xview)
        self._tree.configure(yscrollcommand=vertical.set, xscrollcommand=horizontal.set)
        vertical.pack(side="right", fill="y")
        horizontal.pack(side="bottom", fill="x")
        self._tree.pack(fill="both", expand=True)
        self._tree.bind("<<TreeviewSelect>>", self._on_select)

        details = ttk.Frame(body, padding=4)
        ttk.Label(details, text="Event Details", font=("TkDefaultFont", 12, "bold")).pack(
            anchor="w"
        )
        self._details = tk.Text(details, wrap="word", width=60, state="disabled")
        self._details.pack(fill="both", expand=True)
        self._text_defaults = {
            key: self._details.cget(key)
            for key in ("background", "foreground", "insertbackground")
        }
        self._root_background = root.cget("background")

        body.add(table, weight=3)
        body.add(details, weight=2)

        self.refresh_table()
        root.after(TICK_MS, self._tick)

    def refresh_table(self) -> None:
        """Redraw the table and the details pane from the viewer's state."""
        self._tree.delete(*self._tree.get_children())
        for index, record in enumerate(self.viewer.filtered_events):
            self._tree.insert("", "end", iid=str(index), values=format_row(record))
        selected = self.viewer.selected
        if selected is not None and 0 <= selected < len(self.viewer.filtered_events):
            self._tree.selection_set(str(selected))
        self._show_details()

    def apply_theme(self, mode: ThemeMode) -> None:
        """Switch the window's colours to ``mode``."""
        self.theme_mode = mode
        self._theme_var.set(mode.label())
        palette = mode.palette()
        if palette is None:
            self._style.theme_use(self._default_theme)
            self._details.configure(**self._text_defaults)
            self.root.configure(background=self._root_background)
            return
        self._apply_palette(palette)

    def _apply_palette(self, palette: Palette) -> None:
        foreground = "#ebebeb" if palette.dark else "#1e1e1e"
        window = _hex(palette.window_fill)
        panel = _hex(palette.panel_fill)
        faint = _hex(palette.faint_bg_color)
        extreme = _hex(palette.extreme_bg_color)
        self._style.theme_use("clam")
        self._style.configure(
            ".", background=panel, foreground=foreground, fieldbackground=extreme
        )
        self._style.configure(
            "Treeview", background=window, fieldbackground=window, foreground=foreground
        )
        self._style.configure("Treeview.Heading", background=faint, foreground=foreground)
        self._style.map("Treeview", background=[("selected", faint)])
        self._details.configure(
            background=window, foreground=foreground, insertbackground=foreground
        )
        self.root.configure(background=panel)

    def _show_details(self) -> None:
        self._details.configure(state="normal")
        self._details.delete("1.0", "end")
        self._details.insert("1.0", format_details(self.viewer.selected_record()))
        self._details.configure(state="disabled")

    def _on_select(self, _event=None) -> None:
        chosen = self._tree.selection()
        if chosen:
            self.viewer.selected = int(chosen[0])
            self._show_details()

    def _on_refresh(self) -> None:
        self.viewer.refresh_page()
        self.refresh_table()

    def _on_pause(self) -> None:
        paused = self.viewer.toggle_pause()
        self._pause_button.configure(text="Resume" if paused else "Pause")

    def _on_import(self) -> None:
        from tkinter import filedialog, messagebox

        path = filedialog.askopenfilename(
            filetypes=[("Event Files", "*.evtx *.xml *.csv")]
        )
        if not path:
            return
        try:
            self.viewer.import_file(path)
        except (ImportError_, OSError) as error:
            messagebox.showerror("Import failed", str(error))
        self._pause_button.configure(text="Resume" if self.viewer.paused else "Pause")
        self.refresh_table()

    def _tick(self) -> None:
        if self.viewer.update_live():
            self.refresh_table()
        self.root.after(TICK_MS, self._tick)


def main(argv: list[str] | None = None) -> int:
    """Open the event viewer window."""
    parser = argparse.ArgumentParser(prog="eventview", description="Browse system events.")
    parser.add_argument(
        "--page-size",
        type=int,
        default=DEFAULT_PAGE_SIZE,
        help="number of events loaded per log",
    )
    args = parser.parse_args(argv)

    import tkinter as tk

    root = tk.Tk()
    viewer = EventViewer(page_size=args.page_size)
    EventViewerWindow(root, viewer)
    viewer.start_polling()
    try:
        root.mainloop()
    finally:
        viewer.stop_polling()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Colour themes for the viewer window."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class Palette:
    """Background colours of a theme and whether it is a dark one."""

    dark: bool
    window_fill: RGB
    panel_fill: RGB
    faint_bg_color: RGB
    extreme_bg_color: RGB


class ThemeMode(Enum):
    """The themes offered in the theme selector."""

    SYSTEM = "system"
    GRUVBOX_DARK = "gruvbox-dark"
    GRUVBOX_LIGHT = "gruvbox-light"
    SOLARIZED_DARK = "solarized-dark"
    SOLARIZED_LIGHT = "solarized-light"
    ARC = "arc"
    DRACULA = "dracula"
    NORD = "nord"

    def label(self) -> str:
        """Return the name shown in the theme selector."""
        return _LABELS[self]

    def palette(self) -> Palette | None:
        """Return the theme's colours, or None to keep the platform's own."""
        return _PALETTES.get(self)


_LABELS = {
    ThemeMode.SYSTEM: "System",
    ThemeMode.GRUVBOX_DARK: "Gruvbox Dark",
    ThemeMode.GRUVBOX_LIGHT: "Gruvbox Light",
    ThemeMode.SOLARIZED_DARK: "Solarized Dark",
    ThemeMode.SOLARIZED_LIGHT: "Solarized Light",
    ThemeMode.ARC: "Arc-Theme",
    ThemeMode.DRACULA: "Dracula",
    ThemeMode.NORD: "Nord",
}

_PALETTES = {
    ThemeMode.GRUVBOX_DARK: Palette(
        dark=True,
        window_fill=(40, 40, 40),
        panel_fill=(29, 32, 33),
        faint_bg_color=(60, 56, 54),
        extreme_bg_color=(29, 32, 33),
    ),
    ThemeMode.GRUVBOX_LIGHT: Palette(
        dark=False,
        window_fill=(251, 241, 199),
        panel_fill=(235, 219, 178),
        faint_bg_color=(213, 196, 161),
        extreme_bg_color=(235, 219, 178),
    ),
    ThemeMode.SOLARIZED_DARK: Palette(
        dark=True,
        window_fill=(0, 43, 54),
        panel_fill=(7, 54, 66),
        faint_bg_color=(88, 110, 117),
        extreme_bg_color=(7, 54, 66),
    ),
    ThemeMode.SOLARIZED_LIGHT: Palette(
        dark=False,
        window_fill=(253, 246, 227),
        panel_fill=(238, 232, 213),
        faint_bg_color=(147, 161, 161),
        extreme_bg_color=(238, 232, 213),
    ),
    ThemeMode.ARC: Palette(
        dark=False,
        window_fill=(238, 241, 245),
        panel_fill=(220, 224, 230),
        faint_bg_color=(200, 204, 210),
        extreme_bg_color=(220, 224, 230),
    ),
    ThemeMode.DRACULA: Palette(
        dark=True,
        window_fill=(40, 42, 54),
        panel_fill=(68, 71, 90),
        faint_bg_color=(98, 114, 164),
        extreme_bg_color=(68, 71, 90),
    ),
    ThemeMode.NORD: Palette(
        dark=True,
        window_fill=(46, 52, 64),
        panel_fill=(59, 66, 82),
        faint_bg_color=(76, 86, 106),
        extreme_bg_color=(59, 66, 82),
    ),
}


def theme_from_label(label: str) -> ThemeMode:
    """Return the theme whose selector name is ``label``."""
    for mode, name in _LABELS.items():
        if name == label:
            return mode
    raise ValueError(f"unknown theme: {label!r}")
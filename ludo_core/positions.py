"""
Zone-aware position arithmetic.

Positions are absolute: -1 is home, 0..51 the shared ring, each color owns a
6-slot home column starting at 52/58/64/70, and 99 marks a finished token.
"""

from __future__ import annotations

from .config import layout
from .types import Color


def starting_position(color: Color) -> int:
    return layout.START_SQUARES[color]


def home_column_entry(color: Color) -> int:
    return layout.HOME_ENTRIES[color]


def home_column_start(color: Color) -> int:
    return layout.HOME_COLUMN_STARTS[color]


def finish_threshold(color: Color) -> int:
    """First position past the last column slot; landing here finishes."""
    return home_column_start(color) + layout.HOME_COLUMN_SIZE


def is_ring_position(position: int) -> bool:
    return 0 <= position < layout.MAIN_TRACK_SIZE


def is_home_column_position(position: int, color: Color) -> bool:
    start = home_column_start(color)
    return start <= position < start + layout.HOME_COLUMN_SIZE


def calculate_new_position(position: int, steps: int, color: Color) -> int:
    """
    Position reached after moving ``steps`` from ``position``.

    Leaving home always lands on the start square. Inside the home column the
    result is not clamped; overshoot is a legality concern for the caller.
    """
    if position == layout.HOME_POSITION:
        return starting_position(color)

    column_start = home_column_start(color)
    if position >= column_start:
        return position + steps

    entry = home_column_entry(color)
    distance_to_entry = (entry - position) % layout.MAIN_TRACK_SIZE
    if steps > distance_to_entry:
        # Path turns off the ring after the entry square
        return column_start + (steps - distance_to_entry - 1)

    return (position + steps) % layout.MAIN_TRACK_SIZE


def has_token_finished(position: int, color: Color) -> bool:
    return position > home_column_start(color) + layout.HOME_COLUMN_SIZE - 1

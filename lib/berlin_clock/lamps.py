"""
# lamps.py - Copyright (c) 2025 Arthur Dantas
# This file is part of Berlin Clock, licensed under the GNU General Public License v3.
# See <https://www.gnu.org/licenses/> for details.
"""

import os

OFF = "0"
YELLOW = "Y"
RED = "R"

# Every third lamp of the five-minute row marks a quarter hour
QUARTER_EVERY = 3

# Row layout: (name, lamps in row, lit color, label)
ROWS = [
    ("seconds", 1, YELLOW, "Seconds"),
    ("hours_tens", 4, RED, "Hours x5"),
    ("hours_units", 4, RED, "Hours x1"),
    ("minutes_tens", 11, YELLOW, "Minutes x5"),
    ("minutes_units", 4, YELLOW, "Minutes x1"),
]

ROW_LENGTHS = tuple(length for _, length, _, _ in ROWS)
ROW_LABELS = tuple(label for _, _, _, label in ROWS)
ROW_LENGTH = dict((name, length) for name, length, _, _ in ROWS)
ROW_COLOR = dict((name, color) for name, _, color, _ in ROWS)

# Lit lamps first, the rest of the row off
def row_lamps(lit_lamps, lamps_in_row, lamp):
    if lit_lamps < 0 or lit_lamps > lamps_in_row:
        raise ValueError(f"Cannot light {lit_lamps} of {lamps_in_row} lamps.")
    return (lamp,) * lit_lamps + (OFF,) * (lamps_in_row - lit_lamps)

# Turn every third lit lamp red, counting from 1
def quarter_markers(row):
    return tuple(
        RED if lamp != OFF and position % QUARTER_EVERY == 0 else lamp
        for position, lamp in enumerate(row, start=1)
    )

# Build the five lamp rows for a validated time of day
def encode(time_of_day):
    hours, minutes, seconds = time_of_day

    seconds_row = (ROW_COLOR["seconds"],) if seconds % 2 == 0 else (OFF,)
    hours_tens = row_lamps(hours // 5, ROW_LENGTH["hours_tens"], ROW_COLOR["hours_tens"])
    hours_units = row_lamps(hours % 5, ROW_LENGTH["hours_units"], ROW_COLOR["hours_units"])
    minutes_tens = quarter_markers(
        row_lamps(minutes // 5, ROW_LENGTH["minutes_tens"], ROW_COLOR["minutes_tens"])
    )
    minutes_units = row_lamps(minutes % 5, ROW_LENGTH["minutes_units"], ROW_COLOR["minutes_units"])

    return (seconds_row, hours_tens, hours_units, minutes_tens, minutes_units)

# One line per row
def render_rows(rows):
    return ["".join(row) for row in rows]

def render(rows):
    return os.linesep.join(render_rows(rows))

# Same lines with the row label in front, labels padded to one width
def render_labelled(rows):
    width = max(len(label) for label in ROW_LABELS)
    lines = render_rows(rows)
    return os.linesep.join(
        f"{label.ljust(width)} : {line}" for label, line in zip(ROW_LABELS, lines)
    )

"""
# clock.py - Copyright (c) 2025 Arthur Dantas
# This file is part of Berlin Clock, licensed under the GNU General Public License v3.
# See <https://www.gnu.org/licenses/> for details.
"""

import collections
import re

from berlin_clock.lamps import encode, render, render_labelled

FIELD_PATTERN = re.compile(r"[+-]?[0-9]+")

# (field name, lowest value, highest value)
FIELDS = [
    ("Hours", 0, 23),
    ("Minutes", 0, 59),
    ("Seconds", 0, 59),
]


class InvalidInput(ValueError):
    pass


ParseError = InvalidInput


# Reject a value that is not an int inside its field range
def check_field(name, lowest, highest, value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"{name} must be an integer.")
    if value < lowest or value > highest:
        raise InvalidInput(f"{name} out of bounds.")
    return value


class TimeOfDay(collections.namedtuple("TimeOfDay", ["hours", "minutes", "seconds"])):
    __slots__ = ()

    def __new__(cls, hours, minutes, seconds):
        for value, (name, lowest, highest) in zip((hours, minutes, seconds), FIELDS):
            check_field(name, lowest, highest, value)
        return super().__new__(cls, hours, minutes, seconds)

    # _replace builds through _make
    @classmethod
    def _make(cls, iterable):
        return cls(*iterable)

    @classmethod
    def from_datetime(cls, value):
        return cls(value.hour, value.minute, value.second)

    def __str__(self):
        return f"{self.hours:02}:{self.minutes:02}:{self.seconds:02}"


# Turn one field into an int, digit runs longer than the range never reach int()
def parse_field(field, name, lowest, highest):
    if not FIELD_PATTERN.fullmatch(field):
        raise InvalidInput(f"{name} must be an integer.")
    digits = field.lstrip("+-").lstrip("0")
    if len(digits) > len(str(highest)):
        raise InvalidInput(f"{name} out of bounds.")
    return check_field(name, lowest, highest, int(field))


# Parse a 24 hour HH:MM:SS string, checking every field range
def parse(time):
    if not time:
        raise InvalidInput("No time provided.")
    if not isinstance(time, str):
        raise InvalidInput("Invalid time provided.")

    fields = time.split(":")
    if len(fields) != len(FIELDS):
        raise InvalidInput("Invalid time provided.")

    values = [
        parse_field(field, name, lowest, highest)
        for field, (name, lowest, highest) in zip(fields, FIELDS)
    ]
    return TimeOfDay(*values)


class BerlinClock:
    """
    Berlin Clock.

    Validates a time string on construction and renders it as the five
    lamp rows of the clock. str() gives the rendered rows.
    """

    def __init__(self, time):
        self._time = time if isinstance(time, TimeOfDay) else parse(time)
        self._rows = encode(self._time)

    @classmethod
    def from_datetime(cls, value):
        return cls(TimeOfDay.from_datetime(value))

    @property
    def time(self):
        return self._time

    @property
    def rows(self):
        return self._rows

    def labelled(self):
        return render_labelled(self._rows)

    def print_clock(self):
        print(self)

    def __str__(self):
        return render(self._rows)

    def __repr__(self):
        return f"BerlinClock('{self._time}')"

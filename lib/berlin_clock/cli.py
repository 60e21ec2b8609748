#!/usr/bin/python3

"""
# Berlin Clock - Copyright (c) 2025 Arthur Dantas
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
# See <https://www.gnu.org/licenses/> for details.
"""

from berlin_clock.clock import BerlinClock, InvalidInput
from datetime import datetime
import argparse
import os
import sys

VERSION = "1.0.0"


def env_truthy(name):
    raw = os.environ.get(name, "").strip().lower()
    return raw not in {"", "0", "false", "no", "off"}


def parse_args(argv=None):
    # Args to command line
    parser = argparse.ArgumentParser(prog="berlin-clock", description="Berlin Clock renders a 24 hour time as the lamp rows of the Berlin Uhr", add_help=False)
    parser.add_argument("time", nargs="?", help="Time to render in the format HH:MM:SS")
    parser.add_argument("-h", "--help", action="store_true", help="Show this help message and exit")
    parser.add_argument("-v", "--version", action="store_true", help="Show program's version and exit")
    parser.add_argument("-n", "--now", action="store_true", help="Render the current local time")
    parser.add_argument("-l", default="false", help="Label each row (default=False)")

    args = parser.parse_args(argv)
    return validate_args(args, parser)

def validate_args(args, parser):
    # Valid arguments
    valid_options = {
        "l": {"true", "false"},
    }

    # Convert arguments to lowercase to ensure case-insensitivity
    for key in valid_options:
        setattr(args, key, getattr(args, key).lower())

    for key, valid_values in valid_options.items():
        value = getattr(args, key)
        if value not in valid_values:
            parser.error(f"Invalid {key} option: {value}. Choose from {sorted(valid_values)}")

    # Help and version need no time
    if args.help or args.version:
        return args

    if args.now and args.time is not None:
        parser.error("Give either a time or -n/--now, not both")
    if not args.now and args.time is None:
        parser.error("A time in the format HH:MM:SS or -n/--now is required")

    return args

def show_version():
    version_text = f"Berlin Clock version {VERSION}"
    print(version_text)
    sys.exit(0)

def show_help():
    help_text = f"""
        Berlin Clock - Renders a 24 hour time as the lamp rows of the Berlin Uhr
        Version: {VERSION}

        Usage: berlin-clock [OPTIONS] [HH:MM:SS]

        Options:
        -h, --help           Show this help message and exit
        -v, --version        Show program's version and exit
        -n, --now            Render the current local time instead of HH:MM:SS
        -l [true, false]     Label each row: false (default) to disable, true to enable

        Rows:
        1                    Seconds lamp, Y on even seconds
        2                    Five hour lamps, R
        3                    One hour lamps, R
        4                    Five minute lamps, Y with R quarter hour marks
        5                    One minute lamps, Y

        Environment:
        BERLIN_CLOCK_VERBOSE Print the parsed time to stderr before the clock

        Note:
        - Options are case-insensitive (e.g., -l TRUE or -l true both work).
        - Unlit lamps are shown as 0.

        Command example:
        berlin-clock 13:17:01 -l true
    """

    print(help_text)
    sys.exit(0)

def main(argv=None):
    args = parse_args(argv)
    if args.help:
        show_help()
    elif args.version:
        show_version()

    try:
        clock = BerlinClock.from_datetime(datetime.now()) if args.now else BerlinClock(args.time)
    except InvalidInput as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if env_truthy("BERLIN_CLOCK_VERBOSE"):
        print(f"Debug: rendering {clock.time}", file=sys.stderr)

    if args.l == "true":
        print(clock.labelled())
    else:
        clock.print_clock()
    return 0

if __name__ == "__main__":
    sys.exit(main())

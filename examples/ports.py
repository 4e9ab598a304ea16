#!/usr/bin/env python3
"""
Open Ports Example

Renders a listing of processes with open ports, keeping only the first and
latest rows.

Run:
    uv run python examples/ports.py
"""

from verynicetable import Alignment, Table

PORTS = [
    ["rapportd", "449", "Quentin", "*:61165"],
    ["Python", "22396", "Quentin", "*:8000"],
    ["foo", "108", "root", "*:1337"],
    ["rustrover", "30928", "Quentin", "127.0.0.1:63342"],
    ["Transmiss", "94671", "Quentin", "*:51413"],
    ["Transmiss", "94671", "Quentin", "*:51413"],
]


def main() -> None:
    """Print the ports table, capped to 5 rows."""
    table = (
        Table()
        .set_headers(["COMMAND", "PID", "USER", "HOST:PORTS"])
        .set_alignments([Alignment.LEFT, Alignment.RIGHT, Alignment.LEFT, Alignment.RIGHT])
        .set_data(PORTS)
        .set_max_rows(5)
    )
    print(table, end="")


if __name__ == "__main__":
    main()

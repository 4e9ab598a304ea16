#!/usr/bin/env python3
"""
Stock Markets Example

Renders market indices with colored values. Color sequences do not count
toward column widths, so colored and plain cells line up.

Run:
    uv run python examples/stocks.py
"""

from verynicetable import Table


def up(value: str) -> str:
    return f"\x1b[92m{value}\x1b[0m"


def down(value: str) -> str:
    return f"\x1b[91m{value}\x1b[0m"


MARKETS = [
    ["DOW", "United States", up("42,313.00"), up("+ 137.89"), up("0.33%")],
    ["S&P 500", "United States", down("5,738.17"), down("- 7.20"), down("0.13%")],
    ["NASDAQ", "United States", down("18,119.59"), down("- 70.70"), down("0.39%")],
    ["CAC 40", "France", up("7,791.79"), up("+ 49.70"), up("0.64%")],
    ["FTSE 100", "United Kingdom", up("8,320.76"), up("+ 35.85"), up("0.43%")],
    ["DAX", "Germany", up("19,473.63"), up("+ 235.27"), up("1.22%")],
]


def main() -> None:
    """Print the markets table."""
    table = (
        Table()
        .set_headers(["MARKET", "", "PRICE", "CHANGE", "%CHANGE"])
        .set_alignments(["l", "l", "r", "r", "r"])
        .set_data(MARKETS)
        .set_column_separator(" | ")
    )
    print(table, end="")


if __name__ == "__main__":
    main()

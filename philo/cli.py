"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .args import ArgumentError, parse_args
from .table import Table


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation: number_of_philosophers time_to_die time_to_eat
    time_to_sleep [number_of_times_each_philosopher_must_eat]."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_args(args)
    except ArgumentError as exc:
        print(f"ERROR\n{exc}")
        return -1
    Table(settings).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Command-line route finder over a metro data file."""

from __future__ import annotations

import argparse
import sys
from os import PathLike
from pathlib import Path
from typing import Optional, Sequence, Union

from metroroute.network import MetroDataError, MetroSystem, PathSegment
from metroroute.report import Criterion, path_coordinates_json, render_route_html

DATA_FILE_NAME = "metroFinalData.csv"

_CRITERIA = {
    "stops": Criterion.LEAST_STOPS,
    "cost": Criterion.LEAST_COST,
    "time": Criterion.LEAST_TIME,
}


def load_system(
    filename: Union[str, PathLike] = DATA_FILE_NAME,
    app_dir: Optional[Union[str, PathLike]] = None,
) -> MetroSystem:
    """Load the data file from app_dir, falling back to the path as given."""
    system = MetroSystem()
    if app_dir is not None:
        try:
            system.load(Path(app_dir) / filename)
            return system
        except MetroDataError:
            pass
    try:
        system.load(filename)
    except MetroDataError as exc:
        raise MetroDataError(
            f"{exc}\nPlease ensure '{filename}' is in the application directory "
            "or the current working directory."
        ) from exc
    return system


def find_route(
    system: MetroSystem,
    source: str,
    destination: str,
    criterion: Union[Criterion, int],
) -> tuple[list[PathSegment], str]:
    """Search a route and return it together with its HTML description."""
    if not source or not destination:
        raise ValueError("Please select both source and destination stations.")
    try:
        criterion = Criterion(criterion)
    except ValueError as exc:
        raise ValueError("Invalid criteria selected.") from exc

    path: list[PathSegment] = []
    if source != destination:
        search = {
            Criterion.LEAST_STOPS: system.find_path_least_stops,
            Criterion.LEAST_COST: system.find_path_by_cost,
            Criterion.LEAST_TIME: system.find_path_by_time,
        }[criterion]
        path = search(source, destination)
    return path, render_route_html(source, destination, criterion, path)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="metroroute", description="Find a metro route between two stations."
    )
    parser.add_argument("source", nargs="?", help="source station")
    parser.add_argument("destination", nargs="?", help="destination station")
    parser.add_argument(
        "-c",
        "--criterion",
        choices=sorted(_CRITERIA),
        default="stops",
        help="what to optimise for (default: stops)",
    )
    parser.add_argument(
        "-d", "--data", default=DATA_FILE_NAME, help="metro data CSV file"
    )
    parser.add_argument(
        "--map-json",
        action="store_true",
        help="also print the route's station positions as JSON",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the route finder; list stations when no stations are given."""
    parser = _parser()
    args = parser.parse_args(argv)
    if (args.source is None) != (args.destination is None):
        parser.error("both source and destination stations are required")

    app_dir = Path(sys.argv[0]).resolve().parent if sys.argv and sys.argv[0] else None
    try:
        system = load_system(args.data, app_dir)
    except MetroDataError as exc:
        print(f"Error Loading Data: {exc}", file=sys.stderr)
        return 1

    if args.source is None:
        for name in system.station_names():
            print(name)
        return 0

    path, html_text = find_route(
        system, args.source, args.destination, _CRITERIA[args.criterion]
    )
    print(html_text)
    if args.map_json and path:
        points = path_coordinates_json(path, system.station_coordinates())
        if points != "[]":
            print(points)
    return 0


if __name__ == "__main__":
    sys.exit(main())
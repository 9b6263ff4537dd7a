"""Metro network model: CSV loading and route search."""

from __future__ import annotations

import heapq
import logging
import math
import re
from collections import deque
from dataclasses import dataclass
from os import PathLike
from typing import Union

logger = logging.getLogger(__name__)

_WHITESPACE = " \t\n\r\f\v"
_FIELD_COUNT = 10
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_INT_PREFIX = re.compile(r"[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


class MetroDataError(Exception):
    """Raised when a metro data file cannot be loaded."""


@dataclass(frozen=True)
class Coordinate:
    """Geographic position of a station."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class Edge:
    """A directed track segment towards a neighbouring station."""

    to: str
    time: int
    distance: float
    cost: int
    line: str


@dataclass(frozen=True)
class PathSegment:
    """One station along a route, with the segment used to reach it."""

    station_name: str
    line: str = ""
    time: int = 0
    cost: int = 0
    is_first: bool = False


def trim(text: str) -> str:
    """Strip spaces, tabs and line-control characters from both ends."""
    return text.strip(_WHITESPACE)


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    value = int(match.group())
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return value


def _parse_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid number: {text!r}")
    literal = match.group()
    value = float(literal)
    if math.isinf(value) and "inf" not in literal.lower():
        raise ValueError(f"number out of range: {text!r}")
    return value


def _split_fields(line: str) -> list[str] | None:
    fields = line.split(",", _FIELD_COUNT - 1)
    if len(fields) < _FIELD_COUNT:
        return None
    if fields[-1] == "" and line.endswith(","):
        # Nothing left to read for the final column.
        return None
    return fields


class MetroSystem:
    """Graph of metro stations with shortest-route queries."""

    def __init__(self) -> None:
        self._graph: dict[str, list[Edge]] = {}
        self._stations: set[str] = set()
        self._coordinates: dict[str, Coordinate] = {}

    def load(self, filename: Union[str, PathLike]) -> None:
        """Load a 10-column segment CSV, replacing any current data.

        Raises MetroDataError if the file cannot be read or yields no data.
        """
        try:
            with open(filename, encoding="utf-8") as handle:
                text = handle.read()
        except OSError as exc:
            raise MetroDataError(f"Failed to open file: {filename}") from exc

        self._graph.clear()
        self._stations.clear()
        self._coordinates.clear()

        if text == "":
            raise MetroDataError(
                f"File is empty or failed to read header: {filename}"
            )

        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        data_lines = lines[1:]

        parsed_rows = 0
        for line_number, raw in enumerate(data_lines, start=2):
            if not trim(raw):
                continue
            if self._add_row(raw, line_number):
                parsed_rows += 1

        if not self._graph:
            if data_lines:
                raise MetroDataError(
                    "No data loaded from file or file format incorrect "
                    f"after parsing: {filename}"
                )
            raise MetroDataError(
                f"No data lines found in file after header: {filename}"
            )
        logger.info(
            "Loaded %d rows, %d unique stations", parsed_rows, len(self._stations)
        )

    def _add_row(self, raw: str, line_number: int) -> bool:
        fields = _split_fields(raw)
        if fields is None:
            logger.warning("Line %d: expected 10 fields, skipping", line_number)
            return False
        (
            from_station,
            to_station,
            time_str,
            dist_str,
            cost_str,
            line_name,
            lat_from_str,
            lon_from_str,
            lat_to_str,
            lon_to_str,
        ) = (trim(field) for field in fields)
        if not all(
            (
                from_station,
                to_station,
                time_str,
                dist_str,
                cost_str,
                line_name,
                lat_from_str,
                lon_from_str,
                lat_to_str,
                lon_to_str,
            )
        ):
            logger.warning("Line %d: empty field, skipping", line_number)
            return False
        try:
            time_val = _parse_int(time_str)
            distance = _parse_float(dist_str)
            cost_val = _parse_int(cost_str)
            lat_from = _parse_float(lat_from_str)
            lon_from = _parse_float(lon_from_str)
            lat_to = _parse_float(lat_to_str)
            lon_to = _parse_float(lon_to_str)
        except ValueError as exc:
            logger.warning("Line %d: %s, skipping", line_number, exc)
            return False

        self._coordinates.setdefault(from_station, Coordinate(lat_from, lon_from))
        self._coordinates.setdefault(to_station, Coordinate(lat_to, lon_to))
        self._graph.setdefault(from_station, []).append(
            Edge(to_station, time_val, distance, cost_val, line_name)
        )
        self._graph.setdefault(to_station, []).append(
            Edge(from_station, time_val, distance, cost_val, line_name)
        )
        self._stations.add(from_station)
        self._stations.add(to_station)
        return True

    def station_names(self) -> list[str]:
        """Return all station names in sorted order."""
        return sorted(self._stations)

    def station_coordinates(self) -> dict[str, Coordinate]:
        """Return the position recorded for each station."""
        return dict(self._coordinates)

    def _find_edge(self, origin: str, target: str) -> Edge | None:
        return next(
            (edge for edge in self._graph.get(origin, ()) if edge.to == target),
            None,
        )

    def _build_path(
        self, start: str, end: str, parents: dict[str, str]
    ) -> list[PathSegment]:
        reversed_path: list[PathSegment] = []
        current = end
        while current != start:
            previous = parents.get(current)
            if previous is None:
                logger.error("Path reconstruction broken at %s", current)
                return []
            edge = self._find_edge(previous, current)
            if edge is None:
                logger.error("No edge from %s to %s", previous, current)
                return []
            reversed_path.append(
                PathSegment(current, edge.line, edge.time, edge.cost)
            )
            current = previous
        reversed_path.append(PathSegment(start, is_first=True))
        reversed_path.reverse()
        return reversed_path

    def find_path_least_stops(self, start: str, end: str) -> list[PathSegment]:
        """Return the route with the fewest hops, or [] if none exists."""
        if start not in self._graph or end not in self._graph:
            return []
        if start == end:
            return [PathSegment(start, is_first=True)]

        parents: dict[str, str] = {}
        visited = {start}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            if current == end:
                return self._build_path(start, end, parents)
            for edge in self._graph.get(current, ()):
                if edge.to not in visited:
                    visited.add(edge.to)
                    parents[edge.to] = current
                    queue.append(edge.to)
        return []

    def _dijkstra(self, start: str, end: str, by_time: bool) -> list[PathSegment]:
        if start not in self._graph or end not in self._graph:
            return []
        if start == end:
            return [PathSegment(start, is_first=True)]

        best: dict[str, float] = {name: math.inf for name in self._stations}
        best[start] = 0
        parents: dict[str, str] = {}
        order = 0
        heap: list[tuple[float, int, str]] = [(0, order, start)]
        while heap:
            value, _, current = heapq.heappop(heap)
            if value > best.get(current, math.inf):
                continue
            if current == end:
                return self._build_path(start, end, parents)
            current_value = best[current]
            if math.isinf(current_value):
                continue
            for edge in self._graph.get(current, ()):
                weight = edge.time if by_time else edge.cost
                candidate = current_value + weight
                if candidate < best.get(edge.to, math.inf):
                    best[edge.to] = candidate
                    parents[edge.to] = current
                    order += 1
                    heapq.heappush(heap, (candidate, order, edge.to))
        return []

    def find_path_by_time(self, start: str, end: str) -> list[PathSegment]:
        """Return the route with the least total travel time."""
        return self._dijkstra(start, end, by_time=True)

    def find_path_by_cost(self, start: str, end: str) -> list[PathSegment]:
        """Return the route with the least total fare."""
        return self._dijkstra(start, end, by_time=False)
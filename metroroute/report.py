"""Route summaries and the HTML and JSON renderings of a found route."""

from __future__ import annotations

import html
import json
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import IntEnum

from metroroute.network import Coordinate, PathSegment

_LINE_COLORS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("blue",), "blue"),
    (("red",), "red"),
    (("green",), "green"),
    (("yellow",), "darkgoldenrod"),
    (("pink",), "deeppink"),
    (("magenta",), "magenta"),
    (("orange",), "orange"),
    (("aqua",), "darkcyan"),
    (("violet", "voilet"), "darkviolet"),
    (("gray", "grey"), "gray"),
    (("rapid",), "saddlebrown"),
)


class Criterion(IntEnum):
    """What a route search optimises for."""

    LEAST_STOPS = 1
    LEAST_COST = 2
    LEAST_TIME = 3

    @property
    def label(self) -> str:
        """Human-readable name of the criterion."""
        return {
            Criterion.LEAST_STOPS: "Least Stops",
            Criterion.LEAST_COST: "Least Cost",
            Criterion.LEAST_TIME: "Least Time",
        }[self]


@dataclass(frozen=True)
class RouteSummary:
    """Totals for a route."""

    stations: int
    hops: int
    total_time: int
    total_cost: int
    line_changes: int


def line_color(line_name: str) -> str:
    """Return the display colour for a metro line name."""
    lowered = line_name.lower()
    for keywords, color in _LINE_COLORS:
        if any(keyword in lowered for keyword in keywords):
            return color
    return "black"


def _escape(text: str) -> str:
    return html.escape(text, quote=False).replace('"', "&quot;")


def _line_html(line_name: str) -> str:
    return f"<font color='{line_color(line_name)}'>{_escape(line_name)}</font>"


def summarize(path: Sequence[PathSegment]) -> RouteSummary:
    """Add up time, cost, hops and line changes along a route."""
    total_time = 0
    total_cost = 0
    line_changes = 0
    previous_line = ""
    for segment in path[1:]:
        total_time += segment.time
        total_cost += segment.cost
        if segment.line and previous_line and segment.line != previous_line:
            line_changes += 1
        previous_line = segment.line
    return RouteSummary(
        stations=len(path),
        hops=max(len(path) - 1, 0),
        total_time=total_time,
        total_cost=total_cost,
        line_changes=line_changes,
    )


def _directions(path: Sequence[PathSegment]) -> str:
    parts: list[str] = []
    active_line = ""
    for position, segment in enumerate(path):
        station_html = f"<b>{_escape(segment.station_name)}</b>"
        if segment.is_first:
            parts.append(f"<li>Start at {station_html}.</li>")
            if len(path) > 1:
                active_line = path[position + 1].line
                if active_line:
                    parts.append(f"<li>Board {_line_html(active_line)}.</li>")
            continue
        line_html = _line_html(segment.line) if segment.line else ""
        if segment.line and active_line and segment.line != active_line:
            parts.append(f"<li>Change to {line_html}.</li>")
        active_line = segment.line
        item = f"<li>Arrive at {station_html} "
        if line_html:
            item += f"via {line_html} "
        item += f"(Segment: {segment.time} min, INR {segment.cost}).</li>"
        parts.append(item)
    return "".join(parts)


def render_route_html(
    source: str,
    destination: str,
    criterion: Criterion | int,
    path: Sequence[PathSegment],
) -> str:
    """Render the route between two stations as an HTML fragment."""
    criterion = Criterion(criterion)
    src = _escape(source)
    dst = _escape(destination)
    heading = f"<h3>Route from {src} to {dst}</h3>"
    if source == destination:
        return (
            f"{heading}<hr><p>Source and Destination are the same station: "
            f"<b>{src}</b></p>"
        )
    if not path:
        return (
            f"{heading}<hr><p><b>No path found.</b></p>"
            f"<p><i>Criteria: {_escape(criterion.label)}</i></p>"
        )
    summary = summarize(path)
    return "".join(
        (
            heading,
            f"<p><i>Optimized for: {_escape(criterion.label)}</i></p><hr>",
            "<h4>Summary:</h4><ul>",
            f"<li><b>Total Stations in Path:</b> {summary.stations} "
            f"({summary.hops} hops)</li>",
            f"<li><b>Estimated Time:</b> {summary.total_time} minutes</li>",
            f"<li><b>Estimated Cost:</b> INR {summary.total_cost}</li>",
            f"<li><b>Line Changes:</b> {summary.line_changes}</li>",
            "</ul><hr><h4>Directions:</h4><ol>",
            _directions(path),
            "</ol>",
        )
    )


def path_coordinates_json(
    path: Sequence[PathSegment], coordinates: Mapping[str, Coordinate]
) -> str:
    """Encode the route's stations with their positions as compact JSON.

    Stations without a known position are left out.
    """
    points = [
        {
            "lat": coordinates[segment.station_name].latitude,
            "lng": coordinates[segment.station_name].longitude,
            "name": segment.station_name,
        }
        for segment in path
        if segment.station_name in coordinates
    ]
    return json.dumps(points, separators=(",", ":"))
# metroroute

Find routes through a metro network described in a CSV file, optimised for
the fewest stops, the lowest fare or the shortest travel time.

## Installation

```
pip install .
```

## Data file

The network is read from a UTF-8 CSV file with one header line followed by
one row per track segment, ten columns each:

```
From,To,Time,Distance,Cost,Line,LatFrom,LonFrom,LatTo,LonTo
```

Time and cost are integers, the others numbers. Every segment is treated as
running in both directions. Blank lines are ignored; rows with too few
columns, an empty field or a number that cannot be parsed are skipped and
logged as warnings. The first coordinates seen for a station are the ones
kept.

Loading fails with `MetroDataError` when the file cannot be opened, is
empty, has no lines after the header, or has no usable rows.

## Command line

List every station, sorted by name:

```
metroroute
```

Find a route between two stations:

```
metroroute "Station A" "Station B" --criterion time
```

Options:

- `-c`, `--criterion {cost,stops,time}`: what to optimise for; default
  `stops`.
- `-d`, `--data FILE`: the data file; default `metroFinalData.csv`. It is
  looked up first in the directory of the running program and then as the
  path given (relative to the current working directory).
- `--map-json`: after the report, also print the route's stations with
  their latitude and longitude as compact JSON
  (`[{"lat":...,"lng":...,"name":...}, ...]`), leaving out stations with no
  known position.

Giving only one of the two stations is a usage error. If the data cannot be
loaded, the command prints `Error Loading Data: ...` to standard error and
exits with status 1.

The route is printed as an HTML fragment: a heading, the criterion, a
summary (total stations and hops, estimated time in minutes, estimated cost
in INR, number of line changes) and step-by-step directions naming the line
boarded, each line change and each station reached with its segment time
and cost. Line names are coloured by keyword (for example "blue", "red",
"yellow" → `darkgoldenrod`, "rapid" → `saddlebrown`, otherwise `black`).
When source and destination are the same, the report says so; when no route
exists, or a station is not in the network, it says "No path found."

## Library use

```python
from metroroute.network import MetroSystem

system = MetroSystem()
system.load("metroFinalData.csv")

print(system.station_names())
for segment in system.find_path_by_time("Station A", "Station B"):
    print(segment.station_name, segment.line, segment.time, segment.cost)
```

`metroroute.network`:

- `MetroSystem` with `load`, `station_names`, `station_coordinates` and the
  searches `find_path_least_stops` (breadth-first), `find_path_by_time` and
  `find_path_by_cost` (Dijkstra). Each search returns a list of
  `PathSegment` (`station_name`, `line`, `time`, `cost`, `is_first`); the
  first entry marks the starting station. An empty list means no path.
- `Coordinate` (`latitude`, `longitude`), `Edge`, `MetroDataError` and
  `trim`.

`metroroute.report`:

- `Criterion` (`LEAST_STOPS = 1`, `LEAST_COST = 2`, `LEAST_TIME = 3`, each
  with a `label`).
- `summarize(path)` returns a `RouteSummary` (`stations`, `hops`,
  `total_time`, `total_cost`, `line_changes`).
- `render_route_html(source, destination, criterion, path)` builds the HTML
  report.
- `path_coordinates_json(path, coordinates)` builds the JSON station list.
- `line_color(line_name)` maps a line name to a display colour.

`metroroute.app`:

- `load_system(filename, app_dir)` loads the data file from `app_dir`,
  falling back to `filename` as given.
- `find_route(system, source, destination, criterion)` returns the path and
  its HTML report; it raises `ValueError` when a station name is empty or
  the criterion is not one of the three.
- `main(argv)` runs the command line.

## What it does not do

There is no graphical window and no map display: routes are printed as HTML
text, and `--map-json` only prints the coordinates a map could be drawn
from.

## Running the tests

```
pip install .[test]
pytest
```
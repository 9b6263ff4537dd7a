import pytest

from metroroute.app import find_route, load_system, main
from metroroute.network import MetroDataError
from metroroute.report import Criterion

CSV = (
    "From,To,Time,Distance,Cost,Line,LatFrom,LonFrom,LatTo,LonTo\n"
    "A,C,30,3.0,10,Red Line,28.1,77.1,28.3,77.3\n"
    "A,B,5,1.0,20,Blue Line,28.1,77.1,28.2,77.2\n"
    "B,C,5,1.0,20,Yellow Line,28.2,77.2,28.3,77.3\n"
)


@pytest.fixture
def data_file(tmp_path):
    path = tmp_path / "metro.csv"
    path.write_text(CSV, encoding="utf-8")
    return path


@pytest.fixture
def system(data_file):
    return load_system(data_file, None)


def test_load_system_from_app_dir(tmp_path, data_file, monkeypatch):
    monkeypatch.chdir(tmp_path.parent)
    loaded = load_system("metro.csv", tmp_path)
    assert loaded.station_names() == ["A", "B", "C"]


def test_load_system_falls_back_to_cwd(tmp_path, data_file, monkeypatch):
    monkeypatch.chdir(tmp_path)
    other = tmp_path / "empty_dir"
    other.mkdir()
    loaded = load_system("metro.csv", other)
    assert loaded.station_names() == ["A", "B", "C"]


def test_load_system_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(MetroDataError, match="Please ensure 'missing.csv'"):
        load_system("missing.csv", tmp_path)


def test_find_route_least_stops(system):
    path, text = find_route(system, "A", "C", Criterion.LEAST_STOPS)
    assert [s.station_name for s in path] == ["A", "C"]
    assert "Optimized for: Least Stops" in text


def test_find_route_by_time(system):
    path, text = find_route(system, "A", "C", Criterion.LEAST_TIME)
    assert [s.station_name for s in path] == ["A", "B", "C"]
    assert "Change to" in text


def test_find_route_by_cost(system):
    path, _ = find_route(system, "A", "C", 2)
    assert [s.station_name for s in path] == ["A", "C"]


def test_find_route_same_station(system):
    path, text = find_route(system, "B", "B", Criterion.LEAST_TIME)
    assert path == []
    assert "same station" in text


def test_find_route_unknown_station(system):
    path, text = find_route(system, "A", "Nowhere", Criterion.LEAST_STOPS)
    assert path == []
    assert "No path found." in text


def test_find_route_invalid_criterion(system):
    with pytest.raises(ValueError, match="Invalid criteria selected."):
        find_route(system, "A", "C", 7)


def test_find_route_missing_input(system):
    with pytest.raises(ValueError, match="Please select both"):
        find_route(system, "", "C", Criterion.LEAST_STOPS)


def test_main_lists_stations(data_file, capsys):
    assert main(["--data", str(data_file)]) == 0
    assert capsys.readouterr().out.split() == ["A", "B", "C"]


def test_main_prints_route_and_map(data_file, capsys):
    code = main(["A", "C", "-c", "time", "--data", str(data_file), "--map-json"])
    out = capsys.readouterr().out.splitlines()
    assert code == 0
    assert out[0].startswith("<h3>Route from A to C</h3>")
    assert '"name":"B"' in out[1]


def test_main_missing_data(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["--data", "absent.csv"]) == 1
    assert "Error Loading Data" in capsys.readouterr().err


def test_main_requires_both_stations(data_file):
    with pytest.raises(SystemExit):
        main(["A", "--data", str(data_file)])
import json
import pytest

from levels.station_data import StationDataset, StationDataError
from game_logic.game import Game
from conftest import BOARD_RECORDS


def test_from_records_defaults_optional_fields():
    dataset = StationDataset.from_records([{"id": 7, "x": 3, "y": 4, "type": "B"}])
    station = dataset.stations[0]
    assert station.is_train_hub is False
    assert station.river_side is None
    assert station.district is None


def test_index_lookups(station_index):
    assert len(station_index) == len(BOARD_RECORDS)
    assert 5 in station_index and 99 not in station_index
    assert station_index.get_station_at(2, 2).id == 5
    assert station_index.get_station_at(1, 1) is None
    assert station_index.get_station(5).is_wildcard
    assert set(station_index.train_station_ids) == {3, 9}
    assert station_index.is_valid_coordinate(9, 9)
    assert not station_index.is_valid_coordinate(10, 0)


@pytest.mark.parametrize("records", [
    [],
    {"id": 0},
    [{"id": 0, "x": 0, "y": 0}],
    [{"id": 0, "x": 10, "y": 0, "type": "A"}],
    [{"id": 0, "x": 0, "y": 0, "type": "Z"}],
    [{"id": "0", "x": 0, "y": 0, "type": "A"}],
    [{"id": 0, "x": 0, "y": 0, "type": "A", "side": "north"}],
    [{"id": 0, "x": 0, "y": 0, "type": "A", "train": "yes"}],
    [{"id": 0, "x": 0, "y": 0, "type": "A"}, {"id": 0, "x": 1, "y": 0, "type": "B"}],
    [{"id": 0, "x": 0, "y": 0, "type": "A"}, {"id": 1, "x": 0, "y": 0, "type": "B"}],
])
def test_malformed_records_are_rejected(records):
    with pytest.raises(StationDataError):
        StationDataset.from_records(records)


def test_missing_file_raises(tmp_path):
    with pytest.raises(StationDataError):
        StationDataset(str(tmp_path / "nope.json"))


def test_bad_json_raises(tmp_path):
    path = tmp_path / "stations.json"
    path.write_text("[{not json", encoding="utf-8")
    with pytest.raises(StationDataError):
        StationDataset(str(path))


def test_load_from_file(tmp_path):
    path = tmp_path / "stations.json"
    path.write_text(json.dumps(BOARD_RECORDS), encoding="utf-8")
    dataset = StationDataset(str(path))
    assert [s.id for s in dataset.stations] == [r["id"] for r in BOARD_RECORDS]


def test_bundled_dataset_supports_default_lines():
    import os
    root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
    index = StationDataset(StationDataset.default_path(root)).build_index()
    # Game checks the default start stations and the transfer station exist
    game = Game(index, seed=3)
    assert {line.start_station_id for line in game.lines} == {19, 28, 3, 39}


def test_game_rejects_board_without_start_stations():
    index = StationDataset.from_records([{"id": 0, "x": 0, "y": 0, "type": "A"}]).build_index()
    with pytest.raises(StationDataError):
        Game(index)

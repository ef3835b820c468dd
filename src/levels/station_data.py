# src/levels/station_data.py
import json
import os
from typing import List, Dict, Any, Optional, Set, Tuple

from game_logic.station import Station
from game_logic.station_index import StationIndex
from common import constants as C


class StationDataError(Exception):
    """The station dataset is missing or malformed. Play cannot begin."""


REQUIRED_FIELDS: Tuple[str, ...] = ("id", "x", "y", "type")


def _parse_record(record: Any, position: int) -> Station:
    if not isinstance(record, dict):
        raise StationDataError(f"Record #{position} is not an object.")
    missing = [name for name in REQUIRED_FIELDS if name not in record]
    if missing:
        raise StationDataError(f"Record #{position} is missing required field(s): {', '.join(missing)}.")

    for name in ("id", "x", "y"):
        value = record[name]
        if not isinstance(value, int) or isinstance(value, bool):
            raise StationDataError(f"Record #{position}: '{name}' must be an integer, got {value!r}.")
    station_id, x, y = record["id"], record["x"], record["y"]
    if not (0 <= x < C.GRID_SIZE and 0 <= y < C.GRID_SIZE):
        raise StationDataError(f"Station {station_id}: position ({x},{y}) is outside the {C.GRID_SIZE}x{C.GRID_SIZE} grid.")

    symbol = record["type"]
    if symbol not in C.STATION_SYMBOLS and symbol != C.STATION_WILDCARD:
        raise StationDataError(f"Station {station_id}: unknown symbol {symbol!r}.")

    # Optional metadata is defaulted here, once, instead of at every lookup
    train = record.get("train", False)
    if not isinstance(train, bool):
        raise StationDataError(f"Station {station_id}: 'train' must be true or false, got {train!r}.")
    side = record.get("side")
    if side is not None and side not in C.RIVER_SIDES:
        raise StationDataError(f"Station {station_id}: unknown river side {side!r}.")
    district = record.get("district")
    if district is not None and (not isinstance(district, int) or isinstance(district, bool)):
        raise StationDataError(f"Station {station_id}: 'district' must be an integer, got {district!r}.")

    return Station(station_id, x, y, symbol, train, side, district)


class StationDataset:
    """
    Loads and validates the station records for the board from a .json file.
    The whole file is rejected on the first problem; there is no partial load.
    """
    def __init__(self, filepath: Optional[str] = None):
        """
        RAISES StationDataError if the file cannot be found, parsed or validated.
        """
        self.filepath = filepath
        self.stations: List[Station] = []
        if filepath is None:
            return

        print(f"--- Loading station data from: {self.filepath} ---")
        try:
            with open(self.filepath, 'r', encoding='utf-8') as f:
                records = json.load(f)
            self._load_records(records)
        except (OSError, json.JSONDecodeError) as e:
            print(f"!!! CRITICAL ERROR: Could not load station file '{self.filepath}'. Reason: {e}")
            raise StationDataError(f"Could not load station file '{self.filepath}': {e}") from e
        except StationDataError as e:
            print(f"!!! CRITICAL ERROR: Station file '{self.filepath}' is malformed. Reason: {e}")
            raise
        print(f"--- {len(self.stations)} stations loaded successfully. ---")

    @classmethod
    def from_records(cls, records: List[Dict[str, Any]]) -> 'StationDataset':
        dataset = cls()
        dataset._load_records(records)
        return dataset

    def _load_records(self, records: Any):
        if not isinstance(records, list) or not records:
            raise StationDataError("Station data must be a non-empty list of records.")

        stations: List[Station] = []
        seen_ids: Set[int] = set()
        seen_cells: Dict[Tuple[int, int], int] = {}
        for position, record in enumerate(records):
            station = _parse_record(record, position)
            if station.id in seen_ids:
                raise StationDataError(f"Duplicate station id {station.id}.")
            if (station.x, station.y) in seen_cells:
                raise StationDataError(f"Stations {seen_cells[(station.x, station.y)]} and {station.id} share cell ({station.x},{station.y}).")
            seen_ids.add(station.id)
            seen_cells[(station.x, station.y)] = station.id
            stations.append(station)
        self.stations = stations

    def build_index(self) -> StationIndex:
        return StationIndex(self.stations)

    @staticmethod
    def default_path(root_dir: str) -> str:
        return os.path.join(root_dir, 'src', 'levels', C.STATIONS_FILENAME)

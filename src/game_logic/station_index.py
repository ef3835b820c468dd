# game_logic/station_index.py
from typing import List, Dict, Tuple, Optional, Iterator
from .station import Station
from common.constants import GRID_SIZE


class StationIndex:
    def __init__(self, stations: List[Station], grid_size: int = GRID_SIZE):
        """
        Builds the read-only lookups used by the geometry and ownership checks.
        The station list is expected to be validated already (see StationDataset).
        """
        self.grid_size = grid_size
        self._stations: Tuple[Station, ...] = tuple(stations)
        self._by_id: Dict[int, Station] = {s.id: s for s in self._stations}
        self._by_position: Dict[Tuple[int, int], Station] = {(s.x, s.y): s for s in self._stations}
        self.train_station_ids: Tuple[int, ...] = tuple(s.id for s in self._stations if s.is_train_hub)

    def __iter__(self) -> Iterator[Station]:
        return iter(self._stations)

    def __len__(self) -> int:
        return len(self._stations)

    def __contains__(self, station_id: int) -> bool:
        return station_id in self._by_id

    def is_valid_coordinate(self, x: int, y: int) -> bool:
        return 0 <= x < self.grid_size and 0 <= y < self.grid_size

    def get_station(self, station_id: int) -> Optional[Station]:
        return self._by_id.get(station_id)

    def get_station_at(self, x: int, y: int) -> Optional[Station]:
        return self._by_position.get((x, y))

    def is_train_station(self, station_id: int) -> bool:
        station = self._by_id.get(station_id)
        return station is not None and station.is_train_hub

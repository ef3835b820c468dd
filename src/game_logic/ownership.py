# game_logic/ownership.py
from typing import Dict, Optional
from common.constants import STATION_TRANSFER_EXCEPTION


class OwnershipTracker:
    """Maps each touched station to the line that controls it."""
    def __init__(self, transfer_station_id: int = STATION_TRANSFER_EXCEPTION):
        self.transfer_station_id = transfer_station_id
        self._owners: Dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._owners)

    def get_owner(self, station_id: int) -> Optional[int]:
        return self._owners.get(station_id)

    def is_owned(self, station_id: int) -> bool:
        return station_id in self._owners

    def is_owned_by_other(self, station_id: int, line_id: int, start_station_id: int) -> bool:
        """
        True when another line holds the station and neither exemption applies
        (the transfer station, or the asking line's own start station).
        """
        if station_id == self.transfer_station_id or station_id == start_station_id:
            return False
        owner = self._owners.get(station_id)
        return owner is not None and owner != line_id

    def claim(self, station_id: int, line_id: int, start_station_id: int):
        """First claim wins, except a line always re-claims its own start station."""
        if station_id == self.transfer_station_id:
            return
        if station_id == start_station_id or station_id not in self._owners:
            self._owners[station_id] = line_id

    def clear(self):
        self._owners.clear()

    def to_dict(self) -> Dict[int, int]:
        return dict(self._owners)

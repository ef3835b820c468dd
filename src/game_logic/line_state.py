# game_logic/line_state.py
from typing import List, Dict, Set, Any
from .station import Segment


class LineBuildState:
    """
    Everything one line has built so far. Segments are never removed, so
    ``visited`` only grows and always contains the start station.
    """
    def __init__(self, line_id: int, start_station_id: int):
        self.line_id = line_id
        self.start_station_id = start_station_id
        self.segments: List[Segment] = []
        self.endpoints: Set[int] = set()
        self.visited: Set[int] = {start_station_id}

    @property
    def is_empty(self) -> bool:
        return len(self.segments) == 0

    def is_open_endpoint(self, station_id: int) -> bool:
        return station_id in self.endpoints

    def has_visited(self, station_id: int) -> bool:
        return station_id in self.visited

    def has_segment(self, a: int, b: int) -> bool:
        key = frozenset((a, b))
        return any(seg.key == key for seg in self.segments)

    def _toggle_endpoint(self, station_id: int):
        if station_id in self.endpoints:
            self.endpoints.discard(station_id)
        else:
            self.endpoints.add(station_id)

    def add_segment(self, a: int, b: int) -> Segment:
        segment = Segment(a, b)
        self.segments.append(segment)
        self._toggle_endpoint(a)
        self._toggle_endpoint(b)
        self.visited.add(a)
        self.visited.add(b)
        return segment

    def to_dict(self) -> Dict[str, Any]:
        return {
            "line_id": self.line_id,
            "segments": [seg.to_dict() for seg in self.segments],
            "endpoints": sorted(self.endpoints),
            "visited": sorted(self.visited),
        }

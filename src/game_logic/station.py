# game_logic/station.py
from typing import List, Dict, Optional, Any, NamedTuple, FrozenSet
from common import constants as C
from .enums import PlatformType


class Station(NamedTuple):
    id: int
    x: int
    y: int
    symbol_type: str
    is_train_hub: bool = False
    river_side: Optional[str] = None
    district: Optional[int] = None

    @property
    def is_wildcard(self) -> bool:
        return self.symbol_type == C.STATION_WILDCARD

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "x": self.x, "y": self.y, "type": self.symbol_type,
                "train": self.is_train_hub, "side": self.river_side, "district": self.district}


class MetroLine(NamedTuple):
    id: int
    name: str
    color: str
    start_station_id: int

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'MetroLine':
        return MetroLine(data["id"], data["name"], data["color"], data["start"])


class Card(NamedTuple):
    platform_type: PlatformType
    symbol: str

    @property
    def is_joker(self) -> bool:
        return self.symbol == C.JOKER_SYMBOL

    def __str__(self) -> str:
        return f"{self.symbol}/{self.platform_type.value}"


class Segment:
    """An undirected connection between two stations, owned by one line."""
    def __init__(self, a: int, b: int):
        self.a = a
        self.b = b

    @property
    def key(self) -> FrozenSet[int]:
        return frozenset((self.a, self.b))

    def has_endpoint(self, station_id: int) -> bool:
        return station_id == self.a or station_id == self.b

    def __repr__(self) -> str: return f"Segment({self.a}-{self.b})"
    def __eq__(self, other):
        if isinstance(other, Segment):
            return self.key == other.key
        return NotImplemented
    def __hash__(self): return hash(self.key)

    def to_dict(self) -> Dict[str, int]:
        return {"a": self.a, "b": self.b}


def build_lines(definitions: List[Dict[str, Any]] = C.LINE_DEFINITIONS) -> List[MetroLine]:
    return [MetroLine.from_dict(d) for d in definitions]

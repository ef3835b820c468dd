# game_logic/scoring.py
"""
Round and end-of-game scoring.

Per round (one line):
    PK  number of districts the line visits
    PM  largest number of visited stations in a single district
    PD  segments crossing the river (both ends have a bank, and they differ)
    FP  PK * PM + PD

End of game:
    PP  train-hub stations visited by any line
    P2, P3, P4  stations visited by exactly 2, exactly 3, and 4 or more lines
    total = sum(FP) + PP + 2*P2 + 5*P3 + 9*P4
"""
from __future__ import annotations
from typing import Iterable, List, Dict, Set, Tuple, NamedTuple, TYPE_CHECKING
from collections import Counter

if TYPE_CHECKING:
    from .line_state import LineBuildState
    from .station_index import StationIndex

from common.constants import P2_WEIGHT, P3_WEIGHT, P4_WEIGHT


class RoundResult(NamedTuple):
    line_id: int
    pk: int
    pm: int
    pd: int
    fp: int

    def to_dict(self) -> Dict[str, int]:
        return {"line_id": self.line_id, "PK": self.pk, "PM": self.pm, "PD": self.pd, "FP": self.fp}


class FinalScore(NamedTuple):
    pp: int
    p2: int
    p3: int
    p4: int
    sum_fp: int
    total: int

    def to_dict(self) -> Dict[str, int]:
        return {"PP": self.pp, "P2": self.p2, "P3": self.p3, "P4": self.p4, "sum_FP": self.sum_fp, "total": self.total}


def compute_round_score(line_state: 'LineBuildState', index: 'StationIndex') -> RoundResult:
    district_counts: Counter = Counter()
    for station_id in line_state.visited:
        station = index.get_station(station_id)
        if station is None or station.district is None:
            continue
        district_counts[station.district] += 1
    pk = len(district_counts)
    pm = max(district_counts.values()) if district_counts else 0

    pd = 0
    for seg in line_state.segments:
        a = index.get_station(seg.a)
        b = index.get_station(seg.b)
        if a is None or b is None or a.river_side is None or b.river_side is None:
            continue
        if a.river_side != b.river_side:
            pd += 1

    return RoundResult(line_state.line_id, pk, pm, pd, pk * pm + pd)


def count_train_stations_visited(line_states: Iterable['LineBuildState'], index: 'StationIndex') -> int:
    visited_hubs: Set[int] = set()
    for line_state in line_states:
        visited_hubs.update(sid for sid in line_state.visited if index.is_train_station(sid))
    return len(visited_hubs)


def count_junctions(line_states: Iterable['LineBuildState']) -> Tuple[int, int, int]:
    """Returns (P2, P3, P4) from how many distinct lines visited each station."""
    lines_per_station: Dict[int, Set[int]] = {}
    for line_state in line_states:
        for sid in line_state.visited:
            lines_per_station.setdefault(sid, set()).add(line_state.line_id)

    p2 = p3 = p4 = 0
    for line_ids in lines_per_station.values():
        count = len(line_ids)
        if count == 2: p2 += 1
        elif count == 3: p3 += 1
        elif count >= 4: p4 += 1
    return p2, p3, p4


def compute_final_score(line_states: Iterable['LineBuildState'], round_results: List[RoundResult], index: 'StationIndex') -> FinalScore:
    line_states = list(line_states)
    pp = count_train_stations_visited(line_states, index)
    p2, p3, p4 = count_junctions(line_states)
    sum_fp = sum(r.fp for r in round_results)
    total = sum_fp + pp + P2_WEIGHT * p2 + P3_WEIGHT * p3 + P4_WEIGHT * p4
    return FinalScore(pp, p2, p3, p4, sum_fp, total)

# game_logic/game.py
from __future__ import annotations
from typing import List, Dict, Optional, Any, TYPE_CHECKING
import random

if TYPE_CHECKING:
    from scenes.game_scene import GameScene

from .enums import GamePhase
from .station import MetroLine, Card, build_lines
from .station_index import StationIndex
from .line_state import LineBuildState
from .ownership import OwnershipTracker
from .deck_manager import DeckManager
from .rule_engine import RuleEngine
from .round_manager import RoundManager, RoundState
from .scoring import RoundResult, FinalScore, compute_final_score, count_train_stations_visited
from levels.station_data import StationDataError
import common.constants as C


class Game:
    """
    One game session. Holds every piece of mutable engine state so that
    separate sessions (and tests) never share anything.
    """
    def __init__(self, station_index: StationIndex, seed: Optional[int] = None,
                 lines: Optional[List[MetroLine]] = None, transfer_station_id: int = C.STATION_TRANSFER_EXCEPTION):
        self.station_index = station_index
        self.lines: List[MetroLine] = lines if lines is not None else build_lines()
        self.lines_by_id: Dict[int, MetroLine] = {line.id: line for line in self.lines}
        self._check_board_integrity(transfer_station_id)

        self.seed = seed
        self.rng = random.Random(seed)
        self.rule_engine = RuleEngine(); self.round_manager = RoundManager(); self.deck_manager = DeckManager(self.rng)
        self.visualizer: Optional['GameScene'] = None

        self.round_state = RoundState()
        self.line_states: Dict[int, LineBuildState] = {}
        self.ownership = OwnershipTracker(transfer_station_id)
        self.round_results: List[RoundResult] = []
        self.final_result: Optional[FinalScore] = None
        self.player_name: str = ""
        self.game_phase: GamePhase = GamePhase.SETUP

    def _check_board_integrity(self, transfer_station_id: int):
        if len(self.station_index) == 0:
            raise StationDataError("No stations loaded; cannot start a game.")
        for line in self.lines:
            if line.start_station_id not in self.station_index:
                raise StationDataError(f"Start station {line.start_station_id} of {line.name} is not in the station data.")
        if len({line.start_station_id for line in self.lines}) != len(self.lines):
            raise StationDataError("Every line needs its own start station.")
        if transfer_station_id not in self.station_index:
            raise StationDataError(f"Transfer station {transfer_station_id} is not in the station data.")

    # --- Session lifecycle ---
    def start_game(self, player_name: str):
        self.reset_game()
        self.player_name = player_name
        self.game_phase = GamePhase.BUILDING
        self.round_manager.start_rounds(self)
        order = ", ".join(self.lines_by_id[lid].name for lid in self.round_state.order)
        print(f"\n--- Starting game for {player_name}. Line order: {order} ---")

    def reset_game(self):
        # A seeded game replays the same line order and draws every time
        self.rng.seed(self.seed)
        self.round_state = RoundState()
        self.deck_manager.clear()
        self.line_states.clear()
        self.ownership.clear()
        self.round_results = []
        self.final_result = None
        self.player_name = ""
        self.game_phase = GamePhase.SETUP

    def finish_game(self):
        self.final_result = compute_final_score(self.line_states.values(), self.round_results, self.station_index)
        self.game_phase = GamePhase.GAME_OVER
        self.round_state.current_card = None
        r = self.final_result
        print(f"--- Game finished. Final score: {r.total} (sum FP={r.sum_fp}, PP={r.pp}, P2={r.p2}, P3={r.p3}, P4={r.p4}) ---")
        if self.visualizer:
            self.visualizer.on_game_finished(self.final_result)

    # --- Queries ---
    @property
    def current_line(self) -> Optional[MetroLine]:
        rs = self.round_state
        if self.game_phase != GamePhase.BUILDING or not 0 <= rs.round_index < len(rs.order):
            return None
        return self.lines_by_id[rs.order[rs.round_index]]

    @property
    def current_card(self) -> Optional[Card]:
        return self.round_state.current_card

    @property
    def total_round_score(self) -> int:
        return sum(r.fp for r in self.round_results)

    @property
    def final_score(self) -> Optional[int]:
        """Total of the finished game, None while rounds remain."""
        return self.final_result.total if self.final_result else None

    def train_stations_visited(self) -> int:
        return count_train_stations_visited(self.line_states.values(), self.station_index)

    def get_line(self, line_id: int) -> MetroLine:
        if line_id not in self.lines_by_id:
            raise ValueError(f"Unknown line id: {line_id}")
        return self.lines_by_id[line_id]

    def get_line_state(self, line_id: int) -> Optional[LineBuildState]:
        return self.line_states.get(line_id)

    def get_owner(self, station_id: int) -> Optional[int]:
        return self.ownership.get_owner(station_id)

    # --- Build state ---
    def ensure_line_state(self, line_id: int) -> LineBuildState:
        if line_id not in self.line_states:
            line = self.get_line(line_id)
            self.line_states[line_id] = LineBuildState(line_id, line.start_station_id)
        return self.line_states[line_id]

    def add_segment(self, line_id: int, a: int, b: int):
        """Records an already validated segment and claims both stations."""
        line = self.get_line(line_id)
        self.ensure_line_state(line_id).add_segment(a, b)
        self.ownership.claim(a, line_id, line.start_station_id)
        self.ownership.claim(b, line_id, line.start_station_id)
        if self.visualizer:
            self.visualizer.on_segments_changed()

    # --- Commands ---
    def attempt_connection(self, from_id: int, to_id: int) -> bool:
        line = self.current_line
        rs = self.round_state
        if line is None:
            return False
        if rs.current_card is None or rs.build_used_for_card:
            print("--> Connection ignored: draw a card first.")
            return False

        is_valid, message = self.rule_engine.check_connection_validity(self, from_id, to_id)
        if not is_valid:
            print(f"--> Connection {from_id}->{to_id} rejected: {message}")
            return False

        self.add_segment(line.id, from_id, to_id)
        print(f"--> {line.name}: connected {from_id}->{to_id} with card {rs.current_card}.")
        self.round_manager.consume_build(self)
        return True

    def draw_card(self) -> bool:
        return self.round_manager.draw_card(self)

    def skip_card(self) -> bool:
        return self.round_manager.skip_card(self)

    def switch_card(self) -> bool:
        return self.round_manager.switch_card(self)

    def end_round(self) -> bool:
        return self.round_manager.end_round(self)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "player_name": self.player_name,
            "seed": self.seed,
            "game_phase": self.game_phase.name,
            "round": self.round_state.to_dict(),
            "line_states": {lid: ls.to_dict() for lid, ls in self.line_states.items()},
            "owners": self.ownership.to_dict(),
            "round_results": [r.to_dict() for r in self.round_results],
            "final_result": self.final_result.to_dict() if self.final_result else None,
        }

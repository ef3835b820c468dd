# game_logic/rule_engine.py
from __future__ import annotations
from typing import TYPE_CHECKING, Tuple, List, Optional

if TYPE_CHECKING:
    from .game import Game
    from .station import Station, Card

from .geometry import is_straight_or_diagonal, path_passes_through_station, segments_intersect


class RuleEngine:
    """A stateless service that contains all the connection validation logic for the game."""

    def station_matches_card(self, game: 'Game', target: 'Station', card: Optional['Card']) -> bool:
        if card is None:
            return False
        # The transfer station accepts any card symbol
        if target.id == game.ownership.transfer_station_id:
            return True
        if card.is_joker or target.is_wildcard:
            return True
        return target.symbol_type == card.symbol

    def is_legal_origin(self, game: 'Game', station_id: int) -> bool:
        line = game.current_line
        if line is None:
            return False
        line_state = game.get_line_state(line.id)
        if line_state is None or line_state.is_empty:
            return station_id == line.start_station_id
        return line_state.is_open_endpoint(station_id)

    def check_connection_validity(self, game: 'Game', from_id: int, to_id: int) -> Tuple[bool, str]:
        """
        Checks a proposed segment for the active line. Rules are evaluated in a
        fixed order and the first failure is reported. Nothing is mutated.
        """
        line = game.current_line
        if line is None:
            return False, "No line is being built."
        line_state = game.get_line_state(line.id)
        is_first = line_state is None or line_state.is_empty
        index = game.station_index

        a = index.get_station(from_id)
        b = index.get_station(to_id)
        if a is None or b is None:
            return False, "Unknown station."
        if from_id == to_id:
            return False, "Cannot connect a station to itself."

        for station_id in (from_id, to_id):
            if game.ownership.is_owned_by_other(station_id, line.id, line.start_station_id):
                return False, f"Station {station_id} belongs to another line."

        if not is_straight_or_diagonal(a, b):
            return False, "Stations are not on a straight or 45 degree line."

        if not self.is_legal_origin(game, from_id):
            if is_first:
                return False, f"The first segment must start at station {line.start_station_id}."
            return False, f"Station {from_id} is not an open end of the line."

        if not self.station_matches_card(game, b, game.current_card):
            return False, f"Station {to_id} ({b.symbol_type}) does not match the card."

        if path_passes_through_station(a, b, index):
            return False, "Segment passes through another station."

        for other in game.line_states.values():
            if other.has_segment(from_id, to_id):
                return False, "These stations are already connected."

        for other in game.line_states.values():
            for seg in other.segments:
                c = index.get_station(seg.a)
                d = index.get_station(seg.b)
                if not segments_intersect(a, b, c, d):
                    continue
                if not (seg.has_endpoint(from_id) or seg.has_endpoint(to_id)):
                    return False, f"Segment crosses {seg.a}-{seg.b}."

        if to_id == line.start_station_id or (line_state is not None and line_state.has_visited(to_id)):
            return False, f"Station {to_id} is already on this line."

        return True, "Connection is valid."

    def can_connect(self, game: 'Game', from_id: int, to_id: int) -> bool:
        return self.check_connection_validity(game, from_id, to_id)[0]

    def find_legal_targets(self, game: 'Game', from_id: int) -> List[int]:
        """Every station the active line could reach from ``from_id`` with the current card."""
        return [s.id for s in game.station_index if self.can_connect(game, from_id, s.id)]

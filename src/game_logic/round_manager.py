# game_logic/round_manager.py
from __future__ import annotations
from typing import TYPE_CHECKING, List, Dict, Optional, Any

if TYPE_CHECKING:
    from .game import Game

from .enums import GamePhase, RoundPhase, PlatformType
from .station import Card
from .scoring import compute_round_score
from common.constants import MAX_DRAWS_PER_ROUND, PLATFORM_TYPE_LIMIT


class RoundState:
    """Card and counter state for the round currently being played."""
    def __init__(self):
        self.order: List[int] = []
        self.round_index: int = 0
        self.reset_counters()

    def reset_counters(self):
        self.draws_this_round: int = 0
        self.platform_counts: Dict[PlatformType, int] = {ptype: 0 for ptype in PlatformType}
        self.current_card: Optional[Card] = None
        self.build_used_for_card: bool = False
        self.round_complete: bool = False
        self.switch_used_this_round: bool = False

    @property
    def center_count(self) -> int:
        return self.platform_counts[PlatformType.CENTER]

    @property
    def side_count(self) -> int:
        return self.platform_counts[PlatformType.SIDE]

    @property
    def phase(self) -> RoundPhase:
        if self.round_complete:
            if self.current_card is not None and not self.build_used_for_card:
                return RoundPhase.ROUND_ENDING
            return RoundPhase.ROUND_ENDED
        if self.current_card is None:
            return RoundPhase.AWAITING_DRAW
        if self.build_used_for_card:
            return RoundPhase.BUILD_USED
        return RoundPhase.CARD_ACTIVE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "order": list(self.order),
            "round_index": self.round_index,
            "draws_this_round": self.draws_this_round,
            "center_count": self.center_count,
            "side_count": self.side_count,
            "current_card": str(self.current_card) if self.current_card else None,
            "build_used_for_card": self.build_used_for_card,
            "round_complete": self.round_complete,
            "switch_used_this_round": self.switch_used_this_round,
            "phase": self.phase.name,
        }


class RoundManager:
    """
    Manages the flow of rounds: drawing, switching and skipping cards,
    detecting the end of a round, scoring it and moving to the next line.
    """
    def start_rounds(self, game: 'Game'):
        rs = game.round_state
        rs.order = [line.id for line in game.lines]
        game.rng.shuffle(rs.order)
        rs.round_index = 0
        rs.reset_counters()
        game.deck_manager.new_deck()

    def draw_card(self, game: 'Game') -> bool:
        rs = game.round_state
        if game.game_phase != GamePhase.BUILDING or rs.round_complete:
            return False

        card = game.deck_manager.draw()
        rs.current_card = card
        rs.draws_this_round += 1
        rs.platform_counts[card.platform_type] += 1
        rs.build_used_for_card = False
        self.update_round_ending_state(game)
        return True

    def skip_card(self, game: 'Game') -> bool:
        """Drawing without building simply discards the unused card."""
        return self.draw_card(game)

    def switch_card(self, game: 'Game') -> bool:
        """Replaces the active, unused card once per round. Counters are untouched."""
        rs = game.round_state
        if game.game_phase != GamePhase.BUILDING or rs.round_complete:
            return False
        if rs.current_card is None or rs.build_used_for_card or rs.switch_used_this_round:
            return False

        rs.current_card = game.deck_manager.draw()
        rs.switch_used_this_round = True
        return True

    def update_round_ending_state(self, game: 'Game'):
        rs = game.round_state
        reached_type_limit = any(count >= PLATFORM_TYPE_LIMIT for count in rs.platform_counts.values())
        reached_max_cards = rs.draws_this_round >= MAX_DRAWS_PER_ROUND
        was_complete = rs.round_complete
        rs.round_complete = reached_type_limit or reached_max_cards
        if rs.round_complete and not was_complete:
            print(f"--- Round {rs.round_index + 1} complete after {rs.draws_this_round} draws "
                  f"(center {rs.center_count}, side {rs.side_count}). ---")
            if game.visualizer:
                game.visualizer.on_round_ended()

    def consume_build(self, game: 'Game'):
        """Marks the active card as used; a build on the last card closes the round."""
        rs = game.round_state
        rs.build_used_for_card = True
        if rs.round_complete:
            self.next_round(game)

    def end_round(self, game: 'Game') -> bool:
        if game.game_phase != GamePhase.BUILDING or not game.round_state.round_complete:
            return False
        self.next_round(game)
        return True

    def next_round(self, game: 'Game'):
        rs = game.round_state
        line = game.current_line
        result = compute_round_score(game.ensure_line_state(line.id), game.station_index)
        game.round_results.append(result)
        print(f"  {line.name} scored FP={result.fp} (PK={result.pk}, PM={result.pm}, PD={result.pd})")

        rs.round_index += 1
        if rs.round_index >= len(rs.order):
            game.finish_game()
            return

        game.deck_manager.new_deck()
        rs.reset_counters()
        print(f"\n--- Starting Round {rs.round_index + 1}: line {game.current_line.name} ---")

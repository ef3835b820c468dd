# src/states/game_states.py
from __future__ import annotations
from typing import Optional, List, TYPE_CHECKING
import pygame

from common.rendering_utils import draw_text, get_font
from common.score_store import format_duration

if TYPE_CHECKING:
    from game_logic.game import Game
    from game_logic.scoring import FinalScore
    from scenes.game_scene import GameScene

class GameState:
    """Base class for the input modes of the game scene."""
    def __init__(self, scene: 'GameScene'):
        self.scene = scene
        self.game: 'Game' = scene.game
        self.message: str = ""

    def handle_event(self, event) -> bool:
        """
        Handles a Pygame event.
        Returns True if the event was handled by this state, False otherwise.
        """
        return False

    def update(self, dt):
        pass

    def draw(self, screen):
        raise NotImplementedError

    def set_message(self, msg: str):
        self.message = msg


class BuildingState(GameState):
    """Click an origin station, then a target station, to try a connection."""
    def __init__(self, scene):
        super().__init__(scene)
        self.selected_station_id: Optional[int] = None
        self.legal_targets: List[int] = []
        self.message = "Draw a card to begin."

    def clear_selection(self):
        self.selected_station_id = None
        self.legal_targets = []

    def handle_event(self, event) -> bool:
        if event.type != pygame.MOUSEBUTTONDOWN or event.button != 1:
            return False
        station_id = self.scene.screen_to_station(event.pos)
        if station_id is None:
            return False

        if self.selected_station_id is None:
            self._select_origin(station_id)
        else:
            self._attempt_target(station_id)
        return True

    def _select_origin(self, station_id: int):
        if not self.game.rule_engine.is_legal_origin(self.game, station_id):
            self.set_message("Start from the line's start station or an open end.")
            return
        self.selected_station_id = station_id
        self.legal_targets = self.game.rule_engine.find_legal_targets(self.game, station_id)
        if self.game.current_card is None:
            self.set_message("Draw a card first.")
        elif not self.legal_targets:
            self.set_message(f"No legal target from station {station_id} with this card.")
        else:
            self.set_message(f"Station {station_id} selected. Pick a target.")

    def _attempt_target(self, station_id: int):
        from_id = self.selected_station_id
        self.clear_selection()
        rs = self.game.round_state
        if rs.current_card is None or rs.build_used_for_card:
            self.set_message("Draw a card first.")
            return
        if self.game.attempt_connection(from_id, station_id):
            self.set_message(f"Connected {from_id} to {station_id}.")
            return
        _, reason = self.game.rule_engine.check_connection_validity(self.game, from_id, station_id)
        self.set_message(reason)
        self.scene.shake_card()

    def draw(self, screen):
        """Selection and hint markers; the scene draws everything else."""
        if self.selected_station_id is None:
            return
        radius = self.scene.station_radius
        for target_id in self.legal_targets:
            center = self.scene.station_center(target_id)
            if center:
                s = pygame.Surface((radius * 4, radius * 4), pygame.SRCALPHA)
                pygame.draw.circle(s, self.scene.hint_color, (radius * 2, radius * 2), radius * 2)
                screen.blit(s, (center[0] - radius * 2, center[1] - radius * 2))
        center = self.scene.station_center(self.selected_station_id)
        if center:
            pygame.draw.circle(screen, self.scene.selected_color, center, radius + 5, 3)


class GameOverState(GameState):
    def __init__(self, scene, final_score: 'FinalScore'):
        super().__init__(scene)
        self.final_score = final_score
        self.message = f"Game finished. Final score: {final_score.total}"

    def draw(self, screen):
        theme = self.scene.theme
        colors = theme["colors"]
        rect = self.scene.board_rect.inflate(-60, -60)
        s = pygame.Surface(rect.size, pygame.SRCALPHA); s.fill((10, 14, 28, 225)); screen.blit(s, rect.topleft)
        pygame.draw.rect(screen, colors["panel_border"], rect, 2, border_radius=10)

        x, y = rect.x + 24, rect.y + 24
        r = self.final_score
        draw_text(screen, f"Final score: {r.total}", x, y, colors["text_light"], size=theme["font"]["title_size"] - 12)
        y += 56
        draw_text(screen, f"Player: {self.game.player_name}   Time: {format_duration(self.scene.elapsed_seconds)}", x, y, colors["text_muted"])
        y += 40
        for result in self.game.round_results:
            line = self.game.get_line(result.line_id)
            draw_text(screen, f"{line.name}: FP={result.fp} (PK={result.pk}, PM={result.pm}, PD={result.pd})", x, y, colors["text_light"])
            y += 30
        y += 10
        draw_text(screen, f"Train stations (PP): {r.pp}  Junctions P2={r.p2}, P3={r.p3}, P4={r.p4}", x, y, colors["text_light"])
        y += 40
        small = theme["font"]["small_size"]
        for note in ("FP - round score, PK - districts covered,",
                     "PM - most stations in one district, PD - Danube crossings"):
            draw_text(screen, note, x, y, colors["text_muted"], size=small)
            y += get_font(small).get_linesize()

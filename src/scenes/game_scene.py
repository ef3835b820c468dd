import math
import pygame
from typing import Optional, Dict, Tuple

from scenes.scene import Scene
from game_logic.game import Game
from game_logic.enums import GamePhase
from game_logic.scoring import FinalScore
from states.game_states import GameState, BuildingState, GameOverState
from ui.components import Button
from common.rendering_utils import draw_text, hex_to_rgb, with_alpha
from common.score_store import format_duration
import common.constants as C

CARD_SHAKE_SECONDS = 0.3

class GameScene(Scene):
    """
    Draws the board and HUD and turns clicks into engine commands. Also acts as
    the game's visualizer: the engine calls on_segments_changed, on_round_ended
    and on_game_finished on it.
    """
    def __init__(self, scene_manager, game_instance: Game):
        super().__init__(scene_manager)
        self.theme = scene_manager.theme
        self.game = game_instance
        self.screen = scene_manager.screen
        self.elapsed_seconds: float = 0.0
        self.card_shake: float = 0.0
        self.hint_color = C.COLOR_HINT
        self.selected_color = C.COLOR_SELECTED

        self._compute_layout(self.screen.get_size())
        self.buttons: Dict[str, Button] = {}
        self._create_buttons()

        self.current_state: GameState = BuildingState(self)
        self.game.visualizer = self

    # --- Layout ---
    def _compute_layout(self, size: Tuple[int, int]):
        width, height = size
        board_size = min(height - 2 * C.BOARD_MARGIN, width - C.HUD_WIDTH - 3 * C.BOARD_MARGIN)
        self.board_rect = pygame.Rect(C.BOARD_MARGIN, C.BOARD_MARGIN, board_size, board_size)
        self.cell_size = (board_size - 2 * C.BOARD_PAD) / C.GRID_SIZE
        self.station_radius = max(6, int(self.cell_size * C.STATION_RADIUS_RATIO))
        self.hud_rect = pygame.Rect(self.board_rect.right + C.BOARD_MARGIN, C.BOARD_MARGIN,
                                    width - self.board_rect.right - 2 * C.BOARD_MARGIN, board_size)

    def _create_buttons(self):
        actions = [("draw", "Draw", self.game.draw_card), ("skip", "Skip", self.game.skip_card),
                   ("switch", "Switch card", self.game.switch_card), ("end", "End round", self.game.end_round),
                   ("menu", "Main menu", self.scene_manager.return_to_menu)]
        y = self.hud_rect.bottom - len(actions) * (C.BUTTON_HEIGHT + C.BUTTON_SPACING)
        for key, label, callback in actions:
            rect = pygame.Rect(self.hud_rect.x + 16, y, self.hud_rect.width - 32, C.BUTTON_HEIGHT)
            self.buttons[key] = Button(label, rect, self.theme, callback)
            y += C.BUTTON_HEIGHT + C.BUTTON_SPACING

    def grid_to_screen(self, x: int, y: int) -> Tuple[int, int]:
        return (int(self.board_rect.x + C.BOARD_PAD + (x + 0.5) * self.cell_size),
                int(self.board_rect.y + C.BOARD_PAD + (y + 0.5) * self.cell_size))

    def station_center(self, station_id: int) -> Optional[Tuple[int, int]]:
        station = self.game.station_index.get_station(station_id)
        return self.grid_to_screen(station.x, station.y) if station else None

    def screen_to_station(self, pos: Tuple[int, int]) -> Optional[int]:
        if not self.board_rect.collidepoint(pos):
            return None
        gx = int((pos[0] - self.board_rect.x - C.BOARD_PAD) // self.cell_size)
        gy = int((pos[1] - self.board_rect.y - C.BOARD_PAD) // self.cell_size)
        station = self.game.station_index.get_station_at(gx, gy)
        if station is None:
            return None
        cx, cy = self.grid_to_screen(station.x, station.y)
        return station.id if math.hypot(pos[0] - cx, pos[1] - cy) <= self.station_radius * 1.4 else None

    # --- Visualizer callbacks ---
    def on_game_started(self):
        self.elapsed_seconds = 0.0
        self.current_state = BuildingState(self)

    def on_segments_changed(self):
        if isinstance(self.current_state, BuildingState):
            self.current_state.clear_selection()

    def on_round_ended(self):
        self.current_state.set_message("Round over: build with this card or press End round.")

    def on_game_finished(self, final_score: FinalScore):
        self.current_state = GameOverState(self, final_score)
        self.scene_manager.record_score(self.game.player_name, final_score.total, int(self.elapsed_seconds))

    def shake_card(self):
        self.card_shake = CARD_SHAKE_SECONDS

    # --- Scene interface ---
    def handle_events(self, events):
        for event in events:
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                if isinstance(self.current_state, BuildingState):
                    self.current_state.clear_selection()
                continue
            handled = any(button.handle_event(event) for button in self.buttons.values())
            if not handled and self.current_state:
                self.current_state.handle_event(event)

    def update(self, dt: float):
        if self.game.game_phase == GamePhase.BUILDING:
            self.elapsed_seconds += dt
        self.card_shake = max(0.0, self.card_shake - dt)

        rs = self.game.round_state
        building = self.game.game_phase == GamePhase.BUILDING
        self.buttons["draw"].enabled = building and not rs.round_complete
        self.buttons["skip"].enabled = building and not rs.round_complete
        self.buttons["switch"].enabled = (building and not rs.round_complete and rs.current_card is not None
                                          and not rs.build_used_for_card and not rs.switch_used_this_round)
        self.buttons["end"].enabled = building and rs.round_complete

    def draw(self, screen):
        screen.fill(self.theme["colors"]["background"])
        self.draw_board(screen)
        self.draw_river(screen)
        self.draw_segments(screen)
        self.draw_stations(screen)
        if self.current_state:
            self.current_state.draw(screen)
        self.draw_hud(screen)

    # --- Drawing ---
    def draw_board(self, screen):
        colors = self.theme["colors"]
        pygame.draw.rect(screen, colors["board_bg"], self.board_rect, border_radius=8)
        inner = self.board_rect.inflate(-2 * C.BOARD_PAD, -2 * C.BOARD_PAD)
        for i in range(C.GRID_SIZE + 1):
            offset = int(i * self.cell_size)
            pygame.draw.line(screen, colors["grid_lines"], (inner.x + offset, inner.y), (inner.x + offset, inner.bottom))
            pygame.draw.line(screen, colors["grid_lines"], (inner.x, inner.y + offset), (inner.right, inner.y + offset))

    def draw_river(self, screen):
        s = pygame.Surface(self.board_rect.size, pygame.SRCALPHA)
        w, h = self.board_rect.size
        points = [(int(fx * w), int(fy * h)) for fx, fy in C.RIVER_POINTS]
        pygame.draw.lines(s, C.COLOR_RIVER, False, points, C.RIVER_WIDTH)
        screen.blit(s, self.board_rect.topleft)

    def draw_segments(self, screen):
        width = max(3, int(self.cell_size * C.SEGMENT_WIDTH_RATIO))
        for line_id, line_state in self.game.line_states.items():
            color = hex_to_rgb(self.game.get_line(line_id).color)
            for seg in line_state.segments:
                a, b = self.station_center(seg.a), self.station_center(seg.b)
                if a and b:
                    pygame.draw.line(screen, color, a, b, width)
                    pygame.draw.circle(screen, color, a, width // 2)
                    pygame.draw.circle(screen, color, b, width // 2)

    def draw_stations(self, screen):
        colors = self.theme["colors"]
        line = self.game.current_line
        for station in self.game.station_index:
            center = self.grid_to_screen(station.x, station.y)
            fill = colors["joker_bg"] if station.is_wildcard else colors["station_bg"]
            pygame.draw.circle(screen, fill, center, self.station_radius)
            if station.is_train_hub:
                pygame.draw.circle(screen, colors["hub_ring"], center, self.station_radius + 3, 3)
            if line and station.id == line.start_station_id:
                pygame.draw.circle(screen, hex_to_rgb(line.color), center, self.station_radius, 4)
            draw_text(screen, station.symbol_type, center[0], center[1], colors["station_fg"],
                      size=int(self.station_radius * 1.5), center_x=True, center_y=True)

    def draw_hud(self, screen):
        colors = self.theme["colors"]
        small = self.theme["font"]["small_size"]
        rect = self.hud_rect
        pygame.draw.rect(screen, colors["panel_bg"], rect, border_radius=8)
        pygame.draw.rect(screen, colors["panel_border"], rect, 1, border_radius=8)

        x, y = rect.x + 16, rect.y + 14
        draw_text(screen, f"Player: {self.game.player_name}", x, y, colors["text_light"])
        draw_text(screen, format_duration(int(self.elapsed_seconds)), rect.right - 16 - 60, y, colors["text_muted"])
        y += 34

        # Round order pills
        rs = self.game.round_state
        pill_w = (rect.width - 32 - 3 * 6) // 4
        for i, line_id in enumerate(rs.order):
            line = self.game.get_line(line_id)
            active = i == rs.round_index and self.game.game_phase == GamePhase.BUILDING
            pill = pygame.Rect(x + i * (pill_w + 6), y, pill_w, 28)
            s = pygame.Surface(pill.size, pygame.SRCALPHA)
            s.fill(with_alpha(hex_to_rgb(line.color), 0.35 if active else 0.08))
            screen.blit(s, pill.topleft)
            pygame.draw.rect(screen, hex_to_rgb(line.color), pill, 1, border_radius=6)
            draw_text(screen, line.name, pill.centerx, pill.centery, colors["text_light"] if active else colors["text_muted"],
                      size=small, center_x=True, center_y=True)
        y += 44

        # Current card
        card = self.game.current_card
        offset = int(math.sin(self.card_shake * 40) * 4) if self.card_shake else 0
        card_rect = pygame.Rect(x, y + offset, 90, 120)
        pygame.draw.rect(screen, colors["station_bg"], card_rect, border_radius=10)
        label = "-" if card is None else ("*" if card.is_joker else card.symbol)
        draw_text(screen, label, card_rect.centerx, card_rect.centery, colors["station_fg"], size=64, center_x=True, center_y=True)
        if card is not None:
            draw_text(screen, card.platform_type.value, card_rect.centerx, card_rect.bottom - 16, colors["text_muted"],
                      size=small, center_x=True, center_y=True)

        info_x = card_rect.right + 16
        info = [f"Draws: {rs.draws_this_round}/{C.MAX_DRAWS_PER_ROUND}",
                f"Center: {rs.center_count}  Side: {rs.side_count}",
                f"Round score: {self.game.round_results[-1].fp if self.game.round_results else 0}",
                f"Total: {self.game.final_result.total if self.game.final_result else self.game.total_round_score}",
                f"Train stations (PP): {self.game.train_stations_visited()}/{len(self.game.station_index.train_station_ids)}"]
        for i, text in enumerate(info):
            draw_text(screen, text, info_x, y + i * 24, colors["text_light"], size=small)
        y += 140

        if self.current_state and self.current_state.message:
            draw_text(screen, self.current_state.message, x, y, colors["text_muted"], size=small)

        for button in self.buttons.values():
            button.draw(screen)

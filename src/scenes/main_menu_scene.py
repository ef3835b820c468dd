import pygame

from scenes.scene import Scene
from ui.components import Button, TextInput
from common.rendering_utils import draw_text
from common.score_store import format_duration

LEADERBOARD_SIZE = 10

class MainMenuScene(Scene):
    def __init__(self, scene_manager):
        super().__init__(scene_manager)
        self.theme = scene_manager.theme
        self.scores = []

        width, height = scene_manager.screen.get_size()
        column_x = width // 2 - 320
        self.name_input = TextInput(pygame.Rect(column_x, 220, 300, 44), self.theme, on_submit=self.start_game)
        self.start_button = Button("Start", pygame.Rect(column_x, 280, 300, 44), self.theme, self.start_game)
        self.quit_button = Button("Quit", pygame.Rect(column_x, 336, 300, 44), self.theme, self.scene_manager.quit)
        self.leaderboard_rect = pygame.Rect(width // 2 + 20, 220, 300, min(height - 260, 420))
        self.refresh_scores()

    def refresh_scores(self):
        self.scores = self.scene_manager.score_store.get_leaderboard()[:LEADERBOARD_SIZE]

    def start_game(self):
        name = self.name_input.text.strip()
        if not name:
            self.name_input.is_invalid = True
            self.name_input.is_active = True
            return
        self.scene_manager.start_new_game(name)

    def handle_events(self, events):
        for event in events:
            self.name_input.handle_event(event)
            self.start_button.handle_event(event)
            self.quit_button.handle_event(event)

    def update(self, dt):
        pass

    def draw(self, screen):
        screen.fill(self.theme["colors"]["background"])
        colors = self.theme["colors"]
        draw_text(screen, "Budapest Metro", screen.get_width() // 2, 110, colors["text_light"],
                  size=self.theme["font"]["title_size"], center_x=True)
        draw_text(screen, "Build four metro lines, one round each.", screen.get_width() // 2, 165,
                  colors["text_muted"], size=self.theme["font"]["small_size"], center_x=True)

        self.name_input.draw(screen)
        self.start_button.draw(screen)
        self.quit_button.draw(screen)

        rect = self.leaderboard_rect
        pygame.draw.rect(screen, colors["panel_bg"], rect, border_radius=8)
        pygame.draw.rect(screen, colors["panel_border"], rect, 1, border_radius=8)
        draw_text(screen, "Previous games", rect.x + 14, rect.y + 12, colors["text_light"])
        if not self.scores:
            draw_text(screen, "No games yet.", rect.x + 14, rect.y + 48, colors["text_muted"], size=self.theme["font"]["small_size"])
        for i, entry in enumerate(self.scores):
            line = f"{entry.get('name', 'Player')}: {entry.get('score', 0)} pts - {format_duration(entry.get('seconds', 0))}"
            draw_text(screen, line, rect.x + 14, rect.y + 48 + i * 26, colors["text_light"], size=self.theme["font"]["small_size"])

import os
import pygame
import sys
import json

from typing import Dict, Any, Optional
from scenes.scene import Scene
from scenes.main_menu_scene import MainMenuScene
from scenes.game_scene import GameScene
from game_logic.game import Game
from game_logic.station_index import StationIndex
from common.score_store import ScoreStore
from common import constants as C

class App:
    def __init__(self, root_dir: str, station_index: StationIndex, seed: Optional[int] = None):
        pygame.init()
        self.root_dir = root_dir
        self.settings_path = os.path.join(self.root_dir, C.SETTINGS_FILENAME)
        self.settings = self._load_settings()
        initial_resolution = tuple(self.settings.get("resolution", C.DEFAULT_SETTINGS["resolution"]))
        self.screen = pygame.display.set_mode(initial_resolution)
        pygame.display.set_caption("Budapest Metro")
        self.clock = pygame.time.Clock()
        theme_path = os.path.join(self.root_dir, 'src', 'assets', 'themes', 'ui_theme_dark.json')
        with open(theme_path, 'r') as f: self.theme = json.load(f)

        self.score_store = ScoreStore(os.path.join(self.root_dir, C.SCORES_FILENAME))
        self.game_instance = Game(station_index, seed=seed)
        self.scenes: Dict[str, Scene] = {
            "MAIN_MENU": MainMenuScene(self),
            "GAME": GameScene(self, self.game_instance),
        }
        self.current_scene = self.scenes["MAIN_MENU"]
        self.running = True

    def _load_settings(self) -> Dict[str, Any]:
        """Loads settings from settings.json, creating it if it doesn't exist."""
        try:
            with open(self.settings_path, 'r') as f:
                return json.load(f)
        except (FileNotFoundError, json.JSONDecodeError):
            default_settings = dict(C.DEFAULT_SETTINGS)
            self.save_settings(default_settings)
            return default_settings

    def save_settings(self, settings: Optional[Dict[str, Any]] = None):
        """Saves the current settings to settings.json."""
        try:
            with open(self.settings_path, 'w') as f:
                json.dump(settings if settings is not None else self.settings, f, indent=2)
        except OSError as e:
            print(f"WARNING: Could not write settings to '{self.settings_path}': {e}")

    def start_new_game(self, player_name: str):
        self.game_instance.start_game(player_name)
        self.scenes["GAME"].on_game_started()
        self.go_to_scene("GAME")

    def return_to_menu(self):
        self.game_instance.reset_game()
        self.scenes["MAIN_MENU"].refresh_scores()
        self.go_to_scene("MAIN_MENU")

    def record_score(self, player_name: str, score: int, seconds: int):
        record = self.score_store.add_score(player_name, score, seconds)
        print(f"Saved score for {record['name']}: {record['score']} in {record['seconds']}s")

    def go_to_scene(self, scene_name: str):
        if scene_name in self.scenes:
            self.current_scene = self.scenes[scene_name]
            print(f"Switching to scene: {scene_name}")
        else:
            print(f"Warning: Scene '{scene_name}' not found.")

    def quit(self):
        self.running = False

    def run(self):
        while self.running:
            dt = self.clock.tick(C.FPS) / 1000.0
            events = pygame.event.get()

            for event in events:
                if event.type == pygame.QUIT:
                    self.running = False

            self.current_scene.handle_events(events)
            self.current_scene.update(dt)
            self.current_scene.draw(self.screen)

            pygame.display.flip()
        pygame.quit()
        sys.exit()

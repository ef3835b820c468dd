# common/constants.py
# -*- coding: utf-8 -*-
from typing import List, Dict, Tuple, Any

# --- Grid Dimensions ---
GRID_SIZE: int = 10

# --- Stations ---
STATION_SYMBOLS: Tuple[str, ...] = ("A", "B", "C", "D")
STATION_WILDCARD: str = "?"
RIVER_SIDES: Tuple[str, ...] = ("buda", "pest")

# Deák tér: interchange station shared by every line and accepting any card symbol
STATION_TRANSFER_EXCEPTION: int = 30

# --- Lines ---
LINE_DEFINITIONS: List[Dict[str, Any]] = [
    {"id": 0, "name": "M1", "color": "#FFD800", "start": 19},
    {"id": 1, "name": "M2", "color": "#E41F18", "start": 28},
    {"id": 2, "name": "M3", "color": "#005CA5", "start": 3},
    {"id": 3, "name": "M4", "color": "#4CA22F", "start": 39},
]

# --- Cards & Rounds ---
DECK_SYMBOLS: Tuple[str, ...] = ("A", "B", "C", "D", "Joker")
JOKER_SYMBOL: str = "Joker"
PLATFORM_TYPES: Tuple[str, ...] = ("center", "side")
MAX_DRAWS_PER_ROUND: int = 8
PLATFORM_TYPE_LIMIT: int = 5

# --- Scoring ---
P2_WEIGHT: int = 2; P3_WEIGHT: int = 5; P4_WEIGHT: int = 9

# --- Files ---
STATIONS_FILENAME: str = "budapest_stations.json"
SCORES_FILENAME: str = "scores.json"
SETTINGS_FILENAME: str = "settings.json"
DEFAULT_SETTINGS: Dict[str, Any] = {"resolution": [1280, 800]}

# --- Pygame/Visual Layout Constants ---
FPS: int = 60
BOARD_MARGIN: int = 24
BOARD_PAD: int = 12
HUD_WIDTH: int = 380
BUTTON_HEIGHT: int = 40; BUTTON_SPACING: int = 10
STATION_RADIUS_RATIO: float = 0.32
SEGMENT_WIDTH_RATIO: float = 0.12
RIVER_WIDTH: int = 14
# River polyline in board-relative fractions (x, y)
RIVER_POINTS: Tuple[Tuple[float, float], ...] = ((0.52, 0.0), (0.46, 0.35), (0.55, 1.0))
DEFAULT_FONT_SIZE: int = 24

# --- Colors ---
COLOR_WHITE: Tuple[int, int, int] = (255, 255, 255); COLOR_BLACK: Tuple[int, int, int] = (0, 0, 0)
COLOR_UI_TEXT: Tuple[int, int, int] = (226, 232, 240); COLOR_MUTED_TEXT: Tuple[int, int, int] = (127, 143, 164)
COLOR_RIVER: Tuple[int, int, int, int] = (116, 192, 252, 115)
COLOR_HINT: Tuple[int, int, int, int] = (250, 204, 21, 120)
COLOR_SELECTED: Tuple[int, int, int] = (0, 150, 255)
COLOR_ERROR: Tuple[int, int, int] = (239, 68, 68)

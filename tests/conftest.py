import os
import sys
import pytest

# Ensure src (containing the top-level packages) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
SRC_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..', 'src'))
if SRC_ROOT not in sys.path:
    sys.path.insert(0, SRC_ROOT)

from levels.station_data import StationDataset
from game_logic.game import Game
from game_logic.station import Card, build_lines
from game_logic.enums import PlatformType

TRANSFER_ID = 5

# Small board: four line starts down the left column, the transfer station at (2,2)
BOARD_RECORDS = [
    {"id": 0, "x": 0, "y": 0, "type": "A", "side": "buda", "district": 1},
    {"id": 1, "x": 2, "y": 0, "type": "B", "side": "buda", "district": 1},
    {"id": 2, "x": 4, "y": 0, "type": "C", "side": "buda", "district": 2},
    {"id": 3, "x": 6, "y": 0, "type": "D", "side": "pest", "district": 3, "train": True},
    {"id": 4, "x": 0, "y": 2, "type": "B", "side": "buda", "district": 1},
    {"id": 5, "x": 2, "y": 2, "type": "?"},
    {"id": 6, "x": 4, "y": 2, "type": "A", "side": "buda", "district": 2},
    {"id": 7, "x": 6, "y": 2, "type": "C", "side": "pest", "district": 3},
    {"id": 8, "x": 0, "y": 4, "type": "C", "side": "buda", "district": 1},
    {"id": 9, "x": 2, "y": 4, "type": "D", "side": "buda", "district": 2, "train": True},
    {"id": 10, "x": 4, "y": 4, "type": "A", "side": "pest", "district": 3},
    {"id": 11, "x": 0, "y": 6, "type": "D", "side": "buda", "district": 4},
    {"id": 12, "x": 9, "y": 9, "type": "A", "side": "pest", "district": 4},
]

LINE_RECORDS = [
    {"id": 1, "name": "M1", "color": "#FFD800", "start": 0},
    {"id": 2, "name": "M2", "color": "#E41F18", "start": 4},
    {"id": 3, "name": "M3", "color": "#005CA5", "start": 8},
    {"id": 4, "name": "M4", "color": "#4CA22F", "start": 11},
]


@pytest.fixture()
def station_index():
    return StationDataset.from_records(BOARD_RECORDS).build_index()


@pytest.fixture()
def game(station_index):
    new_game = Game(station_index, seed=1234, lines=build_lines(LINE_RECORDS), transfer_station_id=TRANSFER_ID)
    new_game.start_game("Tester")
    return new_game


def play_line(game, line_id):
    """Puts ``line_id`` first in the round order so it is the line being built."""
    rs = game.round_state
    rs.order = [line_id] + [lid for lid in rs.order if lid != line_id]
    rs.round_index = 0


def give_card(game, symbol, platform_type=PlatformType.CENTER):
    """Hands the player an unused card without touching the draw counters."""
    rs = game.round_state
    rs.current_card = Card(platform_type, symbol)
    rs.build_used_for_card = False


def build(game, line_id, a, b, symbol="Joker"):
    play_line(game, line_id)
    give_card(game, symbol)
    assert game.attempt_connection(a, b), game.rule_engine.check_connection_validity(game, a, b)[1]

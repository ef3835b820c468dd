# game_logic/deck_manager.py
from __future__ import annotations
from typing import List
import random

from .enums import PlatformType
from .station import Card
from common import constants as C


def build_deck(rng: random.Random) -> List[Card]:
    """One card per (platform type, symbol) pair, shuffled."""
    deck = [Card(PlatformType.from_str(ptype), sym) for ptype in C.PLATFORM_TYPES for sym in C.DECK_SYMBOLS]
    rng.shuffle(deck)
    return deck


class DeckManager:
    """
    Owns the round's deck. Cards are taken from the end of the list; an empty
    deck is replaced by a fresh shuffled one before the next card is taken.
    """
    def __init__(self, rng: random.Random):
        self.rng = rng
        self.deck: List[Card] = []
        self.decks_built: int = 0

    def new_deck(self):
        self.deck = build_deck(self.rng)
        self.decks_built += 1

    def draw(self) -> Card:
        if len(self.deck) == 0:
            self.new_deck()
        return self.deck.pop()

    def clear(self):
        self.deck = []
        self.decks_built = 0

    @property
    def remaining(self) -> int:
        return len(self.deck)


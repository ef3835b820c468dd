from enum import Enum, auto

class GamePhase(Enum):
    SETUP = auto()
    BUILDING = auto()
    GAME_OVER = auto()

class RoundPhase(Enum):
    AWAITING_DRAW = auto()
    CARD_ACTIVE = auto()
    BUILD_USED = auto()
    ROUND_ENDING = auto() # Limit reached, the current card can still be built with
    ROUND_ENDED = auto()

class PlatformType(Enum):
    CENTER = "center"
    SIDE = "side"

    @staticmethod
    def from_str(value: str) -> 'PlatformType':
        try: return PlatformType(value.lower())
        except ValueError: raise ValueError(f"Invalid platform type: '{value}'")

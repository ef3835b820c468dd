# rendering_utils.py
import pygame
from typing import Tuple
import common.constants as C


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """'#E41F18' or 'E41' -> (228, 31, 24)."""
    h = hex_color.lstrip("#")
    if len(h) == 3:
        h = "".join(ch * 2 for ch in h)
    value = int(h, 16)
    return (value >> 16) & 255, (value >> 8) & 255, value & 255


def with_alpha(color: Tuple[int, int, int], alpha: float) -> Tuple[int, int, int, int]:
    return color[0], color[1], color[2], int(255 * alpha)


# Centralized font management
_font_cache = {}
def get_font(size: int) -> pygame.font.Font:
    """Gets a font from the cache or creates it, with a fallback."""
    if size not in _font_cache:
        try:
            _font_cache[size] = pygame.font.SysFont(None, size)
        except Exception:
            _font_cache[size] = pygame.font.Font(None, size)
    return _font_cache[size]

def draw_text(surface, text, x, y, color=C.COLOR_UI_TEXT, size=C.DEFAULT_FONT_SIZE, center_x=False, center_y=False):
    """A robust text drawing function that can also center text."""
    try:
        font_to_use = get_font(size)
        text_surface = font_to_use.render(text, True, color)
        rect = text_surface.get_rect()
        draw_pos = [x, y]
        if center_x:
            draw_pos[0] = x - rect.width // 2
        if center_y:
            draw_pos[1] = y - rect.height // 2

        surface.blit(text_surface, draw_pos)
        return rect.height
    except pygame.error as e:
        print(f"Error rendering text '{text}': {e}")
        return 0

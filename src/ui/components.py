# ui/components.py
import pygame
from common.rendering_utils import get_font

class Button:
    def __init__(self, text, rect, theme, callback):
        self.rect = rect
        self.text = text
        self.theme = theme
        self.callback = callback

        self.font = get_font(self.theme["font"]["body_size"])
        self.is_hovered = False
        self.is_pressed = False
        self.enabled = True

        self.base_color = self.theme["colors"]["accent"]
        self.hover_color = self.theme["colors"]["accent_hover"]
        self.disabled_color = self.theme["colors"]["disabled"]
        self.text_color = self.theme["colors"]["text_dark"]

    def handle_event(self, event):
        if event.type == pygame.MOUSEMOTION:
            self.is_hovered = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and self.rect.collidepoint(event.pos):
            self.is_pressed = self.enabled
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1 and self.is_pressed:
            self.is_pressed = False
            if self.enabled and self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False

    def draw(self, screen):
        if not self.enabled:
            color = self.disabled_color
        else:
            color = self.hover_color if self.is_hovered else self.base_color
        pygame.draw.rect(screen, color, self.rect, border_radius=10)

        text_surf = self.font.render(self.text, True, self.text_color)
        text_rect = text_surf.get_rect(center=self.rect.center)
        screen.blit(text_surf, text_rect)


class TextInput:
    """Single-line text box for the player name."""
    def __init__(self, rect, theme, max_length: int = 24, on_submit=None):
        self.rect = rect
        self.theme = theme
        self.max_length = max_length
        self.on_submit = on_submit
        self.text = ""
        self.is_active = True
        self.is_invalid = False
        self.font = get_font(self.theme["font"]["body_size"])

    def handle_event(self, event):
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.is_active = self.rect.collidepoint(event.pos)
        elif event.type == pygame.KEYDOWN and self.is_active:
            if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                if self.on_submit: self.on_submit()
            elif event.key == pygame.K_BACKSPACE:
                self.text = self.text[:-1]
            elif event.unicode and event.unicode.isprintable() and len(self.text) < self.max_length:
                self.text += event.unicode
                self.is_invalid = False

    def draw(self, screen):
        pygame.draw.rect(screen, self.theme["colors"]["panel_bg"], self.rect, border_radius=6)
        border = self.theme["colors"]["negative"] if self.is_invalid else self.theme["colors"]["panel_border"]
        pygame.draw.rect(screen, border, self.rect, 2, border_radius=6)
        text_surf = self.font.render(self.text or "Your name", True,
                                     self.theme["colors"]["text_light"] if self.text else self.theme["colors"]["text_muted"])
        screen.blit(text_surf, (self.rect.x + 10, self.rect.centery - text_surf.get_height() // 2))

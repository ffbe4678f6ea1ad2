from __future__ import annotations

import pygame

from toystore.ui.effects import cursor_visible
from toystore.ui.shapes import Color, draw_cursor, draw_outline, draw_rounded_rect, point_in_rect
from toystore.ui.theme import Theme


class Button:
    """Rounded, hover-highlighted button drawn from a layout rect."""

    def __init__(self, rect: pygame.Rect, text: str, *, radius: int = 12, color: Color | None = None) -> None:
        self.rect = rect
        self.text = text
        self.radius = radius
        self.color = color

    def is_hovered(self, pointer: tuple[int, int]) -> bool:
        return point_in_rect(pointer, self.rect)

    def draw(self, surface: pygame.Surface, theme: Theme, pointer: tuple[int, int]) -> None:
        if self.is_hovered(pointer):
            color = theme.colors.button_hover
        else:
            color = self.color or theme.colors.button
        draw_rounded_rect(surface, self.rect, color, self.radius)
        text = theme.render_text(theme.font, self.text, theme.colors.text)
        if text is not None:
            surface.blit(text, text.get_rect(center=self.rect.center))


class Label:
    def __init__(self, rect: pygame.Rect, text: str, color: tuple[int, int, int] | None = None) -> None:
        self.rect = rect
        self.text = text
        self.color = color

    def draw(self, surface: pygame.Surface, theme: Theme) -> None:
        text = theme.render_text(theme.font, self.text, self.color or theme.colors.text)
        if text is not None:
            surface.blit(text, self.rect.topleft)


class TextField:
    """Input box showing one edit buffer field, with a blinking cursor when focused."""

    def __init__(self, rect: pygame.Rect, text: str, *, focused: bool = False) -> None:
        self.rect = rect
        self.text = text
        self.focused = focused

    def draw(self, surface: pygame.Surface, theme: Theme, ticks_ms: int) -> None:
        colors = theme.colors
        bg = colors.input_bg_focus if self.focused else colors.input_bg
        border = colors.input_border_focus if self.focused else colors.input_border
        draw_rounded_rect(surface, self.rect, bg, 8)
        draw_outline(surface, self.rect, border)

        text = theme.render_text(theme.font, self.text, colors.text)
        if text is None:
            return
        w = min(text.get_width(), max(0, self.rect.width - 10))
        h = text.get_height()
        x = self.rect.x + 5
        y = self.rect.y + (self.rect.height - h) // 2
        surface.blit(text, (x, y), pygame.Rect(0, 0, w, h))
        if self.focused and cursor_visible(ticks_ms):
            draw_cursor(surface, x + w + 1, y, h, colors.cursor)

from __future__ import annotations

import pygame

from toystore.config import FONT_NAMES, FONT_PATH, FONT_SIZE
from toystore.ui.text_cache import TextCache


class Colors:
    bg_menu = (30, 30, 60)
    bg_store = (50, 50, 80)
    bg_edit = (40, 40, 70)
    text = (230, 230, 230)
    button = (60, 60, 90, 160)
    button_edit = (60, 60, 90, 180)
    button_hover = (255, 180, 180, 220)
    row = (80, 80, 120, 140)
    row_alpha_selected = 200
    highlight_light = (255, 180, 180)
    highlight_dark = (255, 120, 120)
    input_bg = (40, 40, 70, 180)
    input_bg_focus = (60, 60, 90, 220)
    input_border = (80, 80, 120)
    input_border_focus = (255, 180, 180)
    cursor = (230, 230, 230)


class Theme:
    """Font and colors used across the UI.

    Font creation errors propagate; the app cannot start without a font.
    """

    def __init__(self) -> None:
        pygame.font.init()
        self.colors = Colors()
        if FONT_PATH:
            self.font = pygame.font.Font(FONT_PATH, FONT_SIZE)
        else:
            self.font = pygame.font.SysFont(FONT_NAMES, FONT_SIZE)
        self.text_cache = TextCache(max_items=512)

    def render_text(
        self, font: pygame.font.Font, text: str, color: tuple[int, int, int] | None = None
    ) -> pygame.Surface | None:
        """Render text using a shared cache; None means the draw should be skipped."""
        c = color or self.colors.text
        return self.text_cache.render(font, text, c)

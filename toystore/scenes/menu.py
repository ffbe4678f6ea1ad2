from __future__ import annotations

import pygame

from toystore.core.scene import Scene
from toystore.ui.layout import menu_layout
from toystore.ui.theme import Colors
from toystore.ui.widgets import Button


class MenuScene(Scene):
    background = Colors.bg_menu

    def draw(self, surface: pygame.Surface, pointer: tuple[int, int], ticks_ms: int) -> None:
        super().draw(surface, pointer, ticks_ms)
        layout = menu_layout(*self.size())
        buttons = [Button(layout.play, "Play"), Button(layout.exit, "Exit")]
        self.draw_buttons(surface, buttons, pointer)

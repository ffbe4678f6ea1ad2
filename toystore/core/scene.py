from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from toystore.core.state import Session
from toystore.ui.widgets import Button

if TYPE_CHECKING:
    from toystore.core.app import ToyStoreApp


class Scene:
    """Base class for the per-state renderers.

    Scenes only read the session; every mutation goes through the dispatcher.
    """

    background: tuple[int, int, int] = (0, 0, 0)

    def __init__(self, app: "ToyStoreApp") -> None:
        self.app = app
        self.theme = app.theme

    @property
    def session(self) -> Session:
        return self.app.session

    def size(self) -> tuple[int, int]:
        return self.session.window_size

    def draw_buttons(self, surface: pygame.Surface, buttons: list[Button], pointer: tuple[int, int]) -> None:
        for button in buttons:
            button.draw(surface, self.theme, pointer)

    def draw(self, surface: pygame.Surface, pointer: tuple[int, int], ticks_ms: int) -> None:
        surface.fill(self.background)

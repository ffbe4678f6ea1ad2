from __future__ import annotations

import pygame

from toystore.config import FPS
from toystore.core.dispatcher import dispatch
from toystore.core.input import InputMap
from toystore.core.scene import Scene
from toystore.core.state import AppState, Session
from toystore.scenes.edit import EditScene
from toystore.scenes.menu import MenuScene
from toystore.scenes.store import StoreScene
from toystore.ui.theme import Theme


class ToyStoreApp:
    """Main application and frame loop: drain events, draw, flip, until Exit."""

    def __init__(self, screen: pygame.Surface, session: Session | None = None) -> None:
        self.screen = screen
        self.clock = pygame.time.Clock()
        self.input_map = InputMap()
        self.theme = Theme()
        self.session = session or Session(window_size=screen.get_size())
        self.start_ticks = pygame.time.get_ticks()
        self.scenes: dict[AppState, Scene] = {
            AppState.MENU: MenuScene(self),
            AppState.STORE: StoreScene(self),
            AppState.EDIT: EditScene(self),
        }

    def elapsed_ms(self, ticks_ms: int | None = None) -> int:
        if ticks_ms is None:
            ticks_ms = pygame.time.get_ticks()
        return max(0, ticks_ms - self.start_ticks)

    def run(self) -> None:
        pygame.key.start_text_input()
        try:
            while self.session.running:
                self.clock.tick(FPS)
                self.handle_events(pygame.event.get())
                if not self.session.running:
                    break
                self.draw(self.screen)
                pygame.display.flip()
        finally:
            pygame.key.stop_text_input()

    def handle_events(self, events: list[pygame.event.Event]) -> int:
        count = 0
        for event in events:
            if not self.session.running:
                break
            dispatch(self.session, event, self.input_map)
            count += 1
        # pygame 2 resizes the display surface itself; re-fetch it after a resize.
        surface = pygame.display.get_surface()
        if surface is not None:
            self.screen = surface
        return count

    def draw(
        self,
        surface: pygame.Surface,
        pointer: tuple[int, int] | None = None,
        ticks_ms: int | None = None,
    ) -> None:
        scene = self.scenes.get(self.session.state)
        if scene is None:
            return
        if pointer is None:
            pointer = pygame.mouse.get_pos()
        if ticks_ms is None:
            ticks_ms = pygame.time.get_ticks()
        scene.draw(surface, pointer, ticks_ms)

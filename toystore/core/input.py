from __future__ import annotations

import pygame


class InputMap:
    """Maps keys to named actions."""

    def __init__(self) -> None:
        self.bindings: dict[str, tuple[int, ...]] = {
            "erase": (pygame.K_BACKSPACE,),
            "next_field": (pygame.K_TAB,),
            "confirm": (pygame.K_RETURN, pygame.K_KP_ENTER),
            "cancel": (pygame.K_ESCAPE,),
        }

    def is_action(self, event: pygame.event.Event, action: str) -> bool:
        if event.type != pygame.KEYDOWN:
            return False
        return event.key in self.bindings.get(action, ())

    def action_for(self, event: pygame.event.Event) -> str | None:
        for action in self.bindings:
            if self.is_action(event, action):
                return action
        return None


DEFAULT_INPUT_MAP = InputMap()

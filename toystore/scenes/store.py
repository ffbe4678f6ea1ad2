from __future__ import annotations

import pygame

from toystore.core.scene import Scene
from toystore.sim.inventory import Item
from toystore.sim.pricing import format_price
from toystore.ui.effects import lerp_color, pulse_factor
from toystore.ui.layout import STORE_ACTIONS, store_layout
from toystore.ui.shapes import draw_rounded_rect
from toystore.ui.theme import Colors
from toystore.ui.widgets import Button


def row_caption(item: Item) -> str:
    return f"{item.name}   |   Price: ${format_price(item.price)}   |   Quantity: {item.quantity}"


class StoreScene(Scene):
    background = Colors.bg_store

    def draw(self, surface: pygame.Surface, pointer: tuple[int, int], ticks_ms: int) -> None:
        super().draw(surface, pointer, ticks_ms)
        store = self.session.store
        layout = store_layout(*self.size(), len(store))
        colors = self.theme.colors

        pulse = pulse_factor(self.app.elapsed_ms(ticks_ms))
        highlight = lerp_color(colors.highlight_dark, colors.highlight_light, pulse)
        for index, (item, rect) in enumerate(zip(store.items, layout.rows)):
            if index == store.selected:
                fill = (*highlight, colors.row_alpha_selected)
            else:
                fill = colors.row
            draw_rounded_rect(surface, rect, fill, 10)
            self._blit_text(surface, row_caption(item), (rect.x + 15, rect.y + 5))
            self._blit_text(surface, item.description, (rect.x + 15, rect.y + 31))

        self._blit_text(surface, f"Balance: ${format_price(store.balance)}", (20, 20))

        labels = dict(STORE_ACTIONS)
        buttons = [Button(rect, labels[name], radius=8) for name, rect in layout.buttons]
        self.draw_buttons(surface, buttons, pointer)

    def _blit_text(self, surface: pygame.Surface, text: str, pos: tuple[int, int]) -> None:
        image = self.theme.render_text(self.theme.font, text)
        if image is not None:
            surface.blit(image, pos)

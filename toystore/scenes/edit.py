from __future__ import annotations

import pygame

from toystore.core.scene import Scene
from toystore.ui.layout import edit_layout
from toystore.ui.theme import Colors
from toystore.ui.widgets import Button, Label, TextField


FIELD_LABELS = ("Toy Name", "Price", "Description:")


class EditScene(Scene):
    background = Colors.bg_edit

    def draw(self, surface: pygame.Surface, pointer: tuple[int, int], ticks_ms: int) -> None:
        super().draw(surface, pointer, ticks_ms)
        edit = self.session.edit
        if edit is None:
            return
        layout = edit_layout(*self.size())

        for rect, caption in zip(layout.labels, FIELD_LABELS):
            Label(rect, caption).draw(surface, self.theme)
        for index, rect in enumerate(layout.fields):
            field = TextField(rect, edit.field_text(index), focused=index == edit.focus)
            field.draw(surface, self.theme, ticks_ms)

        color = self.theme.colors.button_edit
        buttons = [Button(layout.save, "Save", color=color), Button(layout.cancel, "Cancel", color=color)]
        self.draw_buttons(surface, buttons, pointer)

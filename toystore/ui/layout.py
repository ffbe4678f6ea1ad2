from __future__ import annotations

from dataclasses import dataclass

import pygame


STORE_ACTIONS: tuple[tuple[str, str], ...] = (
    ("up", "Up"),
    ("down", "Down"),
    ("add", "Add"),
    ("delete", "Delete"),
    ("sell", "Sell"),
    ("edit", "Edit"),
    ("back", "Menu"),
)

EDIT_LINE_HEIGHT = 40
EDIT_INPUT_HEIGHT = 36
EDIT_LABEL_OFFSET = 28


def _rect(x: int, y: int, w: int, h: int) -> pygame.Rect:
    # Tiny windows can produce negative sizes; an empty rect never matches a point.
    return pygame.Rect(x, y, max(0, w), max(0, h))


@dataclass(frozen=True)
class MenuLayout:
    play: pygame.Rect
    exit: pygame.Rect


@dataclass(frozen=True)
class StoreLayout:
    buttons: tuple[tuple[str, pygame.Rect], ...]
    rows: tuple[pygame.Rect, ...]

    def button(self, action: str) -> pygame.Rect:
        for name, rect in self.buttons:
            if name == action:
                return rect
        raise KeyError(action)


@dataclass(frozen=True)
class EditLayout:
    labels: tuple[pygame.Rect, pygame.Rect, pygame.Rect]
    fields: tuple[pygame.Rect, pygame.Rect, pygame.Rect]
    save: pygame.Rect
    cancel: pygame.Rect


def menu_layout(width: int, height: int) -> MenuLayout:
    btn_w = width // 3
    btn_h = height // 10
    x = (width - btn_w) // 2
    y = height // 3
    return MenuLayout(
        play=_rect(x, y, btn_w, btn_h),
        exit=_rect(x, y + btn_h + 20, btn_w, btn_h),
    )


def store_layout(width: int, height: int, item_count: int) -> StoreLayout:
    """Bottom action bar plus one row per item, top to bottom in store order."""
    gap = 10
    btn_w = (width - gap * (len(STORE_ACTIONS) + 2)) // len(STORE_ACTIONS)
    btn_h = 50
    btn_y = height - btn_h - 20
    buttons = tuple(
        (name, _rect(gap + i * (btn_w + gap), btn_y, btn_w, btn_h))
        for i, (name, _) in enumerate(STORE_ACTIONS)
    )
    slot = height // 12
    row_h = slot * 2 // 3
    top = height // 10
    rows = tuple(_rect(50, top + i * slot, width - 100, row_h) for i in range(max(0, item_count)))
    return StoreLayout(buttons=buttons, rows=rows)


def edit_layout(width: int, height: int) -> EditLayout:
    top = height // 5
    input_w = width - 100
    tops = (top, top + EDIT_LINE_HEIGHT * 2, top + EDIT_LINE_HEIGHT * 4)
    heights = (EDIT_INPUT_HEIGHT, EDIT_INPUT_HEIGHT, EDIT_INPUT_HEIGHT * 3)
    labels = tuple(_rect(50, y - EDIT_LABEL_OFFSET, 300, 24) for y in tops)
    fields = tuple(_rect(50, y, input_w, h) for y, h in zip(tops, heights))
    btn_w = 150
    btn_h = 50
    btn_y = height - 80
    return EditLayout(
        labels=labels,  # type: ignore[arg-type]
        fields=fields,  # type: ignore[arg-type]
        save=_rect(width // 2 - btn_w - 20, btn_y, btn_w, btn_h),
        cancel=_rect(width // 2 + 20, btn_y, btn_w, btn_h),
    )

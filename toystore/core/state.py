from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from toystore.config import TEXT_FIELD_LIMIT, WINDOW_SIZE
from toystore.sim.inventory import Item, ItemStore, seed_items
from toystore.sim.pricing import filter_price_text, format_price, parse_price


class AppState(Enum):
    MENU = "menu"
    STORE = "store"
    EDIT = "edit"
    EXIT = "exit"


FIELD_NAME = 0
FIELD_PRICE = 1
FIELD_DESCRIPTION = 2
FIELD_COUNT = 3


@dataclass
class EditBuffer:
    """Uncommitted copy of one item's editable fields.

    The price stays text while editing and is only parsed on commit.
    """

    name: str = ""
    price_text: str = ""
    description: str = ""
    focus: int = FIELD_NAME

    @classmethod
    def from_item(cls, item: Item) -> "EditBuffer":
        return cls(name=item.name, price_text=format_price(item.price), description=item.description)

    def field_text(self, index: int) -> str:
        if index == FIELD_PRICE:
            return self.price_text
        if index == FIELD_DESCRIPTION:
            return self.description
        return self.name

    def _set_field_text(self, index: int, text: str) -> None:
        if index == FIELD_PRICE:
            self.price_text = text
        elif index == FIELD_DESCRIPTION:
            self.description = text
        else:
            self.name = text

    def insert_text(self, fragment: str) -> bool:
        """Append a text-input fragment to the focused field.

        The whole fragment is dropped if it would bring the field to the limit.
        """
        current = self.field_text(self.focus)
        if len(current) + len(fragment) >= TEXT_FIELD_LIMIT:
            return False
        if self.focus == FIELD_PRICE:
            fragment = filter_price_text(fragment)
        self._set_field_text(self.focus, current + fragment)
        return True

    def backspace(self) -> None:
        current = self.field_text(self.focus)
        if current:
            self._set_field_text(self.focus, current[:-1])

    def next_field(self) -> None:
        self.focus = (self.focus + 1) % FIELD_COUNT

    def focus_field(self, index: int) -> None:
        if 0 <= index < FIELD_COUNT:
            self.focus = index

    def apply_to(self, item: Item) -> None:
        item.name = self.name
        item.description = self.description
        price = parse_price(self.price_text)
        if price is not None:
            item.price = price


@dataclass
class Session:
    """Everything the frame loop mutates: state, items, edit buffer, window size."""

    store: ItemStore = field(default_factory=lambda: ItemStore(seed_items()))
    state: AppState = AppState.MENU
    edit: EditBuffer | None = None
    window_size: tuple[int, int] = WINDOW_SIZE

    @property
    def running(self) -> bool:
        return self.state is not AppState.EXIT

    def open_store(self) -> None:
        self.state = AppState.STORE
        self.store.reset_selection()

    def show_menu(self) -> None:
        self.state = AppState.MENU

    def quit(self) -> None:
        self.state = AppState.EXIT

    def begin_edit(self) -> bool:
        item = self.store.selected_item()
        if item is None:
            return False
        self.edit = EditBuffer.from_item(item)
        self.state = AppState.EDIT
        return True

    def commit_edit(self) -> None:
        item = self.store.selected_item()
        if self.edit is not None and item is not None:
            self.edit.apply_to(item)
        self.edit = None
        self.state = AppState.STORE

    def cancel_edit(self) -> None:
        self.edit = None
        self.state = AppState.STORE

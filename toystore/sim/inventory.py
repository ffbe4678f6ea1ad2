from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from toystore.config import NEW_ITEM, SEED_ITEMS, ItemDefaults


@dataclass
class Item:
    name: str
    description: str
    price: Decimal
    quantity: int

    @classmethod
    def from_defaults(cls, defaults: ItemDefaults = NEW_ITEM) -> "Item":
        return cls(defaults.name, defaults.description, Decimal(defaults.price), int(defaults.quantity))


def seed_items() -> list[Item]:
    return [Item(name, desc, Decimal(price), qty) for name, desc, price, qty in SEED_ITEMS]


class ItemStore:
    """Ordered items for sale, the current selection and the sales balance.

    Every index based operation is a silent no-op when the index is out of range.
    The selection never goes below 0; while the store is empty it is simply not used.
    """

    def __init__(self, items: list[Item] | None = None) -> None:
        self.items: list[Item] = list(items) if items is not None else []
        self.selected = 0
        self.balance = Decimal("0")

    def __len__(self) -> int:
        return len(self.items)

    def is_valid(self, index: int) -> bool:
        return 0 <= index < len(self.items)

    def selected_item(self) -> Item | None:
        if not self.is_valid(self.selected):
            return None
        return self.items[self.selected]

    def select(self, index: int) -> bool:
        if not self.is_valid(index):
            return False
        self.selected = index
        return True

    def select_previous(self) -> None:
        if self.selected > 0:
            self.selected -= 1

    def select_next(self) -> None:
        if self.selected < len(self.items) - 1:
            self.selected += 1

    def reset_selection(self) -> None:
        self.selected = 0

    def add(self, item: Item | None = None) -> Item:
        if item is None:
            item = Item.from_defaults()
        self.items.append(item)
        self.selected = len(self.items) - 1
        return item

    def remove(self, index: int) -> Item | None:
        if not self.is_valid(index):
            return None
        item = self.items.pop(index)
        if index <= self.selected and self.selected > 0:
            self.selected -= 1
        return item

    def sell(self, index: int) -> bool:
        """Sell one unit; the unit price is credited before the quantity drops.

        Selling the last unit removes the item. The selection only moves when it
        falls off the end, so the row that slides up into its place stays selected.
        """
        if not self.is_valid(index):
            return False
        item = self.items[index]
        if item.quantity <= 0:
            return False
        self.balance += item.price
        if item.quantity == 1:
            self.items.pop(index)
            if self.selected >= len(self.items):
                self.selected = max(0, len(self.items) - 1)
        else:
            item.quantity -= 1
        return True

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


WINDOW_SIZE = (800, 600)
WINDOW_TITLE = "Toy Store"
FPS = 60

# SysFont accepts a comma separated preference list and falls back to pygame's default font.
FONT_NAMES = "bahnschrift,arial"
FONT_SIZE = 24
# Set to a .ttf path to bypass the system font lookup.
FONT_PATH: str | None = None

# Edit fields reject input that would reach this many characters.
TEXT_FIELD_LIMIT = 256

PULSE_PERIOD_MS = 2000
CURSOR_BLINK_MS = 500


@dataclass(frozen=True)
class ItemDefaults:
    name: str = "New Toy"
    description: str = "A newly added toy."
    price: Decimal = Decimal("14.99")
    quantity: int = 7


NEW_ITEM = ItemDefaults()

SEED_ITEMS: list[tuple[str, str, str, int]] = [
    ("Lego Set", "A fun building set for kids.", "29.99", 10),
    ("Doll", "A beautiful doll for imaginative play.", "19.99", 5),
    ("Toy Car", "A speedy little car for racing.", "9.99", 15),
]

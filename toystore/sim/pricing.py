from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation


PRICE_CHARS = frozenset("0123456789.,")

_LEADING_NUMBER = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def filter_price_text(fragment: str) -> str:
    """Drop every character a price field does not accept."""
    return "".join(ch for ch in fragment if ch in PRICE_CHARS)


def format_price(price: Decimal) -> str:
    """Render a price for display and editing.

    Six decimals are rendered first, then trailing zeros and a dangling
    decimal point are trimmed: 14.990000 -> "14.99", 15.000000 -> "15".
    """
    text = f"{Decimal(price):.6f}"
    text = text.rstrip("0")
    if text.endswith("."):
        text = text[:-1]
    return text or "0"


def parse_price(text: str) -> Decimal | None:
    """Parse the leading number of `text`, or return None if there is none.

    Anything after the number is ignored, so "12,5" reads as 12 and "3.5.1" as 3.5.
    """
    match = _LEADING_NUMBER.match(text.strip())
    if match is None:
        return None
    try:
        return Decimal(match.group(0))
    except InvalidOperation:
        return None

from __future__ import annotations

import sys
from collections import OrderedDict
from dataclasses import dataclass

import pygame


@dataclass(frozen=True)
class _TextKey:
    font_id: int
    text: str
    color: tuple[int, int, int]


class TextCache:
    """LRU cache for rendered text surfaces.

    Rendering failures are reported on stderr and returned as None so callers can
    skip the draw; failures are not cached and will be retried next frame.
    """

    def __init__(self, *, max_items: int = 512) -> None:
        self.max_items = int(max_items)
        self._cache: "OrderedDict[_TextKey, pygame.Surface]" = OrderedDict()
        self.hits = 0
        self.misses = 0
        self.failures = 0

    def __len__(self) -> int:
        return len(self._cache)

    def clear(self) -> None:
        self._cache.clear()

    def render(self, font: pygame.font.Font, text: str, color: tuple[int, int, int]) -> pygame.Surface | None:
        key = _TextKey(id(font), str(text), tuple(color[:3]))
        surf = self._cache.get(key)
        if surf is not None:
            self.hits += 1
            self._cache.move_to_end(key)
            return surf
        self.misses += 1
        try:
            surf = font.render(key.text, True, key.color)
        except pygame.error as exc:
            self.failures += 1
            print(f"[render_text] skipped {key.text[:40]!r}: {exc}", file=sys.stderr)
            return None
        self._cache[key] = surf
        if len(self._cache) > self.max_items:
            self._cache.popitem(last=False)
        return surf

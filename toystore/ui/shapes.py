from __future__ import annotations

import pygame


Color = tuple[int, int, int] | tuple[int, int, int, int]

_fill_cache: dict[tuple[int, int, tuple[int, ...], int], pygame.Surface] = {}


def point_in_rect(pos: tuple[int, int], rect: pygame.Rect) -> bool:
    """Left/top edges inclusive, right/bottom edges exclusive."""
    x, y = pos
    return rect.x <= x < rect.x + rect.width and rect.y <= y < rect.y + rect.height


def draw_rounded_rect(surface: pygame.Surface, rect: pygame.Rect, color: Color, radius: int) -> None:
    """Fill a rounded rectangle, alpha-blending translucent colors onto `surface`.

    Translucent fills go through a small SRCALPHA surface, reused per size/color.
    """
    if rect.width <= 0 or rect.height <= 0:
        return
    radius = max(0, min(radius, rect.width // 2, rect.height // 2))
    rgba = tuple(color) if len(color) == 4 else (*color, 255)
    if rgba[3] >= 255:
        pygame.draw.rect(surface, rgba[:3], rect, border_radius=radius)
        return
    key = (rect.width, rect.height, rgba, radius)
    fill = _fill_cache.get(key)
    if fill is None:
        fill = pygame.Surface((rect.width, rect.height), pygame.SRCALPHA)
        pygame.draw.rect(fill, rgba, fill.get_rect(), border_radius=radius)
        if len(_fill_cache) > 256:
            _fill_cache.clear()
        _fill_cache[key] = fill
    surface.blit(fill, rect.topleft)


def draw_outline(surface: pygame.Surface, rect: pygame.Rect, color: Color, *, grow: int = 2) -> None:
    pygame.draw.rect(surface, color, rect.inflate(grow * 2, grow * 2), 1)


def draw_cursor(surface: pygame.Surface, x: int, y: int, height: int, color: Color) -> None:
    pygame.draw.line(surface, color, (x, y), (x, y + height))

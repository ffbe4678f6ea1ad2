from __future__ import annotations

import math

from toystore.config import CURSOR_BLINK_MS, PULSE_PERIOD_MS


def pulse_factor(elapsed_ms: int, period_ms: int = PULSE_PERIOD_MS) -> float:
    """Sinusoidal 0..1 factor repeating every `period_ms`."""
    t = (elapsed_ms % period_ms) / float(period_ms)
    return (math.sin(t * 2.0 * math.pi) + 1.0) / 2.0


def lerp_color(
    start: tuple[int, int, int], end: tuple[int, int, int], t: float
) -> tuple[int, int, int]:
    t = max(0.0, min(1.0, t))
    return (
        int(start[0] * (1.0 - t) + end[0] * t),
        int(start[1] * (1.0 - t) + end[1] * t),
        int(start[2] * (1.0 - t) + end[2] * t),
    )


def cursor_visible(ticks_ms: int, blink_ms: int = CURSOR_BLINK_MS) -> bool:
    return (ticks_ms // blink_ms) % 2 == 0

import os
import sys

import pygame

from toystore.core.app import ToyStoreApp
from toystore.config import WINDOW_SIZE, WINDOW_TITLE


def _open_window() -> pygame.Surface:
    if not pygame.display.get_init():
        raise pygame.error(f"display subsystem unavailable: {pygame.get_error() or 'unknown error'}")
    if not pygame.font.get_init():
        raise pygame.error(f"font subsystem unavailable: {pygame.get_error() or 'unknown error'}")
    pygame.display.set_caption(WINDOW_TITLE)
    return pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)


def main() -> int:
    # Suppress ALSA audio errors on Linux systems without proper audio setup
    os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

    pygame.init()
    try:
        screen = _open_window()
        app = ToyStoreApp(screen)
    except (pygame.error, OSError) as exc:
        print(f"[startup] {exc}", file=sys.stderr)
        pygame.quit()
        return 1
    try:
        app.run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())

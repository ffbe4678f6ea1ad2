from __future__ import annotations

"""
Headless screenshot capture for review.

Writes PNGs to docs/screenshots/:
1) menu.png (Play hovered)
2) store.png (seed items, Toy Car selected, a few sales made)
3) edit.png (editing the selected item, price field focused)
"""

import os
import sys
from pathlib import Path

import pygame


def main() -> None:
    # Ensure project root is importable when running from tools/.
    sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    pygame.init()
    screen = pygame.display.set_mode((800, 600))

    from toystore.core.app import ToyStoreApp
    from toystore.core.dispatcher import dispatch
    from toystore.ui.layout import edit_layout, menu_layout, store_layout

    app = ToyStoreApp(screen)
    session = app.session
    out_dir = Path("docs/screenshots")
    out_dir.mkdir(parents=True, exist_ok=True)

    def click(pos: tuple[int, int]) -> None:
        dispatch(session, pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1))

    # 1) Menu
    play = menu_layout(800, 600).play
    app.draw(screen, pointer=play.center, ticks_ms=0)
    pygame.image.save(screen, str(out_dir / "menu.png"))

    # 2) Store
    click(play.center)
    layout = store_layout(800, 600, len(session.store))
    click(layout.rows[2].center)
    for _ in range(3):
        click(layout.button("sell").center)
    app.draw(screen, pointer=(0, 0), ticks_ms=500)
    pygame.image.save(screen, str(out_dir / "store.png"))

    # 3) Edit
    click(layout.button("edit").center)
    click(edit_layout(800, 600).fields[1].center)
    app.draw(screen, pointer=(0, 0), ticks_ms=0)
    pygame.image.save(screen, str(out_dir / "edit.png"))

    pygame.quit()
    print(f"Wrote screenshots to {out_dir.resolve()}")


if __name__ == "__main__":
    main()

from __future__ import annotations

import random
from decimal import Decimal

import pygame

from toystore.config import TEXT_FIELD_LIMIT
from toystore.core.dispatcher import dispatch
from toystore.core.state import FIELD_DESCRIPTION, FIELD_NAME, FIELD_PRICE, AppState, EditBuffer, Session
from toystore.sim.inventory import Item, ItemStore, seed_items
from toystore.sim.pricing import filter_price_text, format_price, parse_price
from toystore.ui.effects import cursor_visible, lerp_color, pulse_factor
from toystore.ui.layout import edit_layout, menu_layout, store_layout


def _click(session: Session, pos: tuple[int, int], button: int = 1) -> None:
    dispatch(session, pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=button))


def _type(session: Session, text: str) -> None:
    dispatch(session, pygame.event.Event(pygame.TEXTINPUT, text=text))


def _key(session: Session, key: int) -> None:
    dispatch(session, pygame.event.Event(pygame.KEYDOWN, key=key, mod=0, unicode=""))


def _store_session() -> Session:
    session = Session(window_size=(800, 600))
    _click(session, menu_layout(800, 600).play.center)
    assert session.state is AppState.STORE
    return session


def _store_button(session: Session, action: str) -> None:
    w, h = session.window_size
    _click(session, store_layout(w, h, len(session.store)).button(action).center)


def test_add_always_selects_last() -> None:
    store = ItemStore(seed_items())
    store.select(0)
    for _ in range(5):
        store.add()
        assert store.selected == len(store) - 1
    added = store.items[-1]
    assert (added.name, added.description, added.price, added.quantity) == (
        "New Toy",
        "A newly added toy.",
        Decimal("14.99"),
        7,
    )


def test_delete_on_empty_store_is_noop() -> None:
    store = ItemStore()
    assert store.remove(store.selected) is None
    assert store.sell(store.selected) is False
    assert store.selected == 0
    assert store.items == []
    assert store.selected_item() is None


def test_remove_clamps_selection() -> None:
    store = ItemStore(seed_items())
    store.select(2)
    store.remove(2)
    assert store.selected == 1
    store.remove(0)
    assert store.selected == 0
    assert store.items[0].name == "Doll"
    store.remove(0)
    assert len(store) == 0
    assert store.selected == 0
    # Removing after the selection leaves it alone.
    store = ItemStore(seed_items())
    store.select(0)
    store.remove(2)
    assert store.selected == 0


def test_sell_credits_pre_decrement_price() -> None:
    store = ItemStore(seed_items())
    assert store.sell(1) is True
    assert store.items[1].quantity == 4
    assert store.balance == Decimal("19.99")


def test_sell_toy_car_five_times() -> None:
    session = _store_session()
    row = store_layout(800, 600, len(session.store)).rows[2]
    _click(session, row.center)
    assert session.store.selected == 2
    for _ in range(5):
        _store_button(session, "sell")
    assert session.store.items[2].name == "Toy Car"
    assert session.store.items[2].quantity == 10
    assert session.store.balance == Decimal("49.95")


def test_sell_last_unit_removes_item() -> None:
    store = ItemStore(seed_items())
    store.items[2].quantity = 1
    store.select(2)
    assert store.sell(2) is True
    assert len(store) == 2
    assert store.balance == Decimal("9.99")
    assert store.selected == 1

    # A middle row sold out: the next row slides up and keeps the selection.
    store = ItemStore(seed_items())
    store.items[1].quantity = 1
    store.select(1)
    assert store.sell(1) is True
    assert [item.name for item in store.items] == ["Lego Set", "Toy Car"]
    assert store.selected == 1
    assert store.selected_item().name == "Toy Car"
    assert store.balance == Decimal("19.99")

    single = ItemStore([Item("Yo-yo", "", Decimal("2.50"), 1)])
    assert single.sell(0) is True
    assert len(single) == 0
    assert single.selected == 0
    assert single.balance == Decimal("2.50")
    assert single.sell(single.selected) is False


def test_selection_stays_in_range_under_random_actions() -> None:
    rng = random.Random(7)
    store = ItemStore(seed_items())
    balance = store.balance
    for _ in range(2000):
        op = rng.choice(["add", "remove", "sell", "up", "down", "select"])
        if op == "add":
            store.add()
        elif op == "remove":
            store.remove(store.selected)
        elif op == "sell":
            store.sell(store.selected)
        elif op == "up":
            store.select_previous()
        elif op == "down":
            store.select_next()
        else:
            store.select(rng.randint(-3, len(store) + 3))
        if len(store) > 0:
            assert 0 <= store.selected <= len(store) - 1
        else:
            assert store.selected_item() is None
        assert store.balance >= balance
        balance = store.balance
        assert all(item.quantity > 0 for item in store.items)


def test_price_helpers() -> None:
    assert filter_price_text("12a.b5") == "12.5"
    assert filter_price_text("1,5€٣") == "1,5"
    assert format_price(Decimal("14.990000")) == "14.99"
    assert format_price(Decimal("14.99")) == "14.99"
    assert format_price(Decimal("15")) == "15"
    assert format_price(Decimal("0")) == "0"
    assert format_price(Decimal("100.5")) == "100.5"
    assert parse_price("12.5") == Decimal("12.5")
    assert parse_price("12,5") == Decimal("12")
    assert parse_price(".5") == Decimal("0.5")
    assert parse_price("3.") == Decimal("3")
    assert parse_price("") is None
    assert parse_price(".") is None
    assert parse_price(",") is None


def test_edit_buffer_seed_and_filters() -> None:
    buf = EditBuffer.from_item(Item("Kite", "Flies high.", Decimal("14.990000"), 3))
    assert buf.price_text == "14.99"
    assert buf.focus == FIELD_NAME
    buf.focus_field(FIELD_PRICE)
    assert buf.insert_text("a1b") is True
    assert buf.price_text == "14.991"
    buf.backspace()
    buf.backspace()
    assert buf.price_text == "14.9"
    buf.focus_field(FIELD_DESCRIPTION)
    buf.insert_text(" Très bien!")
    assert buf.description == "Flies high. Très bien!"


def test_edit_field_length_limit() -> None:
    buf = EditBuffer(name="x" * (TEXT_FIELD_LIMIT - 2))
    assert buf.insert_text("ab") is False
    assert len(buf.name) == TEXT_FIELD_LIMIT - 2
    assert buf.insert_text("a") is True
    assert len(buf.name) == TEXT_FIELD_LIMIT - 1
    assert buf.insert_text("a") is False


def test_edit_commit_with_bad_price_keeps_price() -> None:
    session = _store_session()
    assert session.begin_edit() is True
    session.edit.name = "Castle"
    session.edit.description = "Big."
    session.edit.price_text = ",,"
    session.commit_edit()
    item = session.store.items[0]
    assert (item.name, item.description, item.price) == ("Castle", "Big.", Decimal("29.99"))
    assert session.state is AppState.STORE
    assert session.edit is None


def test_edit_robot_scenario_through_events() -> None:
    session = _store_session()
    _store_button(session, "edit")
    assert session.state is AppState.EDIT
    for _ in range(len(session.edit.name)):
        _key(session, pygame.K_BACKSPACE)
    _type(session, "Robot")
    _key(session, pygame.K_TAB)
    assert session.edit.focus == FIELD_PRICE
    _type(session, "abc")
    assert session.edit.price_text == "29.99"
    _key(session, pygame.K_RETURN)
    assert session.edit.focus == FIELD_DESCRIPTION
    _key(session, pygame.K_KP_ENTER)
    assert session.state is AppState.STORE
    assert session.store.items[0].name == "Robot"
    assert session.store.items[0].price == Decimal("29.99")


def test_edit_escape_and_cancel_discard() -> None:
    session = _store_session()
    _store_button(session, "edit")
    _type(session, "zzz")
    _key(session, pygame.K_ESCAPE)
    assert session.state is AppState.STORE
    assert session.store.items[0].name == "Lego Set"

    _store_button(session, "edit")
    _type(session, "zzz")
    _click(session, edit_layout(800, 600).cancel.center)
    assert session.state is AppState.STORE
    assert session.store.items[0].name == "Lego Set"


def test_edit_click_focus_and_save() -> None:
    session = _store_session()
    _store_button(session, "down")
    _store_button(session, "edit")
    layout = edit_layout(800, 600)
    _click(session, layout.fields[FIELD_DESCRIPTION].center)
    assert session.edit.focus == FIELD_DESCRIPTION
    _click(session, layout.fields[FIELD_PRICE].center)
    assert session.edit.focus == FIELD_PRICE
    _type(session, "5")
    _click(session, layout.save.center)
    assert session.state is AppState.STORE
    assert session.store.items[1].price == Decimal("19.995")


def test_keys_and_text_ignored_outside_edit() -> None:
    session = _store_session()
    _type(session, "hello")
    _key(session, pygame.K_ESCAPE)
    assert session.state is AppState.STORE
    assert session.edit is None


def test_store_buttons_and_transitions() -> None:
    session = _store_session()
    _store_button(session, "up")
    assert session.store.selected == 0
    _store_button(session, "down")
    _store_button(session, "down")
    _store_button(session, "down")
    assert session.store.selected == 2
    _store_button(session, "add")
    assert len(session.store) == 4 and session.store.selected == 3
    _store_button(session, "delete")
    assert len(session.store) == 3 and session.store.selected == 2
    _store_button(session, "back")
    assert session.state is AppState.MENU
    # Play resets the selection.
    _click(session, menu_layout(800, 600).play.center)
    assert session.store.selected == 0


def test_edit_needs_an_item() -> None:
    session = _store_session()
    for _ in range(3):
        _store_button(session, "delete")
    assert len(session.store) == 0
    _store_button(session, "delete")
    _store_button(session, "sell")
    _store_button(session, "edit")
    assert session.state is AppState.STORE
    assert session.edit is None


def test_buttons_win_over_rows() -> None:
    session = _store_session()
    for _ in range(9):
        session.store.add()
    session.store.select(0)
    layout = store_layout(800, 600, len(session.store))
    add = layout.button("add")
    point = (add.centerx, add.y + 5)
    assert any(row.collidepoint(point) for row in layout.rows)
    _click(session, point)
    assert len(session.store) == 13
    assert session.store.selected == 12


def test_clicks_that_hit_nothing_or_other_buttons() -> None:
    session = Session(window_size=(800, 600))
    _click(session, (1, 1))
    assert session.state is AppState.MENU
    _click(session, menu_layout(800, 600).play.center, button=3)
    assert session.state is AppState.MENU
    session = _store_session()
    _click(session, (5, 5))
    assert session.state is AppState.STORE and session.store.selected == 0


def test_menu_exit_and_quit_are_terminal() -> None:
    session = Session(window_size=(800, 600))
    _click(session, menu_layout(800, 600).exit.center)
    assert session.state is AppState.EXIT
    assert session.running is False
    _click(session, menu_layout(800, 600).play.center)
    assert session.state is AppState.EXIT

    session = _store_session()
    dispatch(session, pygame.event.Event(pygame.QUIT))
    assert session.state is AppState.EXIT


def test_resize_moves_hit_regions() -> None:
    session = Session(window_size=(800, 600))
    dispatch(session, pygame.event.Event(pygame.VIDEORESIZE, w=1200, h=900, size=(1200, 900)))
    assert session.window_size == (1200, 900)
    assert session.state is AppState.MENU
    _click(session, menu_layout(1200, 900).play.center)
    assert session.state is AppState.STORE


def test_layout_is_deterministic_and_ordered() -> None:
    a = store_layout(800, 600, 3)
    b = store_layout(800, 600, 3)
    assert a == b
    assert [name for name, _ in a.buttons] == ["up", "down", "add", "delete", "sell", "edit", "back"]
    rects = [rect for _, rect in a.buttons]
    for left, right in zip(rects, rects[1:]):
        assert left.right < right.x
        assert left.width == right.width == (800 - 90) // 7
    assert a.rows[0] == pygame.Rect(50, 60, 700, 33)
    assert a.rows[2].y == 160
    menu = menu_layout(800, 600)
    assert menu.play == pygame.Rect(267, 200, 266, 60)
    assert menu.exit.y == 280
    edit = edit_layout(800, 600)
    assert [f.y for f in edit.fields] == [120, 200, 280]
    assert edit.fields[FIELD_DESCRIPTION].height == 108
    assert edit.save.right < edit.cancel.x
    tiny = store_layout(40, 30, 1)
    assert all(rect.width >= 0 for _, rect in tiny.buttons)


def test_pulse_and_cursor_timing() -> None:
    assert abs(pulse_factor(0) - 0.5) < 1e-9
    assert abs(pulse_factor(500) - 1.0) < 1e-9
    assert abs(pulse_factor(1500)) < 1e-9
    assert abs(pulse_factor(2500) - 1.0) < 1e-9
    assert lerp_color((255, 120, 120), (255, 180, 180), 0.0) == (255, 120, 120)
    assert lerp_color((255, 120, 120), (255, 180, 180), 1.0) == (255, 180, 180)
    assert cursor_visible(0) and cursor_visible(499)
    assert not cursor_visible(500) and not cursor_visible(999)
    assert cursor_visible(1000)


def test_text_cache_skips_failed_renders() -> None:
    from toystore.ui.text_cache import TextCache

    class BrokenFont:
        def render(self, text, antialias, color):
            raise pygame.error("out of memory")

    class CountingFont:
        def __init__(self) -> None:
            self.calls = 0

        def render(self, text, antialias, color):
            self.calls += 1
            return object()

    cache = TextCache(max_items=2)
    assert cache.render(BrokenFont(), "Balance: $0", (230, 230, 230)) is None  # type: ignore[arg-type]
    assert cache.failures == 1
    assert cache.misses == 1
    assert len(cache) == 0

    font = CountingFont()
    s1 = cache.render(font, "Play", (230, 230, 230))  # type: ignore[arg-type]
    s2 = cache.render(font, "Play", (230, 230, 230))  # type: ignore[arg-type]
    assert s1 is s2
    assert font.calls == 1
    assert cache.hits == 1 and cache.misses == 2
    # Fill + evict oldest
    cache.render(font, "Exit", (230, 230, 230))  # type: ignore[arg-type]
    cache.render(font, "Sell", (230, 230, 230))  # type: ignore[arg-type]
    assert len(cache) == 2
    cache.render(font, "Play", (230, 230, 230))  # type: ignore[arg-type]
    assert font.calls == 4
    cache.clear()
    assert len(cache) == 0


def test_startup_failure_reports_and_exits_nonzero() -> None:
    import contextlib
    import io
    import os

    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    import main

    def broken_set_mode(*args, **kwargs):
        raise pygame.error("no video")

    original = pygame.display.set_mode
    pygame.display.set_mode = broken_set_mode
    err = io.StringIO()
    try:
        with contextlib.redirect_stderr(err):
            status = main.main()
    finally:
        pygame.display.set_mode = original
    assert status == 1
    assert "[startup]" in err.getvalue()
    assert "no video" in err.getvalue()


def test_rounded_rect_blends_alpha() -> None:
    from toystore.ui.shapes import draw_rounded_rect, point_in_rect

    surface = pygame.Surface((40, 40))
    surface.fill((0, 0, 0))
    draw_rounded_rect(surface, pygame.Rect(0, 0, 40, 40), (255, 0, 0, 128), 8)
    r, g, b, _ = surface.get_at((20, 20))
    assert 120 <= r <= 136 and g == 0 and b == 0
    # Rounded corner stays untouched.
    assert surface.get_at((0, 0))[:3] == (0, 0, 0)

    rect = pygame.Rect(10, 10, 5, 5)
    assert point_in_rect((10, 10), rect)
    assert point_in_rect((14, 14), rect)
    assert not point_in_rect((15, 10), rect)
    assert not point_in_rect((10, 15), rect)


def test_render_smoke_all_screens() -> None:
    # Headless-friendly pygame init.
    import os

    os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
    pygame.init()
    screen = pygame.display.set_mode((800, 600), 0, 32)

    from toystore.core.app import ToyStoreApp

    app = ToyStoreApp(screen)
    session = app.session
    assert session.state is AppState.MENU
    app.draw(screen, pointer=menu_layout(800, 600).play.center, ticks_ms=0)
    assert screen.get_at((5, 5))[:3] == app.theme.colors.bg_menu

    _click(session, menu_layout(800, 600).play.center)
    before = [(i.name, i.price, i.quantity) for i in session.store.items]
    for ticks in (0, 250, 1000):
        app.draw(screen, pointer=(0, 0), ticks_ms=ticks)
    assert screen.get_at((799, 599))[:3] == app.theme.colors.bg_store
    assert [(i.name, i.price, i.quantity) for i in session.store.items] == before

    session.begin_edit()
    app.draw(screen, pointer=edit_layout(800, 600).save.center, ticks_ms=0)
    app.draw(screen, pointer=(0, 0), ticks_ms=600)
    assert session.state is AppState.EDIT
    assert screen.get_at((5, 5))[:3] == app.theme.colors.bg_edit

    handled = app.handle_events([pygame.event.Event(pygame.QUIT), pygame.event.Event(pygame.QUIT)])
    assert handled == 1
    assert session.running is False


def run() -> None:
    test_add_always_selects_last()
    test_delete_on_empty_store_is_noop()
    test_remove_clamps_selection()
    test_sell_credits_pre_decrement_price()
    test_sell_toy_car_five_times()
    test_sell_last_unit_removes_item()
    test_selection_stays_in_range_under_random_actions()
    test_price_helpers()
    test_edit_buffer_seed_and_filters()
    test_edit_field_length_limit()
    test_edit_commit_with_bad_price_keeps_price()
    test_edit_robot_scenario_through_events()
    test_edit_escape_and_cancel_discard()
    test_edit_click_focus_and_save()
    test_keys_and_text_ignored_outside_edit()
    test_store_buttons_and_transitions()
    test_edit_needs_an_item()
    test_buttons_win_over_rows()
    test_clicks_that_hit_nothing_or_other_buttons()
    test_menu_exit_and_quit_are_terminal()
    test_resize_moves_hit_regions()
    test_layout_is_deterministic_and_ordered()
    test_pulse_and_cursor_timing()
    test_text_cache_skips_failed_renders()
    test_startup_failure_reports_and_exits_nonzero()
    test_rounded_rect_blends_alpha()
    test_render_smoke_all_screens()
    print("Sanity checks passed.")


if __name__ == "__main__":
    run()

from __future__ import annotations

from typing import Callable

import pygame

from toystore.core.input import DEFAULT_INPUT_MAP, InputMap
from toystore.core.state import FIELD_DESCRIPTION, AppState, Session
from toystore.ui.layout import edit_layout, menu_layout, store_layout
from toystore.ui.shapes import point_in_rect


def dispatch(session: Session, event: pygame.event.Event, input_map: InputMap = DEFAULT_INPUT_MAP) -> None:
    """Apply one platform event to the session.

    Pointer events are resolved against the layout of the session as it is right
    now, so a resize earlier in the same queue already moves the hit regions.
    """
    if not session.running:
        return
    if event.type == pygame.QUIT:
        session.quit()
    elif event.type == pygame.VIDEORESIZE:
        session.window_size = (int(event.w), int(event.h))
    elif event.type == pygame.MOUSEBUTTONDOWN:
        if event.button == 1:
            _dispatch_click(session, event.pos)
    elif event.type == pygame.TEXTINPUT:
        if session.state is AppState.EDIT and session.edit is not None:
            session.edit.insert_text(event.text)
    elif event.type == pygame.KEYDOWN:
        if session.state is AppState.EDIT:
            _dispatch_edit_key(session, event, input_map)


def _dispatch_click(session: Session, pos: tuple[int, int]) -> None:
    handler = _CLICK_HANDLERS.get(session.state)
    if handler is not None:
        handler(session, pos)


def _menu_click(session: Session, pos: tuple[int, int]) -> None:
    layout = menu_layout(*session.window_size)
    if point_in_rect(pos, layout.play):
        session.open_store()
    elif point_in_rect(pos, layout.exit):
        session.quit()


def _store_click(session: Session, pos: tuple[int, int]) -> None:
    store = session.store
    layout = store_layout(*session.window_size, len(store))
    actions: dict[str, Callable[[], object]] = {
        "up": store.select_previous,
        "down": store.select_next,
        "add": store.add,
        "delete": lambda: store.remove(store.selected),
        "sell": lambda: store.sell(store.selected),
        "edit": session.begin_edit,
        "back": session.show_menu,
    }
    # Buttons win over rows; with many items the rows run under the button bar.
    for name, rect in layout.buttons:
        if point_in_rect(pos, rect):
            actions[name]()
            return
    for index, rect in enumerate(layout.rows):
        if point_in_rect(pos, rect):
            store.select(index)
            return


def _edit_click(session: Session, pos: tuple[int, int]) -> None:
    if session.edit is None:
        return
    layout = edit_layout(*session.window_size)
    for index, rect in enumerate(layout.fields):
        if point_in_rect(pos, rect):
            session.edit.focus_field(index)
            return
    if point_in_rect(pos, layout.save):
        session.commit_edit()
    elif point_in_rect(pos, layout.cancel):
        session.cancel_edit()


def _dispatch_edit_key(session: Session, event: pygame.event.Event, input_map: InputMap) -> None:
    edit = session.edit
    if edit is None:
        return
    action = input_map.action_for(event)
    if action == "erase":
        edit.backspace()
    elif action == "next_field":
        edit.next_field()
    elif action == "confirm":
        if edit.focus < FIELD_DESCRIPTION:
            edit.next_field()
        else:
            session.commit_edit()
    elif action == "cancel":
        session.cancel_edit()


_CLICK_HANDLERS: dict[AppState, Callable[[Session, tuple[int, int]], None]] = {
    AppState.MENU: _menu_click,
    AppState.STORE: _store_click,
    AppState.EDIT: _edit_click,
}

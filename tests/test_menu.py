import pytest

from barshell.centerbox import Alignment, Point, Size
from barshell.config import Position
from barshell.menu import (
    ButtonUIRef,
    KeyboardInteractivity,
    Layer,
    Menu,
    MenuKind,
    MenuSize,
    MenuType,
    SetKeyboardInteractivity,
    SetLayer,
    menu_left_offset,
    menu_vertical_alignment,
)

SETTINGS = MenuType(MenuKind.SETTINGS)
UPDATES = MenuType(MenuKind.UPDATES)


def _button(x=100.0, width=1920.0):
    return ButtonUIRef(Point(x, 10.0), Size(width, 1080.0))


def test_open_sets_info_and_raises_surface():
    menu = Menu(7)
    commands = menu.open(SETTINGS, _button())
    assert menu.menu_info == (SETTINGS, _button())
    assert commands == [
        SetLayer(7, Layer.OVERLAY),
        SetKeyboardInteractivity(7, KeyboardInteractivity.NONE),
    ]


def test_close_when_closed_does_nothing():
    menu = Menu(1)
    assert menu.close() == []
    assert menu.menu_info is None


def test_close_lowers_surface():
    menu = Menu(1)
    menu.open(UPDATES, _button())
    commands = menu.close()
    assert menu.menu_info is None
    assert commands == [
        SetLayer(1, Layer.BACKGROUND),
        SetKeyboardInteractivity(1, KeyboardInteractivity.NONE),
    ]


def test_toggle_same_type_closes():
    menu = Menu(2)
    first = menu.toggle(SETTINGS, _button())
    assert first[0] == SetLayer(2, Layer.OVERLAY)
    second = menu.toggle(SETTINGS, _button())
    assert second[0] == SetLayer(2, Layer.BACKGROUND)
    assert menu.menu_info is None


def test_toggle_other_type_switches_without_commands():
    menu = Menu(3)
    menu.toggle(SETTINGS, _button(10.0))
    commands = menu.toggle(UPDATES, _button(20.0))
    assert commands == []
    assert menu.menu_info == (UPDATES, _button(20.0))


def test_tray_menus_differ_by_name():
    menu = Menu(4)
    menu.toggle(MenuType(MenuKind.TRAY, "a"), _button())
    assert menu.toggle(MenuType(MenuKind.TRAY, "b"), _button()) == []
    assert menu.menu_info[0] == MenuType(MenuKind.TRAY, "b")


def test_close_if_only_matching():
    menu = Menu(5)
    menu.open(MenuType(MenuKind.TRAY, "nm"), _button())
    assert menu.close_if(SETTINGS) == []
    assert menu.menu_info is not None and menu.menu_info[0].name == "nm"
    assert menu.close_if(MenuType(MenuKind.TRAY, "nm"))[0] == SetLayer(5, Layer.BACKGROUND)
    assert menu.menu_info is None


def test_close_if_when_closed():
    assert Menu(5).close_if(SETTINGS) == []


def test_keyboard_requests():
    menu = Menu(9)
    assert menu.request_keyboard() == SetKeyboardInteractivity(9, KeyboardInteractivity.ON_DEMAND)
    assert menu.release_keyboard() == SetKeyboardInteractivity(9, KeyboardInteractivity.NONE)


def test_menu_type_validation():
    with pytest.raises(ValueError):
        MenuType(MenuKind.TRAY)
    with pytest.raises(ValueError):
        MenuType(MenuKind.SETTINGS, "x")


def test_menu_sizes():
    assert MenuSize.NORMAL.size() == 250.0
    assert MenuSize.LARGE.size() == 350.0


def test_left_offset_clamps_to_left_margin():
    assert menu_left_offset(MenuSize.NORMAL, _button(0.0)) == 8.0


def test_left_offset_clamps_to_right_edge():
    button = _button(1900.0, 1920.0)
    offset = menu_left_offset(MenuSize.LARGE, button)
    assert offset + MenuSize.LARGE.size() + 8.0 == button.viewport.width


def test_left_offset_centres_under_button():
    button = _button(900.0)
    offset = menu_left_offset(MenuSize.NORMAL, button)
    assert offset + MenuSize.NORMAL.size() / 2 == button.position.x


def test_vertical_alignment():
    assert menu_vertical_alignment(Position.TOP) is Alignment.START
    assert menu_vertical_alignment(Position.BOTTOM) is Alignment.END
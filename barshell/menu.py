"""Popup menu state and placement for the bar's menu surfaces."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Optional, Union

from barshell.centerbox import Alignment, Point, Size
from barshell.config import Position

_EDGE_MARGIN = 8.0


class MenuKind(Enum):
    UPDATES = "Updates"
    SETTINGS = "Settings"
    TRAY = "Tray"
    MEDIA_PLAYER = "MediaPlayer"


@dataclass(frozen=True)
class MenuType:
    """Which menu is shown; tray menus also carry the tray item's name."""

    kind: MenuKind
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind is MenuKind.TRAY and self.name is None:
            raise ValueError("a tray menu needs the tray item's name")
        if self.kind is not MenuKind.TRAY and self.name is not None:
            raise ValueError(f"a {self.kind.value} menu takes no name")


@dataclass(frozen=True)
class ButtonUIRef:
    """Where the button that opened a menu sits, and the size of its viewport."""

    position: Point
    viewport: Size


class Layer(Enum):
    BACKGROUND = "background"
    BOTTOM = "bottom"
    TOP = "top"
    OVERLAY = "overlay"


class KeyboardInteractivity(Enum):
    NONE = "none"
    EXCLUSIVE = "exclusive"
    ON_DEMAND = "on_demand"


@dataclass(frozen=True)
class SetLayer:
    """Request to move a surface to another layer."""

    surface_id: Hashable
    layer: Layer


@dataclass(frozen=True)
class SetKeyboardInteractivity:
    """Request to change how a surface receives keyboard focus."""

    surface_id: Hashable
    interactivity: KeyboardInteractivity


Command = Union[SetLayer, SetKeyboardInteractivity]


@dataclass
class Menu:
    """A menu surface that is either closed or showing one menu type."""

    id: Hashable
    menu_info: Optional[tuple[MenuType, ButtonUIRef]] = None

    def open(self, menu_type: MenuType, button_ui_ref: ButtonUIRef) -> list[Command]:
        """Show the given menu and raise the surface to the overlay layer."""
        self.menu_info = (menu_type, button_ui_ref)
        return [
            SetLayer(self.id, Layer.OVERLAY),
            SetKeyboardInteractivity(self.id, KeyboardInteractivity.NONE),
        ]

    def close(self) -> list[Command]:
        """Hide the menu, if one is open, and lower the surface to the background."""
        if self.menu_info is None:
            return []
        self.menu_info = None
        return [
            SetLayer(self.id, Layer.BACKGROUND),
            SetKeyboardInteractivity(self.id, KeyboardInteractivity.NONE),
        ]

    def toggle(self, menu_type: MenuType, button_ui_ref: ButtonUIRef) -> list[Command]:
        """Open, close, or switch to another menu without touching the surface."""
        if self.menu_info is None:
            return self.open(menu_type, button_ui_ref)
        current_type, _ = self.menu_info
        if current_type == menu_type:
            return self.close()
        self.menu_info = (menu_type, button_ui_ref)
        return []

    def close_if(self, menu_type: MenuType) -> list[Command]:
        """Close the menu only when it currently shows the given type."""
        if self.menu_info is not None and self.menu_info[0] == menu_type:
            return self.close()
        return []

    def request_keyboard(self) -> SetKeyboardInteractivity:
        return SetKeyboardInteractivity(self.id, KeyboardInteractivity.ON_DEMAND)

    def release_keyboard(self) -> SetKeyboardInteractivity:
        return SetKeyboardInteractivity(self.id, KeyboardInteractivity.NONE)


class MenuSize(Enum):
    NORMAL = 250.0
    LARGE = 350.0

    def size(self) -> float:
        """Maximum width of a menu of this size."""
        return self.value


def menu_left_offset(menu_size: MenuSize, button_ui_ref: ButtonUIRef) -> float:
    """Left padding that centres a menu under its button while keeping it on screen."""
    size = menu_size.size()
    return min(
        max(button_ui_ref.position.x - size / 2.0, _EDGE_MARGIN),
        button_ui_ref.viewport.width - size - _EDGE_MARGIN,
    )


def menu_vertical_alignment(bar_position: Position) -> Alignment:
    """Menus hang from the top bar and rise from the bottom bar."""
    return Alignment.START if bar_position is Position.TOP else Alignment.END
"""Nerd Font icon glyphs used by the bar."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

ICON_FONT = "Symbols Nerd Font"


class Icons(Enum):
    NONE = auto()
    APP_LAUNCHER = auto()
    CLIPBOARD = auto()
    REFRESH = auto()
    NO_UPDATES_AVAILABLE = auto()
    UPDATES_AVAILABLE = auto()
    MENU_CLOSED = auto()
    MENU_OPEN = auto()
    CPU = auto()
    MEM = auto()
    TEMP = auto()
    SPEAKER0 = auto()
    SPEAKER1 = auto()
    SPEAKER2 = auto()
    SPEAKER3 = auto()
    HEADPHONES0 = auto()
    HEADPHONES1 = auto()
    HEADSET = auto()
    MIC0 = auto()
    MIC1 = auto()
    MONITOR_SPEAKER = auto()
    SCREEN_SHARE = auto()
    BATTERY0 = auto()
    BATTERY1 = auto()
    BATTERY2 = auto()
    BATTERY3 = auto()
    BATTERY4 = auto()
    BATTERY_CHARGING = auto()
    WIFI0 = auto()
    WIFI1 = auto()
    WIFI2 = auto()
    WIFI3 = auto()
    WIFI4 = auto()
    WIFI5 = auto()
    WIFI_LOCK1 = auto()
    WIFI_LOCK2 = auto()
    WIFI_LOCK3 = auto()
    WIFI_LOCK4 = auto()
    WIFI_LOCK5 = auto()
    ETHERNET = auto()
    VPN = auto()
    BLUETOOTH = auto()
    POWER_SAVER = auto()
    BALANCED = auto()
    PERFORMANCE = auto()
    EYE_OPENED = auto()
    EYE_CLOSED = auto()
    LOCK = auto()
    POWER = auto()
    REBOOT = auto()
    SUSPEND = auto()
    LOGOUT = auto()
    RIGHT_ARROW = auto()
    BRIGHTNESS = auto()
    POINT = auto()
    CLOSE = auto()
    VERTICAL_DOTS = auto()
    AIRPLANE = auto()
    WEBCAM = auto()
    SKIP_PREVIOUS = auto()
    PLAY_PAUSE = auto()
    SKIP_NEXT = auto()
    MUSIC_NOTE = auto()

    def glyph(self) -> str:
        """Return the font glyph for this icon."""
        return _GLYPHS[self]


_GLYPHS: dict[Icons, str] = {
    Icons.NONE: "",
    Icons.APP_LAUNCHER: "󱗼",
    Icons.CLIPBOARD: "󰅌",
    Icons.REFRESH: "󰑐",
    Icons.NO_UPDATES_AVAILABLE: "󰗠",
    Icons.UPDATES_AVAILABLE: "󰳛",
    Icons.MENU_CLOSED: "",
    Icons.MENU_OPEN: "",
    Icons.CPU: "󰔂",
    Icons.MEM: "󰘚",
    Icons.TEMP: "󰔏",
    Icons.SPEAKER0: "󰸈",
    Icons.SPEAKER1: "󰕿",
    Icons.SPEAKER2: "󰖀",
    Icons.SPEAKER3: "󰕾",
    Icons.HEADPHONES0: "󰟎",
    Icons.HEADPHONES1: "󰋋",
    Icons.HEADSET: "󰋎",
    Icons.MIC0: "󰍭",
    Icons.MIC1: "󰍬",
    Icons.SCREEN_SHARE: "󱒃",
    Icons.MONITOR_SPEAKER: "󰽟",
    Icons.BATTERY0: "󰂃",
    Icons.BATTERY1: "󰁼",
    Icons.BATTERY2: "󰁾",
    Icons.BATTERY3: "󰂀",
    Icons.BATTERY4: "󰁹",
    Icons.BATTERY_CHARGING: "󰂄",
    Icons.WIFI0: "󰤭",
    Icons.WIFI1: "󰤯",
    Icons.WIFI2: "󰤟",
    Icons.WIFI3: "󰤢",
    Icons.WIFI4: "󰤥",
    Icons.WIFI5: "󰤨",
    Icons.WIFI_LOCK1: "󰤬",
    Icons.WIFI_LOCK2: "󰤡",
    Icons.WIFI_LOCK3: "󰤤",
    Icons.WIFI_LOCK4: "󰤧",
    Icons.WIFI_LOCK5: "󰤪",
    Icons.ETHERNET: "󰈀",
    Icons.VPN: "󰖂",
    Icons.BLUETOOTH: "󰂯",
    Icons.POWER_SAVER: "󰾆",
    Icons.BALANCED: "󰾅",
    Icons.PERFORMANCE: "󰓅",
    Icons.EYE_OPENED: "󰈈",
    Icons.EYE_CLOSED: "󰈉",
    Icons.LOCK: "󰌾",
    Icons.POWER: "󰐥",
    Icons.REBOOT: "󰑐",
    Icons.SUSPEND: "󰤄",
    Icons.LOGOUT: "󰗽",
    Icons.RIGHT_ARROW: "󰁔",
    Icons.BRIGHTNESS: "󰃠",
    Icons.POINT: "",
    Icons.CLOSE: "󰅖",
    Icons.VERTICAL_DOTS: "󰇙",
    Icons.AIRPLANE: "󰀝",
    Icons.WEBCAM: "",
    Icons.SKIP_PREVIOUS: "󰒮",
    Icons.PLAY_PAUSE: "󰐎",
    Icons.SKIP_NEXT: "󰒭",
    Icons.MUSIC_NOTE: "󰎇",
}


@dataclass(frozen=True)
class IconText:
    """A piece of text to be drawn with the icon font."""

    content: str
    font: str = ICON_FONT


def icon(kind: Icons = Icons.NONE) -> IconText:
    """Return the text for an icon, set in the icon font."""
    return IconText(kind.glyph())
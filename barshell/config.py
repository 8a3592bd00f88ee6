"""Bar configuration: data model, YAML loading and defaults."""

from __future__ import annotations

import os
import string
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Mapping, Optional, TypeVar

import yaml

CONFIG_FILE_NAME = "ashell.yml"

_T = TypeVar("_T")
_E = TypeVar("_E", bound=Enum)

_U32_MAX = 2**32 - 1
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class ConfigError(ValueError):
    """Raised when configuration data cannot be interpreted."""


@dataclass(frozen=True)
class HexColor:
    """An 8-bit RGBA color written as a hex string."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b, self.a):
            if isinstance(channel, bool) or not isinstance(channel, int) or not 0 <= channel <= 255:
                raise ConfigError(f"color channel out of range: {channel!r}")

    @classmethod
    def parse(cls, text: Any) -> "HexColor":
        """Parse ``#RGB``, ``#RGBA``, ``#RRGGBB`` or ``#RRGGBBAA``."""
        if not isinstance(text, str) or not text.startswith("#"):
            raise ConfigError(f"invalid hex color: {text!r}")
        digits = text[1:]
        if not digits or any(ch not in string.hexdigits for ch in digits):
            raise ConfigError(f"invalid hex color: {text!r}")
        if len(digits) in (3, 4):
            channels = [int(ch * 2, 16) for ch in digits]
        elif len(digits) in (6, 8):
            channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
        else:
            raise ConfigError(f"invalid hex color length: {text!r}")
        return cls(*channels)


@dataclass(frozen=True)
class Color:
    """A color with floating point channels in the range 0..1."""

    r: float
    g: float
    b: float
    a: float = 1.0

    @classmethod
    def from_rgb8(cls, r: int, g: int, b: int) -> "Color":
        return cls(r / 255.0, g / 255.0, b / 255.0)


@dataclass(frozen=True)
class Pair:
    """A background color together with the text color drawn on it."""

    color: Color
    text: Color


def _to_color(hex_color: HexColor) -> Color:
    return Color.from_rgb8(hex_color.r, hex_color.g, hex_color.b)


@dataclass(frozen=True)
class AppearanceColor:
    """A base color with optional strong, weak and text variants."""

    base: HexColor
    strong: Optional[HexColor] = None
    weak: Optional[HexColor] = None
    text: Optional[HexColor] = None

    @classmethod
    def from_value(cls, value: Any) -> "AppearanceColor":
        """Build from a hex string or a mapping with a ``base`` key."""
        if isinstance(value, str):
            return cls(HexColor.parse(value))
        if isinstance(value, Mapping):
            if "base" not in value:
                raise ConfigError("appearance color needs a 'base' entry")
            return cls(
                base=HexColor.parse(value["base"]),
                strong=_optional(value.get("strong"), HexColor.parse),
                weak=_optional(value.get("weak"), HexColor.parse),
                text=_optional(value.get("text"), HexColor.parse),
            )
        raise ConfigError(f"invalid appearance color: {value!r}")

    def get_base(self) -> Color:
        return _to_color(self.base)

    def get_text(self) -> Optional[Color]:
        return None if self.text is None else _to_color(self.text)

    def _pair(self, color: Optional[HexColor], text_fallback: Color) -> Optional[Pair]:
        if color is None:
            return None
        text = self.get_text()
        return Pair(_to_color(color), text if text is not None else text_fallback)

    def get_weak_pair(self, text_fallback: Color) -> Optional[Pair]:
        return self._pair(self.weak, text_fallback)

    def get_strong_pair(self, text_fallback: Color) -> Optional[Pair]:
        return self._pair(self.strong, text_fallback)


class WorkspaceVisibilityMode(Enum):
    ALL = "All"
    MONITOR_SPECIFIC = "MonitorSpecific"


class Position(Enum):
    TOP = "Top"
    BOTTOM = "Bottom"


class ModuleName(Enum):
    APP_LAUNCHER = "AppLauncher"
    UPDATES = "Updates"
    CLIPBOARD = "Clipboard"
    WORKSPACES = "Workspaces"
    WINDOW_TITLE = "WindowTitle"
    SYSTEM_INFO = "SystemInfo"
    KEYBOARD_LAYOUT = "KeyboardLayout"
    KEYBOARD_SUBMAP = "KeyboardSubmap"
    TRAY = "Tray"
    CLOCK = "Clock"
    PRIVACY = "Privacy"
    SETTINGS = "Settings"
    MEDIA_PLAYER = "MediaPlayer"


def _parse_enum(enum_cls: type[_E], value: Any) -> _E:
    try:
        return enum_cls(value)
    except ValueError:
        raise ConfigError(f"unknown {enum_cls.__name__} variant: {value!r}") from None


@dataclass(frozen=True)
class ModuleDef:
    """One slot of a bar section: a single module or a group of modules."""

    names: tuple[ModuleName, ...]
    group: bool = False

    @classmethod
    def from_value(cls, value: Any) -> "ModuleDef":
        if isinstance(value, str):
            return cls((_parse_enum(ModuleName, value),))
        if isinstance(value, list):
            return cls(tuple(_parse_enum(ModuleName, item) for item in value), group=True)
        raise ConfigError(f"invalid module definition: {value!r}")


class OutputsKind(Enum):
    ALL = "All"
    ACTIVE = "Active"
    TARGETS = "Targets"


@dataclass(frozen=True)
class Outputs:
    """Which monitors the bar is shown on."""

    kind: OutputsKind = OutputsKind.ALL
    targets: tuple[str, ...] = ()

    @classmethod
    def from_value(cls, value: Any) -> "Outputs":
        if value in ("All", "Active"):
            return cls(OutputsKind(value))
        if isinstance(value, Mapping) and len(value) == 1 and "Targets" in value:
            targets = value["Targets"]
            if not isinstance(targets, list) or not all(isinstance(t, str) for t in targets):
                raise ConfigError("Targets must be a list of output names")
            if not targets:
                raise ConfigError("need non-empty")
            return cls(OutputsKind.TARGETS, tuple(targets))
        raise ConfigError(f"invalid outputs value: {value!r}")


def _optional(value: Any, convert: Callable[[Any], _T]) -> Optional[_T]:
    return None if value is None else convert(value)


def _as_str(value: Any) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"expected a string, got {value!r}")
    return value


def _as_opt_str(value: Any) -> Optional[str]:
    return _optional(value, _as_str)


def _as_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"expected a boolean, got {value!r}")
    return value


def _as_int_in(value: Any, low: int, high: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not low <= value <= high:
        raise ConfigError(f"expected an integer in [{low}, {high}], got {value!r}")
    return value


def _as_u32(value: Any) -> int:
    return _as_int_in(value, 0, _U32_MAX)


def _as_i32(value: Any) -> int:
    return _as_int_in(value, _I32_MIN, _I32_MAX)


def _as_mapping(value: Any) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigError(f"expected a mapping, got {value!r}")
    return value


def _as_list(convert: Callable[[Any], _T]) -> Callable[[Any], list[_T]]:
    def inner(value: Any) -> list[_T]:
        if not isinstance(value, list):
            raise ConfigError(f"expected a list, got {value!r}")
        return [convert(item) for item in value]

    return inner


_MISSING = object()


def _take(data: Mapping[str, Any], key: str, convert: Callable[[Any], _T], default: Any = _MISSING) -> _T:
    if key not in data:
        if default is _MISSING:
            raise ConfigError(f"missing field '{key}'")
        return default() if callable(default) else default
    try:
        return convert(data[key])
    except ConfigError as exc:
        raise ConfigError(f"{key}: {exc}") from None


@dataclass
class UpdatesModuleConfig:
    check_cmd: str
    update_cmd: str

    @classmethod
    def _from_value(cls, value: Any) -> "UpdatesModuleConfig":
        data = _as_mapping(value)
        return cls(_take(data, "checkCmd", _as_str), _take(data, "updateCmd", _as_str))


@dataclass
class WorkspacesModuleConfig:
    visibility_mode: WorkspaceVisibilityMode = WorkspaceVisibilityMode.ALL
    enable_workspace_filling: bool = False

    @classmethod
    def _from_value(cls, value: Any) -> "WorkspacesModuleConfig":
        data = _as_mapping(value)
        return cls(
            _take(
                data,
                "visibilityMode",
                lambda v: _parse_enum(WorkspaceVisibilityMode, v),
                WorkspaceVisibilityMode.ALL,
            ),
            _take(data, "enableWorkspaceFilling", _as_bool, False),
        )


@dataclass
class SystemModuleConfig:
    cpu_warn_threshold: int = 60
    cpu_alert_threshold: int = 80
    mem_warn_threshold: int = 70
    mem_alert_threshold: int = 85
    temp_warn_threshold: int = 60
    temp_alert_threshold: int = 80

    @classmethod
    def _from_value(cls, value: Any) -> "SystemModuleConfig":
        data = _as_mapping(value)
        base = cls()
        return cls(
            _take(data, "cpuWarnThreshold", _as_u32, base.cpu_warn_threshold),
            _take(data, "cpuAlertThreshold", _as_u32, base.cpu_alert_threshold),
            _take(data, "memWarnThreshold", _as_u32, base.mem_warn_threshold),
            _take(data, "memAlertThreshold", _as_u32, base.mem_alert_threshold),
            _take(data, "tempWarnThreshold", _as_i32, base.temp_warn_threshold),
            _take(data, "tempAlertThreshold", _as_i32, base.temp_alert_threshold),
        )


@dataclass
class ClockModuleConfig:
    format: str = "%a %d %b %R"

    @classmethod
    def _from_value(cls, value: Any) -> "ClockModuleConfig":
        return cls(_take(_as_mapping(value), "format", _as_str))


@dataclass
class SettingsModuleConfig:
    lock_cmd: Optional[str] = None
    audio_sinks_more_cmd: Optional[str] = None
    audio_sources_more_cmd: Optional[str] = None
    wifi_more_cmd: Optional[str] = None
    vpn_more_cmd: Optional[str] = None
    bluetooth_more_cmd: Optional[str] = None

    @classmethod
    def _from_value(cls, value: Any) -> "SettingsModuleConfig":
        data = _as_mapping(value)
        return cls(
            _take(data, "lockCmd", _as_opt_str, None),
            _take(data, "audioSinksMoreCmd", _as_opt_str, None),
            _take(data, "audioSourcesMoreCmd", _as_opt_str, None),
            _take(data, "wifiMoreCmd", _as_opt_str, None),
            _take(data, "vpnMoreCmd", _as_opt_str, None),
            _take(data, "bluetoothMoreCmd", _as_opt_str, None),
        )


@dataclass
class MediaPlayerModuleConfig:
    max_title_length: int = 100

    @classmethod
    def _from_value(cls, value: Any) -> "MediaPlayerModuleConfig":
        return cls(_take(_as_mapping(value), "maxTitleLength", _as_u32, 100))


_PRIMARY = HexColor(250, 179, 135)


def _default_background_color() -> AppearanceColor:
    return AppearanceColor(
        base=HexColor(30, 30, 46),
        strong=HexColor(69, 71, 90),
        weak=HexColor(49, 50, 68),
    )


def _default_primary_color() -> AppearanceColor:
    return AppearanceColor(base=_PRIMARY, text=HexColor(30, 30, 46))


def _default_secondary_color() -> AppearanceColor:
    return AppearanceColor(base=HexColor(17, 17, 27), strong=HexColor(24, 24, 37))


def _default_success_color() -> AppearanceColor:
    return AppearanceColor(HexColor(166, 227, 161))


def _default_danger_color() -> AppearanceColor:
    return AppearanceColor(base=HexColor(243, 139, 168), weak=HexColor(249, 226, 175))


def _default_text_color() -> AppearanceColor:
    return AppearanceColor(HexColor(205, 214, 244))


def _default_workspace_colors() -> list[AppearanceColor]:
    return [
        AppearanceColor(_PRIMARY),
        AppearanceColor(HexColor(180, 190, 254)),
        AppearanceColor(HexColor(203, 166, 247)),
    ]


@dataclass
class Appearance:
    background_color: AppearanceColor = field(default_factory=_default_background_color)
    primary_color: AppearanceColor = field(default_factory=_default_primary_color)
    secondary_color: AppearanceColor = field(default_factory=_default_secondary_color)
    success_color: AppearanceColor = field(default_factory=_default_success_color)
    danger_color: AppearanceColor = field(default_factory=_default_danger_color)
    text_color: AppearanceColor = field(default_factory=_default_text_color)
    workspace_colors: list[AppearanceColor] = field(default_factory=_default_workspace_colors)
    special_workspace_colors: Optional[list[AppearanceColor]] = None

    @classmethod
    def _from_value(cls, value: Any) -> "Appearance":
        data = _as_mapping(value)
        color = AppearanceColor.from_value
        colors = _as_list(color)
        return cls(
            _take(data, "backgroundColor", color, _default_background_color),
            _take(data, "primaryColor", color, _default_primary_color),
            _take(data, "secondaryColor", color, _default_secondary_color),
            _take(data, "successColor", color, _default_success_color),
            _take(data, "dangerColor", color, _default_danger_color),
            _take(data, "textColor", color, _default_text_color),
            _take(data, "workspaceColors", colors, _default_workspace_colors),
            _take(data, "specialWorkspaceColors", lambda v: _optional(v, colors), None),
        )


def _default_left() -> list[ModuleDef]:
    return [ModuleDef((ModuleName.WORKSPACES,))]


def _default_center() -> list[ModuleDef]:
    return [ModuleDef((ModuleName.WINDOW_TITLE,))]


def _default_right() -> list[ModuleDef]:
    return [ModuleDef((ModuleName.CLOCK, ModuleName.PRIVACY, ModuleName.SETTINGS), group=True)]


@dataclass
class Modules:
    left: list[ModuleDef] = field(default_factory=_default_left)
    center: list[ModuleDef] = field(default_factory=_default_center)
    right: list[ModuleDef] = field(default_factory=_default_right)

    @classmethod
    def _from_value(cls, value: Any) -> "Modules":
        data = _as_mapping(value)
        defs = _as_list(ModuleDef.from_value)
        return cls(
            _take(data, "left", defs, list),
            _take(data, "center", defs, list),
            _take(data, "right", defs, list),
        )


@dataclass
class Config:
    log_level: str = "warn"
    position: Position = Position.TOP
    outputs: Outputs = field(default_factory=Outputs)
    modules: Modules = field(default_factory=Modules)
    app_launcher_cmd: Optional[str] = None
    clipboard_cmd: Optional[str] = None
    truncate_title_after_length: int = 150
    updates: Optional[UpdatesModuleConfig] = None
    workspaces: WorkspacesModuleConfig = field(default_factory=WorkspacesModuleConfig)
    system: SystemModuleConfig = field(default_factory=SystemModuleConfig)
    clock: ClockModuleConfig = field(default_factory=ClockModuleConfig)
    settings: SettingsModuleConfig = field(default_factory=SettingsModuleConfig)
    appearance: Appearance = field(default_factory=Appearance)
    media_player: MediaPlayerModuleConfig = field(default_factory=MediaPlayerModuleConfig)

    @classmethod
    def from_mapping(cls, data: Any) -> "Config":
        """Build a configuration from a parsed YAML mapping with camelCase keys."""
        data = _as_mapping(data)
        return cls(
            log_level=_take(data, "logLevel", _as_str, "warn"),
            position=_take(data, "position", lambda v: _parse_enum(Position, v), Position.TOP),
            outputs=_take(data, "outputs", Outputs.from_value, Outputs),
            modules=_take(data, "modules", Modules._from_value, Modules),
            app_launcher_cmd=_take(data, "appLauncherCmd", _as_opt_str, None),
            clipboard_cmd=_take(data, "clipboardCmd", _as_opt_str, None),
            truncate_title_after_length=_take(data, "truncateTitleAfterLength", _as_u32, 150),
            updates=_take(
                data, "updates", lambda v: _optional(v, UpdatesModuleConfig._from_value), None
            ),
            workspaces=_take(
                data, "workspaces", WorkspacesModuleConfig._from_value, WorkspacesModuleConfig
            ),
            system=_take(data, "system", SystemModuleConfig._from_value, SystemModuleConfig),
            clock=_take(data, "clock", ClockModuleConfig._from_value, ClockModuleConfig),
            settings=_take(
                data, "settings", SettingsModuleConfig._from_value, SettingsModuleConfig
            ),
            appearance=_take(data, "appearance", Appearance._from_value, Appearance),
            media_player=_take(
                data, "mediaPlayer", MediaPlayerModuleConfig._from_value, MediaPlayerModuleConfig
            ),
        )


def parse_config(text: str) -> Config:
    """Parse YAML text into a :class:`Config`; an empty document gives the defaults."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML: {exc}") from None
    if data is None:
        return Config()
    return Config.from_mapping(data)


def config_path(home: Optional[str] = None) -> Path:
    """Return the configuration file location under the given home directory."""
    if home is None:
        home = os.environ.get("HOME")
        if home is None:
            raise ConfigError("Could not get HOME environment variable")
    return Path(home) / ".config" / CONFIG_FILE_NAME


def read_config(path: Optional[os.PathLike[str] | str] = None) -> Config:
    """Read the configuration file, falling back to defaults when it cannot be opened."""
    target = Path(path) if path is not None else config_path()
    try:
        with open(target, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        return Config()
    return parse_config(text)
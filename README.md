# barshell

Building blocks for a desktop status bar:

- `barshell.config` reads the bar's YAML configuration into typed objects.
  Keys are camelCase. Fields that are left out get the bar's defaults. The
  configuration covers the bar's position, its outputs, the module layout,
  the thresholds, the clock format and the colour theme.
- `barshell.icons` maps the `Icons` enumeration to Nerd Font glyphs.
- `barshell.menu` tracks which popup menu is open on a surface. Opening and
  closing a menu return the layer and keyboard requests that the surface
  needs.
- `barshell.centerbox` lays out three children at the left, centre and right.
  It keeps the centre child centred while there is room for it.

## Installing

```
pip install .
```

## Reading the configuration

```python
from pathlib import Path
from barshell.config import config_path, parse_config, read_config

config = read_config(config_path(str(Path.home())))
print(config.position, config.clock.format)

config = parse_config("""
position: Bottom
outputs:
  Targets: ["eDP-1"]
modules:
  left: [Workspaces]
  right: [[Clock, Settings]]
""")
```

`config_path()` with no argument uses the `HOME` environment variable. It
returns `~/.config/ashell.yml`.

`read_config()` returns the default configuration if the file cannot be
opened. It raises `ConfigError` if the file is malformed or holds a value of
the wrong kind. A non-empty list is required for `outputs: {Targets: [...]}`.

Colours are written as `#RGB`, `#RGBA`, `#RRGGBB` or `#RRGGBBAA`. They can
also be written as a mapping with `base`, and optionally `strong`, `weak` and
`text`. `AppearanceColor.get_weak_pair()` and `get_strong_pair()` return a
`Pair` of background and text colour. They return `None` when that variant is
not set.

## Icons

```python
from barshell.icons import Icons, icon

glyph = Icons.CPU.glyph()
text = icon(Icons.WIFI3)  # IconText(content=..., font="Symbols Nerd Font")
```

## Menus

```python
from barshell.centerbox import Point, Size
from barshell.menu import ButtonUIRef, Menu, MenuKind, MenuSize, MenuType, menu_left_offset

button = ButtonUIRef(position=Point(120.0, 0.0), viewport=Size(1920.0, 34.0))

menu = Menu(id=1)
requests = menu.toggle(MenuType(MenuKind.SETTINGS), button)
# [SetLayer(1, Layer.OVERLAY), SetKeyboardInteractivity(1, KeyboardInteractivity.NONE)]

tray = MenuType(MenuKind.TRAY, name="nm-applet")
offset = menu_left_offset(MenuSize.LARGE, button)
```

The outcome of `toggle` depends on the menu's current state:

- If the menu is closed, `toggle` opens it.
- If the same menu type is already open, `toggle` closes it.
- If a different menu type is open, `toggle` switches to the new type and
  returns no requests.

`close_if` closes the menu only when it shows the given type.

## Layout

```python
from barshell.centerbox import Alignment, Centerbox, FixedChild, Length, Limits, Size

box = (
    Centerbox([FixedChild(100, 20), FixedChild(200, 20), FixedChild(80, 20)])
    .spacing(4)
    .padding([4, 4])
    .width(Length.fill())
    .height(Length.fixed(34))
    .align_items(Alignment.CENTER)
)
node = box.layout(Limits(Size(0, 0), Size(1920, 34)))
left, center, right = node.children
```

Children are laid out in this order: left, right, then centre. Any child with
a `layout(limits)` method and a `vertical_length` property can be used.

## What this package does not do

This package does not:

- open a bar window;
- draw anything;
- watch the configuration file for changes;
- run the bar's modules, such as workspaces, tray, clock or settings.

It provides the configuration model, glyphs, menu state and layout
arithmetic that such a program would build on.

## Running the tests

```
pip install .[test]
pytest
```
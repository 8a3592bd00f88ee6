"""Layout of three bar sections: left, centred and right."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Optional, Protocol, Sequence, Union


class Alignment(Enum):
    START = "start"
    CENTER = "center"
    END = "end"


class _LengthKind(Enum):
    FILL = "fill"
    FILL_PORTION = "fill_portion"
    SHRINK = "shrink"
    FIXED = "fixed"


@dataclass(frozen=True)
class Length:
    """How much space along one axis a widget asks for."""

    kind: _LengthKind
    value: float = 0.0

    @classmethod
    def fill(cls) -> "Length":
        return cls(_LengthKind.FILL)

    @classmethod
    def shrink(cls) -> "Length":
        return cls(_LengthKind.SHRINK)

    @classmethod
    def fixed(cls, value: float) -> "Length":
        return cls(_LengthKind.FIXED, float(value))

    @classmethod
    def fill_portion(cls, factor: int) -> "Length":
        if factor < 0:
            raise ValueError("fill portion must not be negative")
        return cls(_LengthKind.FILL_PORTION, factor)

    def fill_factor(self) -> int:
        """Share of remaining space this length claims; zero for shrink and fixed."""
        if self.kind is _LengthKind.FILL:
            return 1
        if self.kind is _LengthKind.FILL_PORTION:
            return int(self.value)
        return 0


def _as_length(value: Union[Length, float, int]) -> Length:
    return value if isinstance(value, Length) else Length.fixed(value)


@dataclass(frozen=True)
class Size:
    width: float
    height: float


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class Padding:
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0

    def horizontal(self) -> float:
        return self.left + self.right

    def vertical(self) -> float:
        return self.top + self.bottom


PaddingLike = Union[Padding, float, int, Sequence[float]]


def _as_padding(value: PaddingLike) -> Padding:
    if isinstance(value, Padding):
        return value
    if isinstance(value, (int, float)):
        return Padding(value, value, value, value)
    values = tuple(value)
    if len(values) == 2:
        vertical, horizontal = values
        return Padding(vertical, horizontal, vertical, horizontal)
    if len(values) == 4:
        return Padding(*values)
    raise ValueError(f"padding needs 1, 2 or 4 values, got {len(values)}")


def _expand(size: Size, padding: Padding) -> Size:
    return Size(size.width + padding.horizontal(), size.height + padding.vertical())


def _resolve_axis(length: Length, low: float, high: float, intrinsic: float) -> float:
    if length.kind in (_LengthKind.FILL, _LengthKind.FILL_PORTION):
        return high
    if length.kind is _LengthKind.FIXED:
        return max(min(length.value, high), low)
    return max(min(intrinsic, high), low)


@dataclass(frozen=True)
class Limits:
    """Minimum and maximum size a widget may take."""

    min: Size
    max: Size

    def width(self, length: Union[Length, float]) -> "Limits":
        length = _as_length(length)
        if length.kind is not _LengthKind.FIXED:
            return self
        new_width = max(min(length.value, self.max.width), self.min.width)
        return replace(
            self,
            min=Size(new_width, self.min.height),
            max=Size(new_width, self.max.height),
        )

    def height(self, length: Union[Length, float]) -> "Limits":
        length = _as_length(length)
        if length.kind is not _LengthKind.FIXED:
            return self
        new_height = max(min(length.value, self.max.height), self.min.height)
        return replace(
            self,
            min=Size(self.min.width, new_height),
            max=Size(self.max.width, new_height),
        )

    def shrink(self, padding: PaddingLike) -> "Limits":
        """Remove the padding's extent from both bounds, never going below zero."""
        padding = _as_padding(padding)
        dw, dh = padding.horizontal(), padding.vertical()
        return Limits(
            Size(max(self.min.width - dw, 0.0), max(self.min.height - dh, 0.0)),
            Size(max(self.max.width - dw, 0.0), max(self.max.height - dh, 0.0)),
        )

    def resolve(
        self, width: Union[Length, float], height: Union[Length, float], intrinsic: Size
    ) -> Size:
        """Final size for the given lengths and the content's intrinsic size."""
        return Size(
            _resolve_axis(_as_length(width), self.min.width, self.max.width, intrinsic.width),
            _resolve_axis(_as_length(height), self.min.height, self.max.height, intrinsic.height),
        )


@dataclass
class Node:
    """A laid-out box with its position and the boxes inside it."""

    size: Size
    position: Point = Point(0.0, 0.0)
    children: list["Node"] = field(default_factory=list)

    def move_to(self, point: Point) -> None:
        self.position = point

    def align(self, horizontal: Alignment, vertical: Alignment, space: Size) -> None:
        """Shift the box within ``space`` measured from its current position."""
        x, y = self.position.x, self.position.y
        if horizontal is Alignment.CENTER:
            x += (space.width - self.size.width) / 2.0
        elif horizontal is Alignment.END:
            x += space.width - self.size.width
        if vertical is Alignment.CENTER:
            y += (space.height - self.size.height) / 2.0
        elif vertical is Alignment.END:
            y += space.height - self.size.height
        self.position = Point(x, y)


class _Child(Protocol):
    @property
    def vertical_length(self) -> Length: ...

    def layout(self, limits: Limits) -> Node: ...


@dataclass
class FixedChild:
    """A leaf with a fixed content size that may stretch to fill the height."""

    width: float
    height: float
    fill_height: bool = False

    @property
    def vertical_length(self) -> Length:
        return Length.fill() if self.fill_height else Length.shrink()

    def layout(self, limits: Limits) -> Node:
        return Node(
            limits.resolve(Length.shrink(), self.vertical_length, Size(self.width, self.height))
        )


class Centerbox:
    """Places three children at the start, centre and end of a row."""

    def __init__(self, children: Sequence[_Child]) -> None:
        children = list(children)
        if len(children) != 3:
            raise ValueError(f"a centerbox holds exactly 3 children, got {len(children)}")
        self.children = children
        self._spacing = 0.0
        self._padding = Padding()
        self._width = Length.shrink()
        self._height = Length.shrink()
        self._align_items = Alignment.START

    def spacing(self, amount: float) -> "Centerbox":
        self._spacing = float(amount)
        return self

    def padding(self, padding: PaddingLike) -> "Centerbox":
        self._padding = _as_padding(padding)
        return self

    def width(self, width: Union[Length, float]) -> "Centerbox":
        self._width = _as_length(width)
        return self

    def height(self, height: Union[Length, float]) -> "Centerbox":
        self._height = _as_length(height)
        return self

    def align_items(self, align: Alignment) -> "Centerbox":
        self._align_items = align
        return self

    def layout(self, limits: Limits) -> Node:
        """Lay out the children within ``limits``; edges first, then the centre."""
        padding = self._padding
        limits = limits.width(self._width).height(self._height).shrink(padding)
        total_spacing = self._spacing * 2
        max_cross = limits.max.height
        cross = 0.0 if self._height.kind is _LengthKind.SHRINK else max_cross
        available = limits.max.width - total_spacing
        remaining = 0.0 if self._width.kind is _LengthKind.SHRINK else max(available, 0.0)

        nodes: list[Optional[Node]] = [None, None, None]
        for index in (0, 2, 1):
            child = self.children[index]
            max_height = cross if child.vertical_length.fill_factor() != 0 else max_cross
            node = child.layout(Limits(Size(0.0, 0.0), Size(remaining, max_height)))
            remaining -= node.size.width
            cross = max(cross, node.size.height)
            nodes[index] = node

        left, center, right = nodes
        assert left is not None and center is not None and right is not None
        align = self._align_items

        left.move_to(Point(padding.left, padding.top))
        left.align(Alignment.START, align, Size(0.0, cross))
        right.move_to(Point(limits.max.width, padding.top))
        right.align(Alignment.END, align, Size(0.0, cross))

        half_available = available / 2.0
        half_center = center.size.width / 2.0
        if (
            half_available - left.size.width < half_center
            or half_available - right.size.width < half_center
        ):
            center_x = (
                limits.max.width - right.size.width - left.size.width
            ) / 2.0 + left.size.width
        else:
            center_x = limits.max.width / 2.0 + padding.horizontal() / 2.0
        center.move_to(Point(center_x, padding.top))
        center.align(Alignment.CENTER, align, Size(0.0, cross))

        main = left.size.width + center.size.width + right.size.width + total_spacing
        size = limits.resolve(self._width, self._height, Size(main, cross))
        return Node(_expand(size, padding), children=[left, center, right])
import pytest

from barshell.centerbox import (
    Alignment,
    Centerbox,
    FixedChild,
    Length,
    Limits,
    Node,
    Padding,
    Point,
    Size,
)

BAR_WIDTH = 1000.0
BAR_HEIGHT = 34.0
SCREEN = Limits(Size(0.0, 0.0), Size(BAR_WIDTH, 100.0))


def _bar(left, center, right):
    return (
        Centerbox([left, center, right])
        .spacing(4)
        .padding([4, 4])
        .width(Length.fill())
        .height(Length.fixed(BAR_HEIGHT))
        .align_items(Alignment.CENTER)
    )


def test_fill_factors():
    assert Length.fill().fill_factor() == 1
    assert Length.shrink().fill_factor() == 0
    assert Length.fixed(10).fill_factor() == 0
    assert Length.fill_portion(3).fill_factor() == 3


def test_padding_extents():
    padding = Padding(1, 2, 3, 4)
    assert padding.horizontal() == 6
    assert padding.vertical() == 4


def test_limits_fixed_width_clamps_to_max():
    limits = Limits(Size(0, 0), Size(50, 50)).width(Length.fixed(80))
    assert limits.min.width == 50 and limits.max.width == 50


def test_limits_fill_width_unchanged():
    limits = Limits(Size(0, 0), Size(50, 50))
    assert limits.width(Length.fill()) == limits


def test_limits_shrink_never_negative():
    limits = Limits(Size(2, 2), Size(5, 5)).shrink(Padding(4, 4, 4, 4))
    assert limits.min == Size(0.0, 0.0)
    assert limits.max == Size(0.0, 0.0)


def test_limits_resolve():
    limits = Limits(Size(10, 10), Size(50, 50))
    assert limits.resolve(Length.fill(), Length.shrink(), Size(20, 5)) == Size(50, 10)
    assert limits.resolve(Length.shrink(), Length.fixed(30), Size(70, 5)) == Size(50, 30)


def test_node_align():
    node = Node(Size(10, 4), Point(0, 0))
    node.align(Alignment.CENTER, Alignment.END, Size(30, 10))
    assert node.position == Point(10, 6)


def test_bar_size_matches_limits():
    bar = _bar(FixedChild(100, 20), FixedChild(200, 20), FixedChild(100, 20))
    node = bar.layout(SCREEN)
    assert node.size == Size(BAR_WIDTH, BAR_HEIGHT)
    assert len(node.children) == 3


def test_balanced_layout_positions():
    bar = _bar(FixedChild(100, 20), FixedChild(200, 20), FixedChild(100, 20))
    left, center, right = bar.layout(SCREEN).children
    padding = Padding(4, 4, 4, 4)
    assert left.position.x == padding.left
    assert center.position.x + center.size.width / 2 == BAR_WIDTH / 2
    assert right.position.x + right.size.width == BAR_WIDTH - padding.horizontal()
    cross = BAR_HEIGHT - padding.vertical()
    for child in (left, center, right):
        assert child.position.y - padding.top == (cross - child.size.height) / 2


def test_crowded_layout_places_centre_between_edges():
    bar = _bar(FixedChild(400, 20), FixedChild(200, 20), FixedChild(50, 20))
    left, center, right = bar.layout(SCREEN).children
    midpoint = center.position.x + center.size.width / 2
    assert midpoint == (right.position.x + left.size.width) / 2
    assert midpoint != BAR_WIDTH / 2


def test_fill_height_child_takes_cross_size():
    bar = _bar(FixedChild(10, 5, fill_height=True), FixedChild(10, 5), FixedChild(10, 5))
    left, center, _ = bar.layout(SCREEN).children
    assert left.size.height == BAR_HEIGHT - 8
    assert center.size.height == 5


def test_shrink_width_gives_children_no_width():
    box = Centerbox([FixedChild(10, 5), FixedChild(20, 5), FixedChild(30, 5)])
    node = box.layout(SCREEN)
    assert [child.size.width for child in node.children] == [0, 0, 0]
    assert node.size.height == 5


def test_requires_three_children():
    with pytest.raises(ValueError):
        Centerbox([FixedChild(1, 1), FixedChild(1, 1)])


def test_bad_padding_rejected():
    with pytest.raises(ValueError):
        Centerbox([FixedChild(1, 1)] * 3).padding([1, 2, 3])
from __future__ import annotations

import math

from arbor.fractal.errors import ColorComponentOutOfRange, InvalidSettings
from arbor.fractal.primitives import Color, LineSegment, Point
from arbor.fractal.settings import MAX_DEPTH, FractalSettings


def _truncating_divide(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero; ``//`` rounds toward -inf."""

    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


def color_increment(trunk_color: Color, leaf_color: Color, depth: int) -> Color:
    """Per-level color step from trunk toward leaf.

    Each channel is truncated, so ``trunk + depth * step`` can fall short of
    the leaf color. The shortfall is part of the rendered result.
    """

    return Color(
        *(
            _truncating_divide(leaf - trunk, depth)
            for trunk, leaf in zip(trunk_color, leaf_color)
        )
    )


def _project(start: Point, length: float, angle: float) -> Point:
    # Offsets are truncated toward zero before being added; y grows downward.
    return Point(
        start.x + int(length * math.cos(angle)),
        start.y - int(length * math.sin(angle)),
    )


def _checked(color: Color, level: int) -> Color:
    bad = color.out_of_range_channel()
    if bad is not None:
        channel, value = bad
        raise ColorComponentOutOfRange(channel=channel, value=value, level=level)
    return color


def generate(settings: FractalSettings) -> tuple[LineSegment, ...]:
    """Build every branch of the tree described by ``settings``.

    Branches are returned in draw order: each branch precedes its subtrees
    and the right subtree precedes the left one. A depth of zero yields no
    branches and a depth above ``MAX_DEPTH`` raises :class:`InvalidSettings`.
    Raises :class:`ColorComponentOutOfRange` if the interpolated color leaves
    the RGB range at any level; nothing partial is returned.
    """

    if settings.depth <= 0:
        return ()
    if settings.depth > MAX_DEPTH:
        raise InvalidSettings(f"depth must not exceed {MAX_DEPTH}, got {settings.depth}")

    increment = color_increment(
        settings.trunk_color, settings.leaf_color, settings.depth
    )
    segments: list[LineSegment] = []

    def grow(
        depth_count: int,
        width: float,
        length: float,
        angle: float,
        color: Color,
        start: Point,
        end: Point,
    ) -> None:
        if depth_count <= 0:
            return

        segments.append(
            LineSegment(start.x, start.y, end.x, end.y, int(width), color)
        )

        level = settings.depth - depth_count + 1
        width *= settings.ratio
        length *= settings.ratio
        color = _checked(color.shifted(increment), level)
        depth_count -= 1

        right_angle = angle - settings.right_angle
        grow(
            depth_count, width, length, right_angle, color,
            end, _project(end, length, right_angle),
        )
        left_angle = angle + settings.left_angle
        grow(
            depth_count, width, length, left_angle, color,
            end, _project(end, length, left_angle),
        )

    grow(
        settings.depth,
        float(settings.trunk_width),
        float(settings.trunk_length),
        settings.starting_angle,
        _checked(settings.trunk_color, 0),
        settings.origin,
        _project(settings.origin, settings.trunk_length, settings.starting_angle),
    )
    return tuple(segments)

"""Generation parameters in UI units and in the units the generator expects.

``RawSettings`` mirrors what a control surface produces: an integer ratio
percentage and angles in degrees. ``normalize_settings`` validates those
values and converts them into a :class:`FractalSettings`.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from numbers import Integral, Real

from arbor.fractal.errors import InvalidSettings
from arbor.fractal.primitives import (CHANNEL_MAX, CHANNEL_MIN, Color,
                                      Point)

DEFAULT_ORIGIN = Point(500, 800)
DEFAULT_STARTING_ANGLE = math.pi / 2
# A tree of depth d has 2^d - 1 branches.
MAX_DEPTH = 20


@dataclass(frozen=True)
class FractalSettings:
    depth: int
    ratio: float
    left_angle: float
    right_angle: float
    trunk_length: float
    trunk_width: int
    trunk_color: Color
    leaf_color: Color
    origin: Point = DEFAULT_ORIGIN
    starting_angle: float = DEFAULT_STARTING_ANGLE


@dataclass(frozen=True)
class RawSettings:
    depth: int
    ratio_percent: float
    left_angle_deg: float
    right_angle_deg: float
    trunk_length: float
    trunk_width: int
    trunk_color: Sequence[int]
    leaf_color: Sequence[int]

    def normalize(
        self,
        *,
        origin: tuple[int, int] = DEFAULT_ORIGIN,
        starting_angle: float = DEFAULT_STARTING_ANGLE,
    ) -> FractalSettings:
        return normalize_settings(
            depth=self.depth,
            ratio_percent=self.ratio_percent,
            left_angle_deg=self.left_angle_deg,
            right_angle_deg=self.right_angle_deg,
            trunk_length=self.trunk_length,
            trunk_width=self.trunk_width,
            trunk_color=self.trunk_color,
            leaf_color=self.leaf_color,
            origin=origin,
            starting_angle=starting_angle,
        )


DEFAULT_RAW_SETTINGS = RawSettings(
    depth=12,
    ratio_percent=60,
    left_angle_deg=45,
    right_angle_deg=45,
    trunk_length=250,
    trunk_width=25,
    trunk_color=Color(0, 0, 255),
    leaf_color=Color(0, 255, 0),
)


def _is_integer(value: object) -> bool:
    return isinstance(value, Integral) and not isinstance(value, bool)


def _require_finite(name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidSettings(f"{name} must be a number, got {value!r}")
    converted = float(value)
    if not math.isfinite(converted):
        raise InvalidSettings(f"{name} must be finite, got {value!r}")
    return converted


def coerce_color(name: str, value: Sequence[int]) -> Color:
    """Build a :class:`Color` from an RGB sequence, rejecting bad channels."""

    try:
        channels = tuple(value)
    except TypeError as exc:
        raise InvalidSettings(f"{name} must be an RGB sequence, got {value!r}") from exc
    if len(channels) != 3:
        raise InvalidSettings(f"{name} must have exactly three channels, got {value!r}")
    for channel in channels:
        if not _is_integer(channel):
            raise InvalidSettings(f"{name} channels must be integers, got {value!r}")
        if not CHANNEL_MIN <= channel <= CHANNEL_MAX:
            raise InvalidSettings(
                f"{name} channels must be between {CHANNEL_MIN} and {CHANNEL_MAX}, "
                f"got {value!r}"
            )
    return Color(*(int(channel) for channel in channels))


def normalize_settings(
    *,
    depth: int,
    ratio_percent: float,
    left_angle_deg: float,
    right_angle_deg: float,
    trunk_length: float,
    trunk_width: int,
    trunk_color: Sequence[int],
    leaf_color: Sequence[int],
    origin: tuple[int, int] = DEFAULT_ORIGIN,
    starting_angle: float = DEFAULT_STARTING_ANGLE,
) -> FractalSettings:
    """Validate UI-unit values and convert them to generator units.

    The ratio is scaled by ``0.01`` (rather than divided by 100) so the
    resulting floats match the values the sliders have always produced.
    """

    if not _is_integer(depth) or not 1 <= depth <= MAX_DEPTH:
        raise InvalidSettings(
            f"depth must be an integer between 1 and {MAX_DEPTH}, got {depth!r}"
        )

    ratio = _require_finite("ratio_percent", ratio_percent)
    if ratio < 0:
        raise InvalidSettings(f"ratio_percent must not be negative, got {ratio_percent!r}")

    left = _require_finite("left_angle_deg", left_angle_deg)
    right = _require_finite("right_angle_deg", right_angle_deg)

    length = _require_finite("trunk_length", trunk_length)
    if length <= 0:
        raise InvalidSettings(f"trunk_length must be positive, got {trunk_length!r}")

    if not _is_integer(trunk_width) or trunk_width < 0:
        raise InvalidSettings(
            f"trunk_width must be a non-negative integer, got {trunk_width!r}"
        )

    if len(origin) != 2 or not all(_is_integer(coord) for coord in origin):
        raise InvalidSettings(f"origin must be two integer coordinates, got {origin!r}")

    return FractalSettings(
        depth=int(depth),
        ratio=ratio * 0.01,
        left_angle=math.radians(left),
        right_angle=math.radians(right),
        trunk_length=length,
        trunk_width=int(trunk_width),
        trunk_color=coerce_color("trunk_color", trunk_color),
        leaf_color=coerce_color("leaf_color", leaf_color),
        origin=Point(int(origin[0]), int(origin[1])),
        starting_angle=_require_finite("starting_angle", starting_angle),
    )

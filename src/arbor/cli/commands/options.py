from __future__ import annotations

from typing import Annotated

import pygame
import typer

from arbor.fractal.errors import InvalidSettings
from arbor.fractal.primitives import Color
from arbor.fractal.settings import DEFAULT_RAW_SETTINGS, RawSettings

DepthOption = Annotated[int, typer.Option("--depth", help="Recursion depth")]
RatioOption = Annotated[
    float, typer.Option("--ratio", help="Child to parent ratio, in percent")
]
LeftAngleOption = Annotated[
    float, typer.Option("--left-angle", help="Left child angle, in degrees")
]
RightAngleOption = Annotated[
    float, typer.Option("--right-angle", help="Right child angle, in degrees")
]
TrunkLengthOption = Annotated[
    float, typer.Option("--trunk-length", help="Trunk length, in pixels")
]
TrunkWidthOption = Annotated[
    int, typer.Option("--trunk-width", help="Trunk width, in pixels")
]
TrunkColorOption = Annotated[
    str, typer.Option("--trunk-color", help="Color name or #rrggbb")
]
LeafColorOption = Annotated[
    str, typer.Option("--leaf-color", help="Color name or #rrggbb")
]

DEFAULTS = DEFAULT_RAW_SETTINGS
DEFAULT_TRUNK_COLOR = "blue"
DEFAULT_LEAF_COLOR = "green"


def parse_color(value: str) -> Color:
    """Resolve a pygame color name or hex string to an RGB color."""

    try:
        color = pygame.Color(value)
    except ValueError as exc:
        raise InvalidSettings(f"Unknown color {value!r}") from exc
    return Color(color.r, color.g, color.b)


def build_raw_settings(
    *,
    depth: int,
    ratio: float,
    left_angle: float,
    right_angle: float,
    trunk_length: float,
    trunk_width: int,
    trunk_color: str,
    leaf_color: str,
) -> RawSettings:
    return RawSettings(
        depth=depth,
        ratio_percent=ratio,
        left_angle_deg=left_angle,
        right_angle_deg=right_angle,
        trunk_length=trunk_length,
        trunk_width=trunk_width,
        trunk_color=parse_color(trunk_color),
        leaf_color=parse_color(leaf_color),
    )


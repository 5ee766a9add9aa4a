from pathlib import Path
from typing import Annotated

import pygame
import typer

from arbor.cli.commands.options import (DEFAULT_LEAF_COLOR,
                                        DEFAULT_TRUNK_COLOR, DEFAULTS,
                                        DepthOption, LeafColorOption,
                                        LeftAngleOption, RatioOption,
                                        RightAngleOption, TrunkColorOption,
                                        TrunkLengthOption, TrunkWidthOption,
                                        build_raw_settings)
from arbor.fractal.errors import FractalError
from arbor.fractal.store import FractalStore
from arbor.renderers.tree import FractalDrawing
from arbor.runtime.container import build_runtime_container
from arbor.runtime.frame_exporter import FrameExporter
from arbor.utilities.env import Configuration
from arbor.utilities.logging import get_logger

logger = get_logger(__name__)


def render_command(
    output: Annotated[Path, typer.Option("--output", "-o", help="Image file to write")],
    depth: DepthOption = DEFAULTS.depth,
    ratio: RatioOption = DEFAULTS.ratio_percent,
    left_angle: LeftAngleOption = DEFAULTS.left_angle_deg,
    right_angle: RightAngleOption = DEFAULTS.right_angle_deg,
    trunk_length: TrunkLengthOption = DEFAULTS.trunk_length,
    trunk_width: TrunkWidthOption = DEFAULTS.trunk_width,
    trunk_color: TrunkColorOption = DEFAULT_TRUNK_COLOR,
    leaf_color: LeafColorOption = DEFAULT_LEAF_COLOR,
) -> None:
    """Render the tree without opening a window and save it as an image."""

    try:
        raw = build_raw_settings(
            depth=depth,
            ratio=ratio,
            left_angle=left_angle,
            right_angle=right_angle,
            trunk_length=trunk_length,
            trunk_width=trunk_width,
            trunk_color=trunk_color,
            leaf_color=leaf_color,
        )
        container = build_runtime_container(initial=raw)
        drawing = container.resolve(FractalDrawing)
        container.resolve(FractalStore).apply_settings(raw)
        surface = pygame.Surface(Configuration.window_size())
        drawing.render(surface)
        image = container.resolve(FrameExporter).export(surface)
    except FractalError as error:
        logger.error("Cannot render fractal: %s", error)
        raise typer.Exit(code=1) from error
    except ValueError as error:
        logger.error("Invalid configuration: %s", error)
        raise typer.Exit(code=1) from error

    output.parent.mkdir(parents=True, exist_ok=True)
    image.convert("RGB").save(output)
    logger.info("Wrote %d branch(es) to %s", len(drawing.fractal), output)

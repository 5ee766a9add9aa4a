import typer

from arbor.cli.commands.options import (DEFAULT_LEAF_COLOR,
                                        DEFAULT_TRUNK_COLOR, DEFAULTS,
                                        DepthOption, LeafColorOption,
                                        LeftAngleOption, RatioOption,
                                        RightAngleOption, TrunkColorOption,
                                        TrunkLengthOption, TrunkWidthOption,
                                        build_raw_settings)
from arbor.controls.panel import SettingsPanel
from arbor.fractal.errors import FractalError
from arbor.runtime.container import build_runtime_container
from arbor.runtime.viewer import FractalViewer
from arbor.utilities.logging import get_logger

logger = get_logger(__name__)


def show_command(
    depth: DepthOption = DEFAULTS.depth,
    ratio: RatioOption = DEFAULTS.ratio_percent,
    left_angle: LeftAngleOption = DEFAULTS.left_angle_deg,
    right_angle: RightAngleOption = DEFAULTS.right_angle_deg,
    trunk_length: TrunkLengthOption = DEFAULTS.trunk_length,
    trunk_width: TrunkWidthOption = DEFAULTS.trunk_width,
    trunk_color: TrunkColorOption = DEFAULT_TRUNK_COLOR,
    leaf_color: LeafColorOption = DEFAULT_LEAF_COLOR,
) -> None:
    """Open an interactive window; the keyboard adjusts the settings."""

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
    except FractalError as error:
        logger.error("Invalid settings: %s", error)
        raise typer.Exit(code=1) from error

    try:
        container = build_runtime_container(initial=raw)
        viewer = container.resolve(FractalViewer)
    except ValueError as error:
        logger.error("Invalid configuration: %s", error)
        raise typer.Exit(code=1) from error
    if not container.resolve(SettingsPanel).publish():
        raise typer.Exit(code=1)
    viewer.run()

from __future__ import annotations

import math
from typing import Any, Mapping

from lagom import Container, Singleton

from arbor.controls.panel import SettingsPanel
from arbor.fractal.provider import FractalStateProvider
from arbor.fractal.settings import DEFAULT_RAW_SETTINGS, RawSettings
from arbor.fractal.store import FractalStore
from arbor.renderers.tree import FractalDrawing
from arbor.runtime.event_handler import KeyboardEventHandler
from arbor.runtime.frame_exporter import FrameExporter
from arbor.runtime.viewer import FractalViewer
from arbor.utilities.env import Configuration
from arbor.utilities.logging import get_logger

RuntimeContainer = Container

logger = get_logger(__name__)


def build_runtime_container(
    initial: RawSettings = DEFAULT_RAW_SETTINGS,
    overrides: Mapping[type[Any], object] | None = None,
) -> RuntimeContainer:
    container = Container()
    logger.debug("Created Lagom container for runtime configuration.")
    configure_runtime_container(
        container=container,
        initial=initial,
        overrides=overrides,
    )
    return container


def configure_runtime_container(
    *,
    container: RuntimeContainer,
    initial: RawSettings,
    overrides: Mapping[type[Any], object] | None = None,
) -> None:
    logger.debug(
        "Configuring Lagom runtime container with overrides=%s.",
        set(overrides.keys()) if overrides else set(),
    )
    _bind(
        container,
        overrides,
        FractalStore,
        Singleton(
            lambda _resolver: FractalStore(
                origin=Configuration.origin(),
                starting_angle=math.radians(Configuration.starting_angle_deg()),
            )
        ),
    )
    _bind(
        container,
        overrides,
        FractalDrawing,
        Singleton(
            lambda resolver: FractalDrawing(
                resolver[FractalStore],
                round_caps=Configuration.round_caps(),
            )
        ),
    )
    _bind(
        container,
        overrides,
        SettingsPanel,
        Singleton(lambda resolver: SettingsPanel(resolver[FractalStore], initial)),
    )
    _bind(
        container,
        overrides,
        FractalStateProvider,
        Singleton(lambda resolver: FractalStateProvider(resolver[FractalStore])),
    )
    _bind(
        container,
        overrides,
        FrameExporter,
        Singleton(lambda _resolver: FrameExporter()),
    )
    _bind(
        container,
        overrides,
        KeyboardEventHandler,
        Singleton(lambda resolver: KeyboardEventHandler(resolver[SettingsPanel])),
    )
    _bind(
        container,
        overrides,
        FractalViewer,
        Singleton(
            lambda resolver: FractalViewer(
                drawing=resolver[FractalDrawing],
                provider=resolver[FractalStateProvider],
                event_handler=resolver[KeyboardEventHandler],
                window_size=Configuration.window_size(),
                fps=Configuration.viewer_fps(),
            )
        ),
    )


def _bind(
    container: RuntimeContainer,
    overrides: Mapping[type[Any], object] | None,
    key: type[Any],
    value: object,
) -> None:
    if overrides and key in overrides:
        container[key] = overrides[key]
        logger.debug("Applied Lagom override for %s.", key)
        return
    if key in container.defined_types:
        logger.debug("Lagom already defined %s; skipping registration.", key)
        return
    container[key] = value
    logger.debug("Registered Lagom provider for %s.", key)

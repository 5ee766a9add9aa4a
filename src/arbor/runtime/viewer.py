from __future__ import annotations

import math

import pygame
from reactivex import abc
from reactivex import operators as ops

from arbor.fractal.provider import FractalStateProvider
from arbor.fractal.store import GeneratedFractal
from arbor.renderers.tree import FractalDrawing
from arbor.runtime.event_handler import KeyboardEventHandler
from arbor.utilities.logging import get_logger

logger = get_logger(__name__)

WINDOW_TITLE = "Fractal Drawing"


def window_caption(fractal: GeneratedFractal) -> str:
    settings = fractal.settings
    if settings is None:
        return WINDOW_TITLE
    return (
        f"{WINDOW_TITLE} - depth {settings.depth}, "
        f"ratio {settings.ratio:.2f}, "
        f"angles {math.degrees(settings.left_angle):.0f}/"
        f"{math.degrees(settings.right_angle):.0f}, "
        f"{len(fractal)} branches"
    )


class FractalViewer:
    """Window loop that redraws the tree whenever the store publishes."""

    def __init__(
        self,
        *,
        drawing: FractalDrawing,
        provider: FractalStateProvider,
        event_handler: KeyboardEventHandler,
        window_size: tuple[int, int],
        fps: int,
    ) -> None:
        self._drawing = drawing
        self._provider = provider
        self._event_handler = event_handler
        self._window_size = window_size
        self._fps = fps
        self._caption_subscription: abc.DisposableBase | None = None

    def run(self) -> None:
        pygame.init()
        window = pygame.display.set_mode(self._window_size)
        clock = pygame.time.Clock()
        self._caption_subscription = self._provider.observable().pipe(
            ops.map(window_caption),
            ops.distinct_until_changed(),
        ).subscribe(on_next=pygame.display.set_caption)
        logger.info("Viewer started at %sx%s", *self._window_size)
        try:
            while self._event_handler.handle_events():
                if self._drawing.dirty:
                    self._drawing.render(window)
                    pygame.display.flip()
                clock.tick(self._fps)
        finally:
            self._caption_subscription.dispose()
            self._caption_subscription = None
            pygame.quit()
            logger.info("Viewer closed")

from __future__ import annotations

import pygame

from arbor.fractal.primitives import LineSegment
from arbor.fractal.store import FractalStore, GeneratedFractal
from arbor.utilities.logging import get_logger

logger = get_logger(__name__)

BACKGROUND_COLOR = (0, 0, 0)


def draw_segment(
    surface: pygame.Surface, segment: LineSegment, *, round_caps: bool = True
) -> None:
    """Paint one branch onto ``surface``."""

    # A zero-width stroke still paints a hairline.
    width = max(segment.width, 1)
    pygame.draw.line(surface, segment.color, segment.start, segment.end, width)
    if round_caps and width > 1:
        radius = width // 2
        pygame.draw.circle(surface, segment.color, segment.start, radius)
        pygame.draw.circle(surface, segment.color, segment.end, radius)


class FractalDrawing:
    """Observer that keeps the latest fractal and paints it on request."""

    def __init__(
        self,
        store: FractalStore,
        *,
        background: tuple[int, int, int] = BACKGROUND_COLOR,
        round_caps: bool = True,
    ) -> None:
        self._store = store
        self.background = background
        self.round_caps = round_caps
        self._fractal = store.snapshot()
        self.dirty = True
        store.register(self)

    @property
    def fractal(self) -> GeneratedFractal:
        return self._fractal

    def update(self) -> None:
        self._fractal = self._store.snapshot()
        self.dirty = True

    def render(self, surface: pygame.Surface) -> None:
        surface.fill(self.background)
        for segment in self._fractal:
            draw_segment(surface, segment, round_caps=self.round_caps)
        self.dirty = False
        logger.debug("Rendered %d branch(es)", len(self._fractal))

    def close(self) -> None:
        self._store.unregister(self)

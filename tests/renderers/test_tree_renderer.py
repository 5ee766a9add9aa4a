"""Tests for the pygame branch renderer."""

from __future__ import annotations

import numpy as np
import pygame
import pytest

from arbor.fractal.primitives import Color, LineSegment
from arbor.fractal.settings import RawSettings
from arbor.fractal.store import FractalStore
from arbor.renderers.tree import FractalDrawing, draw_segment

RED = Color(255, 0, 0)


def _rgb(surface: pygame.Surface, position: tuple[int, int]) -> tuple[int, int, int]:
    return tuple(surface.get_at(position))[:3]


class TestDrawSegment:
    """The single-branch drawing primitive."""

    def test_zero_width_draws_a_hairline(self) -> None:
        """Width zero still paints one pixel wide."""
        surface = pygame.Surface((50, 50))

        draw_segment(surface, LineSegment(5, 10, 40, 10, 0, RED))

        assert _rgb(surface, (20, 10)) == RED
        assert _rgb(surface, (20, 12)) == (0, 0, 0)

    @pytest.mark.parametrize(("round_caps", "expected"), [(True, RED), (False, (0, 0, 0))])
    def test_round_caps_extend_past_endpoints(
        self, round_caps: bool, expected: tuple[int, int, int]
    ) -> None:
        """Round caps paint a disc around each end of a thick branch."""
        surface = pygame.Surface((50, 50))

        draw_segment(
            surface, LineSegment(10, 25, 30, 25, 10, RED), round_caps=round_caps
        )

        assert _rgb(surface, (20, 25)) == RED
        assert _rgb(surface, (7, 25)) == expected


class TestFractalDrawing:
    """The observer that redraws the published fractal."""

    def test_registers_and_pulls_on_update(self, scenario_raw: RawSettings) -> None:
        """Publishing a fractal hands it to the drawing and marks it dirty."""
        store = FractalStore(origin=(50, 100))
        drawing = FractalDrawing(store)
        surface = pygame.Surface((100, 100))
        drawing.render(surface)
        assert drawing.dirty is False

        fractal = store.apply_settings(scenario_raw)

        assert store.observers == (drawing,)
        assert drawing.fractal is fractal
        assert drawing.dirty is True

    def test_render_paints_branches_over_black(self, scenario_raw: RawSettings) -> None:
        """The trunk is blue, the children blend toward green, the rest is black."""
        store = FractalStore(origin=(100, 200))
        drawing = FractalDrawing(store, round_caps=False)
        store.apply_settings(scenario_raw)
        surface = pygame.Surface((200, 200))
        surface.fill((255, 255, 255))

        drawing.render(surface)

        pixels = pygame.surfarray.array3d(surface)
        assert _rgb(surface, (100, 150)) == (0, 0, 255)
        assert _rgb(surface, (117, 83)) == (0, 127, 128)
        assert _rgb(surface, (5, 5)) == (0, 0, 0)
        painted = np.any(pixels != 0, axis=-1)
        assert 0 < painted.sum() < painted.size
        assert drawing.dirty is False

    def test_close_unregisters(self) -> None:
        """A closed drawing stops receiving updates."""
        store = FractalStore()
        drawing = FractalDrawing(store)

        drawing.close()

        assert store.observers == ()

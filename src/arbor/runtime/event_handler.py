from __future__ import annotations

from collections.abc import Iterable

import pygame

from arbor.controls.panel import SettingsPanel
from arbor.utilities.logging import get_logger

logger = get_logger(__name__)

# key -> (setting, steps)
NUDGE_BINDINGS: dict[int, tuple[str, int]] = {
    pygame.K_UP: ("depth", 1),
    pygame.K_DOWN: ("depth", -1),
    pygame.K_RIGHT: ("ratio_percent", 1),
    pygame.K_LEFT: ("ratio_percent", -1),
    pygame.K_q: ("left_angle_deg", 1),
    pygame.K_a: ("left_angle_deg", -1),
    pygame.K_w: ("right_angle_deg", 1),
    pygame.K_s: ("right_angle_deg", -1),
    pygame.K_e: ("trunk_length", 1),
    pygame.K_d: ("trunk_length", -1),
    pygame.K_r: ("trunk_width", 1),
    pygame.K_f: ("trunk_width", -1),
}

PALETTE = (
    "blue",
    "green",
    "red",
    "yellow",
    "orange",
    "purple",
    "cyan",
    "magenta",
    "white",
    "brown",
)


def palette_color(name: str) -> tuple[int, int, int]:
    color = pygame.Color(name)
    return color.r, color.g, color.b


class KeyboardEventHandler:
    """Translate pygame events into settings panel actions."""

    def __init__(self, panel: SettingsPanel) -> None:
        self._panel = panel
        self._trunk_index = 0
        self._leaf_index = 1

    def handle_events(self, events: Iterable[pygame.event.Event] | None = None) -> bool:
        running = True
        for event in pygame.event.get() if events is None else events:
            running = self.handle(event) and running
        return running

    def handle(self, event: pygame.event.Event) -> bool:
        """Apply ``event``; return ``False`` once the viewer should close."""

        if event.type == pygame.QUIT:
            return False
        if event.type != pygame.KEYDOWN:
            return True
        if event.key == pygame.K_ESCAPE:
            return False

        binding = NUDGE_BINDINGS.get(event.key)
        if binding is not None:
            field, steps = binding
            self._panel.nudge(field, steps)
            logger.info("%s -> %s", field, getattr(self._panel.settings, field))
        elif event.key == pygame.K_t:
            self._trunk_index = (self._trunk_index + 1) % len(PALETTE)
            self._panel.set_trunk_color(palette_color(PALETTE[self._trunk_index]))
            logger.info("trunk_color -> %s", PALETTE[self._trunk_index])
        elif event.key == pygame.K_l:
            self._leaf_index = (self._leaf_index + 1) % len(PALETTE)
            self._panel.set_leaf_color(palette_color(PALETTE[self._leaf_index]))
            logger.info("leaf_color -> %s", PALETTE[self._leaf_index])
        return True

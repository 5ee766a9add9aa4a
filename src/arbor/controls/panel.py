from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from dataclasses import dataclass

from arbor.fractal.errors import FractalError
from arbor.fractal.settings import (DEFAULT_RAW_SETTINGS, MAX_DEPTH,
                                    RawSettings)
from arbor.fractal.store import FractalStore
from arbor.utilities.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class SliderLimits:
    minimum: int
    maximum: int
    step: int

    def clamp(self, value: float) -> float:
        return min(max(value, self.minimum), self.maximum)


SLIDER_LIMITS: dict[str, SliderLimits] = {
    "depth": SliderLimits(4, MAX_DEPTH, 1),
    "ratio_percent": SliderLimits(40, 80, 5),
    "left_angle_deg": SliderLimits(0, 90, 5),
    "right_angle_deg": SliderLimits(0, 90, 5),
    "trunk_length": SliderLimits(100, 400, 25),
    "trunk_width": SliderLimits(0, 50, 5),
}


class SettingsPanel:
    """Settings producer for interactive front ends.

    Holds the current values in UI units, keeps numeric values inside the
    slider bounds and publishes every change to the store.
    """

    def __init__(
        self, store: FractalStore, initial: RawSettings = DEFAULT_RAW_SETTINGS
    ) -> None:
        self._store = store
        self._settings = initial

    @property
    def settings(self) -> RawSettings:
        return self._settings

    def set_value(self, field: str, value: float) -> bool:
        limits = self._limits(field)
        clamped = limits.clamp(value)
        if field in ("depth", "trunk_width"):
            clamped = int(clamped)
        self._settings = dataclasses.replace(self._settings, **{field: clamped})
        return self.publish()

    def nudge(self, field: str, steps: int) -> bool:
        limits = self._limits(field)
        current = getattr(self._settings, field)
        return self.set_value(field, current + steps * limits.step)

    def set_trunk_color(self, color: Sequence[int] | None) -> bool:
        # None means the choice was cancelled; the previous color stays.
        if color is not None:
            self._settings = dataclasses.replace(self._settings, trunk_color=color)
        return self.publish()

    def set_leaf_color(self, color: Sequence[int] | None) -> bool:
        if color is not None:
            self._settings = dataclasses.replace(self._settings, leaf_color=color)
        return self.publish()

    def publish(self) -> bool:
        try:
            self._store.apply_settings(self._settings)
        except FractalError as error:
            logger.error("Could not apply settings: %s", error)
            return False
        return True

    @staticmethod
    def _limits(field: str) -> SliderLimits:
        try:
            return SLIDER_LIMITS[field]
        except KeyError as exc:
            raise ValueError(f"Unknown adjustable setting {field!r}") from exc

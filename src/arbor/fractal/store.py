"""Holds the current fractal and tells observers when it changes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import StrEnum
from time import perf_counter
from typing import Protocol, runtime_checkable

from arbor.fractal.errors import FractalError
from arbor.fractal.generator import generate
from arbor.fractal.primitives import LineSegment, Point
from arbor.fractal.settings import (DEFAULT_ORIGIN, DEFAULT_STARTING_ANGLE,
                                    FractalSettings, RawSettings)
from arbor.utilities.logging import get_logger

logger = get_logger(__name__)


@runtime_checkable
class FractalObserver(Protocol):
    def update(self) -> None:
        """Called after the store publishes a new fractal."""


@dataclass(frozen=True)
class GeneratedFractal:
    """Branches produced by one generation pass and the settings behind them."""

    segments: tuple[LineSegment, ...] = ()
    settings: FractalSettings | None = None

    def __iter__(self) -> Iterator[LineSegment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)

    @classmethod
    def empty(cls) -> GeneratedFractal:
        return cls()


class StoreState(StrEnum):
    IDLE = "idle"
    REGENERATING = "regenerating"


class FractalStore:
    """Subject side of the fractal pipeline.

    Every successful :meth:`apply` replaces the snapshot wholesale and then
    calls ``update()`` on each registered observer, in registration order.
    Observers pull the new value through :meth:`snapshot`. A failed pass
    leaves the previous snapshot in place and notifies nobody.
    """

    def __init__(
        self,
        *,
        origin: tuple[int, int] = DEFAULT_ORIGIN,
        starting_angle: float = DEFAULT_STARTING_ANGLE,
    ) -> None:
        self._origin = Point(*origin)
        self._starting_angle = starting_angle
        self._observers: list[FractalObserver] = []
        self._state = StoreState.IDLE
        self._fractal = GeneratedFractal.empty()

    @property
    def origin(self) -> Point:
        return self._origin

    @property
    def starting_angle(self) -> float:
        return self._starting_angle

    @property
    def state(self) -> StoreState:
        return self._state

    @property
    def observers(self) -> tuple[FractalObserver, ...]:
        return tuple(self._observers)

    def snapshot(self) -> GeneratedFractal:
        return self._fractal

    def apply_settings(self, raw: RawSettings) -> GeneratedFractal:
        """Normalize ``raw`` and publish the fractal it describes."""

        return self.apply(self._normalize(raw))

    def apply(self, settings: FractalSettings) -> GeneratedFractal:
        """Regenerate from canonical ``settings`` and notify observers.

        Runs even when ``settings`` equals the current settings.
        """

        fractal = self._regenerate(settings)
        self._fractal = fractal
        self.notify_all()
        return fractal

    def register(self, observer: FractalObserver) -> None:
        if any(existing is observer for existing in self._observers):
            return
        self._observers.append(observer)
        logger.debug("Registered fractal observer %r", observer)

    def unregister(self, observer: FractalObserver) -> None:
        for index, existing in enumerate(self._observers):
            if existing is observer:
                del self._observers[index]
                logger.debug("Unregistered fractal observer %r", observer)
                return

    def notify_all(self) -> None:
        for observer in tuple(self._observers):
            try:
                observer.update()
            except Exception:
                logger.exception("Fractal observer %r failed during update", observer)

    def _normalize(self, raw: RawSettings) -> FractalSettings:
        try:
            return raw.normalize(
                origin=self._origin, starting_angle=self._starting_angle
            )
        except FractalError as error:
            logger.warning("Rejected fractal settings %s: %s", raw, error)
            raise

    def _regenerate(self, settings: FractalSettings) -> GeneratedFractal:
        self._state = StoreState.REGENERATING
        started_at = perf_counter()
        try:
            segments = generate(settings)
        except FractalError as error:
            logger.warning("Discarded generation pass for %s: %s", settings, error)
            raise
        finally:
            self._state = StoreState.IDLE
        logger.debug(
            "Generated %d branch(es) at depth %d in %.3fms",
            len(segments),
            settings.depth,
            (perf_counter() - started_at) * 1000,
        )
        return GeneratedFractal(segments=segments, settings=settings)

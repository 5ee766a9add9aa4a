"""Tests for the reactive view of the fractal store."""

from __future__ import annotations

import dataclasses

from reactivex import operators as ops

from arbor.fractal.provider import FractalStateProvider
from arbor.fractal.settings import RawSettings
from arbor.fractal.store import FractalStore, GeneratedFractal


class TestFractalStateProvider:
    """Snapshots flow into subscribers until they dispose."""

    def test_subscription_starts_with_current_snapshot(
        self, scenario_raw: RawSettings
    ) -> None:
        """Late subscribers see the fractal that is already published."""
        store = FractalStore()
        fractal = store.apply_settings(scenario_raw)
        received: list[GeneratedFractal] = []

        FractalStateProvider(store).observable().subscribe(received.append)

        assert received == [fractal]

    def test_each_pass_is_pushed(self, scenario_raw: RawSettings) -> None:
        """Every successful apply emits the new snapshot."""
        store = FractalStore()
        counts: list[int] = []

        FractalStateProvider(store).observable().pipe(ops.map(len)).subscribe(
            counts.append
        )
        store.apply_settings(scenario_raw)
        store.apply_settings(dataclasses.replace(scenario_raw, depth=3))

        assert counts == [0, 3, 7]

    def test_dispose_unregisters_from_store(self, scenario_raw: RawSettings) -> None:
        """Disposing removes the bridging observer from the registry."""
        store = FractalStore()
        received: list[GeneratedFractal] = []
        subscription = FractalStateProvider(store).observable().subscribe(
            received.append
        )
        assert len(store.observers) == 1

        subscription.dispose()
        store.apply_settings(scenario_raw)

        assert store.observers == ()
        assert received == [GeneratedFractal.empty()]

    def test_each_subscription_registers_separately(self) -> None:
        """The observable is cold: two subscribers, two registrations."""
        store = FractalStore()
        observable = FractalStateProvider(store).observable()

        first = observable.subscribe(lambda _: None)
        second = observable.subscribe(lambda _: None)

        assert len(store.observers) == 2
        first.dispose()
        second.dispose()
        assert store.observers == ()

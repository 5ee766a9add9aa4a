import math

import pytest

from arbor.controls.panel import SettingsPanel
from arbor.fractal.provider import FractalStateProvider
from arbor.fractal.store import FractalStore
from arbor.renderers.tree import FractalDrawing
from arbor.runtime.container import build_runtime_container
from arbor.runtime.event_handler import KeyboardEventHandler
from arbor.runtime.frame_exporter import FrameExporter
from arbor.runtime.viewer import FractalViewer


class TestRuntimeContainer:
    """Validate container wiring so every collaborator shares one store."""

    def test_container_registers_singletons(self) -> None:
        """Resolving twice returns the same instances."""
        container = build_runtime_container()

        for key in (
            FractalStore,
            FractalDrawing,
            SettingsPanel,
            FractalStateProvider,
            FrameExporter,
            KeyboardEventHandler,
            FractalViewer,
        ):
            assert container.resolve(key) is container.resolve(key)

    def test_drawing_and_panel_share_the_store(self, scenario_raw) -> None:
        """Publishing through the panel reaches the drawing."""
        container = build_runtime_container(initial=scenario_raw)
        drawing = container.resolve(FractalDrawing)

        assert container.resolve(SettingsPanel).publish() is True

        assert len(drawing.fractal) == 3
        assert drawing.fractal is container.resolve(FractalStore).snapshot()

    def test_store_uses_configured_origin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Origin and starting angle come from the environment."""
        monkeypatch.setenv("ARBOR_WINDOW_WIDTH", "300")
        monkeypatch.setenv("ARBOR_WINDOW_HEIGHT", "200")
        monkeypatch.setenv("ARBOR_STARTING_ANGLE_DEG", "45")

        store = build_runtime_container().resolve(FractalStore)

        assert store.origin == (150, 200)
        assert store.starting_angle == pytest.approx(math.pi / 4)

    def test_overrides_replace_bindings(self) -> None:
        """Tests can swap the store without touching runtime code."""
        stub_store = FractalStore(origin=(1, 2))
        container = build_runtime_container(overrides={FractalStore: stub_store})

        assert container.resolve(FractalStore) is stub_store
        assert container.resolve(FractalDrawing) in stub_store.observers

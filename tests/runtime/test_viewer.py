from arbor.fractal.provider import FractalStateProvider
from arbor.fractal.store import FractalStore, GeneratedFractal
from arbor.renderers.tree import FractalDrawing
from arbor.runtime.viewer import WINDOW_TITLE, FractalViewer, window_caption


class _ScriptedHandler:
    def __init__(self, frames: int) -> None:
        self.remaining = frames
        self.calls = 0

    def handle_events(self) -> bool:
        self.calls += 1
        self.remaining -= 1
        return self.remaining >= 0


class TestFractalViewer:
    """Window loop behaviour with a headless SDL driver."""

    def test_caption_describes_fractal(self, scenario_raw) -> None:
        """The caption summarises depth, ratio, angles and branch count."""
        fractal = FractalStore().apply_settings(scenario_raw)

        caption = window_caption(fractal)

        assert caption == (
            f"{WINDOW_TITLE} - depth 2, ratio 0.50, angles 45/45, 3 branches"
        )
        assert window_caption(GeneratedFractal.empty()) == WINDOW_TITLE

    def test_run_renders_dirty_drawing_and_releases_store(self, scenario_raw) -> None:
        """The loop paints once, stops on request and unsubscribes the caption feed."""
        store = FractalStore(origin=(32, 64))
        drawing = FractalDrawing(store)
        store.apply_settings(scenario_raw)
        handler = _ScriptedHandler(frames=2)
        viewer = FractalViewer(
            drawing=drawing,
            provider=FractalStateProvider(store),
            event_handler=handler,
            window_size=(64, 64),
            fps=1000,
        )

        viewer.run()

        assert handler.calls == 3
        assert drawing.dirty is False
        assert store.observers == (drawing,)

from arbor.renderers.tree import FractalDrawing, draw_segment  # noqa: F401

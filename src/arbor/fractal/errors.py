from __future__ import annotations


class FractalError(Exception):
    """Base class for failures raised while producing a fractal."""


class InvalidSettings(FractalError, ValueError):
    """Raised when raw settings cannot be normalized."""


class ColorComponentOutOfRange(FractalError, ValueError):
    """Raised when an interpolated color channel leaves ``[0, 255]``."""

    def __init__(self, channel: str, value: int, level: int) -> None:
        self.channel = channel
        self.value = value
        self.level = level
        super().__init__(
            f"{channel} channel reached {value} at recursion level {level}; "
            "expected a value between 0 and 255"
        )

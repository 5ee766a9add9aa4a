from arbor.utilities.env.parsing import _env_float, _env_int, _env_optional_int

DEFAULT_WINDOW_WIDTH = 1000
DEFAULT_WINDOW_HEIGHT = 800
DEFAULT_STARTING_ANGLE_DEG = 90.0
DEFAULT_VIEWER_FPS = 30


class DisplayConfiguration:
    @classmethod
    def window_size(cls) -> tuple[int, int]:
        width = _env_int("ARBOR_WINDOW_WIDTH", default=DEFAULT_WINDOW_WIDTH, minimum=1)
        height = _env_int(
            "ARBOR_WINDOW_HEIGHT", default=DEFAULT_WINDOW_HEIGHT, minimum=1
        )
        return width, height

    @classmethod
    def origin(cls) -> tuple[int, int]:
        """Trunk start point; defaults to the bottom centre of the window."""

        width, height = cls.window_size()
        x = _env_optional_int("ARBOR_ORIGIN_X")
        y = _env_optional_int("ARBOR_ORIGIN_Y")
        return (width // 2 if x is None else x, height if y is None else y)

    @classmethod
    def starting_angle_deg(cls) -> float:
        return _env_float(
            "ARBOR_STARTING_ANGLE_DEG", default=DEFAULT_STARTING_ANGLE_DEG
        )

    @classmethod
    def viewer_fps(cls) -> int:
        return _env_int("ARBOR_VIEWER_FPS", default=DEFAULT_VIEWER_FPS, minimum=1)

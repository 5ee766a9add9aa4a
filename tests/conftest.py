import os
import tempfile
from pathlib import Path

os.environ.setdefault(
    "ARBOR_LOG_DIR", str(Path(tempfile.gettempdir()) / "arbor-test-logs")
)
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import pygame  # noqa: E402
import pytest  # noqa: E402
from hypothesis import HealthCheck, settings  # noqa: E402

from arbor.fractal.settings import RawSettings  # noqa: E402

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
    deadline=None,
)
settings.load_profile("default")


@pytest.fixture(autouse=True)
def dummy_sdl_video_driver(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    yield


@pytest.fixture(autouse=True)
def init_pygame() -> None:
    pygame.init()


@pytest.fixture()
def scenario_raw() -> RawSettings:
    """Small tree used by several scenarios: 50%, 45/45 degrees, blue to green."""

    return RawSettings(
        depth=2,
        ratio_percent=50,
        left_angle_deg=45,
        right_angle_deg=45,
        trunk_length=100,
        trunk_width=10,
        trunk_color=(0, 0, 255),
        leaf_color=(0, 255, 0),
    )

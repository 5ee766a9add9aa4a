from arbor.fractal.errors import (ColorComponentOutOfRange,  # noqa: F401
                                  FractalError, InvalidSettings)
from arbor.fractal.generator import color_increment, generate  # noqa: F401
from arbor.fractal.primitives import Color, LineSegment, Point  # noqa: F401
from arbor.fractal.settings import (DEFAULT_RAW_SETTINGS,  # noqa: F401
                                    FractalSettings, RawSettings,
                                    normalize_settings)
from arbor.fractal.store import (FractalObserver, FractalStore,  # noqa: F401
                                 GeneratedFractal, StoreState)

from arbor.controls.panel import (SLIDER_LIMITS, SettingsPanel,  # noqa: F401
                                  SliderLimits)

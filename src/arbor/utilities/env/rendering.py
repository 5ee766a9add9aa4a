import os

from arbor.utilities.env.enums import FrameExportStrategy
from arbor.utilities.env.parsing import _env_flag

DEFAULT_FRAME_EXPORT_STRATEGY = FrameExportStrategy.BUFFER


class RenderingConfiguration:
    @classmethod
    def round_caps(cls) -> bool:
        return _env_flag("ARBOR_ROUND_CAPS", default=True)

    @classmethod
    def frame_export_strategy(cls) -> FrameExportStrategy:
        strategy = os.environ.get(
            "ARBOR_FRAME_EXPORT_STRATEGY", DEFAULT_FRAME_EXPORT_STRATEGY.value
        ).strip()
        try:
            return FrameExportStrategy(strategy.lower())
        except ValueError as exc:
            raise ValueError(
                "ARBOR_FRAME_EXPORT_STRATEGY must be 'buffer' or 'array'"
            ) from exc

"""Environment configuration helpers."""

from arbor.utilities.env.config import Configuration as Configuration
from arbor.utilities.env.enums import \
    FrameExportStrategy as FrameExportStrategy

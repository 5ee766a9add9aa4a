from enum import StrEnum


class FrameExportStrategy(StrEnum):
    BUFFER = "buffer"
    ARRAY = "array"

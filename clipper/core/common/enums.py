# File: clipper/core/common/enums.py

from enum import Enum, unique

@unique
class ErrorKind(str, Enum):
    INVALID_REQUEST = "invalid_request"
    NO_PLAYABLE_FORMAT = "no_playable_format"
    TRANSCODE_FAILED = "transcode_failed"
    ARTIFACT_IO_FAILED = "artifact_io_failed"
    INTERNAL_ERROR = "internal_error"

@unique
class ContainerFormat(str, Enum):
    MP4 = "mp4"

# File: clipper/core/errors.py

from clipper.core.common.enums import ErrorKind


class ClipError(Exception):
    """
    Base for every failure the clip pipeline knows how to report.
    Carries the classification and the HTTP status the entry point should use.
    """
    kind: ErrorKind = ErrorKind.INTERNAL_ERROR
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequest(ClipError):
    """Malformed url, missing/non-finite start or end, or end <= start."""
    kind = ErrorKind.INVALID_REQUEST
    status_code = 400


class NoPlayableFormat(ClipError):
    """The remote manifest has no encoding we can stream."""
    kind = ErrorKind.NO_PLAYABLE_FORMAT


class TranscodeFailed(ClipError):
    """ffmpeg exited abnormally or the source stream broke mid-read."""
    kind = ErrorKind.TRANSCODE_FAILED


class TranscodeTimeout(TranscodeFailed):
    """The request budget ran out and the ffmpeg process was killed."""


class ArtifactIOFailed(ClipError):
    """The finished clip could not be read back from disk."""
    kind = ErrorKind.ARTIFACT_IO_FAILED


class InternalError(ClipError):
    kind = ErrorKind.INTERNAL_ERROR

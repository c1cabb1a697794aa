import math
from dataclasses import dataclass
from typing import Any, Mapping, Union
from urllib.parse import urlparse
from clipper.core.common.enums import ContainerFormat, ErrorKind
from clipper.core.errors import ClipError, InvalidRequest
from clipper.core.shared_types import TimeRange


def _is_number(value: Any) -> bool:
    # JSON true/false arrive as bool, which is an int subclass
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class ClipRequest:
    """
    What the caller asked for. Parsed and validated once, never mutated.
    """
    source_url: str
    time_range: TimeRange
    output_format: ContainerFormat = ContainerFormat.MP4

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "ClipRequest":
        """
        Maps the JSON body {url, start, end, format} to a ClipRequest.

        Raises:
            InvalidRequest: On any missing or malformed field.
        """
        if not isinstance(payload, Mapping):
            raise InvalidRequest("Request body must be a JSON object")

        url = payload.get("url")
        if not isinstance(url, str) or not url.strip():
            raise InvalidRequest("Missing url")
        url = url.strip()
        parsed = urlparse(url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise InvalidRequest(f"Malformed url: {url}")

        start = payload.get("start")
        end = payload.get("end")
        if not _is_number(start) or not _is_number(end):
            raise InvalidRequest("Missing start/end")

        fmt = payload.get("format") or ContainerFormat.MP4.value
        try:
            output_format = ContainerFormat(fmt)
        except ValueError:
            raise InvalidRequest(f"Unsupported format: {fmt}")

        try:
            # Huge JSON integers parse as int and don't fit in a float
            start, end = float(start), float(end)
        except OverflowError:
            raise InvalidRequest("start and end must be finite numbers")

        return cls(
            source_url=url,
            time_range=TimeRange(start, end),
            output_format=output_format,
        )

    @property
    def filename(self) -> str:
        # clip_10-15.mp4
        start = math.floor(self.time_range.start_seconds)
        end = math.floor(self.time_range.end_seconds)
        return f"clip_{start}-{end}.{self.output_format.value}"


@dataclass(frozen=True)
class ClipFile:
    content: bytes
    filename: str
    media_type: str = "video/mp4"


@dataclass(frozen=True)
class ClipFailure:
    kind: ErrorKind
    message: str
    status_code: int = 500

    @classmethod
    def from_error(cls, error: ClipError) -> "ClipFailure":
        return cls(kind=error.kind, message=error.message, status_code=error.status_code)


ClipResult = Union[ClipFile, ClipFailure]

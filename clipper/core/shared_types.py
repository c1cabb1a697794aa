import math
from dataclasses import dataclass

from clipper.core.errors import InvalidRequest

# Shortest window ever handed to the encoder. A zero-length -t makes ffmpeg emit an empty container.
MIN_CLIP_DURATION = 0.01


@dataclass(frozen=True)
class TimeRange:
    """
    Value Object representing a valid span of time.
    Enforces that start_time is strictly before end_time.
    """
    start_seconds: float
    end_seconds: float

    def __post_init__(self):
        if not math.isfinite(self.start_seconds) or not math.isfinite(self.end_seconds):
            raise InvalidRequest("start and end must be finite numbers")
        if self.start_seconds < 0:
            raise InvalidRequest(f"Start time cannot be negative: {self.start_seconds}")
        if self.end_seconds <= self.start_seconds:
            raise InvalidRequest("end must be greater than start")

    @property
    def duration(self) -> float:
        return max(MIN_CLIP_DURATION, self.end_seconds - self.start_seconds)

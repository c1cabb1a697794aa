from dataclasses import dataclass, field
from typing import Dict, Optional

@dataclass(frozen=True)
class EncodingCandidate:
    """
    One entry of a remote video's format manifest.
    Built fresh for every request, never cached.
    """
    container_format: Optional[str]
    has_video_track: bool
    has_audio_track: bool
    is_segmented: bool
    quality_rank: float
    stream_locator: Optional[str]
    format_id: Optional[str] = None
    # Headers the host expects when the locator is fetched (user agent, referer...)
    http_headers: Dict[str, str] = field(default_factory=dict, hash=False, compare=False)

    @property
    def is_progressive_mp4(self) -> bool:
        """Single mp4 stream carrying both tracks, not a segment manifest."""
        return (
            self.container_format == "mp4"
            and self.has_video_track
            and self.has_audio_track
            and not self.is_segmented
        )

    @property
    def is_retrievable(self) -> bool:
        return bool(self.stream_locator)

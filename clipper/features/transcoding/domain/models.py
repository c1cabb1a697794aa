from dataclasses import dataclass
from pathlib import Path
from clipper.core.config.settings import settings
from clipper.core.shared_types import TimeRange

@dataclass(frozen=True)
class TranscodeProfile:
    """
    Encoder settings for the trimmed output.
    Constant-quality x264 tuned for speed. Stream copy would snap the cut to keyframes.
    """
    video_codec: str = "libx264"
    preset: str = "veryfast"
    crf: int = 23
    audio_codec: str = "aac"

    @classmethod
    def from_settings(cls) -> "TranscodeProfile":
        return cls(
            preset=settings.X264_PRESET,
            crf=settings.X264_CRF,
            audio_codec=settings.AUDIO_CODEC,
        )

@dataclass(frozen=True)
class TranscodeJob:
    output_path: Path
    window: TimeRange

    def ensure_parent_dir(self) -> None:
        self.output_path.parent.mkdir(parents=True, exist_ok=True)

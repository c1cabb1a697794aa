from pathlib import Path
from typing import Optional
from clipper.core.shared_types import TimeRange
from clipper.features.source_resolver.domain.interfaces import IByteSource
from ..domain.models import TranscodeJob
from ..data.ffmpeg_adapter import FFmpegPipeTranscoder

def trim_stream(
    source: IByteSource,
    start: float,
    end: float,
    dest_path: str,
    ffmpeg_binary: str = None,
    timeout: Optional[float] = None,
) -> None:
    """
    Public Service API: Trim a streamed video into an mp4 file.

    Args:
        source: Byte source of the full video. Closed when done.
        start: Start timestamp in seconds.
        end: End timestamp in seconds.
        dest_path: Where the clip should be written.
        ffmpeg_binary: Overrides the configured executable.
        timeout: Seconds before ffmpeg is killed.
    """
    job = TranscodeJob(output_path=Path(dest_path), window=TimeRange(start, end))
    FFmpegPipeTranscoder(ffmpeg_binary=ffmpeg_binary).transcode(source, job, timeout=timeout)

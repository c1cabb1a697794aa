from abc import ABC, abstractmethod
from typing import Optional
from clipper.features.source_resolver.domain.interfaces import IByteSource
from .models import TranscodeJob

class ITranscoder(ABC):
    """
    Contract for the trimming engine.
    Abstracts away the underlying tool (FFmpeg) and its process events from the orchestrator.
    """

    @abstractmethod
    def transcode(self, source: IByteSource, job: TranscodeJob, timeout: Optional[float] = None) -> None:
        """
        Consumes the source incrementally and writes the trimmed clip to job.output_path.
        Blocks until the encoder has finished.

        Args:
            source: The chosen encoding's content. Closed by the transcoder.
            job: Output path plus the (start, duration) window.
            timeout: Seconds before the encoder is killed. None waits forever.

        Raises:
            TranscodeFailed: If the encoder exits abnormally or the source breaks.
            TranscodeTimeout: If the timeout elapses first.
        """
        pass

import logging
import subprocess
import threading
import time
from collections import deque
from typing import List, Optional
from clipper.core.config.settings import settings
from clipper.core.errors import TranscodeFailed, TranscodeTimeout
from clipper.features.source_resolver.domain.interfaces import IByteSource
from ..domain.interfaces import ITranscoder
from ..domain.models import TranscodeJob, TranscodeProfile

logger = logging.getLogger(__name__)

# Lines of ffmpeg stderr kept for the error message
STDERR_TAIL_LINES = 20
THREAD_JOIN_TIMEOUT = 5.0


class FFmpegPipeTranscoder(ITranscoder):
    """
    Concrete implementation of ITranscoder using FFmpeg reading from stdin.
    The source is fed chunk by chunk while ffmpeg encodes, so the whole video
    is never buffered.
    """

    def __init__(self, ffmpeg_binary: str = None, profile: TranscodeProfile = None):
        self.ffmpeg_binary = ffmpeg_binary or settings.FFMPEG_BINARY
        self.profile = profile or TranscodeProfile.from_settings()

    def build_command(self, job: TranscodeJob) -> List[str]:
        # -i pipe:0: Input comes from stdin
        # -ss/-t after -i: Output-side seek. A pipe can't be seeked, ffmpeg decodes up to start.
        # -c:v libx264 -crf: Re-encode so the cut lands on the exact frame, not the previous keyframe
        # -movflags +faststart: moov atom up front, playable before fully downloaded
        return [
            self.ffmpeg_binary,
            "-hide_banner",
            "-loglevel", "error",
            "-y",
            "-i", "pipe:0",
            "-ss", str(job.window.start_seconds),
            "-t", str(job.window.duration),
            "-c:v", self.profile.video_codec,
            "-preset", self.profile.preset,
            "-crf", str(self.profile.crf),
            "-c:a", self.profile.audio_codec,
            "-movflags", "+faststart",
            "-f", "mp4",
            str(job.output_path),
        ]

    def transcode(self, source: IByteSource, job: TranscodeJob, timeout: Optional[float] = None) -> None:
        job.ensure_parent_dir()
        cmd = self.build_command(job)
        logger.info(f"Executing FFmpeg Trim: {' '.join(cmd)}")

        try:
            proc = subprocess.Popen(
                cmd,
                stdin=subprocess.PIPE,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.PIPE,
            )
        except OSError as e:
            source.close()
            logger.error(f"Could not start FFmpeg ({self.ffmpeg_binary}): {e}")
            raise TranscodeFailed(f"Could not start ffmpeg: {e}") from e

        started = time.monotonic()
        stopping = threading.Event()
        feed_errors: List[BaseException] = []
        stderr_tail = deque(maxlen=STDERR_TAIL_LINES)

        feeder = threading.Thread(
            target=self._feed, args=(source, proc.stdin, feed_errors, stopping), daemon=True
        )
        drainer = threading.Thread(
            target=self._drain, args=(proc.stderr, stderr_tail), daemon=True
        )
        feeder.start()
        drainer.start()

        try:
            proc.wait(timeout=timeout)
        except subprocess.TimeoutExpired as e:
            logger.error(f"FFmpeg exceeded {timeout:.1f}s budget, killing pid {proc.pid}")
            raise TranscodeTimeout(f"Clip extraction timed out after {timeout:.1f}s") from e
        finally:
            # Past this point source errors are our own doing (close/kill), not the remote's
            stopping.set()
            if proc.poll() is None:
                proc.kill()
                proc.wait()
            source.close()
            feeder.join(timeout=THREAD_JOIN_TIMEOUT)
            drainer.join(timeout=THREAD_JOIN_TIMEOUT)

        diagnostics = "\n".join(stderr_tail).strip()

        if feed_errors:
            error = feed_errors[0]
            logger.error(f"Source stream failed during transcode: {error}. STDERR: {diagnostics}")
            message = error.message if isinstance(error, TranscodeFailed) else f"Source stream error: {error}"
            raise TranscodeFailed(f"{message}\n{diagnostics}".strip()) from error

        if proc.returncode != 0:
            error_message = diagnostics or f"ffmpeg exited with code {proc.returncode}"
            logger.error(f"FFmpeg Trim Failed (code {proc.returncode}). STDERR: {error_message}")
            raise TranscodeFailed(f"Video clipping failed: {error_message}")

        if not job.output_path.exists():
            raise TranscodeFailed("Video clipping failed: ffmpeg produced no output")

        logger.info(f"FFmpeg Trim finished in {time.monotonic() - started:.2f}s -> {job.output_path}")

    @staticmethod
    def _feed(source: IByteSource, stdin, errors: List[BaseException], stopping: threading.Event) -> None:
        """Producer side of the pipe. Runs on its own thread."""
        try:
            for chunk in source.chunks():
                stdin.write(chunk)
        except BrokenPipeError:
            # ffmpeg has everything it needs (-t reached) or was killed
            pass
        except Exception as e:
            if not stopping.is_set():
                errors.append(e)
        finally:
            try:
                stdin.close()
            except OSError:
                pass

    @staticmethod
    def _drain(stream, tail: deque) -> None:
        """Keeps ffmpeg's stderr pipe empty so it never blocks on a full buffer."""
        for line in iter(stream.readline, b""):
            text = line.decode("utf-8", "replace").rstrip()
            if text:
                tail.append(text)
        stream.close()

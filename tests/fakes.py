# File: tests/fakes.py
"""
In-memory stand-ins for the pipeline's adapters.
"""

import threading
from pathlib import Path
from typing import Iterator, List

from clipper.core.errors import TranscodeFailed
from clipper.features.source_resolver.domain.interfaces import IByteSource, IManifestProvider, IStreamOpener
from clipper.features.source_resolver.domain.models import EncodingCandidate
from clipper.features.temp_artifacts.data.local_fs import LocalArtifactStore
from clipper.features.transcoding.domain.interfaces import ITranscoder


def make_candidate(rank, container="mp4", video=True, audio=True, segmented=False,
                   locator="https://cdn.example.com/v.mp4", format_id=None) -> EncodingCandidate:
    return EncodingCandidate(
        container_format=container,
        has_video_track=video,
        has_audio_track=audio,
        is_segmented=segmented,
        quality_rank=rank,
        stream_locator=locator,
        format_id=format_id or f"f{rank}",
    )


class StaticManifest(IManifestProvider):
    """Returns a fixed candidate list and records every call."""

    def __init__(self, candidates: List[EncodingCandidate]):
        self.candidates = candidates
        self.calls: List[str] = []

    def fetch_candidates(self, source_url: str) -> List[EncodingCandidate]:
        self.calls.append(source_url)
        return list(self.candidates)


class ExplodingManifest(IManifestProvider):
    """For paths that must never reach the remote host."""

    def __init__(self):
        self.calls = 0

    def fetch_candidates(self, source_url: str) -> List[EncodingCandidate]:
        self.calls += 1
        raise AssertionError("manifest provider must not be contacted")


class MemoryByteSource(IByteSource):
    def __init__(self, data: bytes, chunk_size: int = 64 * 1024, fail_after: int = None):
        self.data = data
        self.chunk_size = chunk_size
        self.fail_after = fail_after
        self.closed = False

    def chunks(self) -> Iterator[bytes]:
        for sent, offset in enumerate(range(0, len(self.data), self.chunk_size)):
            if self.fail_after is not None and sent >= self.fail_after:
                raise TranscodeFailed("Source stream error: connection reset")
            yield self.data[offset:offset + self.chunk_size]

    def close(self) -> None:
        self.closed = True


class MemoryStreamOpener(IStreamOpener):
    def __init__(self, data: bytes = b"source-bytes"):
        self.data = data
        self.opened: List[EncodingCandidate] = []
        self.sources: List[MemoryByteSource] = []

    def open(self, candidate: EncodingCandidate) -> IByteSource:
        self.opened.append(candidate)
        source = MemoryByteSource(self.data)
        self.sources.append(source)
        return source


class RecordingTranscoder(ITranscoder):
    """
    Writes a fake mp4 at the job's output path.
    Records the jobs it was handed so tests can inspect the window.
    """

    def __init__(self, payload: bytes = b"fake-mp4", fail_with: Exception = None):
        self.payload = payload
        self.fail_with = fail_with
        self.jobs = []
        self.timeouts = []

    def transcode(self, source, job, timeout=None) -> None:
        self.jobs.append(job)
        self.timeouts.append(timeout)
        try:
            for _ in source.chunks():
                pass
            job.output_path.write_bytes(self.payload)
            if self.fail_with is not None:
                raise self.fail_with
        finally:
            source.close()


class CountingArtifactStore(LocalArtifactStore):
    """LocalArtifactStore that remembers every allocate/dispose."""

    def __init__(self, root: Path):
        super().__init__(root)
        self._lock = threading.Lock()
        self.allocated = []
        self.disposed = []

    def allocate(self):
        artifact = super().allocate()
        with self._lock:
            self.allocated.append(artifact)
        return artifact

    def dispose(self, artifact) -> None:
        with self._lock:
            self.disposed.append(artifact)
        super().dispose(artifact)

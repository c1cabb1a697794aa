import logging
import time
from typing import Any, Callable, Mapping, Optional

from clipper.core.errors import ClipError, InternalError, TranscodeTimeout
from clipper.features.source_resolver.domain.interfaces import IStreamOpener
from clipper.features.source_resolver.service.api import SourceStreamResolver
from clipper.features.temp_artifacts.domain.interfaces import IArtifactStore
from clipper.features.temp_artifacts.service.api import artifact_scope
from clipper.features.transcoding.domain.interfaces import ITranscoder
from clipper.features.transcoding.domain.models import TranscodeJob

from ..domain.models import ClipFailure, ClipFile, ClipRequest, ClipResult

logger = logging.getLogger(__name__)


class ClipExtractionOrchestrator:
    """
    Drives one request through the pipeline:
    validate -> resolve encoding -> allocate artifact -> open stream -> transcode -> read back -> dispose.

    Holds no per-request state, so one instance serves concurrent requests.
    """

    def __init__(
        self,
        resolver: SourceStreamResolver,
        opener: IStreamOpener,
        transcoder: ITranscoder,
        artifacts: IArtifactStore,
        time_budget: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.resolver = resolver
        self.opener = opener
        self.transcoder = transcoder
        self.artifacts = artifacts
        self.time_budget = time_budget
        self.clock = clock

    def extract(self, payload: Mapping[str, Any]) -> ClipResult:
        """
        Main entry point. Never raises: every failure becomes a ClipFailure.
        """
        started = self.clock()
        try:
            request = ClipRequest.from_payload(payload)
            return self.process(request, started=started)
        except ClipError as e:
            logger.error(f"Clip extraction failed [{e.kind.value}]: {e.message}")
            return ClipFailure.from_error(e)
        except Exception as e:
            logger.exception(f"Unexpected error during clip extraction: {e}")
            return ClipFailure.from_error(InternalError(str(e) or e.__class__.__name__))

    def process(self, request: ClipRequest, started: Optional[float] = None) -> ClipFile:
        """
        Runs an already validated request. Raises ClipError subclasses.
        """
        if started is None:
            started = self.clock()

        window = request.time_range
        logger.info(
            f"Extracting {window.start_seconds}-{window.end_seconds}s "
            f"(duration {window.duration}s) from {request.source_url}"
        )

        # 1. Pick the encoding. Nothing touches the disk before this succeeds.
        candidate = self.resolver.resolve(request.source_url)

        # 2. Everything that can leave a file behind happens inside the scope
        with artifact_scope(self.artifacts) as artifact:
            source = self.opener.open(candidate)

            job = TranscodeJob(output_path=artifact.path, window=window)
            self.transcoder.transcode(source, job, timeout=self._remaining(started, source))

            content = self.artifacts.finalize(artifact)

        logger.info(f"Clip {request.filename} ready ({len(content)} bytes)")
        return ClipFile(content=content, filename=request.filename)

    def _remaining(self, started: float, source) -> Optional[float]:
        if self.time_budget is None:
            return None

        remaining = self.time_budget - (self.clock() - started)
        if remaining <= 0:
            source.close()
            raise TranscodeTimeout(f"Clip extraction timed out after {self.time_budget:.1f}s")
        return remaining

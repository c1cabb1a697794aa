from typing import Any, Mapping
from clipper.core.config.settings import settings
from clipper.features.source_resolver.data.http_stream import HttpStreamOpener
from clipper.features.source_resolver.service.api import SourceStreamResolver
from clipper.features.temp_artifacts.service.api import default_store
from clipper.features.transcoding.data.ffmpeg_adapter import FFmpegPipeTranscoder
from ..domain.models import ClipResult
from .orchestrator import ClipExtractionOrchestrator


def build_orchestrator() -> ClipExtractionOrchestrator:
    """
    Wires the production adapters: yt-dlp manifest, requests stream,
    ffmpeg from settings, artifacts under settings.TEMP_DIR.
    """
    return ClipExtractionOrchestrator(
        resolver=SourceStreamResolver(),
        opener=HttpStreamOpener(),
        transcoder=FFmpegPipeTranscoder(ffmpeg_binary=settings.FFMPEG_BINARY),
        artifacts=default_store(),
        time_budget=settings.REQUEST_TIMEOUT_SECONDS,
    )


def extract_clip(payload: Mapping[str, Any]) -> ClipResult:
    """
    Standalone API: {url, start, end, format} in, ClipFile or ClipFailure out.
    """
    return build_orchestrator().extract(payload)

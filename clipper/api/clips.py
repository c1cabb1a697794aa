import logging
import shutil
from functools import lru_cache

from yt_dlp.version import __version__ as yt_dlp_version
from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, Response
from starlette.concurrency import run_in_threadpool

from clipper.core.config.settings import settings
from clipper.features.clip_extraction.domain.models import ClipFailure
from clipper.features.clip_extraction.service.api import build_orchestrator
from clipper.features.clip_extraction.service.orchestrator import ClipExtractionOrchestrator

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["clips"])


@lru_cache(maxsize=1)
def get_orchestrator() -> ClipExtractionOrchestrator:
    # Stateless, so one instance is shared by every request
    return build_orchestrator()


@router.post("/clip")
async def create_clip(
    request: Request,
    orchestrator: ClipExtractionOrchestrator = Depends(get_orchestrator),
):
    """
    Body: {"url": str, "start": number, "end": number, "format": "mp4"}
    Returns the trimmed mp4 as an attachment, or a plain-text error.
    """
    try:
        payload = await request.json()
    except ValueError:
        logger.warning("Rejected /api/clip call with a non-JSON body")
        return PlainTextResponse("Request body must be valid JSON", status_code=400)

    # ffmpeg and the remote read block, keep them off the event loop
    result = await run_in_threadpool(orchestrator.extract, payload)

    if isinstance(result, ClipFailure):
        return PlainTextResponse(result.message, status_code=result.status_code)

    return Response(
        content=result.content,
        status_code=200,
        media_type=result.media_type,
        headers={
            "Content-Disposition": f'attachment; filename="{result.filename}"',
            "Cache-Control": "no-store",
        },
    )


@router.get("/health")
def health():
    return {
        "status": "ok",
        "ffmpeg": shutil.which(settings.FFMPEG_BINARY) or "missing",
        "yt_dlp": yt_dlp_version,
    }

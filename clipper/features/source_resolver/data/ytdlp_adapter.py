import logging
from typing import Any, Dict, List
import yt_dlp
from yt_dlp.utils import DownloadError
from clipper.core.errors import NoPlayableFormat
from ..domain.interfaces import IManifestProvider
from ..domain.models import EncodingCandidate

logger = logging.getLogger(__name__)

# Protocols that describe a manifest of chunks rather than one fetchable file
SEGMENTED_PROTOCOLS = {
    "m3u8",
    "m3u8_native",
    "http_dash_segments",
    "http_dash_segments_generator",
    "dash_frag_urls",
    "ism",
    "f4m",
    "mhtml",
}

YDL_OPTIONS = {
    "quiet": True,
    "no_warnings": True,
    "skip_download": True,
    "noplaylist": True,
}


class YtDlpManifestProvider(IManifestProvider):
    """
    Concrete implementation of IManifestProvider using yt-dlp's Python API.
    Only metadata is extracted. Nothing is downloaded here.
    """

    def __init__(self, options: Dict[str, Any] = None):
        self.options = {**YDL_OPTIONS, **(options or {})}

    def fetch_candidates(self, source_url: str) -> List[EncodingCandidate]:
        logger.info(f"Fetching format manifest: {source_url}")

        try:
            with yt_dlp.YoutubeDL(self.options) as ydl:
                info = ydl.extract_info(source_url, download=False)
        except DownloadError as e:
            logger.error(f"yt-dlp could not read {source_url}: {e}")
            raise NoPlayableFormat(f"Failed to get a downloadable format: {e}") from e

        if not info:
            raise NoPlayableFormat("Failed to get a downloadable format")
        if info.get("_type") == "playlist":
            raise NoPlayableFormat("Playlists are not supported, pass a single video url")

        # yt-dlp sorts formats worst -> best, so the list position is the quality rank
        formats = info.get("formats") or []
        candidates = [self._to_candidate(rank, fmt) for rank, fmt in enumerate(formats)]

        logger.info(f"Manifest for {source_url}: {len(candidates)} formats")
        return candidates

    @staticmethod
    def _to_candidate(rank: int, fmt: Dict[str, Any]) -> EncodingCandidate:
        # yt-dlp marks an absent track with "none". A missing codec field only means unknown.
        vcodec = fmt.get("vcodec")
        acodec = fmt.get("acodec")
        protocol = fmt.get("protocol") or ""

        return EncodingCandidate(
            container_format=fmt.get("ext"),
            has_video_track=vcodec != "none",
            has_audio_track=acodec != "none",
            is_segmented=protocol in SEGMENTED_PROTOCOLS or bool(fmt.get("fragments")),
            quality_rank=float(rank),
            stream_locator=fmt.get("url"),
            format_id=fmt.get("format_id"),
            http_headers=dict(fmt.get("http_headers") or {}),
        )

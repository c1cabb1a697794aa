import logging
from typing import Sequence
from clipper.core.errors import NoPlayableFormat
from ..domain.models import EncodingCandidate

logger = logging.getLogger(__name__)


def _highest(candidates):
    # max() keeps the first of equal ranks, so ties resolve to manifest order
    return max(candidates, key=lambda c: c.quality_rank)


def select_encoding(candidates: Sequence[EncodingCandidate]) -> EncodingCandidate:
    """
    Picks the one encoding to stream.

    1. Best progressive mp4 (video + audio, not segmented).
    2. Otherwise the best candidate of any kind. Heavier re-encode, but still usable.

    Candidates without a stream locator are never considered.

    Raises:
        NoPlayableFormat: If nothing retrievable is left.
    """
    retrievable = [c for c in candidates if c.is_retrievable]
    if not retrievable:
        raise NoPlayableFormat("Failed to get a downloadable format")

    progressive = [c for c in retrievable if c.is_progressive_mp4]
    if progressive:
        return _highest(progressive)

    chosen = _highest(retrievable)
    logger.warning(
        f"No progressive mp4 available, falling back to format {chosen.format_id} "
        f"({chosen.container_format}, segmented={chosen.is_segmented})"
    )
    return chosen

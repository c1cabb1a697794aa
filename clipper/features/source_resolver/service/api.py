import logging
from ..domain.interfaces import IManifestProvider
from ..domain.models import EncodingCandidate
from ..data.ytdlp_adapter import YtDlpManifestProvider
from .selector import select_encoding

logger = logging.getLogger(__name__)

class SourceStreamResolver:
    """
    Facade for the Source Resolver Feature.
    Fetches the manifest and applies the selection policy.
    """

    def __init__(self, provider: IManifestProvider = None):
        self.provider = provider or YtDlpManifestProvider()

    def resolve(self, source_url: str) -> EncodingCandidate:
        candidates = self.provider.fetch_candidates(source_url)
        chosen = select_encoding(candidates)
        logger.info(
            f"Selected format {chosen.format_id} "
            f"(container={chosen.container_format}, rank={chosen.quality_rank})"
        )
        return chosen

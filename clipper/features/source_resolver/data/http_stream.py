import logging
from typing import Iterator, Tuple
import requests
from clipper.core.config.settings import settings
from clipper.core.errors import TranscodeFailed
from ..domain.interfaces import IByteSource, IStreamOpener
from ..domain.models import EncodingCandidate

logger = logging.getLogger(__name__)

class HttpByteSource(IByteSource):
    """
    Wraps a streamed requests.Response.
    Only one chunk is held in memory at a time.
    """

    def __init__(self, response: requests.Response, chunk_size: int):
        self.response = response
        self.chunk_size = chunk_size

    def chunks(self) -> Iterator[bytes]:
        try:
            for chunk in self.response.iter_content(chunk_size=self.chunk_size):
                if chunk:
                    yield chunk
        except requests.RequestException as e:
            raise TranscodeFailed(f"Source stream error: {e}") from e

    def close(self) -> None:
        self.response.close()

class HttpStreamOpener(IStreamOpener):
    def __init__(self, chunk_size: int = None, timeout: Tuple[float, float] = None):
        self.chunk_size = chunk_size or settings.STREAM_CHUNK_SIZE
        self.timeout = timeout or (settings.STREAM_CONNECT_TIMEOUT, settings.STREAM_READ_TIMEOUT)

    def open(self, candidate: EncodingCandidate) -> IByteSource:
        logger.info(f"Opening source stream (format {candidate.format_id})")

        response = None
        try:
            response = requests.get(
                candidate.stream_locator,
                headers=candidate.http_headers,
                stream=True,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException as e:
            if response is not None:
                response.close()
            logger.error(f"Could not open source stream: {e}")
            raise TranscodeFailed(f"Source stream error: {e}") from e

        return HttpByteSource(response, self.chunk_size)

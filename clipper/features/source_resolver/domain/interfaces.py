from abc import ABC, abstractmethod
from typing import Iterator, List
from .models import EncodingCandidate

class IManifestProvider(ABC):
    """
    Contract for listing the encodings a remote video is offered in.
    Abstracts away the extractor (yt-dlp) from the selection policy.
    """

    @abstractmethod
    def fetch_candidates(self, source_url: str) -> List[EncodingCandidate]:
        """
        Returns every encoding the remote host advertises, in extractor order.

        Raises:
            NoPlayableFormat: If the manifest cannot be read at all.
        """
        pass

class IByteSource(ABC):
    """
    A readable, closeable stream of bytes (the chosen encoding's content).
    """

    @abstractmethod
    def chunks(self) -> Iterator[bytes]:
        """Yields the content incrementally, as the remote host delivers it."""
        pass

    @abstractmethod
    def close(self) -> None:
        pass

class IStreamOpener(ABC):
    @abstractmethod
    def open(self, candidate: EncodingCandidate) -> IByteSource:
        """
        Starts reading the candidate's stream locator.

        Raises:
            TranscodeFailed: If the remote stream cannot be opened.
        """
        pass

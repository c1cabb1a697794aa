from abc import ABC, abstractmethod
from .models import TempArtifact

class IArtifactStore(ABC):
    """
    Contract for per-request scratch files.
    """

    @abstractmethod
    def allocate(self) -> TempArtifact:
        """
        Reserves a unique path for a new artifact.
        The path is never handed to another in-flight request.
        """
        pass

    @abstractmethod
    def finalize(self, artifact: TempArtifact) -> bytes:
        """
        Reads the finished artifact back into memory.

        Raises:
            ArtifactIOFailed: If the file is missing or unreadable.
        """
        pass

    @abstractmethod
    def dispose(self, artifact: TempArtifact) -> None:
        """Deletes the artifact. Idempotent, never raises."""
        pass

import logging
import uuid
from pathlib import Path
from clipper.core.errors import ArtifactIOFailed
from ..domain.interfaces import IArtifactStore
from ..domain.models import TempArtifact

logger = logging.getLogger(__name__)

class LocalArtifactStore(IArtifactStore):
    """
    Keeps artifacts as flat files: {root}/clip_{uuid4 hex}.mp4
    The 128-bit id is the only thing partitioning concurrent requests.
    """

    def __init__(self, root: Path, suffix: str = ".mp4"):
        self.root = Path(root)
        self.suffix = suffix

    def allocate(self) -> TempArtifact:
        self.root.mkdir(parents=True, exist_ok=True)
        artifact_id = uuid.uuid4().hex
        path = self.root / f"clip_{artifact_id}{self.suffix}"
        # Nothing is written here. ffmpeg creates the file.
        return TempArtifact(id=artifact_id, path=path)

    def finalize(self, artifact: TempArtifact) -> bytes:
        try:
            data = artifact.path.read_bytes()
        except OSError as e:
            logger.error(f"Could not read artifact {artifact.id}: {e}")
            raise ArtifactIOFailed(f"Could not read finished clip: {e}") from e

        logger.info(f"Artifact {artifact.id} read back ({len(data)} bytes)")
        return data

    def dispose(self, artifact: TempArtifact) -> None:
        try:
            artifact.path.unlink(missing_ok=True)
        except OSError as e:
            # Cleanup is best effort. The response must not fail because of it.
            logger.warning(f"Failed to delete artifact {artifact.path}: {e}")

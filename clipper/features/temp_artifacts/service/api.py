from contextlib import contextmanager
from typing import Iterator
from clipper.core.config.settings import settings
from ..domain.interfaces import IArtifactStore
from ..domain.models import TempArtifact
from ..data.local_fs import LocalArtifactStore


@contextmanager
def artifact_scope(store: IArtifactStore) -> Iterator[TempArtifact]:
    """
    Allocates an artifact and disposes it exactly once when the block exits,
    whether it returned normally or raised.
    """
    artifact = store.allocate()
    try:
        yield artifact
    finally:
        store.dispose(artifact)


def default_store() -> LocalArtifactStore:
    return LocalArtifactStore(settings.TEMP_DIR)

from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path


def utc_now():
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class TempArtifact:
    """
    The on-disk output of one request's transcode.
    Owned by exactly one request: created, written once, read once, deleted.
    """
    id: str
    path: Path
    created_at: datetime = field(default_factory=utc_now)

    def exists(self) -> bool:
        return self.path.exists()

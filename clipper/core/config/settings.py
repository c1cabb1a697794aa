# File: clipper/core/config/settings.py

import os
import shutil
import tempfile
from pathlib import Path


class Settings:
    # --- Paths ---
    # Every request writes its artifact here as clip_<id>.mp4
    TEMP_DIR: Path = Path(os.getenv("CLIPPER_TEMP_DIR", tempfile.gettempdir()))

    # --- External Tools ---
    # Auto-detect ffmpeg or use env var
    FFMPEG_BINARY: str = os.getenv("FFMPEG_BINARY_PATH", shutil.which("ffmpeg") or "ffmpeg")

    # --- Request Budget ---
    # The hosting platform cuts requests at 60s. Leave headroom for the response write.
    REQUEST_TIMEOUT_SECONDS: float = float(os.getenv("REQUEST_TIMEOUT_SECONDS", "55"))

    # --- Remote Stream ---
    STREAM_CHUNK_SIZE: int = int(os.getenv("STREAM_CHUNK_SIZE", str(1024 * 256)))
    STREAM_CONNECT_TIMEOUT: float = float(os.getenv("STREAM_CONNECT_TIMEOUT", "10"))
    STREAM_READ_TIMEOUT: float = float(os.getenv("STREAM_READ_TIMEOUT", "30"))

    # --- Encoding Profile ---
    X264_PRESET: str = os.getenv("X264_PRESET", "veryfast")
    X264_CRF: int = int(os.getenv("X264_CRF", "23"))
    AUDIO_CODEC: str = os.getenv("AUDIO_CODEC", "aac")

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    def ensure_dirs(self):
        """Creates the artifact directory if it doesn't exist."""
        self.TEMP_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()

# File: tests/conftest.py

import os
import shutil
import subprocess
import sys
from pathlib import Path

import pytest

# 1. Add project root to path
sys.path.append(os.getcwd())

from clipper.features.source_resolver.service.api import SourceStreamResolver
from tests.fakes import CountingArtifactStore, StaticManifest, make_candidate

FFMPEG = shutil.which("ffmpeg")
FFPROBE = shutil.which("ffprobe")


@pytest.fixture
def artifact_store(tmp_path):
    return CountingArtifactStore(tmp_path / "artifacts")


@pytest.fixture
def progressive_manifest():
    return StaticManifest([
        make_candidate(0, container="webm"),
        make_candidate(1),
        make_candidate(2, audio=False),
    ])


@pytest.fixture
def resolver(progressive_manifest):
    return SourceStreamResolver(progressive_manifest)


@pytest.fixture
def fake_ffmpeg(tmp_path):
    """
    Builds an executable shell script standing in for ffmpeg.
    The body receives the ffmpeg arguments. $last holds the output path.
    """
    def _build(body: str) -> str:
        script = tmp_path / "fake_ffmpeg.sh"
        script.write_text(
            "#!/bin/sh\n"
            'for last in "$@"; do :; done\n'
            f"{body}\n"
        )
        script.chmod(0o755)
        return str(script)

    return _build


@pytest.fixture(scope="session")
def sample_video(tmp_path_factory):
    """
    A 5-second mp4 with a test pattern and a sine tone, generated by real ffmpeg.
    """
    if FFMPEG is None or FFPROBE is None:
        pytest.skip("ffmpeg/ffprobe not installed")

    video_path = tmp_path_factory.mktemp("media") / "sample.mp4"
    cmd = [
        FFMPEG, "-y",
        "-f", "lavfi", "-i", "testsrc=duration=5:size=320x240:rate=30",
        "-f", "lavfi", "-i", "sine=frequency=1000:duration=5",
        "-c:v", "libx264", "-c:a", "aac",
        "-map", "0:v", "-map", "1:a",
        # Fragmented so it can be decoded from a non-seekable pipe
        "-movflags", "frag_keyframe+empty_moov",
        str(video_path),
    ]
    subprocess.run(cmd, check=True, capture_output=True)
    return video_path


def probe_duration(path: Path) -> float:
    probe_cmd = [
        FFPROBE or "ffprobe", "-v", "error", "-show_entries", "format=duration",
        "-of", "default=noprint_wrappers=1:nokey=1", str(path)
    ]
    result = subprocess.run(probe_cmd, capture_output=True, text=True)
    return float(result.stdout.strip())

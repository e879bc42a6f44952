"""Shared fixtures for transcript canonicalization tests."""

import sys
from pathlib import Path
from typing import Any

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from transcript_canon.model import TranscriptDoc, TranscriptTurn  # noqa: E402
from transcript_canon.profiles import SpeakerRole  # noqa: E402


class RecordingLogger:
    """Warning sink that keeps every call for later assertions."""

    def __init__(self) -> None:
        self.warnings: list[tuple[str, tuple[Any, ...]]] = []

    def warning(self, msg: str, *args: Any) -> None:
        self.warnings.append((msg, args))


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """Returns a fresh recording warning sink."""
    return RecordingLogger()


@pytest.fixture
def pre_call_doc() -> TranscriptDoc:
    """Two system turns (ringing, hold) followed by the agent greeting."""
    return TranscriptDoc(
        turns=(
            TranscriptTurn(role=SpeakerRole.SYSTEM, text="[Call ringing]", start_s=0.0, end_s=5.0),
            TranscriptTurn(role=SpeakerRole.SYSTEM, text="[Hold music]", start_s=5.0, end_s=8.0),
            TranscriptTurn(
                role=SpeakerRole.AGENT,
                speaker_name="Riya",
                text="Hello, this is Riya.",
                start_s=8.0,
                end_s=12.0,
            ),
        )
    )


@pytest.fixture
def sample_text() -> str:
    """Plain-text transcript with one named agent line and one customer line."""
    return "[0:05] AGENT (Riya): Hello, how can I help?\n[0:09] USER: I want to cancel."


@pytest.fixture
def legacy_payload() -> dict[str, Any]:
    """Legacy `{segments: [...]}` output with a ringing and hold preamble."""
    return {
        "segments": [
            {"startSeconds": 0, "endSeconds": 5, "speaker": "SYSTEM", "speakerProfile": "IVR", "text": "[Call ringing]"},
            {"startSeconds": 5, "endSeconds": 8, "speaker": "SYSTEM", "speakerProfile": "Hold", "text": "[Hold music]"},
            {"startSeconds": 8, "endSeconds": 12, "speaker": "AGENT", "speakerProfile": "Agent (Riya)", "text": "Hello."},
            {"startSeconds": 12, "endSeconds": 15, "speaker": "USER", "speakerProfile": "User (Unknown)", "text": "Hi."},
        ]
    }

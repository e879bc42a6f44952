"""Tests for plain-text rendering and transcript summaries."""

import pytest

from transcript_canon.model import TranscriptDoc, TranscriptMetadata
from transcript_canon.normalize import normalize_transcript
from transcript_canon.render import (
    format_duration,
    format_timestamp,
    summarize_transcript,
    transcript_to_segment_blocks,
    transcript_to_text,
)


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [(0, "0:00"), (5.9, "0:05"), (65, "1:05"), (754, "12:34")],
)
def test_format_timestamp(seconds: float, expected: str) -> None:
    """Timestamps are rendered as minutes and zero-padded seconds."""
    assert format_timestamp(seconds) == expected


@pytest.mark.parametrize(
    ("seconds", "expected"),
    [
        (0, "0 seconds"),
        (1, "1 second"),
        (5, "5 seconds"),
        (60, "1 minute"),
        (65, "1 minute 5 seconds"),
        (121, "2 minutes 1 second"),
    ],
)
def test_format_duration(seconds: float, expected: str) -> None:
    """Durations are rendered in words."""
    assert format_duration(seconds) == expected


def test_transcript_to_text(sample_text: str) -> None:
    """Named speakers show their name, others their role."""
    doc = normalize_transcript(sample_text)

    assert transcript_to_text(doc) == (
        "[0:05] Riya: Hello, how can I help?\n"
        "[0:09] USER: I want to cancel.\n"
    )
    assert transcript_to_text(doc, include_timestamps=False) == (
        "Riya: Hello, how can I help?\n"
        "USER: I want to cancel.\n"
    )


def test_empty_document_renders_empty() -> None:
    """Nothing to render gives an empty string."""
    assert transcript_to_text(TranscriptDoc()) == ""
    assert transcript_to_segment_blocks(TranscriptDoc()) == ""


def test_segment_blocks(pre_call_doc: TranscriptDoc) -> None:
    """Blocks show a spoken time range and a profile label for unnamed speakers."""
    text = transcript_to_segment_blocks(pre_call_doc)

    assert text.split("\n\n") == [
        "[0 seconds - 5 seconds]\nSystem: [Call ringing]",
        "[5 seconds - 8 seconds]\nSystem: [Hold music]",
        "[8 seconds - 12 seconds]\nRiya: Hello, this is Riya.",
    ]


def test_summarize_transcript(legacy_payload) -> None:
    """Summaries count turns per role and distinct human speakers."""
    summary = summarize_transcript(normalize_transcript(legacy_payload))

    assert summary.turn_count == 4
    assert summary.agent_turns == 1
    assert summary.user_turns == 1
    assert summary.system_turns == 2
    assert summary.speaker_count == 2
    assert summary.duration_s == 15.0
    assert summary.to_dict()["source"] == "legacy-segments"


def test_summarize_empty_document() -> None:
    """An empty document has zero counts."""
    summary = summarize_transcript(TranscriptDoc(metadata=TranscriptMetadata(source="unknown")))

    assert summary.turn_count == 0
    assert summary.speaker_count == 0
    assert summary.source == "unknown"

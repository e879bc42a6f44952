"""Tests for the canonical transcript model and its helpers."""

import pytest

from transcript_canon.model import (
    SpeakerRef,
    TranscriptDoc,
    TranscriptMetadata,
    TranscriptTurn,
    filter_by_role,
    is_transcript_doc,
    speaker_display_name,
    turn_duration,
    unique_speakers,
)
from transcript_canon.profiles import BaseRole, Profile, SpeakerRole


def test_turn_rejects_end_before_start() -> None:
    """A turn may not end before it starts."""
    with pytest.raises(ValueError):
        TranscriptTurn(role=SpeakerRole.USER, text="hi", start_s=5.0, end_s=4.0)


@pytest.mark.parametrize("name", ["Unknown", "n/a", "  ", ""])
def test_turn_rejects_placeholder_names(name: str) -> None:
    """Placeholder and blank names are not valid speaker names."""
    with pytest.raises(ValueError):
        TranscriptTurn(role=SpeakerRole.AGENT, text="hi", start_s=0.0, end_s=1.0, speaker_name=name)


def test_turn_derives_profile_and_timing() -> None:
    """Profile, base role and millisecond timings are derived from role and seconds."""
    turn = TranscriptTurn(role=SpeakerRole.SYSTEM, text="[Hold music]", start_s=1.25, end_s=8.0)

    assert turn.profile is Profile.SYSTEM
    assert turn.base_role is BaseRole.USER
    assert turn.start_ms == 1250
    assert turn.end_ms == 8000
    assert turn.duration_s == pytest.approx(6.75)
    assert turn_duration(turn) == pytest.approx(6.75)


def test_turn_to_dict_omits_missing_optionals() -> None:
    """Only set optional fields appear in the wire representation."""
    unnamed = TranscriptTurn(role=SpeakerRole.USER, text="I want to cancel.", start_s=9.0, end_s=10.0)
    named = TranscriptTurn(
        role=SpeakerRole.AGENT,
        text="Hello",
        start_s=0.0,
        end_s=1.0,
        speaker_name="Riya",
        confidence=0.9,
        channel=1,
    )

    assert unnamed.to_dict() == {
        "speaker": "USER",
        "profile": "customer",
        "baseRole": "user",
        "text": "I want to cancel.",
        "startS": 9.0,
        "endS": 10.0,
        "startMs": 9000,
        "endMs": 10000,
    }
    assert named.to_dict()["speakerName"] == "Riya"
    assert named.to_dict()["confidence"] == 0.9
    assert named.to_dict()["channel"] == 1


def test_doc_stores_turns_as_tuple(pre_call_doc: TranscriptDoc) -> None:
    """Documents accept lists but keep an immutable tuple."""
    doc = TranscriptDoc(turns=list(pre_call_doc.turns))
    assert isinstance(doc.turns, tuple)
    assert doc.turns == pre_call_doc.turns


def test_doc_to_dict_includes_pre_call_fields_when_set() -> None:
    """Pre-call fields are only written once detection has run."""
    doc = TranscriptDoc(metadata=TranscriptMetadata(source="asr"))
    assert doc.to_dict() == {"turns": [], "metadata": {"source": "asr"}}

    annotated = TranscriptDoc(call_start_ms=0, pre_call_duration_ms=0)
    assert annotated.to_dict()["callStartMs"] == 0
    assert annotated.to_dict()["preCallDurationMs"] == 0


def test_speaker_display_name_never_returns_unknown() -> None:
    """Unnamed speakers are labeled by profile."""
    agent = TranscriptTurn(role=SpeakerRole.AGENT, text="", start_s=0.0, end_s=0.0)
    user = TranscriptTurn(role=SpeakerRole.USER, text="", start_s=0.0, end_s=0.0)
    system = TranscriptTurn(role=SpeakerRole.SYSTEM, text="", start_s=0.0, end_s=0.0)
    named = TranscriptTurn(role=SpeakerRole.USER, text="", start_s=0.0, end_s=0.0, speaker_name="John")

    assert speaker_display_name(agent) == "Agent"
    assert speaker_display_name(user) == "Customer"
    assert speaker_display_name(system) == "System"
    assert speaker_display_name(named) == "John"


def test_filter_by_role_and_unique_speakers(pre_call_doc: TranscriptDoc) -> None:
    """Role filters keep order and unique speakers are listed by first appearance."""
    assert [t.text for t in filter_by_role(pre_call_doc, SpeakerRole.SYSTEM)] == [
        "[Call ringing]",
        "[Hold music]",
    ]
    assert unique_speakers(pre_call_doc) == [
        SpeakerRef(role=SpeakerRole.SYSTEM, name=None),
        SpeakerRef(role=SpeakerRole.AGENT, name="Riya"),
    ]


def test_is_transcript_doc(pre_call_doc: TranscriptDoc) -> None:
    """Both documents and their wire form are recognized."""
    assert is_transcript_doc(pre_call_doc)
    assert is_transcript_doc(pre_call_doc.to_dict())
    assert is_transcript_doc({"turns": [], "metadata": {}})

    assert not is_transcript_doc({"segments": []})
    assert not is_transcript_doc({"turns": [], "metadata": None})
    assert not is_transcript_doc(
        {"turns": [{"speaker": "BOT", "text": "x", "startS": 0, "endS": 1}], "metadata": {}}
    )
    assert not is_transcript_doc(
        {"turns": [{"speaker": "USER", "text": "x", "startS": True, "endS": 1}], "metadata": {}}
    )
    assert not is_transcript_doc(42)

"""Tests for the line-oriented plain-text parsers."""

import pytest

from transcript_canon.profiles import SpeakerRole
from transcript_canon.transcripts.line_parser import (
    ContinuationTranscriptParser,
    LineTranscriptParser,
    estimate_duration,
)


def test_round_trip_example(sample_text: str) -> None:
    """Timestamps, roles and names are read from each line."""
    turns = LineTranscriptParser().parse_turns(sample_text)

    assert len(turns) == 2

    agent, user = turns
    assert agent.role is SpeakerRole.AGENT
    assert agent.speaker_name == "Riya"
    assert agent.text == "Hello, how can I help?"
    assert agent.start_s == 5.0
    assert agent.end_s == pytest.approx(7.0)

    assert user.role is SpeakerRole.USER
    assert user.speaker_name is None
    assert user.text == "I want to cancel."
    assert user.start_s == 9.0
    assert user.end_s == pytest.approx(10.6)


def test_estimate_duration_uses_word_rate() -> None:
    """Durations are estimated at 2.5 words per second."""
    assert estimate_duration("one two three four five") == pytest.approx(2.0)
    assert estimate_duration("") == 0.0


def test_lines_without_timestamps_follow_the_cursor() -> None:
    """Untimed lines start where the previous turn ended."""
    text = "AGENT: one two three four five\nUSER: a b"

    turns = LineTranscriptParser().parse_turns(text)

    assert [t.start_s for t in turns] == pytest.approx([0.0, 2.0])
    assert [t.end_s for t in turns] == pytest.approx([2.0, 2.8])


def test_minutes_are_parsed() -> None:
    """Timestamps larger than a minute are converted to seconds."""
    turns = LineTranscriptParser().parse_turns("[1:05] AGENT: hi\n[12:34] USER: bye")
    assert [t.start_s for t in turns] == [65.0, 754.0]


def test_vocabulary_is_case_insensitive() -> None:
    """Speaker markers match in any case and resolve to roles."""
    text = "\n".join(
        [
            "customer (John): hi",
            "ivr: Press 1 for English",
            "System (Riya): connecting",
            "agent: hello",
        ]
    )

    turns = LineTranscriptParser().parse_turns(text)

    assert [(t.role, t.speaker_name) for t in turns] == [
        (SpeakerRole.USER, "John"),
        (SpeakerRole.SYSTEM, None),
        (SpeakerRole.SYSTEM, None),
        (SpeakerRole.AGENT, None),
    ]


def test_placeholder_names_in_markers_are_dropped() -> None:
    """`Agent (Unknown)` does not produce a name."""
    turns = LineTranscriptParser().parse_turns("AGENT (Unknown): hello")
    assert turns[0].speaker_name is None


def test_line_parser_skips_unlabeled_and_blank_lines() -> None:
    """Lines without a known speaker marker are dropped."""
    text = "Call transcript\n\nAGENT: Hello\nhow are you\nSpeaker 1: hi\n   \nUSER: fine"

    turns = LineTranscriptParser().parse_turns(text)

    assert [t.text for t in turns] == ["Hello", "fine"]


def test_continuation_parser_appends_unlabeled_lines() -> None:
    """Unlabeled lines continue the previous turn and extend its end."""
    text = "Call transcript\nAGENT (Riya): Hello\nthere friend\nUSER: ok"

    turns = ContinuationTranscriptParser().parse_turns(text)

    assert [t.text for t in turns] == ["Hello there friend", "ok"]
    assert turns[0].speaker_name == "Riya"
    assert turns[0].end_s == pytest.approx(1.2)
    assert turns[1].start_s == pytest.approx(1.2)


def test_parser_names() -> None:
    """Parsers are registered under stable names."""
    assert LineTranscriptParser.name == "line"
    assert ContinuationTranscriptParser.name == "continuation"


def test_empty_text_yields_no_turns() -> None:
    """Empty input is not an error."""
    assert LineTranscriptParser().parse_turns("") == []
    assert ContinuationTranscriptParser().parse_turns("\n\n") == []


def test_oversized_timestamps_use_the_cursor() -> None:
    """Timestamps too large to represent are ignored like missing ones."""
    text = "AGENT: one two three four five\n[" + "9" * 400 + ":00] USER: a b\n[" + "9" * 5000 + ":00] AGENT: c"

    turns = LineTranscriptParser().parse_turns(text)

    assert [t.text for t in turns] == ["one two three four five", "a b", "c"]
    assert [t.start_s for t in turns] == pytest.approx([0.0, 2.0, 2.8])

"""Tests for role classification and speaker name extraction."""

import pytest

from transcript_canon.profiles import SpeakerRole
from transcript_canon.roles import (
    PLACEHOLDER_NAMES,
    classify_role,
    clean_speaker_name,
    extract_speaker_name,
    is_placeholder_name,
)


@pytest.mark.parametrize(
    ("label", "expected"),
    [
        ("AGENT", SpeakerRole.AGENT),
        ("senior agent", SpeakerRole.AGENT),
        ("  Agent (Riya) ", SpeakerRole.AGENT),
        ("user", SpeakerRole.USER),
        ("Customer", SpeakerRole.USER),
        ("Caller 2", SpeakerRole.USER),
        ("SYSTEM", SpeakerRole.SYSTEM),
        ("ivr", SpeakerRole.SYSTEM),
        ("Hold music", SpeakerRole.SYSTEM),
        ("speaker 1", SpeakerRole.USER),
        ("", SpeakerRole.USER),
    ],
)
def test_classify_role_follows_priority_order(label: str, expected: SpeakerRole) -> None:
    """Role labels should be classified by substring in priority order."""
    assert classify_role(label) is expected


def test_classify_role_prefers_agent_over_other_words() -> None:
    """A label mentioning both agent and system is an agent."""
    assert classify_role("system agent") is SpeakerRole.AGENT


def test_classify_role_accepts_roles_and_non_strings() -> None:
    """Existing roles pass through, None and unknown values become USER."""
    assert classify_role(SpeakerRole.SYSTEM) is SpeakerRole.SYSTEM
    assert classify_role(None) is SpeakerRole.USER
    assert classify_role(42) is SpeakerRole.USER


@pytest.mark.parametrize(
    ("profile", "role", "expected"),
    [
        ("Agent (Riya)", SpeakerRole.AGENT, "Riya"),
        ("Caller (Priya)", SpeakerRole.USER, "Priya"),
        ("John", SpeakerRole.USER, "John"),
        ("  Riya  ", SpeakerRole.AGENT, "Riya"),
        ("Agent (Unknown)", SpeakerRole.AGENT, None),
        ("User (N/A)", SpeakerRole.USER, None),
        ("AGENT", SpeakerRole.AGENT, None),
        ("user", SpeakerRole.USER, None),
        ("Riya", SpeakerRole.SYSTEM, None),
        ("System (Riya)", SpeakerRole.SYSTEM, None),
        ("", SpeakerRole.USER, None),
        ("   ", SpeakerRole.USER, None),
        (None, SpeakerRole.AGENT, None),
    ],
)
def test_extract_speaker_name(profile: str | None, role: SpeakerRole, expected: str | None) -> None:
    """Only genuine names should be extracted from a profile string."""
    assert extract_speaker_name(profile, role) == expected


@pytest.mark.parametrize("placeholder", PLACEHOLDER_NAMES)
@pytest.mark.parametrize("template", ["{}", "{} ", "Agent ({})", "User ({})", "Speaker {}"])
@pytest.mark.parametrize("transform", [str.lower, str.upper, str.title])
def test_extract_speaker_name_never_returns_placeholders(placeholder: str, template: str, transform) -> None:
    """Placeholder tokens must never come back as a name, in any case."""
    profile = template.format(transform(placeholder))
    for role in SpeakerRole:
        name = extract_speaker_name(profile, role)
        assert name is None or name.strip().lower() not in PLACEHOLDER_NAMES


def test_is_placeholder_name_matches_exact_tokens_only() -> None:
    """Exact placeholder tokens match regardless of case and padding."""
    assert is_placeholder_name(" Unknown ")
    assert is_placeholder_name("N/A")
    assert not is_placeholder_name("Anna")


def test_clean_speaker_name() -> None:
    """Explicit names are trimmed, blanks and placeholders are dropped."""
    assert clean_speaker_name(" Anna ") == "Anna"
    assert clean_speaker_name("Unidentified") is None
    assert clean_speaker_name("  ") is None
    assert clean_speaker_name(None) is None

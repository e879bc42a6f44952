# Transcript Canon
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Canonical transcript data model.

All transcript producers (ASR output, uploads, live conversation logs) are
converted into a `TranscriptDoc`. All consumers (viewers, scoring, export) read
only this structure.

Rules that hold for every document:
- Turns are kept in producer order. Nothing here ever re-sorts by timestamp.
- `speaker_name` is optional and is never a placeholder like "Unknown".
- `profile`/`base_role` are derived from `role` and cannot be set directly.
- Documents are immutable snapshots. Transformations return new documents.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, NamedTuple

from transcript_canon.profiles import BaseRole, Profile, SpeakerRole, role_profile
from transcript_canon.roles import is_placeholder_name


@dataclass(frozen=True)
class TranscriptTurn:
    """One contiguous utterance by one speaker.

    Attributes:
        role:
            Speaker role.
        text:
            Verbatim transcription in Roman script. For `SYSTEM` turns this may
            be a bracketed description such as `[Call ringing]`.
        start_s:
            Start time in seconds from recording start.
        end_s:
            End time in seconds. Must not be before `start_s`.
        speaker_name:
            Genuine human name if known, otherwise None.
        confidence:
            Optional ASR confidence (0-1).
        channel:
            Optional audio channel identifier.
    """

    role: SpeakerRole
    text: str
    start_s: float
    end_s: float
    speaker_name: str | None = None
    confidence: float | None = None
    channel: int | str | None = None

    def __post_init__(self) -> None:
        if self.end_s < self.start_s:
            raise ValueError(f"Turn ends before it starts: {self.start_s} > {self.end_s}")

        if self.speaker_name is not None:
            if not self.speaker_name.strip() or is_placeholder_name(self.speaker_name):
                raise ValueError(f"Not a speaker name: {self.speaker_name!r}")

    @property
    def profile(self) -> Profile:
        return role_profile(self.role)[0]

    @property
    def base_role(self) -> BaseRole:
        return role_profile(self.role)[1]

    @property
    def start_ms(self) -> int:
        return int(round(self.start_s * 1000))

    @property
    def end_ms(self) -> int:
        return int(round(self.end_s * 1000))

    @property
    def duration_s(self) -> float:
        return self.end_s - self.start_s

    def to_dict(self) -> dict[str, Any]:
        """Return the plain-data wire representation of this turn."""

        out: dict[str, Any] = {
            "speaker": self.role.value,
            "profile": self.profile.value,
            "baseRole": self.base_role.value,
        }
        if self.speaker_name is not None:
            out["speakerName"] = self.speaker_name
        out["text"] = self.text
        out["startS"] = self.start_s
        out["endS"] = self.end_s
        out["startMs"] = self.start_ms
        out["endMs"] = self.end_ms
        if self.confidence is not None:
            out["confidence"] = self.confidence
        if self.channel is not None:
            out["channel"] = self.channel
        return out


@dataclass(frozen=True)
class TranscriptMetadata:
    """Call-level metadata.

    Attributes:
        duration_s:
            Total call duration in seconds.
        language:
            Language code(s), e.g. `en`, `hi`, `hi-en`.
        agent_name:
            Agent display name, if known.
        user_name:
            Customer display name, if known.
        sample_rate_hz:
            Sample rate of the original audio.
        created_at:
            ISO 8601 timestamp of document creation.
        source:
            Producer tag such as `whisper-asr`, `manual-upload` or
            `live-conversation`.
    """

    duration_s: float | None = None
    language: str | None = None
    agent_name: str | None = None
    user_name: str | None = None
    sample_rate_hz: int | None = None
    created_at: str | None = None
    source: str | None = None

    def to_dict(self) -> dict[str, Any]:
        pairs = (
            ("durationS", self.duration_s),
            ("language", self.language),
            ("agentName", self.agent_name),
            ("userName", self.user_name),
            ("sampleRateHz", self.sample_rate_hz),
            ("createdAt", self.created_at),
            ("source", self.source),
        )
        return {key: value for key, value in pairs if value is not None}


@dataclass(frozen=True)
class TranscriptDoc:
    """The canonical transcript document.

    Attributes:
        turns:
            Conversation turns in producer order.
        metadata:
            Call-level metadata.
        call_start_ms:
            Start of the first interactive turn in milliseconds. None if the
            whole transcript is pre-call or detection has not run.
        pre_call_duration_ms:
            Length of the non-interactive preamble in milliseconds.
    """

    turns: tuple[TranscriptTurn, ...] = ()
    metadata: TranscriptMetadata = field(default_factory=TranscriptMetadata)
    call_start_ms: int | None = None
    pre_call_duration_ms: int | None = None

    def __post_init__(self) -> None:
        # Accept any sequence from callers but always store a tuple.
        if not isinstance(self.turns, tuple):
            object.__setattr__(self, "turns", tuple(self.turns))

    def to_dict(self) -> dict[str, Any]:
        """Return the plain-data wire representation consumed by UI and export."""

        out: dict[str, Any] = {
            "turns": [t.to_dict() for t in self.turns],
            "metadata": self.metadata.to_dict(),
        }
        if self.call_start_ms is not None:
            out["callStartMs"] = self.call_start_ms
        if self.pre_call_duration_ms is not None:
            out["preCallDurationMs"] = self.pre_call_duration_ms
        return out


class SpeakerRef(NamedTuple):
    """A distinct speaker appearing in a transcript."""

    role: SpeakerRole
    name: str | None


_PROFILE_LABELS: dict[Profile, str] = {
    Profile.AGENT: "Agent",
    Profile.CUSTOMER: "Customer",
    Profile.IVR: "IVR",
    Profile.SYSTEM: "System",
    Profile.HOLD: "On Hold",
    Profile.WAITING: "Waiting",
    Profile.NOISE: "Background",
    Profile.PEER_AGENT: "Agent (Internal)",
    Profile.SUPERVISOR: "Supervisor",
    Profile.OTHER: "Other",
}


def speaker_display_name(turn: TranscriptTurn) -> str:
    """Return the speaker name, or a profile-based label. Never "Unknown"."""

    if turn.speaker_name and turn.speaker_name.strip():
        return turn.speaker_name
    return _PROFILE_LABELS[turn.profile]


def turn_duration(turn: TranscriptTurn) -> float:
    return turn.duration_s


def filter_by_role(doc: TranscriptDoc, role: SpeakerRole) -> list[TranscriptTurn]:
    return [t for t in doc.turns if t.role is role]


def unique_speakers(doc: TranscriptDoc) -> list[SpeakerRef]:
    """List distinct speakers in order of first appearance.

    Named turns are keyed by name, unnamed turns by role.
    """

    seen: dict[str, SpeakerRef] = {}
    for turn in doc.turns:
        key = turn.speaker_name or turn.role.value
        if key not in seen:
            seen[key] = SpeakerRef(role=turn.role, name=turn.speaker_name)
    return list(seen.values())


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def is_transcript_doc(value: Any) -> bool:
    """Check whether `value` is a canonical document or its wire representation."""

    if isinstance(value, TranscriptDoc):
        return True
    if not isinstance(value, Mapping):
        return False

    turns = value.get("turns")
    metadata = value.get("metadata")
    if not isinstance(turns, list) or not isinstance(metadata, Mapping):
        return False

    roles = {r.value for r in SpeakerRole}
    for turn in turns:
        if not isinstance(turn, Mapping):
            return False
        if turn.get("speaker") not in roles:
            return False
        if not isinstance(turn.get("text"), str):
            return False
        if not _is_number(turn.get("startS")) or not _is_number(turn.get("endS")):
            return False

    return True

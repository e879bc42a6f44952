# Transcript Canon
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Segment normalization.

Converts one producer record into one `TranscriptTurn`. Records come from
ASR services, legacy transcription output and live voice agents, and each
producer names its fields differently. Every known alias is checked in a fixed
precedence order:

- start: `startS`, `startSeconds`, `start`, `start_s`, `start_seconds`
- end: `endS`, `endSeconds`, `end`, `end_s`, `end_seconds` (default: start)
- role: `speaker`, `role` (default: USER)
- explicit name: `speakerName`, `name`, `speaker_name`
- free-text profile: `profile`, `speakerProfile`, `speaker_profile`
- text: `text`, `content`

Records may be mappings or plain objects exposing the same attribute names.
"""

import math
from collections.abc import Mapping
from enum import Enum
from numbers import Real
from typing import Any

from transcript_canon.config import NormalizeOptions
from transcript_canon.model import TranscriptTurn
from transcript_canon.profiles import Profile, SpeakerRole
from transcript_canon.roles import classify_role, clean_speaker_name, extract_speaker_name


_START_KEYS = ("startS", "startSeconds", "start", "start_s", "start_seconds")
_END_KEYS = ("endS", "endSeconds", "end", "end_s", "end_seconds")
_ROLE_KEYS = ("speaker", "role")
_NAME_KEYS = ("speakerName", "name", "speaker_name")
_PROFILE_KEYS = ("profile", "speakerProfile", "speaker_profile")
_TEXT_KEYS = ("text", "content")

_ALL_KEYS = _START_KEYS + _END_KEYS + _ROLE_KEYS + _NAME_KEYS + _PROFILE_KEYS + _TEXT_KEYS

# Canonical profile values (e.g. "customer" in an already-normalized turn) are
# vocabulary, not names.
_PROFILE_VALUES = frozenset(p.value.lower() for p in Profile)


def _field(record: Any, key: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(key)
    return getattr(record, key, None)


def _first(record: Any, keys: tuple[str, ...]) -> Any:
    for key in keys:
        value = _field(record, key)
        if value is not None:
            return value
    return None


def coerce_number(value: Any) -> float | None:
    """Return `value` as a finite float, or None (numeric strings are accepted).

    Values too large for a float, or too large to express in milliseconds,
    are treated like missing values.
    """

    if isinstance(value, bool):
        return None
    if not isinstance(value, (Real, str)):
        return None

    try:
        number = float(value.strip() if isinstance(value, str) else value)
    except (OverflowError, ValueError):
        return None

    return number if math.isfinite(number * 1000) else None


def _first_number(record: Any, keys: tuple[str, ...]) -> float | None:
    for key in keys:
        number = coerce_number(_field(record, key))
        if number is not None:
            return number
    return None


def is_segment_record(value: Any) -> bool:
    """Return True if `value` can be read as a segment record.

    Mappings always qualify. Scalars (None, strings, numbers) never do. Other
    objects qualify when they expose at least one known field.
    """

    if isinstance(value, Mapping):
        return True
    if value is None or isinstance(value, (str, bytes, Real)):
        return False
    return any(hasattr(value, key) for key in _ALL_KEYS)


def _default_name(role: SpeakerRole, options: NormalizeOptions) -> str | None:
    if role is SpeakerRole.AGENT:
        return clean_speaker_name(options.default_agent_name)
    if role is SpeakerRole.USER:
        return clean_speaker_name(options.default_user_name)
    return None


def normalize_segment(record: Any, options: NormalizeOptions | None = None) -> TranscriptTurn:
    """Normalize one producer record into a canonical turn.

    Args:
        record:
            Mapping or object with segment fields (see module docstring).
        options:
            Normalization options. Only the default names are used here.

    Returns:
        The canonical turn. Missing times default to 0 (start) and to the
        start time (end); an end before the start is clamped to the start.
        This function never raises.
    """

    if isinstance(record, TranscriptTurn):
        return record

    options = options or NormalizeOptions()

    start_s = _first_number(record, _START_KEYS)
    if start_s is None:
        start_s = 0.0
    end_s = _first_number(record, _END_KEYS)
    if end_s is None or end_s < start_s:
        end_s = start_s

    role = classify_role(_first(record, _ROLE_KEYS) or SpeakerRole.USER)

    speaker_name = clean_speaker_name(_first(record, _NAME_KEYS))
    if speaker_name is None:
        profile = _first(record, _PROFILE_KEYS)
        if isinstance(profile, Enum):
            profile = profile.value
        profile_text = str(profile) if profile is not None else None
        if profile_text is not None and profile_text.strip().lower() in _PROFILE_VALUES:
            profile_text = None
        speaker_name = extract_speaker_name(profile_text, role)
    if speaker_name is None:
        speaker_name = _default_name(role, options)

    text = _first(record, _TEXT_KEYS)
    text = str(text).strip() if text is not None else ""

    confidence = coerce_number(_field(record, "confidence"))
    channel = _field(record, "channel")
    if isinstance(channel, bool) or not isinstance(channel, (int, str)):
        channel = None

    return TranscriptTurn(
        role=role,
        speaker_name=speaker_name,
        text=text,
        start_s=start_s,
        end_s=end_s,
        confidence=confidence,
        channel=channel,
    )

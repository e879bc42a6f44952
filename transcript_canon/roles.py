# Transcript Canon
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Speaker role and speaker name heuristics.

Producers mark speakers in many ways: `AGENT`, `Customer`, `Agent (Riya)`,
`IVR`, `Caller 2`, ... This module reduces those labels to a `SpeakerRole` and,
where one is genuinely present, a human display name.

Names are never invented. Placeholder values such as "Unknown" or "N/A" are
rejected, and role-only labels like "AGENT" are never mistaken for names.
"""

import re
from typing import Any

from transcript_canon.profiles import SpeakerRole


# Non-informative values that must never be stored as a speaker name.
PLACEHOLDER_NAMES: tuple[str, ...] = (
    "unknown",
    "n/a",
    "na",
    "unidentified",
    "anonymous",
    "unnamed",
    "not provided",
)

_ROLE_WORDS = ("agent", "user", "system")

_PAREN_RE = re.compile(r"\(([^)]+)\)")


def classify_role(value: Any) -> SpeakerRole:
    """Map an arbitrary role label to a `SpeakerRole`.

    Checks run in priority order: anything containing `AGENT` is an agent,
    then `USER`/`CUSTOMER`/`CALLER`, then `SYSTEM`/`IVR`/`HOLD`. Labels that
    match nothing default to `USER`.

    Args:
        value:
            A role label, an existing `SpeakerRole`, or None.

    Returns:
        The classified role. This function never raises.
    """

    if isinstance(value, SpeakerRole):
        return value
    if value is None:
        return SpeakerRole.USER

    label = str(value).upper().strip()

    if "AGENT" in label:
        return SpeakerRole.AGENT
    if any(word in label for word in ("USER", "CUSTOMER", "CALLER")):
        return SpeakerRole.USER
    if any(word in label for word in ("SYSTEM", "IVR", "HOLD")):
        return SpeakerRole.SYSTEM

    return SpeakerRole.USER


def _mentions_placeholder(text: str) -> bool:
    normalized = text.lower().strip()
    return any(p in normalized for p in PLACEHOLDER_NAMES)


def is_placeholder_name(value: str) -> bool:
    """Return True if `value` is exactly one of the placeholder tokens (any case)."""

    return value.strip().lower() in PLACEHOLDER_NAMES


def extract_speaker_name(profile: str | None, role: SpeakerRole) -> str | None:
    """Derive a display name from a free-text speaker profile.

    Examples:
        - `"Agent (Riya)"` -> `"Riya"`
        - `"John"` -> `"John"`
        - `"Agent (Unknown)"` -> None
        - `"AGENT"` -> None
        - anything for a `SYSTEM` turn -> None

    Args:
        profile:
            Free-text profile string as written by the producer.
        role:
            Role already resolved for the turn.

    Returns:
        A clean name, or None if no genuine name is present.
    """

    if not profile or not profile.strip():
        return None

    # System audio never gets a personal name.
    if role is SpeakerRole.SYSTEM:
        return None

    if _mentions_placeholder(profile):
        return None

    paren = _PAREN_RE.search(profile)
    if paren:
        extracted = paren.group(1).strip()
        if extracted and not _mentions_placeholder(extracted):
            return extracted

    normalized = profile.lower().strip()
    if not any(word in normalized for word in _ROLE_WORDS):
        return profile.strip()

    return None


def clean_speaker_name(value: Any) -> str | None:
    """Normalize an explicit name field.

    Blank values and exact placeholder tokens are dropped. Other names are kept
    verbatim (trimmed).
    """

    if value is None:
        return None

    name = str(value).strip()
    if not name or is_placeholder_name(name):
        return None

    return name

# Transcript Canon
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Plain-text rendering of canonical transcripts.

`transcript_to_text` is the export format used for copy/paste and as input to
the PDF/DOC exporters:

    [0:05] Riya: Hello, how can I help?
    [0:09] USER: I want to cancel.

The speaker label is the speaker name if known, otherwise the role name.
"""

from dataclasses import asdict, dataclass
from typing import Any

from transcript_canon.model import TranscriptDoc, TranscriptTurn, speaker_display_name, unique_speakers
from transcript_canon.profiles import SpeakerRole


def format_timestamp(seconds: float) -> str:
    """Format seconds as `M:SS` (e.g. `1:23`, `12:34`)."""

    minutes = int(seconds // 60)
    secs = int(seconds % 60)
    return f"{minutes}:{secs:02d}"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def format_duration(seconds: float) -> str:
    """Format seconds in words, e.g. `5 seconds`, `1 minute 5 seconds`, `2 minutes`."""

    minutes = int(seconds // 60)
    secs = int(seconds % 60)

    if minutes == 0:
        return _plural(secs, "second")
    if secs == 0:
        return _plural(minutes, "minute")
    return f"{_plural(minutes, 'minute')} {_plural(secs, 'second')}"


def _label(turn: TranscriptTurn) -> str:
    return turn.speaker_name or turn.role.value


def transcript_to_text(doc: TranscriptDoc, include_timestamps: bool = True) -> str:
    """Render a document as one `[M:SS] Label: text` line per turn.

    Args:
        doc:
            Document to render.
        include_timestamps:
            If False, the `[M:SS] ` prefix is omitted.

    Returns:
        The rendered text. Every line, including the last, ends with a newline.
        An empty document renders as an empty string.
    """

    lines: list[str] = []
    for turn in doc.turns:
        prefix = f"[{format_timestamp(turn.start_s)}] " if include_timestamps else ""
        lines.append(f"{prefix}{_label(turn)}: {turn.text}\n")
    return "".join(lines)


def transcript_to_segment_blocks(doc: TranscriptDoc) -> str:
    """Render a document as time-range blocks separated by blank lines.

        [5 seconds - 9 seconds]
        Riya: Hello, how can I help?

    Unnamed speakers are labeled by profile ("Agent", "Customer", "System").
    """

    blocks = [
        f"[{format_duration(turn.start_s)} - {format_duration(turn.end_s)}]\n"
        f"{speaker_display_name(turn)}: {turn.text}"
        for turn in doc.turns
    ]
    return "\n\n".join(blocks)


@dataclass(frozen=True)
class TranscriptSummary:
    """Turn and speaker counts for a document."""

    turn_count: int
    agent_turns: int
    user_turns: int
    system_turns: int
    speaker_count: int
    duration_s: float | None
    source: str | None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def summarize_transcript(doc: TranscriptDoc) -> TranscriptSummary:
    """Count turns per role and distinct human speakers."""

    def _count(role: SpeakerRole) -> int:
        return sum(1 for t in doc.turns if t.role is role)

    humans = [s for s in unique_speakers(doc) if s.role is not SpeakerRole.SYSTEM]

    return TranscriptSummary(
        turn_count=len(doc.turns),
        agent_turns=_count(SpeakerRole.AGENT),
        user_turns=_count(SpeakerRole.USER),
        system_turns=_count(SpeakerRole.SYSTEM),
        speaker_count=len(humans),
        duration_s=doc.metadata.duration_s,
        source=doc.metadata.source,
    )

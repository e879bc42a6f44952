# Transcript Canon
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Line-oriented plain-text transcript parsers.

Rules:
- One utterance per line. Blank lines are ignored.
- A line may start with a `[M:SS]` timestamp.
- The speaker marker has the form `ROLE: text` or `ROLE (Name): text`, where
  ROLE is one of AGENT, USER, SYSTEM, CUSTOMER or IVR (any case).
- Without a timestamp, a turn starts where the previous one ended. Turn
  lengths are estimated from the word count.

`LineTranscriptParser` skips lines without a speaker marker.
`ContinuationTranscriptParser` appends them to the previous turn instead.
"""

import math
import re
from dataclasses import dataclass, replace

from transcript_canon.model import TranscriptTurn
from transcript_canon.profiles import SpeakerRole
from transcript_canon.roles import classify_role, extract_speaker_name


# Rough speaking rate used when no end time is known.
WORDS_PER_SECOND = 2.5

_TIMESTAMP_RE = re.compile(r"^\[(?P<minutes>\d+):(?P<seconds>\d+)\]")

_SPEAKER_RE = re.compile(
    r"^(?:\[\d+:\d+\]\s*)?"
    r"(?P<role>AGENT|USER|SYSTEM|Agent|User|Customer|System|IVR)\s*"
    r"(?:\((?P<name>[^)]+)\))?\s*:\s*(?P<text>.+)$",
    re.IGNORECASE,
)


def estimate_duration(text: str) -> float:
    """Estimate how long it takes to speak `text`, in seconds."""

    return len(text.split()) / WORDS_PER_SECOND


@dataclass(frozen=True)
class _LabeledLine:
    timestamp_s: float | None
    role: SpeakerRole
    speaker_name: str | None
    text: str


def _timestamp_seconds(minutes: str, seconds: str) -> float | None:
    # Timestamps too large to keep in milliseconds count as missing.
    try:
        value = float(int(minutes) * 60 + int(seconds))
    except (OverflowError, ValueError):
        return None
    return value if math.isfinite(value * 1000) else None


def _parse_line(line: str) -> _LabeledLine | None:
    timestamp_s: float | None = None
    ts = _TIMESTAMP_RE.match(line)
    if ts:
        timestamp_s = _timestamp_seconds(ts.group("minutes"), ts.group("seconds"))

    marker = _SPEAKER_RE.match(line)
    if marker is None:
        return None

    role = classify_role(marker.group("role"))
    return _LabeledLine(
        timestamp_s=timestamp_s,
        role=role,
        speaker_name=extract_speaker_name(marker.group("name"), role),
        text=marker.group("text").strip(),
    )


class LineTranscriptParser:
    """Parse `[M:SS] ROLE (Name): text` lines into turns."""

    name = "line"

    def parse_turns(self, text: str) -> list[TranscriptTurn]:
        turns: list[TranscriptTurn] = []
        cursor = 0.0

        for raw_line in text.split("\n"):
            line = raw_line.strip()
            if not line:
                continue

            labeled = _parse_line(line)
            if labeled is None:
                turns = self._handle_unlabeled(turns, line)
                if turns:
                    cursor = turns[-1].end_s
                continue

            start_s = labeled.timestamp_s if labeled.timestamp_s is not None else cursor
            end_s = start_s + estimate_duration(labeled.text)

            turns.append(
                TranscriptTurn(
                    role=labeled.role,
                    speaker_name=labeled.speaker_name,
                    text=labeled.text,
                    start_s=start_s,
                    end_s=end_s,
                )
            )
            cursor = end_s

        return turns

    def _handle_unlabeled(self, turns: list[TranscriptTurn], line: str) -> list[TranscriptTurn]:
        """Called for lines without a speaker marker. The default drops them."""

        return turns


class ContinuationTranscriptParser(LineTranscriptParser):
    """Line parser that keeps unlabeled lines as continuations.

    An unlabeled line is appended to the previous turn and extends its
    estimated end time. Unlabeled lines before the first turn are ignored
    (common for headers written by transcription tools).
    """

    name = "continuation"

    def _handle_unlabeled(self, turns: list[TranscriptTurn], line: str) -> list[TranscriptTurn]:
        if not turns:
            return turns

        prev = turns[-1]
        turns[-1] = replace(
            prev,
            text=(prev.text + " " + line).strip(),
            end_s=prev.end_s + estimate_duration(line),
        )
        return turns

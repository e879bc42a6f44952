# Transcript Canon
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Pre-call detection and the scoring filter.

Recordings often start with ringing, hold music or an IVR menu before the agent
and the customer actually talk. That preamble must not influence quality
scoring of human behavior. Whether a turn is interactive is decided by its
profile (see `transcript_canon.profiles`).
"""

from dataclasses import dataclass, replace

from transcript_canon.model import TranscriptDoc, TranscriptTurn
from transcript_canon.profiles import is_interactive_profile


@dataclass(frozen=True)
class PreCallBoundary:
    """
    Result of pre-call detection.

    Attributes:
        first_interactive_index:
            Index of the first interactive turn, or None if there is none.
        call_start_ms:
            Start of that turn in milliseconds, or None if there is none.
        pre_call_duration_ms:
            Length of the non-interactive preamble in milliseconds.
    """

    first_interactive_index: int | None
    call_start_ms: int | None
    pre_call_duration_ms: int


def _document_duration_s(doc: TranscriptDoc) -> float:
    if doc.metadata.duration_s is not None:
        return doc.metadata.duration_s
    return max((t.end_s for t in doc.turns), default=0.0)


def detect_pre_call(doc: TranscriptDoc) -> PreCallBoundary:
    """Locate where the interactive conversation starts.

    - No interactive turn: the whole document is pre-call. `call_start_ms` is
      None and the pre-call duration is the document duration.
    - First turn interactive: there is no pre-call section (0 and 0).
    - Otherwise: the call starts with the first interactive turn and the
      pre-call duration is measured from the start of the first turn.

    Turn order is taken as given; no sorting or overlap checks are done.
    """

    index = next(
        (i for i, t in enumerate(doc.turns) if is_interactive_profile(t.profile)),
        None,
    )

    if index is None:
        return PreCallBoundary(
            first_interactive_index=None,
            call_start_ms=None,
            pre_call_duration_ms=int(round(_document_duration_s(doc) * 1000)),
        )

    if index == 0:
        return PreCallBoundary(first_interactive_index=0, call_start_ms=0, pre_call_duration_ms=0)

    first_interactive = doc.turns[index]
    return PreCallBoundary(
        first_interactive_index=index,
        call_start_ms=first_interactive.start_ms,
        pre_call_duration_ms=first_interactive.start_ms - doc.turns[0].start_ms,
    )


def annotate_pre_call(doc: TranscriptDoc) -> TranscriptDoc:
    """Return a new document with `call_start_ms`/`pre_call_duration_ms` set."""

    boundary = detect_pre_call(doc)
    return replace(
        doc,
        call_start_ms=boundary.call_start_ms,
        pre_call_duration_ms=boundary.pre_call_duration_ms,
    )


def interactive_turns(doc: TranscriptDoc) -> list[TranscriptTurn]:
    return [t for t in doc.turns if is_interactive_profile(t.profile)]


def filter_for_scoring(doc: TranscriptDoc) -> TranscriptDoc:
    """Return a copy that contains only the interactive conversation.

    The duration is recalculated as the latest end time among the kept turns
    (absolute timings are preserved). The pre-call fields are recomputed for
    the filtered turns, which by construction have no pre-call section.
    """

    kept = tuple(interactive_turns(doc))
    duration_s = max((t.end_s for t in kept), default=0.0)

    filtered = replace(
        doc,
        turns=kept,
        metadata=replace(doc.metadata, duration_s=duration_s),
    )
    return annotate_pre_call(filtered)

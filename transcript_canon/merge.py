# Transcript Canon
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Turn merging.

ASR services often split one utterance into many short segments. Consecutive
turns with the same role and the same speaker name (both absent counts as the
same) are coalesced into one. A different name under the same role is a
different speaker and is never merged.
"""

from collections.abc import Iterable
from dataclasses import replace

from transcript_canon.model import TranscriptDoc, TranscriptTurn


def _same_speaker(a: TranscriptTurn, b: TranscriptTurn) -> bool:
    return a.role is b.role and a.speaker_name == b.speaker_name


def merge_consecutive_turns(turns: Iterable[TranscriptTurn]) -> list[TranscriptTurn]:
    """Merge runs of turns by the same speaker.

    Text is joined with a single space and the merged turn ends where the last
    turn of the run ends. Applying the merge to its own output changes nothing.
    """

    merged: list[TranscriptTurn] = []
    for turn in turns:
        if merged and _same_speaker(merged[-1], turn):
            current = merged[-1]
            merged[-1] = replace(
                current,
                text=current.text + " " + turn.text,
                end_s=max(turn.end_s, current.start_s),
            )
        else:
            merged.append(turn)
    return merged


def merge_doc(doc: TranscriptDoc) -> TranscriptDoc:
    """Return a new document with consecutive same-speaker turns merged."""

    return replace(doc, turns=tuple(merge_consecutive_turns(doc.turns)))

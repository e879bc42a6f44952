# Transcript Canon
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Transcript input variants.

Independent producers hand over transcripts in different shapes. Instead of
sniffing shapes all over the pipeline, each input is first turned into exactly
one of the variants below. The conversion code then matches on the variant
exhaustively.

`classify_input` checks shapes in this order (first match wins):

1. a `TranscriptDoc` or a value with a `turns` list -> `CanonicalInput`
2. a value with a `segments` list -> `LegacySegmentsInput`
3. a list or tuple -> `SegmentListInput`
4. a string -> `PlainTextInput`
5. anything else -> `UnrecognizedInput`
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TypeAlias

from transcript_canon.model import TranscriptDoc


@dataclass(frozen=True)
class CanonicalInput:
    """An already-canonical document, its plain-data form, or an object with `turns`."""

    value: Any


@dataclass(frozen=True)
class LegacySegmentsInput:
    """A `{segments: [...]}` wrapper as written by transcription services."""

    segments: Sequence[Any]


@dataclass(frozen=True)
class SegmentListInput:
    """A bare list of segment-like records, e.g. live conversation turns."""

    segments: Sequence[Any]


@dataclass(frozen=True)
class PlainTextInput:
    """Pasted or uploaded text, one utterance per line."""

    text: str


@dataclass(frozen=True)
class UnrecognizedInput:
    """Any value that matches none of the known shapes."""

    value: Any


TranscriptInput: TypeAlias = (
    CanonicalInput | LegacySegmentsInput | SegmentListInput | PlainTextInput | UnrecognizedInput
)


def _list_member(value: Any, name: str) -> Sequence[Any] | None:
    if isinstance(value, Mapping):
        member = value.get(name)
    elif isinstance(value, (str, bytes, list, tuple)) or value is None:
        return None
    else:
        member = getattr(value, name, None)

    if isinstance(member, (list, tuple)):
        return member
    return None


def classify_input(value: Any) -> TranscriptInput:
    """Wrap an arbitrary input value in its matching variant.

    Besides mappings, objects exposing a `turns` or `segments` list attribute
    (e.g. pydantic models) are recognized as well.
    """

    if isinstance(value, TranscriptDoc):
        return CanonicalInput(value)

    if _list_member(value, "turns") is not None:
        return CanonicalInput(value)

    segments = _list_member(value, "segments")
    if segments is not None:
        return LegacySegmentsInput(segments)

    if isinstance(value, (list, tuple)):
        return SegmentListInput(value)

    if isinstance(value, str):
        return PlainTextInput(value)

    return UnrecognizedInput(value)

# Transcript Canon
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Transcript normalization.

`normalize_transcript` is the entry point used by every transcript producer. It
accepts any supported input shape and always returns a valid `TranscriptDoc`:

- canonical documents are passed through (pre-call detection is added if
  missing),
- `{segments: [...]}` wrappers and bare segment lists are normalized record
  by record,
- plain text is parsed line by line,
- anything else yields an empty document tagged `source="unknown"` and one
  warning on the injected logger.

The producer-specific adapters (`from_asr_segments`, `from_legacy_transcription`,
`from_live_conversation`, `from_text`) build their input variant directly and
skip shape detection.

Nothing in this module raises for bad input, performs I/O, or keeps state
between calls.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Protocol, assert_never

from transcript_canon.config import NormalizeOptions
from transcript_canon.inputs import (
    CanonicalInput,
    LegacySegmentsInput,
    PlainTextInput,
    SegmentListInput,
    TranscriptInput,
    UnrecognizedInput,
    classify_input,
)
from transcript_canon.merge import merge_doc
from transcript_canon.model import TranscriptDoc, TranscriptMetadata, TranscriptTurn
from transcript_canon.precall import annotate_pre_call
from transcript_canon.profiles import SpeakerRole
from transcript_canon.roles import clean_speaker_name
from transcript_canon.segments import coerce_number, is_segment_record, normalize_segment
from transcript_canon.transcripts.line_parser import LineTranscriptParser


UNKNOWN_SOURCE = "unknown"


class WarningLogger(Protocol):
    """Diagnostic sink for unrecognized input. `logging.Logger` satisfies it."""

    def warning(self, msg: str, *args: Any) -> Any: ...


_logger = logging.getLogger(__name__)


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _get(value: Any, key: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(key)
    return getattr(value, key, None)


def _optional_text(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def _optional_int(value: Any) -> int | None:
    number = coerce_number(value)
    return int(round(number)) if number is not None else None


def _first_named(turns: Iterable[TranscriptTurn], role: SpeakerRole) -> str | None:
    return next((t.speaker_name for t in turns if t.role is role and t.speaker_name), None)


def _segments_to_turns(segments: Sequence[Any], options: NormalizeOptions) -> list[TranscriptTurn]:
    # Scalars inside a segment list carry no turn information and are skipped.
    return [normalize_segment(seg, options) for seg in segments if is_segment_record(seg)]


def _assemble(
    turns: list[TranscriptTurn],
    options: NormalizeOptions,
    default_source: str,
) -> TranscriptDoc:
    """Build the document, detect the pre-call section and merge if requested."""

    metadata = TranscriptMetadata(
        duration_s=max((t.end_s for t in turns), default=0.0),
        language=options.language,
        agent_name=clean_speaker_name(options.default_agent_name)
        or _first_named(turns, SpeakerRole.AGENT),
        user_name=clean_speaker_name(options.default_user_name)
        or _first_named(turns, SpeakerRole.USER),
        sample_rate_hz=options.sample_rate_hz,
        created_at=_now_iso(),
        source=options.source or default_source,
    )

    doc = annotate_pre_call(TranscriptDoc(turns=tuple(turns), metadata=metadata))

    if options.merge_consecutive_turns:
        doc = merge_doc(doc)

    return doc


def _metadata_from_plain(value: Any, fallback_source: Any) -> TranscriptMetadata:
    if value is None:
        value = {}

    duration = coerce_number(_get(value, "durationS"))
    if duration is None:
        duration = coerce_number(_get(value, "duration_s"))

    return TranscriptMetadata(
        duration_s=duration,
        language=_optional_text(_get(value, "language")),
        agent_name=clean_speaker_name(_get(value, "agentName") or _get(value, "agent_name")),
        user_name=clean_speaker_name(_get(value, "userName") or _get(value, "user_name")),
        sample_rate_hz=_optional_int(_get(value, "sampleRateHz") or _get(value, "sample_rate_hz")),
        created_at=_optional_text(_get(value, "createdAt") or _get(value, "created_at")),
        source=_optional_text(_get(value, "source")) or _optional_text(fallback_source),
    )


def _canonical_doc(value: Any) -> TranscriptDoc:
    """Rebuild a `TranscriptDoc` from its plain-data form.

    Canonical producers are trusted: turns keep their order and their own
    names. No default names are applied.
    """

    if isinstance(value, TranscriptDoc):
        return value

    plain_options = NormalizeOptions()
    raw_turns = _get(value, "turns")
    if not isinstance(raw_turns, (list, tuple)):
        raw_turns = ()
    turns = [normalize_segment(t, plain_options) for t in raw_turns if is_segment_record(t)]

    call_start_ms = _get(value, "callStartMs")
    if call_start_ms is None:
        call_start_ms = _get(value, "call_start_ms")
    pre_call_ms = _get(value, "preCallDurationMs")
    if pre_call_ms is None:
        pre_call_ms = _get(value, "pre_call_duration_ms")

    return TranscriptDoc(
        turns=tuple(turns),
        metadata=_metadata_from_plain(_get(value, "metadata"), _get(value, "source")),
        call_start_ms=_optional_int(call_start_ms),
        pre_call_duration_ms=_optional_int(pre_call_ms),
    )


def _empty_unknown_doc() -> TranscriptDoc:
    return TranscriptDoc(metadata=TranscriptMetadata(created_at=_now_iso(), source=UNKNOWN_SOURCE))


def convert_input(
    variant: TranscriptInput,
    options: NormalizeOptions | None = None,
    logger: WarningLogger | None = None,
) -> TranscriptDoc:
    """Convert a classified input into a canonical document.

    Args:
        variant:
            Input variant from `classify_input` or a producer adapter.
        options:
            Normalization options.
        logger:
            Sink for the unrecognized-input warning. Defaults to this module's
            logger.

    Returns:
        A valid document. Never raises for malformed input.
    """

    options = options or NormalizeOptions()

    if isinstance(variant, CanonicalInput):
        doc = _canonical_doc(variant.value)
        if doc.call_start_ms is None:
            doc = annotate_pre_call(doc)
        if options.merge_consecutive_turns and doc.turns:
            doc = merge_doc(doc)
        return doc

    if isinstance(variant, LegacySegmentsInput):
        return _assemble(_segments_to_turns(variant.segments, options), options, "legacy-segments")

    if isinstance(variant, SegmentListInput):
        return _assemble(_segments_to_turns(variant.segments, options), options, "array")

    if isinstance(variant, PlainTextInput):
        parser = options.text_parser or LineTranscriptParser()
        return _assemble(parser.parse_turns(variant.text), options, "text-parse")

    if isinstance(variant, UnrecognizedInput):
        (logger or _logger).warning(
            "Unable to normalize transcript input of type %s, returning empty document",
            type(variant.value).__name__,
        )
        return _empty_unknown_doc()

    assert_never(variant)


def normalize_transcript(
    value: Any,
    options: NormalizeOptions | None = None,
    logger: WarningLogger | None = None,
) -> TranscriptDoc:
    """Convert any supported transcript shape into a `TranscriptDoc`.

    Args:
        value:
            A canonical document (object or plain data), a `{segments: [...]}`
            wrapper, a list of segment records, or a plain-text transcript.
        options:
            Default names, merge flag, source/language tags, text parser.
        logger:
            Optional warning sink for unrecognized input.

    Returns:
        The canonical document. Unrecognized input gives an empty document
        with `metadata.source == "unknown"`.
    """

    return convert_input(classify_input(value), options, logger)


def _with_source(options: NormalizeOptions | None, source: str) -> NormalizeOptions:
    options = options or NormalizeOptions()
    if options.source:
        return options
    return replace(options, source=source)


def from_asr_segments(
    segments: Sequence[Any],
    options: NormalizeOptions | None = None,
) -> TranscriptDoc:
    """Normalize the segment list returned by a speech-recognition service."""

    return convert_input(SegmentListInput(segments), _with_source(options, "asr"))


def from_legacy_transcription(
    legacy: Any,
    options: NormalizeOptions | None = None,
    logger: WarningLogger | None = None,
) -> TranscriptDoc:
    """Normalize legacy transcription output (`{segments: [...], ...}`)."""

    segments = _get(legacy, "segments")
    variant: TranscriptInput
    if isinstance(segments, (list, tuple)):
        variant = LegacySegmentsInput(segments)
    else:
        variant = UnrecognizedInput(legacy)
    return convert_input(variant, _with_source(options, "legacy-segments"), logger)


def from_live_conversation(
    turns: Sequence[Any],
    options: NormalizeOptions | None = None,
) -> TranscriptDoc:
    """Normalize the turn log recorded by a live voice agent."""

    return convert_input(SegmentListInput(turns), _with_source(options, "live-conversation"))


def from_text(text: str, options: NormalizeOptions | None = None) -> TranscriptDoc:
    """Normalize a pasted or uploaded plain-text transcript."""

    return convert_input(PlainTextInput(text), _with_source(options, "manual-upload"))

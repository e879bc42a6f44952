"""
Transcript canonicalization package.

Call transcripts arrive from several independent producers: speech
recognition services (segment lists), legacy transcription output, live voice
agents (turn logs), and pasted or uploaded text. This package converts all of
them into one canonical, immutable `TranscriptDoc` and provides the follow-up
steps every consumer needs:

- merging consecutive turns of the same speaker,
- locating the pre-call section (ringing, hold, IVR) and filtering it out
  before scoring,
- rendering a document back to timestamped plain text.
"""

from transcript_canon.config import NormalizeOptions
from transcript_canon.merge import merge_consecutive_turns, merge_doc
from transcript_canon.model import (
    TranscriptDoc,
    TranscriptMetadata,
    TranscriptTurn,
    filter_by_role,
    is_transcript_doc,
    speaker_display_name,
    unique_speakers,
)
from transcript_canon.normalize import (
    from_asr_segments,
    from_legacy_transcription,
    from_live_conversation,
    from_text,
    normalize_transcript,
)
from transcript_canon.precall import PreCallBoundary, annotate_pre_call, detect_pre_call, filter_for_scoring
from transcript_canon.profiles import BaseRole, Profile, SpeakerRole
from transcript_canon.render import transcript_to_text
from transcript_canon.roles import classify_role, extract_speaker_name

__all__ = [
    "BaseRole",
    "NormalizeOptions",
    "PreCallBoundary",
    "Profile",
    "SpeakerRole",
    "TranscriptDoc",
    "TranscriptMetadata",
    "TranscriptTurn",
    "annotate_pre_call",
    "classify_role",
    "detect_pre_call",
    "extract_speaker_name",
    "filter_by_role",
    "filter_for_scoring",
    "from_asr_segments",
    "from_legacy_transcription",
    "from_live_conversation",
    "from_text",
    "is_transcript_doc",
    "merge_consecutive_turns",
    "merge_doc",
    "normalize_transcript",
    "speaker_display_name",
    "transcript_to_text",
    "unique_speakers",
]

"""Transcript parsing.

Plain-text transcripts are turned into canonical turns by a pluggable
`TranscriptTextParser`. The default `LineTranscriptParser` reads one
`[M:SS] ROLE (Name): text` utterance per line; other parsers can be swapped in
through `NormalizeOptions.text_parser` without touching the rest of the
pipeline.

File readers (TXT/MD, ODT, JSON/YAML) live beside the parsers and are selected
by `transcript_canon.transcripts.registry`.
"""

from transcript_canon.transcripts.base import ParserError, TranscriptReader, TranscriptTextParser
from transcript_canon.transcripts.line_parser import (
    ContinuationTranscriptParser,
    LineTranscriptParser,
)

__all__ = [
    "ContinuationTranscriptParser",
    "LineTranscriptParser",
    "ParserError",
    "TranscriptReader",
    "TranscriptTextParser",
]

# Transcript Canon
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Transcript parser and reader registry."""

from pathlib import Path
from typing import Any

from transcript_canon.config import ConfigError
from transcript_canon.transcripts.base import ParserError, TranscriptReader, TranscriptTextParser
from transcript_canon.transcripts.line_parser import ContinuationTranscriptParser, LineTranscriptParser
from transcript_canon.transcripts.odt_reader import OdtFileReader
from transcript_canon.transcripts.structured_reader import StructuredFileReader
from transcript_canon.transcripts.text_reader import TextFileReader


_TEXT_PARSERS: dict[str, TranscriptTextParser] = {
    parser.name: parser
    for parser in (LineTranscriptParser(), ContinuationTranscriptParser())
}


_READERS: list[TranscriptReader] = [
    StructuredFileReader(),
    OdtFileReader(),
    TextFileReader(),
]


def get_text_parser(name: str) -> TranscriptTextParser:
    """Select a plain-text parser by name.

    Args:
        name:
            Parser name (`line` or `continuation`).

    Returns:
        A parser instance.

    Raises:
        ConfigError:
            If no parser has that name.
    """

    parser = _TEXT_PARSERS.get(name.strip().lower())
    if parser is None:
        supported = ", ".join(sorted(_TEXT_PARSERS))
        raise ConfigError(f"Unknown text parser: {name} (supported: {supported})")
    return parser


def get_transcript_reader(path: Path) -> TranscriptReader:
    """Select a transcript reader based on the file.

    Args:
        path:
            Transcript file path.

    Returns:
        A reader instance.

    Raises:
        ConfigError:
            If no reader supports the file.
    """

    for reader in _READERS:
        if reader.can_read(path):
            return reader

    supported = ", ".join(sorted({".json", ".yaml", ".yml", ".odt", ".txt", ".md"}))
    raise ConfigError(f"Unsupported transcript format: {path} (supported: {supported})")


def read_transcript_input(path: Path) -> Any:
    """Read a transcript file and normalize errors to ConfigError."""

    if not path.is_file():
        raise ConfigError(f"Transcript file not found: {path}")

    reader = get_transcript_reader(path)
    try:
        return reader.read_input(path)
    except ParserError as exc:
        raise ConfigError(str(exc)) from exc

# Transcript Canon
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Transcript parser and reader interfaces."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from transcript_canon.model import TranscriptTurn


class TranscriptTextParser(Protocol):
    """Interface for plain-text transcript parsing.

    Implementations turn pasted or uploaded text into canonical turns. They
    must not raise for malformed text; lines they cannot interpret are simply
    not turned into turns. Document-level metadata is handled elsewhere.
    """

    name: str

    def parse_turns(self, text: str) -> list[TranscriptTurn]:
        """Return the turns found in `text`, in source order."""

        raise NotImplementedError


class TranscriptReader(Protocol):
    """Interface for reading transcript input files.

    Readers only extract the raw input value: a string for text-like formats,
    structured data for JSON/YAML. Normalization happens afterwards.
    """

    def can_read(self, path: Path) -> bool:
        """Return True if this reader supports the given file."""

        raise NotImplementedError

    def read_input(self, path: Path) -> Any:
        """Return the raw transcript value stored in the file."""

        raise NotImplementedError


@dataclass(frozen=True)
class ParserError(RuntimeError):
    """Raised when a transcript file cannot be read."""

    message: str
    path: Path | None = None
    line: int | None = None
    excerpt: str | None = None

    def __str__(self) -> str:
        parts: list[str] = []

        if self.path is not None:
            if self.line is not None:
                parts.append(f"{self.path}:{self.line}: {self.message}")
            else:
                parts.append(f"{self.path}: {self.message}")
        else:
            parts.append(self.message)

        if isinstance(self.excerpt, str) and self.excerpt.strip():
            excerpt = self.excerpt.strip().replace("\n", " ")
            if len(excerpt) > 160:
                excerpt = excerpt[:157] + "..."
            parts.append(f"> {excerpt}")

        return "\n".join(parts)

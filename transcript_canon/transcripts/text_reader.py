# Transcript Canon
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""TXT/Markdown transcript reader.

The file content is returned as a single string with normalized line endings.
Speaker detection is left to the text parsers.
"""

from pathlib import Path

from transcript_canon.transcripts.base import ParserError


class TextFileReader:
    """Read .txt and .md transcripts as plain text."""

    def can_read(self, path: Path) -> bool:
        return path.suffix.lower() in {".txt", ".md"}

    def read_input(self, path: Path) -> str:
        try:
            raw = path.read_text(encoding="utf-8")
        except Exception as exc:  # noqa: BLE001
            raise ParserError(f"Failed to read text file: {exc}", path=path) from exc

        # Drop a UTF-8 byte order mark written by some editors.
        return raw.lstrip("\ufeff").replace("\r\n", "\n").replace("\r", "\n")

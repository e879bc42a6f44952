# Transcript Canon
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""ODT transcript reader."""

from pathlib import Path

from odfdo import Document

from transcript_canon.transcripts.base import ParserError


class OdtFileReader:
    """Read ODT documents as plain text, one line per paragraph."""

    def can_read(self, path: Path) -> bool:
        return path.suffix.lower() == ".odt"

    def read_input(self, path: Path) -> str:
        """Extract paragraph and heading text from an ODT document.

        Whitespace inside a paragraph is collapsed to single spaces so that a
        paragraph always maps to exactly one transcript line.
        """

        try:
            doc = Document(path)
            body = doc.body

            def _node_text(node: object) -> str:
                # odfdo Paragraph objects often expose richer text via
                # `inner_text`/`text_recursive` than via `.text`.
                for attr in ("inner_text", "text_recursive", "text"):
                    if hasattr(node, attr):
                        value = getattr(node, attr)
                        if callable(value):
                            value = value()
                        if value is not None:
                            return str(value)
                return str(node)

            nodes = list(body.xpath(".//text:p | .//text:h"))
            if not nodes:
                nodes = list(body.get_paragraphs())

            lines = [" ".join(_node_text(n).split()) for n in nodes]
            return "\n".join(line for line in lines if line)
        except Exception as exc:  # noqa: BLE001
            raise ParserError(f"Failed to parse ODT file '{path}': {exc}") from exc

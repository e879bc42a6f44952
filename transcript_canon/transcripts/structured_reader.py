# Transcript Canon
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""JSON/YAML transcript reader.

Structured files hold producer output as-is: a canonical document, a
`{segments: [...]}` wrapper, or a bare list of turn records. The value is
returned unchanged for the format dispatcher to classify.
"""

import json
from pathlib import Path
from typing import Any

import yaml

from transcript_canon.transcripts.base import ParserError


class StructuredFileReader:
    """Read .json, .yaml and .yml transcripts into Python values."""

    def can_read(self, path: Path) -> bool:
        return path.suffix.lower() in {".json", ".yaml", ".yml"}

    def read_input(self, path: Path) -> Any:
        try:
            raw = path.read_text(encoding="utf-8")
        except Exception as exc:  # noqa: BLE001
            raise ParserError(f"Failed to read file: {exc}", path=path) from exc

        if path.suffix.lower() == ".json":
            try:
                return json.loads(raw)
            except json.JSONDecodeError as exc:
                lines = raw.splitlines()
                raise ParserError(
                    f"Invalid JSON: {exc.msg}",
                    path=path,
                    line=exc.lineno,
                    excerpt=lines[exc.lineno - 1] if 0 < exc.lineno <= len(lines) else None,
                ) from exc

        try:
            return yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            mark = getattr(exc, "problem_mark", None)
            line = mark.line + 1 if mark is not None else None
            raise ParserError(f"Invalid YAML: {exc}", path=path, line=line) from exc

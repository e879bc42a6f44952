# Transcript Canon
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Output serialization helpers.

This module centralizes how canonical documents are written by the CLI
actions: YAML (default, human-friendly) or JSON (for web consumers).
"""

import json
from pathlib import Path
from typing import Any

import yaml

from transcript_canon.config import ConfigError


OUTPUT_FORMATS = ("yaml", "json")


def dump_data(data: Any, fmt: str) -> str:
    """Serialize plain data as YAML or JSON.

    Args:
        data:
            Plain data (dicts, lists, scalars).
        fmt:
            `yaml` or `json`.

    Returns:
        Serialized text ending with a newline.

    Raises:
        ConfigError:
            If the format is not supported.
    """

    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    if fmt == "json":
        return json.dumps(data, ensure_ascii=False, indent=2) + "\n"

    raise ConfigError(f"Unsupported output format: {fmt} (supported: {', '.join(OUTPUT_FORMATS)})")


def write_text_output(text: str, dest: Path | None) -> None:
    """Write `text` to `dest`, or to stdout when no destination is given.

    Raises:
        ConfigError:
            If the file cannot be written.
    """

    if dest is None:
        print(text, end="")
        return

    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to write output file '{dest}': {exc}") from exc

# Transcript Canon
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Logging setup for the command line tool.

The library modules only create named loggers. Handlers and levels are
configured here, and only the CLI calls `configure_logging`.
"""

import logging
import os

LOG_LEVEL_ENV_VAR = "TRANSCRIPT_CANON_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_log_level(level: str | int | None = None) -> int:
    """Resolve a level from an explicit value, the environment, or INFO.

    Unknown level names fall back to INFO.
    """

    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR) or logging.INFO

    if isinstance(level, int):
        return level

    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: str | int | None = None) -> int:
    """Configure root logging for CLI runs and return the applied level."""

    resolved = resolve_log_level(level)
    logging.basicConfig(format=LOG_FORMAT, level=resolved)
    logging.getLogger().setLevel(resolved)
    return resolved


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)

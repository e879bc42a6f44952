from __future__ import annotations

"""
Shared action interface.

Actions implement a small protocol so the CLI can dynamically register arguments
and dispatch execution based on the selected subcommand. The helpers below are
shared by all actions that read a transcript file and normalize it.
"""

import argparse
from dataclasses import replace
from pathlib import Path
from typing import Protocol

from transcript_canon.config import NormalizeOptions, TranscriptConfig
from transcript_canon.log import get_logger
from transcript_canon.model import TranscriptDoc
from transcript_canon.normalize import normalize_transcript
from transcript_canon.transcripts.registry import get_text_parser, read_transcript_input


class Action(Protocol):
    """
    Interface for a CLI action (subcommand).

    Implementations are expected to:
    - Provide a `name` used as the subcommand.
    - Provide a short `help` string for `--help`.
    - Declare whether they use the YAML config.
    """

    name: str
    help: str
    requires_config: bool

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register action-specific CLI arguments.

        Args:
            parser:
                The subparser dedicated to this action.

        Returns:
            None
        """

    def run(self, args: argparse.Namespace, config: TranscriptConfig | None) -> None:
        """
        Execute the action.

        Args:
            args:
                Parsed arguments for this subcommand.
            config:
                Loaded configuration, if `requires_config` is True.

        Returns:
            None
        """


def add_input_arguments(parser: argparse.ArgumentParser) -> None:
    """Register the transcript input argument and normalization overrides."""

    parser.add_argument(
        "input",
        help="Transcript file (.json, .yaml, .yml, .txt, .md, .odt)",
    )
    parser.add_argument(
        "--merge",
        action="store_true",
        default=None,
        help="Merge consecutive turns of the same speaker",
    )
    parser.add_argument("--agent-name", help="Default name for unnamed agent turns")
    parser.add_argument("--user-name", help="Default name for unnamed customer turns")
    parser.add_argument("--source", help="Producer tag written to the metadata")
    parser.add_argument("--language", help="Language code written to the metadata")
    parser.add_argument(
        "--text-parser",
        help="Parser for plain-text transcripts: line (default) or continuation",
    )


def normalize_options(args: argparse.Namespace, config: TranscriptConfig | None) -> NormalizeOptions:
    """
    Combine config-file options with command line overrides.

    Command line values win over the config file.
    """

    options = config.normalize if config is not None else NormalizeOptions()

    overrides: dict[str, object] = {}
    if getattr(args, "merge", None):
        overrides["merge_consecutive_turns"] = True
    if getattr(args, "agent_name", None):
        overrides["default_agent_name"] = args.agent_name
    if getattr(args, "user_name", None):
        overrides["default_user_name"] = args.user_name
    if getattr(args, "source", None):
        overrides["source"] = args.source
    if getattr(args, "language", None):
        overrides["language"] = args.language
    if getattr(args, "text_parser", None):
        overrides["text_parser"] = get_text_parser(args.text_parser)

    return replace(options, **overrides) if overrides else options


def load_document(args: argparse.Namespace, config: TranscriptConfig | None) -> TranscriptDoc:
    """
    Read the input file and normalize it.

    Raises:
        ConfigError:
            If the file cannot be read.
    """

    value = read_transcript_input(Path(args.input))
    return normalize_transcript(
        value,
        normalize_options(args, config),
        logger=get_logger("transcript_canon.cli"),
    )

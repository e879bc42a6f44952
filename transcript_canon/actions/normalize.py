# Transcript Canon
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Normalization action.

The `normalize` subcommand reads one transcript file in any supported shape
and writes the canonical document as YAML or JSON, either to stdout or to a
file.
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from transcript_canon.actions.base import add_input_arguments, load_document
from transcript_canon.config import TranscriptConfig
from transcript_canon.precall import filter_for_scoring
from transcript_canon.yaml_io import OUTPUT_FORMATS, dump_data, write_text_output


@dataclass(frozen=True)
class NormalizeAction:
    """
    `normalize` subcommand.

    Converts a transcript file into the canonical document structure.
    """

    name: str = "normalize"
    help: str = "Convert a transcript file into a canonical document"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `normalize` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        add_input_arguments(parser)
        parser.add_argument(
            "-o",
            "--output",
            help="Write the document to this file instead of stdout",
        )
        parser.add_argument(
            "--format",
            choices=OUTPUT_FORMATS,
            default="yaml",
            help="Output format (default: yaml)",
        )
        parser.add_argument(
            "--scoring",
            action="store_true",
            help="Write only the interactive part of the call",
        )

    def run(self, args: argparse.Namespace, config: TranscriptConfig | None) -> None:
        """
        Execute the normalization.

        Args:
            args:
                Parsed args for the subcommand.
            config:
                Loaded configuration.

        Returns:
            None

        Raises:
            ConfigError:
                If the input cannot be read or the output cannot be written.
        """

        doc = load_document(args, config)
        if args.scoring:
            doc = filter_for_scoring(doc)

        dest = Path(args.output) if args.output else None
        write_text_output(dump_data(doc.to_dict(), args.format), dest)

        if dest is not None:
            print(f"Wrote {len(doc.turns)} turn(s) to: {dest}")

# Transcript Canon
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Text rendering action.

The `render` subcommand normalizes a transcript file and prints it as readable
text, one `[M:SS] Speaker: text` line per turn. With `--scoring` only the
interactive conversation is rendered (ringing, hold and IVR are dropped).
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from transcript_canon.actions.base import add_input_arguments, load_document
from transcript_canon.config import RenderConfig, TranscriptConfig
from transcript_canon.precall import filter_for_scoring
from transcript_canon.render import transcript_to_segment_blocks, transcript_to_text
from transcript_canon.yaml_io import write_text_output


@dataclass(frozen=True)
class RenderAction:
    """
    `render` subcommand.
    """

    name: str = "render"
    help: str = "Render a transcript file as plain text"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        add_input_arguments(parser)
        parser.add_argument(
            "-o",
            "--output",
            help="Write the text to this file instead of stdout",
        )
        parser.add_argument(
            "--no-timestamps",
            action="store_true",
            help="Omit the [M:SS] prefix",
        )
        parser.add_argument(
            "--scoring",
            action="store_true",
            help="Render only the interactive part of the call",
        )
        parser.add_argument(
            "--ranges",
            action="store_true",
            help="Render time-range blocks instead of one line per turn",
        )

    def run(self, args: argparse.Namespace, config: TranscriptConfig | None) -> None:
        """
        Execute the rendering.

        Command line flags override the `render` section of the config.

        Raises:
            ConfigError:
                If the input cannot be read or the output cannot be written.
        """

        render = config.render if config is not None else RenderConfig()
        include_timestamps = render.include_timestamps and not args.no_timestamps
        scoring_only = render.scoring_only or bool(args.scoring)

        doc = load_document(args, config)
        if scoring_only:
            doc = filter_for_scoring(doc)

        if args.ranges:
            text = transcript_to_segment_blocks(doc)
            text = text + "\n" if text else text
        else:
            text = transcript_to_text(doc, include_timestamps=include_timestamps)

        write_text_output(text, Path(args.output) if args.output else None)

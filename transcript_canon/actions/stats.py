# Transcript Canon
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Transcript statistics action.

Prints turn counts, speaker counts and the detected pre-call section. Useful to
check how a producer's output was interpreted before feeding it into scoring.
"""

import argparse
from dataclasses import dataclass

from transcript_canon.actions.base import add_input_arguments, load_document
from transcript_canon.config import TranscriptConfig
from transcript_canon.precall import detect_pre_call
from transcript_canon.render import format_duration, summarize_transcript
from transcript_canon.yaml_io import OUTPUT_FORMATS, dump_data, write_text_output


@dataclass(frozen=True)
class StatsAction:
    """
    `stats` subcommand.
    """

    name: str = "stats"
    help: str = "Print turn and speaker statistics for a transcript file"
    requires_config: bool = True

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        add_input_arguments(parser)
        parser.add_argument(
            "--format",
            choices=("text", *OUTPUT_FORMATS),
            default="text",
            help="Output format (default: text)",
        )

    def run(self, args: argparse.Namespace, config: TranscriptConfig | None) -> None:
        doc = load_document(args, config)
        summary = summarize_transcript(doc)
        boundary = detect_pre_call(doc)

        if args.format != "text":
            data = summary.to_dict()
            data["call_start_ms"] = boundary.call_start_ms
            data["pre_call_duration_ms"] = boundary.pre_call_duration_ms
            write_text_output(dump_data(data, args.format), None)
            return

        print(f"Source: {summary.source or '-'}")
        print(f"Turns: {summary.turn_count}")
        print(f"  Agent: {summary.agent_turns}")
        print(f"  User: {summary.user_turns}")
        print(f"  System: {summary.system_turns}")
        print(f"Speakers: {summary.speaker_count}")
        print(f"Duration: {format_duration(summary.duration_s or 0.0)}")

        if boundary.call_start_ms is None:
            print("Call start: none (no interactive turns)")
        else:
            print(f"Call start: {boundary.call_start_ms} ms")
        print(f"Pre-call: {boundary.pre_call_duration_ms} ms")

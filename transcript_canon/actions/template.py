# Transcript Canon
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Template configuration generator.

This action writes a ready-to-edit `transcripts.yaml` file into the current
directory (or a user-specified path).
"""

import argparse
from dataclasses import dataclass
from pathlib import Path

from transcript_canon.config import ConfigError, TranscriptConfig


@dataclass(frozen=True)
class TemplateAction:
    """
    `template` subcommand.

    This action does not require a YAML config because it produces one.
    """

    name: str = "template"
    help: str = "Write a template transcripts.yaml config"
    requires_config: bool = False

    _TEMPLATE_YAML: str = "\n".join(
        [
            "# All keys are optional. Command line flags override these values.",
            "",
            "normalize:",
            "  # Names used for agent/customer turns that carry no name of their own.",
            "  # Never use placeholders like \"Unknown\" or \"N/A\": leave them unset instead.",
            "  # default_agent_name: Riya",
            "  # default_user_name: John",
            "",
            "  # Merge consecutive turns of the same speaker (ASR often splits utterances).",
            "  merge_consecutive_turns: false",
            "",
            "  # Producer tag written to the metadata, e.g. whisper-asr, manual-upload,",
            "  # live-conversation. If unset, a tag is derived from the input shape.",
            "  # source: manual-upload",
            "",
            "  # Language code(s), e.g. en, hi, hi-en",
            "  # language: en",
            "",
            "  # Audio sample rate of the original recording",
            "  # sample_rate_hz: 8000",
            "",
            "  # Plain-text parser:",
            "  #   line: one `[M:SS] ROLE (Name): text` utterance per line; unlabeled lines are skipped",
            "  #   continuation: like line, but unlabeled lines continue the previous turn",
            "  text_parser: line",
            "",
            "render:",
            "  # Prefix every line with [M:SS]",
            "  include_timestamps: true",
            "",
            "  # Render only the interactive conversation (drops ringing, hold and IVR)",
            "  scoring_only: false",
            "",
        ]
    )

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """
        Register CLI arguments for the `template` subcommand.

        Args:
            parser:
                Subparser for this command.

        Returns:
            None
        """

        parser.add_argument(
            "path",
            nargs="?",
            default="transcripts.yaml",
            help="Destination path for the template (default: ./transcripts.yaml)",
        )
        parser.add_argument(
            "-f",
            "--force",
            action="store_true",
            help="Allow overwriting an existing file",
        )

    def run(self, args: argparse.Namespace, config: TranscriptConfig | None) -> None:
        """
        Execute the template writer.

        Args:
            args:
                Parsed args for the subcommand.
            config:
                Unused for this action.

        Returns:
            None

        Raises:
            ConfigError:
                If the destination exists and `--force` is not set.
        """

        _ = config
        dest = Path(args.path)
        self._write_template(dest, force=bool(args.force))
        print(f"Wrote template config to: {dest}")

    def _write_template(self, dest: Path, *, force: bool) -> None:
        """
        Write a template YAML configuration file.

        Raises:
            ConfigError:
                If the destination exists and `force` is False.
            OSError:
                If the file cannot be written.
        """

        if dest.exists() and not force:
            raise ConfigError(f"Refusing to overwrite existing file: {dest} (use --force)")

        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(self._TEMPLATE_YAML, encoding="utf-8")

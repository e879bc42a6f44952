from __future__ import annotations

"""
CLI entrypoint for the transcript canonicalization tool.

This module builds a git-style subcommand CLI (via argparse) and dispatches
execution to action modules.
"""

import argparse
import sys
from dotenv import load_dotenv

from transcript_canon.actions.normalize import NormalizeAction
from transcript_canon.actions.render import RenderAction
from transcript_canon.actions.stats import StatsAction
from transcript_canon.actions.template import TemplateAction
from transcript_canon.config import ConfigError, load_optional_config
from transcript_canon.log import configure_logging


def _action_repository():
	"""
	Construct the action registry.

	Returns:
		A mapping from subcommand name to an action instance.
	"""
	actions = [
		TemplateAction(),
		NormalizeAction(),
		RenderAction(),
		StatsAction(),
	]
	return {a.name: a for a in actions}


def build_parser() -> argparse.ArgumentParser:
	"""
	Build the top-level argument parser.

	The parser uses subcommands (similar to `git`) where each action registers its
	own arguments.

	Returns:
		The configured ArgumentParser instance.
	"""
	parser = argparse.ArgumentParser(
		prog="transcript-canon",
		description=(
			"Convert call transcripts from ASR services, live voice agents and plain text "
			"into one canonical turn-based document."
		),
	)
	parser.add_argument(
		"--log-level",
		help="Logging level (default: $TRANSCRIPT_CANON_LOG_LEVEL or INFO)",
	)

	actions = _action_repository()

	config_parent = argparse.ArgumentParser(add_help=False)
	config_parent.add_argument(
		"--config",
		"-c",
		help=(
			"Path to transcripts.yaml. If omitted, $TRANSCRIPT_CANON_CONFIG or "
			"./transcripts.yaml is used when present."
		),
	)

	subparsers = parser.add_subparsers(dest="action", metavar="COMMAND", required=True)

	for name, action in actions.items():
		parents = [config_parent] if action.requires_config else []
		sub = subparsers.add_parser(name, help=action.help, parents=parents)
		action.add_arguments(sub)
		sub.set_defaults(_action_name=name)

	return parser


def main(argv: list[str] | None = None) -> int:
	"""
	Run the CLI.

	Args:
		argv:
			Optional argument list (without program name). If omitted, argparse
			reads from sys.argv.

	Returns:
		Process exit code. `0` on success, `2` on configuration/usage errors.

	Raises:
		SystemExit:
			When invoked via `python -m transcript_canon.app` (see module guard).
	"""
	load_dotenv()

	parser = build_parser()
	args = parser.parse_args(argv)

	configure_logging(args.log_level)

	try:
		actions = _action_repository()
		action_name = getattr(args, "_action_name", None)
		if not action_name or action_name not in actions:
			parser.error("Unknown or missing command")
			return 2

		action = actions[action_name]

		config = None
		if action.requires_config:
			config = load_optional_config(getattr(args, "config", None))

		action.run(args, config)
		return 0
	except ConfigError as exc:
		print(f"error: {exc}", file=sys.stderr)
		return 2


if __name__ == "__main__":
	raise SystemExit(main())

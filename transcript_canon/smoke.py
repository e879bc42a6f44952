# Transcript Canon
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Smoke-test helpers.

Run via:

    poetry run python -m transcript_canon.smoke

This is intentionally lightweight: it normalizes one built-in sample per
supported input shape and prints turn statistics (no files are read).
"""

import argparse
import json
from typing import Any

from transcript_canon.config import NormalizeOptions
from transcript_canon.normalize import normalize_transcript
from transcript_canon.render import summarize_transcript
from transcript_canon.roles import is_placeholder_name


SAMPLES: dict[str, Any] = {
    "legacy-segments": {
        "segments": [
            {"startSeconds": 0, "endSeconds": 5, "speaker": "SYSTEM", "speakerProfile": "IVR", "text": "[Call ringing]"},
            {"startSeconds": 5, "endSeconds": 8, "speaker": "SYSTEM", "speakerProfile": "Hold", "text": "[Hold music]"},
            {"startSeconds": 8, "endSeconds": 12, "speaker": "AGENT", "speakerProfile": "Agent (Riya)", "text": "Hello, this is Riya."},
            {"startSeconds": 12, "endSeconds": 15, "speaker": "USER", "speakerProfile": "User (Unknown)", "text": "Hi, I want to cancel."},
        ]
    },
    "live-conversation": [
        {"role": "agent", "content": "Namaste, main aapki kya madad kar sakti hoon?", "start": 0.0, "end": 3.2},
        {"role": "customer", "content": "Mera plan upgrade karna hai.", "start": 3.4, "end": 5.1},
        {"role": "customer", "content": "Aaj hi.", "start": 5.1, "end": 5.8},
    ],
    "text": "\n".join(
        [
            "[0:00] SYSTEM: [Call ringing]",
            "[0:05] AGENT (Riya): Hello, how can I help?",
            "[0:09] USER: I want to cancel.",
        ]
    ),
}


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Transcript Canon smoke test")
    parser.add_argument(
        "--merge",
        action="store_true",
        help="Merge consecutive turns of the same speaker",
    )
    parser.add_argument(
        "--print-docs",
        action="store_true",
        help="Print the normalized documents as JSON",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    options = NormalizeOptions(merge_consecutive_turns=bool(args.merge))

    for label, sample in SAMPLES.items():
        doc = normalize_transcript(sample, options)
        summary = summarize_transcript(doc)

        print(f"[{label}] source={summary.source}")
        print(
            f"  turns={summary.turn_count} agent={summary.agent_turns} "
            f"user={summary.user_turns} system={summary.system_turns} "
            f"speakers={summary.speaker_count}"
        )
        print(f"  duration={summary.duration_s}s pre_call={doc.pre_call_duration_ms}ms")

        # Small sanity check: placeholder names must never survive normalization.
        leaked = [t.speaker_name for t in doc.turns if t.speaker_name and is_placeholder_name(t.speaker_name)]
        if leaked:
            print(f"INTERNAL ERROR: placeholder speaker names in sample '{label}': {leaked}")
            return 3

        if bool(args.print_docs):
            print(json.dumps(doc.to_dict(), ensure_ascii=False, indent=2))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())

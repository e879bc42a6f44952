# Transcript Canon
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""
Configuration loading and validation.

Normalization behavior is controlled by `NormalizeOptions`. Library callers
usually construct it directly; the CLI can read it from an optional
`transcripts.yaml` file so that recurring settings (default names, producer
tag, language) do not have to be repeated on every call.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from transcript_canon.roles import is_placeholder_name
from transcript_canon.transcripts.base import TranscriptTextParser


CONFIG_ENV_VAR = "TRANSCRIPT_CANON_CONFIG"
DEFAULT_CONFIG_NAME = "transcripts.yaml"


@dataclass(frozen=True)
class NormalizeOptions:
    """
    Options for transcript normalization.

    Attributes:
        default_agent_name:
            Name applied to `AGENT` turns that carry no name of their own.
        default_user_name:
            Name applied to `USER` turns that carry no name of their own.
        merge_consecutive_turns:
            If True, consecutive turns of the same named speaker are merged.
        source:
            Producer tag written to the document metadata.
        language:
            Language code written to the document metadata.
        sample_rate_hz:
            Audio sample rate written to the document metadata.
        text_parser:
            Parser used for plain-text input. None selects the line parser.
    """

    default_agent_name: str | None = None
    default_user_name: str | None = None
    merge_consecutive_turns: bool = False
    source: str | None = None
    language: str | None = None
    sample_rate_hz: int | None = None
    text_parser: TranscriptTextParser | None = None


@dataclass(frozen=True)
class RenderConfig:
    """
    Configuration for text rendering.

    Attributes:
        include_timestamps:
            Prefix each line with `[M:SS]`.
        scoring_only:
            Render the scoring-filtered document (interactive turns only).
    """

    include_timestamps: bool = True
    scoring_only: bool = False


@dataclass(frozen=True)
class TranscriptConfig:
    """
    Parsed configuration file.

    Attributes:
        config_path:
            Path of the YAML file, or None when running on defaults.
        normalize:
            Normalization options.
        render:
            Rendering options.
    """

    config_path: Path | None = None
    normalize: NormalizeOptions = field(default_factory=NormalizeOptions)
    render: RenderConfig = field(default_factory=RenderConfig)


class ConfigError(RuntimeError):
    """
    Raised when the YAML configuration is missing, invalid, or cannot be parsed.
    """

    pass


def find_config_path(cli_path: str | None) -> Path:
    """
    Determine which YAML config file to use.

    Args:
        cli_path:
            Optional config path provided on the command line.

    Returns:
        The resolved Path object (not necessarily existing). Precedence is the
        CLI value, then `TRANSCRIPT_CANON_CONFIG`, then `./transcripts.yaml`.
    """

    if cli_path:
        return Path(cli_path)

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    return Path.cwd() / DEFAULT_CONFIG_NAME


def load_optional_config(cli_path: str | None) -> TranscriptConfig:
    """
    Load the config file if one was requested or exists at the default location.

    An explicitly requested file (CLI or environment) must exist. A missing
    default file silently yields the built-in defaults.
    """

    path = find_config_path(cli_path)
    explicit = bool(cli_path) or bool(os.environ.get(CONFIG_ENV_VAR))

    if not explicit and not path.exists():
        return TranscriptConfig()

    return load_config(path)


def load_config(path: Path) -> TranscriptConfig:
    """
    Load and validate a `transcripts.yaml` configuration file.

    Args:
        path:
            Path to the YAML config file.

    Returns:
        A validated TranscriptConfig instance.

    Raises:
        ConfigError:
            If the file is missing, unreadable, cannot be parsed as YAML, or
            contains invalid values.
    """

    if not path.exists():
        raise ConfigError(
            f"Config file not found: {path}. "
            "Use the 'template' command to create one or pass --config PATH."
        )
    if not path.is_file():
        raise ConfigError(f"Config path is not a file: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except Exception as exc:  # noqa: BLE001
        raise ConfigError(f"Failed to read YAML config: {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError("Config YAML must contain a mapping at the top level")

    unknown = sorted(set(raw) - {"normalize", "render"})
    if unknown:
        raise ConfigError(f"Config contains unknown key(s): {', '.join(unknown)}")

    return TranscriptConfig(
        config_path=path.resolve(),
        normalize=_parse_normalize(raw.get("normalize")),
        render=_parse_render(raw.get("render")),
    )


def _optional_str(section: dict[str, Any], key: str, context: str) -> str | None:
    value = section.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{context}.{key} must be a non-empty string if provided")
    return value.strip()


def _optional_bool(section: dict[str, Any], key: str, context: str, default: bool) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise ConfigError(f"{context}.{key} must be a boolean")
    return value


def _parse_normalize(value: Any) -> NormalizeOptions:
    """
    Parse and validate the optional `normalize` section.

    Args:
        value:
            Raw YAML value for the `normalize` key.

    Returns:
        A NormalizeOptions instance (with defaults if the section is missing).

    Raises:
        ConfigError:
            If the section exists but is not valid.
    """

    if value is None:
        return NormalizeOptions()

    if not isinstance(value, dict):
        raise ConfigError("'normalize' must be a mapping if provided")

    agent_name = _optional_str(value, "default_agent_name", "normalize")
    user_name = _optional_str(value, "default_user_name", "normalize")
    for key, name in (("default_agent_name", agent_name), ("default_user_name", user_name)):
        if name is not None and is_placeholder_name(name):
            raise ConfigError(f"normalize.{key} must be a real name, not a placeholder ({name!r})")

    sample_rate = value.get("sample_rate_hz")
    if sample_rate is not None:
        if isinstance(sample_rate, bool) or not isinstance(sample_rate, int) or sample_rate <= 0:
            raise ConfigError("normalize.sample_rate_hz must be a positive integer")

    parser_name = _optional_str(value, "text_parser", "normalize")
    text_parser = None
    if parser_name is not None:
        # Imported here: the registry itself depends on ConfigError.
        from transcript_canon.transcripts.registry import get_text_parser

        text_parser = get_text_parser(parser_name)

    return NormalizeOptions(
        default_agent_name=agent_name,
        default_user_name=user_name,
        merge_consecutive_turns=_optional_bool(
            value, "merge_consecutive_turns", "normalize", NormalizeOptions.merge_consecutive_turns
        ),
        source=_optional_str(value, "source", "normalize"),
        language=_optional_str(value, "language", "normalize"),
        sample_rate_hz=sample_rate,
        text_parser=text_parser,
    )


def _parse_render(value: Any) -> RenderConfig:
    """
    Parse and validate the optional `render` section.

    Raises:
        ConfigError:
            If the section exists but is not valid.
    """

    if value is None:
        return RenderConfig()

    if not isinstance(value, dict):
        raise ConfigError("'render' must be a mapping if provided")

    return RenderConfig(
        include_timestamps=_optional_bool(
            value, "include_timestamps", "render", RenderConfig.include_timestamps
        ),
        scoring_only=_optional_bool(value, "scoring_only", "render", RenderConfig.scoring_only),
    )

"""Tests for logging setup, output serialization and the smoke run."""

import json
import logging
from pathlib import Path

import pytest
import yaml

from transcript_canon import smoke
from transcript_canon.config import ConfigError
from transcript_canon.log import LOG_LEVEL_ENV_VAR, resolve_log_level
from transcript_canon.yaml_io import dump_data, write_text_output


def test_resolve_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Explicit levels win over the environment, unknown names fall back to INFO."""
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    assert resolve_log_level() == logging.INFO
    assert resolve_log_level("debug") == logging.DEBUG
    assert resolve_log_level(logging.ERROR) == logging.ERROR
    assert resolve_log_level("chatty") == logging.INFO

    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "WARNING")
    assert resolve_log_level() == logging.WARNING
    assert resolve_log_level("ERROR") == logging.ERROR


def test_dump_data_keeps_key_order_and_unicode() -> None:
    """Output keeps insertion order and does not escape non-ASCII text."""
    data = {"turns": [{"speaker": "USER", "text": "Namasté"}], "metadata": {"source": "asr"}}

    as_yaml = dump_data(data, "yaml")
    as_json = dump_data(data, "json")

    assert as_yaml.index("turns") < as_yaml.index("metadata")
    assert "Namasté" in as_yaml
    assert yaml.safe_load(as_yaml) == data
    assert as_json.endswith("\n")
    assert "Namasté" in as_json
    assert json.loads(as_json) == data


def test_dump_data_rejects_unknown_format() -> None:
    """Only YAML and JSON are supported."""
    with pytest.raises(ConfigError, match="Unsupported output format"):
        dump_data({}, "xml")


def test_write_text_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    """Text goes to stdout without a destination and to a new file otherwise."""
    write_text_output("hello\n", None)
    assert capsys.readouterr().out == "hello\n"

    dest = tmp_path / "nested" / "out.txt"
    write_text_output("hello\n", dest)
    assert dest.read_text(encoding="utf-8") == "hello\n"


def test_smoke_run(capsys: pytest.CaptureFixture[str]) -> None:
    """The smoke run normalizes every built-in sample."""
    assert smoke.main([]) == 0
    out = capsys.readouterr().out

    assert "[legacy-segments] source=legacy-segments" in out
    assert "[live-conversation] source=array" in out
    assert "[text] source=text-parse" in out
    assert "pre_call=8000ms" in out


def test_smoke_run_with_merge_and_docs(capsys: pytest.CaptureFixture[str]) -> None:
    """Merged documents can be printed as JSON."""
    assert smoke.main(["--merge", "--print-docs"]) == 0
    out = capsys.readouterr().out

    assert '"turns"' in out
    assert "Mera plan upgrade karna hai. Aaj hi." in out

"""Acceptance tests for the CLI."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import httpx
from click.testing import CliRunner

from threadllm.cli import cli


def _invoke(tmp_path: Path, args: list[str], payload=None, side_effect=None):
    runner = CliRunner()
    config = str(tmp_path / "missing.yaml")
    with patch("threadllm.orchestrator.fetch_thread_json", return_value=payload, side_effect=side_effect) as mock_fetch:
        result = runner.invoke(cli, ["--config", config, *args])
    return result, mock_fetch


class TestFetchCommand:
    def test_default_llm_text(self, tmp_path, thread_payload):
        result, mock_fetch = _invoke(tmp_path, ["fetch", "https://www.reddit.com/r/test/comments/abc123/hello/"], thread_payload)

        assert result.exit_code == 0, result.output
        assert mock_fetch.call_args.args[1] == "abc123"
        assert "TITLE: Hello" in result.output
        assert "[d0] u/alice\nFirst!" in result.output

    def test_json_format(self, tmp_path, thread_payload):
        result, _ = _invoke(tmp_path, ["fetch", "abc123", "--format", "json"], thread_payload)

        assert result.exit_code == 0, result.output
        assert '"postAuthor": "u/op"' in result.output
        assert '"commentsPerScorePoint": 0.75' in result.output

    def test_compact_format_with_stats(self, tmp_path, thread_payload):
        result, _ = _invoke(tmp_path, ["fetch", "abc123", "--format", "toon", "--stats"], thread_payload)

        assert result.exit_code == 0, result.output
        assert "d1 · u/[deleted]: reply to alice" in result.output
        assert "Hello · r/test" in result.output
        assert "Avg comment score: 1.33" in result.output
        assert "Comments / score: 0.750" in result.output

    def test_output_file(self, tmp_path, thread_payload):
        out = tmp_path / "thread.json"

        result, _ = _invoke(tmp_path, ["fetch", "abc123", "--format", "json", "--output", str(out)], thread_payload)

        assert result.exit_code == 0, result.output
        doc = json.loads(out.read_text(encoding="utf-8"))
        assert doc["stats"]["totalComments"] == 3
        assert [c["depth"] for c in doc["comments"]] == [0, 1, 0]

    def test_query_auto_load(self, tmp_path, thread_payload):
        result, mock_fetch = _invoke(tmp_path, ["fetch", "--query", "?id=abc123"], thread_payload)

        assert result.exit_code == 0, result.output
        assert mock_fetch.call_args.args[1] == "abc123"

    def test_query_without_params(self, tmp_path):
        result, mock_fetch = _invoke(tmp_path, ["fetch", "--query", "?foo=bar"])

        assert result.exit_code == 1
        mock_fetch.assert_not_called()

    def test_empty_input(self, tmp_path):
        result, mock_fetch = _invoke(tmp_path, ["fetch"])

        assert result.exit_code == 1
        assert "Enter a URL or Post ID." in result.output
        mock_fetch.assert_not_called()

    def test_invalid_input(self, tmp_path):
        result, mock_fetch = _invoke(tmp_path, ["fetch", "https://www.reddit.com/r/test/"])

        assert result.exit_code == 1
        assert "Invalid URL or Post ID." in result.output
        mock_fetch.assert_not_called()

    def test_fetch_failed(self, tmp_path):
        request = httpx.Request("GET", "https://www.reddit.com/comments/abc123.json")
        error = httpx.HTTPStatusError("404", request=request, response=httpx.Response(404, request=request))

        result, _ = _invoke(tmp_path, ["fetch", "abc123"], side_effect=error)

        assert result.exit_code == 1
        assert "Failed to load Reddit thread." in result.output

    def test_network_error(self, tmp_path):
        result, _ = _invoke(tmp_path, ["fetch", "abc123"], side_effect=httpx.ConnectError("refused"))

        assert result.exit_code == 1
        assert "Network error." in result.output

    def test_rejects_unknown_format(self, tmp_path):
        result, _ = _invoke(tmp_path, ["fetch", "abc123", "--format", "xml"])
        assert result.exit_code == 2


class TestIdCommand:
    def test_prints_id(self, tmp_path):
        result, _ = _invoke(tmp_path, ["id", "https://example.com/r/test/comments/abc123/title_slug/"])

        assert result.exit_code == 0
        assert result.output.strip() == "abc123"

    def test_invalid(self, tmp_path):
        result, _ = _invoke(tmp_path, ["id", "https://example.com/r/test/"])

        assert result.exit_code == 1
        assert "Invalid URL or Post ID." in result.output

    def test_unparseable_url(self, tmp_path):
        result, _ = _invoke(tmp_path, ["id", "http://[reddit.com/r/x/comments/abc"])

        assert result.exit_code == 1
        assert "Invalid URL or Post ID." in result.output

import base64
import hashlib
import io
import sys
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from digestconv.main import _input_stream, main

DIGEST = hashlib.md5(b"hello world").digest()
HEX = DIGEST.hex()
B64 = base64.b64encode(DIGEST).decode()


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


class TestCliSuccess:
    def test_converts_md5sum_output_line(self, runner: CliRunner) -> None:
        result = runner.invoke(main, input=f"{HEX}\n")

        assert result.exit_code == 0
        assert result.stderr == ""
        assert result.stdout.splitlines() == [
            f"input string:   {HEX}",
            "input encoding: hex",
            f"base64-encoded: {B64}",
            f"hex-encoded:    {HEX}",
        ]

    def test_converts_base64(self, runner: CliRunner) -> None:
        result = runner.invoke(main, input=B64)

        assert result.exit_code == 0
        assert "input encoding: base64" in result.output
        assert f"hex-encoded:    {HEX}" in result.output

    def test_converts_http_response(self, runner: CliRunner) -> None:
        response = (
            "HTTP/1.1 200 OK\r\n"
            "Server: test\r\n"
            f"content-md5: {B64}\r\n"
            "\r\n"
            "hello world"
        )

        result = runner.invoke(main, input=response)

        assert result.exit_code == 0
        assert f"input string:   {B64}" in result.output
        assert f"hex-encoded:    {HEX}" in result.output


class TestCliErrors:
    def test_missing_header_exits_non_zero(self, runner: CliRunner) -> None:
        result = runner.invoke(main, input="HTTP/1.1 200 OK\nX-Other: foo\n\n")

        assert result.exit_code == 1
        assert "Error: no Content-MD5 header" in result.stderr
        assert result.stdout == ""

    def test_missing_status_line_exits_non_zero(self, runner: CliRunner) -> None:
        result = runner.invoke(main, input="first\nsecond\n")

        assert result.exit_code == 1
        assert "'first'" in result.stderr
        assert result.stdout == ""

    def test_malformed_digest_exits_non_zero(self, runner: CliRunner) -> None:
        result = runner.invoke(main, input="Content-MD5: ###\n")

        assert result.exit_code == 1
        assert "'###'" in result.stderr
        assert "base64" in result.stderr
        assert result.stdout == ""

    def test_positional_argument_is_usage_error(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["somefile"], input=HEX)

        assert result.exit_code == 2
        assert "Usage:" in result.stderr
        assert result.stdout == ""

    def test_help(self, runner: CliRunner) -> None:
        result = runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Content-MD5" in result.output


class _TerminalStream(io.BytesIO):
    def isatty(self) -> bool:
        return True


class TestCliTerminal:
    def test_warns_when_reading_from_terminal(self, runner: CliRunner) -> None:
        with (
            patch(
                "digestconv.main._input_stream",
                return_value=_TerminalStream(HEX.encode()),
            ),
            patch("digestconv.main.Log.warning") as mock_warning,
        ):
            result = runner.invoke(main)

        assert result.exit_code == 0
        mock_warning.assert_called_once()
        assert "terminal" in mock_warning.call_args.args[0]

    def test_no_warning_for_piped_input(self, runner: CliRunner) -> None:
        with patch("digestconv.main.Log.warning") as mock_warning:
            runner.invoke(main, input=HEX)

        mock_warning.assert_not_called()


class TestCliInputStream:
    def test_reads_binary_buffer_of_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        stdin = io.TextIOWrapper(io.BytesIO(HEX.encode()))
        monkeypatch.setattr(sys, "stdin", stdin)

        assert _input_stream() is stdin.buffer

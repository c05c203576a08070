"""Tests for FizzBuzzCommand error routing and AppContext emission."""

from __future__ import annotations

import click
import pytest
from click.testing import CliRunner

from fizzbuzz.commands._base import FizzBuzzCommand
from fizzbuzz.commands._context import AppContext
from fizzbuzz.config.settings import FizzBuzzSettings
from fizzbuzz.domain.errors import RangeValidationError


def _command(exc: Exception | None) -> click.Command:
    @click.command(cls=FizzBuzzCommand)
    def probe() -> None:
        if exc is not None:
            raise exc
        click.echo("ok")

    return probe


class TestFizzBuzzCommand:
    def test_success(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(_command(None), [])
        assert result.exit_code == 0
        assert result.output == "ok\n"

    def test_domain_error_exits_one(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(_command(RangeValidationError("Range too large")), [])
        assert result.exit_code == 1
        assert "Error: Range too large" in result.output

    def test_click_error_exits_one(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(_command(click.UsageError("bad usage")), [])
        assert result.exit_code == 1
        assert "Error: bad usage" in result.output

    def test_non_standalone_returns_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        command = _command(RangeValidationError("nope"))
        assert command.main([], standalone_mode=False) == 1
        assert "Error: nope" in capsys.readouterr().err

    def test_non_standalone_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert _command(None).main([], standalone_mode=False) == 0


class TestAppContext:
    def test_emit_writes_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        app = AppContext(FizzBuzzSettings())
        app.emit("1 2 Fizz")
        assert capsys.readouterr().out == "1 2 Fizz\n"

    def test_emit_once(self) -> None:
        app = AppContext(FizzBuzzSettings())
        app.emit("first")
        with pytest.raises(RuntimeError):
            app.emit("second")

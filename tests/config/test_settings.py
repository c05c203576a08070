"""Tests for FizzBuzzSettings."""

import pytest
from pydantic import ValidationError

from fizzbuzz.config.settings import FizzBuzzSettings


class TestFizzBuzzSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ["DEFAULT_START", "DEFAULT_END", "DEFAULT_FORMAT", "VERBOSE", "LOG_JSON"]:
            monkeypatch.delenv(f"FIZZBUZZ_{name}", raising=False)
        settings = FizzBuzzSettings()
        assert settings.default_start == 1
        assert settings.default_end == 100
        assert settings.default_format == "numbered"
        assert settings.verbose is False
        assert settings.log_json is False

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FIZZBUZZ_DEFAULT_END", "30")
        monkeypatch.setenv("FIZZBUZZ_DEFAULT_FORMAT", "compact")
        settings = FizzBuzzSettings()
        assert settings.default_end == 30
        assert settings.default_format == "compact"

    def test_cli_flags_win_over_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FIZZBUZZ_VERBOSE", "false")
        assert FizzBuzzSettings.from_cli(verbose=True).verbose is True

    def test_none_flags_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FIZZBUZZ_LOG_JSON", "true")
        assert FizzBuzzSettings.from_cli(log_json=None).log_json is True

    def test_frozen(self) -> None:
        settings = FizzBuzzSettings()
        with pytest.raises(ValidationError):
            settings.verbose = True  # type: ignore[misc]


def test_env_defaults_reach_cli(monkeypatch: pytest.MonkeyPatch) -> None:
    from click.testing import CliRunner

    from fizzbuzz.cli import cli

    monkeypatch.setenv("FIZZBUZZ_DEFAULT_END", "5")
    monkeypatch.setenv("FIZZBUZZ_DEFAULT_FORMAT", "compact")
    result = CliRunner().invoke(cli, [])
    assert result.exit_code == 0
    assert result.output == "1 2 Fizz 4 Buzz\n"

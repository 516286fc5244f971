"""Tests for settings loading."""

import logging

import pydantic
import pytest

from mastermind.game.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's MASTERMIND_* variables out of these tests."""
    for name in (
        "MASTERMIND_BASE_URL",
        "MASTERMIND_HTTP_TIMEOUT_SECONDS",
        "MASTERMIND_MAX_ATTEMPTS",
        "MASTERMIND_EXIT_KEYWORD",
        "MASTERMIND_CLEANUP_ATTEMPTS",
        "MASTERMIND_CLEANUP_RETRY_WAIT_SECONDS",
        "MASTERMIND_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.base_url == "https://mastermind.darkube.app"
        assert settings.http_timeout_seconds is None
        assert settings.max_attempts == 10
        assert settings.exit_keyword == "exit"
        assert settings.cleanup_attempts == 1
        assert settings.log_level == "WARNING"

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MASTERMIND_BASE_URL", "https://games.example")
        monkeypatch.setenv("MASTERMIND_MAX_ATTEMPTS", "12")
        monkeypatch.setenv("MASTERMIND_HTTP_TIMEOUT_SECONDS", "2.5")

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.base_url == "https://games.example"
        assert settings.max_attempts == 12
        assert settings.http_timeout_seconds == 2.5

    def test_rejects_zero_attempts(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MASTERMIND_MAX_ATTEMPTS", "0")

        with pytest.raises(pydantic.ValidationError):
            Settings(_env_file=None)  # type: ignore[call-arg]

    def test_warns_on_plain_http(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="mastermind.game.config"):
            Settings(_env_file=None, base_url="http://localhost:8000")  # type: ignore[call-arg]

        assert "not using TLS" in caplog.text

    def test_log_level_is_case_insensitive(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("MASTERMIND_LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)  # type: ignore[call-arg]

        assert settings.log_level == "DEBUG"

    def test_rejects_unknown_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Bad levels fail at load time, not inside logging.basicConfig."""
        monkeypatch.setenv("MASTERMIND_LOG_LEVEL", "verbose")

        with pytest.raises(pydantic.ValidationError):
            Settings(_env_file=None)  # type: ignore[call-arg]

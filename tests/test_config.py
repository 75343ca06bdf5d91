"""Tests for settings loaded from the environment and .env files."""

from __future__ import annotations

from pathlib import Path

import pytest

from datekoans.config import Settings, load_settings, parse_log_level


class TestSettingsFromEnv:
    """Tests for Settings.from_env."""

    def test_defaults(self) -> None:
        """An empty environment gives the defaults."""
        assert Settings.from_env({}) == Settings()
        assert Settings().log_level == "WARNING"
        assert Settings().suites == ()

    def test_values(self) -> None:
        """Each variable maps to one setting."""
        settings = Settings.from_env(
            {
                "DATEKOANS_LOG_LEVEL": "debug",
                "DATEKOANS_KEEP_GOING": "yes",
                "DATEKOANS_SUITES": "AboutLocalDate, AboutPeriods,",
            }
        )
        assert settings.log_level == "DEBUG"
        assert settings.keep_going is True
        assert settings.suites == ("AboutLocalDate", "AboutPeriods")

    @pytest.mark.parametrize("raw", ["0", "false", "No", "off", ""])
    def test_false_values(self, raw: str) -> None:
        """Common spellings of false are accepted."""
        assert Settings.from_env({"DATEKOANS_KEEP_GOING": raw}).keep_going is False

    def test_bad_bool(self) -> None:
        """An unrecognised boolean is an error."""
        with pytest.raises(ValueError, match="DATEKOANS_KEEP_GOING"):
            Settings.from_env({"DATEKOANS_KEEP_GOING": "maybe"})

    def test_bad_log_level(self) -> None:
        """An unknown level name is an error."""
        with pytest.raises(ValueError, match="log level"):
            Settings.from_env({"DATEKOANS_LOG_LEVEL": "LOUD"})


class TestParseLogLevel:
    """Tests for parse_log_level."""

    def test_normalizes_case(self) -> None:
        """Level names are upper-cased and stripped."""
        assert parse_log_level(" info ") == "INFO"

    def test_rejects_numbers(self) -> None:
        """Numeric levels are not accepted."""
        with pytest.raises(ValueError):
            parse_log_level("10")


class TestLoadSettings:
    """Tests for load_settings with .env files."""

    def test_no_dotenv(self, clean_env: Path) -> None:
        """Without a .env file the defaults apply."""
        assert load_settings() == Settings()

    def test_dotenv_in_working_directory(self, clean_env: Path) -> None:
        """A .env file in the working directory is picked up."""
        (clean_env / ".env").write_text(
            "DATEKOANS_KEEP_GOING=true\nDATEKOANS_SUITES=AboutLocalDate\n"
        )
        settings = load_settings()
        assert settings.keep_going is True
        assert settings.suites == ("AboutLocalDate",)

    def test_explicit_path(self, clean_env: Path) -> None:
        """An explicit file is loaded instead of searching."""
        path = clean_env / "koans.env"
        path.write_text("DATEKOANS_LOG_LEVEL=info\n")
        assert load_settings(path).log_level == "INFO"

    def test_environment_wins(self, clean_env: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Variables already set are not overridden by the file."""
        (clean_env / ".env").write_text("DATEKOANS_LOG_LEVEL=DEBUG\n")
        monkeypatch.setenv("DATEKOANS_LOG_LEVEL", "ERROR")
        assert load_settings().log_level == "ERROR"

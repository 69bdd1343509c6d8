"""
Tests unitaires pour Settings et configure_logging.
"""

from pathlib import Path

import pytest
from loguru import logger
from pydantic import ValidationError

from cineasts.config import Settings
from cineasts.logging_config import configure_logging, console_logging_paused


class TestSettings:
    """Tests pour Settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CINEASTS_TMDB_API_KEY", raising=False)
        settings = Settings()

        assert settings.tmdb_api_key == ".."
        assert not settings.tmdb_enabled
        assert settings.request_delay_ms == 350
        assert settings.min_vote_count == 10
        assert settings.cache_dir == Path("cache")

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CINEASTS_TMDB_API_KEY", "abc")
        monkeypatch.setenv("CINEASTS_REQUEST_DELAY_MS", "500")

        settings = Settings()

        assert settings.tmdb_enabled
        assert settings.request_delay_ms == 500

    def test_init_overrides_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CINEASTS_TMDB_API_KEY", "from_env")

        assert Settings(tmdb_api_key="from_cli").tmdb_api_key == "from_cli"

    def test_paths_are_expanded(self) -> None:
        settings = Settings(cache_dir="~/tmdb-cache")

        assert settings.cache_dir == Path.home() / "tmdb-cache"

    def test_negative_delay_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(request_delay_ms=-1)

    def test_empty_key_is_not_enabled(self) -> None:
        assert not Settings(tmdb_api_key="").tmdb_enabled


class TestConfigureLogging:
    """Tests pour configure_logging."""

    def test_creates_log_file(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "cineasts.log"

        configure_logging(log_level="WARNING", log_file=log_file)
        logger.warning("message de test")
        logger.remove()

        assert log_file.exists()
        assert "message de test" in log_file.read_text(encoding="utf-8")

    def test_paused_console_keeps_file_sink(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        log_file = tmp_path / "cineasts.log"

        configure_logging(log_level="DEBUG", log_file=log_file)
        with console_logging_paused():
            logger.warning("pendant la progression")
        logger.warning("apres la progression")
        logger.remove()

        content = log_file.read_text(encoding="utf-8")
        assert "pendant la progression" in content
        assert "apres la progression" in content
        stderr = capsys.readouterr().err
        assert "pendant la progression" not in stderr
        assert "apres la progression" in stderr

    def test_pause_without_configuration_is_noop(self) -> None:
        with console_logging_paused():
            pass

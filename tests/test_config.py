"""ABOUTME: Tests for environment-driven weather settings."""

from common.config import DEFAULT_ACCUWEATHER_BASE_URL, WeatherSettings


class TestWeatherSettings:
    """Tests for WeatherSettings."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("ACCUWEATHER_API_KEY", raising=False)
        settings = WeatherSettings()

        assert settings.api_key is None
        assert settings.accuweather_base_url == DEFAULT_ACCUWEATHER_BASE_URL
        assert settings.accuweather_timeout == 10.0
        assert settings.weather_require_session_id is False

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("ACCUWEATHER_API_KEY", " abc ")
        monkeypatch.setenv("ACCUWEATHER_TIMEOUT", "2.5")
        monkeypatch.setenv("WEATHER_REQUIRE_SESSION_ID", "1")
        settings = WeatherSettings()

        assert settings.api_key == "abc"
        assert settings.accuweather_timeout == 2.5
        assert settings.weather_require_session_id is True

    def test_reads_dotenv_file(self, monkeypatch, tmp_path):
        monkeypatch.delenv("ACCUWEATHER_API_KEY", raising=False)
        (tmp_path / ".env").write_text("ACCUWEATHER_API_KEY=from-file\nPORT=3000\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert WeatherSettings().api_key == "from-file"

    def test_read_per_instance(self, monkeypatch):
        monkeypatch.setenv("ACCUWEATHER_API_KEY", "first")
        first = WeatherSettings()
        monkeypatch.setenv("ACCUWEATHER_API_KEY", "second")

        assert first.api_key == "first"
        assert WeatherSettings().api_key == "second"

"""ABOUTME: Weather server configuration loaded from the environment and an optional .env file."""

from typing import Optional

from pydantic_settings import BaseSettings

DEFAULT_ACCUWEATHER_BASE_URL = "http://dataservice.accuweather.com"


class WeatherSettings(BaseSettings):
    """Weather tool configuration from environment.

    Instantiated once per tool invocation so the credential is looked up on
    every call rather than at import time.
    """

    accuweather_api_key: Optional[str] = None
    accuweather_base_url: str = DEFAULT_ACCUWEATHER_BASE_URL
    accuweather_timeout: float = 10.0
    weather_require_session_id: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def api_key(self) -> Optional[str]:
        """Configured credential, or None when unset or blank."""
        if self.accuweather_api_key and self.accuweather_api_key.strip():
            return self.accuweather_api_key.strip()
        return None

from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"
    BUSINESS_TIMEZONE: str = "Asia/Kolkata"

    FALLBACK_PRICE_PER_HOUR: Decimal = Decimal("1200")
    WEEKEND_PREMIUM: Decimal = Decimal("1.2")

    GEOCODER_PROXY_URL: str = "http://localhost:5000/api/proxy/geocode"
    GEOCODER_TIMEOUT_SECONDS: float = 10.0
    GEOCODER_MAX_ATTEMPTS: int = 3
    GEOCODER_BACKOFF_BASE_SECONDS: float = 1.0

    CHEF_DIRECTORY_URL: str | None = None
    CHEF_DIRECTORY_TOKEN: str | None = None


settings = Settings()

"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "paycheck-insights"
    log_level: str = "INFO"

    # Insight windows
    insights_lookback_days: int = 30
    trend_window_days: int = 7
    recent_expenses_limit: int = 10

    # Subscription danger center projection horizon
    projection_months: int = 24


settings = Settings()

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database
    DB_URL: str = "sqlite+aiosqlite:///./thai_stock.db"

    # Email
    SMTP_HOST: str = ""
    SMTP_PORT: int = 587
    SMTP_USER: str = ""
    SMTP_PASS: str = ""
    SMTP_FROM: str = '"Thai Stock Tracker" <no-reply@tracker.com>'
    DASHBOARD_URL: str = "http://localhost:3000"

    # Market data
    PRICE_SOURCE_TIMEOUT: float = 10.0

    # Jobs
    SCHEDULER_ENABLED: bool = True
    DAILY_JOB_HOUR: int = 17
    DAILY_JOB_MINUTE: int = 0
    CRON_SECRET: str = ""

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("LOG_LEVEL")
    def normalize_log_level(cls, v):
        # logging only accepts upper-case level names
        return v.strip().upper()


settings = Settings()

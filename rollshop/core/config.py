from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    STORE_PROVIDER: str = "json"  # "json" | "memory" | "remote"
    RECORDS_FILE: str = "./data/roll_records.json"

    REMOTE_DATABASE_URL: str | None = None
    REMOTE_RECORDS_PATH: str = "rollRecords"
    REMOTE_AUTH_TOKEN: str | None = None
    REMOTE_TIMEOUT_SECONDS: float = 10.0

    BUSINESS_TIMEZONE: str = "Asia/Shanghai"
    SALARY_RATE: float = 0.5
    DEFAULT_LANGUAGE: str = "en"
    DEFAULT_PICK_STRATEGY: str = "min"


settings = Settings()

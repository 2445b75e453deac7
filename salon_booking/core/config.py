from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    STORE_PROVIDER: str | None = None  # "memory" | "json"; unset follows ENV
    DATA_DIR: str = "./data/bookings"

    SALON_SERVICE_URL: str | None = None
    CATALOG_SERVICE_URL: str | None = None
    USER_SERVICE_URL: str | None = None
    REMOTE_TIMEOUT_SECONDS: float = 10.0

    REDIS_URL: str | None = None
    EVENT_STREAM_PREFIX: str = "salon"
    EVENT_STREAM_MAXLEN: int = 10000

    STRICT_STATUS_TRANSITIONS: bool = False


settings = Settings()

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    OPENAI_API_KEY: str | None = None
    OPENAI_MODEL_INSIGHTS: str = "gpt-4o-mini"
    OPENAI_TEMPERATURE_INSIGHTS: float = 0.4

    LISTINGS_URL: str | None = None
    AUTH_BASE_URL: str | None = None
    HTTP_TIMEOUT_SECONDS: float = 10.0

    DATA_DIR: str = "./data"

    PAYMENT_DELAY_SECONDS: float = 3.0
    DEFAULT_CURRENCY: str = "USD"

    SESSION_IDLE_SECONDS: float = 1800.0
    MAX_SESSIONS: int = 1000


settings = Settings()

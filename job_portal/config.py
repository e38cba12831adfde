from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    APP_TITLE: str = "Job Portal"

    DB_URL: str = "sqlite:///./jobs.db"
    SQL_ECHO: bool = False

    DEFAULT_PAGE_SIZE: int = 12
    # unset means listing accepts any positive limit
    MAX_PAGE_SIZE: int | None = None

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()

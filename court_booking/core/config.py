from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    DATA_DIR: str = "./data/store"
    SEED_REFERENCE_DATA: bool = True

    OPEN_HOUR: int = 8
    CLOSE_HOUR: int = 23
    REVENUE_TREND_DAYS: int = 7

    DEFAULT_USER_ID: str = "user_current"


settings = Settings()

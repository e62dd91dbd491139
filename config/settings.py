from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # App
    APP_NAME: str = "Transaction Processor"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False

    # Logging goes to stderr; the CLI report owns stdout
    LOG_LEVEL: str = "WARNING"


settings = Settings()

"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "chargewatch"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8000

    # In-memory history window used by the API scorer
    history_retention_seconds: int = 60
    history_max_per_customer: int | None = 500

    model_config = {"env_prefix": "", "env_file": ".env", "extra": "ignore"}


settings = Settings()

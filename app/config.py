from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # DSN is the variable name older deployments export
    database_url: str = Field(
        default="sqlite+aiosqlite:///./restaurant.db",
        validation_alias=AliasChoices("database_url", "dsn"),
    )
    database_echo: bool = False
    log_level: str = "INFO"

    # HTTP server
    host: str = "0.0.0.0"
    port: int = 8000

    # Observability
    service_name: str = "restaurant-discounts"
    otlp_endpoint: str | None = None

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()

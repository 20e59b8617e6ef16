from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "", "case_sensitive": False}

    # App
    environment: str = "development"
    debug: bool = True
    app_name: str = "SmartGrid Simulator"
    cors_origins: str = "http://localhost:5173,http://localhost:8080"

    # Logging
    log_json: bool = False
    log_level: str = "INFO"
    engine_log_level: str | None = None

    # Simulation
    # Seed for wind/kinetic shapes when a request does not pass one.
    default_seed: int | None = Field(default=None, ge=0)

    # Rate limits (requests per minute per client)
    optimize_rate_limit: int = 10


settings = Settings()

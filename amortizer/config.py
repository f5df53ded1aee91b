from decimal import Decimal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "AMORTIZER_"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Engine
    # Balance at or below this is treated as paid off
    payoff_epsilon: Decimal = Field(Decimal("0.01"), ge=0)
    # Safety bound: stop after this many multiples of the scheduled term
    max_term_multiplier: int = Field(2, ge=1)
    schedule_cache_size: int = 256

    # API
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    cors_origins: list[str] = ["*"]

    # Dashboard
    dashboard_port: int = 8050


settings = Settings()

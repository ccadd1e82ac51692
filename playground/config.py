"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - parser_entrypoint is always "module:attribute"

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: works out-of-the-box with the bundled parser
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Parsing capability
    parser_entrypoint: str = "todotxt.render:parse"
    capability_load_timeout_seconds: float = 30.0

    @field_validator("parser_entrypoint")
    @classmethod
    def check_entrypoint_shape(cls, v: str) -> str:
        module, sep, attr = v.strip().partition(":")
        if not sep or not module or not attr:
            raise ValueError("parser_entrypoint must look like 'package.module:function'")
        return f"{module}:{attr}"

    # Shell labels
    shell_title: str = "todo.txt"
    loading_title: str = "loading..."
    failed_title: str = "parser unavailable"
    input_placeholder: str = "(A) enter a task here @example +todo.txt"
    input_min_rows: int = 3

    # API
    cors_origins: list[str] = ["http://localhost:8000"]
    host: str = "127.0.0.1"
    port: int = 8000

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()

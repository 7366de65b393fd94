import os
from pydantic_settings import BaseSettings

from services.validation.config import ValidatorConfig


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"
    rate_limit: str = "10/minute"

    # Validation engine
    validation_cache_ttl_seconds: float = 3600.0
    validation_max_recursion_depth: int = 3
    validation_max_input_chars: int = 50000
    validation_scorer_workers: int = 6
    validation_audit_enabled: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def validator_config(self) -> ValidatorConfig:
        return ValidatorConfig(
            cache_ttl_seconds=self.validation_cache_ttl_seconds,
            max_recursion_depth=self.validation_max_recursion_depth,
            max_input_chars=self.validation_max_input_chars,
            scorer_workers=self.validation_scorer_workers,
            audit_enabled=self.validation_audit_enabled,
        )


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})

import os
from pydantic_settings import BaseSettings


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
        "http://localhost:5000",
        "http://localhost:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"

    # Match scoring
    rate_limit: str = "60/minute"  # per client address, on /match/score
    rate_limit_enabled: bool = True
    skill_vocabulary_path: str = ""  # empty: bundled services/matching/data/skill_vocabulary.json
    max_ranked_candidates: int = 100

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})

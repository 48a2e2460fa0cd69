"""Configuration settings for the WOD parser API."""
import os
from typing import List, Literal


EnvironmentType = Literal["development", "staging", "production"]
NameScoringType = Literal["distance", "similarity"]


class Settings:
    """Application settings."""

    # Environment
    ENVIRONMENT: EnvironmentType = "development"
    LOG_LEVEL: str = "INFO"

    # Reference data
    REFERENCE_DATA_PATH: str | None = None

    # Parsing
    MAX_INPUT_CHARS: int = 50000
    BENCHMARK_NAME_SCORING: NameScoringType = "distance"

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:3001"]

    def __init__(self):
        # Environment
        env = os.getenv("ENVIRONMENT", "development").lower()
        if env in ("development", "staging", "production"):
            self.ENVIRONMENT = env  # type: ignore
        else:
            self.ENVIRONMENT = "development"

        level = os.getenv("LOG_LEVEL", "INFO").upper()
        if level in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            self.LOG_LEVEL = level
        else:
            self.LOG_LEVEL = "INFO"

        # Reference data
        self.REFERENCE_DATA_PATH = os.getenv("REFERENCE_DATA_PATH") or None

        # Parsing
        max_chars = os.getenv("MAX_INPUT_CHARS", "")
        self.MAX_INPUT_CHARS = int(max_chars) if max_chars.isdigit() else 50000

        scoring = os.getenv("BENCHMARK_NAME_SCORING", "distance").lower()
        if scoring in ("distance", "similarity"):
            self.BENCHMARK_NAME_SCORING = scoring  # type: ignore
        else:
            self.BENCHMARK_NAME_SCORING = "distance"

        # CORS
        origins = os.getenv("CORS_ORIGINS", "")
        if origins.strip():
            self.CORS_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]
        else:
            self.CORS_ORIGINS = ["http://localhost:3000", "http://localhost:3001"]


settings = Settings()

"""
Application Settings

Environment configuration for the application.
"""

import os
from dataclasses import dataclass
from typing import Optional


LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _log_level_from_env(name: str) -> str:
    level = os.getenv(name, "WARNING").strip().upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"{name} must be one of {', '.join(LOG_LEVELS)}, got {level!r}")
    return level


def _int_from_env(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


@dataclass
class Settings:
    """Application settings from environment."""

    # Generation
    seed: Optional[int] = None

    # Output
    output_path: str = "graph.json"
    json_indent: Optional[int] = None

    # Logging
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        return cls(
            seed=_int_from_env("DEPTHGRAPH_SEED"),
            output_path=os.getenv("DEPTHGRAPH_OUTPUT", "graph.json"),
            json_indent=_int_from_env("DEPTHGRAPH_JSON_INDENT"),
            log_level=_log_level_from_env("DEPTHGRAPH_LOG_LEVEL"),
        )

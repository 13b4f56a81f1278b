"""Runtime configuration loaded from the environment (and .env)."""

import os
from typing import TypedDict

from dotenv import load_dotenv


class AppConfig(TypedDict):
    """Settings for the sync engine."""

    github_api_url: str
    max_attempts: int
    retry_delay: float
    http_timeout: float
    log_level: str


DEFAULT_CONFIG: AppConfig = {
    "github_api_url": "https://api.github.com",
    "max_attempts": 3,
    "retry_delay": 1.0,
    "http_timeout": 30.0,
    "log_level": "INFO",
}


def load_config() -> AppConfig:
    """Read configuration from environment variables, falling back to defaults."""
    load_dotenv()

    config: AppConfig = {
        "github_api_url": os.getenv("GITHUB_API_URL", DEFAULT_CONFIG["github_api_url"]),
        "max_attempts": int(os.getenv("SYNC_MAX_ATTEMPTS", DEFAULT_CONFIG["max_attempts"])),
        "retry_delay": float(os.getenv("SYNC_RETRY_DELAY", DEFAULT_CONFIG["retry_delay"])),
        "http_timeout": float(os.getenv("HTTP_TIMEOUT", DEFAULT_CONFIG["http_timeout"])),
        "log_level": os.getenv("LOG_LEVEL", DEFAULT_CONFIG["log_level"]).upper(),
    }

    if config["max_attempts"] < 1:
        raise ValueError(f"SYNC_MAX_ATTEMPTS must be at least 1, got {config['max_attempts']}")
    if config["retry_delay"] < 0:
        raise ValueError(f"SYNC_RETRY_DELAY must not be negative, got {config['retry_delay']}")

    return config

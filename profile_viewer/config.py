import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


DEFAULT_API_URL = "https://api.github.com"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_USER_AGENT = "github-profile-viewer"


@dataclass(frozen=True)
class Settings:
    api_base_url: str = DEFAULT_API_URL
    request_timeout: float = DEFAULT_TIMEOUT_SECONDS
    user_agent: str = DEFAULT_USER_AGENT
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Build settings from the environment (and a .env file, if present)."""
    load_dotenv()

    raw_timeout = os.getenv("PROFILE_VIEWER_TIMEOUT", str(DEFAULT_TIMEOUT_SECONDS))
    try:
        timeout = float(raw_timeout)
    except ValueError:
        raise ValueError(f"PROFILE_VIEWER_TIMEOUT must be a number of seconds, got {raw_timeout!r}")
    if timeout <= 0:
        raise ValueError(f"PROFILE_VIEWER_TIMEOUT must be positive, got {raw_timeout!r}")

    return Settings(
        api_base_url=os.getenv("GITHUB_API_URL", DEFAULT_API_URL).rstrip("/"),
        request_timeout=timeout,
        user_agent=os.getenv("PROFILE_VIEWER_USER_AGENT", DEFAULT_USER_AGENT),
        log_level=os.getenv("PROFILE_VIEWER_LOG_LEVEL", "INFO").upper(),
    )


_settings: Optional[Settings] = None

def get_settings() -> Settings:
    """Get or create the process-wide settings"""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings

"""
Configuration Management

Reads client settings from environment variables (a local .env file is
honoured through python-dotenv).
"""
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from utils.paths import resolve_asset_dir

DEFAULT_API_URL = "http://localhost:8080"
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class Settings:
    api_base_url: str = DEFAULT_API_URL
    asset_base_url: Optional[str] = None  # fetch fragments over HTTP when set
    asset_dir: str = ""
    profile_path: Optional[str] = None  # backend contract, no default
    request_timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"


def _optional(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def load_settings() -> Settings:
    load_dotenv()
    try:
        timeout = float(os.getenv("LUMO_REQUEST_TIMEOUT", DEFAULT_TIMEOUT))
    except ValueError:
        timeout = DEFAULT_TIMEOUT
    return Settings(
        api_base_url=(_optional("LUMO_API_URL") or DEFAULT_API_URL).rstrip("/"),
        asset_base_url=_optional("LUMO_ASSET_URL"),
        asset_dir=resolve_asset_dir(_optional("LUMO_ASSET_DIR")),
        profile_path=_optional("LUMO_PROFILE_PATH"),
        request_timeout=timeout,
        log_level=(_optional("LUMO_LOG_LEVEL") or "INFO").upper(),
    )

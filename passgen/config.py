"""
Configuration loaded from environment variables
Values come from PASSGEN_* variables or an optional .env file
"""

import os
import sys
from functools import lru_cache
from ipaddress import ip_network
from pathlib import Path
from urllib.parse import urlparse

from pydantic_settings import BaseSettings

from passgen.limits import WORDLIST_FILENAME, WORDLIST_PREFIX_WIDTH, WORDLIST_SOURCE_URI


def _find_env_file() -> str:
    """Find .env file in current or project root directory"""
    if Path(".env").exists():
        return ".env"
    parent_env = Path(__file__).parent.parent / ".env"
    if parent_env.exists():
        return str(parent_env)
    return ".env"


def default_data_dir() -> Path:
    """Platform shared data directory for passgen"""
    if sys.platform == "win32":
        base = os.environ.get("ProgramData") or os.environ.get("ALLUSERSPROFILE") or r"C:\ProgramData"
        return Path(base) / "passgen"
    xdg = os.environ.get("XDG_DATA_HOME")
    if xdg:
        return Path(xdg) / "passgen"
    return Path.home() / ".local" / "share" / "passgen"


class Settings(BaseSettings):
    """Application settings from environment"""

    # Word list
    WORDLIST_PATH: str = ""     # Empty means the platform default
    WORDLIST_SOURCE: str = "eff"  # eff, bip39
    WORDLIST_SOURCE_URI: str = WORDLIST_SOURCE_URI
    WORDLIST_FETCH_ENABLED: bool = True
    WORDLIST_FETCH_TIMEOUT: float = 10.0
    WORDLIST_PREFIX_WIDTH: int = WORDLIST_PREFIX_WIDTH

    # Generation
    DEFAULT_PRESET: str = ""

    # Logging
    LOG_LEVEL: str = ""

    # Service
    BACKEND_HOST: str = "127.0.0.1"
    BACKEND_PORT: int = 8000
    RATE_LIMIT_PER_MINUTE: int = 60
    RATE_LIMIT_BURST: int = 10
    RATE_LIMIT_MAX_CLIENTS: int = 10000
    TRUST_PROXY_HEADERS: bool = False
    TRUSTED_PROXY_CIDRS_RAW: str = "127.0.0.1/32,::1/128"

    @property
    def wordlist_path(self) -> Path:
        if self.WORDLIST_PATH:
            return Path(self.WORDLIST_PATH).expanduser()
        return default_data_dir() / WORDLIST_FILENAME

    @property
    def trusted_proxy_networks(self) -> list:
        """Parsed TRUSTED_PROXY_CIDRS_RAW; malformed entries are reported by validate_settings"""
        networks = []
        for item in str(self.TRUSTED_PROXY_CIDRS_RAW or "").split(","):
            try:
                networks.append(ip_network(item.strip(), strict=False))
            except ValueError:
                continue
        return networks

    class Config:
        env_prefix = "PASSGEN_"
        env_file = _find_env_file()
        case_sensitive = True
        extra = "ignore"


ALLOWED_WORDLIST_SOURCES = ("eff", "bip39")
ALLOWED_LOG_LEVELS = ("", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_settings(active_settings: Settings) -> None:
    """Validate settings, reporting every problem at once."""
    from passgen.presets import PRESETS

    errors = []

    if active_settings.WORDLIST_SOURCE not in ALLOWED_WORDLIST_SOURCES:
        allowed = ", ".join(ALLOWED_WORDLIST_SOURCES)
        errors.append(f"WORDLIST_SOURCE must be one of: {allowed}")

    scheme = urlparse(active_settings.WORDLIST_SOURCE_URI).scheme
    if scheme not in ("http", "https"):
        errors.append("WORDLIST_SOURCE_URI must be an http or https URL")

    if active_settings.WORDLIST_FETCH_TIMEOUT <= 0:
        errors.append("WORDLIST_FETCH_TIMEOUT must be > 0")

    if active_settings.WORDLIST_PREFIX_WIDTH < 0:
        errors.append("WORDLIST_PREFIX_WIDTH must be >= 0")

    preset = active_settings.DEFAULT_PRESET.strip().lower()
    if preset and preset not in PRESETS:
        allowed = ", ".join(PRESETS)
        errors.append(f"DEFAULT_PRESET must be empty or one of: {allowed}")

    if active_settings.LOG_LEVEL.upper() not in ALLOWED_LOG_LEVELS:
        errors.append("LOG_LEVEL must be a standard logging level name")

    for item in active_settings.TRUSTED_PROXY_CIDRS_RAW.split(","):
        if item.strip():
            try:
                ip_network(item.strip(), strict=False)
            except ValueError:
                errors.append(f"TRUSTED_PROXY_CIDRS_RAW has an invalid network: {item.strip()}")

    if active_settings.RATE_LIMIT_PER_MINUTE < 1:
        errors.append("RATE_LIMIT_PER_MINUTE must be >= 1")

    if active_settings.RATE_LIMIT_MAX_CLIENTS < 1:
        errors.append("RATE_LIMIT_MAX_CLIENTS must be >= 1")

    if active_settings.RATE_LIMIT_BURST < 1:
        errors.append("RATE_LIMIT_BURST must be >= 1")

    if errors:
        raise ValueError("Invalid passgen configuration:\n- " + "\n- ".join(errors))


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance"""
    return Settings()

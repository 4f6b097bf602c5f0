"""
Configuration loaded from environment variables
Values may also come from a .env file in the working directory or project root
"""

from pydantic_settings import BaseSettings
from functools import lru_cache
from pathlib import Path

from dicepass.errors import ConfigurationError
from dicepass import limits


# Find .env file - could be in current dir, parent (project root), or set via env
def _find_env_file() -> str:
    """Find .env file in current or parent directory"""
    if Path(".env").exists():
        return ".env"
    # Project root when running from backend/
    parent_env = Path(__file__).parent.parent.parent / ".env"
    if parent_env.exists():
        return str(parent_env)
    return ".env"


class Settings(BaseSettings):
    """Application settings from environment"""

    # Wordlist acquisition
    WORDLIST_URL: str = "https://theworld.com/~reinhold/diceware.wordlist.asc"
    WORDLIST_DIR: str = "~/.dicepass"
    WORDLIST_FILENAME: str = "diceware.wordlist.asc"
    WORDLIST_FETCH_TIMEOUT: float = 10.0

    # Generation defaults
    DEFAULT_MIN_CHARS: int = limits.DEFAULT_MIN_CHARS
    DEFAULT_QUANTITY: int = limits.DEFAULT_QUANTITY
    COMPLEX_CHARS: str = limits.DEFAULT_COMPLEX_CHARS

    # HTTP API caps
    MAX_MIN_CHARS: int = 256
    MAX_QUANTITY: int = 100

    # Rate limiting (per client IP)
    RATE_LIMIT_PER_MINUTE: int = 60
    RATE_LIMIT_BURST: int = 10

    # Application
    LOG_LEVEL: str = "INFO"
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 8000
    TRUST_PROXY_HEADERS: bool = True
    TRUSTED_PROXY_CIDRS_RAW: str = "127.0.0.1/32,::1/128,10.0.0.0/8,172.16.0.0/12,192.168.0.0/16"

    @property
    def trusted_proxy_cidrs(self) -> list[str]:
        raw = self.TRUSTED_PROXY_CIDRS_RAW
        if not raw:
            return []
        return [item.strip() for item in str(raw).split(",") if item.strip()]

    @property
    def wordlist_dir(self) -> Path:
        return Path(self.WORDLIST_DIR).expanduser()

    class Config:
        env_file = _find_env_file()
        case_sensitive = True


ALLOWED_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def validate_settings(active_settings: Settings) -> None:
    """Validate settings before any wordlist or generation work starts."""
    errors = []

    if active_settings.DEFAULT_MIN_CHARS < limits.MIN_CHARS_FLOOR:
        errors.append(f"DEFAULT_MIN_CHARS must be >= {limits.MIN_CHARS_FLOOR}")

    if active_settings.DEFAULT_QUANTITY < 1:
        errors.append("DEFAULT_QUANTITY must be >= 1")

    chars = active_settings.COMPLEX_CHARS
    if not chars:
        errors.append("COMPLEX_CHARS must not be empty")
    elif any(char.isspace() for char in chars):
        errors.append("COMPLEX_CHARS must not contain whitespace")

    if active_settings.MAX_MIN_CHARS < active_settings.DEFAULT_MIN_CHARS:
        errors.append("MAX_MIN_CHARS must be >= DEFAULT_MIN_CHARS")

    if active_settings.MAX_QUANTITY < active_settings.DEFAULT_QUANTITY:
        errors.append("MAX_QUANTITY must be >= DEFAULT_QUANTITY")

    if not active_settings.WORDLIST_URL.startswith(("http://", "https://")):
        errors.append("WORDLIST_URL must be an http(s) URL")

    if not active_settings.WORDLIST_FILENAME.strip():
        errors.append("WORDLIST_FILENAME must be configured with a non-empty value")

    if active_settings.WORDLIST_FETCH_TIMEOUT <= 0:
        errors.append("WORDLIST_FETCH_TIMEOUT must be > 0")

    if active_settings.RATE_LIMIT_PER_MINUTE < 1 or active_settings.RATE_LIMIT_BURST < 1:
        errors.append("RATE_LIMIT_PER_MINUTE and RATE_LIMIT_BURST must be >= 1")

    if active_settings.LOG_LEVEL.upper() not in ALLOWED_LOG_LEVELS:
        allowed = ", ".join(ALLOWED_LOG_LEVELS)
        errors.append(f"LOG_LEVEL must be one of: {allowed}")

    if errors:
        raise ConfigurationError("Invalid configuration:\n- " + "\n- ".join(errors))


@lru_cache()
def get_settings() -> Settings:
    """Cached settings instance"""
    return Settings()


settings = get_settings()

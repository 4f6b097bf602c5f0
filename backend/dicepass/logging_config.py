"""
Logging configuration
Generated passphrases are never logged
"""

import logging
import sys
from typing import Set


class RedactionFilter(logging.Filter):
    """Filter that redacts sensitive information"""

    SENSITIVE_KEYS: Set[str] = {
        "passphrase",
        "password",
        "secret",
        "words",
        "token",
    }

    def filter(self, record: logging.LogRecord) -> bool:
        if hasattr(record, "msg"):
            msg = str(record.msg).lower()
            for key in self.SENSITIVE_KEYS:
                if key in msg and "=" in str(record.msg):
                    record.msg = "[REDACTED - Sensitive data filtered]"
                    record.args = ()
                    break
        return True


def setup_logging(level: str = "INFO", stream=None):
    """Configure application logging"""
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    handler.addFilter(RedactionFilter())

    root = logging.getLogger()
    root.setLevel(level.upper())

    # Clear existing handlers to avoid duplicates
    root.handlers = []
    root.addHandler(handler)

    # Reduce noise from libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


event_logger = logging.getLogger("dicepass.events")


def log_wordlist_fetched(url: str, path: str):
    """Log a wordlist download into the local cache"""
    event_logger.info(f"Fetched wordlist from {url} into {path}")


def log_wordlist_loaded(path: str, entries: int, missing: int):
    """Log wordlist load; incomplete lists are a warning"""
    if missing:
        event_logger.warning(
            f"Wordlist {path} loaded with {entries} entries - {missing} roll codes missing"
        )
    else:
        event_logger.info(f"Wordlist {path} loaded with {entries} entries")


def log_duplicate_word_key(code: str):
    """Log a repeated roll code in wordlist data"""
    event_logger.warning(f"Duplicate wordlist entry for roll {code} ignored")


def log_wordlist_unavailable(location: str, reason: str):
    """Log a fatal wordlist acquisition error"""
    event_logger.error(f"Wordlist unavailable at {location}: {reason}")


def log_passphrases_generated(count: int, complex_mode: bool):
    """Log a finished batch (counts only)"""
    event_logger.info(f"Generated {count} passphrase(s) (complex: {complex_mode})")


def log_rate_limited(ip: str):
    """Log rate limit event"""
    event_logger.warning(f"Rate limit exceeded for {ip}")

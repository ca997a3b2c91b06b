"""
Logging configuration
Generation events are logged but never include the passphrase itself
"""

import logging
import sys
from typing import Optional, Set, TextIO


class SecretFilter(logging.Filter):
    """Filter that redacts sensitive information"""

    SENSITIVE_KEYS: Set[str] = {
        "passphrase",
        "password",
        "secret",
        "token",
        "credential",
    }

    def filter(self, record: logging.LogRecord) -> bool:
        if hasattr(record, "msg"):
            msg = str(record.msg).lower()
            for key in self.SENSITIVE_KEYS:
                if key in msg and "=" in str(record.msg):
                    # Likely contains sensitive value assignment
                    record.msg = "[REDACTED - Sensitive data filtered]"
                    record.args = ()
                    break
        return True


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None):
    """Configure application logging"""
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    handler.addFilter(SecretFilter())

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Clear existing handlers to avoid duplicates
    root.handlers = []
    root.addHandler(handler)

    # Reduce noise from libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


wordlist_logger = logging.getLogger("passgen.wordlist")
generator_logger = logging.getLogger("passgen.generator")
security_logger = logging.getLogger("passgen.security")


def log_wordlist_loaded(path: str, count: int):
    """Log a successful word list load"""
    wordlist_logger.info(f"Loaded {count} words from {path}")


def log_wordlist_fetched(uri: str, path: str):
    """Log a word list download"""
    wordlist_logger.info(f"Fetched word list from {uri} into {path}")


def log_wordlist_unavailable(path: str, reason: str):
    """Log a word list load failure"""
    wordlist_logger.error(f"Word list unavailable at {path}: {reason}")


def log_passphrase_generated(word_count: int, length: int):
    """Log generation metadata (never the passphrase)"""
    generator_logger.debug(f"Generated {word_count} words, {length} characters")


def log_rate_limited(ip: str):
    """Log rate limit event"""
    security_logger.warning(f"Rate limit exceeded for {ip}")

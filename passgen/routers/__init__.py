# passgen API routers
from passgen.routers import health, passphrase

__all__ = ["health", "passphrase"]

"""
Error types raised by passgen
"""


class PassgenError(Exception):
    """Base class for passgen errors"""


class ConfigurationError(PassgenError, ValueError):
    """An option is outside its validated range or otherwise unusable"""


class ResourceUnavailable(PassgenError, OSError):
    """The word list is missing and unfetchable, unreadable, or empty"""

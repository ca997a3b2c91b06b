"""
Named option bundles resolved before generation
"""

from typing import Any, Dict, Optional

from passgen.exceptions import ConfigurationError
from passgen.schemas.options import GenerationOptions, build_options

PRESETS: Dict[str, Dict[str, Any]] = {
    "words": {
        "include_numbers": False,
        "include_delimiters": False,
        "randomize_delimiters": False,
        "use_complex_delimiters": False,
        "word_count": 2,
        "length": 16,
    },
    "simple": {
        "include_numbers": False,
        "include_delimiters": True,
        "randomize_delimiters": False,
        "use_complex_delimiters": False,
        "word_count": 3,
        "length": 16,
    },
    "numbers": {
        "include_numbers": True,
        "include_delimiters": True,
        "randomize_delimiters": False,
        "use_complex_delimiters": False,
        "word_count": 3,
        "length": 20,
    },
    "strong": {
        "include_numbers": True,
        "include_delimiters": True,
        "randomize_delimiters": True,
        "use_complex_delimiters": False,
        "word_count": 4,
        "length": 24,
    },
    "complex": {
        "include_numbers": True,
        "include_delimiters": True,
        "randomize_delimiters": True,
        "use_complex_delimiters": True,
        "word_count": 4,
        "length": 32,
    },
}


def preset_to_options(name: str) -> Dict[str, Any]:
    """Return a copy of the partial options for a preset name"""
    key = name.strip().lower()
    if key not in PRESETS:
        allowed = ", ".join(PRESETS)
        raise ConfigurationError(f"Unknown preset '{name}'. Choose one of: {allowed}")
    return dict(PRESETS[key])


def resolve_options(preset: Optional[str] = None, **overrides: Any) -> GenerationOptions:
    """Merge a preset with explicit overrides; None overrides are ignored"""
    values: Dict[str, Any] = preset_to_options(preset) if preset else {}
    values.update({key: value for key, value in overrides.items() if value is not None})
    return build_options(**values)

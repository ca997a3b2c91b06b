"""
Pytest fixtures for passgen tests
"""

import os

# Set test environment before imports
os.environ.setdefault("PASSGEN_WORDLIST_FETCH_ENABLED", "false")
os.environ.setdefault("PASSGEN_WORDLIST_PATH", "/nonexistent/passgen/eff_large_wordlist.txt")
os.environ.setdefault("PASSGEN_RATE_LIMIT_BURST", "1000")
os.environ.setdefault("PASSGEN_RATE_LIMIT_PER_MINUTE", "6000")

import logging
from pathlib import Path
from typing import AsyncGenerator, Tuple

import pytest
from httpx import ASGITransport, AsyncClient

from passgen.config import Settings
from passgen.main import app
from passgen.routers.dependencies import get_wordlist_loader
from passgen.wordlist import clear_wordlist_cache

EFF_SAMPLE = [
    "11111\tabacus",
    "11112\tabdomen",
    "11113\tabdominal",
    "11114\tabide",
    "11115\tabiding",
    "11116\tability",
    "11121\tablaze",
    "11122\table",
    "11123\tabnormal",
    "11124\tabrasion",
]

SAMPLE_WORDS: Tuple[str, ...] = (
    "Abacus", "Abdomen", "Abdominal", "Abide", "Abiding",
    "Ability", "Ablaze", "Able", "Abnormal", "Abrasion",
)


@pytest.fixture(autouse=True)
def _fresh_wordlist_cache():
    clear_wordlist_cache()
    yield
    clear_wordlist_cache()


@pytest.fixture(autouse=True)
def _restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def wordlist_file(tmp_path: Path) -> Path:
    """EFF-format word list on disk."""
    path = tmp_path / "eff_large_wordlist.txt"
    path.write_text("\n".join(EFF_SAMPLE) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def sample_words() -> Tuple[str, ...]:
    return SAMPLE_WORDS


@pytest.fixture
def make_settings(tmp_path: Path):
    """Build Settings with test-friendly defaults."""
    def _make(**overrides) -> Settings:
        values = {
            "WORDLIST_PATH": str(tmp_path / "missing.txt"),
            "WORDLIST_FETCH_ENABLED": False,
        }
        values.update(overrides)
        return Settings(**values)
    return _make


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client with the sample word list wired in."""
    app.dependency_overrides[get_wordlist_loader] = lambda: (lambda **kwargs: SAMPLE_WORDS)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
    app.dependency_overrides.clear()

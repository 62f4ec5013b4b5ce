"""
Pytest configuration and fixtures.

Provides fixtures for:
- A small in-memory common password corpus
- A scripted entropy estimator with fixed scores
- Resetting the shared corpus and default estimator around every test
"""
from typing import Optional, Sequence

import pytest

from passablewords.core.exceptions import UnsupportedCharactersError
from passablewords.corpus import CommonPasswordCorpus, reset_corpus
from passablewords.entropy import set_estimator

SAMPLE_PASSWORDS = [
    "password",
    "123456789",
    "qwertyuiop",
    "letmein123",
    "iloveyou",
]


class ScriptedEstimator:
    """
    Estimator returning preset scores.

    Passwords not in ``scores`` get ``default``. Passwords in ``errors``
    raise the mapped exception instead.
    """

    def __init__(
        self,
        scores: Optional[dict[str, int]] = None,
        default: int = 4,
        errors: Optional[dict[str, Exception]] = None,
    ):
        self.scores = scores or {}
        self.default = default
        self.errors = errors or {}
        self.calls: list[str] = []

    def estimate(self, password: str) -> int:
        self.calls.append(password)
        if password in self.errors:
            raise self.errors[password]
        if not password.isascii():
            raise UnsupportedCharactersError("non-ascii")
        return self.scores.get(password, self.default)


class ListCorpusLoader:
    """Loader serving fixed lines and counting how often it is asked."""

    def __init__(self, lines: Sequence[str]):
        self.lines = list(lines)
        self.calls = 0

    def load(self) -> Sequence[str]:
        self.calls += 1
        return self.lines


@pytest.fixture(autouse=True)
def reset_shared_state():
    """Clear the shared corpus and default estimator before and after each test."""
    reset_corpus()
    set_estimator(None)
    yield
    reset_corpus()
    set_estimator(None)


@pytest.fixture
def corpus() -> CommonPasswordCorpus:
    return CommonPasswordCorpus(SAMPLE_PASSWORDS)


@pytest.fixture
def estimator() -> ScriptedEstimator:
    return ScriptedEstimator()


@pytest.fixture
def corpus_file(tmp_path):
    """Write a corpus file and return its path."""
    path = tmp_path / "common-passwords.txt"
    path.write_text("\n".join(SAMPLE_PASSWORDS) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def make_estimator():
    """Factory for ScriptedEstimator instances."""
    return ScriptedEstimator


@pytest.fixture
def make_loader():
    """Factory for ListCorpusLoader instances."""
    return ListCorpusLoader

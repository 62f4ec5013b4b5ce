"""
Common password corpus.

The corpus is a plain-text file with one password per line. It is read once,
indexed into a frozenset, and shared read-only for the rest of the process.

Usage:
    # At application startup, so the first request does not pay for the load
    init_corpus()

    # Anywhere afterwards
    if get_corpus().contains(password):
        ...
"""
import threading
from pathlib import Path
from typing import Iterable, Optional, Protocol, Sequence

import structlog

from passablewords.core.config import settings
from passablewords.core.exceptions import CorpusLoadError

logger = structlog.get_logger()

DEFAULT_CORPUS_PATH = Path(__file__).parent / "data" / "common-passwords.txt"


def split_lines(text: str) -> list[str]:
    """
    Split corpus text into entries.

    Lines end at "\\n" with an optional preceding "\\r". A final line
    terminator does not produce an extra empty entry. Nothing else is
    stripped.
    """
    if not text:
        return []
    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


class CorpusLoader(Protocol):
    """Source of corpus lines."""

    def load(self) -> Sequence[str]:
        ...


class FileCorpusLoader:
    """Reads the corpus from a text file on disk."""

    def __init__(self, path: str | Path, encoding: str = "utf-8"):
        self.path = Path(path)
        self.encoding = encoding

    @classmethod
    def from_settings(cls) -> "FileCorpusLoader":
        """Build a loader from ``corpus_path``, defaulting to the bundled list."""
        path = settings.corpus_path or DEFAULT_CORPUS_PATH
        return cls(path, encoding=settings.corpus_encoding)

    def load(self) -> Sequence[str]:
        try:
            # newline="" keeps "\r" so split_lines sees the raw terminators
            with open(self.path, encoding=self.encoding, newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError, LookupError) as e:
            raise CorpusLoadError(
                f"Could not read common password list {self.path}: {e}"
            ) from e
        return split_lines(text)

    def __repr__(self) -> str:
        return f"FileCorpusLoader(path={str(self.path)!r}, encoding={self.encoding!r})"


class CommonPasswordCorpus:
    """
    Immutable set of known-common passwords.

    Membership is exact string equality; no case folding or trimming.
    """

    __slots__ = ("_passwords",)

    def __init__(self, passwords: Iterable[str]):
        self._passwords = frozenset(passwords)

    def contains(self, password: str) -> bool:
        return password in self._passwords

    def __contains__(self, password: object) -> bool:
        return password in self._passwords

    def __len__(self) -> int:
        return len(self._passwords)

    def __repr__(self) -> str:
        return f"CommonPasswordCorpus({len(self)} passwords)"


def build_corpus(loader: CorpusLoader) -> CommonPasswordCorpus:
    """
    Load and index the corpus.

    Raises:
        CorpusLoadError: If the loader fails. Any other loader exception is
            wrapped, so callers only need to handle one type.
    """
    logger.info("Loading common password corpus", loader=repr(loader))
    try:
        lines = loader.load()
    except CorpusLoadError as e:
        logger.error("Common password corpus failed to load", error=str(e))
        raise
    except Exception as e:
        logger.error("Common password corpus failed to load", error=str(e))
        raise CorpusLoadError(f"Could not load common password list: {e}") from e

    corpus = CommonPasswordCorpus(lines)
    logger.info("Common password corpus loaded", passwords=len(corpus))
    return corpus


# Process-wide corpus, built once on first use
_corpus: Optional[CommonPasswordCorpus] = None
_corpus_lock = threading.Lock()


def get_corpus(loader: CorpusLoader | None = None) -> CommonPasswordCorpus:
    """
    Get the shared corpus, building it on first access.

    Concurrent first callers block until the single load completes. A failed
    load raises CorpusLoadError and leaves the cell empty, so the next call
    tries again.

    Args:
        loader: Source used if the corpus has not been built yet. Defaults to
            ``FileCorpusLoader.from_settings()``.
    """
    global _corpus
    corpus = _corpus
    if corpus is not None:
        return corpus

    with _corpus_lock:
        if _corpus is None:
            _corpus = build_corpus(loader or FileCorpusLoader.from_settings())
        return _corpus


def init_corpus(loader: CorpusLoader | None = None) -> CommonPasswordCorpus:
    """Build the shared corpus eagerly. Intended for application startup."""
    return get_corpus(loader)


def reset_corpus() -> None:
    """Drop the shared corpus. Useful for testing."""
    global _corpus
    with _corpus_lock:
        _corpus = None

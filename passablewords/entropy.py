"""
Entropy gate backed by zxcvbn.

The estimator is a swappable seam: anything with an ``estimate(password) ->
int`` method that raises ``UnsupportedCharactersError`` or ``EstimatorError``
can stand in for zxcvbn, which keeps the gate testable without the real
scorer.
"""
from decimal import Decimal
from typing import Optional, Protocol

import structlog
from zxcvbn import zxcvbn

from passablewords.core.config import settings
from passablewords.core.constants import (
    CRACK_TIME_SCORE_THRESHOLDS,
    MAX_ENTROPY_SCORE,
    MIN_ENTROPY_SCORE,
    OFFLINE_GUESSES_PER_SECOND,
    PasswordError,
)
from passablewords.core.exceptions import EstimatorError, UnsupportedCharactersError
from passablewords.core.result import ACCEPTED, PasswordCheckResult, rejected

logger = structlog.get_logger()


class EntropyEstimator(Protocol):
    """Scores how hard a password is to guess, 0 (trivial) to 4 (strong)."""

    def estimate(self, password: str) -> int:
        ...


def crack_time_to_score(seconds) -> int:
    """Map an offline crack time in seconds onto the 0-4 scale."""
    for score, threshold in enumerate(CRACK_TIME_SCORE_THRESHOLDS):
        if seconds < threshold:
            return score
    return MAX_ENTROPY_SCORE


class ZxcvbnEstimator:
    """
    Estimator using the zxcvbn pattern-matching scorer.

    zxcvbn's guess count is rated against an offline attack on a slow hash
    (``OFFLINE_GUESSES_PER_SECOND``) with the crack-time scale, rather than
    taken from zxcvbn's own ``score``. The result is never higher than
    zxcvbn's score; dictionary phrases such as "NotTooRandom" land at 2.

    Only ASCII input is scored and no user-specific hints are passed.
    Passwords longer than ``max_length`` are scored in chunks of that size and
    the strongest chunk counts, since the whole password is at least as hard
    to guess as any part of it.
    """

    def __init__(self, max_length: int | None = None):
        if max_length is None:
            max_length = settings.zxcvbn_max_length
        if max_length <= 0:
            raise ValueError("max_length must be positive")
        self.max_length = max_length

    def estimate(self, password: str) -> int:
        if not password.isascii():
            raise UnsupportedCharactersError("Password contains non-ASCII characters")
        if not password:
            return 0

        chunks = [
            password[i : i + self.max_length]
            for i in range(0, len(password), self.max_length)
        ]
        return max(self._score(chunk) for chunk in chunks)

    def _score(self, password: str) -> int:
        result = zxcvbn(password, user_inputs=[])

        guesses = result.get("guesses")
        if not isinstance(guesses, (int, float, Decimal)) or guesses < 1:
            raise EstimatorError(f"zxcvbn returned an invalid guess count: {guesses!r}")
        return crack_time_to_score(guesses / OFFLINE_GUESSES_PER_SECOND)


# Process-wide default estimator, created on first use
_estimator: Optional[EntropyEstimator] = None


def get_estimator() -> EntropyEstimator:
    """Get the default estimator used by the checks."""
    global _estimator
    if _estimator is None:
        _estimator = ZxcvbnEstimator()
    return _estimator


def set_estimator(estimator: EntropyEstimator | None) -> None:
    """Replace the default estimator. Passing None restores zxcvbn."""
    global _estimator
    _estimator = estimator


def check_entropy(
    password: str,
    estimator: EntropyEstimator | None = None,
) -> PasswordCheckResult:
    """
    Check that a password is random enough to resist guessing.

    Returns:
        ACCEPTED for a score of at least MIN_ENTROPY_SCORE, TOO_SIMPLE below
        it, NON_ASCII_PASSWORD if the estimator cannot score the characters,
        and INTERNAL_ERROR if the estimator fails in any other way.
    """
    if estimator is None:
        estimator = get_estimator()

    try:
        score = estimator.estimate(password)
    except UnsupportedCharactersError:
        return rejected(PasswordError.NON_ASCII_PASSWORD)
    except Exception as e:
        logger.exception(
            "Entropy estimator failed",
            estimator=type(estimator).__name__,
            error=str(e),
        )
        return rejected(PasswordError.INTERNAL_ERROR)

    if score >= MIN_ENTROPY_SCORE:
        return ACCEPTED
    return rejected(PasswordError.TOO_SIMPLE)

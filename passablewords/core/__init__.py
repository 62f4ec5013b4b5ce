"""
Core module containing configuration, policy constants, and shared types.
"""
from passablewords.core.config import settings
from passablewords.core.constants import (
    ERROR_MESSAGES,
    MIN_ENTROPY_SCORE,
    MIN_PASSWORD_LENGTH,
    PasswordError,
)
from passablewords.core.exceptions import (
    CorpusLoadError,
    EstimatorError,
    PasswordRejectedError,
    PasswordsError,
    UnsupportedCharactersError,
)
from passablewords.core.result import ACCEPTED, PasswordCheckResult

__all__ = [
    "settings",
    "ERROR_MESSAGES",
    "MIN_ENTROPY_SCORE",
    "MIN_PASSWORD_LENGTH",
    "PasswordError",
    "CorpusLoadError",
    "EstimatorError",
    "PasswordRejectedError",
    "PasswordsError",
    "UnsupportedCharactersError",
    "ACCEPTED",
    "PasswordCheckResult",
]

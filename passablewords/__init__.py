"""
passablewords: check passwords for length, commonness, and guessability.

    from passablewords import check_password, PasswordError

    result = check_password(password)
    if result.error == PasswordError.TOO_SHORT:
        ...

The common password list is loaded on first use. Call ``init_corpus()`` at
startup to keep that load off the request path.
"""
from passablewords.checks import check_length, check_password, check_uniqueness
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
from passablewords.corpus import (
    CommonPasswordCorpus,
    FileCorpusLoader,
    get_corpus,
    init_corpus,
    reset_corpus,
)
from passablewords.entropy import (
    EntropyEstimator,
    ZxcvbnEstimator,
    check_entropy,
    get_estimator,
    set_estimator,
)

__version__ = "0.1.0"

__all__ = [
    "check_length",
    "check_uniqueness",
    "check_entropy",
    "check_password",
    "PasswordError",
    "PasswordCheckResult",
    "ACCEPTED",
    "ERROR_MESSAGES",
    "MIN_PASSWORD_LENGTH",
    "MIN_ENTROPY_SCORE",
    "CommonPasswordCorpus",
    "FileCorpusLoader",
    "get_corpus",
    "init_corpus",
    "reset_corpus",
    "EntropyEstimator",
    "ZxcvbnEstimator",
    "get_estimator",
    "set_estimator",
    "PasswordsError",
    "CorpusLoadError",
    "EstimatorError",
    "UnsupportedCharactersError",
    "PasswordRejectedError",
]

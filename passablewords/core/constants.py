"""
Policy constants and the verdict vocabulary.

The thresholds are fixed policy: a password must be at least
``MIN_PASSWORD_LENGTH`` characters and reach ``MIN_ENTROPY_SCORE`` on the
estimator's 0-4 scale.
"""
from enum import Enum

MIN_PASSWORD_LENGTH = 8

# 0-2 guessable within a feasible attack budget, 3-4 resistant
MIN_ENTROPY_SCORE = 3
MAX_ENTROPY_SCORE = 4

# Offline attack against a slow password hash
OFFLINE_GUESSES_PER_SECOND = 10_000

# Crack times in seconds below which a password gets score 0, 1, 2, 3;
# anything slower is MAX_ENTROPY_SCORE
CRACK_TIME_SCORE_THRESHOLDS = (10 ** 2, 10 ** 4, 10 ** 6, 10 ** 8)


class PasswordError(str, Enum):
    """
    Reasons a password can be rejected.

    Exactly one reason is reported per check; reasons are never combined.
    """
    TOO_SHORT = "too_short"
    TOO_COMMON = "too_common"
    TOO_SIMPLE = "too_simple"
    NON_ASCII_PASSWORD = "non_ascii_password"
    INTERNAL_ERROR = "internal_error"


# User-facing remediation text for each rejection reason
ERROR_MESSAGES: dict[PasswordError, str] = {
    PasswordError.TOO_SHORT: (
        f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
    ),
    PasswordError.TOO_COMMON: "Password is too common, choose something more unique",
    PasswordError.TOO_SIMPLE: "Password is too easy to guess, make it more random",
    PasswordError.NON_ASCII_PASSWORD: "Password may only contain ASCII characters",
    PasswordError.INTERNAL_ERROR: "Password could not be validated, please try again",
}

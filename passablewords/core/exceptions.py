"""
Exceptions raised by passablewords.

Rejected passwords are reported as ``PasswordCheckResult`` values, not
exceptions. The exceptions here cover configuration failures, the estimator
protocol, and the opt-in ``raise_for_error`` style.
"""
from passablewords.core.constants import ERROR_MESSAGES, PasswordError


class PasswordsError(Exception):
    """Base class for all passablewords exceptions."""
    pass


class CorpusLoadError(PasswordsError):
    """Raised when the common password corpus cannot be loaded."""
    pass


class EstimatorError(PasswordsError):
    """Raised by an entropy estimator that could not score a password."""
    pass


class UnsupportedCharactersError(EstimatorError):
    """Raised when the password contains characters the estimator cannot score."""
    pass


class PasswordRejectedError(PasswordsError):
    """Raised by ``PasswordCheckResult.raise_for_error`` for a failed check."""

    def __init__(self, error: PasswordError):
        self.error = error
        super().__init__(ERROR_MESSAGES[error])

"""Result value returned by every password check."""
from dataclasses import dataclass
from typing import Optional

from passablewords.core.constants import ERROR_MESSAGES, PasswordError
from passablewords.core.exceptions import PasswordRejectedError


@dataclass(frozen=True)
class PasswordCheckResult:
    """
    Outcome of a password check.

    ``error`` is None when the password was accepted, otherwise the single
    reason it was rejected. Truthiness follows ``ok``:

        result = check_password(password)
        if not result:
            return {"detail": result.message}
    """
    error: Optional[PasswordError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    @property
    def message(self) -> str:
        """Remediation text for the rejection reason, empty when accepted."""
        if self.error is None:
            return ""
        return ERROR_MESSAGES[self.error]

    def raise_for_error(self) -> None:
        """Raise PasswordRejectedError if the check failed."""
        if self.error is not None:
            raise PasswordRejectedError(self.error)


ACCEPTED = PasswordCheckResult()


def rejected(error: PasswordError) -> PasswordCheckResult:
    """Build a failed result for the given reason."""
    return PasswordCheckResult(error=error)

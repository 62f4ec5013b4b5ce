"""
Serializable password check schemas.

For applications returning a verdict from an API endpoint.
"""
from typing import Optional

from pydantic import BaseModel

from passablewords.core.constants import PasswordError
from passablewords.core.result import PasswordCheckResult


class PasswordCheckResponse(BaseModel):
    """Schema for a password check verdict."""

    valid: bool
    error: Optional[PasswordError] = None
    message: str = ""

    @classmethod
    def from_result(cls, result: PasswordCheckResult) -> "PasswordCheckResponse":
        return cls(valid=result.ok, error=result.error, message=result.message)

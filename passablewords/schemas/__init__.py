"""
Pydantic schemas for exposing check results.
"""
from passablewords.schemas.password import PasswordCheckResponse

__all__ = ["PasswordCheckResponse"]

"""Credential feedback exceptions."""

from fastapi import HTTPException, status


class CredentialsException(HTTPException):
    """Base credential feedback exception."""

    def __init__(self, detail: str = "Credential check failed", status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(status_code=status_code, detail=detail)


class UnknownRuleSetException(CredentialsException):
    """Raised when a request names a password rule set that does not exist."""

    def __init__(self, name: str, available: list[str]):
        super().__init__(detail=f"Unknown password rule set '{name}', expected one of: {', '.join(available)}")

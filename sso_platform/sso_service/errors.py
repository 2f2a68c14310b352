"""
Domain error vocabulary of the authentication service.
"""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    INVALID_CREDENTIALS = "invalid_credentials"
    USER_ALREADY_EXISTS = "user_already_exists"
    USER_NOT_FOUND = "user_not_found"
    APPLICATION_NOT_FOUND = "application_not_found"
    STORAGE_FAILURE = "storage_failure"
    HASHING_FAILED = "hashing_failed"
    TOKEN_ISSUANCE_FAILED = "token_issuance_failed"


_MESSAGES = {
    ErrorKind.INVALID_CREDENTIALS: "the credentials are invalid",
    ErrorKind.USER_ALREADY_EXISTS: "user already exists",
    ErrorKind.USER_NOT_FOUND: "user not found",
    ErrorKind.APPLICATION_NOT_FOUND: "application not found",
    ErrorKind.STORAGE_FAILURE: "storage failure",
    ErrorKind.HASHING_FAILED: "failed to hash password",
    ErrorKind.TOKEN_ISSUANCE_FAILED: "failed to issue token",
}


class AuthError(Exception):
    """
    Failure of an authentication service operation.

    Attributes:
        kind: Which domain failure occurred
        op: Name of the operation that failed, e.g. "Auth.Login"
    """

    def __init__(self, kind: ErrorKind, op: str, message: Optional[str] = None):
        self.kind = kind
        self.op = op
        self.message = message or _MESSAGES[kind]
        super().__init__(f"{op}: {self.message}")

from datetime import datetime, timedelta, timezone
from typing import Protocol

import jwt
from passlib.context import CryptContext

from .domain import App, User

ALGORITHM = "HS256"

# bcrypt work factor; fixed so every stored hash has the same cost
BCRYPT_DEFAULT_ROUNDS = 10

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=BCRYPT_DEFAULT_ROUNDS,
)


class TokenIssuanceError(Exception):
    pass


def hash_password(password: str) -> bytes:
    return pwd_context.hash(password).encode("utf-8")


def verify_password(plain_password: str, hashed_password: bytes) -> bool:
    """Return True if the plaintext matches the stored hash. Malformed hashes never match."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


# Verified against when the email is unknown, so a miss costs the same
# bcrypt round as a wrong password.
_DUMMY_HASH = hash_password("sso-timing-equalization")


def burn_password_check(plain_password: str) -> None:
    verify_password(plain_password, _DUMMY_HASH)


class TokenIssuer(Protocol):
    def issue(self, user: User, app: App, ttl: timedelta) -> str: ...


class JWTIssuer:
    """
    Issues HS256 JWTs signed with the target application's secret.

    Claims: uid, email, app_id, exp. A token minted for one app does not
    verify against another app's secret.
    """

    def __init__(self, algorithm: str = ALGORITHM):
        self.algorithm = algorithm

    def issue(self, user: User, app: App, ttl: timedelta) -> str:
        expire = datetime.now(timezone.utc) + ttl
        payload = {
            "uid": user.id,
            "email": user.email,
            "app_id": app.id,
            "exp": expire,
        }
        try:
            return jwt.encode(payload, app.secret, algorithm=self.algorithm)
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            raise TokenIssuanceError(f"failed to sign token for app_id={app.id}") from e


def decode_token(token: str, secret: str) -> dict:
    """
    Verify a token against one application's secret and return its claims.

    Raises:
        jwt.InvalidTokenError: Bad signature, expired or malformed token
    """
    return jwt.decode(token, secret, algorithms=[ALGORITHM])

"""
Authentication service: registration, password login and admin checks.

The service holds no mutable state. Storage and token signing are injected
capabilities, so one instance can serve concurrent requests and tests can
swap in in-memory fakes.
"""
from datetime import timedelta
import logging
from typing import Optional

from .auth import (
    JWTIssuer,
    TokenIssuanceError,
    TokenIssuer,
    burn_password_check,
    hash_password,
    verify_password,
)
from .errors import AuthError, ErrorKind
from .storage import (
    AppNotFoundError,
    AppProvider,
    StorageError,
    UserExistsError,
    UserNotFoundError,
    UserProvider,
    UserSaver,
)
from .utils.logging_config import OpLogger


class AuthService:
    def __init__(
        self,
        user_saver: UserSaver,
        user_provider: UserProvider,
        app_provider: AppProvider,
        token_ttl: timedelta,
        issuer: Optional[TokenIssuer] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.user_saver = user_saver
        self.user_provider = user_provider
        self.app_provider = app_provider
        self.token_ttl = token_ttl
        self.issuer = issuer or JWTIssuer()
        self.logger = logger or logging.getLogger(__name__)

    def login(self, email: str, password: str, app_id: int) -> str:
        """
        Verify credentials and issue a token scoped to the given application.

        An unknown email and a wrong password fail identically so callers
        cannot probe which accounts exist.

        Raises:
            AuthError: INVALID_CREDENTIALS, APPLICATION_NOT_FOUND,
                STORAGE_FAILURE or TOKEN_ISSUANCE_FAILED
        """
        op = "Auth.Login"
        log = OpLogger(self.logger, {"op": op, "email": email})
        log.info("attempting to log user in")

        try:
            user = self.user_provider.user(email)
        except UserNotFoundError as e:
            burn_password_check(password)
            log.warning("user not found")
            raise AuthError(ErrorKind.INVALID_CREDENTIALS, op) from e
        except StorageError as e:
            burn_password_check(password)
            log.error("failed to get user: %s", e)
            raise AuthError(ErrorKind.INVALID_CREDENTIALS, op) from e

        if not verify_password(password, user.pass_hash):
            log.info("invalid credentials", extra={"user_id": user.id})
            raise AuthError(ErrorKind.INVALID_CREDENTIALS, op)

        try:
            app = self.app_provider.app(app_id)
        except AppNotFoundError as e:
            log.warning("app not found", extra={"app_id": app_id})
            raise AuthError(ErrorKind.APPLICATION_NOT_FOUND, op) from e
        except StorageError as e:
            log.error("failed to get app: %s", e, extra={"app_id": app_id})
            raise AuthError(ErrorKind.STORAGE_FAILURE, op) from e

        try:
            token = self.issuer.issue(user, app, self.token_ttl)
        except TokenIssuanceError as e:
            log.error("failed to generate token: %s", e, extra={"app_id": app_id})
            raise AuthError(ErrorKind.TOKEN_ISSUANCE_FAILED, op) from e

        log.info("user logged in successfully", extra={"user_id": user.id, "app_id": app.id})
        return token

    def register_new_user(self, email: str, password: str) -> int:
        """
        Hash the password and persist a new user.

        Returns:
            The id assigned to the new user

        Raises:
            AuthError: USER_ALREADY_EXISTS, HASHING_FAILED or STORAGE_FAILURE
        """
        op = "Auth.RegisterNewUser"
        log = OpLogger(self.logger, {"op": op, "email": email})
        log.info("registering user")

        try:
            pass_hash = hash_password(password)
        except (ValueError, TypeError) as e:
            log.error("failed to generate password hash")
            raise AuthError(ErrorKind.HASHING_FAILED, op) from e

        try:
            user_id = self.user_saver.save_user(email, pass_hash)
        except UserExistsError as e:
            log.warning("user already exists")
            raise AuthError(ErrorKind.USER_ALREADY_EXISTS, op) from e
        except StorageError as e:
            log.error("failed to save user: %s", e)
            raise AuthError(ErrorKind.STORAGE_FAILURE, op) from e

        log.info("user registered", extra={"user_id": user_id})
        return user_id

    def is_admin(self, user_id: int) -> bool:
        """
        Raises:
            AuthError: USER_NOT_FOUND or STORAGE_FAILURE
        """
        op = "Auth.IsAdmin"
        log = OpLogger(self.logger, {"op": op, "user_id": user_id})
        log.info("checking if user is admin")

        try:
            is_admin = self.user_provider.is_admin(user_id)
        except UserNotFoundError as e:
            log.warning("user not found")
            raise AuthError(ErrorKind.USER_NOT_FOUND, op) from e
        except StorageError as e:
            log.error("failed to get admin info: %s", e)
            raise AuthError(ErrorKind.STORAGE_FAILURE, op) from e

        log.info("checked if user is admin", extra={"is_admin": is_admin})
        return is_admin

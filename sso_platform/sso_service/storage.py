"""
Persistence gateway for users and applications.

The authentication service only sees the capability protocols below; the
SQLAlchemy-backed Storage implements all of them. Every failure surfaces as a
classified StorageError (not found, conflict, unavailable).
"""
from typing import Callable, Protocol

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from . import models
from .domain import App, User


class StorageError(Exception):
    """Base class for persistence failures"""


class NotFoundError(StorageError):
    pass


class ConflictError(StorageError):
    pass


class StorageUnavailableError(StorageError):
    pass


class UserNotFoundError(NotFoundError):
    pass


class AppNotFoundError(NotFoundError):
    pass


class UserExistsError(ConflictError):
    pass


class UserSaver(Protocol):
    def save_user(self, email: str, pass_hash: bytes) -> int: ...


class UserProvider(Protocol):
    def user(self, email: str) -> User: ...

    def is_admin(self, user_id: int) -> bool: ...


class AppProvider(Protocol):
    def app(self, app_id: int) -> App: ...


class Storage:
    """SQLAlchemy implementation of UserSaver, UserProvider and AppProvider"""

    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def save_user(self, email: str, pass_hash: bytes) -> int:
        op = "storage.save_user"
        try:
            with self._session_factory() as db:
                user = models.User(email=email, pass_hash=pass_hash, is_admin=False)
                db.add(user)
                try:
                    db.commit()
                except IntegrityError as e:
                    db.rollback()
                    raise UserExistsError(f"{op}: user already exists") from e
                return user.id
        except StorageError:
            raise
        except (SQLAlchemyError, OverflowError) as e:
            raise StorageUnavailableError(f"{op}: {e}") from e

    def user(self, email: str) -> User:
        op = "storage.user"
        try:
            with self._session_factory() as db:
                row = db.execute(
                    select(models.User).where(models.User.email == email)
                ).scalar_one_or_none()
        except (SQLAlchemyError, OverflowError) as e:
            raise StorageUnavailableError(f"{op}: {e}") from e

        if row is None:
            raise UserNotFoundError(f"{op}: user not found")
        return User(id=row.id, email=row.email, pass_hash=row.pass_hash, is_admin=row.is_admin)

    def is_admin(self, user_id: int) -> bool:
        op = "storage.is_admin"
        try:
            with self._session_factory() as db:
                flag = db.execute(
                    select(models.User.is_admin).where(models.User.id == user_id)
                ).scalar_one_or_none()
        except (SQLAlchemyError, OverflowError) as e:
            raise StorageUnavailableError(f"{op}: {e}") from e

        if flag is None:
            raise UserNotFoundError(f"{op}: user not found")
        return bool(flag)

    def app(self, app_id: int) -> App:
        op = "storage.app"
        try:
            with self._session_factory() as db:
                row = db.get(models.App, app_id)
        except (SQLAlchemyError, OverflowError) as e:
            raise StorageUnavailableError(f"{op}: {e}") from e

        if row is None:
            raise AppNotFoundError(f"{op}: app not found")
        return App(id=row.id, name=row.name, secret=row.secret)

    def save_app(self, name: str, secret: str) -> int:
        """Register a relying-party application and return its id."""
        op = "storage.save_app"
        try:
            with self._session_factory() as db:
                app = models.App(name=name, secret=secret)
                db.add(app)
                try:
                    db.commit()
                except IntegrityError as e:
                    db.rollback()
                    raise ConflictError(f"{op}: app {name!r} already exists") from e
                return app.id
        except StorageError:
            raise
        except (SQLAlchemyError, OverflowError) as e:
            raise StorageUnavailableError(f"{op}: {e}") from e

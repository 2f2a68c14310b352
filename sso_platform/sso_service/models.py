from sqlalchemy import Column, Integer, String, Boolean, LargeBinary
from .db import Base


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    # bcrypt digest; the plaintext is never stored
    pass_hash = Column(LargeBinary, nullable=False)
    is_admin = Column(Boolean, default=False, nullable=False)

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email}, is_admin={self.is_admin})>"


class App(Base):
    __tablename__ = "apps"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    # HMAC signing key for tokens scoped to this app
    secret = Column(String, nullable=False)

    def __repr__(self):
        return f"<App(id={self.id}, name={self.name})>"

"""
Plain records passed between the storage gateway, the token issuer and the
authentication service. They are detached from any database session.
"""
from dataclasses import dataclass, field


@dataclass(frozen=True)
class User:
    id: int
    email: str
    pass_hash: bytes = field(repr=False)
    is_admin: bool = False


@dataclass(frozen=True)
class App:
    id: int
    name: str
    secret: str = field(repr=False)

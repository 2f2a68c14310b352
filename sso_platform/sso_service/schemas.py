from pydantic import BaseModel

# Ids are signed 64-bit on the wire and in storage
MAX_ID = 2**63 - 1


# Unset fields take their zero values; the routes reject them explicitly.
class RegisterRequest(BaseModel):
    email: str = ""
    password: str = ""


class RegisterResponse(BaseModel):
    user_id: int


class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""
    app_id: int = 0


class LoginResponse(BaseModel):
    token: str


class IsAdminRequest(BaseModel):
    user_id: int = 0


class IsAdminResponse(BaseModel):
    is_admin: bool


class ErrorResponse(BaseModel):
    detail: str

from pydantic import BaseModel


class CredentialsRequest(BaseModel):
    # Optional at the schema level so a missing field surfaces as our own
    # 400 "required" error instead of FastAPI's 422.
    username: str | None = None
    password: str | None = None


class MessageResponse(BaseModel):
    message: str


class PublicUser(BaseModel):
    username: str


class LoginResponse(BaseModel):
    message: str
    user: PublicUser

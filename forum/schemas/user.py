# forum/schemas/user.py

from pydantic import BaseModel, Field


class UserRegister(BaseModel):
    username: str = Field(description="Display name", min_length=1, max_length=100)
    email: str = Field(description="Email", min_length=3, max_length=255)
    password: str = Field(description="Password", min_length=1, max_length=72)


class UserLogin(BaseModel):
    email: str = Field(description="Email")
    password: str = Field(description="Password")


class CachedUser(BaseModel):
    """Snapshot kept in the user cookie for display only.

    It may be stale relative to the store and must never be used to decide
    who is allowed to do what; that is the session token's job.
    """

    id: int = Field(description="User ID")
    username: str = Field(description="Display name")
    email: str = Field(description="Email")


class AuthResponse(BaseModel):
    message: str = Field(description="Result message")
    user: CachedUser = Field(description="Authenticated user")

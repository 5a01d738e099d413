"""User account data models."""

from pydantic import BaseModel, Field


class UserDraft(BaseModel):
    """A registered user ready for insertion. Holds only the credential hash."""

    username: str = Field(..., min_length=1)
    name: str = ""
    password_hash: str


class UserRecord(UserDraft):
    """A stored user."""

    id: str


class UserRead(BaseModel):
    """Public view of a user; the credential hash never leaves the service."""

    id: str
    username: str
    name: str = ""

"""
Pydantic schemas for the users API.

Request bodies are decoded by hand in the router so that every rule
violation is reported by the domain validator with its exact message;
these schemas describe responses and document the request shape.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.domain.users.entities import User


class UserItem(BaseModel):
    """A user as exposed over HTTP."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., gt=0)
    name: str
    email: str
    created_at: datetime = Field(..., alias="createdAt")

    @classmethod
    def from_entity(cls, user: User) -> "UserItem":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
        )

    def to_json(self) -> dict:
        """JSON-ready dict using the public field names."""
        return self.model_dump(mode="json", by_alias=True)


class CreateUserRequest(BaseModel):
    """Documented shape of the POST /users body."""

    name: str = Field(..., description="Display name, at least 2 characters")
    email: str = Field(..., description="Email address, local@domain.tld")


class UpdateUserRequest(BaseModel):
    """Documented shape of the PUT /users/{id} body. All fields optional."""

    name: str | None = None
    email: str | None = None


class UserEnvelope(BaseModel):
    """Success envelope carrying one user."""

    success: bool = True
    data: UserItem
    message: str | None = None
    timestamp: str


class UserListEnvelope(BaseModel):
    """Success envelope carrying all users."""

    success: bool = True
    data: list[UserItem]
    timestamp: str

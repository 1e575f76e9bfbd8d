from typing import Optional
from sqlmodel import SQLModel, Field
from datetime import datetime, timezone


class UserBase(SQLModel):
    """Base user model with shared fields."""
    username: str = Field(unique=True, index=True, max_length=50)
    email: str = Field(unique=True, index=True, max_length=255)
    is_active: bool = Field(default=True)
    is_admin: bool = Field(default=False, description="Staff member allowed to decide item requests")


class User(UserBase, table=True):
    """Staff user table model."""
    id: Optional[int] = Field(default=None, primary_key=True)
    hashed_password: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: Optional[datetime] = Field(default=None)

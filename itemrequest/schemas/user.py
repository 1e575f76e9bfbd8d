from pydantic import BaseModel
from datetime import datetime


class UserResponseSchema(BaseModel):
    """Schema for user response data."""
    id: int
    username: str
    email: str
    is_active: bool
    is_admin: bool
    created_at: datetime

    class Config:
        from_attributes = True

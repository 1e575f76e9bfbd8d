import enum
import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlmodel import Field, SQLModel


class RequestDecision(str, enum.Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    DENIED = "denied"


class RequestItem(SQLModel, table=True):
    """A visitor's request for a copy of a restricted bitstream."""
    __tablename__ = "requestitem"

    id: Optional[int] = Field(default=None, primary_key=True)
    token: str = Field(unique=True, index=True, max_length=48)
    item_id: uuid.UUID = Field(foreign_key="item.id", index=True)
    bitstream_id: uuid.UUID = Field(foreign_key="bitstream.id")
    allfiles: bool = Field(default=False)
    request_email: str = Field(max_length=255)
    request_name: Optional[str] = Field(default=None, max_length=255)
    request_message: Optional[str] = Field(default=None)
    decision: RequestDecision = Field(default=RequestDecision.PENDING)
    request_date: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    decision_date: Optional[datetime] = Field(default=None)
    response_message: Optional[str] = Field(default=None)

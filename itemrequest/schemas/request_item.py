"""
Item request schemas for API request/response serialization.

Wire names are camelCase to match the JSON clients already send.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from itemrequest.models.request_item import RequestDecision


class RequestItemCreateSchema(BaseModel):
    """Body of a new item request. Presence is checked by the repository, not here."""
    bitstream_id: Optional[str] = Field(None, alias="bitstreamId")
    item_id: Optional[str] = Field(None, alias="itemId")
    allfiles: bool = False
    request_email: Optional[str] = Field(None, alias="requestEmail", max_length=255)
    request_name: Optional[str] = Field(None, alias="requestName", max_length=255)
    request_message: Optional[str] = Field(None, alias="requestMessage")

    class Config:
        populate_by_name = True


class RequestItemDecisionSchema(BaseModel):
    """Staff decision on a pending request."""
    accept_request: bool = Field(..., alias="acceptRequest")
    response_message: Optional[str] = Field(None, alias="responseMessage")

    class Config:
        populate_by_name = True


class RequestItemRead(BaseModel):
    """REST representation of an item request."""
    id: str
    token: str
    item_id: uuid.UUID = Field(..., alias="itemId")
    bitstream_id: uuid.UUID = Field(..., alias="bitstreamId")
    allfiles: bool
    request_email: str = Field(..., alias="requestEmail")
    request_name: Optional[str] = Field(None, alias="requestName", max_length=255)
    request_message: Optional[str] = Field(None, alias="requestMessage")
    request_date: datetime = Field(..., alias="requestDate")
    decision: RequestDecision
    decision_date: Optional[datetime] = Field(None, alias="decisionDate")
    response_message: Optional[str] = Field(None, alias="responseMessage")
    type: str = "itemrequest"

    class Config:
        from_attributes = True
        populate_by_name = True

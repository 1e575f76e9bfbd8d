from datetime import datetime, timezone
from typing import Optional

from itemrequest.models.request_item import RequestItem
from itemrequest.schemas.request_item import RequestItemRead


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # Stores without timezone support (SQLite) hand back naive values; they were written as UTC.
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class RequestItemConverter:
    """Turns a stored request into its REST representation. The token doubles as the id."""

    def convert(self, request_item: RequestItem) -> RequestItemRead:
        return RequestItemRead(
            id=request_item.token,
            token=request_item.token,
            item_id=request_item.item_id,
            bitstream_id=request_item.bitstream_id,
            allfiles=request_item.allfiles,
            request_email=request_item.request_email,
            request_name=request_item.request_name,
            request_message=request_item.request_message,
            request_date=_as_utc(request_item.request_date),
            decision=request_item.decision,
            decision_date=_as_utc(request_item.decision_date),
            response_message=request_item.response_message,
        )

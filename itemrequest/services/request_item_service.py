import logging
import secrets
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from itemrequest.core.config import settings
from itemrequest.core.exceptions import DecisionAlreadyMadeError
from itemrequest.models.content import Bitstream, Item
from itemrequest.models.request_item import RequestDecision, RequestItem

logger = logging.getLogger(__name__)


class RequestItemService:
    """Persistence for item requests. Every method runs in the caller's session."""

    def __init__(self, db: Session):
        self.db = db

    def create_request(
        self,
        bitstream: Bitstream,
        item: Item,
        allfiles: bool,
        request_email: str,
        request_name: Optional[str] = None,
        request_message: Optional[str] = None
    ) -> str:
        """
        Record a new pending request and return its token.

        Raises SQLAlchemyError if the record cannot be stored; the session is
        rolled back first.
        """
        request_item = RequestItem(
            token=secrets.token_hex(settings.token_bytes),
            item_id=item.id,
            bitstream_id=bitstream.id,
            allfiles=allfiles,
            request_email=request_email,
            request_name=request_name,
            request_message=request_message,
            decision=RequestDecision.PENDING
        )
        try:
            self.db.add(request_item)
            self.db.commit()
            self.db.refresh(request_item)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to store item request for bitstream {bitstream.id}: {e}")
            raise

        logger.info(f"Created item request {request_item.id} for bitstream {bitstream.id}")
        return request_item.token

    def find_by_token(self, token: str) -> Optional[RequestItem]:
        statement = select(RequestItem).where(RequestItem.token == token)
        return self.db.exec(statement).first()

    def update(self, request_item: RequestItem) -> RequestItem:
        self.db.add(request_item)
        self.db.commit()
        self.db.refresh(request_item)
        return request_item

    def set_decision(
        self,
        request_item: RequestItem,
        accept: bool,
        response_message: Optional[str] = None
    ) -> RequestItem:
        """Accept or deny a pending request. A decision can only be made once."""
        if request_item.decision != RequestDecision.PENDING:
            raise DecisionAlreadyMadeError(
                f"Request was already {request_item.decision.value}"
            )

        request_item.decision = RequestDecision.ACCEPTED if accept else RequestDecision.DENIED
        request_item.decision_date = datetime.now(timezone.utc)
        request_item.response_message = response_message
        self.update(request_item)

        logger.info(f"Item request {request_item.id} {request_item.decision.value}")
        return request_item

    def delete(self, request_item: RequestItem) -> None:
        self.db.delete(request_item)
        self.db.commit()

    def delete_by_token(self, token: str) -> bool:
        """Remove the request with this token. Unknown tokens are ignored."""
        request_item = self.find_by_token(token)
        if request_item is None:
            logger.debug("No item request with that token, nothing to delete")
            return False

        request_id = request_item.id
        self.delete(request_item)
        logger.info(f"Deleted item request {request_id}")
        return True

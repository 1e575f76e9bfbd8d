import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from itemrequest.builders.abstract_builder import AbstractBuilder
from itemrequest.db.session import engine as default_engine
from itemrequest.models.content import Bitstream, Item
from itemrequest.models.request_item import RequestItem
from itemrequest.services.request_item_service import RequestItemService

logger = logging.getLogger(__name__)


class RequestItemBuilder(AbstractBuilder[RequestItem]):
    """Create and clean up item requests for tests."""

    REQ_EMAIL = "jsmith@example.com"
    REQ_NAME = "John Smith"
    REQ_MESSAGE = "Please send me a copy of this."
    REQ_PATH = "test/file"

    def __init__(self, session: Session):
        super().__init__(session)
        self.request_item_service = RequestItemService(session)
        self.request_item: Optional[RequestItem] = None
        self._token: Optional[str] = None

    @classmethod
    def create_request_item(cls, session: Session, item: Item, bitstream: Bitstream) -> "RequestItemBuilder":
        builder = cls(session)
        return builder._create(item, bitstream)

    def _create(self, item: Item, bitstream: Bitstream) -> "RequestItemBuilder":
        try:
            token = self.request_item_service.create_request(
                bitstream, item, True, self.REQ_EMAIL, self.REQ_NAME, self.REQ_MESSAGE
            )
        except SQLAlchemyError as e:
            self.handle_exception(e)
        self._token = token
        self.request_item = self.request_item_service.find_by_token(token)
        return self

    def build(self) -> RequestItem:
        # Nothing to build, the request was stored by create_request_item.
        return self.request_item

    def cleanup(self) -> None:
        logger.debug("cleanup()")
        if self._token is not None:
            # By token, in case the request was already removed elsewhere.
            self.request_item_service.delete_by_token(self._token)
            self.request_item = None
            self._token = None
        else:
            logger.debug("nothing to clean up.")

    def delete(self, session: Session, obj: RequestItem) -> None:
        RequestItemService(session).delete(obj)

    @staticmethod
    def delete_request_item(token: str, engine: Optional[Engine] = None) -> None:
        """
        Delete a request identified by its token, in a session of its own.
        If no such token is known, simply return.
        """
        with Session(engine or default_engine) as session:
            RequestItemService(session).delete_by_token(token)

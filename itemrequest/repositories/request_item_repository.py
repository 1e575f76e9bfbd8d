"""
Item Request Repository

Maps the REST verbs of the item request resource onto request-record CRUD.
All real work is delegated to the injected services and converter.
"""

import logging
import uuid
from typing import NoReturn, Optional

from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from itemrequest.core.exceptions import (
    IncompleteItemRequestError,
    RepositoryMethodNotImplementedError,
    RequestItemNotCreatedError,
    RequestItemNotFoundError,
    UnprocessableEntityError,
)
from itemrequest.schemas.request_item import (
    RequestItemCreateSchema,
    RequestItemDecisionSchema,
    RequestItemRead,
)
from itemrequest.services.content_service import BitstreamService, ItemService
from itemrequest.services.request_item_converter import RequestItemConverter
from itemrequest.services.request_item_service import RequestItemService

logger = logging.getLogger(__name__)

MODEL_NAME = "itemrequest"


class RequestItemRepository:
    """REST repository for item requests, keyed by token."""

    def __init__(
        self,
        request_item_service: RequestItemService,
        item_service: ItemService,
        bitstream_service: BitstreamService,
        converter: RequestItemConverter
    ):
        self.request_item_service = request_item_service
        self.item_service = item_service
        self.bitstream_service = bitstream_service
        self.converter = converter

    def find_one(self, token: str) -> Optional[RequestItemRead]:
        """
        Look up a request by token.

        Open to anyone: the token itself is the credential. Returns None when
        no request has this token.
        """
        request_item = self.request_item_service.find_by_token(token)
        if request_item is None:
            return None
        return self.converter.convert(request_item)

    def find_all(self) -> NoReturn:
        raise RepositoryMethodNotImplementedError(MODEL_NAME, "findAll")

    def create_and_return(self, body: bytes) -> RequestItemRead:
        """
        Create a request from a raw JSON body and return what was stored.

        Args:
            body: JSON object with bitstreamId, itemId, allfiles, requestEmail,
                requestName and requestMessage

        Raises:
            UnprocessableEntityError: body is not a valid request object
            IncompleteItemRequestError: a required field is blank or an
                identifier does not resolve
            RequestItemNotCreatedError: the record could not be stored
        """
        try:
            rir = RequestItemCreateSchema.model_validate_json(body)
        except ValidationError as e:
            raise UnprocessableEntityError("error parsing the body") from e

        # Presence first, so nothing is looked up for an incomplete request.
        bitstream_id = self._require(rir.bitstream_id, "A bitstream ID is required")
        item_id = self._require(rir.item_id, "An item ID is required")
        email = self._require(rir.request_email, "A submitter's email address is required")

        bitstream = self.bitstream_service.find(
            self._parse_uuid(bitstream_id, "That bitstream does not exist"))
        if bitstream is None:
            self._reject("That bitstream does not exist")

        item = self.item_service.find(self._parse_uuid(item_id, "That item does not exist"))
        if item is None:
            self._reject("That item does not exist")

        try:
            token = self.request_item_service.create_request(
                bitstream,
                item,
                rir.allfiles,
                email,
                rir.request_name,
                rir.request_message
            )
        except SQLAlchemyError as e:
            raise RequestItemNotCreatedError("Item request not created.") from e

        # Some fields are only filled in by the store, so return the stored copy.
        request_item = self.request_item_service.find_by_token(token)
        return self.converter.convert(request_item)

    def decide(self, token: str, decision: RequestItemDecisionSchema) -> RequestItemRead:
        """Record a staff member's accept/deny decision on a pending request."""
        request_item = self.request_item_service.find_by_token(token)
        if request_item is None:
            raise RequestItemNotFoundError("Item request not found")

        request_item = self.request_item_service.set_decision(
            request_item,
            decision.accept_request,
            decision.response_message
        )
        return self.converter.convert(request_item)

    # There is no end-user delete path; see delete_by_token for the administrative one.
    def delete(self, token: str) -> NoReturn:
        raise RepositoryMethodNotImplementedError(MODEL_NAME, "delete")

    def _require(self, value: Optional[str], message: str) -> str:
        if value is None or not value.strip():
            self._reject(message)
        return value.strip()

    def _parse_uuid(self, value: str, message: str) -> uuid.UUID:
        try:
            return uuid.UUID(value)
        except ValueError:
            self._reject(message)

    def _reject(self, message: str) -> NoReturn:
        logger.warning(f"Rejected item request: {message}")
        raise IncompleteItemRequestError(message)

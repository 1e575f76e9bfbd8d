from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlmodel import Session

from itemrequest.api.v1.endpoints.users import get_current_admin_user
from itemrequest.core.config import settings
from itemrequest.core.rate_limit import limiter
from itemrequest.db.session import get_session
from itemrequest.models.user import User
from itemrequest.repositories.request_item_repository import RequestItemRepository
from itemrequest.schemas.request_item import RequestItemDecisionSchema, RequestItemRead
from itemrequest.services.content_service import BitstreamService, ItemService
from itemrequest.services.request_item_converter import RequestItemConverter
from itemrequest.services.request_item_service import RequestItemService

router = APIRouter()


def get_request_item_repository(db: Session = Depends(get_session)) -> RequestItemRepository:
    return RequestItemRepository(
        RequestItemService(db),
        ItemService(db),
        BitstreamService(db),
        RequestItemConverter()
    )


@router.get("")
def read_request_items(
    repository: RequestItemRepository = Depends(get_request_item_repository)
) -> Any:
    """Listing requests is not supported."""
    repository.find_all()


@router.post("", response_model=RequestItemRead, status_code=201)
@limiter.limit(settings.request_create_rate_limit)
async def create_request_item(
    request: Request,
    repository: RequestItemRepository = Depends(get_request_item_repository)
) -> Any:
    """
    Ask for a copy of a restricted bitstream.
    Anyone may submit; the response carries the token that identifies the request.
    """
    body = await request.body()
    return repository.create_and_return(body)


@router.get("/{token}", response_model=RequestItemRead)
def read_request_item(
    token: str,
    repository: RequestItemRepository = Depends(get_request_item_repository)
) -> Any:
    """
    Get an item request by its token. No authentication: the token is the credential.
    """
    request_item = repository.find_one(token)
    if request_item is None:
        raise HTTPException(status_code=404, detail="Item request not found")
    return request_item


@router.put("/{token}", response_model=RequestItemRead)
def decide_request_item(
    token: str,
    decision: RequestItemDecisionSchema,
    current_user: User = Depends(get_current_admin_user),
    repository: RequestItemRepository = Depends(get_request_item_repository)
) -> Any:
    """
    Accept or deny a pending item request (staff only).
    """
    return repository.decide(token, decision)


@router.delete("/{token}", status_code=204)
def delete_request_item(
    token: str,
    repository: RequestItemRepository = Depends(get_request_item_repository)
) -> None:
    """Deleting requests is not supported."""
    repository.delete(token)

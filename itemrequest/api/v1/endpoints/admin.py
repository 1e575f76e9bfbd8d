import logging

from fastapi import APIRouter, Depends
from sqlmodel import Session

from itemrequest.api.v1.endpoints.users import get_current_admin_user
from itemrequest.db.session import get_session
from itemrequest.models.user import User
from itemrequest.services.request_item_service import RequestItemService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.delete("/itemrequests/{token}", status_code=204)
def force_delete_request_item(
    token: str,
    db: Session = Depends(get_session),
    current_user: User = Depends(get_current_admin_user)
) -> None:
    """
    Remove an item request outright. Unknown tokens are ignored.
    """
    deleted = RequestItemService(db).delete_by_token(token)
    if deleted:
        logger.info(f"Item request removed by {current_user.username}")

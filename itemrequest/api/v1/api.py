from fastapi import APIRouter

from itemrequest.api.v1.endpoints import users, request_items, admin

api_router = APIRouter()

# Include staff authentication endpoints
api_router.include_router(
    users.router, prefix="/auth", tags=["authentication"])

# Include item request endpoints
api_router.include_router(
    request_items.router, prefix="/itemrequests", tags=["itemrequests"])

# Include administrative endpoints
api_router.include_router(
    admin.router, prefix="/admin", tags=["admin"])

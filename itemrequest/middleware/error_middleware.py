"""
Error Handling Middleware

Turns exceptions that escape the route handlers into JSON error responses.
"""

import logging
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Dict, Any
from fastapi import Request, Response, HTTPException
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp
from sqlalchemy.exc import SQLAlchemyError
from pydantic import ValidationError

logger = logging.getLogger(__name__)


class ErrorCategory(str, Enum):
    """Error categories for classification."""
    DATABASE = "database"
    VALIDATION = "validation"
    SYSTEM = "system"


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Middleware for handling unhandled exceptions."""
    
    def __init__(self, app: ASGIApp):
        super().__init__(app)
        self.error_mappings = {
            ValueError: ErrorCategory.VALIDATION,
            TypeError: ErrorCategory.VALIDATION,
            ValidationError: ErrorCategory.VALIDATION,
            SQLAlchemyError: ErrorCategory.DATABASE,
        }
        self.status_codes = {
            ErrorCategory.VALIDATION: 400,
            ErrorCategory.DATABASE: 500,
            ErrorCategory.SYSTEM: 500,
        }
    
    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        """Process request and handle any unhandled exceptions."""
        try:
            response = await call_next(request)
            return response
        
        except HTTPException as e:
            # Let FastAPI handle HTTP exceptions normally
            raise e
        
        except Exception as e:
            return self._handle_unhandled_exception(request, e)
    
    def _handle_unhandled_exception(self, request: Request, error: Exception) -> JSONResponse:
        category = self.classify_error(error)
        error_id = f"{category.value}_{uuid.uuid4().hex[:12]}"

        logger.error(
            f"Unhandled {type(error).__name__} [{error_id}] during "
            f"{request.method} {request.url.path}: {error}",
            exc_info=error
        )

        response_body: Dict[str, Any] = {
            "error": True,
            "error_id": error_id,
            "detail": "Internal server error" if category == ErrorCategory.SYSTEM else f"A {category.value} error occurred",
            "category": category.value,
            "timestamp": datetime.now(timezone.utc).isoformat()
        }

        # Add details for development environment
        if logger.isEnabledFor(logging.DEBUG):
            response_body["debug"] = {
                "error_type": type(error).__name__,
                "operation": f"{request.method} {request.url.path}",
            }

        return JSONResponse(
            status_code=self.status_codes.get(category, 500),
            content=response_body,
            headers={"X-Error-ID": error_id}
        )
    
    def classify_error(self, error: Exception) -> ErrorCategory:
        """Classify error by type, walking the inheritance hierarchy."""
        error_type = type(error)
        
        if error_type in self.error_mappings:
            return self.error_mappings[error_type]
        
        for mapped_type, category in self.error_mappings.items():
            if isinstance(error, mapped_type):
                return category
        
        return ErrorCategory.SYSTEM

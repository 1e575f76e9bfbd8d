"""
Domain exceptions for item requests.

Each exception carries the HTTP status it is rendered with by the
application's exception handler.
"""

from fastapi import status


class ItemRequestError(Exception):
    """Base exception for item request operations."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UnprocessableEntityError(ItemRequestError):
    """The request body could not be parsed."""
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class IncompleteItemRequestError(ItemRequestError):
    """A required field is missing or an identifier does not resolve."""
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY


class RepositoryMethodNotImplementedError(ItemRequestError):
    """The resource does not support this operation."""
    status_code = status.HTTP_405_METHOD_NOT_ALLOWED

    def __init__(self, model: str, method: str):
        super().__init__(f"{model} {method} is not implemented")
        self.model = model
        self.method = method


class RequestItemNotCreatedError(ItemRequestError):
    """Persisting a new request failed."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


class RequestItemNotFoundError(ItemRequestError):
    status_code = status.HTTP_404_NOT_FOUND


class DecisionAlreadyMadeError(ItemRequestError):
    status_code = status.HTTP_409_CONFLICT

"""
Base class for the builders that create and tear down database fixtures.
"""

import logging
from abc import ABC, abstractmethod
from typing import Generic, NoReturn, TypeVar

from sqlmodel import Session

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AbstractBuilder(ABC, Generic[T]):
    """A builder creates one object in ``session`` and can remove it again."""

    def __init__(self, session: Session):
        self.session = session

    @abstractmethod
    def build(self) -> T:
        """Return the object this builder created."""

    @abstractmethod
    def cleanup(self) -> None:
        """Delete whatever this builder created, if anything."""

    @abstractmethod
    def delete(self, session: Session, obj: T) -> None:
        """Delete ``obj`` using ``session``."""

    def handle_exception(self, error: Exception) -> NoReturn:
        logger.error(f"{type(self).__name__} failed: {error}")
        raise RuntimeError(f"{type(self).__name__} failed: {error}") from error

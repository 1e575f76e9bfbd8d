from sqlmodel import SQLModel

# Import all models here to ensure they are registered with SQLModel
from itemrequest.models.user import User  # noqa
from itemrequest.models.content import Item, Bitstream  # noqa
from itemrequest.models.request_item import RequestItem  # noqa

__all__ = ["SQLModel"]

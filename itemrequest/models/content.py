import uuid
from typing import Optional

from sqlmodel import Field, SQLModel


class Item(SQLModel, table=True):
    """A catalog item; the unit a visitor asks to see restricted files of."""
    __tablename__ = "item"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(max_length=255)
    handle: Optional[str] = Field(default=None, index=True, max_length=255)


class Bitstream(SQLModel, table=True):
    """A stored file attached to an item."""
    __tablename__ = "bitstream"

    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True)
    name: str = Field(max_length=255)
    item_id: Optional[uuid.UUID] = Field(default=None, foreign_key="item.id", index=True)
    size_bytes: int = Field(default=0, ge=0)

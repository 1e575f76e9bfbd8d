"""
Catalog lookups used to resolve the identifiers in an item request.
"""

import uuid
from typing import Optional

from sqlmodel import Session

from itemrequest.models.content import Bitstream, Item


class ItemService:
    def __init__(self, db: Session):
        self.db = db

    def find(self, item_id: uuid.UUID) -> Optional[Item]:
        return self.db.get(Item, item_id)


class BitstreamService:
    def __init__(self, db: Session):
        self.db = db

    def find(self, bitstream_id: uuid.UUID) -> Optional[Bitstream]:
        return self.db.get(Bitstream, bitstream_id)

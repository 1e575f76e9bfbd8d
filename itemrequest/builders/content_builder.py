import logging
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from itemrequest.builders.abstract_builder import AbstractBuilder
from itemrequest.models.content import Bitstream, Item

logger = logging.getLogger(__name__)


class ItemBuilder(AbstractBuilder[Item]):
    def __init__(self, session: Session):
        super().__init__(session)
        self.item: Optional[Item] = None

    @classmethod
    def create_item(cls, session: Session, name: str = "Test item") -> "ItemBuilder":
        builder = cls(session)
        builder.item = Item(name=name)
        return builder

    def with_handle(self, handle: str) -> "ItemBuilder":
        self.item.handle = handle
        return self

    def build(self) -> Item:
        try:
            self.session.add(self.item)
            self.session.commit()
            self.session.refresh(self.item)
        except SQLAlchemyError as e:
            self.session.rollback()
            self.handle_exception(e)
        return self.item

    def cleanup(self) -> None:
        if self.item is not None and self.item.id is not None:
            self.delete(self.session, self.item)
        self.item = None

    def delete(self, session: Session, obj: Item) -> None:
        item = session.get(Item, obj.id)
        if item is not None:
            session.delete(item)
            session.commit()


class BitstreamBuilder(AbstractBuilder[Bitstream]):
    def __init__(self, session: Session):
        super().__init__(session)
        self.bitstream: Optional[Bitstream] = None

    @classmethod
    def create_bitstream(cls, session: Session, item: Item, name: str = "test.pdf") -> "BitstreamBuilder":
        builder = cls(session)
        builder.bitstream = Bitstream(name=name, item_id=item.id)
        return builder

    def with_size(self, size_bytes: int) -> "BitstreamBuilder":
        self.bitstream.size_bytes = size_bytes
        return self

    def build(self) -> Bitstream:
        try:
            self.session.add(self.bitstream)
            self.session.commit()
            self.session.refresh(self.bitstream)
        except SQLAlchemyError as e:
            self.session.rollback()
            self.handle_exception(e)
        return self.bitstream

    def cleanup(self) -> None:
        if self.bitstream is not None and self.bitstream.id is not None:
            self.delete(self.session, self.bitstream)
        self.bitstream = None

    def delete(self, session: Session, obj: Bitstream) -> None:
        bitstream = session.get(Bitstream, obj.id)
        if bitstream is not None:
            session.delete(bitstream)
            session.commit()

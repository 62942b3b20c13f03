from sqlalchemy import select, func, update, delete
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import Session

from db import session_execute, session_flush
from models.item import Item, ItemDTO


class ItemRepository:

    @staticmethod
    async def get_all(session: Session | AsyncSession) -> list[ItemDTO]:
        stmt = select(Item).order_by(Item.id)
        items = await session_execute(stmt, session)
        return [ItemDTO.model_validate(item, from_attributes=True) for item in items.scalars().all()]

    @staticmethod
    async def get_by_name(name: str, session: Session | AsyncSession) -> ItemDTO | None:
        stmt = select(Item).where(Item.name == name).order_by(Item.id).limit(1)
        item = await session_execute(stmt, session)
        item = item.scalar()
        if item is None:
            return item
        return ItemDTO.model_validate(item, from_attributes=True)

    @staticmethod
    async def get_id_name_pairs(session: Session | AsyncSession) -> list[tuple[int, str]]:
        """
        Load (id, name) of every item ordered by id.

        Only the key columns are read, so rows that no longer satisfy ItemDTO
        validation (e.g. blank names written by hand) can still be matched or removed.
        """
        stmt = select(Item.id, Item.name).order_by(Item.id)
        result = await session_execute(stmt, session)
        return [(row.id, row.name) for row in result.all()]

    @staticmethod
    async def get_all_count(session: Session | AsyncSession) -> int:
        stmt = func.count(Item.id)
        items_count = await session_execute(stmt, session)
        return items_count.scalar_one()

    @staticmethod
    async def create(item_dto: ItemDTO, session: Session | AsyncSession) -> int:
        item = Item(**item_dto.model_dump(exclude_none=True))
        session.add(item)
        await session_flush(session)
        return item.id

    @staticmethod
    async def update(item_dto: ItemDTO, session: Session | AsyncSession) -> None:
        item_dto_dict = item_dto.model_dump(exclude={'id', 'created_at', 'updated_at'}, exclude_none=True)
        stmt = update(Item).where(Item.id == item_dto.id).values(**item_dto_dict)
        await session_execute(stmt, session)

    @staticmethod
    async def delete_all(session: Session | AsyncSession) -> None:
        stmt = delete(Item)
        await session_execute(stmt, session)

    @staticmethod
    async def delete_by_ids(item_ids: list[int], session: Session | AsyncSession) -> None:
        if not item_ids:
            return
        stmt = delete(Item).where(Item.id.in_(item_ids))
        await session_execute(stmt, session)

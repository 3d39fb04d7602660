from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from league_bracket.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    def __init__(self, session: AsyncSession, model: type[ModelT]) -> None:
        self.session = session
        self.model = model

    async def add(self, obj: ModelT, *, flush: bool = True) -> ModelT:
        self.session.add(obj)
        if flush:
            await self.session.flush()  # assigns PKs, etc.
        return obj

    async def get(self, id_: Any) -> ModelT | None:
        return await self.session.get(self.model, id_)

    async def first_where(
        self, *predicates: ColumnElement[bool], order_by: Any = None
    ) -> ModelT | None:
        stmt = select(self.model).where(*predicates)
        if order_by is not None:
            stmt = stmt.order_by(order_by)
        result = await self.session.execute(stmt.limit(1))
        return result.scalars().first()

    async def list_where(self, *predicates: ColumnElement[bool]) -> list[ModelT]:
        stmt = select(self.model).where(*predicates).order_by(self.model.id)  # type: ignore[attr-defined]
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def commit(self) -> None:
        await self.session.commit()

    async def rollback(self) -> None:
        await self.session.rollback()

from fastapi import HTTPException
from pydantic import BaseModel
from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession


class BaseRepository:
    model = None
    schema: type[BaseModel] = None

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _validate_single_object(self, **filters_by) -> None:
        count = await self.session.scalar(
            select(func.count())
            .select_from(self.model)
            .filter_by(**filters_by)
        )

        if count == 0:
            raise HTTPException(status_code=404, detail=f"{self.model.__name__} not found")
        if count > 1:
            raise HTTPException(status_code=422, detail=f"Multiple {self.model.__name__} objects found")

    async def get_all(self):
        result = await self.session.execute(select(self.model))
        return [self.schema.model_validate(obj, from_attributes=True) for obj in result.scalars().all()]

    async def get_all_by(self, **filter_by):
        result = await self.session.execute(select(self.model).filter_by(**filter_by))
        return [self.schema.model_validate(obj, from_attributes=True) for obj in result.scalars().all()]

    async def get_one_or_none(self, **filter_by):
        result = await self.session.execute(select(self.model).filter_by(**filter_by))
        obj = result.scalars().one_or_none()
        return self.schema.model_validate(obj, from_attributes=True) if obj else None

    async def add(self, **values):
        obj = self.model(**values)
        self.session.add(obj)
        await self.session.flush()
        await self.session.refresh(obj)
        return self.schema.model_validate(obj, from_attributes=True)

    async def delete(self, **filters_by) -> None:
        await self._validate_single_object(**filters_by)
        stmt = delete(self.model).filter_by(**filters_by)
        await self.session.execute(stmt)

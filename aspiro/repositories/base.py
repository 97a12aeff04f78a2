"""
Base repository shared by every entity repository.

Repositories flush but never commit; the calling service owns the
transaction.
"""
from typing import Any, Dict, Generic, Optional, Type, TypeVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from aspiro.models.base import BaseModel

ModelType = TypeVar("ModelType", bound=BaseModel)

# Dialects with INSERT ... ON CONFLICT DO UPDATE
_UPSERT_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


async def upsert_row(
    db: AsyncSession,
    model: Type[BaseModel],
    keys: Dict[str, Any],
    **values: Any,
) -> None:
    """
    Insert the row identified by `keys`, or overwrite `values` on it.

    One statement, so concurrent upserts on the same keys are last-writer-wins
    instead of a unique violation. `keys` must name the columns of a unique
    constraint on `model`.
    """
    insert = _UPSERT_INSERTS[db.get_bind().dialect.name]
    statement = insert(model).values(**keys, **values)
    overwrite = {column: statement.excluded[column] for column in values}
    overwrite["updated_at"] = statement.excluded["updated_at"]
    await db.execute(
        statement.on_conflict_do_update(index_elements=list(keys), set_=overwrite)
    )


class BaseRepository(Generic[ModelType]):
    """
    Usage:
        class SkillRepository(BaseRepository[Skill]):
            def __init__(self):
                super().__init__(Skill)
    """

    def __init__(self, model: Type[ModelType]):
        self.model = model

    async def get_by_id(self, db: AsyncSession, id: UUID) -> Optional[ModelType]:
        return await db.get(self.model, id)

    async def find_one(self, db: AsyncSession, **filters: Any) -> Optional[ModelType]:
        """The row whose columns equal `filters`, or None."""
        query = select(self.model).filter_by(**filters)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def create(self, db: AsyncSession, **values: Any) -> ModelType:
        instance = self.model(**values)
        db.add(instance)
        await db.flush()
        await db.refresh(instance)
        return instance

    async def update(self, db: AsyncSession, instance: ModelType, **values: Any) -> ModelType:
        for column, value in values.items():
            setattr(instance, column, value)
        await db.flush()
        await db.refresh(instance)
        return instance

    async def upsert(self, db: AsyncSession, keys: Dict[str, Any], **values: Any) -> ModelType:
        """Write the row identified by `keys` and return it as stored."""
        await upsert_row(db, self.model, keys, **values)
        result = await db.execute(
            select(self.model)
            .filter_by(**keys)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one()

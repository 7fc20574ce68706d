"""Base repository: generic read access by primary key."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from bizdirectory.infrastructure.persistence.database import Base


class BaseRepository[ModelType: Base]:
    """Base read-only repository with get_by_id.

    Tables read here are owned by other services; no write methods are exposed.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_by_id(self, entity_id: Any) -> ModelType | None:
        """Return a single record by primary key (tuple for composite keys), or None."""
        return await self.db.get(self.model, entity_id)

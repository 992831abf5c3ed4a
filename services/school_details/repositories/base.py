# services/school_details/repositories/base.py

from abc import ABC, abstractmethod
from typing import List, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from services.school_details.schemas.schools import SchoolOut


class SchoolRepository(ABC):
    """
    Data access for the ``schools`` table, bound to a single session.

    Implementations only run statements; committing or rolling back the
    unit of work is left to the caller.
    """

    strategy: str = ""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def commit(self) -> None:
        await self.db.commit()

    async def rollback(self) -> None:
        await self.db.rollback()

    @abstractmethod
    async def list_all(self) -> List[SchoolOut]:
        ...

    @abstractmethod
    async def count_by_name(self, school_name: str) -> int:
        ...

    @abstractmethod
    async def insert(self, school_name: str, school_address: str, school_type: Optional[str]) -> None:
        ...

    @abstractmethod
    async def get_by_id(self, school_id: int) -> Optional[SchoolOut]:
        ...

    @abstractmethod
    async def find_first_by_name(self, school_name: str) -> Optional[SchoolOut]:
        ...

    @abstractmethod
    async def delete(self, school_id: int) -> int:
        """Delete the row with ``school_id``; returns the number of rows removed."""

    @abstractmethod
    async def update_address(self, school_id: int, school_address: str) -> int:
        """Set the address of ``school_id``; returns the number of rows changed."""

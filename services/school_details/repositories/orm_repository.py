# services/school_details/repositories/orm_repository.py

from typing import List, Optional

from sqlalchemy import func, select

from services.school_details.models.schools import School
from services.school_details.repositories.base import SchoolRepository
from services.school_details.schemas.schools import SchoolOut
from shared.logger import get_logger

log = get_logger("repositories.orm")


class OrmSchoolRepository(SchoolRepository):
    strategy = "orm"

    async def list_all(self) -> List[SchoolOut]:
        result = await self.db.execute(select(School).order_by(School.school_id))
        return [SchoolOut.model_validate(s) for s in result.scalars().all()]

    async def count_by_name(self, school_name: str) -> int:
        result = await self.db.execute(
            select(func.count()).select_from(School).where(School.school_name == school_name)
        )
        return result.scalar_one()

    async def insert(self, school_name: str, school_address: str, school_type: Optional[str]) -> None:
        new_school = School(
            school_name=school_name,
            school_address=school_address,
            school_type=school_type,
        )
        self.db.add(new_school)
        # Flush so constraint violations surface inside the caller's transaction
        await self.db.flush()
        log.debug("Inserted school id=%s", new_school.school_id)

    async def get_by_id(self, school_id: int) -> Optional[SchoolOut]:
        school = await self.db.get(School, school_id)
        return SchoolOut.model_validate(school) if school else None

    async def find_first_by_name(self, school_name: str) -> Optional[SchoolOut]:
        result = await self.db.execute(
            select(School).where(School.school_name == school_name).order_by(School.school_id)
        )
        school = result.scalars().first()
        return SchoolOut.model_validate(school) if school else None

    async def delete(self, school_id: int) -> int:
        school = await self.db.get(School, school_id)
        if school is None:
            return 0
        await self.db.delete(school)
        await self.db.flush()
        return 1

    async def update_address(self, school_id: int, school_address: str) -> int:
        school = await self.db.get(School, school_id)
        if school is None:
            return 0
        school.school_address = school_address
        await self.db.flush()
        return 1

# services/school_details/repositories/sql_repository.py

from typing import List, Optional

from sqlalchemy import text

from services.school_details.repositories.base import SchoolRepository
from services.school_details.schemas.schools import SchoolOut
from shared.logger import get_logger

log = get_logger("repositories.sql")

SELECT_ALL = text(
    "SELECT school_id, school_name, school_address, school_type FROM schools ORDER BY school_id"
)
COUNT_BY_NAME = text("SELECT COUNT(*) FROM schools WHERE school_name = :school_name")
INSERT_SCHOOL = text(
    "INSERT INTO schools (school_name, school_address, school_type) "
    "VALUES (:school_name, :school_address, :school_type)"
)
SELECT_BY_ID = text(
    "SELECT school_id, school_name, school_address, school_type FROM schools "
    "WHERE school_id = :school_id"
)
SELECT_BY_NAME = text(
    "SELECT school_id, school_name, school_address, school_type FROM schools "
    "WHERE school_name = :school_name ORDER BY school_id"
)
DELETE_BY_ID = text("DELETE FROM schools WHERE school_id = :school_id")
UPDATE_ADDRESS = text(
    "UPDATE schools SET school_address = :school_address WHERE school_id = :school_id"
)


class SqlSchoolRepository(SchoolRepository):
    strategy = "sql"

    async def list_all(self) -> List[SchoolOut]:
        result = await self.db.execute(SELECT_ALL)
        return [SchoolOut(**row) for row in result.mappings().all()]

    async def count_by_name(self, school_name: str) -> int:
        result = await self.db.execute(COUNT_BY_NAME, {"school_name": school_name})
        return result.scalar_one()

    async def insert(self, school_name: str, school_address: str, school_type: Optional[str]) -> None:
        result = await self.db.execute(
            INSERT_SCHOOL,
            {"school_name": school_name, "school_address": school_address, "school_type": school_type},
        )
        log.debug("Executed INSERT for school_name=%r (%s row)", school_name, result.rowcount)

    async def get_by_id(self, school_id: int) -> Optional[SchoolOut]:
        result = await self.db.execute(SELECT_BY_ID, {"school_id": school_id})
        row = result.mappings().first()
        return SchoolOut(**row) if row else None

    async def find_first_by_name(self, school_name: str) -> Optional[SchoolOut]:
        result = await self.db.execute(SELECT_BY_NAME, {"school_name": school_name})
        row = result.mappings().first()
        return SchoolOut(**row) if row else None

    async def delete(self, school_id: int) -> int:
        result = await self.db.execute(DELETE_BY_ID, {"school_id": school_id})
        log.debug("Executed DELETE for school_id=%s (%s rows)", school_id, result.rowcount)
        return result.rowcount

    async def update_address(self, school_id: int, school_address: str) -> int:
        result = await self.db.execute(
            UPDATE_ADDRESS, {"school_id": school_id, "school_address": school_address}
        )
        log.debug("Executed UPDATE for school_id=%s (%s rows)", school_id, result.rowcount)
        return result.rowcount

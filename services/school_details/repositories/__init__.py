from sqlalchemy.ext.asyncio import AsyncSession

from .base import SchoolRepository
from .orm_repository import OrmSchoolRepository
from .sql_repository import SqlSchoolRepository

REPOSITORY_STRATEGIES = {
    OrmSchoolRepository.strategy: OrmSchoolRepository,
    SqlSchoolRepository.strategy: SqlSchoolRepository,
}


def build_school_repository(strategy: str, db: AsyncSession) -> SchoolRepository:
    try:
        repository_cls = REPOSITORY_STRATEGIES[strategy]
    except KeyError:
        raise ValueError(
            f"Unknown school data access strategy {strategy!r}; "
            f"expected one of {sorted(REPOSITORY_STRATEGIES)}"
        ) from None
    return repository_cls(db)

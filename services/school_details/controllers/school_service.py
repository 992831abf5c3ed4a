# services/school_details/controllers/school_service.py

from typing import List, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from services.school_details.repositories import SchoolRepository
from services.school_details.schemas.schools import (
    SchoolAddressUpdate,
    SchoolCreate,
    SchoolDeleteRequest,
    SchoolOut,
    SchoolOutcome,
)
from shared.logger import get_logger

log = get_logger("school_service")


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


# --- GET ALL SCHOOLS ---
async def get_all_schools(repository: SchoolRepository) -> List[SchoolOut]:
    return await repository.list_all()


# --- ADD NEW SCHOOL ---
async def add_school(payload: SchoolCreate, repository: SchoolRepository) -> SchoolOutcome:
    if _is_blank(payload.school_name):
        return SchoolOutcome.NAME_REQUIRED
    if _is_blank(payload.school_address):
        return SchoolOutcome.ADDRESS_REQUIRED

    school_name = payload.school_name.strip()

    try:
        # Duplicate check and insert share one transaction
        if await repository.count_by_name(school_name) > 0:
            await repository.rollback()
            log.info("School %r already exists", school_name)
            return SchoolOutcome.EXISTS

        await repository.insert(
            school_name=school_name,
            school_address=payload.school_address.strip(),
            school_type=payload.school_type,
        )
        await repository.commit()
    except IntegrityError:
        # Lost a race against a concurrent insert of the same name
        await repository.rollback()
        log.info("Unique constraint rejected school %r", school_name)
        return SchoolOutcome.EXISTS
    except SQLAlchemyError:
        log.exception("Failed to add school %r", school_name)
        await repository.rollback()
        return SchoolOutcome.ERROR

    log.info("Created school %r", school_name)
    return SchoolOutcome.CREATED


# --- DELETE SCHOOL ---
async def delete_school(payload: SchoolDeleteRequest, repository: SchoolRepository) -> SchoolOutcome:
    school_id, school_name = payload.school_id, payload.school_name
    if school_id is None and _is_blank(school_name):
        return SchoolOutcome.NOT_FOUND

    try:
        school = None
        if school_id is not None:
            school = await repository.get_by_id(school_id)
        if school is None and school_name is not None:
            school = await repository.find_first_by_name(school_name.strip())

        if school is None:
            await repository.rollback()
            log.info("No school to delete for id=%s name=%r", school_id, school_name)
            return SchoolOutcome.NOT_FOUND

        if await repository.delete(school.school_id) == 0:
            # Removed by someone else after the lookup
            await repository.rollback()
            return SchoolOutcome.NOT_FOUND
        await repository.commit()
    except SQLAlchemyError:
        log.exception("Failed to delete school id=%s name=%r", school_id, school_name)
        await repository.rollback()
        return SchoolOutcome.ERROR

    log.info("Deleted school id=%s", school.school_id)
    return SchoolOutcome.DELETED


# --- UPDATE SCHOOL ADDRESS ---
async def update_address(payload: SchoolAddressUpdate, repository: SchoolRepository) -> SchoolOutcome:
    if _is_blank(payload.school_address):
        return SchoolOutcome.INVALID_ADDRESS
    if payload.school_id is None:
        return SchoolOutcome.NOT_FOUND

    try:
        if await repository.get_by_id(payload.school_id) is None:
            await repository.rollback()
            return SchoolOutcome.NOT_FOUND

        if await repository.update_address(payload.school_id, payload.school_address.strip()) == 0:
            await repository.rollback()
            return SchoolOutcome.NOT_FOUND
        await repository.commit()
    except SQLAlchemyError:
        log.exception("Failed to update address of school id=%s", payload.school_id)
        await repository.rollback()
        return SchoolOutcome.ERROR

    log.info("Updated address of school id=%s", payload.school_id)
    return SchoolOutcome.UPDATED

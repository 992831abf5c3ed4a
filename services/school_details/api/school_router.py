# services/school_details/api/school_router.py
from typing import Dict, List, Optional, Tuple

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from services.school_details.controllers import school_service
from services.school_details.repositories import SchoolRepository, build_school_repository
from services.school_details.schemas.schools import (
    SchoolAddressUpdate,
    SchoolCreate,
    SchoolDeleteRequest,
    SchoolOut,
    SchoolOutcome,
    StatusResponse,
)
from shared import config
from shared.db import get_db

router = APIRouter(prefix="/api", tags=["SchoolDetails"])

# outcome -> (HTTP status, envelope Status, default Message)
OUTCOME_RESPONSES: Dict[SchoolOutcome, Tuple[int, str, str]] = {
    SchoolOutcome.NAME_REQUIRED: (status.HTTP_400_BAD_REQUEST, "Failed", "School name is required"),
    SchoolOutcome.ADDRESS_REQUIRED: (status.HTTP_400_BAD_REQUEST, "Failed", "School address is required"),
    SchoolOutcome.INVALID_ADDRESS: (status.HTTP_400_BAD_REQUEST, "Failed", "School address is required"),
    SchoolOutcome.EXISTS: (status.HTTP_409_CONFLICT, "Failed", "School already exists"),
    SchoolOutcome.NOT_FOUND: (status.HTTP_404_NOT_FOUND, "Failed", "Record not found"),
    SchoolOutcome.CREATED: (status.HTTP_201_CREATED, "Success", "New school inserted successfully"),
    SchoolOutcome.UPDATED: (status.HTTP_200_OK, "Success", "School address updated successfully"),
    SchoolOutcome.DELETED: (status.HTTP_200_OK, "Success", "Record deleted successfully"),
    SchoolOutcome.ERROR: (status.HTTP_500_INTERNAL_SERVER_ERROR, "Error", "Unknown error occurred"),
}


def outcome_response(outcome: SchoolOutcome, message: Optional[str] = None) -> JSONResponse:
    status_code, status_text, default_message = OUTCOME_RESPONSES[outcome]
    body = StatusResponse(Status=status_text, Message=message or default_message)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def get_school_repository(db: AsyncSession = Depends(get_db)) -> SchoolRepository:
    return build_school_repository(config.SCHOOL_DATA_ACCESS, db)


# --- GET ALL SCHOOLS ---
@router.get("/getSchoolDetails", response_model=List[SchoolOut])
async def get_school_details(repository: SchoolRepository = Depends(get_school_repository)):
    return await school_service.get_all_schools(repository)


# --- ADD NEW SCHOOL ---
@router.post(
    "/add/schoolDetails",
    response_model=StatusResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": StatusResponse}, 409: {"model": StatusResponse}, 500: {"model": StatusResponse}},
)
async def add_school_details(
    payload: SchoolCreate,
    repository: SchoolRepository = Depends(get_school_repository),
):
    outcome = await school_service.add_school(payload, repository)
    return outcome_response(outcome)


# --- DELETE SCHOOL ---
@router.delete(
    "/delete/schoolDetails",
    response_model=StatusResponse,
    responses={400: {"model": StatusResponse}, 404: {"model": StatusResponse}, 500: {"model": StatusResponse}},
)
async def delete_school_details(
    payload: SchoolDeleteRequest,
    repository: SchoolRepository = Depends(get_school_repository),
):
    if (payload.operation_type or "").lower() != "delete":
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=StatusResponse(Status="Failed", Message="'operation_type' must be DELETE").model_dump(),
        )

    outcome = await school_service.delete_school(payload, repository)
    return outcome_response(outcome)


# --- UPDATE SCHOOL ADDRESS ---
@router.put(
    "/updateSchoolAddress",
    response_model=StatusResponse,
    responses={400: {"model": StatusResponse}, 404: {"model": StatusResponse}, 500: {"model": StatusResponse}},
)
async def update_school_address(
    payload: SchoolAddressUpdate,
    repository: SchoolRepository = Depends(get_school_repository),
):
    outcome = await school_service.update_address(payload, repository)
    if outcome is SchoolOutcome.NOT_FOUND:
        return outcome_response(outcome, f"No school found with id={payload.school_id}")
    return outcome_response(outcome)

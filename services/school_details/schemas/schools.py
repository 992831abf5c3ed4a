# services/school_details/schemas/schools.py

from enum import Enum
from typing import Annotated, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

# Same range as a signed 32-bit INTEGER column
SCHOOL_ID_MIN = -(2**31)
SCHOOL_ID_MAX = 2**31 - 1


def _reject_bool(value):
    # bool is an int subclass; lax mode would turn true into 1
    if isinstance(value, bool):
        raise ValueError("school_id must be an integer")
    return value


SchoolId = Annotated[int, BeforeValidator(_reject_bool), Field(ge=SCHOOL_ID_MIN, le=SCHOOL_ID_MAX)]


class SchoolOutcome(str, Enum):
    NAME_REQUIRED = "NAME_REQUIRED"
    ADDRESS_REQUIRED = "ADDRESS_REQUIRED"
    EXISTS = "EXISTS"
    NOT_FOUND = "NOT_FOUND"
    INVALID_ADDRESS = "INVALID_ADDRESS"
    CREATED = "CREATED"
    UPDATED = "UPDATED"
    DELETED = "DELETED"
    ERROR = "ERROR"


class SchoolCreate(BaseModel):
    # Blank/missing values are reported as outcomes, not as 422s
    school_name: Optional[str] = None
    school_address: Optional[str] = None
    school_type: Optional[str] = None


class SchoolOut(BaseModel):
    school_id: int
    school_name: str
    school_address: Optional[str] = None
    school_type: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class SchoolDeleteRequest(BaseModel):
    operation_type: Optional[str] = None
    school_id: Optional[SchoolId] = None
    school_name: Optional[str] = None


class SchoolAddressUpdate(BaseModel):
    school_id: Optional[SchoolId] = None
    school_address: Optional[str] = None


class StatusResponse(BaseModel):
    Status: str
    Message: str

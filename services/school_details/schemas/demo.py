# services/school_details/schemas/demo.py

from typing import Optional

from pydantic import BaseModel, ConfigDict


class GreetingOut(BaseModel):
    Name: str
    Company: str


class SchoolSearchRequest(BaseModel):
    Name: Optional[str] = None
    AreaLocation: Optional[str] = None
    Catagory: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class SchoolSearchResult(BaseModel):
    SchoolName: str
    Location: str

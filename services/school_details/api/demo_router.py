# services/school_details/api/demo_router.py
"""
Static demo endpoints: greetings, a served image and a mock school search.
None of them touch the database.
"""
from typing import List

from fastapi import APIRouter, status
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse

from services.school_details.schemas.demo import GreetingOut, SchoolSearchRequest, SchoolSearchResult
from services.school_details.schemas.schools import StatusResponse
from shared import config
from shared.logger import get_logger

log = get_logger("demo")

router = APIRouter(tags=["Demo"])

SCHOOL_IMAGE = "BackToSchool.png"

GREETINGS = [
    GreetingOut(Name="Ratnakar", Company="Cognizant"),
    GreetingOut(Name="Rajesh", Company="Google"),
]

MOCK_SEARCH_RESULTS = [
    SchoolSearchResult(SchoolName="RosarySchool", Location="Mumbai"),
    SchoolSearchResult(SchoolName="SaintVincent", Location="Mumbai"),
    SchoolSearchResult(SchoolName="NewEnglishSchool", Location="Mumbai"),
]


@router.get("/api/greetings", response_class=PlainTextResponse)
async def greetings():
    return "Hello World!"


@router.get("/api/greetings/list", response_model=List[GreetingOut])
async def greetings_list():
    return GREETINGS


@router.get("/school/image", response_class=FileResponse)
async def get_school_image():
    image_path = config.STATIC_DIR / "images" / SCHOOL_IMAGE
    if not image_path.is_file():
        log.warning("School image not found at %s", image_path)
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=StatusResponse(Status="Failed", Message="Image not found").model_dump(),
        )

    return FileResponse(
        image_path,
        media_type="image/png",
        headers={"Content-Disposition": f"inline; filename=\"{SCHOOL_IMAGE}\""},
    )


# Filters are logged but not applied; the result list is fixed
@router.post(
    "/search/school",
    response_model=List[SchoolSearchResult],
    status_code=status.HTTP_202_ACCEPTED,
)
async def search_school_details(payload: SchoolSearchRequest):
    log.info(
        "Search request received: Name=%s, AreaLocation=%s, Category=%s",
        payload.Name, payload.AreaLocation, payload.Catagory,
    )
    return MOCK_SEARCH_RESULTS

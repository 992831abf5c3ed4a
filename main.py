from contextlib import asynccontextmanager

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from services.school_details.api.demo_router import router as demo_router
from services.school_details.api.school_router import router as school_router
from shared import config
from shared.db import engine, init_models
from shared.errors import register_exception_handlers
from shared.logger import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Using %r school data access", config.SCHOOL_DATA_ACCESS)
    if config.CREATE_TABLES_ON_STARTUP:
        await init_models()
    yield
    await engine.dispose()


app = FastAPI(title="School Details Backend", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/")
def health_check():
    return {"status": "School Details Backend is running ✅"}


app.include_router(school_router)
app.include_router(demo_router)

import logging

from fastapi import APIRouter, FastAPI

from src.config.settings import settings
from src.features.account.router import router as account_router
from src.features.staff.router import router as staff_router
from src.features.student.router import router as student_router

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    debug=settings.debug,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# Router Registration

routers: list[APIRouter] = [
    staff_router,
    student_router,
    account_router,
]

for router in routers:
    app.include_router(router, prefix=settings.api_prefix)

logger.info(f"{settings.app_name} configured for {settings.environment} environment")


@app.get("/")
async def root():
    return {"message": settings.app_name, "status": "running"}


@app.get("/health")
async def health():
    return {"status": "healthy"}

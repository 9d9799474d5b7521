import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from leave_service.api.employees import router as employees_router
from leave_service.api.leaves import router as leaves_router
from leave_service.core.config import settings

logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    description="Employee leave management service (REST + in-memory store)",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def on_startup() -> None:
    logger.info("Starting %s with an empty in-memory store", settings.APP_NAME)


@app.get("/health")
async def health_check():
    return {
        "status": "ok",
        "service": "leave-service",
    }


@app.get("/")
async def root():
    return {
        "message": "Leave Service is running",
        "docs": "/docs",
    }


app.include_router(employees_router)
app.include_router(leaves_router)

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from nairim.config import get_settings
from nairim.database import engine, Base
from nairim.exceptions import ConflictError, EntityNotFoundError, ValidationError
from nairim.routers import (
    agencies_router, dashboard_router, favorites_router, leases_router, owners_router,
    properties_router, property_types_router, tenants_router, users_router,
)
import nairim.models  # noqa: F401  регистрирует таблицы в Base.metadata

settings = get_settings()

log_level = logging.DEBUG if settings.debug else logging.INFO
logging.basicConfig(
    level=log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info(f"{settings.app_name} started")
    yield


app = FastAPI(
    title=settings.app_name,
    description="Управление объектами недвижимости, договорами аренды и показателями портфеля",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(properties_router)
app.include_router(owners_router)
app.include_router(tenants_router)
app.include_router(agencies_router)
app.include_router(leases_router)
app.include_router(property_types_router)
app.include_router(users_router)
app.include_router(favorites_router)
app.include_router(dashboard_router)


@app.exception_handler(EntityNotFoundError)
async def not_found_handler(request: Request, exc: EntityNotFoundError):
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(ConflictError)
async def conflict_handler(request: Request, exc: ConflictError):
    return JSONResponse(status_code=409, content={"detail": str(exc)})


@app.exception_handler(ValidationError)
async def validation_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(IntegrityError)
async def integrity_handler(request: Request, exc: IntegrityError):
    logger.warning(f"Integrity error on {request.method} {request.url.path}: {exc.orig}")
    return JSONResponse(status_code=409, content={"detail": "Record conflicts with existing data"})


@app.get("/health")
async def health_check():
    return {"status": "ok"}

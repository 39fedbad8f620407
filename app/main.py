import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import settings
from app.core.exceptions import StoreUnavailable
from app.db.session import engine, SessionLocal
from app.db.base import Base
from app.services.category_service import ensure_seeded

from app.api.auth import router as auth_router
from app.api.budget_categories import router as budget_categories_router
from app.api.budget_lines import router as budget_lines_router
from app.api.consolidation import router as consolidation_router
from app.api.budget_analysis import router as budget_analysis_router
from app.api.reports import router as reports_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # store failures here abort startup
    db = SessionLocal()
    try:
        ensure_seeded(db)
    finally:
        db.close()
    yield


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# DEV ONLY
Base.metadata.create_all(bind=engine)


# ERRORS -> {"message": ..., "errors"?: [...]}
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "message": "Invalid request data",
            "errors": jsonable_encoder(exc.errors()),
        },
    )


@app.exception_handler(SQLAlchemyError)
async def store_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error("Data store error on %s %s", request.method, request.url.path, exc_info=exc)
    error = StoreUnavailable()
    return JSONResponse(
        status_code=error.status_code,
        content={"message": error.detail},
    )


# ROUTERS
app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
app.include_router(budget_categories_router, prefix="/api")
app.include_router(budget_lines_router, prefix="/api")
app.include_router(consolidation_router, prefix="/api")
app.include_router(budget_analysis_router, prefix="/api")
app.include_router(reports_router, prefix="/api")

@app.get("/api/health")
def health():
    return {"status": "ok"}

import logging
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from inventory_app.api import categories, dashboard, inventory_logs, products
from inventory_app.config import Settings, settings as default_settings
from inventory_app.database import Database
from inventory_app.exceptions import InventoryError, StoreError

logger = logging.getLogger(__name__)


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p not in ("body", "path", "query"))
        parts.append(f"{loc}: {err.get('msg')}" if loc else err.get("msg", "invalid value"))
    return "; ".join(parts) or "Invalid request"


def create_app(settings: Settings | None = None, database: Database | None = None) -> FastAPI:
    """Build the API around an explicit settings object and store handle.

    When no Database is given one is opened from settings at startup. Either
    way the handle lives on app.state.db and is disposed at shutdown.
    """
    settings = settings or default_settings
    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = database or Database(settings.database_url, echo=settings.SQL_ECHO)
        db.create_all()
        app.state.db = db
        logger.info("Connected to %s", db.engine.url.render_as_string(hide_password=True))
        yield
        db.dispose()

    app = FastAPI(
        title=f"{settings.APP_NAME} API",
        description="Products, categories and stock adjustments with an audit trail",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(InventoryError)
    async def inventory_error_handler(request: Request, exc: InventoryError):
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        message = _describe_validation_errors(exc)
        logger.info("Rejected %s %s: %s", request.method, request.url.path, message)
        return JSONResponse(status_code=400, content={"message": message})

    @app.exception_handler(SQLAlchemyError)
    async def store_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error("Database error on %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=500, content=StoreError("Database error", error=str(exc)).to_dict())

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Return JSON for unhandled exceptions so frontend can parse error."""
        logger.error("Unhandled error: %s\n%s", exc, traceback.format_exc())
        return JSONResponse(status_code=500, content={"message": "Internal server error", "error": str(exc)})

    app.include_router(categories.router)
    app.include_router(products.router)
    app.include_router(inventory_logs.router)
    app.include_router(dashboard.router)

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app


app = create_app()


def run():
    import uvicorn

    uvicorn.run("inventory_app.main:app", host="0.0.0.0", port=default_settings.PORT)

from contextlib import asynccontextmanager

from fastapi import FastAPI, Response, status
from fastapi.middleware.cors import CORSMiddleware

from employee_portal.api.routers.employees import router as employees_router
from employee_portal.core.config import settings
from employee_portal.core.database import build_engine, create_db_and_tables, database_reachable
from employee_portal.core.logging import get_logger
from employee_portal.models.employee import EmployeeRecord

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the employees table on the app's engine; dispose of it on shutdown."""
    logger.info("Starting reference employee service...")
    create_db_and_tables(app.state.engine, EmployeeRecord)
    logger.info("Application startup complete")

    yield

    logger.info("Application shutting down...")
    app.state.engine.dispose()


def create_app(engine=None) -> FastAPI:
    """
    Build the reference employee service.

    Args:
        engine: SQLAlchemy engine backing ``/api/employees``. Defaults to one
            built from ``DATABASE_URL``.
    """
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.state.engine = engine if engine is not None else build_engine()

    # The portal may be served from a different origin than the API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )

    app.include_router(employees_router, prefix="/api")

    @app.get("/health", tags=["health"])
    def health_check(response: Response):
        """Report whether the employee store answers a trivial query."""
        healthy = database_reachable(app.state.engine)
        if not healthy:
            response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return {
            "status": "healthy" if healthy else "unhealthy",
            "database": "reachable" if healthy else "unreachable",
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
        }

    return app


app = create_app()

"""
OrderDesk - Backend API
Customers, products and orders for an online store
"""
import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from orderdesk.api import auth, customers, orders, products
from orderdesk.api.exception_handlers import register_exception_handlers
from orderdesk.core.config import get_settings
from orderdesk.core.database import check_database
from orderdesk.core.logging_config import setup_logging
from orderdesk.core.schema import init_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info(f"Starting {settings.API_TITLE} v{settings.API_VERSION}")
    if settings.AUTO_INIT_DB:
        logger.info("Initializing database schema...")
        init_database()
    yield
    logger.info("Shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.API_TITLE,
        version=settings.API_VERSION,
        description=settings.API_DESCRIPTION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins(),
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include API routers
    app.include_router(customers.router, prefix="/api/customers", tags=["Customers"])
    app.include_router(products.router, prefix="/api/products", tags=["Products"])
    app.include_router(orders.router, prefix="/api/orders", tags=["Orders"])
    app.include_router(auth.router, prefix="/api/auth", tags=["Authentication"])

    @app.get("/")
    async def root():
        """Root endpoint - API status"""
        return {
            "message": settings.API_TITLE,
            "status": "online",
            "version": settings.API_VERSION,
        }

    @app.get("/health")
    def health():
        """Health check endpoint for monitoring - tests database connectivity"""
        start_time = time.time()

        db_status = "connected"
        db_latency_ms = None
        db_error = None
        try:
            db_latency_ms = check_database()
        except Exception as e:
            db_status = "disconnected"
            db_error = str(e)

        return {
            "status": "healthy" if db_status == "connected" else "degraded",
            "service": "orderdesk-api",
            "version": settings.API_VERSION,
            "database": {
                "status": db_status,
                "latency_ms": db_latency_ms,
                "error": db_error,
            },
            "total_latency_ms": round((time.time() - start_time) * 1000, 2),
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("orderdesk.main:app", host=settings.API_HOST, port=settings.API_PORT)

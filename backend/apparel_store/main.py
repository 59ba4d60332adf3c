"""
Apparel Store - Backend API
REST backend for the apparel catalog, customers, orders and shipments
"""
import logging
import time
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

# Load environment variables
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from apparel_store.api import apparel_order_shipments, apparel_orders, apparels, customers  # noqa: E402
from apparel_store.core.config import settings  # noqa: E402
from apparel_store.core.database import check_database_connection, init_db  # noqa: E402
from apparel_store.core.error_handlers import register_exception_handlers  # noqa: E402

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Starting {settings.API_TITLE} v{settings.API_VERSION}")
    init_db()
    yield
    logger.info(f"Shutting down {settings.API_TITLE}")


# Create FastAPI application
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
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
    allow_headers=["*"],
    expose_headers=["X-Process-Time"],
)


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Add request processing time header"""
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    logger.debug(
        f"{request.method} {request.url.path} -> {response.status_code} ({process_time * 1000:.1f} ms)"
    )
    return response


register_exception_handlers(app)

# Include API routers
app.include_router(apparels.router, prefix="/api/v1/apparels", tags=["Apparels"])
app.include_router(customers.router, prefix="/api/v1/customers", tags=["Customers"])
app.include_router(apparel_orders.router, prefix="/api/v1/apparel-orders", tags=["Apparel Orders"])
app.include_router(apparel_order_shipments.router, prefix="/api/v1/apparel-orders", tags=["Apparel Order Shipments"])


@app.get("/")
def root():
    """Root endpoint - API status"""
    return {
        "message": settings.API_TITLE,
        "status": "online",
        "version": settings.API_VERSION,
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health")
def health():
    """Health check endpoint for monitoring - tests database connectivity"""
    start_time = time.time()

    db_latency_ms = None
    db_error = None

    try:
        db_latency_ms = check_database_connection()
        db_status = "connected"
    except SQLAlchemyError as e:
        logger.warning(f"Health check could not reach the database: {e}")
        db_status = "disconnected"
        db_error = str(e)

    return {
        "status": "healthy" if db_status == "connected" else "degraded",
        "service": "apparel-store-api",
        "version": settings.API_VERSION,
        "database": {
            "status": db_status,
            "latency_ms": db_latency_ms,
            "error": db_error,
        },
        "total_latency_ms": round((time.time() - start_time) * 1000, 2),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apparel_store.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_DEBUG,
    )

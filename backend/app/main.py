"""
Coffee Journal - Backend API
Registro de cafeterías y de los cafés probados en cada una

Run with:
    uvicorn app.main:app --reload
"""
import logging
import time
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

# Load environment variables
env_path = Path(__file__).parent.parent / '.env'
load_dotenv(env_path)

from app.api import orders, shops
from app.api.deps import envelope_response
from app.core.config import get_settings
from app.core.database import CONNECTION_TIMEOUT, get_db_connection_with_retry
from app.core.errors import CatalogError
from app.domain.result import KIND_STORE, KIND_UNEXPECTED, KIND_VALIDATION, ServiceResult

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Crear aplicación FastAPI
app = FastAPI(
    title=settings.API_TITLE,
    version=settings.API_VERSION,
    description=settings.API_DESCRIPTION,
    debug=settings.API_DEBUG,
)

# Configure CORS with both specific origins and Vercel regex pattern
app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=r"https://.*\.vercel\.app",  # Allow all Vercel preview/production deployments
    allow_origins=settings.get_allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(shops.router, prefix="/api/v1/shops", tags=["Coffee Shops"])
app.include_router(orders.router, prefix="/api/v1/orders", tags=["Coffee Orders"])


# Error responses keep the {success, data, error} envelope
@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed or missing request body"""
    errors = exc.errors()
    detail = errors[0].get("msg") if errors else "malformed request"
    logger.debug(f"Rejected request to {request.url.path}: {errors}")
    return envelope_response(ServiceResult.fail(f"invalid request body: {detail}", KIND_VALIDATION))


@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError):
    """Catalog errors raised outside the service layer (e.g. store not configured)"""
    logger.error(f"Error handling {request.url.path}: {exc.message}")
    return envelope_response(ServiceResult.fail(exc.message or "record store unavailable", KIND_STORE))


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    logger.exception(f"Unexpected error handling {request.url.path}")
    return envelope_response(ServiceResult.fail("an unexpected error occurred", KIND_UNEXPECTED))


@app.get("/")
def root():
    """Endpoint raíz - Verificación de estado de la API"""
    return {
        "message": "Coffee Journal API",
        "status": "online",
        "version": settings.API_VERSION,
    }


@app.get("/health")
def health():
    """Health check endpoint para monitoreo - tests database connectivity"""
    start_time = time.time()

    db_status = "not_configured"
    db_latency_ms = None
    db_error = None

    if settings.DATABASE_URL:
        try:
            # Minimal retry (fast check)
            conn = get_db_connection_with_retry(max_retries=1, retry_delay=0.5)
            try:
                cursor = conn.cursor()
                db_start = time.time()
                cursor.execute("SELECT 1")
                cursor.fetchone()
                db_latency_ms = round((time.time() - db_start) * 1000, 2)
                cursor.close()
            finally:
                conn.close()
            db_status = "connected"
        except Exception as e:
            logger.warning(f"Health check could not reach the database: {e}")
            db_status = "disconnected"
            db_error = str(e)

    status = "degraded" if db_status == "disconnected" else "healthy"

    return {
        "status": status,
        "service": "coffee-journal-api",
        "version": settings.API_VERSION,
        "database": {
            "status": db_status,
            "latency_ms": db_latency_ms,
            "error": db_error,
            "connection_timeout_s": CONNECTION_TIMEOUT,
        },
        "supabase": {
            "status": "configured" if settings.SUPABASE_URL else "not_configured",
        },
        "total_latency_ms": round((time.time() - start_time) * 1000, 2),
    }

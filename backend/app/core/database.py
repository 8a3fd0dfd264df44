"""
Conexión a la base de datos (Supabase)

Este módulo centraliza las formas de acceso al record store:
- Supabase client (todas las lecturas y escrituras del catálogo)
- psycopg2 directo (solo para el health check, si DATABASE_URL está configurado)

El cliente de Supabase se crea de forma perezosa y se entrega como dependencia
de FastAPI, así los tests pueden reemplazarlo por un store en memoria.

Author: TM3
Updated: 2025-11-02
"""
import logging
import time
from typing import Optional

import psycopg2
from supabase import Client, create_client

from .config import Settings, get_settings
from .errors import StoreError

logger = logging.getLogger(__name__)

# Seconds psycopg2 waits for the server before giving up
CONNECTION_TIMEOUT = 10

_client: Optional[Client] = None


# ============================================================================
# Supabase Client
# ============================================================================

def create_supabase_client(settings: Settings) -> Client:
    """
    Build a Supabase client from settings

    Raises:
        StoreError if SUPABASE_URL or a key is not configured
    """
    if not settings.SUPABASE_URL or not settings.supabase_key:
        raise StoreError("record store not configured")

    return create_client(settings.SUPABASE_URL, settings.supabase_key)


def get_supabase() -> Client:
    """
    FastAPI dependency para obtener cliente de Supabase

    Usage:
        @router.get("/data")
        def get_data(sb: Client = Depends(get_supabase)):
            ...
    """
    global _client
    if _client is None:
        _client = create_supabase_client(get_settings())
        logger.info("Supabase client created")
    return _client


# ============================================================================
# Database Connection with Retry Logic (SSL Failure Recovery)
# ============================================================================

def get_db_connection_with_retry(max_retries=3, retry_delay=1.0, database_url=None):
    """
    Get a psycopg2 connection with automatic retry on SSL/connection failures

    Handles intermittent Supabase pooler issues by retrying with
    exponential backoff between attempts.

    Args:
        max_retries: Maximum number of connection attempts (default: 3)
        retry_delay: Initial delay between retries in seconds (default: 1.0)
        database_url: Override for settings.DATABASE_URL

    Returns:
        psycopg2 connection object

    Raises:
        RuntimeError: If DATABASE_URL is not configured
        psycopg2.OperationalError: If all retry attempts fail
    """
    database_url = database_url or get_settings().DATABASE_URL
    if not database_url:
        raise RuntimeError("DATABASE_URL not configured")

    last_error = None

    for attempt in range(1, max_retries + 1):
        try:
            logger.debug(f"Database connection attempt {attempt}/{max_retries}")
            conn = psycopg2.connect(database_url, connect_timeout=CONNECTION_TIMEOUT)
            logger.debug(f"Database connection successful on attempt {attempt}")
            return conn

        except psycopg2.OperationalError as e:
            last_error = e
            error_msg = str(e)

            if "SSL connection has been closed unexpectedly" in error_msg:
                logger.warning(f"SSL connection error on attempt {attempt}/{max_retries}: {error_msg}")
            else:
                logger.warning(f"Connection error on attempt {attempt}/{max_retries}: {error_msg}")

            # Don't retry on last attempt
            if attempt < max_retries:
                delay = retry_delay * (2 ** (attempt - 1))
                logger.info(f"Retrying in {delay:.2f} seconds...")
                time.sleep(delay)
            else:
                logger.error(f"All {max_retries} connection attempts failed")

    raise last_error

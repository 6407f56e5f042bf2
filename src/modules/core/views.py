import time
from typing import Any, Dict

import structlog
from django.conf import settings
from django.db import DatabaseError, connections
from django.http import HttpRequest, JsonResponse
from django.utils import timezone

logger = structlog.get_logger(__name__)

SERVICE_NAME = "catalog-api"


def index(request: HttpRequest) -> JsonResponse:
    return JsonResponse("API is working fine", safe=False)


def _database_status() -> Dict[str, Any]:
    """Round-trip ``SELECT 1`` on the default database."""
    start = time.monotonic()
    conn = connections["default"]
    conn.ensure_connection()
    with conn.cursor() as cursor:
        cursor.execute("SELECT 1")
        cursor.fetchone()
    return {
        "status": "up",
        "response_time_ms": round((time.monotonic() - start) * 1000, 2),
    }


def health_check(request: HttpRequest) -> JsonResponse:
    """Report whether the catalog can reach its database (200 or 503)."""
    try:
        database = _database_status()
    except (DatabaseError, ConnectionError, OSError):
        logger.exception("health_check.database_unreachable")
        database = {"status": "down"}

    healthy = database["status"] == "up"
    logger.info("health_check.completed", healthy=healthy)

    return JsonResponse(
        {
            "status": "healthy" if healthy else "unhealthy",
            "service": SERVICE_NAME,
            "version": settings.SPECTACULAR_SETTINGS["VERSION"],
            "timestamp": timezone.now().isoformat(),
            "services": {"database": database},
        },
        status=200 if healthy else 503,
    )

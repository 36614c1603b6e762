"""
Health check view used by load balancers and uptime monitoring.
"""

import logging

from django.conf import settings
from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.views.decorators.cache import never_cache
from django.views.decorators.http import require_GET

logger = logging.getLogger(__name__)


@never_cache
@require_GET
def health_check(request) -> JsonResponse:
    """
    Report whether the application and its database are reachable.

    Returns 200 when the database answers a trivial query, 503 otherwise.

    Returns:
        JsonResponse: {"status": "ok", "version": "1.0.0", "database": "ok"}
    """
    health_status = {
        "status": "ok",
        "version": getattr(settings, "VERSION", "1.0.0"),
        "database": "ok",
    }
    status_code = 200

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
    except DatabaseError as e:
        logger.error(f"Database health check failed: {e}")
        health_status["status"] = "unhealthy"
        health_status["database"] = f"Database connection failed: {str(e)}"
        status_code = 503

    return JsonResponse(health_status, status=status_code)

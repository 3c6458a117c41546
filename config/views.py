from django.conf import settings
from django.db import connection, DatabaseError
from django.http import JsonResponse


def health_check(request):
    """Liveness probe; also reports whether the AI model is configured."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
        database = 'ok'
    except DatabaseError:
        database = 'unavailable'

    return JsonResponse({
        'status': 'ok' if database == 'ok' else 'degraded',
        'database': database,
        'ai_configured': bool(settings.GEMINI_API_KEY),
    }, status=200 if database == 'ok' else 503)


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'error': 'Not found',
        'status': 404
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'error': 'Internal server error',
        'status': 500
    }, status=500)

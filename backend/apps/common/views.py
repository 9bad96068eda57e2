from django.http import JsonResponse
import time

from .logger import get_logger
from .store import get_store

logger = get_logger(__name__).bind(component='common', layer='health')


def _store_check():
    started = time.time()
    try:
        stats = get_store().stats()
        latency = round((time.time() - started) * 1000, 2)
        logger.debug('Store health check succeeded', latency_ms=latency)
        return {'status': 'ok', 'latency_ms': latency, **stats}
    except Exception as e:  # report any failure as a degraded dependency
        logger.error('Store health check failed', error=str(e), exception=e.__class__.__name__)
        return {'status': 'fail', 'error': str(e), 'exception': e.__class__.__name__}


def live_health(request):
    """Liveness probe: process is up and can service requests."""
    logger.debug('Liveness probe served')
    return JsonResponse({'status': 'alive'})


def ready_health(request):
    """Readiness probe: verifies the in-memory store is reachable and seeded."""
    checks = {'store': _store_check()}
    failing = [name for name, r in checks.items() if r.get('status') == 'fail']
    overall_status = 'ok' if not failing else 'degraded'
    http_status = 200 if not failing else 503
    payload = {
        'status': overall_status,
        'checks': checks,
    }
    logger.info('Readiness probe evaluated', status=overall_status, failing_components=failing)
    return JsonResponse(payload, status=http_status)

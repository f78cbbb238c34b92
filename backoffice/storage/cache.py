"""Redis-backed response cache invalidation."""
import redis

from backoffice.config import settings
from backoffice.app_logging import get_logger

logger = get_logger(__name__)

COMPETITIONS_LIST_KEY = "competitions:list"

# Create Redis connection (connects lazily on first command)
redis_conn = redis.from_url(settings.REDIS_URL)


def competition_key(competition_id: str) -> str:
    return f"competition:{competition_id}"


def invalidate_cache(key: str) -> bool:
    """Drop a cached entry. Returns False when redis could not be reached.

    A stale cache entry is not worth failing the admin action that changed
    the underlying row, so connection errors are logged and reported only.
    """
    try:
        redis_conn.delete(key)
        logger.debug(f"Invalidated cache key {key}")
        return True
    except redis.RedisError as e:
        logger.warning(f"Could not invalidate cache key {key}: {e}")
        return False


def invalidate_competition(competition_id: str) -> None:
    """Invalidate the detail entry of a competition and the public list."""
    invalidate_cache(competition_key(competition_id))
    invalidate_cache(COMPETITIONS_LIST_KEY)

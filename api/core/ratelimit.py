"""Rate limiting configuration using slowapi.

SCALABILITY NOTES:
- Multi-replica deployments should set RATELIMIT_STORAGE_URI="redis://host:port/db"
- memory:// storage keeps separate counters per worker
"""

from fastapi import Request, Response
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.responses import JSONResponse

from core.config import get_settings
from core.logger import get_logger

logger = get_logger(__name__)

settings = get_settings()

_using_redis = settings.ratelimit_storage_uri.startswith("redis://")

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[settings.api_rate_limit],
    storage_uri=settings.ratelimit_storage_uri,
    # Fall back to memory while Redis is unreachable
    in_memory_fallback_enabled=_using_redis,
    key_prefix="autogestion:",
)


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> Response:
    """Custom handler for rate limit exceeded errors."""
    logger.warning(
        "ratelimit.exceeded",
        client=get_remote_address(request),
        path=request.url.path,
        limit=exc.detail,
    )
    return JSONResponse(
        status_code=429,
        content={
            "detail": "Rate limit exceeded. Please slow down.",
            "retry_after": exc.detail,
        },
        headers={"Retry-After": str(getattr(exc, "retry_after", 60))},
    )


API_LIMIT = settings.api_rate_limit

WRITE_LIMIT = "60/minute"

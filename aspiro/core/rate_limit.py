"""
Per-caller request limits (slowapi).

Callers are keyed by user id once get_current_user has run, otherwise by
client address. Limits live in process memory unless RATE_LIMIT_STORAGE_URI
points at a shared store.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address
from starlette.requests import Request

from aspiro.core.config import settings

# Route decorator values: @limiter.limit(RATE_AUTH)
RATE_AUTH = "5/minute"  # register, login
RATE_AI = "10/minute"  # resume optimisation, chat: each call may hit a paid provider


def caller_key(request: Request) -> str:
    user = getattr(request.state, "current_user", None)
    if user is not None:
        return f"user:{user.id}"
    return f"ip:{get_remote_address(request)}"


limiter = Limiter(
    key_func=caller_key,
    storage_uri=settings.rate_limit_storage_uri,
    strategy="fixed-window",
    enabled=settings.rate_limit_enabled,
)

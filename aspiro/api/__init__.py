"""
API package.
"""
from aspiro.api.routes import api_router
from aspiro.api.deps import get_current_user, get_optional_user

__all__ = [
    "api_router",
    "get_current_user",
    "get_optional_user",
]

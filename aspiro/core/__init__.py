"""
Cross-cutting infrastructure: settings, the database session, bearer tokens,
the error taxonomy, logging, CORS, rate limiting and text completion.

Import from the submodules; only the names most call sites need are
re-exported here.
"""
from aspiro.core.config import settings
from aspiro.core.database import Base, async_session_maker, get_db
from aspiro.core.exceptions import APIException
from aspiro.core.security import issue_token_pair, read_subject

__all__ = [
    "settings",
    "Base",
    "async_session_maker",
    "get_db",
    "APIException",
    "issue_token_pair",
    "read_subject",
]

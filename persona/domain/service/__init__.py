"""Domain services."""

from .account_service import AccountService
from .audit_service import AuditService
from .base import Service
from .identity_service import IdentityService
from .jwt_service import JWTService
from .public_search_service import PublicSearchService, SearchResult

__all__ = [
    "AccountService",
    "AuditService",
    "IdentityService",
    "JWTService",
    "PublicSearchService",
    "SearchResult",
    "Service",
]

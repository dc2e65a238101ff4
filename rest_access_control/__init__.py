"""
REST Access Control

Role-based access resolution for REST-style APIs.

Concrete request paths are mapped onto canonical resource templates, and the
HTTP method onto a create/read/update/delete intent. A role is allowed when
its permission table entry for the template grants that intent.

Usage:

    >>> from rest_access_control import AccessResolver
    >>> resolver = AccessResolver(
    ...     {"admin": {"/course": "crud", "/course/{course_id}/unit": "cr", "/unit": "rud"}}
    ... )
    >>> resolver.decide("admin", "POST", "/api/v1/course")
    True
    >>> resolver.decide("admin", "DELETE", "/api/v1/course/20/unit")
    False
    >>> resolver.evaluate("teacher", "GET", "/api/v1/unit/7").reason
    'unknown_role'

Loading from configuration:

    from rest_access_control import AccessResolver, ResolverConfig

    # REST_ACCESS_PERMISSIONS_FILE=permissions.yaml
    resolver = AccessResolver.from_config(ResolverConfig.from_env())
"""

from .access import (
    DEFAULT_BASE_PATH,
    AccessDecision,
    AccessIntent,
    AccessResolver,
    PermissionTable,
    canonicalize,
    classify,
    format_intents,
    parse_intents,
)
from .config import ResolverConfig
from .exceptions import AccessControlError, PermissionTableError, UnsupportedMethodError
from .logging_utils import StructuredJsonFormatter, configure_structured_logging

__all__ = [
    # Core
    "AccessDecision",
    "AccessIntent",
    "AccessResolver",
    "PermissionTable",
    "DEFAULT_BASE_PATH",
    "canonicalize",
    "classify",
    "format_intents",
    "parse_intents",
    # Configuration
    "ResolverConfig",
    # Exceptions
    "AccessControlError",
    "PermissionTableError",
    "UnsupportedMethodError",
    # Logging
    "StructuredJsonFormatter",
    "configure_structured_logging",
]

__version__ = "0.1.0"

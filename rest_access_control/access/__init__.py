"""Access resolution: method classification, path canonicalization, decisions."""

from .canonical import DEFAULT_BASE_PATH, canonicalize
from .intents import AccessIntent, classify, format_intents, parse_intents
from .resolver import AccessDecision, AccessResolver
from .table import PermissionTable

__all__ = [
    "DEFAULT_BASE_PATH",
    "AccessDecision",
    "AccessIntent",
    "AccessResolver",
    "PermissionTable",
    "canonicalize",
    "classify",
    "format_intents",
    "parse_intents",
]

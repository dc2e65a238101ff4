"""Access resolution: may this role perform this method on this path?"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .canonical import DEFAULT_BASE_PATH, canonicalize
from .intents import AccessIntent, classify
from .table import PermissionTable

if TYPE_CHECKING:
    from ..config import ResolverConfig

logger = logging.getLogger(__name__)

REASON_ALLOWED = "allowed"
REASON_EMPTY_TABLE = "empty_table"
REASON_UNKNOWN_ROLE = "unknown_role"
REASON_UNKNOWN_TEMPLATE = "unknown_template"
REASON_INTENT_NOT_GRANTED = "intent_not_granted"


@dataclass(frozen=True)
class AccessDecision:
    """Result of an access check."""

    allowed: bool
    reason: str
    role: str
    template: str
    intent: AccessIntent

    def __bool__(self) -> bool:
        return self.allowed


class AccessResolver:
    """Decides role access to REST paths from an immutable permission table.

    The table is injected at construction and never changes afterwards, so
    one resolver can serve concurrent requests without locking.
    """

    def __init__(
        self,
        table: PermissionTable | Mapping[str, Mapping[str, str]],
        base_path_prefix: str = DEFAULT_BASE_PATH,
    ):
        """
        Initialize the resolver.

        Args:
            table: Permission table, or a raw role -> template -> codes mapping
            base_path_prefix: Prefix stripped from every path before lookup
        """
        if not isinstance(table, PermissionTable):
            table = PermissionTable.from_mapping(table)
        self._table = table
        self._base_path_prefix = base_path_prefix

    @classmethod
    def from_config(cls, config: ResolverConfig) -> AccessResolver:
        """Build a resolver from configuration, loading the YAML table if set."""
        if config.permissions_path is None:
            logger.warning("No permissions file configured, all requests will be denied")
            table = PermissionTable()
        else:
            table = PermissionTable.from_yaml(config.permissions_path)
        return cls(table, base_path_prefix=config.base_path_prefix)

    @property
    def table(self) -> PermissionTable:
        return self._table

    @property
    def base_path_prefix(self) -> str:
        return self._base_path_prefix

    def canonicalize(self, path: str) -> str:
        return canonicalize(path, self._base_path_prefix)

    def evaluate(self, role: str, method: str, path: str) -> AccessDecision:
        """Check access and explain the outcome.

        Args:
            role: Role of the already-authenticated subject
            method: Upper-case HTTP method
            path: Request path

        Returns:
            AccessDecision with the evaluated template, intent and reason

        Raises:
            UnsupportedMethodError: If the method maps to no access intent.
        """
        intent = classify(method)
        template = canonicalize(path, self._base_path_prefix)

        allowed = self._table.lookup(role, template)
        if allowed is None:
            if self._table.is_empty():
                reason = REASON_EMPTY_TABLE
            elif role not in self._table:
                reason = REASON_UNKNOWN_ROLE
            else:
                reason = REASON_UNKNOWN_TEMPLATE
        elif intent in allowed:
            reason = REASON_ALLOWED
        else:
            reason = REASON_INTENT_NOT_GRANTED

        decision = AccessDecision(
            allowed=reason == REASON_ALLOWED,
            reason=reason,
            role=role,
            template=template,
            intent=intent,
        )
        logger.debug(
            "Access %s",
            "granted" if decision.allowed else "denied",
            extra={
                "role": role,
                "method": method,
                "path": path,
                "template": template,
                "intent": intent.name,
                "reason": reason,
            },
        )
        return decision

    def decide(self, role: str, method: str, path: str) -> bool:
        """Return True if role may perform method on path.

        Raises:
            UnsupportedMethodError: If the method maps to no access intent.
        """
        return self.evaluate(role, method, path).allowed

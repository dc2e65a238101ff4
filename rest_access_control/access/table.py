"""Immutable permission table: role -> canonical template -> intents."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from ..exceptions import PermissionTableError
from .intents import AccessIntent, format_intents, parse_intents

logger = logging.getLogger(__name__)

PERMISSIONS_SECTION = "permissions"


class PermissionTable:
    """Read-only permission table built once at startup.

    The source mapping is copied on construction, so later changes to it are
    never observed. Lookups need no locking.

    Configuration shape (YAML)::

        permissions:
          admin:
            /course: crud
            /course/{course_id}/unit: cr
            /unit: rud
    """

    __slots__ = ("_roles",)

    def __init__(self, roles: Mapping[str, Mapping[str, frozenset[AccessIntent]]] | None = None):
        frozen = {
            role: MappingProxyType(
                {template: frozenset(intents) for template, intents in templates.items()}
            )
            for role, templates in (roles or {}).items()
        }
        self._roles: Mapping[str, Mapping[str, frozenset[AccessIntent]]] = MappingProxyType(frozen)

    @classmethod
    def from_mapping(
        cls, data: Mapping[str, Mapping[str, str]] | None, source: str | None = None
    ) -> PermissionTable:
        """Build a table from role -> template -> code string.

        Args:
            data: Raw permission configuration, e.g. {"admin": {"/course": "crud"}}
            source: Where the data came from, used in error messages

        Raises:
            PermissionTableError: If the data has the wrong shape or an
                unknown intent code.
        """
        if data is None:
            return cls()
        if not isinstance(data, Mapping):
            raise PermissionTableError("expected a mapping of roles", source=source)

        roles: dict[str, dict[str, frozenset[AccessIntent]]] = {}
        for role, templates in data.items():
            if not isinstance(role, str):
                raise PermissionTableError(f"role must be a string, got {role!r}", source=source)
            if templates is None:
                templates = {}
            if not isinstance(templates, Mapping):
                raise PermissionTableError(
                    "expected a mapping of templates", role=role, source=source
                )

            entries: dict[str, frozenset[AccessIntent]] = {}
            for template, codes in templates.items():
                if not isinstance(template, str):
                    raise PermissionTableError(
                        f"template must be a string, got {template!r}", role=role, source=source
                    )
                if not isinstance(codes, str):
                    raise PermissionTableError(
                        f"intent codes must be a string, got {codes!r}",
                        role=role,
                        template=template,
                        source=source,
                    )
                try:
                    entries[template] = parse_intents(codes)
                except ValueError as e:
                    raise PermissionTableError(
                        str(e), role=role, template=template, source=source
                    ) from None
            roles[role] = entries

        return cls(roles)

    @classmethod
    def from_yaml(cls, path: str | Path) -> PermissionTable:
        """Load a table from the `permissions` section of a YAML file.

        A file without a `permissions` section gives an empty table, which
        denies everything.
        """
        path = Path(path)
        source = str(path)
        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise PermissionTableError(f"cannot read file: {e}", source=source) from e

        try:
            config: Any = yaml.safe_load(content) or {}
        except yaml.YAMLError as e:
            raise PermissionTableError(f"invalid YAML: {e}", source=source) from e

        if not isinstance(config, Mapping):
            raise PermissionTableError("top level must be a mapping", source=source)

        if PERMISSIONS_SECTION not in config:
            logger.warning(
                "No permissions section found, all requests will be denied",
                extra={"source": source},
            )

        table = cls.from_mapping(config.get(PERMISSIONS_SECTION), source=source)
        logger.info(
            "Loaded permission table",
            extra={"source": source, "roles": len(table), "templates": table.template_count()},
        )
        return table

    def lookup(self, role: str, template: str) -> frozenset[AccessIntent] | None:
        """Return the intents granted to role on template, or None if unmapped."""
        templates = self._roles.get(role)
        if templates is None:
            return None
        return templates.get(template)

    def template_count(self) -> int:
        return sum(len(templates) for templates in self._roles.values())

    def is_empty(self) -> bool:
        return not self._roles

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Serialize back to role -> template -> code string."""
        return {
            role: {template: format_intents(intents) for template, intents in templates.items()}
            for role, templates in self._roles.items()
        }

    def __contains__(self, role: object) -> bool:
        return role in self._roles

    def __iter__(self) -> Iterator[str]:
        return iter(self._roles)

    def __len__(self) -> int:
        return len(self._roles)

    def __repr__(self) -> str:
        return f"PermissionTable(roles={sorted(self._roles)!r})"

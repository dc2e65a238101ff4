"""Resolver configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from .access.canonical import DEFAULT_BASE_PATH


@dataclass(frozen=True)
class ResolverConfig:
    """Configuration for building an AccessResolver."""

    base_path_prefix: str = DEFAULT_BASE_PATH
    permissions_path: Path | None = None  # None gives an empty, deny-all table
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> ResolverConfig:
        """Create config from environment variables."""
        permissions_file = os.environ.get("REST_ACCESS_PERMISSIONS_FILE")

        return cls(
            base_path_prefix=os.environ.get("REST_ACCESS_BASE_PATH", DEFAULT_BASE_PATH),
            permissions_path=Path(permissions_file).expanduser() if permissions_file else None,
            log_level=os.environ.get("REST_ACCESS_LOG_LEVEL", "INFO").upper(),
        )

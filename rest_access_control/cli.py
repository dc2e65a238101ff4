"""
Command line access checks against a permission table.

Usage:
    # Check a request (exit code 0 = allowed, 1 = denied, 2 = error):
    rest-access-check --permissions permissions.yaml check admin GET /api/v1/unit/7

    # Show the canonical template for a path:
    rest-access-check canonicalize /api/v1/course/20/unit

    # Print the loaded permission table, normalized to c, r, u, d order:
    rest-access-check --permissions permissions.yaml dump

Options not given on the command line fall back to the REST_ACCESS_*
environment variables.
"""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path

import yaml

from .access.canonical import canonicalize
from .access.resolver import AccessResolver
from .access.table import PERMISSIONS_SECTION
from .config import ResolverConfig
from .exceptions import AccessControlError
from .logging_utils import configure_structured_logging

EXIT_ALLOWED = 0
EXIT_DENIED = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rest-access-check",
        description="REST Access Control - check role access to API paths",
    )
    parser.add_argument(
        "--permissions",
        type=Path,
        help="YAML permission table (default: $REST_ACCESS_PERMISSIONS_FILE)",
    )
    parser.add_argument(
        "--base-path",
        help="Base path prefix stripped before canonicalizing (default: /api/v1/)",
    )
    parser.add_argument(
        "--log-level",
        help="Log level for structured logs on stderr (default: $REST_ACCESS_LOG_LEVEL)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    check = subparsers.add_parser("check", help="Decide whether a role may make a request")
    check.add_argument("role", help="Role of the authenticated subject")
    check.add_argument("method", help="HTTP method, upper-case")
    check.add_argument("path", help="Request path")
    check.add_argument("--json", action="store_true", help="Print the decision as JSON")

    canon = subparsers.add_parser("canonicalize", help="Print the canonical template of a path")
    canon.add_argument("path", help="Request path")

    subparsers.add_parser("dump", help="Print the loaded permission table as YAML")

    return parser


def _config_from_args(args: argparse.Namespace) -> ResolverConfig:
    config = ResolverConfig.from_env()
    if args.permissions is not None:
        config = replace(config, permissions_path=args.permissions)
    if args.base_path is not None:
        config = replace(config, base_path_prefix=args.base_path)
    if args.log_level is not None:
        config = replace(config, log_level=args.log_level.upper())
    return config


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)
    config = _config_from_args(args)

    if args.command == "canonicalize":
        print(canonicalize(args.path, config.base_path_prefix))
        return EXIT_ALLOWED

    try:
        configure_structured_logging(config.log_level, stream=sys.stderr)
    except ValueError as e:
        print(f"Error: invalid log level: {e}", file=sys.stderr)
        return EXIT_ERROR

    try:
        resolver = AccessResolver.from_config(config)
        if args.command == "dump":
            print(
                yaml.safe_dump(
                    {PERMISSIONS_SECTION: resolver.table.to_dict()},
                    default_flow_style=False,
                    sort_keys=False,
                ),
                end="",
            )
            return EXIT_ALLOWED
        decision = resolver.evaluate(args.role, args.method, args.path)
    except AccessControlError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if args.json:
        print(
            json.dumps(
                {
                    "allowed": decision.allowed,
                    "reason": decision.reason,
                    "role": decision.role,
                    "template": decision.template,
                    "intent": decision.intent.name,
                }
            )
        )
    else:
        outcome = "ALLOWED" if decision.allowed else "DENIED"
        print(
            f"{outcome} {decision.role} {decision.intent.name} "
            f"{decision.template} ({decision.reason})"
        )

    return EXIT_ALLOWED if decision.allowed else EXIT_DENIED


if __name__ == "__main__":
    sys.exit(main())

"""
Shared test configuration and fixtures.
"""

import logging

import pytest

from rest_access_control import AccessResolver, PermissionTable

COURSE_PERMISSIONS = {
    "admin": {
        "/course": "crud",
        "/course/{course_id}/unit": "cr",
        "/unit": "rud",
    },
}

PERMISSIONS_YAML = """\
permissions:
  admin:
    /course: crud
    /course/{course_id}/unit: cr
    /unit: rud
  teacher:
    /course: r
    /unit: ru
"""


@pytest.fixture
def course_table() -> PermissionTable:
    return PermissionTable.from_mapping(COURSE_PERMISSIONS)


@pytest.fixture
def resolver(course_table: PermissionTable) -> AccessResolver:
    return AccessResolver(course_table, base_path_prefix="/api/v1/")


@pytest.fixture
def permissions_file(tmp_path):
    path = tmp_path / "permissions.yaml"
    path.write_text(PERMISSIONS_YAML)
    return path


@pytest.fixture(autouse=True)
def _clear_access_env(monkeypatch):
    """Keep REST_ACCESS_* variables from the outer environment out of tests."""
    for name in (
        "REST_ACCESS_BASE_PATH",
        "REST_ACCESS_PERMISSIONS_FILE",
        "REST_ACCESS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def course_permissions() -> dict:
    return {role: dict(templates) for role, templates in COURSE_PERMISSIONS.items()}


@pytest.fixture(autouse=True)
def _reset_package_logger():
    """Drop handlers installed by configure_structured_logging during a test."""
    logger = logging.getLogger("rest_access_control")
    yield
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)

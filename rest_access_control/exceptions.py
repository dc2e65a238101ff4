"""
Custom exceptions for access control resolution.

An access denial is never an exception: it is a normal negative decision.
These exceptions signal caller or configuration mistakes, and callers
should treat them as at least as strict as a denial.
"""


class AccessControlError(Exception):
    """Base exception for all access control errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class UnsupportedMethodError(AccessControlError):
    """Raised when an HTTP method has no corresponding access intent."""

    def __init__(self, method: str):
        super().__init__(f"Unsupported HTTP method: {method!r}", {"method": method})
        self.method = method


class PermissionTableError(AccessControlError):
    """Raised when a permission table cannot be built or loaded."""

    def __init__(
        self,
        reason: str,
        role: str | None = None,
        template: str | None = None,
        source: str | None = None,
    ):
        details: dict = {"reason": reason}
        if role is not None:
            details["role"] = role
        if template is not None:
            details["template"] = template
        if source is not None:
            details["source"] = source

        message = f"Invalid permission table: {reason}"
        if source is not None:
            message += f" ({source})"
        super().__init__(message, details)
        self.reason = reason
        self.role = role
        self.template = template
        self.source = source

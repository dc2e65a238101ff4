"""
Path canonicalization.

Maps concrete REST paths onto the resource templates that permission
tables are keyed by. Segments alternate between resource-class names (odd
positions) and instance identifiers (even positions):

    /api/v1/course/20/unit    -> /course/{course_id}/unit
    /api/v1/unit/7            -> /unit
    /api/v1/course/10/unit/5  -> /course/{course_id}/unit

A template with an even number of segments ends in an instance placeholder,
which is dropped: operations on one instance are authorized at the level of
its resource class.
"""

from __future__ import annotations

DEFAULT_BASE_PATH = "/api/v1/"


def strip_base_path(path: str, base_path_prefix: str = DEFAULT_BASE_PATH) -> str:
    """Replace the first occurrence of the base path prefix with "/".

    A path without the prefix is returned unchanged.
    """
    if not base_path_prefix:
        return path
    return path.replace(base_path_prefix, "/", 1)


def split_segments(path: str) -> list[str]:
    """Split a path into its non-empty segments, ignoring query and fragment."""
    for marker in ("?", "#"):
        path = path.split(marker, 1)[0]
    return [segment for segment in path.split("/") if segment]


def placeholder(resource_name: str) -> str:
    """Build the instance placeholder for a resource-class name."""
    return f"{{{resource_name.lower()}_id}}"


def canonicalize(path: str, base_path_prefix: str = DEFAULT_BASE_PATH) -> str:
    """Convert a concrete request path into its canonical resource template.

    Args:
        path: Request path, e.g. "/api/v1/course/20/unit"
        base_path_prefix: Prefix removed before canonicalizing

    Returns:
        Canonical template, e.g. "/course/{course_id}/unit". A path with no
        segments canonicalizes to "/".
    """
    segments = split_segments(strip_base_path(path, base_path_prefix))

    output: list[str] = []
    pending: str | None = None
    for position, segment in enumerate(segments, start=1):
        if position % 2:
            if pending is None:
                pending = segment
            output.append(segment)
        else:
            # Positional only: the segment value is never inspected
            output.append(placeholder(pending or ""))
            pending = None

    if len(output) % 2 == 0:
        output = output[:-1]

    return "/" + "/".join(output)

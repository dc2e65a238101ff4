"""Access intents and HTTP method classification."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from ..exceptions import UnsupportedMethodError


class AccessIntent(Enum):
    """Operation implied by an HTTP method.

    Each value is the single-character code used in permission tables.
    """

    CREATE = "c"
    READ = "r"
    UPDATE = "u"
    DELETE = "d"


METHOD_INTENTS: dict[str, AccessIntent] = {
    "POST": AccessIntent.CREATE,
    "GET": AccessIntent.READ,
    "PUT": AccessIntent.UPDATE,
    "PATCH": AccessIntent.UPDATE,
    "DELETE": AccessIntent.DELETE,
}

_CODE_ORDER = "crud"


def classify(method: str) -> AccessIntent:
    """Map an upper-case HTTP verb to its access intent.

    Raises UnsupportedMethodError for any other verb, including lower-case
    spellings of supported ones.
    """
    try:
        return METHOD_INTENTS[method]
    except (KeyError, TypeError):
        raise UnsupportedMethodError(method) from None


def parse_intents(codes: str) -> frozenset[AccessIntent]:
    """Parse a permission code string such as "crud" or "rr" into intents.

    Order and duplicates do not matter. Raises ValueError on a character
    outside c, r, u, d.
    """
    intents = set()
    for code in codes:
        try:
            intents.add(AccessIntent(code))
        except ValueError:
            raise ValueError(f"Unknown access intent code: {code!r}") from None
    return frozenset(intents)


def format_intents(intents: Iterable[AccessIntent]) -> str:
    """Render intents as a code string in c, r, u, d order."""
    present = {intent.value for intent in intents}
    return "".join(code for code in _CODE_ORDER if code in present)

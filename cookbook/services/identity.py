"""
Requester identity helpers.

Every operation receives the requester explicitly. Ids may arrive as
strings from query parameters; they are normalized here once.
"""

from cookbook.exceptions import CookbookError


def coerce_id(value, code: str = "INVALID_INPUT", field: str = "id") -> int:
    """Return ``value`` as a positive int or raise CookbookError(code)."""
    if isinstance(value, bool):
        raise CookbookError(code, field=field)
    try:
        result = int(value)
    except (TypeError, ValueError):
        raise CookbookError(code, field=field)
    if result <= 0:
        raise CookbookError(code, field=field)
    return result


def require_requester(requester_id) -> int:
    if requester_id is None or requester_id == "":
        raise CookbookError("MISSING_REQUESTER")
    return coerce_id(requester_id, field="user_id")


def optional_requester(requester_id) -> int | None:
    if requester_id is None or requester_id == "":
        return None
    return coerce_id(requester_id, field="user_id")

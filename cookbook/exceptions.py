"""
Cookbook Exceptions.

All cookbook errors are wrapped in CookbookError for consistent handling.
"""

from typing import Any


# Default human-readable messages. Authentication and recipe ownership
# failures stay generic so callers cannot probe for other users' data.
MESSAGES = {
    "INVALID_INPUT": "Invalid input",
    "MISSING_REQUESTER": "User ID is required",
    "UNAUTHORIZED": "Invalid credentials",
    "NOT_FOUND_OR_FORBIDDEN": "Recipe not found",
    "NOT_FOUND": "Not found",
    "FORBIDDEN": "Not allowed",
    "CONFLICT": "Already exists",
    "IN_USE": "Category is in use",
}


class CookbookError(Exception):
    """
    Base exception for all Cookbook errors.

    Usage:
        raise CookbookError('IN_USE', count=3, message='Category in use by 3 recipes')

    Attributes:
        code: Error code (INVALID_INPUT, CONFLICT, IN_USE, etc.)
        details: Additional context as keyword arguments
    """

    def __init__(self, code: str, message: str | None = None, **details: Any):
        self.code = code
        self.message = message or MESSAGES.get(code, code)
        self.details = details
        super().__init__(self.message)

    def as_dict(self) -> dict:
        """Return error as dictionary for API responses."""
        return {"error": self.message, "code": self.code, **self.details}

    def __str__(self) -> str:
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"CookbookError({self.code}: {details_str})"
        return f"CookbookError({self.code})"


# Error codes
# INVALID_INPUT: Missing/empty required field, bad category reference, bad image
# MISSING_REQUESTER: Operation needs a requester id and none was given
# UNAUTHORIZED: Unknown username or wrong password
# NOT_FOUND_OR_FORBIDDEN: Recipe (or account) absent or not owned by requester
# NOT_FOUND: Category absent or not visible to requester
# FORBIDDEN: Category is a default one, or owned by someone else
# CONFLICT: Duplicate username, or duplicate category name in scope
# IN_USE: Category still referenced by recipes (details: count)

"""
Tests for CookbookError and requester id handling.
"""

import pytest

from cookbook import CookbookError
from cookbook.services.identity import coerce_id, optional_requester, require_requester


class TestCookbookError:
    def test_default_message(self):
        error = CookbookError("NOT_FOUND_OR_FORBIDDEN")

        assert error.message == "Recipe not found"
        assert error.as_dict() == {
            "error": "Recipe not found",
            "code": "NOT_FOUND_OR_FORBIDDEN",
        }

    def test_details_in_dict(self):
        error = CookbookError("IN_USE", message="Category in use by 3 recipes", count=3)

        assert error.as_dict() == {
            "error": "Category in use by 3 recipes",
            "code": "IN_USE",
            "count": 3,
        }

    def test_str(self):
        assert str(CookbookError("CONFLICT")) == "CookbookError(CONFLICT)"
        assert str(CookbookError("IN_USE", count=2)) == "CookbookError(IN_USE: count=2)"

    def test_unknown_code_falls_back_to_code(self):
        assert CookbookError("WHATEVER").message == "WHATEVER"


class TestRequesterIds:
    @pytest.mark.parametrize("value,expected", [(5, 5), ("5", 5), (" 7 ", 7)])
    def test_coerce_valid(self, value, expected):
        assert coerce_id(value) == expected

    @pytest.mark.parametrize("value", [True, False, "abc", 0, -3, None, 1.5j])
    def test_coerce_invalid(self, value):
        with pytest.raises(CookbookError) as exc:
            coerce_id(value, "NOT_FOUND", field="recipe_id")

        assert exc.value.code == "NOT_FOUND"
        assert exc.value.details == {"field": "recipe_id"}

    @pytest.mark.parametrize("value", [None, ""])
    def test_require_missing(self, value):
        with pytest.raises(CookbookError) as exc:
            require_requester(value)
        assert exc.value.code == "MISSING_REQUESTER"

    def test_require_invalid(self):
        with pytest.raises(CookbookError) as exc:
            require_requester("alice")

        assert exc.value.code == "INVALID_INPUT"
        assert exc.value.details == {"field": "user_id"}

    def test_optional(self):
        assert optional_requester(None) is None
        assert optional_requester("") is None
        assert optional_requester("12") == 12

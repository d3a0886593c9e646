"""
Account service -- register, authenticate, delete account.

Password hashing is Django's business (PASSWORD_HASHERS); this module only
ever sees the raw password on the way in.
"""

import logging

from django.contrib.auth import authenticate, get_user_model
from django.db import IntegrityError, transaction

from cookbook.exceptions import CookbookError
from cookbook.results import AuthenticatedUser
from cookbook.services.identity import coerce_id, require_requester

logger = logging.getLogger(__name__)


class AccountOperations:
    """
    User account operations.

    All methods are @classmethod so the mixin can be composed into
    Cookbook without instantiation.
    """

    @classmethod
    def register(cls, username: str, email: str, password: str):
        """
        Create a user.

        Args:
            username: Unique login name
            email: Contact address
            password: Raw password, stored hashed

        Returns:
            The new user; its pk is the identity clients echo back

        Raises:
            CookbookError('INVALID_INPUT') if a field is empty
            CookbookError('CONFLICT') if the username is taken
        """
        username = (username or "").strip()
        email = (email or "").strip()
        if not username or not email or not password:
            raise CookbookError("INVALID_INPUT", message="All fields are required")

        User = get_user_model()
        if User._default_manager.filter(username=username).exists():
            raise CookbookError("CONFLICT", message="Username already exists")

        try:
            with transaction.atomic():
                user = User._default_manager.create_user(
                    username=username, email=email, password=password
                )
        except IntegrityError:
            raise CookbookError("CONFLICT", message="Username already exists")

        logger.info(f"Registered user {user.pk}", extra={"user_id": user.pk})

        return user

    @classmethod
    def authenticate(cls, username: str, password: str) -> AuthenticatedUser:
        """
        Check credentials.

        Unknown usernames and wrong passwords fail the same way.
        """
        if not username or not password:
            raise CookbookError(
                "INVALID_INPUT", message="Username and password are required"
            )

        user = authenticate(username=username, password=password)
        if user is None:
            logger.warning("Rejected login attempt")
            raise CookbookError("UNAUTHORIZED")

        return AuthenticatedUser(id=user.pk, username=user.get_username())

    @classmethod
    def delete_account(cls, user_id, requester_id) -> None:
        """
        Delete an account with its recipes and private categories.

        Only the account holder may do this.
        """
        requester_id = require_requester(requester_id)
        user_id = coerce_id(user_id, "NOT_FOUND_OR_FORBIDDEN")

        if user_id != requester_id:
            raise CookbookError("NOT_FOUND_OR_FORBIDDEN", message="User not found")

        User = get_user_model()
        deleted, _ = User._default_manager.filter(pk=user_id).delete()
        if not deleted:
            raise CookbookError("NOT_FOUND_OR_FORBIDDEN", message="User not found")

        logger.info(f"Deleted user {user_id}", extra={"user_id": user_id})

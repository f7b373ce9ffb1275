"""
Admin user lookup, authentication and creation.
"""
from typing import Optional
import logging

from pymongo.errors import PyMongoError

from impact_report.core.auth import hash_password, verify_password
from impact_report.core.errors import AuthError, StorageFailure
from impact_report.models.user import User, USERS_COLLECTION

logger = logging.getLogger(__name__)


class UserService:
    """Service for admin user operations."""

    @staticmethod
    async def get_by_email(store, email: str) -> Optional[User]:
        try:
            users = await store.get_collection(USERS_COLLECTION)
            doc = await users.find_one({"email": email})
        except PyMongoError as e:
            logger.error(f"Failed to look up user {email}: {e}", exc_info=True)
            raise StorageFailure() from e
        return User.model_validate(doc) if doc else None

    @staticmethod
    async def authenticate(store, email: str, password: str) -> User:
        """
        Verify credentials and return the user.

        Unknown email and wrong password raise the same AuthError.
        """
        user = await UserService.get_by_email(store, email)
        if user is None or not verify_password(password, user.password_hash):
            logger.warning(f"Failed login attempt for {email}")
            raise AuthError()
        return user

    @staticmethod
    async def create_admin_user(
        store,
        email: str,
        password: str,
        first_name: str = "Admin",
        last_name: str = "User",
    ) -> User:
        """Create an admin user. Raises ValueError if the email is taken."""
        if await UserService.get_by_email(store, email):
            raise ValueError(f"User with email {email} already exists")

        doc = {
            "email": email,
            "password": hash_password(password),
            "firstName": first_name,
            "lastName": last_name,
            "autopromote": True,
        }
        try:
            users = await store.get_collection(USERS_COLLECTION)
            await users.insert_one(doc)
        except PyMongoError as e:
            logger.error(f"Failed to create user {email}: {e}", exc_info=True)
            raise StorageFailure() from e

        logger.info(f"Created admin user {email}")
        return User.model_validate(doc)

"""User service - Business logic for user operations"""

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ...auth import Identity, require_auth
from ...errors import DuplicateEmail, NotFound
from ...models import User
from ...security_utils import hash_password
from ...shared.validators import is_valid_boat_license, validate_professional_profile
from .repository import UserRepository
from .schemas import REQUIRED_USER_COLUMNS, USER_FIELD_MAP, UserCreate, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    """Service layer for user business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = UserRepository()

    def find_all(self) -> list[User]:
        return self.repo.get_users(self.db)

    def find_by_id(self, user_id: str) -> Optional[User]:
        return self.repo.get_user_by_id(self.db, user_id)

    def find_by_email(self, email: str) -> Optional[User]:
        return self.repo.get_user_by_email(self.db, email)

    def find_including_deleted(self, user_id: str) -> Optional[User]:
        """Resolve historical references (e.g. the author of an old booking)"""
        return self.repo.get_user_by_id(self.db, user_id, include_deleted=True)

    def get_user(self, user_id: str) -> User:
        """Get a live user or raise NotFound"""
        user = self.find_by_id(user_id)
        if not user:
            raise NotFound("User")
        return user

    def create(self, data: UserCreate) -> User:
        """Create a new user with business rule validation"""
        validate_professional_profile(
            data.statut, data.societe, data.typeActivite, data.siret, data.rc
        )
        self._validate_unique_email(data.email)

        user_data = {column: getattr(data, field) for field, column in USER_FIELD_MAP.items()}
        user_data["password_hash"] = hash_password(data.password)

        try:
            user = self.repo.create_user(self.db, **user_data)
        except IntegrityError as e:
            # Email taken between the check and the insert
            self.db.rollback()
            logger.warning(f"⚠️ Email {data.email} was taken concurrently")
            raise DuplicateEmail() from e

        logger.info(f"✅ User created: {user.id} ({user.statut.value})")
        return user

    def update(self, identity: Optional[Identity], user_id: str, data: UserUpdate) -> User:
        """Update an existing user (authenticated user only)"""
        require_auth(identity, user_id)
        existing = self.get_user(user_id)

        provided = data.model_dump(exclude_unset=True)

        updates = {}
        for field, value in provided.items():
            column = USER_FIELD_MAP.get(field)
            if column is None:
                continue
            if value is None and column in REQUIRED_USER_COLUMNS:
                logger.debug(f"Ignoring null for required column {column}")
                continue
            updates[column] = value

        if "email" in updates and updates["email"] != existing.email:
            self._validate_unique_email(updates["email"])

        def merged(column: str):
            return updates[column] if column in updates else getattr(existing, column)

        validate_professional_profile(
            merged("statut"),
            merged("societe"),
            merged("type_activite"),
            merged("siret"),
            merged("rc"),
        )

        if provided.get("password") is not None:
            updates["password_hash"] = hash_password(provided["password"])

        try:
            user = self.repo.update_user(self.db, existing, **updates)
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateEmail() from e

        logger.info(f"✅ User {user_id} updated fields: {sorted(updates)}")
        return user

    def delete(self, user_id: str, identity: Optional[Identity] = None) -> bool:
        """GDPR soft delete with anonymization"""
        user = self.get_user(user_id)

        deleted_by = identity.subject_id if identity else "system"
        self.repo.anonymize_user(self.db, user, datetime.now(timezone.utc), deleted_by)

        logger.info(f"🗑️ User {user_id} deleted and anonymized by {deleted_by}")
        return True

    def has_valid_boat_license(self, user_id: str) -> bool:
        """Check if user has valid boat license"""
        user = self.find_by_id(user_id)
        if not user:
            return False
        return is_valid_boat_license(user.permis_bateau)

    def owns_boats(self, user_id: str) -> bool:
        """Check if user owns any live boats"""
        return self.repo.count_live_boats(self.db, user_id) > 0

    def _validate_unique_email(self, email: str) -> None:
        if self.repo.get_user_by_email(self.db, email):
            logger.warning(f"⚠️ Rejected duplicate email: {email}")
            raise DuplicateEmail()

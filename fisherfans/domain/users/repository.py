"""User repository - Database operations for users"""

from datetime import datetime
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ...models import Boat, User


class UserRepository:
    """Repository for user database operations"""

    @staticmethod
    def get_users(db: Session) -> list[User]:
        """Get all live users"""
        return db.query(User).filter(User.deleted_at.is_(None)).order_by(User.created_at).all()

    @staticmethod
    def get_user_by_id(db: Session, user_id: str, include_deleted: bool = False) -> Optional[User]:
        """Get a user by ID, live only unless include_deleted"""
        query = db.query(User).filter(User.id == user_id)
        if not include_deleted:
            query = query.filter(User.deleted_at.is_(None))
        return query.first()

    @staticmethod
    def get_user_by_email(db: Session, email: str) -> Optional[User]:
        """Get a live user by email"""
        return db.query(User).filter(User.email == email, User.deleted_at.is_(None)).first()

    @staticmethod
    def create_user(db: Session, **user_data) -> User:
        """Create a new user"""
        user = User(**user_data)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    @staticmethod
    def update_user(db: Session, user: User, **updates) -> User:
        """Write exactly the provided columns, None included"""
        for key, value in updates.items():
            if hasattr(user, key):
                setattr(user, key, value)

        db.commit()
        db.refresh(user)
        return user

    @staticmethod
    def anonymize_user(db: Session, user: User, deleted_at: datetime, deleted_by: str) -> User:
        """Soft delete a user and scrub personal data in place"""
        user.deleted_at = deleted_at
        user.deleted_by = deleted_by
        user.nom = "DELETED"
        user.prenom = "USER"
        user.email = f"deleted_{user.id}@anonymized.local"
        user.telephone = "0000000000"
        user.adresse = "ANONYMIZED"

        db.commit()
        db.refresh(user)
        return user

    @staticmethod
    def count_live_boats(db: Session, user_id: str) -> int:
        """Count live boats owned by a user"""
        return (
            db.query(func.count(Boat.id))
            .filter(Boat.user_id == user_id, Boat.deleted_at.is_(None))
            .scalar()
        )

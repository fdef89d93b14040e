"""Boat repository - Database operations for boats"""

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from ...models import Boat


class BoatRepository:
    """Repository for boat database operations"""

    @staticmethod
    def get_boats(db: Session) -> list[Boat]:
        """Get all live boats"""
        return db.query(Boat).filter(Boat.deleted_at.is_(None)).order_by(Boat.created_at).all()

    @staticmethod
    def get_boat_by_id(db: Session, boat_id: str, include_deleted: bool = False) -> Optional[Boat]:
        """Get a boat by ID, live only unless include_deleted"""
        query = db.query(Boat).filter(Boat.id == boat_id)
        if not include_deleted:
            query = query.filter(Boat.deleted_at.is_(None))
        return query.first()

    @staticmethod
    def get_boats_by_owner(db: Session, user_id: str) -> list[Boat]:
        """Get live boats owned by a user"""
        return (
            db.query(Boat)
            .filter(Boat.user_id == user_id, Boat.deleted_at.is_(None))
            .order_by(Boat.created_at)
            .all()
        )

    @staticmethod
    def get_owned_boat(db: Session, boat_id: str, user_id: str) -> Optional[Boat]:
        """Get a live boat only if it belongs to the user"""
        return (
            db.query(Boat)
            .filter(Boat.id == boat_id, Boat.user_id == user_id, Boat.deleted_at.is_(None))
            .first()
        )

    @staticmethod
    def search_boats_in_box(
        db: Session, min_lat: float, max_lat: float, min_lon: float, max_lon: float
    ) -> list[Boat]:
        """Get live boats inside an inclusive bounding box"""
        return (
            db.query(Boat)
            .filter(
                Boat.deleted_at.is_(None),
                Boat.lat >= min_lat,
                Boat.lat <= max_lat,
                Boat.lon >= min_lon,
                Boat.lon <= max_lon,
            )
            .order_by(Boat.created_at)
            .all()
        )

    @staticmethod
    def create_boat(db: Session, user_id: str, **boat_data) -> Boat:
        """Create a new boat"""
        boat = Boat(user_id=user_id, **boat_data)
        db.add(boat)
        db.commit()
        db.refresh(boat)
        return boat

    @staticmethod
    def soft_delete_boat(db: Session, boat: Boat, deleted_at: datetime, deleted_by: str) -> None:
        """Mark a boat as deleted"""
        boat.deleted_at = deleted_at
        boat.deleted_by = deleted_by
        db.commit()

"""Trip repository - Database operations for trips"""

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session, joinedload

from ...models import Trip


class TripRepository:
    """Repository for trip database operations"""

    @staticmethod
    def get_trips(db: Session) -> list[Trip]:
        """Get all live trips"""
        return db.query(Trip).filter(Trip.deleted_at.is_(None)).order_by(Trip.created_at).all()

    @staticmethod
    def get_trip_by_id(db: Session, trip_id: str, include_deleted: bool = False) -> Optional[Trip]:
        """Get a trip by ID, live only unless include_deleted"""
        query = db.query(Trip).filter(Trip.id == trip_id)
        if not include_deleted:
            query = query.filter(Trip.deleted_at.is_(None))
        return query.first()

    @staticmethod
    def get_trip_with_boat(db: Session, trip_id: str) -> Optional[Trip]:
        """Get a live trip with its boat eagerly loaded"""
        return (
            db.query(Trip)
            .options(joinedload(Trip.boat))
            .filter(Trip.id == trip_id, Trip.deleted_at.is_(None))
            .first()
        )

    @staticmethod
    def get_trips_by_owner(db: Session, user_id: str) -> list[Trip]:
        return (
            db.query(Trip)
            .filter(Trip.owner_id == user_id, Trip.deleted_at.is_(None))
            .order_by(Trip.created_at)
            .all()
        )

    @staticmethod
    def get_trips_by_boat(db: Session, boat_id: str) -> list[Trip]:
        return (
            db.query(Trip)
            .filter(Trip.boat_id == boat_id, Trip.deleted_at.is_(None))
            .order_by(Trip.created_at)
            .all()
        )

    @staticmethod
    def create_trip(db: Session, owner_id: str, **trip_data) -> Trip:
        """Create a new trip"""
        trip = Trip(owner_id=owner_id, **trip_data)
        db.add(trip)
        db.commit()
        db.refresh(trip)
        return trip

    @staticmethod
    def soft_delete_trip(db: Session, trip: Trip, deleted_at: datetime, deleted_by: str) -> None:
        """Mark a trip as deleted"""
        trip.deleted_at = deleted_at
        trip.deleted_by = deleted_by
        db.commit()

"""Booking repository - Database operations for bookings"""

from datetime import datetime
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from ...models import Booking


class BookingRepository:
    """Repository for booking database operations"""

    @staticmethod
    def get_booking_by_id(db: Session, booking_id: str) -> Optional[Booking]:
        return (
            db.query(Booking)
            .filter(Booking.id == booking_id, Booking.deleted_at.is_(None))
            .first()
        )

    @staticmethod
    def get_bookings(db: Session, **filters) -> list[Booking]:
        """Get live bookings matching column filters (user_id, trip_id, occurrence_id)"""
        return (
            db.query(Booking)
            .filter_by(**filters)
            .filter(Booking.deleted_at.is_(None))
            .order_by(Booking.date_retenue)
            .all()
        )

    @staticmethod
    def sum_live_places(db: Session, occurrence_id: str) -> int:
        """Sum of places held by live bookings on an occurrence"""
        total = (
            db.query(func.coalesce(func.sum(Booking.nb_places), 0))
            .filter(Booking.occurrence_id == occurrence_id, Booking.deleted_at.is_(None))
            .scalar()
        )
        return int(total)

    @staticmethod
    def create_booking(db: Session, **booking_data) -> Booking:
        """Insert a booking and commit the surrounding transaction"""
        booking = Booking(**booking_data)
        db.add(booking)
        db.commit()
        db.refresh(booking)
        return booking

    @staticmethod
    def soft_delete_booking(
        db: Session, booking: Booking, deleted_at: datetime, deleted_by: str
    ) -> None:
        """Mark a booking as deleted, releasing its places"""
        booking.deleted_at = deleted_at
        booking.deleted_by = deleted_by
        db.commit()

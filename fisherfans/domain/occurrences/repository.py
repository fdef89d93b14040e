"""Occurrence repository - Database operations for occurrences"""

from typing import Optional

from sqlalchemy import update
from sqlalchemy.orm import Session

from ...models import Occurrence


class OccurrenceRepository:
    """Repository for occurrence database operations"""

    @staticmethod
    def get_occurrence_by_id(db: Session, occurrence_id: str) -> Optional[Occurrence]:
        return db.query(Occurrence).filter(Occurrence.id == occurrence_id).first()

    @staticmethod
    def get_occurrences_by_trip(db: Session, trip_id: str) -> list[Occurrence]:
        return (
            db.query(Occurrence)
            .filter(Occurrence.trip_id == trip_id, Occurrence.deleted_at.is_(None))
            .order_by(Occurrence.date_debut)
            .all()
        )

    @staticmethod
    def create_occurrence(db: Session, **occurrence_data) -> Occurrence:
        """Create a new occurrence"""
        occurrence = Occurrence(**occurrence_data)
        db.add(occurrence)
        db.commit()
        db.refresh(occurrence)
        return occurrence

    @staticmethod
    def lock_occurrence(db: Session, occurrence_id: str) -> bool:
        """
        Take the occurrence row lock for the rest of the current transaction.

        An UPDATE locks the row on PostgreSQL and takes the database write lock
        on SQLite, so concurrent bookings on the same occurrence queue here until
        the holder commits or rolls back. Does not commit.
        """
        result = db.execute(
            update(Occurrence)
            .where(Occurrence.id == occurrence_id)
            .values(lock_version=Occurrence.lock_version + 1)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

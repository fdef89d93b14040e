"""Log entry repository - Database operations for fishing logs"""

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from ...models import LogEntry


class LogEntryRepository:
    """Repository for log entry database operations"""

    @staticmethod
    def get_log_entries(db: Session, owner_id: Optional[str] = None) -> list[LogEntry]:
        """Get live log entries, optionally for one owner"""
        query = db.query(LogEntry).filter(LogEntry.deleted_at.is_(None))
        if owner_id:
            query = query.filter(LogEntry.owner_id == owner_id)
        return query.order_by(LogEntry.date_peche.desc()).all()

    @staticmethod
    def get_log_entry_by_id(db: Session, log_entry_id: str) -> Optional[LogEntry]:
        return (
            db.query(LogEntry)
            .filter(LogEntry.id == log_entry_id, LogEntry.deleted_at.is_(None))
            .first()
        )

    @staticmethod
    def create_log_entry(db: Session, owner_id: str, **entry_data) -> LogEntry:
        """Create a new log entry"""
        entry = LogEntry(owner_id=owner_id, **entry_data)
        db.add(entry)
        db.commit()
        db.refresh(entry)
        return entry

    @staticmethod
    def soft_delete_log_entry(
        db: Session, entry: LogEntry, deleted_at: datetime, deleted_by: str
    ) -> None:
        entry.deleted_at = deleted_at
        entry.deleted_by = deleted_by
        db.commit()

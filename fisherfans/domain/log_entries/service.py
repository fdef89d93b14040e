"""Log entry service - Business logic for the fishing log"""

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from ...auth import Identity, require_auth
from ...errors import NotFound, Unauthorized
from ...models import LogEntry
from ...shared.validators import validate_log_data
from ..users.service import UserService
from .repository import LogEntryRepository
from .schemas import LogEntryCreate

logger = logging.getLogger(__name__)


class LogEntryService:
    """Service layer for log entry business logic"""

    def __init__(self, db: Session, users: UserService):
        self.db = db
        self.repo = LogEntryRepository()
        self.users = users

    def find_all(self) -> list[LogEntry]:
        return self.repo.get_log_entries(self.db)

    def find_by_id(self, log_entry_id: str) -> Optional[LogEntry]:
        return self.repo.get_log_entry_by_id(self.db, log_entry_id)

    def find_by_owner(self, user_id: str) -> list[LogEntry]:
        return self.repo.get_log_entries(self.db, owner_id=user_id)

    def create(self, identity: Optional[Identity], user_id: str, data: LogEntryCreate) -> LogEntry:
        """Create a new log entry with business rule validation"""
        require_auth(identity, user_id)
        self.users.get_user(user_id)

        validate_log_data(data.tailleCm, data.poidsKg, data.datePeche)

        entry = self.repo.create_log_entry(
            self.db,
            user_id,
            poisson_nom=data.poissonNom,
            photo_url=data.photoUrl,
            commentaire=data.commentaire,
            taille_cm=data.tailleCm,
            poids_kg=data.poidsKg,
            lieu=data.lieu,
            date_peche=data.datePeche,
            relache=data.relache,
        )
        logger.info(f"🐟 Log entry {entry.id} ({data.poissonNom}) recorded by {user_id}")
        return entry

    def delete(self, identity: Optional[Identity], log_entry_id: str) -> bool:
        """Soft delete a log entry (owner only)"""
        caller = require_auth(identity)

        entry = self.find_by_id(log_entry_id)
        if not entry:
            raise NotFound("Log entry")

        if entry.owner_id != caller.subject_id:
            logger.warning(
                f"⚠️ User {caller.subject_id} attempted to delete log entry {log_entry_id}"
            )
            raise Unauthorized("Log entry")

        self.repo.soft_delete_log_entry(
            self.db, entry, datetime.now(timezone.utc), caller.subject_id
        )
        logger.info(f"🗑️ Log entry {log_entry_id} deleted by {caller.subject_id}")
        return True

"""Occurrence service - Business logic for trip occurrences"""

import logging
from typing import Optional

from sqlalchemy.orm import Session

from ...errors import NotFound, OccurrenceTripMismatch
from ...models import Occurrence
from ...shared.validators import validate_occurrence_schedule
from ..trips.service import TripService
from .repository import OccurrenceRepository
from .schemas import OccurrenceCreate

logger = logging.getLogger(__name__)


class OccurrenceService:
    """Service layer for occurrence business logic"""

    def __init__(self, db: Session, trips: TripService):
        self.db = db
        self.repo = OccurrenceRepository()
        self.trips = trips

    def find_by_id(self, occurrence_id: str) -> Optional[Occurrence]:
        return self.repo.get_occurrence_by_id(self.db, occurrence_id)

    def find_by_trip(self, trip_id: str) -> list[Occurrence]:
        return self.repo.get_occurrences_by_trip(self.db, trip_id)

    def create(self, data: OccurrenceCreate) -> Occurrence:
        """Create a new occurrence with business rule validation"""
        if not self.trips.find_by_id(data.tripId):
            raise NotFound("Trip")

        validate_occurrence_schedule(data.dateDebut, data.dateFin, data.heureDepart, data.heureFin)

        occurrence = self.repo.create_occurrence(
            self.db,
            trip_id=data.tripId,
            date_debut=data.dateDebut,
            date_fin=data.dateFin,
            heure_depart=data.heureDepart,
            heure_fin=data.heureFin,
        )
        logger.info(f"📅 Occurrence {occurrence.id} scheduled for trip {data.tripId}")
        return occurrence

    def validate_occurrence_belongs_to_trip(self, occurrence_id: str, trip_id: str) -> Occurrence:
        """Raise OccurrenceTripMismatch unless the occurrence exists on that trip"""
        occurrence = self.find_by_id(occurrence_id)

        if not occurrence or occurrence.trip_id != trip_id:
            raise OccurrenceTripMismatch()

        return occurrence

    def lock_for_booking(self, occurrence_id: str) -> None:
        """Serialize capacity checks on this occurrence until the transaction ends"""
        if not self.repo.lock_occurrence(self.db, occurrence_id):
            raise NotFound("Occurrence")

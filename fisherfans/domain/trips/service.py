"""Trip service - Business logic for trip operations"""

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from ...auth import Identity, require_auth
from ...errors import InvalidBoatReference, NoOwnedBoat, NotFound, Unauthorized
from ...models import Trip
from ...shared.validators import validate_passenger_count, validate_trip_price
from ..boats.service import BoatService
from ..users.service import UserService
from .repository import TripRepository
from .schemas import TripCreate

logger = logging.getLogger(__name__)


class TripService:
    """Service layer for trip business logic"""

    def __init__(self, db: Session, users: UserService, boats: BoatService):
        self.db = db
        self.repo = TripRepository()
        self.users = users
        self.boats = boats

    def find_all(self) -> list[Trip]:
        return self.repo.get_trips(self.db)

    def find_by_id(self, trip_id: str) -> Optional[Trip]:
        return self.repo.get_trip_by_id(self.db, trip_id)

    def find_including_deleted(self, trip_id: str) -> Optional[Trip]:
        return self.repo.get_trip_by_id(self.db, trip_id, include_deleted=True)

    def find_by_owner(self, user_id: str) -> list[Trip]:
        return self.repo.get_trips_by_owner(self.db, user_id)

    def find_by_boat(self, boat_id: str) -> list[Trip]:
        return self.repo.get_trips_by_boat(self.db, boat_id)

    def get_trip_with_boat(self, trip_id: str) -> Optional[Trip]:
        """Get trip with boat details for booking validation"""
        return self.repo.get_trip_with_boat(self.db, trip_id)

    def create(self, identity: Optional[Identity], user_id: str, data: TripCreate) -> Trip:
        """Create a new trip with business rule validation"""
        require_auth(identity, user_id)

        if not self.users.owns_boats(user_id):
            logger.warning(f"⚠️ Trip creation denied for user {user_id}: no boat owned")
            raise NoOwnedBoat()

        if not self.boats.belongs_to_user(data.boatId, user_id):
            logger.warning(f"⚠️ Trip creation denied: boat {data.boatId} is not usable by {user_id}")
            raise InvalidBoatReference()

        validate_trip_price(data.prixEur)

        boat = self.boats.find_by_id(data.boatId)
        if not boat:
            raise NotFound("Boat")
        validate_passenger_count(data.nbPassagers, boat.capacite_max)

        trip_data = {
            "boat_id": data.boatId,
            "titre": data.titre,
            "infos_pratiques": data.infosPratiques,
            "type_sortie": data.typeSortie,
            "type_tarif": data.typeTarif,
            "nb_passagers": data.nbPassagers,
            "prix_eur": data.prixEur,
        }

        trip = self.repo.create_trip(self.db, user_id, **trip_data)
        logger.info(f"🎣 Trip {trip.id} created by {user_id} on boat {data.boatId}")
        return trip

    def delete(self, identity: Optional[Identity], trip_id: str) -> bool:
        """Soft delete a trip (organizer only)"""
        caller = require_auth(identity)

        trip = self.find_by_id(trip_id)
        if not trip:
            raise NotFound("Trip")

        if trip.owner_id != caller.subject_id:
            logger.warning(f"⚠️ User {caller.subject_id} attempted to delete trip {trip_id}")
            raise Unauthorized("Trip")

        self.repo.soft_delete_trip(self.db, trip, datetime.now(timezone.utc), caller.subject_id)
        logger.info(f"🗑️ Trip {trip_id} deleted by {caller.subject_id}")
        return True

"""Boat service - Business logic for boat operations"""

import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from ...auth import Identity, require_auth
from ...errors import MissingBoatLicense, NotFound, Unauthorized
from ...models import Boat
from ...shared.validators import validate_boat_capacity, validate_bounding_box
from ..users.service import UserService
from .repository import BoatRepository
from .schemas import BoatCreate, BoundingBox

logger = logging.getLogger(__name__)


class BoatService:
    """Service layer for boat business logic"""

    def __init__(self, db: Session, users: UserService):
        self.db = db
        self.repo = BoatRepository()
        self.users = users

    def find_all(self) -> list[Boat]:
        return self.repo.get_boats(self.db)

    def find_by_id(self, boat_id: str) -> Optional[Boat]:
        return self.repo.get_boat_by_id(self.db, boat_id)

    def find_including_deleted(self, boat_id: str) -> Optional[Boat]:
        return self.repo.get_boat_by_id(self.db, boat_id, include_deleted=True)

    def find_by_owner(self, user_id: str) -> list[Boat]:
        return self.repo.get_boats_by_owner(self.db, user_id)

    def find_by_location(self, bbox: BoundingBox) -> list[Boat]:
        """Bounding box search for boats"""
        validate_bounding_box(bbox.minLat, bbox.maxLat, bbox.minLon, bbox.maxLon)
        return self.repo.search_boats_in_box(
            self.db, bbox.minLat, bbox.maxLat, bbox.minLon, bbox.maxLon
        )

    def create(self, identity: Optional[Identity], user_id: str, data: BoatCreate) -> Boat:
        """Create a new boat with business rule validation"""
        require_auth(identity, user_id)

        if not self.users.has_valid_boat_license(user_id):
            logger.warning(f"⚠️ Boat creation denied for user {user_id}: missing boat license")
            raise MissingBoatLicense()

        validate_boat_capacity(data.capaciteMax, data.couchages)

        boat_data = {
            "nom": data.nom,
            "description": data.description,
            "marque": data.marque,
            "annee": data.annee,
            "photo_url": data.photoUrl,
            "permis_requis": data.permisRequis,
            "type": data.type,
            "equipements": data.equipements,
            "caution_eur": data.cautionEur,
            "capacite_max": data.capaciteMax,
            "couchages": data.couchages,
            "port_attache_ville": data.portAttacheVille,
            "lat": data.lat,
            "lon": data.lon,
            "motorisation": data.motorisation,
            "puissance_cv": data.puissanceCv,
        }

        boat = self.repo.create_boat(self.db, user_id, **boat_data)
        logger.info(f"⛵ Boat {boat.id} created for user {user_id}")
        return boat

    def delete(self, identity: Optional[Identity], boat_id: str) -> bool:
        """Soft delete a boat (owner only)"""
        caller = require_auth(identity)

        boat = self.find_by_id(boat_id)
        if not boat:
            raise NotFound("Boat")

        if boat.user_id != caller.subject_id:
            logger.warning(f"⚠️ User {caller.subject_id} attempted to delete boat {boat_id}")
            raise Unauthorized("Boat")

        self.repo.soft_delete_boat(self.db, boat, datetime.now(timezone.utc), caller.subject_id)
        logger.info(f"🗑️ Boat {boat_id} deleted by {caller.subject_id}")
        return True

    def belongs_to_user(self, boat_id: str, user_id: str) -> bool:
        """Check if boat belongs to user and is not deleted"""
        return self.repo.get_owned_boat(self.db, boat_id, user_id) is not None

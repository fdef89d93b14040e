"""Booking service - Business logic for reservations

Capacity is a ledger recomputed from live bookings on every attempt. The
count and the insert run in one transaction that starts by locking the
occurrence row, so two concurrent bookings on the same occurrence cannot both
see the same remaining capacity.
"""

import logging
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional

from sqlalchemy.orm import Session

from ...auth import Identity, require_auth
from ...errors import CapacityExceeded, NotFound, Unauthorized
from ...models import Booking, Trip, TripPricingType
from ...shared.validators import validate_place_count
from ..occurrences.service import OccurrenceService
from ..trips.service import TripService
from ..users.service import UserService
from .repository import BookingRepository
from .schemas import BookingCreate

logger = logging.getLogger(__name__)


def calculate_booking_price(trip: Trip, nb_places: int) -> Decimal:
    """Flat trips cost the trip price, per-person trips multiply it by the places"""
    price = Decimal(str(trip.prix_eur))
    if trip.type_tarif == TripPricingType.GLOBAL:
        return price
    return price * nb_places


class BookingService:
    """Service layer for booking business logic"""

    def __init__(
        self,
        db: Session,
        users: UserService,
        trips: TripService,
        occurrences: OccurrenceService,
    ):
        self.db = db
        self.repo = BookingRepository()
        self.users = users
        self.trips = trips
        self.occurrences = occurrences

    def find_by_id(self, booking_id: str) -> Optional[Booking]:
        return self.repo.get_booking_by_id(self.db, booking_id)

    def find_by_user(self, user_id: str) -> list[Booking]:
        return self.repo.get_bookings(self.db, user_id=user_id)

    def find_by_trip(self, trip_id: str) -> list[Booking]:
        return self.repo.get_bookings(self.db, trip_id=trip_id)

    def find_by_occurrence(self, occurrence_id: str) -> list[Booking]:
        return self.repo.get_bookings(self.db, occurrence_id=occurrence_id)

    def get_total_booked_places(self, occurrence_id: str) -> int:
        """Get total booked places for an occurrence"""
        return self.repo.sum_live_places(self.db, occurrence_id)

    def create(self, identity: Optional[Identity], user_id: str, data: BookingCreate) -> Booking:
        """Create a new booking with business rule validation"""
        require_auth(identity, user_id)
        self.users.get_user(user_id)

        trip = self.trips.get_trip_with_boat(data.tripId)
        if not trip:
            raise NotFound("Trip")

        self.occurrences.validate_occurrence_belongs_to_trip(data.occurrenceId, data.tripId)
        validate_place_count(data.nbPlaces)

        try:
            self.occurrences.lock_for_booking(data.occurrenceId)

            remaining = trip.nb_passagers - self.get_total_booked_places(data.occurrenceId)
            if data.nbPlaces > remaining:
                logger.warning(
                    f"⚠️ Booking denied on occurrence {data.occurrenceId}: "
                    f"{data.nbPlaces} requested, {remaining} remaining"
                )
                raise CapacityExceeded(remaining)

            booking = self.repo.create_booking(
                self.db,
                trip_id=data.tripId,
                user_id=user_id,
                occurrence_id=data.occurrenceId,
                date_retenue=datetime.now(timezone.utc),
                nb_places=data.nbPlaces,
                prix_total_eur=calculate_booking_price(trip, data.nbPlaces),
            )
        except Exception:
            # Release the occurrence lock
            self.db.rollback()
            raise

        logger.info(
            f"✅ Booking {booking.id}: {data.nbPlaces} place(s) on occurrence "
            f"{data.occurrenceId} for user {user_id}"
        )
        return booking

    def delete(self, identity: Optional[Identity], booking_id: str) -> bool:
        """Soft delete a booking (booking user only)"""
        caller = require_auth(identity)

        booking = self.find_by_id(booking_id)
        if not booking:
            raise NotFound("Booking")

        if booking.user_id != caller.subject_id:
            logger.warning(f"⚠️ User {caller.subject_id} attempted to delete booking {booking_id}")
            raise Unauthorized("Booking")

        self.repo.soft_delete_booking(
            self.db, booking, datetime.now(timezone.utc), caller.subject_id
        )
        logger.info(f"🗑️ Booking {booking_id} cancelled by {caller.subject_id}")
        return True

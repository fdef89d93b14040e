"""Per-request service wiring

Leaf services are built first and handed to the services that consume them,
so each collaborator can be swapped independently in tests.
"""

from sqlalchemy.orm import Session

from .boats.service import BoatService
from .bookings.service import BookingService
from .log_entries.service import LogEntryService
from .occurrences.service import OccurrenceService
from .trips.service import TripService
from .users.auth_service import AuthService
from .users.service import UserService


class ServiceContainer:
    def __init__(self, db: Session):
        self.db = db
        self.user = UserService(db)
        self.auth = AuthService(self.user)
        self.boat = BoatService(db, self.user)
        self.trip = TripService(db, self.user, self.boat)
        self.occurrence = OccurrenceService(db, self.trip)
        self.booking = BookingService(db, self.user, self.trip, self.occurrence)
        self.log_entry = LogEntryService(db, self.user)

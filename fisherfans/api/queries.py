from typing import Optional

import strawberry
from strawberry.types import Info

from ..auth import require_auth
from ..domain.boats.schemas import BoundingBox
from ..errors import NotFound
from .inputs import BoundingBoxInput, to_schema_data
from .types import Boat, Booking, LogEntry, Occurrence, Trip, User


def _maybe(type_, instance):
    return type_.from_model(instance) if instance else None


@strawberry.type
class Query:
    @strawberry.field
    def users(self, info: Info) -> list[User]:
        return [User.from_model(u) for u in info.context.services.user.find_all()]

    @strawberry.field
    def user(self, info: Info, id: strawberry.ID) -> Optional[User]:
        return _maybe(User, info.context.services.user.find_by_id(id))

    @strawberry.field
    def me(self, info: Info) -> User:
        """The authenticated caller's own profile"""
        identity = require_auth(info.context.identity)
        user = info.context.services.user.find_by_id(identity.subject_id)
        if not user:
            raise NotFound("User")
        return User.from_model(user)

    @strawberry.field
    def boats(self, info: Info) -> list[Boat]:
        return [Boat.from_model(b) for b in info.context.services.boat.find_all()]

    @strawberry.field
    def boat(self, info: Info, id: strawberry.ID) -> Optional[Boat]:
        return _maybe(Boat, info.context.services.boat.find_by_id(id))

    @strawberry.field
    def boats_by_location(self, info: Info, bbox: BoundingBoxInput) -> list[Boat]:
        boats = info.context.services.boat.find_by_location(BoundingBox(**to_schema_data(bbox)))
        return [Boat.from_model(b) for b in boats]

    @strawberry.field
    def trips(self, info: Info) -> list[Trip]:
        return [Trip.from_model(t) for t in info.context.services.trip.find_all()]

    @strawberry.field
    def trip(self, info: Info, id: strawberry.ID) -> Optional[Trip]:
        return _maybe(Trip, info.context.services.trip.find_by_id(id))

    @strawberry.field
    def occurrence(self, info: Info, id: strawberry.ID) -> Optional[Occurrence]:
        return _maybe(Occurrence, info.context.services.occurrence.find_by_id(id))

    @strawberry.field
    def booking(self, info: Info, id: strawberry.ID) -> Optional[Booking]:
        return _maybe(Booking, info.context.services.booking.find_by_id(id))

    @strawberry.field
    def log_entries(self, info: Info) -> list[LogEntry]:
        return [LogEntry.from_model(e) for e in info.context.services.log_entry.find_all()]

    @strawberry.field
    def log_entry(self, info: Info, id: strawberry.ID) -> Optional[LogEntry]:
        return _maybe(LogEntry, info.context.services.log_entry.find_by_id(id))

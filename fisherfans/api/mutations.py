import strawberry
from strawberry.types import Info

from ..domain.boats.schemas import BoatCreate
from ..domain.bookings.schemas import BookingCreate
from ..domain.log_entries.schemas import LogEntryCreate
from ..domain.occurrences.schemas import OccurrenceCreate
from ..domain.trips.schemas import TripCreate
from ..domain.users.schemas import UserCreate, UserUpdate
from .inputs import (
    CreateBoatInput,
    CreateBookingInput,
    CreateLogEntryInput,
    CreateOccurrenceInput,
    CreateTripInput,
    CreateUserInput,
    LoginInput,
    UpdateUserInput,
    to_schema_data,
)
from .types import AuthPayload, Boat, Booking, LogEntry, Occurrence, Trip, User


@strawberry.type
class Mutation:
    # Users

    @strawberry.mutation
    def signup(self, info: Info, input: CreateUserInput) -> AuthPayload:
        result = info.context.services.auth.signup(UserCreate(**to_schema_data(input)))
        return AuthPayload.from_result(result)

    @strawberry.mutation
    def login(self, info: Info, input: LoginInput) -> AuthPayload:
        result = info.context.services.auth.login(input.email, input.password)
        return AuthPayload.from_result(result)

    @strawberry.mutation
    def create_user(self, info: Info, input: CreateUserInput) -> User:
        user = info.context.services.user.create(UserCreate(**to_schema_data(input)))
        return User.from_model(user)

    @strawberry.mutation
    def update_user(self, info: Info, id: strawberry.ID, input: UpdateUserInput) -> User:
        user = info.context.services.user.update(
            info.context.identity, id, UserUpdate(**to_schema_data(input))
        )
        return User.from_model(user)

    @strawberry.mutation
    def delete_user(self, info: Info, id: strawberry.ID) -> bool:
        return info.context.services.user.delete(id, info.context.identity)

    # Boats

    @strawberry.mutation
    def create_boat(self, info: Info, user_id: strawberry.ID, input: CreateBoatInput) -> Boat:
        boat = info.context.services.boat.create(
            info.context.identity, user_id, BoatCreate(**to_schema_data(input))
        )
        return Boat.from_model(boat)

    @strawberry.mutation
    def delete_boat(self, info: Info, id: strawberry.ID) -> bool:
        return info.context.services.boat.delete(info.context.identity, id)

    # Trips

    @strawberry.mutation
    def create_trip(self, info: Info, user_id: strawberry.ID, input: CreateTripInput) -> Trip:
        trip = info.context.services.trip.create(
            info.context.identity, user_id, TripCreate(**to_schema_data(input))
        )
        return Trip.from_model(trip)

    @strawberry.mutation
    def delete_trip(self, info: Info, id: strawberry.ID) -> bool:
        return info.context.services.trip.delete(info.context.identity, id)

    # Occurrences

    @strawberry.mutation
    def create_occurrence(self, info: Info, input: CreateOccurrenceInput) -> Occurrence:
        occurrence = info.context.services.occurrence.create(
            OccurrenceCreate(**to_schema_data(input))
        )
        return Occurrence.from_model(occurrence)

    # Bookings

    @strawberry.mutation
    def create_booking(
        self, info: Info, user_id: strawberry.ID, input: CreateBookingInput
    ) -> Booking:
        booking = info.context.services.booking.create(
            info.context.identity, user_id, BookingCreate(**to_schema_data(input))
        )
        return Booking.from_model(booking)

    @strawberry.mutation
    def delete_booking(self, info: Info, id: strawberry.ID) -> bool:
        return info.context.services.booking.delete(info.context.identity, id)

    # Log entries

    @strawberry.mutation
    def create_log_entry(
        self, info: Info, user_id: strawberry.ID, input: CreateLogEntryInput
    ) -> LogEntry:
        entry = info.context.services.log_entry.create(
            info.context.identity, user_id, LogEntryCreate(**to_schema_data(input))
        )
        return LogEntry.from_model(entry)

    @strawberry.mutation
    def delete_log_entry(self, info: Info, id: strawberry.ID) -> bool:
        return info.context.services.log_entry.delete(info.context.identity, id)

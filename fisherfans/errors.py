"""
Business rule errors.

Every rejected precondition raises a subclass of ``BusinessError``. The API layer
forwards ``extensions`` untouched so clients get a stable ``code`` (``FF-xxx``)
and the error name next to the human message.
"""

from typing import Optional


class BusinessError(Exception):
    """Base class for precondition violations surfaced to API callers"""

    code = "FF-000"

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code

    @property
    def error(self) -> str:
        return type(self).__name__

    @property
    def extensions(self) -> dict:
        # graphql-core copies this onto the located GraphQLError
        return {"code": self.code, "error": self.error}

    def __str__(self) -> str:
        return self.message


class MissingBoatLicense(BusinessError):
    code = "FF-001"

    def __init__(self, message: str = "Boat creation denied: missing boat license"):
        super().__init__(message)


class NoOwnedBoat(BusinessError):
    code = "FF-002"

    def __init__(self, message: str = "Trip creation denied: user does not own a boat"):
        super().__init__(message)


class CapacityExceeded(BusinessError):
    code = "FF-003"

    def __init__(self, remaining: int):
        self.remaining = remaining
        super().__init__(
            f"Booking denied: boat capacity exceeded. Only {remaining} places remaining"
        )


class InvalidBoundingBox(BusinessError):
    code = "FF-004"

    def __init__(self, message: str = "Invalid bounding box coordinates"):
        super().__init__(message)


class IncompleteProfessionalProfile(BusinessError):
    code = "FF-005"

    def __init__(
        self, message: str = "Professional users must provide: societe, typeActivite, siret, rc"
    ):
        super().__init__(message)


class DuplicateEmail(BusinessError):
    code = "FF-006"

    def __init__(self, message: str = "A user with this email already exists"):
        super().__init__(message)


class NotFound(BusinessError):
    """Entity missing or soft-deleted"""

    CODES = {
        "User": "FF-007",
        "Boat": "FF-011",
        "Trip": "FF-015",
        "Booking": "FF-020",
        "Log entry": "FF-024",
        "Occurrence": "FF-030",
    }

    def __init__(self, entity: str):
        self.entity = entity
        super().__init__(f"{entity} not found", self.CODES.get(entity, "FF-404"))


class InvalidCapacity(BusinessError):
    code = "FF-008"

    def __init__(self, message: str = "Boat capacity must be greater than 0"):
        super().__init__(message)


class BerthsExceedCapacity(BusinessError):
    code = "FF-009"

    def __init__(self, message: str = "Number of berths cannot exceed maximum capacity"):
        super().__init__(message)


class NegativePrice(BusinessError):
    code = "FF-010"

    def __init__(self, message: str = "Trip price cannot be negative"):
        super().__init__(message)


class InvalidBoatReference(BusinessError):
    code = "FF-012"

    def __init__(
        self, message: str = "Trip creation denied: boat does not belong to user or is deleted"
    ):
        super().__init__(message)


class InvalidPassengerCount(BusinessError):
    code = "FF-013"

    def __init__(self, message: str = "Number of passengers must be greater than 0"):
        super().__init__(message)


class PassengerCountExceedsCapacity(BusinessError):
    code = "FF-014"

    def __init__(self, capacity: int):
        self.capacity = capacity
        super().__init__(f"Number of passengers cannot exceed boat capacity ({capacity})")


class InvalidDateRange(BusinessError):
    code = "FF-016"

    def __init__(self, message: str = "Start date must be before end date"):
        super().__init__(message)


class InvalidTimeRange(BusinessError):
    code = "FF-017"

    def __init__(self, message: str = "Departure time must be before end time"):
        super().__init__(message)


class OccurrenceTripMismatch(BusinessError):
    code = "FF-018"

    def __init__(self, message: str = "Occurrence not found for this trip"):
        super().__init__(message)


class InvalidPlaceCount(BusinessError):
    code = "FF-019"

    def __init__(self, message: str = "Number of places must be greater than 0"):
        super().__init__(message)


class InvalidSize(BusinessError):
    code = "FF-021"

    def __init__(self, message: str = "Fish size must be greater than 0"):
        super().__init__(message)


class InvalidWeight(BusinessError):
    code = "FF-022"

    def __init__(self, message: str = "Fish weight must be greater than 0"):
        super().__init__(message)


class FutureDate(BusinessError):
    code = "FF-023"

    def __init__(self, message: str = "Fishing date cannot be in the future"):
        super().__init__(message)


class InvalidCredentials(BusinessError):
    code = "FF-025"

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


class Unauthorized(BusinessError):
    """Authenticated, but not the owner of the targeted row"""

    CODES = {
        "Boat": "FF-026",
        "Trip": "FF-027",
        "Booking": "FF-028",
        "Log entry": "FF-029",
    }

    def __init__(self, entity: str):
        self.entity = entity
        super().__init__(
            f"{entity} deletion denied: unauthorized", self.CODES.get(entity, "FF-403")
        )


class Unauthenticated(BusinessError):
    code = "FF-401"

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message)


class InvalidToken(Exception):
    """Bearer token could not be verified; callers treat the request as anonymous"""

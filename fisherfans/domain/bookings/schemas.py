"""Booking domain schemas - Pydantic models for validation"""

from pydantic import BaseModel


class BookingCreate(BaseModel):
    """Schema for reserving places on a trip occurrence"""

    tripId: str
    occurrenceId: str
    nbPlaces: int

"""Occurrence domain schemas - Pydantic models for validation"""

from datetime import datetime

from pydantic import BaseModel


class OccurrenceCreate(BaseModel):
    """Schema for scheduling a trip occurrence"""

    tripId: str
    dateDebut: datetime
    dateFin: datetime
    heureDepart: datetime
    heureFin: datetime

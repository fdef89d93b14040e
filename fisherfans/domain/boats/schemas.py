"""Boat domain schemas - Pydantic models for validation"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from ...models import BoatType, PermitType


class BoatCreate(BaseModel):
    """Schema for creating a new boat"""

    nom: str
    description: Optional[str] = None
    marque: str
    annee: int
    photoUrl: Optional[str] = None
    permisRequis: PermitType
    type: BoatType
    equipements: list[str] = []
    cautionEur: Decimal
    capaciteMax: int
    couchages: int
    portAttacheVille: str
    lat: float
    lon: float
    motorisation: str
    puissanceCv: int


class BoundingBox(BaseModel):
    """Inclusive latitude/longitude search window"""

    minLat: float
    maxLat: float
    minLon: float
    maxLon: float

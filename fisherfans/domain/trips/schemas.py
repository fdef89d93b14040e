"""Trip domain schemas - Pydantic models for validation"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from ...models import TripPricingType, TripType


class TripCreate(BaseModel):
    """Schema for creating a new trip"""

    boatId: str
    titre: str
    infosPratiques: Optional[str] = None
    typeSortie: TripType
    typeTarif: TripPricingType
    nbPassagers: int
    prixEur: Decimal

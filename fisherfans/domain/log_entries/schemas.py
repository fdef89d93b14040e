"""Log entry domain schemas - Pydantic models for validation"""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class LogEntryCreate(BaseModel):
    """Schema for recording a catch in the fishing log"""

    poissonNom: str
    photoUrl: Optional[str] = None
    commentaire: Optional[str] = None
    tailleCm: Decimal
    poidsKg: Decimal
    lieu: str
    datePeche: datetime
    relache: bool

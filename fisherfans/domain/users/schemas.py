"""User domain schemas - Pydantic models for validation"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from ...models import UserActivityType, UserStatus


class UserCreate(BaseModel):
    """Schema for creating a new user (signup or admin create)"""

    nom: str
    prenom: str
    dateNaissance: datetime
    email: str
    telephone: str
    adresse: str
    codePostal: str
    ville: str
    langues: list[str]
    photoUrl: Optional[str] = None
    statut: UserStatus
    # Professional fields (required if statut = professionnel)
    societe: Optional[str] = None
    typeActivite: Optional[UserActivityType] = None
    siret: Optional[str] = None
    rc: Optional[str] = None
    # Optional license fields
    permisBateau: Optional[str] = None
    assurance: Optional[str] = None
    password: str


class UserUpdate(BaseModel):
    """
    Schema for a partial user update.

    Only fields explicitly set by the caller are applied, so an explicit None
    clears a nullable column while an omitted field leaves it unchanged.
    """

    nom: Optional[str] = None
    prenom: Optional[str] = None
    dateNaissance: Optional[datetime] = None
    email: Optional[str] = None
    telephone: Optional[str] = None
    adresse: Optional[str] = None
    codePostal: Optional[str] = None
    ville: Optional[str] = None
    langues: Optional[list[str]] = None
    photoUrl: Optional[str] = None
    statut: Optional[UserStatus] = None
    societe: Optional[str] = None
    typeActivite: Optional[UserActivityType] = None
    siret: Optional[str] = None
    rc: Optional[str] = None
    permisBateau: Optional[str] = None
    assurance: Optional[str] = None
    password: Optional[str] = None


# API field name -> column name
USER_FIELD_MAP = {
    "nom": "nom",
    "prenom": "prenom",
    "dateNaissance": "date_naissance",
    "email": "email",
    "telephone": "telephone",
    "adresse": "adresse",
    "codePostal": "code_postal",
    "ville": "ville",
    "langues": "langues",
    "photoUrl": "photo_url",
    "statut": "statut",
    "societe": "societe",
    "typeActivite": "type_activite",
    "siret": "siret",
    "rc": "rc",
    "permisBateau": "permis_bateau",
    "assurance": "assurance",
}

# Columns that must never be cleared through a partial update
REQUIRED_USER_COLUMNS = {
    "nom",
    "prenom",
    "date_naissance",
    "email",
    "telephone",
    "adresse",
    "code_postal",
    "ville",
    "langues",
    "statut",
}

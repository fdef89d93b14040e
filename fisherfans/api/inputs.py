"""GraphQL input types

Inputs are converted to the domain's pydantic schemas before reaching the
services. ``UpdateUserInput`` defaults every field to UNSET so an omitted
field and an explicit null stay distinguishable.
"""

import dataclasses
import enum
from datetime import datetime
from typing import Optional

import strawberry
from strawberry.utils.str_converters import to_camel_case

from .types import BoatType, PermitType, TripPricingType, TripType, UserActivityType, UserStatus


def plain(value):
    return value.value if isinstance(value, enum.Enum) else value


def to_schema_data(value) -> dict:
    """Camel-cased dict of the fields the client actually sent"""
    return {
        to_camel_case(field.name): plain(getattr(value, field.name))
        for field in dataclasses.fields(value)
        if getattr(value, field.name) is not strawberry.UNSET
    }


@strawberry.input
class CreateUserInput:
    nom: str
    prenom: str
    date_naissance: datetime
    email: str
    telephone: str
    adresse: str
    code_postal: str
    ville: str
    langues: list[str]
    statut: UserStatus
    password: str
    photo_url: Optional[str] = None
    societe: Optional[str] = None
    type_activite: Optional[UserActivityType] = None
    siret: Optional[str] = None
    rc: Optional[str] = None
    permis_bateau: Optional[str] = None
    assurance: Optional[str] = None


@strawberry.input
class UpdateUserInput:
    nom: Optional[str] = strawberry.UNSET
    prenom: Optional[str] = strawberry.UNSET
    date_naissance: Optional[datetime] = strawberry.UNSET
    email: Optional[str] = strawberry.UNSET
    telephone: Optional[str] = strawberry.UNSET
    adresse: Optional[str] = strawberry.UNSET
    code_postal: Optional[str] = strawberry.UNSET
    ville: Optional[str] = strawberry.UNSET
    langues: Optional[list[str]] = strawberry.UNSET
    photo_url: Optional[str] = strawberry.UNSET
    statut: Optional[UserStatus] = strawberry.UNSET
    societe: Optional[str] = strawberry.UNSET
    type_activite: Optional[UserActivityType] = strawberry.UNSET
    siret: Optional[str] = strawberry.UNSET
    rc: Optional[str] = strawberry.UNSET
    permis_bateau: Optional[str] = strawberry.UNSET
    assurance: Optional[str] = strawberry.UNSET
    password: Optional[str] = strawberry.UNSET


@strawberry.input
class LoginInput:
    email: str
    password: str


@strawberry.input
class CreateBoatInput:
    nom: str
    marque: str
    annee: int
    permis_requis: PermitType
    type: BoatType
    caution_eur: float
    capacite_max: int
    couchages: int
    port_attache_ville: str
    lat: float
    lon: float
    motorisation: str
    puissance_cv: int
    description: Optional[str] = None
    photo_url: Optional[str] = None
    equipements: list[str] = strawberry.field(default_factory=list)


@strawberry.input
class BoundingBoxInput:
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float


@strawberry.input
class CreateTripInput:
    boat_id: strawberry.ID
    titre: str
    type_sortie: TripType
    type_tarif: TripPricingType
    nb_passagers: int
    prix_eur: float
    infos_pratiques: Optional[str] = None


@strawberry.input
class CreateOccurrenceInput:
    trip_id: strawberry.ID
    date_debut: datetime
    date_fin: datetime
    heure_depart: datetime
    heure_fin: datetime


@strawberry.input
class CreateBookingInput:
    trip_id: strawberry.ID
    occurrence_id: strawberry.ID
    nb_places: int


@strawberry.input
class CreateLogEntryInput:
    poisson_nom: str
    taille_cm: float
    poids_kg: float
    lieu: str
    date_peche: datetime
    relache: bool
    photo_url: Optional[str] = None
    commentaire: Optional[str] = None

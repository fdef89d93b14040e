"""Shared business rule validators

Stateless precondition checks used by the domain services. Each raises the
matching BusinessError on the first violation and returns None otherwise.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional, Union

from ..errors import (
    BerthsExceedCapacity,
    FutureDate,
    IncompleteProfessionalProfile,
    InvalidBoundingBox,
    InvalidCapacity,
    InvalidDateRange,
    InvalidPassengerCount,
    InvalidPlaceCount,
    InvalidSize,
    InvalidTimeRange,
    InvalidWeight,
    NegativePrice,
    PassengerCountExceedsCapacity,
)
from ..models import UserStatus

BOAT_LICENSE_LENGTH = 8

Number = Union[int, float, Decimal]


def is_valid_boat_license(permis_bateau: Optional[str]) -> bool:
    """A boat license is valid when present and exactly 8 characters long"""
    return permis_bateau is not None and len(permis_bateau) == BOAT_LICENSE_LENGTH


def validate_professional_profile(
    statut: Optional[str],
    societe: Optional[str],
    type_activite: Optional[str],
    siret: Optional[str],
    rc: Optional[str],
) -> None:
    """Professional users must provide company, activity, registration and insurance"""
    if statut != UserStatus.PROFESSIONNEL:
        return

    if not societe or not type_activite or not siret or not rc:
        raise IncompleteProfessionalProfile()


def validate_bounding_box(min_lat: float, max_lat: float, min_lon: float, max_lon: float) -> None:
    if min_lat >= max_lat or min_lon >= max_lon:
        raise InvalidBoundingBox()


def validate_boat_capacity(capacite_max: int, couchages: int) -> None:
    if capacite_max <= 0:
        raise InvalidCapacity()

    if couchages > capacite_max:
        raise BerthsExceedCapacity()


def validate_trip_price(prix_eur: Number) -> None:
    if prix_eur < 0:
        raise NegativePrice()


def validate_passenger_count(nb_passagers: int, capacite_max: int) -> None:
    if nb_passagers <= 0:
        raise InvalidPassengerCount()

    if nb_passagers > capacite_max:
        raise PassengerCountExceedsCapacity(capacite_max)


def validate_occurrence_schedule(
    date_debut: datetime, date_fin: datetime, heure_depart: datetime, heure_fin: datetime
) -> None:
    if as_utc(date_debut) >= as_utc(date_fin):
        raise InvalidDateRange()

    if as_utc(heure_depart) >= as_utc(heure_fin):
        raise InvalidTimeRange()


def validate_place_count(nb_places: int) -> None:
    if nb_places <= 0:
        raise InvalidPlaceCount()


def validate_log_data(
    taille_cm: Number, poids_kg: Number, date_peche: datetime, now: Optional[datetime] = None
) -> None:
    if taille_cm <= 0:
        raise InvalidSize()

    if poids_kg <= 0:
        raise InvalidWeight()

    now = now or datetime.now(timezone.utc)
    if as_utc(date_peche) > as_utc(now):
        raise FutureDate()


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are treated as UTC so they compare with aware ones"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value

"""GraphQL output types

Strawberry camel-cases the snake_case attributes below, so ``capacite_max``
is served as ``capaciteMax``. Numeric columns come back from the database as
Decimal and are exposed as Float. Relations are resolved on demand through the
request's services, one lookup per field.
"""

import enum
from datetime import datetime
from typing import Optional

import strawberry
from strawberry.types import Info

from .. import models
from ..domain.users.auth_service import AuthResult


def wire_enum(model_enum):
    """GraphQL enum named by the stored values (``particulier``, ``global``)"""
    return strawberry.enum(
        enum.Enum(model_enum.__name__, [(m.value, m.value) for m in model_enum], type=str)
    )


def to_wire(wire_cls, value):
    return None if value is None else wire_cls(value)


UserStatus = wire_enum(models.UserStatus)
UserActivityType = wire_enum(models.UserActivityType)
PermitType = wire_enum(models.PermitType)
BoatType = wire_enum(models.BoatType)
TripType = wire_enum(models.TripType)
TripPricingType = wire_enum(models.TripPricingType)


@strawberry.type
class User:
    id: strawberry.ID
    nom: str
    prenom: str
    date_naissance: datetime
    email: str
    telephone: str
    adresse: str
    code_postal: str
    ville: str
    langues: list[str]
    photo_url: Optional[str]
    statut: UserStatus
    societe: Optional[str]
    type_activite: Optional[UserActivityType]
    siret: Optional[str]
    rc: Optional[str]
    permis_bateau: Optional[str]
    assurance: Optional[str]

    @strawberry.field
    def boats(self, info: Info) -> list["Boat"]:
        return [Boat.from_model(b) for b in info.context.services.boat.find_by_owner(self.id)]

    @strawberry.field
    def trips(self, info: Info) -> list["Trip"]:
        return [Trip.from_model(t) for t in info.context.services.trip.find_by_owner(self.id)]

    @strawberry.field
    def bookings(self, info: Info) -> list["Booking"]:
        return [Booking.from_model(b) for b in info.context.services.booking.find_by_user(self.id)]

    @strawberry.field
    def log_entries(self, info: Info) -> list["LogEntry"]:
        entries = info.context.services.log_entry.find_by_owner(self.id)
        return [LogEntry.from_model(e) for e in entries]

    @classmethod
    def from_model(cls, user: models.User) -> "User":
        return cls(
            id=strawberry.ID(user.id),
            nom=user.nom,
            prenom=user.prenom,
            date_naissance=user.date_naissance,
            email=user.email,
            telephone=user.telephone,
            adresse=user.adresse,
            code_postal=user.code_postal,
            ville=user.ville,
            langues=list(user.langues or []),
            photo_url=user.photo_url,
            statut=to_wire(UserStatus, user.statut),
            societe=user.societe,
            type_activite=to_wire(UserActivityType, user.type_activite),
            siret=user.siret,
            rc=user.rc,
            permis_bateau=user.permis_bateau,
            assurance=user.assurance,
        )


@strawberry.type
class Boat:
    id: strawberry.ID
    nom: str
    description: Optional[str]
    marque: str
    annee: int
    photo_url: Optional[str]
    permis_requis: PermitType
    type: BoatType
    equipements: list[str]
    caution_eur: float
    capacite_max: int
    couchages: int
    port_attache_ville: str
    lat: float
    lon: float
    motorisation: str
    puissance_cv: int
    user_id: strawberry.Private[str]

    @strawberry.field
    def owner(self, info: Info) -> User:
        return User.from_model(info.context.services.user.find_including_deleted(self.user_id))

    @strawberry.field
    def trips(self, info: Info) -> list["Trip"]:
        return [Trip.from_model(t) for t in info.context.services.trip.find_by_boat(self.id)]

    @classmethod
    def from_model(cls, boat: models.Boat) -> "Boat":
        return cls(
            id=strawberry.ID(boat.id),
            nom=boat.nom,
            description=boat.description,
            marque=boat.marque,
            annee=boat.annee,
            photo_url=boat.photo_url,
            permis_requis=to_wire(PermitType, boat.permis_requis),
            type=to_wire(BoatType, boat.type),
            equipements=list(boat.equipements or []),
            caution_eur=float(boat.caution_eur),
            capacite_max=boat.capacite_max,
            couchages=boat.couchages,
            port_attache_ville=boat.port_attache_ville,
            lat=boat.lat,
            lon=boat.lon,
            motorisation=boat.motorisation,
            puissance_cv=boat.puissance_cv,
            user_id=boat.user_id,
        )


@strawberry.type
class Trip:
    id: strawberry.ID
    titre: str
    infos_pratiques: Optional[str]
    type_sortie: TripType
    type_tarif: TripPricingType
    nb_passagers: int
    prix_eur: float
    owner_id: strawberry.Private[str]
    boat_id: strawberry.Private[str]

    @strawberry.field
    def owner(self, info: Info) -> User:
        return User.from_model(info.context.services.user.find_including_deleted(self.owner_id))

    @strawberry.field
    def boat(self, info: Info) -> Boat:
        return Boat.from_model(info.context.services.boat.find_including_deleted(self.boat_id))

    @strawberry.field
    def occurrences(self, info: Info) -> list["Occurrence"]:
        occurrences = info.context.services.occurrence.find_by_trip(self.id)
        return [Occurrence.from_model(o) for o in occurrences]

    @strawberry.field
    def bookings(self, info: Info) -> list["Booking"]:
        return [Booking.from_model(b) for b in info.context.services.booking.find_by_trip(self.id)]

    @classmethod
    def from_model(cls, trip: models.Trip) -> "Trip":
        return cls(
            id=strawberry.ID(trip.id),
            titre=trip.titre,
            infos_pratiques=trip.infos_pratiques,
            type_sortie=to_wire(TripType, trip.type_sortie),
            type_tarif=to_wire(TripPricingType, trip.type_tarif),
            nb_passagers=trip.nb_passagers,
            prix_eur=float(trip.prix_eur),
            owner_id=trip.owner_id,
            boat_id=trip.boat_id,
        )


@strawberry.type
class Occurrence:
    id: strawberry.ID
    date_debut: datetime
    date_fin: datetime
    heure_depart: datetime
    heure_fin: datetime
    trip_id: strawberry.Private[str]

    @strawberry.field
    def trip(self, info: Info) -> Trip:
        return Trip.from_model(info.context.services.trip.find_including_deleted(self.trip_id))

    @strawberry.field
    def bookings(self, info: Info) -> list["Booking"]:
        bookings = info.context.services.booking.find_by_occurrence(self.id)
        return [Booking.from_model(b) for b in bookings]

    @classmethod
    def from_model(cls, occurrence: models.Occurrence) -> "Occurrence":
        return cls(
            id=strawberry.ID(occurrence.id),
            date_debut=occurrence.date_debut,
            date_fin=occurrence.date_fin,
            heure_depart=occurrence.heure_depart,
            heure_fin=occurrence.heure_fin,
            trip_id=occurrence.trip_id,
        )


@strawberry.type
class Booking:
    id: strawberry.ID
    date_retenue: datetime
    nb_places: int
    prix_total_eur: float
    trip_id: strawberry.Private[str]
    user_id: strawberry.Private[str]
    occurrence_id: strawberry.Private[str]

    @strawberry.field
    def trip(self, info: Info) -> Trip:
        return Trip.from_model(info.context.services.trip.find_including_deleted(self.trip_id))

    @strawberry.field
    def user(self, info: Info) -> User:
        return User.from_model(info.context.services.user.find_including_deleted(self.user_id))

    @strawberry.field
    def occurrence(self, info: Info) -> Occurrence:
        return Occurrence.from_model(info.context.services.occurrence.find_by_id(self.occurrence_id))

    @classmethod
    def from_model(cls, booking: models.Booking) -> "Booking":
        return cls(
            id=strawberry.ID(booking.id),
            date_retenue=booking.date_retenue,
            nb_places=booking.nb_places,
            prix_total_eur=float(booking.prix_total_eur),
            trip_id=booking.trip_id,
            user_id=booking.user_id,
            occurrence_id=booking.occurrence_id,
        )


@strawberry.type
class LogEntry:
    id: strawberry.ID
    poisson_nom: str
    photo_url: Optional[str]
    commentaire: Optional[str]
    taille_cm: float
    poids_kg: float
    lieu: str
    date_peche: datetime
    relache: bool
    owner_id: strawberry.Private[str]

    @strawberry.field
    def owner(self, info: Info) -> User:
        return User.from_model(info.context.services.user.find_including_deleted(self.owner_id))

    @classmethod
    def from_model(cls, entry: models.LogEntry) -> "LogEntry":
        return cls(
            id=strawberry.ID(entry.id),
            poisson_nom=entry.poisson_nom,
            photo_url=entry.photo_url,
            commentaire=entry.commentaire,
            taille_cm=float(entry.taille_cm),
            poids_kg=float(entry.poids_kg),
            lieu=entry.lieu,
            date_peche=entry.date_peche,
            relache=entry.relache,
            owner_id=entry.owner_id,
        )


@strawberry.type
class AuthPayload:
    token: str
    user: User

    @classmethod
    def from_result(cls, result: AuthResult) -> "AuthPayload":
        return cls(token=result.token, user=User.from_model(result.user))

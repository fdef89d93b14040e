import enum
import uuid

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    Enum,
    Float,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .database import Base


def generate_id():
    """Generate a UUID primary key"""
    return str(uuid.uuid4())


def enum_column(enum_cls, name: str, **kwargs):
    """Enum column persisted by value (``par_personne``) rather than member name"""
    return Column(
        Enum(enum_cls, name=name, values_callable=lambda e: [m.value for m in e], native_enum=False),
        **kwargs,
    )


class UserStatus(str, enum.Enum):
    PARTICULIER = "particulier"
    PROFESSIONNEL = "professionnel"


class UserActivityType(str, enum.Enum):
    LOCATION = "location"
    GUIDE = "guide"


class PermitType(str, enum.Enum):
    COTIER = "cotier"
    FLUVIAL = "fluvial"


class BoatType(str, enum.Enum):
    OPEN = "open"
    CABINE = "cabine"
    CATAMARAN = "catamaran"
    VOILIER = "voilier"
    JETSKI = "jetski"
    CANOE = "canoe"


class TripType(str, enum.Enum):
    JOURNALIERE = "journaliere"
    RECURRENTE = "recurrente"


class TripPricingType(str, enum.Enum):
    GLOBAL = "global"
    PAR_PERSONNE = "par_personne"


class SoftDeleteMixin:
    """Rows are never removed; ``deleted_at`` marks them as gone"""

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    deleted_at = Column(DateTime(timezone=True), nullable=True, index=True)
    deleted_by = Column(String(255), nullable=True)


class User(SoftDeleteMixin, Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_id)
    nom = Column(String(255), nullable=False)
    prenom = Column(String(255), nullable=False)
    date_naissance = Column(DateTime(timezone=True), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    telephone = Column(String(50), nullable=False)
    adresse = Column(String(500), nullable=False)
    code_postal = Column(String(20), nullable=False)
    ville = Column(String(255), nullable=False)
    langues = Column(JSON, default=list, nullable=False)
    photo_url = Column(String(500), nullable=True)
    statut = enum_column(UserStatus, "user_status", nullable=False)
    # Professional fields - required when statut is professionnel
    societe = Column(String(255), nullable=True)
    type_activite = enum_column(UserActivityType, "user_activity_type", nullable=True)
    siret = Column(String(50), nullable=True)
    rc = Column(String(100), nullable=True)
    # Boat license, 8 characters when valid
    permis_bateau = Column(String(50), nullable=True)
    assurance = Column(String(100), nullable=True)
    password_hash = Column(String(255), nullable=False)

    boats = relationship("Boat", back_populates="owner")
    trips = relationship("Trip", back_populates="owner")
    bookings = relationship("Booking", back_populates="user")
    log_entries = relationship("LogEntry", back_populates="owner")


class Boat(SoftDeleteMixin, Base):
    __tablename__ = "boats"

    id = Column(String(36), primary_key=True, default=generate_id)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    nom = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    marque = Column(String(255), nullable=False)
    annee = Column(Integer, nullable=False)
    photo_url = Column(String(500), nullable=True)
    permis_requis = enum_column(PermitType, "permit_type", nullable=False)
    type = enum_column(BoatType, "boat_type", nullable=False)
    equipements = Column(JSON, default=list, nullable=False)
    caution_eur = Column(Numeric(10, 2), nullable=False)
    capacite_max = Column(Integer, nullable=False)
    couchages = Column(Integer, nullable=False)
    port_attache_ville = Column(String(255), nullable=False)
    lat = Column(Float, nullable=False, index=True)
    lon = Column(Float, nullable=False, index=True)
    motorisation = Column(String(255), nullable=False)
    puissance_cv = Column(Integer, nullable=False)

    owner = relationship("User", back_populates="boats")
    trips = relationship("Trip", back_populates="boat")

    __table_args__ = (
        CheckConstraint("capacite_max > 0", name="check_boat_capacity_positive"),
        CheckConstraint("couchages <= capacite_max", name="check_boat_berths_within_capacity"),
    )


class Trip(SoftDeleteMixin, Base):
    __tablename__ = "trips"

    id = Column(String(36), primary_key=True, default=generate_id)
    owner_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    boat_id = Column(String(36), ForeignKey("boats.id"), nullable=False, index=True)
    titre = Column(String(255), nullable=False)
    infos_pratiques = Column(Text, nullable=True)
    type_sortie = enum_column(TripType, "trip_type", nullable=False)
    type_tarif = enum_column(TripPricingType, "trip_pricing_type", nullable=False)
    nb_passagers = Column(Integer, nullable=False)
    prix_eur = Column(Numeric(10, 2), nullable=False)

    owner = relationship("User", back_populates="trips")
    boat = relationship("Boat", back_populates="trips")
    occurrences = relationship("Occurrence", back_populates="trip")
    bookings = relationship("Booking", back_populates="trip")

    __table_args__ = (
        CheckConstraint("prix_eur >= 0", name="check_trip_price_non_negative"),
        CheckConstraint("nb_passagers > 0", name="check_trip_passengers_positive"),
    )


class Occurrence(SoftDeleteMixin, Base):
    __tablename__ = "occurrences"

    id = Column(String(36), primary_key=True, default=generate_id)
    trip_id = Column(String(36), ForeignKey("trips.id"), nullable=False, index=True)
    date_debut = Column(DateTime(timezone=True), nullable=False)
    date_fin = Column(DateTime(timezone=True), nullable=False)
    heure_depart = Column(DateTime(timezone=True), nullable=False)
    heure_fin = Column(DateTime(timezone=True), nullable=False)
    # Bumped by every booking transaction to take the row lock before counting places
    lock_version = Column(Integer, default=0, nullable=False)

    trip = relationship("Trip", back_populates="occurrences")
    bookings = relationship("Booking", back_populates="occurrence")


class Booking(SoftDeleteMixin, Base):
    __tablename__ = "bookings"

    id = Column(String(36), primary_key=True, default=generate_id)
    trip_id = Column(String(36), ForeignKey("trips.id"), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    occurrence_id = Column(String(36), ForeignKey("occurrences.id"), nullable=False, index=True)
    date_retenue = Column(DateTime(timezone=True), nullable=False)
    nb_places = Column(Integer, nullable=False)
    prix_total_eur = Column(Numeric(10, 2), nullable=False)

    trip = relationship("Trip", back_populates="bookings")
    user = relationship("User", back_populates="bookings")
    occurrence = relationship("Occurrence", back_populates="bookings")

    __table_args__ = (CheckConstraint("nb_places > 0", name="check_booking_places_positive"),)


class LogEntry(SoftDeleteMixin, Base):
    __tablename__ = "log_entries"

    id = Column(String(36), primary_key=True, default=generate_id)
    owner_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    poisson_nom = Column(String(255), nullable=False)
    photo_url = Column(String(500), nullable=True)
    commentaire = Column(Text, nullable=True)
    taille_cm = Column(Numeric(8, 2), nullable=False)
    poids_kg = Column(Numeric(8, 3), nullable=False)
    lieu = Column(String(255), nullable=False)
    date_peche = Column(DateTime(timezone=True), nullable=False)
    relache = Column(Boolean, default=False, nullable=False)

    owner = relationship("User", back_populates="log_entries")

#!/usr/bin/env python3
"""
Script to reset the database and load a deterministic demo dataset

Every seeded user can log in with the password FisherFans123!
"""

from datetime import datetime, timezone
from decimal import Decimal

from fisherfans import models  # noqa: F401
from fisherfans.database import Base, SessionLocal, engine
from fisherfans.models import (
    Boat,
    Booking,
    BoatType,
    LogEntry,
    Occurrence,
    PermitType,
    Trip,
    TripPricingType,
    TripType,
    User,
    UserActivityType,
    UserStatus,
)
from fisherfans.security_utils import hash_password

SEED_PASSWORD = "FisherFans123!"


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


USERS = [
    {
        "id": "9dc8ddf0-898b-471c-a4ab-79df1764f7a1",
        "nom": "Leclerc",
        "prenom": "Martin",
        "date_naissance": utc(1987, 5, 21),
        "email": "martin.leclerc@fisherfans.test",
        "telephone": "+33600000001",
        "adresse": "12 quai des pecheurs",
        "code_postal": "13002",
        "ville": "Marseille",
        "langues": ["fr", "en"],
        "statut": UserStatus.PROFESSIONNEL,
        "societe": "Mediterranee Fishing",
        "type_activite": UserActivityType.GUIDE,
        "siret": "12345678901234",
        "rc": "RC-MED-2026",
        "permis_bateau": "12345678",
        "assurance": "AXA123456789",
    },
    {
        "id": "14e7a6ed-9f0f-47cb-bf58-a044f17b0b66",
        "nom": "Moreau",
        "prenom": "Sophie",
        "date_naissance": utc(1990, 11, 3),
        "email": "sophie.moreau@fisherfans.test",
        "telephone": "+33600000002",
        "adresse": "4 rue du vieux port",
        "code_postal": "17000",
        "ville": "La Rochelle",
        "langues": ["fr"],
        "statut": UserStatus.PROFESSIONNEL,
        "societe": "Atlantic Boats",
        "type_activite": UserActivityType.LOCATION,
        "siret": "22345678901234",
        "rc": "RC-ATL-2026",
        "permis_bateau": "23456789",
        "assurance": "ALL123456789",
    },
    {
        "id": "2afc9f7e-0abf-4997-bf7d-ec873de0ac6f",
        "nom": "Bernard",
        "prenom": "Lucie",
        "date_naissance": utc(1996, 8, 14),
        "email": "lucie.bernard@fisherfans.test",
        "telephone": "+33600000003",
        "adresse": "18 avenue des dunes",
        "code_postal": "33260",
        "ville": "La Teste-de-Buch",
        "langues": ["fr", "es"],
        "statut": UserStatus.PARTICULIER,
    },
    {
        "id": "27dc5eb8-9c85-41d9-94ca-0af322ec2c04",
        "nom": "Petit",
        "prenom": "Hugo",
        "date_naissance": utc(1994, 1, 30),
        "email": "hugo.petit@fisherfans.test",
        "telephone": "+33600000004",
        "adresse": "9 chemin des falaises",
        "code_postal": "56340",
        "ville": "Carnac",
        "langues": ["fr", "en"],
        "statut": UserStatus.PARTICULIER,
    },
]

BOATS = [
    {
        "id": "dc87cbd5-5dbb-489e-b500-f539fca173f6",
        "user_id": "9dc8ddf0-898b-471c-a4ab-79df1764f7a1",
        "nom": "Blue Runner",
        "description": "Bateau de peche sportive equipe GPS et sondeur.",
        "marque": "Beneteau",
        "annee": 2020,
        "permis_requis": PermitType.COTIER,
        "type": BoatType.OPEN,
        "equipements": ["GPS", "sondeur", "gilets", "canne"],
        "caution_eur": Decimal("1500.00"),
        "capacite_max": 6,
        "couchages": 0,
        "port_attache_ville": "Marseille",
        "lat": 43.296482,
        "lon": 5.369780,
        "motorisation": "hors-bord",
        "puissance_cv": 200,
    },
    {
        "id": "eb19016b-c97a-46d5-a4f5-3590df66fc6b",
        "user_id": "14e7a6ed-9f0f-47cb-bf58-a044f17b0b66",
        "nom": "Atlantic Wind",
        "description": "Voilier confortable pour sorties de demi-journee.",
        "marque": "Jeanneau",
        "annee": 2018,
        "permis_requis": PermitType.COTIER,
        "type": BoatType.VOILIER,
        "equipements": ["VHF", "sondeur", "gilets"],
        "caution_eur": Decimal("2200.00"),
        "capacite_max": 8,
        "couchages": 4,
        "port_attache_ville": "La Rochelle",
        "lat": 46.160329,
        "lon": -1.151139,
        "motorisation": "inboard diesel",
        "puissance_cv": 80,
    },
]

TRIPS = [
    {
        "id": "7cc5f17d-101c-4581-84cf-81a1f9f8e45d",
        "owner_id": "9dc8ddf0-898b-471c-a4ab-79df1764f7a1",
        "boat_id": "dc87cbd5-5dbb-489e-b500-f539fca173f6",
        "titre": "Peche sportive au large de Marseille",
        "infos_pratiques": "Rendez-vous 30 min avant le depart au Vieux-Port.",
        "type_sortie": TripType.JOURNALIERE,
        "type_tarif": TripPricingType.PAR_PERSONNE,
        "nb_passagers": 4,
        "prix_eur": Decimal("95.00"),
    },
    {
        "id": "862d29e5-f8df-45fa-a1aa-f8b0d1c2ec9e",
        "owner_id": "14e7a6ed-9f0f-47cb-bf58-a044f17b0b66",
        "boat_id": "eb19016b-c97a-46d5-a4f5-3590df66fc6b",
        "titre": "Sortie voilier et initiation peche",
        "infos_pratiques": "Materiel fourni, tenue chaude recommandee.",
        "type_sortie": TripType.RECURRENTE,
        "type_tarif": TripPricingType.GLOBAL,
        "nb_passagers": 6,
        "prix_eur": Decimal("420.00"),
    },
]

OCCURRENCES = [
    {
        "id": "7aee44bc-00e5-4703-b9e5-af66de8c294f",
        "trip_id": "7cc5f17d-101c-4581-84cf-81a1f9f8e45d",
        "date_debut": utc(2026, 6, 10, 7),
        "date_fin": utc(2026, 6, 10, 12),
        "heure_depart": utc(2026, 6, 10, 7),
        "heure_fin": utc(2026, 6, 10, 12),
    },
    {
        "id": "d959cd4a-6c9d-42bf-be0f-c876763abec8",
        "trip_id": "7cc5f17d-101c-4581-84cf-81a1f9f8e45d",
        "date_debut": utc(2026, 6, 17, 7),
        "date_fin": utc(2026, 6, 17, 12),
        "heure_depart": utc(2026, 6, 17, 7),
        "heure_fin": utc(2026, 6, 17, 12),
    },
    {
        "id": "3ee54a88-3639-4d03-a890-2ca90eb0ca82",
        "trip_id": "862d29e5-f8df-45fa-a1aa-f8b0d1c2ec9e",
        "date_debut": utc(2026, 6, 14, 8),
        "date_fin": utc(2026, 6, 14, 13),
        "heure_depart": utc(2026, 6, 14, 8),
        "heure_fin": utc(2026, 6, 14, 13),
    },
]

BOOKINGS = [
    {
        "id": "6eb489b9-7f68-4d09-ab2d-96b2af9d10ef",
        "trip_id": "7cc5f17d-101c-4581-84cf-81a1f9f8e45d",
        "user_id": "2afc9f7e-0abf-4997-bf7d-ec873de0ac6f",
        "occurrence_id": "7aee44bc-00e5-4703-b9e5-af66de8c294f",
        "date_retenue": utc(2026, 5, 28, 12),
        "nb_places": 2,
        "prix_total_eur": Decimal("190.00"),
    },
    {
        "id": "2f3af1de-f149-44d4-bec0-8f9da6cbd03e",
        "trip_id": "862d29e5-f8df-45fa-a1aa-f8b0d1c2ec9e",
        "user_id": "27dc5eb8-9c85-41d9-94ca-0af322ec2c04",
        "occurrence_id": "3ee54a88-3639-4d03-a890-2ca90eb0ca82",
        "date_retenue": utc(2026, 5, 30, 17, 30),
        "nb_places": 1,
        "prix_total_eur": Decimal("420.00"),
    },
]

LOG_ENTRIES = [
    {
        "id": "84f95ee5-8a6f-48f4-a041-1387f8d9ca2e",
        "owner_id": "2afc9f7e-0abf-4997-bf7d-ec873de0ac6f",
        "poisson_nom": "Bar",
        "commentaire": "Pris en traine au lever du soleil.",
        "taille_cm": Decimal("54.20"),
        "poids_kg": Decimal("2.35"),
        "lieu": "Baie de Marseille",
        "date_peche": utc(2026, 5, 10, 6, 45),
        "relache": True,
    },
    {
        "id": "282f536e-f329-45df-8fca-54d337810f8b",
        "owner_id": "27dc5eb8-9c85-41d9-94ca-0af322ec2c04",
        "poisson_nom": "Dorade",
        "commentaire": "Premiere prise en mer avec equipage.",
        "taille_cm": Decimal("41.00"),
        "poids_kg": Decimal("1.20"),
        "lieu": "Pertuis d'Antioche",
        "date_peche": utc(2026, 5, 18, 9, 20),
        "relache": False,
    },
]


def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()

    try:
        print("🧹 Resetting tables...")
        for model in (Booking, Occurrence, LogEntry, Trip, Boat, User):
            db.query(model).delete()
        db.commit()

        password_hash = hash_password(SEED_PASSWORD)
        db.add_all(User(**user, password_hash=password_hash) for user in USERS)
        db.flush()
        db.add_all(Boat(**boat) for boat in BOATS)
        db.flush()
        db.add_all(Trip(**trip) for trip in TRIPS)
        db.flush()
        db.add_all(Occurrence(**occurrence) for occurrence in OCCURRENCES)
        db.flush()
        db.add_all(Booking(**booking) for booking in BOOKINGS)
        db.add_all(LogEntry(**entry) for entry in LOG_ENTRIES)
        db.commit()

        print(f"\n{'=' * 60}")
        print("✅ Seed completed!")
        print(f"   - Users: {len(USERS)} (password: {SEED_PASSWORD})")
        print(f"   - Boats: {len(BOATS)}")
        print(f"   - Trips: {len(TRIPS)} with {len(OCCURRENCES)} occurrences")
        print(f"   - Bookings: {len(BOOKINGS)}")
        print(f"   - Log entries: {len(LOG_ENTRIES)}")
        print(f"{'=' * 60}\n")
    except Exception as e:
        print(f"❌ Seed failed: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed()

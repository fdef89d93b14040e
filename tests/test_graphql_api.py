"""
Integration Tests for the GraphQL API

Requests go through FastAPI and the strawberry router against the per-test
in-memory database.
"""

import logging

import pytest
from fastapi.testclient import TestClient

from factories import PASSWORD, VALID_LICENSE
from fisherfans.api.schema import schema
from fisherfans.database import get_db
from fisherfans.domain.users.service import UserService
from fisherfans.main import app

SIGNUP = """
mutation Signup($input: CreateUserInput!) {
  signup(input: $input) {
    token
    user { id email statut permisBateau langues }
  }
}
"""

CREATE_BOAT = """
mutation CreateBoat($userId: ID!, $input: CreateBoatInput!) {
  createBoat(userId: $userId, input: $input) { id nom capaciteMax cautionEur owner { id } }
}
"""

CREATE_TRIP = """
mutation CreateTrip($userId: ID!, $input: CreateTripInput!) {
  createTrip(userId: $userId, input: $input) { id prixEur typeTarif boat { id } }
}
"""

CREATE_OCCURRENCE = """
mutation CreateOccurrence($input: CreateOccurrenceInput!) {
  createOccurrence(input: $input) { id trip { id } }
}
"""

CREATE_BOOKING = """
mutation CreateBooking($userId: ID!, $input: CreateBookingInput!) {
  createBooking(userId: $userId, input: $input) {
    id nbPlaces prixTotalEur user { id } occurrence { id }
  }
}
"""


def user_input(email, **overrides):
    data = {
        "nom": "Moreau",
        "prenom": "Sophie",
        "dateNaissance": "1990-03-22T00:00:00+00:00",
        "email": email,
        "telephone": "0612345678",
        "adresse": "8 rue des Pecheurs",
        "codePostal": "29200",
        "ville": "Brest",
        "langues": ["fr"],
        "statut": "particulier",
        "password": PASSWORD,
    }
    data.update(overrides)
    return data


def boat_input(**overrides):
    data = {
        "nom": "Le Goeland",
        "marque": "Beneteau",
        "annee": 2018,
        "permisRequis": "cotier",
        "type": "open",
        "equipements": ["GPS"],
        "cautionEur": 500.0,
        "capaciteMax": 8,
        "couchages": 2,
        "portAttacheVille": "La Rochelle",
        "lat": 46.16,
        "lon": -1.15,
        "motorisation": "Yamaha F150",
        "puissanceCv": 150,
    }
    data.update(overrides)
    return data


@pytest.fixture
def client(session_factory):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def gql(client):
    """Post a GraphQL operation, optionally as a bearer token holder"""

    def _post(query, variables=None, token=None):
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        response = client.post(
            "/graphql", json={"query": query, "variables": variables or {}}, headers=headers
        )
        assert response.status_code == 200
        return response.json()

    return _post


def error_extensions(body):
    assert body.get("errors"), body
    return body["errors"][0]["extensions"]


@pytest.fixture
def captain_session(gql):
    body = gql(
        SIGNUP,
        {
            "input": user_input(
                "martin@example.com",
                nom="Leclerc",
                prenom="Martin",
                statut="professionnel",
                societe="Leclerc Peche SARL",
                typeActivite="guide",
                siret="12345678901234",
                rc="RC-2024-001",
                permisBateau=VALID_LICENSE,
            )
        },
    )
    return body["data"]["signup"]


@pytest.fixture
def angler_session(gql):
    return gql(SIGNUP, {"input": user_input("sophie@example.com")})["data"]["signup"]


class TestInfrastructure:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "healthy"}

    def test_root(self, client):
        assert client.get("/").json()["graphql"] == "/graphql"

    def test_startup_creates_tables(self, caplog):
        with caplog.at_level(logging.INFO, logger="fisherfans.main"):
            with TestClient(app) as started:
                assert started.get("/health").status_code == 200

        assert "FisherFans API ready on sqlite (6 tables)" in caplog.text
        assert "FisherFans API stopped" in caplog.text


class TestAuthApi:
    def test_signup_exposes_camel_case_fields(self, angler_session):
        user = angler_session["user"]

        assert angler_session["token"]
        assert user["email"] == "sophie@example.com"
        assert user["statut"] == "particulier"
        assert user["permisBateau"] is None
        assert user["langues"] == ["fr"]

    def test_password_hash_not_in_schema(self, gql, angler_session):
        body = gql("query { users { id passwordHash } }")

        assert body["errors"]

    def test_login_and_me(self, gql, angler_session):
        login = gql(
            "mutation Login($input: LoginInput!) { login(input: $input) { token user { id } } }",
            {"input": {"email": "sophie@example.com", "password": PASSWORD}},
        )["data"]["login"]

        me = gql("query { me { id email } }", token=login["token"])["data"]["me"]

        assert me["id"] == angler_session["user"]["id"]

    def test_bad_login(self, gql, angler_session):
        body = gql(
            "mutation Login($input: LoginInput!) { login(input: $input) { token } }",
            {"input": {"email": "sophie@example.com", "password": "nope"}},
        )

        assert error_extensions(body) == {"code": "FF-025", "error": "InvalidCredentials"}

    def test_me_requires_token(self, gql):
        body = gql("query { me { id } }")

        assert error_extensions(body)["code"] == "FF-401"
        assert body["errors"][0]["message"] == "Authentication required"

    def test_garbage_token_is_anonymous(self, gql):
        body = gql("query { me { id } }", token="not-a-jwt")

        assert error_extensions(body)["code"] == "FF-401"

    def test_duplicate_signup(self, gql, angler_session):
        body = gql(SIGNUP, {"input": user_input("sophie@example.com")})

        assert error_extensions(body) == {"code": "FF-006", "error": "DuplicateEmail"}

    def test_incomplete_professional_signup(self, gql):
        body = gql(SIGNUP, {"input": user_input("pro@example.com", statut="professionnel")})

        assert error_extensions(body)["code"] == "FF-005"


class TestUsersApi:
    def test_update_user_partial(self, gql, angler_session):
        user_id = angler_session["user"]["id"]
        body = gql(
            """
            mutation Update($id: ID!, $input: UpdateUserInput!) {
              updateUser(id: $id, input: $input) { ville photoUrl nom }
            }
            """,
            {"id": user_id, "input": {"ville": "Lorient", "photoUrl": None}},
            token=angler_session["token"],
        )

        assert body["data"]["updateUser"] == {"ville": "Lorient", "photoUrl": None, "nom": "Moreau"}

    def test_update_other_user_rejected(self, gql, angler_session, captain_session):
        body = gql(
            """
            mutation Update($id: ID!, $input: UpdateUserInput!) {
              updateUser(id: $id, input: $input) { id }
            }
            """,
            {"id": captain_session["user"]["id"], "input": {"ville": "Lorient"}},
            token=angler_session["token"],
        )

        assert error_extensions(body)["code"] == "FF-401"

    def test_delete_user_hides_it(self, gql, angler_session):
        user_id = angler_session["user"]["id"]

        deleted = gql("mutation D($id: ID!) { deleteUser(id: $id) }", {"id": user_id})
        lookup = gql("query U($id: ID!) { user(id: $id) { id } }", {"id": user_id})

        assert deleted["data"]["deleteUser"] is True
        assert lookup["data"]["user"] is None

    def test_unknown_user_lookup_is_null(self, gql):
        assert gql('query { user(id: "missing") { id } }')["data"]["user"] is None


class TestBookingFlow:
    def test_end_to_end_booking(self, gql, captain_session, angler_session):
        captain_id = captain_session["user"]["id"]
        captain_token = captain_session["token"]

        boat = gql(
            CREATE_BOAT, {"userId": captain_id, "input": boat_input()}, token=captain_token
        )["data"]["createBoat"]
        assert boat["owner"]["id"] == captain_id
        assert boat["cautionEur"] == 500.0

        trip = gql(
            CREATE_TRIP,
            {
                "userId": captain_id,
                "input": {
                    "boatId": boat["id"],
                    "titre": "Sortie bar",
                    "typeSortie": "journaliere",
                    "typeTarif": "par_personne",
                    "nbPassagers": 4,
                    "prixEur": 45.5,
                },
            },
            token=captain_token,
        )["data"]["createTrip"]
        assert trip["typeTarif"] == "par_personne"
        assert trip["boat"]["id"] == boat["id"]

        occurrence = gql(
            CREATE_OCCURRENCE,
            {
                "input": {
                    "tripId": trip["id"],
                    "dateDebut": "2030-06-01T06:00:00+00:00",
                    "dateFin": "2030-06-02T06:00:00+00:00",
                    "heureDepart": "2030-06-01T06:00:00+00:00",
                    "heureFin": "2030-06-01T14:00:00+00:00",
                }
            },
        )["data"]["createOccurrence"]

        angler_id = angler_session["user"]["id"]
        booking_input = {"tripId": trip["id"], "occurrenceId": occurrence["id"], "nbPlaces": 3}
        booking = gql(
            CREATE_BOOKING,
            {"userId": angler_id, "input": booking_input},
            token=angler_session["token"],
        )["data"]["createBooking"]

        assert booking["prixTotalEur"] == 136.5
        assert booking["user"]["id"] == angler_id
        assert booking["occurrence"]["id"] == occurrence["id"]

        overbooked = gql(
            CREATE_BOOKING,
            {"userId": angler_id, "input": {**booking_input, "nbPlaces": 2}},
            token=angler_session["token"],
        )
        assert error_extensions(overbooked) == {"code": "FF-003", "error": "CapacityExceeded"}
        assert "Only 1 places remaining" in overbooked["errors"][0]["message"]

        trip_view = gql(
            """
            query T($id: ID!) {
              trip(id: $id) { owner { id } occurrences { bookings { nbPlaces } } bookings { id } }
            }
            """,
            {"id": trip["id"]},
        )["data"]["trip"]
        assert trip_view["owner"]["id"] == captain_id
        assert trip_view["occurrences"] == [{"bookings": [{"nbPlaces": 3}]}]
        assert trip_view["bookings"] == [{"id": booking["id"]}]

        cancelled = gql(
            "mutation C($id: ID!) { deleteBooking(id: $id) }",
            {"id": booking["id"]},
            token=captain_token,
        )
        assert error_extensions(cancelled)["code"] == "FF-028"

    def test_boat_requires_license(self, gql, angler_session):
        body = gql(
            CREATE_BOAT,
            {"userId": angler_session["user"]["id"], "input": boat_input()},
            token=angler_session["token"],
        )

        assert error_extensions(body) == {"code": "FF-001", "error": "MissingBoatLicense"}
        assert body["data"] is None

    def test_boat_requires_authentication(self, gql, captain_session):
        body = gql(CREATE_BOAT, {"userId": captain_session["user"]["id"], "input": boat_input()})

        assert error_extensions(body)["code"] == "FF-401"

    def test_boats_by_location(self, gql, captain_session):
        gql(
            CREATE_BOAT,
            {"userId": captain_session["user"]["id"], "input": boat_input()},
            token=captain_session["token"],
        )
        query = """
        query Search($bbox: BoundingBoxInput!) { boatsByLocation(bbox: $bbox) { nom } }
        """

        found = gql(query, {"bbox": {"minLat": 46.0, "maxLat": 47.0, "minLon": -2.0, "maxLon": -1.0}})
        invalid = gql(query, {"bbox": {"minLat": 47.0, "maxLat": 46.0, "minLon": -2.0, "maxLon": -1.0}})

        assert found["data"]["boatsByLocation"] == [{"nom": "Le Goeland"}]
        assert error_extensions(invalid)["code"] == "FF-004"

    def test_user_relations(self, gql, captain_session):
        gql(
            CREATE_BOAT,
            {"userId": captain_session["user"]["id"], "input": boat_input()},
            token=captain_session["token"],
        )

        me = gql(
            "query { me { boats { nom } trips { id } bookings { id } logEntries { id } } }",
            token=captain_session["token"],
        )["data"]["me"]

        assert me == {"boats": [{"nom": "Le Goeland"}], "trips": [], "bookings": [], "logEntries": []}


class TestLogEntriesApi:
    def test_create_and_delete(self, gql, angler_session):
        user_id = angler_session["user"]["id"]
        token = angler_session["token"]

        entry = gql(
            """
            mutation L($userId: ID!, $input: CreateLogEntryInput!) {
              createLogEntry(userId: $userId, input: $input) { id tailleCm owner { id } }
            }
            """,
            {
                "userId": user_id,
                "input": {
                    "poissonNom": "Bar",
                    "tailleCm": 62.5,
                    "poidsKg": 3.2,
                    "lieu": "Pertuis",
                    "datePeche": "2024-09-14T07:30:00+00:00",
                    "relache": True,
                },
            },
            token=token,
        )["data"]["createLogEntry"]
        assert entry["tailleCm"] == 62.5
        assert entry["owner"]["id"] == user_id

        deleted = gql(
            "mutation D($id: ID!) { deleteLogEntry(id: $id) }", {"id": entry["id"]}, token=token
        )
        assert deleted["data"]["deleteLogEntry"] is True
        assert gql("query { logEntries { id } }")["data"]["logEntries"] == []


class TestErrorMasking:
    def test_unexpected_errors_are_masked(self, gql, monkeypatch):
        def explode(self):
            raise RuntimeError("database exploded")

        monkeypatch.setattr(UserService, "find_all", explode)

        body = gql("query { users { id } }")

        assert body["errors"][0]["message"] == "Internal server error"
        assert "database exploded" not in str(body)

    def test_null_for_required_variable_is_reported(self, gql):
        body = gql("query($id: ID!) { user(id: $id) { id } }", {"id": None})

        message = body["errors"][0]["message"]
        assert message != "Internal server error"
        assert "$id" in message

    def test_unknown_enum_value_is_reported(self, gql):
        body = gql(SIGNUP, {"input": user_input("foo@example.com", statut="FOO")})

        message = body["errors"][0]["message"]
        assert message != "Internal server error"
        assert "FOO" in message


class TestEnumWireFormat:
    def test_enums_use_lowercase_values(self):
        sdl = schema.as_str()

        assert "enum TripPricingType {\n  global\n  par_personne\n}" in sdl
        assert "enum UserStatus {\n  particulier\n  professionnel\n}" in sdl

    def test_member_names_are_rejected(self, gql):
        body = gql(SIGNUP, {"input": user_input("upper@example.com", statut="PARTICULIER")})

        assert body.get("data") is None
        assert body["errors"][0]["message"] != "Internal server error"

    def test_global_pricing_round_trips(self, gql, captain_session):
        captain_id = captain_session["user"]["id"]
        token = captain_session["token"]
        boat = gql(CREATE_BOAT, {"userId": captain_id, "input": boat_input()}, token=token)
        trip = gql(
            CREATE_TRIP,
            {
                "userId": captain_id,
                "input": {
                    "boatId": boat["data"]["createBoat"]["id"],
                    "titre": "Sortie privatisee",
                    "typeSortie": "recurrente",
                    "typeTarif": "global",
                    "nbPassagers": 6,
                    "prixEur": 300.0,
                },
            },
            token=token,
        )

        assert trip["data"]["createTrip"]["typeTarif"] == "global"

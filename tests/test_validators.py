"""Unit Tests for shared business rule validators"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from fisherfans.errors import (
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
from fisherfans.models import UserActivityType, UserStatus
from fisherfans.shared.validators import (
    is_valid_boat_license,
    validate_boat_capacity,
    validate_bounding_box,
    validate_log_data,
    validate_occurrence_schedule,
    validate_passenger_count,
    validate_place_count,
    validate_professional_profile,
    validate_trip_price,
)


class TestBoatLicense:
    @pytest.mark.parametrize(
        "license_number,expected",
        [
            ("12345678", True),
            ("ABCDEFGH", True),
            ("1234567", False),
            ("123456789", False),
            ("", False),
            (None, False),
        ],
    )
    def test_exactly_eight_characters(self, license_number, expected):
        assert is_valid_boat_license(license_number) is expected


class TestProfessionalProfile:
    def test_individual_needs_nothing(self):
        validate_professional_profile(UserStatus.PARTICULIER, None, None, None, None)

    def test_complete_professional(self):
        validate_professional_profile(
            UserStatus.PROFESSIONNEL, "SARL", UserActivityType.LOCATION, "123", "RC"
        )

    def test_empty_string_counts_as_missing(self):
        with pytest.raises(IncompleteProfessionalProfile):
            validate_professional_profile(
                UserStatus.PROFESSIONNEL, "", UserActivityType.LOCATION, "123", "RC"
            )


class TestBoundingBox:
    def test_valid_box(self):
        validate_bounding_box(45.0, 47.0, -2.0, 0.0)

    @pytest.mark.parametrize(
        "box",
        [
            (47.0, 45.0, -2.0, 0.0),
            (45.0, 45.0, -2.0, 0.0),
            (45.0, 47.0, 0.0, -2.0),
            (45.0, 47.0, 1.0, 1.0),
        ],
    )
    def test_inverted_or_empty_box(self, box):
        with pytest.raises(InvalidBoundingBox) as exc_info:
            validate_bounding_box(*box)

        assert exc_info.value.code == "FF-004"


class TestBoatCapacity:
    def test_zero_capacity(self):
        with pytest.raises(InvalidCapacity):
            validate_boat_capacity(0, 0)

    def test_berths_exceed_capacity(self):
        with pytest.raises(BerthsExceedCapacity):
            validate_boat_capacity(4, 5)

    def test_berths_equal_capacity(self):
        validate_boat_capacity(4, 4)


class TestTripRules:
    def test_free_trip_allowed(self):
        validate_trip_price(Decimal("0"))

    def test_negative_price(self):
        with pytest.raises(NegativePrice):
            validate_trip_price(Decimal("-0.01"))

    def test_zero_passengers(self):
        with pytest.raises(InvalidPassengerCount):
            validate_passenger_count(0, 8)

    def test_passengers_over_capacity_embeds_capacity(self):
        with pytest.raises(PassengerCountExceedsCapacity) as exc_info:
            validate_passenger_count(9, 8)

        assert "(8)" in exc_info.value.message


class TestOccurrenceSchedule:
    start = datetime(2030, 6, 1, 6, 0, tzinfo=timezone.utc)

    def test_valid_schedule(self):
        validate_occurrence_schedule(
            self.start, self.start + timedelta(days=1), self.start, self.start + timedelta(hours=4)
        )

    def test_dates_must_be_ordered(self):
        with pytest.raises(InvalidDateRange):
            validate_occurrence_schedule(
                self.start, self.start, self.start, self.start + timedelta(hours=4)
            )

    def test_times_must_be_ordered(self):
        with pytest.raises(InvalidTimeRange):
            validate_occurrence_schedule(
                self.start, self.start + timedelta(days=1), self.start, self.start
            )

    def test_naive_and_aware_datetimes_compare(self):
        naive_end = datetime(2030, 6, 2, 6, 0)
        validate_occurrence_schedule(
            self.start, naive_end, self.start, self.start + timedelta(hours=1)
        )


class TestPlacesAndLogs:
    def test_place_count_must_be_positive(self):
        with pytest.raises(InvalidPlaceCount):
            validate_place_count(0)

    def test_size_must_be_positive(self):
        with pytest.raises(InvalidSize):
            validate_log_data(0, 1, datetime(2024, 1, 1, tzinfo=timezone.utc))

    def test_weight_must_be_positive(self):
        with pytest.raises(InvalidWeight):
            validate_log_data(10, -1, datetime(2024, 1, 1, tzinfo=timezone.utc))

    def test_future_catch_rejected(self):
        now = datetime(2024, 6, 1, tzinfo=timezone.utc)

        with pytest.raises(FutureDate):
            validate_log_data(10, 1, now + timedelta(minutes=1), now=now)

    def test_catch_at_current_instant_allowed(self):
        now = datetime(2024, 6, 1, tzinfo=timezone.utc)

        validate_log_data(10, 1, now, now=now)

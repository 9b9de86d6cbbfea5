"""
Tests for the Room and Reservation models.
"""
import dataclasses
from datetime import date, datetime
from decimal import Decimal

import pytest

from hotelres.models import Reservation, Room, RoomType


def make_reservation(**overrides) -> Reservation:
    data = dict(
        room_number=101,
        guest_name="Jane Smith",
        guest_email="jane@example.com",
        check_in=date(2024, 1, 10),
        check_out=date(2024, 1, 12),
        total_price=Decimal("200.00"),
        reservation_id="AB12CD34",
    )
    data.update(overrides)
    return Reservation(**data)


class TestRoomType:

    def test_parse_is_case_insensitive(self):
        assert RoomType.parse("deluxe") is RoomType.DELUXE
        assert RoomType.parse(" Suite ") is RoomType.SUITE
        assert RoomType.parse(RoomType.STANDARD) is RoomType.STANDARD

    def test_parse_rejects_unknown_type(self):
        with pytest.raises(ValueError) as exc:
            RoomType.parse("penthouse")
        assert "STANDARD" in str(exc.value)


class TestRoom:

    def test_rate_is_normalised_to_decimal(self):
        room = Room(101, "standard", "99.99", 2)
        assert room.room_type is RoomType.STANDARD
        assert room.price_per_night == Decimal("99.99")

    @pytest.mark.parametrize("rate,occupancy", [("0", 2), ("-10.00", 2), ("50.00", 0)])
    def test_rejects_non_positive_attributes(self, rate, occupancy):
        with pytest.raises(ValueError):
            Room(101, RoomType.STANDARD, Decimal(rate), occupancy)

    def test_room_is_immutable(self):
        room = Room(101, RoomType.STANDARD, Decimal("99.99"), 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            room.price_per_night = Decimal("1.00")

    def test_describe(self):
        room = Room(201, RoomType.DELUXE, Decimal("159.99"), 4)
        assert room.describe() == "Room 201 - DELUXE (Max: 4 people) - $159.99/night"

    def test_dict_round_trip(self):
        room = Room(301, RoomType.SUITE, Decimal("249.99"), 6)
        data = room.to_dict()
        assert data["price_per_night"] == "249.99"
        assert Room.from_dict(data) == room


class TestReservation:

    def test_total_price_is_nights_times_rate(self):
        total = Reservation.calculate_total_price(Decimal("99.99"), date(2024, 2, 27), date(2024, 3, 2))
        # 2024 is a leap year: 27, 28, 29 Feb and 1 Mar
        assert total == Decimal("399.96")

    def test_nights(self):
        assert make_reservation().nights == 2

    def test_status_derivation(self):
        reservation = make_reservation()
        assert reservation.status == Reservation.STATUS_PENDING
        reservation.is_paid = True
        assert reservation.status == Reservation.STATUS_PAID
        reservation.is_cancelled = True
        assert reservation.status == Reservation.STATUS_CANCELLED
        assert not reservation.is_active()

    def test_summary_for_pending_reservation(self):
        summary = make_reservation().summary()
        assert "Reservation ID: AB12CD34" in summary
        assert "Guest: Jane Smith (jane@example.com)" in summary
        assert "Total Price: $200.00" in summary
        assert "Status: PENDING PAYMENT" in summary
        assert "Payment Pending" in summary

    def test_summary_for_cancelled_reservation_has_no_payment_line(self):
        summary = make_reservation(is_paid=True, is_cancelled=True).summary()
        assert "Status: CANCELLED" in summary
        assert "Payment" not in summary

    def test_from_dict_ignores_derived_keys(self):
        original = make_reservation(is_paid=True, created_at=datetime(2024, 1, 1, 9, 30))
        data = original.to_dict()
        assert data["status"] == "paid"
        assert data["nights"] == 2

        restored = Reservation.from_dict(data)
        assert restored == original

    def test_from_dict_tolerates_bad_created_at(self):
        data = make_reservation().to_dict()
        data["created_at"] = "yesterday"
        assert Reservation.from_dict(data).created_at is None

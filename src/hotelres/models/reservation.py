from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Dict, Any, ClassVar


@dataclass
class Reservation:
    """A guest's stay in one room over the half-open range [check_in, check_out)."""

    # Required fields
    room_number: int
    guest_name: str
    guest_email: str
    check_in: date
    check_out: date
    total_price: Decimal

    # Assigned by the engine at booking time
    reservation_id: str = field(default="")

    is_paid: bool = field(default=False)
    is_cancelled: bool = field(default=False)
    created_at: Optional[datetime] = field(default_factory=datetime.now)

    STATUS_PENDING: ClassVar[str] = "pending"
    STATUS_PAID: ClassVar[str] = "paid"
    STATUS_CANCELLED: ClassVar[str] = "cancelled"

    @staticmethod
    def count_nights(check_in: date, check_out: date) -> int:
        return (check_out - check_in).days

    @classmethod
    def calculate_total_price(cls, price_per_night: Decimal, check_in: date, check_out: date) -> Decimal:
        return Decimal(cls.count_nights(check_in, check_out)) * Decimal(str(price_per_night))

    @property
    def nights(self) -> int:
        return self.count_nights(self.check_in, self.check_out)

    @property
    def status(self) -> str:
        if self.is_cancelled:
            return self.STATUS_CANCELLED
        if self.is_paid:
            return self.STATUS_PAID
        return self.STATUS_PENDING

    def is_active(self) -> bool:
        """Active reservations block their room; cancelled ones never do."""
        return not self.is_cancelled

    def summary(self) -> str:
        if self.is_cancelled:
            status_line = "Status: CANCELLED"
        elif self.is_paid:
            status_line = "Status: PAID\nPayment Received"
        else:
            status_line = "Status: PENDING PAYMENT\nPayment Pending"

        return (
            f"Reservation ID: {self.reservation_id}\n"
            f"Guest: {self.guest_name} ({self.guest_email})\n"
            f"Room: {self.room_number}\n"
            f"Check-in: {self.check_in.isoformat()}\n"
            f"Check-out: {self.check_out.isoformat()}\n"
            f"Total Price: ${self.total_price:.2f}\n"
            f"{status_line}"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "reservation_id": self.reservation_id,
            "room_number": self.room_number,
            "guest_name": self.guest_name,
            "guest_email": self.guest_email,
            "check_in": self.check_in.isoformat(),
            "check_out": self.check_out.isoformat(),
            "nights": self.nights,
            "total_price": str(self.total_price),
            "is_paid": self.is_paid,
            "is_cancelled": self.is_cancelled,
            "status": self.status,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Reservation:
        data = data.copy()

        for key in ("check_in", "check_out"):
            if isinstance(data.get(key), str):
                data[key] = date.fromisoformat(data[key])

        created_at_str = data.get("created_at")
        if created_at_str and isinstance(created_at_str, str):
            try:
                data["created_at"] = datetime.fromisoformat(created_at_str)
            except ValueError:
                data["created_at"] = None

        data["total_price"] = Decimal(str(data["total_price"]))
        data["room_number"] = int(data["room_number"])
        data["is_paid"] = bool(data.get("is_paid", False))
        data["is_cancelled"] = bool(data.get("is_cancelled", False))

        # derived keys such as status/nights are dropped here
        field_names = {f.name for f in cls.__dataclass_fields__.values()}
        filtered_data = {k: v for k, v in data.items() if k in field_names}

        return cls(**filtered_data)

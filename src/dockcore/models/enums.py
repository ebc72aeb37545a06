"""Enumeration types for dock slip booking data models."""

from enum import Enum


class ReservationStatus(str, Enum):
    """Status of a slip reservation."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"

    @classmethod
    def _missing_(cls, value: object) -> "ReservationStatus | None":
        # Stored rows use mixed casing and the US spelling "canceled"
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized == "canceled":
                return cls.CANCELLED
            for member in cls:
                if member.value == normalized:
                    return member
        return None


class OccupantClass(str, Enum):
    """Category of the party booking a slip.

    Renters pay the nightly rate. Homeowners, admins and superadmins
    are fee-exempt.
    """

    RENTER = "renter"
    HOMEOWNER = "homeowner"
    ADMIN = "admin"
    SUPERADMIN = "superadmin"

    @property
    def is_fee_exempt(self) -> bool:
        """Whether bookings by this class are never charged."""
        return self is not OccupantClass.RENTER

    @classmethod
    def normalize(cls, value: "str | OccupantClass | None") -> "OccupantClass":
        """Parse a user type as stored on profiles and bookings.

        Missing or blank values default to renter.

        Args:
            value: Raw user type (any casing) or an OccupantClass

        Returns:
            The matching OccupantClass

        Raises:
            ValueError: If the value names no known class
        """
        if isinstance(value, OccupantClass):
            return value
        if value is None or not str(value).strip():
            return cls.RENTER
        return cls(str(value).strip().lower())


class SettlementStatus(str, Enum):
    """Outcome of a cancellation's money movement."""

    EXEMPT = "exempt"
    REFUNDED = "refunded"
    PARTIALLY_REFUNDED = "partially_refunded"
    NON_REFUNDABLE = "non_refundable"


class PaymentMethod(str, Enum):
    """How a booking is paid for."""

    CARD = "card"
    EXEMPT = "exempt"

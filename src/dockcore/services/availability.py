"""Availability service for slip date conflicts."""

import datetime as dt
from collections.abc import Iterable, Sequence

from dockcore.models import DateRange, Reservation
from dockcore.utils.dates import DateLike, to_day
from dockcore.utils.logging import get_logger

logger = get_logger(__name__)


class AvailabilityService:
    """Service for checking slip availability against existing reservations.

    Only confirmed reservations block dates. Ranges are half-open, so a
    check-out and a check-in on the same day do not conflict.
    """

    @staticmethod
    def overlaps(first: DateRange, second: DateRange) -> bool:
        """Whether two stays share at least one night."""
        return first.overlaps(second)

    def find_conflicts(
        self,
        candidate: DateRange,
        existing: Iterable[Reservation],
        slip_id: str | None = None,
    ) -> list[Reservation]:
        """Find confirmed reservations that overlap a candidate stay.

        Args:
            candidate: Requested stay
            existing: Reservations to check against
            slip_id: Only consider reservations for this slip if given

        Returns:
            Conflicting reservations in input order
        """
        conflicts = [
            r
            for r in existing
            if r.is_confirmed
            and (slip_id is None or r.slip_id == slip_id)
            and r.date_range.overlaps(candidate)
        ]

        if conflicts:
            logger.debug(
                "Found %d conflicting reservation(s) for %s",
                len(conflicts),
                candidate,
            )

        return conflicts

    def is_available(
        self,
        candidate: DateRange,
        existing: Iterable[Reservation],
        slip_id: str | None = None,
    ) -> bool:
        """Check whether a stay can be booked.

        Args:
            candidate: Requested stay
            existing: The slip's existing reservations
            slip_id: Only consider reservations for this slip if given

        Returns:
            True if no confirmed reservation overlaps the stay
        """
        return not self.find_conflicts(candidate, existing, slip_id)

    def filter_available_slips(
        self,
        slip_ids: Sequence[str],
        candidate: DateRange,
        existing: Iterable[Reservation],
    ) -> list[str]:
        """Narrow a slip listing to slips free for the whole stay.

        Args:
            slip_ids: Slips to consider, in display order
            candidate: Requested stay
            existing: Reservations across all slips

        Returns:
            Slip IDs with no conflicting confirmed reservation, order preserved
        """
        booked = {r.slip_id for r in self.find_conflicts(candidate, existing)}
        available = [slip_id for slip_id in slip_ids if slip_id not in booked]

        logger.info(
            "%d of %d slip(s) available for %s",
            len(available),
            len(slip_ids),
            candidate,
        )
        return available

    def has_active_bookings(
        self,
        slip_id: str,
        existing: Iterable[Reservation],
        today: DateLike | None = None,
    ) -> bool:
        """Whether a slip has a confirmed stay that has not yet checked out.

        Args:
            slip_id: Slip to check
            existing: Reservations to check
            today: Reference day (defaults to the current date)

        Returns:
            True if any confirmed reservation checks out today or later
        """
        reference = to_day(today) if today is not None else dt.date.today()
        return any(
            r.is_confirmed and r.slip_id == slip_id and r.date_range.end >= reference
            for r in existing
        )

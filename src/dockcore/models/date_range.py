"""DateRange value object for stays."""

import datetime as dt
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from dockcore.utils.dates import night_count, to_day

from .errors import InvalidRangeError


class DateRange(BaseModel):
    """A half-open stay: includes the check-in date, excludes check-out.

    Inputs are normalized to calendar dates, so a check-out on the same day
    as another stay's check-in never counts as an overlap.
    """

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={"examples": [{"start": "2025-06-22", "end": "2025-06-24"}]},
    )

    start: dt.date = Field(..., description="Check-in date (inclusive)", examples=["2025-06-22"])
    end: dt.date = Field(..., description="Check-out date (exclusive)", examples=["2025-06-24"])

    @field_validator("start", "end", mode="before")
    @classmethod
    def _normalize_day(cls, value: Any) -> Any:
        if isinstance(value, (dt.date, str)):
            return to_day(value)
        return value

    @model_validator(mode="after")
    def _check_order(self) -> "DateRange":
        if self.end <= self.start:
            raise InvalidRangeError(
                {"start": self.start.isoformat(), "end": self.end.isoformat()}
            )
        return self

    @classmethod
    def of(cls, start: Any, end: Any) -> "DateRange":
        """Build a range from any date-like pair."""
        return cls(start=start, end=end)

    @property
    def nights(self) -> int:
        """Number of nights in the stay."""
        return night_count(self.start, self.end)

    def overlaps(self, other: "DateRange") -> bool:
        """Half-open overlap test: ``s1 < e2 and s2 < e1``."""
        return self.start < other.end and other.start < self.end

    def __str__(self) -> str:
        return f"{self.start.isoformat()} to {self.end.isoformat()}"

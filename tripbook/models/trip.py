from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, model_validator


class Trip(BaseModel):
    """A stored trip. Nothing here is enforced; see `is_valid_submission`."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str = ""
    category: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TripCreate(BaseModel):
    name: str
    category: str
    start_date: date
    end_date: date


class TripUpdate(BaseModel):
    name: Optional[str] = None
    category: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @model_validator(mode="after")
    def _at_least_one(self) -> "TripUpdate":
        if all(
            getattr(self, field) is None
            for field in ("name", "category", "start_date", "end_date")
        ):
            raise ValueError("at least one field must be provided")
        return self


class TripDraft(BaseModel):
    """Possibly incomplete form contents, checked before the save action is enabled."""

    name: str = ""
    category: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None


class TripBuckets(BaseModel):
    reference_date: date
    current: List[Trip]
    upcoming: List[Trip]
    past: List[Trip]


class SubmissionCheck(BaseModel):
    valid: bool


class CategoryOptions(BaseModel):
    categories: List[str]
    unselected: str
    default: str

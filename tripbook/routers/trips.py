from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from tripbook.core.config import Settings
from tripbook.core.errors import TripNotFoundError
from tripbook.db.dal import Database
from tripbook.models import (
    Trip,
    TripBuckets,
    TripCreate,
    TripDraft,
    TripUpdate,
    SubmissionCheck,
)
from tripbook.routers.deps import get_app_settings, get_db
from tripbook.services.classifier import classify, reference_date
from tripbook.services.validation import is_valid_submission

router = APIRouter(prefix="/trips", tags=["trips"])

INVALID_SUBMISSION = "trip cannot be saved: name, category and date range are required"


def _parse_timestamp(raw: Any) -> Optional[datetime]:
    if isinstance(raw, str):
        return datetime.fromisoformat(raw.replace("Z", ""))
    return raw


def _row_to_trip(row: dict) -> Trip:
    start_raw = row.get("start_date")
    end_raw = row.get("end_date")
    return Trip(
        id=int(row["id"]),
        name=row.get("name") or "",
        category=row.get("category") or "",
        start_date=date.fromisoformat(start_raw) if start_raw else None,
        end_date=date.fromisoformat(end_raw) if end_raw else None,
        created_at=_parse_timestamp(row.get("created_at")),
        updated_at=_parse_timestamp(row.get("updated_at")),
    )


def _load_trip(db: Database, trip_id: int) -> Trip:
    row = db.get_trip(trip_id)
    if not row:
        raise TripNotFoundError(f"trip {trip_id} not found")
    return _row_to_trip(row)


def _check_submission(
    settings: Settings,
    name: Optional[str],
    category: Optional[str],
    start_date: Optional[date],
    end_date: Optional[date],
) -> None:
    if not is_valid_submission(
        name, category, start_date, end_date, settings.unselected_category
    ):
        raise HTTPException(status_code=422, detail=INVALID_SUBMISSION)
    if category not in settings.categories:
        raise HTTPException(
            status_code=400, detail=f"unsupported category '{category}'"
        )


@router.get("/", response_model=list[Trip], summary="List trips by start date")
async def list_trips(db: Database = Depends(get_db)):
    return [_row_to_trip(r) for r in db.list_trips()]


@router.get(
    "/buckets",
    response_model=TripBuckets,
    summary="Trips grouped into current, upcoming and past",
)
async def list_trip_buckets(
    now: Optional[date] = Query(
        None, description="Reference date (YYYY-MM-DD); defaults to today"
    ),
    db: Database = Depends(get_db),
):
    today = reference_date(now)
    trips = [_row_to_trip(r) for r in db.list_trips()]
    buckets = classify(trips, today)
    return TripBuckets(
        reference_date=today,
        current=buckets.current,
        upcoming=buckets.upcoming,
        past=buckets.past,
    )


@router.post(
    "/validate",
    response_model=SubmissionCheck,
    summary="Check whether a trip form may be submitted",
)
async def validate_trip(
    payload: TripDraft, settings: Settings = Depends(get_app_settings)
):
    return SubmissionCheck(
        valid=is_valid_submission(
            payload.name,
            payload.category,
            payload.start_date,
            payload.end_date,
            settings.unselected_category,
        )
    )


@router.post(
    "/",
    response_model=Trip,
    status_code=status.HTTP_201_CREATED,
    summary="Create trip",
)
async def create_trip(
    payload: TripCreate,
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    _check_submission(
        settings, payload.name, payload.category, payload.start_date, payload.end_date
    )
    trip_id = db.create_trip(
        name=payload.name,
        category=payload.category,
        start_date=payload.start_date,
        end_date=payload.end_date,
    )
    return _load_trip(db, trip_id)


@router.get("/{trip_id}", response_model=Trip, summary="Get trip details")
async def get_trip(trip_id: int, db: Database = Depends(get_db)):
    return _load_trip(db, trip_id)


@router.patch("/{trip_id}", response_model=Trip, summary="Edit trip")
async def update_trip(
    trip_id: int,
    payload: TripUpdate,
    db: Database = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
):
    current = _load_trip(db, trip_id)
    updates: dict[str, object] = {
        field: value
        for field, value in payload.model_dump().items()
        if value is not None
    }
    merged = current.model_copy(update=updates)
    _check_submission(
        settings, merged.name, merged.category, merged.start_date, merged.end_date
    )
    db.update_trip(trip_id, **updates)
    return _load_trip(db, trip_id)


@router.delete(
    "/{trip_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete trip",
)
async def delete_trip(trip_id: int, db: Database = Depends(get_db)):
    db.delete_trip(trip_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

"""Pydantic domain models for trips."""

from .trip import (
    Trip,
    TripCreate,
    TripUpdate,
    TripDraft,
    TripBuckets,
    SubmissionCheck,
    CategoryOptions,
)

__all__ = [
    "Trip",
    "TripCreate",
    "TripUpdate",
    "TripDraft",
    "TripBuckets",
    "SubmissionCheck",
    "CategoryOptions",
]

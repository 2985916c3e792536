"""Pre-submission check for the add/edit trip form.

The store itself accepts any combination of fields; this predicate is the
only thing standing between a half-filled form and a write. It answers yes
or no and never explains why, so callers simply disable their save action.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from tripbook.core.config import get_settings


def is_valid_submission(
    name: Optional[str],
    category: Optional[str],
    start_date: Optional[date],
    end_date: Optional[date],
    unselected: Optional[str] = None,
) -> bool:
    """Return True when the candidate trip may be persisted.

    - `name` must be a non-empty string (whitespace counts as content);
    - `category` must be something other than the `unselected` placeholder,
      which defaults to the configured `unselected_category`;
    - both dates must be present with `start_date <= end_date`.
    """
    if unselected is None:
        unselected = get_settings().unselected_category
    if not name:
        return False
    if category is None or category == unselected:
        return False
    if start_date is None or end_date is None:
        return False
    return start_date <= end_date

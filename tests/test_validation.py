from datetime import date

import pytest

from tripbook.core.config import get_settings
from tripbook.services.validation import is_valid_submission

D1 = date(2024, 6, 1)
D2 = date(2024, 6, 10)


def test_valid_submission():
    assert is_valid_submission("Yosemite", "Vacation", D1, D2, "Select") is True


def test_empty_name_rejected():
    assert is_valid_submission("", "Vacation", D1, D2, "Select") is False


def test_whitespace_name_is_not_trimmed():
    assert is_valid_submission(" ", "Vacation", D1, D2, "Select") is True


def test_sentinel_category_rejected():
    assert is_valid_submission("Yosemite", "Select", D1, D2, "Select") is False


def test_start_after_end_rejected():
    assert is_valid_submission("Yosemite", "Vacation", D2, D1, "Select") is False


def test_single_day_trip_is_valid():
    assert is_valid_submission("Day hike", "Adventure", D1, D1, "Select") is True


@pytest.mark.parametrize(
    "start,end", [(None, D2), (D1, None), (None, None)], ids=["no-start", "no-end", "no-dates"]
)
def test_missing_dates_rejected(start, end):
    assert is_valid_submission("Yosemite", "Vacation", start, end, "Select") is False


def test_missing_category_rejected():
    assert is_valid_submission("Yosemite", None, D1, D2, "Select") is False


def test_sentinel_is_configurable():
    assert is_valid_submission("Yosemite", "Select", D1, D2, unselected="unselected") is True
    assert is_valid_submission("Yosemite", "unselected", D1, D2, unselected="unselected") is False


@pytest.fixture
def configured_sentinel(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TRIPBOOK_UNSELECTED_CATEGORY", "unselected")
    get_settings.cache_clear()
    yield "unselected"
    get_settings.cache_clear()


def test_default_sentinel_comes_from_settings(configured_sentinel):
    assert get_settings().unselected_category == configured_sentinel
    assert is_valid_submission("Yosemite", "unselected", D1, D2) is False
    assert is_valid_submission("Yosemite", "Select", D1, D2) is True

from datetime import date

import pytest
from fastapi.testclient import TestClient

from tripbook.core.config import Settings
from tripbook.db.dal import Database
from tripbook.db.migrate import apply_migrations
from tripbook.main import create_app


@pytest.fixture
def settings(tmp_path):
    s = Settings(data_dir=tmp_path, db_filename="test.sqlite3")
    s.init_post_load()
    return s


@pytest.fixture
def db(settings):
    apply_migrations(settings.db_path, settings.default_category)
    return Database(settings.db_path)


@pytest.fixture
def client(settings):
    app = create_app(settings_override=settings)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def trip_payload():
    return {
        "name": "Yosemite",
        "category": "Vacation",
        "start_date": date(2024, 6, 1).isoformat(),
        "end_date": date(2024, 6, 10).isoformat(),
    }

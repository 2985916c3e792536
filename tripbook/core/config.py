from functools import lru_cache
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment with defaults.

    Variables are prefixed with TRIPBOOK_ (e.g. TRIPBOOK_DATA_DIR,
    TRIPBOOK_CATEGORIES='["Vacation","Business"]').
    """

    model_config = SettingsConfigDict(
        env_prefix="TRIPBOOK_", env_file=".env", case_sensitive=False
    )

    # Basic app metadata
    app_name: str = "Tripbook"
    debug: bool = False
    version: str = "0.1.0"

    # Data & persistence
    data_dir: Path = Path("data")
    db_filename: str = "trips.sqlite3"
    db_path: Optional[Path] = None  # derived if not provided

    # Trip categories offered by the add/edit form
    categories: List[str] = ["Vacation", "Business", "Family Visit", "Adventure"]
    unselected_category: str = "Select"
    default_category: str = "Vacation"

    def init_post_load(self) -> None:
        """Finalize derived fields and ensure directories exist."""
        if self.db_path is None:
            self.db_path = self.data_dir / self.db_filename
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        if not self.categories:
            raise ValueError("At least one trip category must be configured")
        if self.unselected_category in self.categories:
            raise ValueError(
                f"unselected_category '{self.unselected_category}' "
                "must not be one of the configured categories"
            )
        if self.default_category not in self.categories:
            raise ValueError(
                f"default_category '{self.default_category}' is not a configured category"
            )


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    settings.init_post_load()
    return settings

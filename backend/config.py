"""
tableview configuration: all environment variables in one place.

Read from environment at runtime. Nothing is required: an empty
TABLEVIEW_RECORDSET_PATH serves the built-in demo contacts.
"""

from __future__ import annotations

import os


class Settings:
    """Application settings from environment variables."""

    # Recordset
    RECORDSET_PATH: str = os.environ.get("TABLEVIEW_RECORDSET_PATH", "")
    PRIMARY_COLUMN: str = os.environ.get("TABLEVIEW_PRIMARY_COLUMN", "fullname")

    # Presentation
    TITLE: str = os.environ.get("TABLEVIEW_TITLE", "Contacts")

    # Sorting: LC_COLLATE locale applied at startup, empty keeps the process default
    COLLATION_LOCALE: str = os.environ.get("TABLEVIEW_COLLATION_LOCALE", "")

    # Application
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")
    ENVIRONMENT: str = os.environ.get("ENVIRONMENT", "development")


# Singleton instance
settings = Settings()

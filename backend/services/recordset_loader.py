"""
Recordset loading: reads the JSON recordset file the table is served from.

The loaded recordset is kept in `recordset_store` for the lifetime of the
process. It is never written to; every request reads the same object.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from backend.models.recordset import RecordsetFile
from tableview.kernel.recordset import InMemoryRecordset
from tableview.kernel.types import Column

logger = logging.getLogger(__name__)


class RecordsetLoadError(Exception):
    """Recordset file is missing, unreadable, or malformed."""
    pass


def load_recordset(path: str | Path) -> InMemoryRecordset:
    """Parse and validate a recordset file."""
    file_path = Path(path)
    try:
        raw = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise RecordsetLoadError(f"cannot read {file_path}: {e}") from e

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise RecordsetLoadError(f"{file_path} is not valid JSON: {e}") from e

    try:
        document = RecordsetFile.model_validate(data)
    except ValidationError as e:
        raise RecordsetLoadError(f"{file_path} does not match the recordset format: {e}") from e

    recordset = document.to_recordset()
    logger.info("Loaded %d rows x %d columns from %s", len(recordset), len(recordset.columns), file_path)
    return recordset


# ---------------------------------------------------------------------------
# Demo data
# ---------------------------------------------------------------------------

DEMO_COLUMNS = [
    Column("fullname", "Full Name"),
    Column("emailaddress1", "Email"),
    Column("telephone1", "Phone"),
    Column("address1_city", "City"),
    Column("jobtitle", "Job Title"),
]

_DEMO_PEOPLE = [
    ("Alice Smith", "Seattle", "Account Manager"),
    ("Brian Johnson", "Portland", "Buyer"),
    ("Carla Williams", "Denver", "Purchasing Manager"),
    ("David Brown", "Austin", "Owner"),
    ("Elena Jones", "Chicago", "Sales Director"),
    ("Frank Garcia", "Boston", "Buyer"),
    ("Grace Miller", "Seattle", "Office Manager"),
    ("Hector Davis", "Miami", "Account Manager"),
    ("Irene Rodriguez", "Atlanta", "Owner"),
    ("James Martinez", "Denver", "Purchasing Agent"),
    ("Karen Hernandez", "Phoenix", "Sales Director"),
    ("Liam Lopez", "Dallas", "Buyer"),
    ("Maria Gonzalez", "Chicago", "Owner"),
    ("Nathan Wilson", "Boston", "Office Manager"),
    ("Olivia Anderson", "Portland", "Account Manager"),
    ("Paul Thomas", "Austin", "Purchasing Manager"),
    ("Quinn Taylor", "Miami", "Buyer"),
    ("Rosa Moore", "Seattle", "Owner"),
    ("Samuel Jackson", "Atlanta", "Sales Director"),
    ("Tara Young", "Phoenix", "Office Manager"),
    ("Uma Martin", "Dallas", "Account Manager"),
    ("Victor Lee", "Denver", "Buyer"),
    ("Wendy Perez", "Chicago", "Purchasing Agent"),
    ("Xavier Thompson", "Boston", "Owner"),
    ("Yvonne White", "Portland", "Sales Director"),
    ("Zack Harris", "Austin", "Buyer"),
    ("Amy Sanchez", "Miami", "Account Manager"),
    ("Ben Clark", "Seattle", "Office Manager"),
    ("Chloe Ramirez", "Atlanta", "Purchasing Manager"),
    ("Dan Lewis", "Phoenix", "Owner"),
]


def demo_recordset_dict() -> dict:
    """The built-in demo contacts in recordset-file form."""
    rows = []
    for i, (name, city, title) in enumerate(_DEMO_PEOPLE, start=1):
        first, last = name.lower().split(" ", 1)
        rows.append(
            {
                "id": f"contact_{i:03d}",
                "values": {
                    "fullname": name,
                    "emailaddress1": f"{first}.{last}@example.com",
                    "telephone1": f"555-01{i:02d}",
                    "address1_city": city,
                    "jobtitle": title,
                },
            }
        )
    return {"columns": [c.to_dict() for c in DEMO_COLUMNS], "rows": rows}


def demo_recordset() -> InMemoryRecordset:
    return RecordsetFile.model_validate(demo_recordset_dict()).to_recordset()


class RecordsetStore:
    """Holds the recordset served by the app."""

    def __init__(self) -> None:
        self.recordset: InMemoryRecordset = InMemoryRecordset.empty()
        self.source: str = "empty"

    def load(self, path: str) -> InMemoryRecordset:
        """
        Load from `path`, or the demo contacts when no path is configured.
        A broken file is logged and replaced by an empty recordset so the
        page still renders.
        """
        if not path:
            self.recordset = demo_recordset()
            self.source = "demo"
            logger.info("No recordset path configured, serving %d demo contacts", len(self.recordset))
            return self.recordset

        try:
            self.recordset = load_recordset(path)
            self.source = path
        except RecordsetLoadError as e:
            logger.warning("Recordset load failed, serving an empty table: %s", e)
            self.recordset = InMemoryRecordset.empty()
            self.source = "empty"
        return self.recordset


# Singleton instance
recordset_store = RecordsetStore()

"""
Kernel test fixtures.

Recordsets are small, in-memory, and built fresh for every test.
"""

import pytest

from tableview.kernel.recordset import InMemoryRecordset
from tableview.kernel.types import Column

CONTACT_NAMES = [
    "Alice Smith",
    "Brian Johnson",
    "Carla Williams",
    "David Brown",
    "Elena Jones",
    "Frank Garcia",
    "Grace Miller",
    "Hector Davis",
    "Irene Rodriguez",
    "James Martinez",
    "Karen Hernandez",
    "Liam Lopez",
    "Maria Gonzalez",
    "Nathan Wilson",
    "Olivia Anderson",
    "Paul Thomas",
    "Quinn Keller",
    "Rosa Moore",
    "Samuel Jackson",
    "Tara Young",
]


@pytest.fixture
def contacts_20():
    """20 rows, single fullname column, alphabetical by first name."""
    columns = [Column("fullname", "Full Name")]
    rows = [(f"row_{i:02d}", {"fullname": name}) for i, name in enumerate(CONTACT_NAMES, start=1)]
    return InMemoryRecordset(columns, rows)


@pytest.fixture
def numbered_30():
    """30 rows named Item 01 .. Item 30 in order, plus a city column."""
    columns = [Column("fullname", "Full Name"), Column("city", "City")]
    rows = [
        (f"row_{i:02d}", {"fullname": f"Item {i:02d}", "city": "Oslo" if i % 2 else "Lima"})
        for i in range(1, 31)
    ]
    return InMemoryRecordset(columns, rows)


@pytest.fixture
def mixed_recordset():
    """Rows with absent values, duplicates, and special characters."""
    columns = [
        Column("fullname", "Full Name"),
        Column("email", "Email"),
        Column("city", "City"),
    ]
    rows = [
        ("r1", {"fullname": "Bob Stone", "email": "bob@example.com", "city": "Denver"}),
        ("r2", {"fullname": "alice Wong", "email": None, "city": "Austin"}),
        ("r3", {"fullname": "Carl (C++) Dev", "email": "carl@example.com"}),
        ("r4", {"fullname": "Bob Stone", "email": "bob2@example.com", "city": "Boston"}),
        ("r5", {"email": "nobody@example.com", "city": "Denver"}),
    ]
    return InMemoryRecordset(columns, rows)

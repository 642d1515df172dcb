#!/usr/bin/env python3
"""
Write the demo contacts recordset to a JSON file.

Usage:
    python scripts/seed_demo_contacts.py [output_path]

Defaults to ./contacts.json. Point TABLEVIEW_RECORDSET_PATH at the file to
serve it instead of the built-in copy.
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, ".")

from backend.services.recordset_loader import demo_recordset_dict, load_recordset


def main() -> int:
    parser = argparse.ArgumentParser(description="Write the demo contacts recordset.")
    parser.add_argument("output", nargs="?", default="contacts.json", help="Output JSON path")
    args = parser.parse_args()

    output = Path(args.output)
    output.write_text(json.dumps(demo_recordset_dict(), indent=2, ensure_ascii=False) + "\n", encoding="utf-8")

    # Read it back through the loader so a broken file never ships
    recordset = load_recordset(output)
    print(f"Wrote {len(recordset)} contacts to {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

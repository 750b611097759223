#!/usr/bin/env python3
"""
Check a seed document for integrity problems.

Usage:
    python check_data.py                     # Check the configured data source
    python check_data.py path/to/seed.json   # Check a specific file or URL
    python check_data.py --verbose           # Debug logging
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.repositories import DatasetLoader
from app.services.integrity import validate_dataset
from settings import DATA_SOURCE
from settings.logging import setup_logging


def run_check(source: str) -> bool:
    """Load and validate one document, print a report."""
    state = DatasetLoader(source).load()

    print("\n" + "=" * 60)
    print("DATASET INTEGRITY REPORT")
    print("=" * 60)
    print(f"Source: {source}")

    if not state.is_ready:
        print(f"\n❌ Load failed: {state.error}\n")
        return False

    result = validate_dataset(state.dataset)
    status = "✅" if result["valid"] else "❌"
    print(f"\nStatus {status}")
    for key, value in result["stats"].items():
        print(f"  {key.replace('_', ' ').capitalize()}: {value:,}")

    for issue in result["issues"]:
        print(f"  ❌ {issue}")
    for warning in result["warnings"]:
        print(f"  ⚠️  {warning}")

    print("\n" + "=" * 60 + "\n")
    return result["valid"]


def main():
    args = sys.argv[1:]
    verbose = "--verbose" in args
    sources = [a for a in args if not a.startswith("--")]

    setup_logging(level="DEBUG" if verbose else "WARNING", to_file=False)

    ok = run_check(sources[0] if sources else DATA_SOURCE)
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Marina Inventory Manager — CLI Entry Point

Usage:
    python main.py BoatData.csv                  # Load, run the session, save on exit
    python main.py BoatData.csv --capacity 200   # Allow more boats than the default 120
    python main.py BoatData.csv --log-level DEBUG

Environment:
    MARINA_CAPACITY    default store capacity (overridden by --capacity)
    MARINA_LOG_LEVEL   default log level (overridden by --log-level)
"""

import argparse
import sys

from marina.config.constants import default_capacity, default_log_level
from marina.models.errors import InventoryFileError
from marina.services.inventory import MarinaInventory
from marina.services.session import MarinaSession
from marina.storage.csv_store import load_inventory, save_inventory
from marina.utils.logger import get_logger, set_level

logger = get_logger("marina.cli")


def build_parser():
    parser = argparse.ArgumentParser(
        description="Marina Inventory Manager -- boats, locations and monthly billing",
    )
    parser.add_argument("csv_file", help="Boat data file, read at start and rewritten on exit")
    parser.add_argument(
        "--capacity", type=int, default=None,
        help="Maximum number of boats (default: $MARINA_CAPACITY or 120)",
    )
    parser.add_argument(
        "--log-level", type=str, default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Diagnostic log level (default: $MARINA_LOG_LEVEL or INFO)",
    )
    return parser


def load(csv_file, inventory):
    """Load the inventory file, reporting (not failing on) an unreadable file."""
    try:
        loaded = load_inventory(csv_file, inventory)
    except InventoryFileError as e:
        logger.error("%s", e)
        loaded = 0
    print(f"Loaded {loaded} boats from '{csv_file}'")
    return loaded


def save(csv_file, inventory):
    """Write the inventory back. Returns True on success."""
    try:
        save_inventory(csv_file, inventory)
    except InventoryFileError as e:
        logger.error("%s", e)
        return False
    print(f"Saved boats to '{csv_file}'")
    return True


def main(argv=None, input_fn=input):
    parser = build_parser()
    args = parser.parse_args(argv)

    set_level(args.log_level or default_log_level())

    capacity = args.capacity if args.capacity is not None else default_capacity()
    if capacity <= 0:
        parser.error(f"--capacity must be positive, got {capacity}")

    inventory = MarinaInventory(capacity=capacity)
    load(args.csv_file, inventory)

    session = MarinaSession(inventory, input_fn=input_fn)
    session.run()

    return 0 if save(args.csv_file, inventory) else 1


if __name__ == "__main__":
    sys.exit(main())

"""Loyalty database management CLI.

Creates and drops the Customer and Order tables on SQL-backed providers.
The default in-memory configuration needs neither.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
"""

import argparse
import sys


def setup_database():
    """Create the database schema for the loyalty domain."""
    from loyalty.domain import loyalty
    from loyalty.utils.db import setup_db

    print("Initializing loyalty domain...")
    loyalty.init()
    print("Creating loyalty database schema...")
    setup_db(loyalty)
    print("Done.")


def drop_database():
    """Drop the database schema for the loyalty domain."""
    from loyalty.domain import loyalty
    from loyalty.utils.db import drop_db

    print("Initializing loyalty domain...")
    loyalty.init()
    print("Dropping loyalty database schema...")
    drop_db(loyalty)
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Loyalty database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()

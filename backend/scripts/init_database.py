#!/usr/bin/env python3
"""
Create the Apparel Store schema
===============================

Creates every table for the configured DATABASE_URL (existing tables are
left as they are).

Usage:
    python3 scripts/init_database.py
    python3 scripts/init_database.py --reset   # drop and recreate all tables
"""
import argparse
import logging
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from dotenv import load_dotenv  # noqa: E402

load_dotenv()

from apparel_store.core.config import settings  # noqa: E402
from apparel_store.core.database import Base, engine, init_db  # noqa: E402


def main():
    parser = argparse.ArgumentParser(description='Create the Apparel Store database schema')
    parser.add_argument('--reset', action='store_true', help='Drop all tables before creating them')
    args = parser.parse_args()

    logging.basicConfig(level=settings.LOG_LEVEL.upper())

    if args.reset:
        print("🗑️  Dropping all tables...")
        # Import models so drop_all sees every table
        from apparel_store import models  # noqa: F401
        Base.metadata.drop_all(bind=engine)

    print("🔨 Creating tables...")
    init_db()

    print(f"✅ Schema ready: {', '.join(sorted(Base.metadata.tables))}")


if __name__ == '__main__':
    main()

#!/usr/bin/env python3
"""
Service Catalog Seed Script
Inserts the default service catalog when the services table is empty.

Usage:
    python -m scripts.seed_services
"""
import sys
import os

# Add the parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy.orm import Session
from app.database import SessionLocal, init_db
from app.services.catalog import seed_services


def main():
    # Ensure tables exist
    init_db()

    db: Session = SessionLocal()
    try:
        inserted = seed_services(db)
        if inserted:
            print(f"Inserted {inserted} services.")
        else:
            print("Service catalog already populated. Nothing to do.")
    except Exception as e:
        print(f"Error seeding services: {e}")
        db.rollback()
        sys.exit(1)
    finally:
        db.close()


if __name__ == "__main__":
    main()

"""
Default service catalog and the idempotent seeding routine.
"""
import logging
from decimal import Decimal

from sqlalchemy.orm import Session

from ...models.db_models import ServiceDB, ServiceType

logger = logging.getLogger(__name__)


DEFAULT_SERVICES = [
    {"id": 1, "name": "Business Formation", "description": "Complete business formation services including LLC and Corporation setup", "category": "formation", "one_time_price": Decimal("299.00"), "is_popular": True, "sort_order": 1},
    {"id": 2, "name": "EIN Application", "description": "Federal Tax ID (EIN) application service", "category": "tax", "one_time_price": Decimal("99.00"), "sort_order": 2},
    {"id": 3, "name": "Registered Agent", "description": "Professional registered agent service", "category": "compliance", "service_type": ServiceType.RECURRING.value, "one_time_price": Decimal("149.00"), "recurring_price": Decimal("149.00"), "recurring_interval": "yearly", "sort_order": 3},
    {"id": 5, "name": "Annual Report Filing", "description": "Annual report filing service for business compliance", "category": "compliance", "one_time_price": Decimal("199.00"), "sort_order": 5},
    {"id": 6, "name": "Operating Agreement", "description": "Custom operating agreement drafting service", "category": "legal", "one_time_price": Decimal("299.00"), "sort_order": 6},
    {"id": 9, "name": "Legal Documents", "description": "Various legal document preparation services", "category": "legal", "one_time_price": Decimal("199.00"), "sort_order": 9},
    {"id": 10, "name": "S-Corp Election", "description": "S-Corporation tax election filing service", "category": "tax", "one_time_price": Decimal("149.00"), "sort_order": 10},
    {"id": 11, "name": "BOIR Filing", "description": "Beneficial Ownership Information Report filing service", "category": "compliance", "one_time_price": Decimal("199.00"), "is_popular": True, "sort_order": 11},
    {"id": 30, "name": "Documents", "description": "Document management and filing services", "category": "documents", "one_time_price": Decimal("99.00"), "sort_order": 30},
]


def seed_services(db: Session) -> int:
    """
    Insert the default catalog when the services table is empty.

    Returns the number of services inserted (0 if the catalog already exists).
    """
    existing = db.query(ServiceDB).count()
    if existing > 0:
        logger.info(f"Found {existing} existing services. Skipping insertion.")
        return 0

    for record in DEFAULT_SERVICES:
        db.add(ServiceDB(**record))
    db.commit()

    logger.info(f"Inserted {len(DEFAULT_SERVICES)} services")
    return len(DEFAULT_SERVICES)

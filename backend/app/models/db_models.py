"""
ParaFort Compliance - SQLAlchemy ORM Models
Database models for persistent storage
"""
from datetime import datetime, timezone
from enum import Enum
from sqlalchemy import Column, String, Integer, Numeric, DateTime, Text, Boolean
from ..database import Base


class ServiceType(str, Enum):
    """How a catalog service is billed."""
    ONE_TIME = "one_time"
    RECURRING = "recurring"
    SUBSCRIPTION_PLAN = "subscription_plan"


class ServiceDB(Base):
    """A purchasable service in the catalog."""
    __tablename__ = "services"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    category = Column(String(50), nullable=True)  # formation, compliance, tax, legal, ...
    service_type = Column(String(30), nullable=False, default=ServiceType.ONE_TIME.value)

    # Prices in dollars
    one_time_price = Column(Numeric(10, 2), nullable=True)
    recurring_price = Column(Numeric(10, 2), nullable=True)
    recurring_interval = Column(String(20), nullable=True)  # monthly, yearly

    is_active = Column(Boolean, default=True)
    is_popular = Column(Boolean, default=False)
    sort_order = Column(Integer, default=0)

    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, default=lambda: datetime.now(timezone.utc),
                        onupdate=lambda: datetime.now(timezone.utc))

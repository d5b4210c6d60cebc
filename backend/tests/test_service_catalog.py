"""
Tests for the service catalog and its seed routine.
"""
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from app.database import Base
from app.models.db_models import ServiceDB
from app.services.catalog import (
    ServiceCatalog, CatalogUnavailable, ServiceNotFound,
    DEFAULT_SERVICES, purchase_url, seed_services, serialize_service,
)


def make_service(**overrides):
    fields = {
        "id": 5,
        "name": "Annual Report Filing",
        "description": "Annual report filing service for business compliance",
        "category": "compliance",
        "service_type": "one_time",
        "one_time_price": Decimal("199.00"),
        "recurring_price": None,
        "recurring_interval": None,
        "is_active": True,
        "is_popular": False,
        "sort_order": 5,
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


@pytest.fixture
def db_session():
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


# =============================================================================
# TEST: CATALOG QUERIES (MOCKED SESSION)
# =============================================================================

class TestServiceCatalogMocked:

    def test_find_by_name(self):
        mock_db = MagicMock()
        mock_db.query.return_value.filter.return_value.order_by.return_value.all.return_value = [
            make_service(id=1, name="Business Formation"),
            make_service(),
        ]

        service = ServiceCatalog(mock_db).find_by_name("Annual Report Filing")

        assert service.id == 5

    def test_find_by_name_missing(self):
        mock_db = MagicMock()
        mock_db.query.return_value.filter.return_value.order_by.return_value.all.return_value = [
            make_service(id=1, name="Business Formation"),
        ]

        with pytest.raises(ServiceNotFound):
            ServiceCatalog(mock_db).find_by_name("Annual Report Filing")

    def test_database_error_is_catalog_unavailable(self):
        mock_db = MagicMock()
        mock_db.query.side_effect = SQLAlchemyError("connection refused")

        with pytest.raises(CatalogUnavailable):
            ServiceCatalog(mock_db).list_services()

    def test_get_service_missing(self):
        mock_db = MagicMock()
        mock_db.query.return_value.filter.return_value.first.return_value = None

        with pytest.raises(ServiceNotFound):
            ServiceCatalog(mock_db).get_service(999)


# =============================================================================
# TEST: SERIALIZATION & HANDOFF
# =============================================================================

class TestSerialization:

    def test_serialize_service(self):
        data = serialize_service(make_service())

        assert data["id"] == 5
        assert data["name"] == "Annual Report Filing"
        assert data["oneTimePrice"] == "199.00"
        assert data["recurringPrice"] is None
        assert data["isActive"] is True

    def test_purchase_url(self):
        assert purchase_url(5) == "/service-purchase/5"


# =============================================================================
# TEST: SEEDING (SQLITE)
# =============================================================================

class TestSeedServices:

    def test_seed_inserts_defaults_once(self, db_session):
        assert seed_services(db_session) == len(DEFAULT_SERVICES)
        assert seed_services(db_session) == 0
        assert db_session.query(ServiceDB).count() == len(DEFAULT_SERVICES)

    def test_seed_sets_timestamps(self, db_session):
        seed_services(db_session)

        service = db_session.query(ServiceDB).filter(ServiceDB.id == 5).one()

        assert service.created_at is not None
        assert service.updated_at is not None

    def test_seeded_catalog_resolves_annual_report(self, db_session):
        seed_services(db_session)

        service = ServiceCatalog(db_session).find_by_name("Annual Report Filing")

        assert service.id == 5
        assert service.one_time_price == Decimal("199.00")

    def test_inactive_services_hidden(self, db_session):
        seed_services(db_session)
        db_session.query(ServiceDB).filter(ServiceDB.id == 5).update({"is_active": False})
        db_session.commit()

        names = [s.name for s in ServiceCatalog(db_session).list_services()]

        assert "Annual Report Filing" not in names
        with pytest.raises(ServiceNotFound):
            ServiceCatalog(db_session).find_by_name("Annual Report Filing")

    def test_list_ordered_by_sort_order(self, db_session):
        seed_services(db_session)

        orders = [s.sort_order for s in ServiceCatalog(db_session).list_services()]

        assert orders == sorted(orders)

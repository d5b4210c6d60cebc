"""
Service Catalog

Read access to the purchasable services table, plus the purchase handoff
URL a checkout redirect needs.

Failures to reach the catalog, and lookups with no matching active service,
both surface as CatalogUnavailable so the annual report page can fall back
to its "currently unavailable" message.
"""
import logging
from typing import Any, Dict, List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ...models.db_models import ServiceDB

logger = logging.getLogger(__name__)


PURCHASE_ROUTE = "/service-purchase/{service_id}"


class CatalogUnavailable(Exception):
    """Raised when the catalog cannot be read or has no matching service."""
    pass


class ServiceNotFound(CatalogUnavailable):
    """The catalog was read but holds no matching active service."""
    pass


def purchase_url(service_id: int) -> str:
    """Checkout route for a resolved service."""
    return PURCHASE_ROUTE.format(service_id=service_id)


def serialize_service(service: ServiceDB) -> Dict[str, Any]:
    """Catalog wire shape, camelCase to match the portal client."""
    return {
        "id": service.id,
        "name": service.name,
        "description": service.description,
        "category": service.category,
        "serviceType": service.service_type,
        "oneTimePrice": _price(service.one_time_price),
        "recurringPrice": _price(service.recurring_price),
        "recurringInterval": service.recurring_interval,
        "isActive": bool(service.is_active),
        "isPopular": bool(service.is_popular),
        "sortOrder": service.sort_order,
    }


def _price(value) -> Any:
    # Numeric columns come back as Decimal; the client expects "199.00"
    if value is None:
        return None
    return f"{value:.2f}"


class ServiceCatalog:
    """Read-only catalog queries over a database session."""

    def __init__(self, db_session: Session):
        """Initialize with database session."""
        self.db = db_session

    def list_services(self) -> List[ServiceDB]:
        """Active services in display order."""
        try:
            return self.db.query(ServiceDB).filter(
                ServiceDB.is_active.is_(True)
            ).order_by(ServiceDB.sort_order, ServiceDB.id).all()
        except SQLAlchemyError as e:
            logger.error(f"Service catalog query failed: {e}")
            raise CatalogUnavailable("Service catalog could not be read") from e

    def get_service(self, service_id: int) -> ServiceDB:
        try:
            service = self.db.query(ServiceDB).filter(ServiceDB.id == service_id).first()
        except SQLAlchemyError as e:
            logger.error(f"Service catalog query failed: {e}")
            raise CatalogUnavailable("Service catalog could not be read") from e

        if service is None:
            raise ServiceNotFound(f"No service with id {service_id}")
        return service

    def find_by_name(self, name: str) -> ServiceDB:
        """First active service whose name matches exactly."""
        for service in self.list_services():
            if service.name == name:
                return service

        logger.warning(f"Service '{name}' not found in catalog")
        raise ServiceNotFound(f"Service '{name}' is not in the catalog")

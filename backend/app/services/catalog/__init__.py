"""ParaFort Compliance - Service Catalog"""
from .catalog_service import (
    ServiceCatalog, CatalogUnavailable, ServiceNotFound, purchase_url, serialize_service,
)
from .seed_data import DEFAULT_SERVICES, seed_services

__all__ = [
    "ServiceCatalog",
    "CatalogUnavailable",
    "ServiceNotFound",
    "purchase_url",
    "serialize_service",
    "DEFAULT_SERVICES",
    "seed_services",
]

"""
Service Catalog API Routes

Read-only listing of purchasable services.
"""
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ..database import get_db
from ..services.catalog import (
    ServiceCatalog, CatalogUnavailable, ServiceNotFound, serialize_service,
)


router = APIRouter(prefix="/api/services", tags=["services"])


@router.get("/all", response_model=list)
async def list_services(db: Session = Depends(get_db)):
    """All active services in display order."""
    catalog = ServiceCatalog(db)
    try:
        services = catalog.list_services()
    except CatalogUnavailable as e:
        raise HTTPException(status_code=503, detail=str(e))

    return [serialize_service(s) for s in services]


@router.get("/{service_id}", response_model=dict)
async def get_service(service_id: int, db: Session = Depends(get_db)):
    """One service by id."""
    catalog = ServiceCatalog(db)
    try:
        service = catalog.get_service(service_id)
    except ServiceNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except CatalogUnavailable as e:
        raise HTTPException(status_code=503, detail=str(e))

    return serialize_service(service)

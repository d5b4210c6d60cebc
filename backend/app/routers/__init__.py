"""ParaFort Compliance - API Routers"""
from .services import router as services_router
from .annual_reports import router as annual_reports_router

__all__ = [
    "services_router",
    "annual_reports_router",
]

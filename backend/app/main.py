"""
ParaFort Compliance - FastAPI Application

Main entry point for the compliance portal backend.

Architecture:
- Rules dataset (JSON) → RulesTable (loaded once, read-only)
- RulesTable + (state, entity type) → FeeDerivation (pure)
- FeeDerivation → Annual report requirement card
- Service catalog → "Start Filing" purchase handoff
"""
import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routers import services_router, annual_reports_router
from .database import init_db
from .services.compliance import get_rules_table

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO"),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize database and rules table on startup."""
    init_db()
    get_rules_table()
    yield

# Create FastAPI app
app = FastAPI(
    lifespan=lifespan,
    title="ParaFort Compliance API",
    description="""
    ParaFort Compliance API - Annual Report Requirements and Service Catalog

    ## Annual Reports
    1. **Options**: states and entity types for selection
    2. **Requirements**: due date, base fee, entity-adjusted fee, filing interval
    3. **Filing Service**: Start Filing call-to-action resolved from the catalog
    4. **Timeline**: reminder schedule for a concrete due date

    ## Key Principles
    - Rule tables are a versioned dataset, immutable once loaded
    - Fee derivation is a pure function of (state, entity type)
    - Unsupported combinations return an explicit placeholder, never a number
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(services_router)
app.include_router(annual_reports_router)


@app.get("/")
async def root():
    """Root endpoint - API information."""
    return {
        "name": "ParaFort Compliance API",
        "version": "1.0.0",
        "description": "Annual Report Requirements and Service Catalog",
        "docs": "/docs",
        "rules_version": get_rules_table().version,
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "version": "1.0.0"}


# For running with: python -m app.main
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8001)

"""
Annual Report API Routes

Backs the annual report page: dropdown options, the entity-aware
requirement card, the "Start Filing" call-to-action and static guidance.

Unsupported state/entity combinations are an expected outcome and come back
as a 200 placeholder with supported=false, never as computed numbers.
"""
import os
from datetime import date
from typing import Optional, List
from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ..database import get_db
from ..models.compliance import FeeDerivation, NotFound, StateCode, EntityType
from ..services.catalog import ServiceCatalog, CatalogUnavailable, purchase_url
from ..services.compliance import (
    derive, derive_all_entity_types, get_rules_table, build_timeline,
    get_annual_report_guidance, DEFAULT_STATE, DEFAULT_ENTITY_TYPE,
)
from ..services.compliance.timeline import DEFAULT_GRACE_PERIOD


router = APIRouter(prefix="/api/annual-reports", tags=["annual-reports"])

ANNUAL_REPORT_SERVICE_NAME = os.getenv("ANNUAL_REPORT_SERVICE_NAME", "Annual Report Filing")
CATALOG_UNAVAILABLE_MESSAGE = "Service information is currently unavailable."


# =============================================================================
# RESPONSE MODELS
# =============================================================================

class StateOption(BaseModel):
    code: str
    name: str


class EntityTypeOption(BaseModel):
    value: str
    description: str
    multiplier: str


class OptionsResponse(BaseModel):
    """Dropdown contents and default selection."""
    rules_version: str
    states: List[StateOption]
    entity_types: List[EntityTypeOption]
    default_state: str
    default_entity_type: str


class RequirementResponse(BaseModel):
    """Requirement card. Fee fields are null when supported is false."""
    supported: bool
    state: str
    entity_type: str
    reason: Optional[str] = None
    entity_description: Optional[str] = None
    due_date_rule: Optional[str] = None
    interval: Optional[str] = None
    base_fee_cents: Optional[int] = None
    adjusted_fee_cents: Optional[int] = None
    base_fee: Optional[str] = None
    adjusted_fee: Optional[str] = None
    multiplier: Optional[str] = None
    show_adjustment_note: bool = False
    adjustment_note: Optional[str] = None


class FilingServiceResponse(BaseModel):
    """Start Filing call-to-action. purchase_url is omitted when unavailable."""
    available: bool
    service_id: Optional[int] = None
    name: Optional[str] = None
    one_time_price: Optional[str] = None
    purchase_url: Optional[str] = None
    message: Optional[str] = None


class ReminderScheduleResponse(BaseModel):
    advance_90_days: date
    advance_30_days: date
    advance_7_days: date
    due_date_reminder: date
    overdue_reminder: date
    grace_period_end: date


class TimelineResponse(BaseModel):
    due_date: date
    status: str
    days_until_due: int
    reminders: ReminderScheduleResponse


# =============================================================================
# HELPERS
# =============================================================================

def requirement_response(derivation: FeeDerivation) -> RequirementResponse:
    return RequirementResponse(
        supported=True,
        state=derivation.state_code.value,
        entity_type=derivation.entity_type.value,
        entity_description=derivation.entity_description,
        due_date_rule=derivation.due_date_rule,
        interval=derivation.interval.value,
        base_fee_cents=derivation.base_fee_cents,
        adjusted_fee_cents=derivation.adjusted_fee_cents,
        base_fee=derivation.base_fee_display,
        adjusted_fee=derivation.adjusted_fee_display,
        multiplier=str(derivation.multiplier),
        show_adjustment_note=derivation.show_adjustment_note,
        adjustment_note=derivation.adjustment_note,
    )


def unsupported_response(state: str, entity_type: str, result: NotFound) -> RequirementResponse:
    return RequirementResponse(
        supported=False,
        state=state,
        entity_type=entity_type,
        reason=result.reason,
    )


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.get("/options", response_model=OptionsResponse)
async def get_options():
    """States and entity types for the selection dropdowns."""
    table = get_rules_table()
    return OptionsResponse(
        rules_version=table.version,
        states=[
            StateOption(code=code.value, name=table.states[code].state_name)
            for code in StateCode
        ],
        entity_types=[
            EntityTypeOption(
                value=entity_type.value,
                description=table.entity_types[entity_type].description,
                multiplier=str(table.entity_types[entity_type].multiplier),
            )
            for entity_type in EntityType
        ],
        default_state=DEFAULT_STATE.value,
        default_entity_type=DEFAULT_ENTITY_TYPE.value,
    )


@router.get("/requirements", response_model=RequirementResponse)
async def get_requirement(
    state: str = Query(DEFAULT_STATE.value, description="Two-letter state code"),
    entity_type: str = Query(DEFAULT_ENTITY_TYPE.value, description="Entity type label"),
):
    """Entity-aware annual report requirement for one state."""
    result = derive(state, entity_type)
    if isinstance(result, NotFound):
        return unsupported_response(state, entity_type, result)
    return requirement_response(result.value)


@router.get("/requirements/{state}", response_model=List[RequirementResponse])
async def get_state_requirements(state: str):
    """Requirement for every entity type in one state."""
    result = derive_all_entity_types(state)
    if isinstance(result, NotFound):
        return [
            unsupported_response(state, entity_type.value, result)
            for entity_type in EntityType
        ]
    return [requirement_response(d) for d in result.value]


@router.get("/filing-service", response_model=FilingServiceResponse)
async def get_filing_service(db: Session = Depends(get_db)):
    """
    Resolve the Annual Report Filing service for the Start Filing button.

    Catalog failures are not propagated: the page shows a message and no
    call-to-action instead.
    """
    catalog = ServiceCatalog(db)
    try:
        service = catalog.find_by_name(ANNUAL_REPORT_SERVICE_NAME)
    except CatalogUnavailable:
        return FilingServiceResponse(available=False, message=CATALOG_UNAVAILABLE_MESSAGE)

    price = service.one_time_price
    return FilingServiceResponse(
        available=True,
        service_id=service.id,
        name=service.name,
        one_time_price=f"{price:.2f}" if price is not None else None,
        purchase_url=purchase_url(service.id),
    )


@router.get("/timeline", response_model=TimelineResponse)
async def get_timeline(
    due_date: date = Query(..., description="Resolved due date (YYYY-MM-DD)"),
    grace_period_days: int = Query(DEFAULT_GRACE_PERIOD, ge=0, le=365),
):
    """Reminder schedule and filing status for a concrete due date."""
    timeline = build_timeline(due_date, grace_period_days=grace_period_days)
    reminders = timeline.reminders
    return TimelineResponse(
        due_date=timeline.due_date,
        status=timeline.status.value,
        days_until_due=timeline.days_until_due,
        reminders=ReminderScheduleResponse(
            advance_90_days=reminders.advance_90_days,
            advance_30_days=reminders.advance_30_days,
            advance_7_days=reminders.advance_7_days,
            due_date_reminder=reminders.due_date_reminder,
            overdue_reminder=reminders.overdue_reminder,
            grace_period_end=reminders.grace_period_end,
        ),
    )


@router.get("/guidance", response_model=dict)
async def get_guidance():
    """Static annual report guidance."""
    return get_annual_report_guidance()

"""
ParaFort Compliance - Annual Report Rule Models

Closed enumerations for jurisdictions and entity types, the two reference
records loaded from the rules dataset, and the tagged lookup result returned
by the fee engine.

Reference records are frozen. Nothing downstream may mutate a loaded table.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Generic, Optional, TypeVar, Union


# =============================================================================
# ENUMS
# =============================================================================

class StateCode(str, Enum):
    """Two-letter U.S. state codes covered by the annual report rules."""
    AL = "AL"
    AK = "AK"
    AZ = "AZ"
    AR = "AR"
    CA = "CA"
    CO = "CO"
    CT = "CT"
    DE = "DE"
    FL = "FL"
    GA = "GA"
    HI = "HI"
    ID = "ID"
    IL = "IL"
    IN = "IN"
    IA = "IA"
    KS = "KS"
    KY = "KY"
    LA = "LA"
    ME = "ME"
    MD = "MD"
    MA = "MA"
    MI = "MI"
    MN = "MN"
    MS = "MS"
    MO = "MO"
    MT = "MT"
    NE = "NE"
    NV = "NV"
    NH = "NH"
    NJ = "NJ"
    NM = "NM"
    NY = "NY"
    NC = "NC"
    ND = "ND"
    OH = "OH"
    OK = "OK"
    OR = "OR"
    PA = "PA"
    RI = "RI"
    SC = "SC"
    SD = "SD"
    TN = "TN"
    TX = "TX"
    UT = "UT"
    VT = "VT"
    VA = "VA"
    WA = "WA"
    WV = "WV"
    WI = "WI"
    WY = "WY"


class EntityType(str, Enum):
    """Entity types with a fee modifier."""
    LLC = "LLC"
    CORPORATION = "Corporation"
    NON_PROFIT = "Non-Profit"
    PROFESSIONAL_CORPORATION = "Professional Corporation"


class FilingInterval(str, Enum):
    ANNUAL = "Annual"
    BIENNIAL = "Biennial"
    NONE = "None"


class LookupKind(str, Enum):
    """Which reference table a failed lookup was made against."""
    STATE = "state"
    ENTITY_TYPE = "entity_type"


class FilingStatus(str, Enum):
    NOT_DUE = "not_due"
    DUE_SOON = "due_soon"
    OVERDUE = "overdue"


# =============================================================================
# REFERENCE RECORDS
# =============================================================================

@dataclass(frozen=True)
class JurisdictionRequirement:
    """Annual report requirement for one state."""
    state_code: StateCode
    state_name: str
    due_date_rule: str  # display text only, never parsed
    base_fee_cents: int
    interval: FilingInterval


@dataclass(frozen=True)
class EntityTypeModifier:
    entity_type: EntityType
    multiplier: Decimal
    description: str


@dataclass(frozen=True)
class FeeDerivation:
    """Display-ready requirement for one (state, entity type) pair."""
    state_code: StateCode
    entity_type: EntityType
    entity_description: str
    due_date_rule: str
    interval: FilingInterval
    base_fee_cents: int
    multiplier: Decimal
    adjusted_fee_cents: int
    base_fee_display: str
    adjusted_fee_display: str

    @property
    def show_adjustment_note(self) -> bool:
        """The adjusted-fee note is hidden when the modifier is exactly 1."""
        return self.multiplier != 1

    @property
    def adjustment_note(self) -> Optional[str]:
        if not self.show_adjustment_note:
            return None
        return (
            f"{self.entity_type.value} fees are adjusted by "
            f"{self.multiplier}x the base state fee"
        )


# =============================================================================
# TAGGED LOOKUP RESULT
# =============================================================================

T = TypeVar("T")


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T
    found: bool = field(default=True, init=False)


@dataclass(frozen=True)
class NotFound:
    """No data for the requested key. An expected outcome, not an error."""
    kind: LookupKind
    key: str
    found: bool = field(default=False, init=False)

    @property
    def reason(self) -> str:
        if self.kind == LookupKind.STATE:
            return f"Unsupported jurisdiction: {self.key!r}"
        return f"Unsupported entity type: {self.key!r}"


LookupResult = Union[Found[T], NotFound]


# =============================================================================
# FILING TIMELINE
# =============================================================================

@dataclass(frozen=True)
class ReminderSchedule:
    advance_90_days: date
    advance_30_days: date
    advance_7_days: date
    due_date_reminder: date
    overdue_reminder: date
    grace_period_end: date


@dataclass(frozen=True)
class FilingTimeline:
    due_date: date
    status: FilingStatus
    days_until_due: int
    reminders: ReminderSchedule

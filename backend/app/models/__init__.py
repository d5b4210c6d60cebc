"""ParaFort Compliance - Data Models"""
from .compliance import (
    # Enums
    StateCode, EntityType, FilingInterval, LookupKind, FilingStatus,
    # Reference records
    JurisdictionRequirement, EntityTypeModifier, FeeDerivation,
    # Lookup results
    Found, NotFound, LookupResult,
    # Timeline
    ReminderSchedule, FilingTimeline,
)

__all__ = [
    "StateCode", "EntityType", "FilingInterval", "LookupKind", "FilingStatus",
    "JurisdictionRequirement", "EntityTypeModifier", "FeeDerivation",
    "Found", "NotFound", "LookupResult",
    "ReminderSchedule", "FilingTimeline",
]

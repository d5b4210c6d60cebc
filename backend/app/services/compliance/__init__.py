"""
Annual Report Compliance Services

Rules table loading, entity-aware fee derivation, selection state and
filing timeline helpers.
"""

from .rules_table import (
    RulesTable, RulesDatasetError,
    load_rules_table, build_rules_table, get_rules_table, parse_fee_cents,
)
from .fee_engine import (
    derive, derive_all_entity_types, lookup_state, lookup_entity_type,
    adjust_fee_cents, format_cents,
)
from .selection import FeeSelection, DEFAULT_STATE, DEFAULT_ENTITY_TYPE
from .timeline import reminder_schedule, filing_status, build_timeline
from .guidance import get_annual_report_guidance

__all__ = [
    'RulesTable',
    'RulesDatasetError',
    'load_rules_table',
    'build_rules_table',
    'get_rules_table',
    'parse_fee_cents',
    'derive',
    'derive_all_entity_types',
    'lookup_state',
    'lookup_entity_type',
    'adjust_fee_cents',
    'format_cents',
    'FeeSelection',
    'DEFAULT_STATE',
    'DEFAULT_ENTITY_TYPE',
    'reminder_schedule',
    'filing_status',
    'build_timeline',
    'get_annual_report_guidance',
]

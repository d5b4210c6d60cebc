"""
Annual Report Fee Engine

Derives the display-ready annual report requirement for a state and entity
type:

    adjusted_fee = round_half_up(base_fee * entity_multiplier)

Rounding is to the nearest whole dollar, half-up (55 x 1.3 = 71.5 -> $72).
Arithmetic is done in Decimal so binary float error never decides a tie.

Lookups are total. An unknown state or entity type yields NotFound instead
of raising, so callers must handle the unsupported case explicitly.
"""
import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Union

from ...models.compliance import (
    StateCode, EntityType, LookupKind,
    JurisdictionRequirement, EntityTypeModifier, FeeDerivation,
    Found, NotFound, LookupResult,
)
from .rules_table import RulesTable, get_rules_table

logger = logging.getLogger(__name__)


CENTS_PER_DOLLAR = 100
WHOLE_DOLLAR = Decimal("1")


# =============================================================================
# INPUT COERCION
# =============================================================================

def coerce_state_code(value: Union[StateCode, str, None]) -> Optional[StateCode]:
    """Map raw input onto a StateCode, or None when it is not one."""
    if isinstance(value, StateCode):
        return value
    if not isinstance(value, str):
        return None
    try:
        return StateCode(value.strip().upper())
    except ValueError:
        return None


def coerce_entity_type(value: Union[EntityType, str, None]) -> Optional[EntityType]:
    """Map raw input onto an EntityType by value or enum name, ignoring case."""
    if isinstance(value, EntityType):
        return value
    if not isinstance(value, str):
        return None

    needle = value.strip().lower()
    for entity_type in EntityType:
        if needle in (entity_type.value.lower(), entity_type.name.lower()):
            return entity_type
    return None


# =============================================================================
# LOOKUPS
# =============================================================================

def lookup_state(
    state_code: Union[StateCode, str, None],
    table: Optional[RulesTable] = None,
) -> LookupResult[JurisdictionRequirement]:
    table = table or get_rules_table()
    code = coerce_state_code(state_code)
    if code is None or code not in table.states:
        return NotFound(kind=LookupKind.STATE, key=str(state_code))
    return Found(table.states[code])


def lookup_entity_type(
    entity_type: Union[EntityType, str, None],
    table: Optional[RulesTable] = None,
) -> LookupResult[EntityTypeModifier]:
    table = table or get_rules_table()
    resolved = coerce_entity_type(entity_type)
    if resolved is None or resolved not in table.entity_types:
        return NotFound(kind=LookupKind.ENTITY_TYPE, key=str(entity_type))
    return Found(table.entity_types[resolved])


# =============================================================================
# ARITHMETIC & FORMATTING
# =============================================================================

def adjust_fee_cents(base_fee_cents: int, multiplier: Decimal) -> int:
    """Apply an entity multiplier and round half-up to whole dollars."""
    base_dollars = Decimal(base_fee_cents) / CENTS_PER_DOLLAR
    adjusted = (base_dollars * multiplier).quantize(WHOLE_DOLLAR, rounding=ROUND_HALF_UP)
    return int(adjusted) * CENTS_PER_DOLLAR


def format_cents(cents: int) -> str:
    """2500 -> "$25", 13875 -> "$138.75", 100000 -> "$1,000"."""
    dollars, remainder = divmod(cents, CENTS_PER_DOLLAR)
    if remainder:
        return f"${dollars:,}.{remainder:02d}"
    return f"${dollars:,}"


# =============================================================================
# DERIVATION
# =============================================================================

def derive(
    state_code: Union[StateCode, str, None],
    entity_type: Union[EntityType, str, None],
    table: Optional[RulesTable] = None,
) -> LookupResult[FeeDerivation]:
    """
    Derive the requirement for a (state, entity type) pair.

    Returns Found(FeeDerivation), or NotFound naming the first table whose
    lookup failed (state first).
    """
    table = table or get_rules_table()

    state_result = lookup_state(state_code, table)
    if isinstance(state_result, NotFound):
        logger.warning(state_result.reason)
        return state_result

    entity_result = lookup_entity_type(entity_type, table)
    if isinstance(entity_result, NotFound):
        logger.warning(entity_result.reason)
        return entity_result

    requirement = state_result.value
    modifier = entity_result.value
    adjusted_cents = adjust_fee_cents(requirement.base_fee_cents, modifier.multiplier)

    return Found(FeeDerivation(
        state_code=requirement.state_code,
        entity_type=modifier.entity_type,
        entity_description=modifier.description,
        due_date_rule=requirement.due_date_rule,
        interval=requirement.interval,
        base_fee_cents=requirement.base_fee_cents,
        multiplier=modifier.multiplier,
        adjusted_fee_cents=adjusted_cents,
        base_fee_display=format_cents(requirement.base_fee_cents),
        adjusted_fee_display=format_cents(adjusted_cents),
    ))


def derive_all_entity_types(
    state_code: Union[StateCode, str, None],
    table: Optional[RulesTable] = None,
) -> LookupResult[List[FeeDerivation]]:
    """Derive every entity type for one state, in enum order."""
    table = table or get_rules_table()

    state_result = lookup_state(state_code, table)
    if isinstance(state_result, NotFound):
        logger.warning(state_result.reason)
        return state_result

    derivations = []
    for entity_type in EntityType:
        result = derive(state_result.value.state_code, entity_type, table)
        # Every EntityType is guaranteed by the dataset load
        derivations.append(result.value)
    return Found(derivations)

"""
Annual Report Rules Table

Loads the jurisdiction and entity-type reference tables from the versioned
JSON dataset shipped next to this module. The dataset is read once and held
in read-only mappings; swapping the file (or pointing
ANNUAL_REPORT_RULES_PATH at another one) updates the rules without touching
the fee engine or the API layer.

Load is all-or-nothing: every StateCode and EntityType must be covered,
and any malformed record rejects the whole dataset.
"""
import json
import logging
import os
import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from ...models.compliance import (
    StateCode, EntityType, FilingInterval,
    JurisdictionRequirement, EntityTypeModifier,
)

logger = logging.getLogger(__name__)


DEFAULT_RULES_PATH = Path(__file__).parent / "annual_report_rules.json"
RULES_PATH = Path(os.getenv("ANNUAL_REPORT_RULES_PATH", str(DEFAULT_RULES_PATH)))

# "$25", "$25.00", "$1,000"
FEE_PATTERN = re.compile(r"^\$?\s*(\d{1,3}(?:,\d{3})*|\d+)(?:\.(\d{1,2}))?$")


class RulesDatasetError(Exception):
    """Raised when the rules dataset is missing, incomplete or malformed."""
    pass


@dataclass(frozen=True)
class RulesTable:
    """Immutable view of one loaded rules dataset."""
    version: str
    currency: str
    states: Mapping[StateCode, JurisdictionRequirement]
    entity_types: Mapping[EntityType, EntityTypeModifier]


def parse_fee_cents(display: str) -> int:
    """
    Parse a whole-dollar display fee string into integer cents.

    "$25" -> 2500, "$25.00" -> 2500, "$1,000" -> 100000

    Base fees are whole dollars; a non-zero cents part ("$9.50") is rejected.
    """
    match = FEE_PATTERN.match(display.strip())
    if not match:
        raise RulesDatasetError(f"Malformed fee string: {display!r}")

    dollars = int(match.group(1).replace(",", ""))
    cents = int((match.group(2) or "0").ljust(2, "0"))
    if cents:
        raise RulesDatasetError(f"Base fee must be whole dollars: {display!r}")
    return dollars * 100


def _parse_state(code: str, record: Dict[str, Any]) -> JurisdictionRequirement:
    try:
        state_code = StateCode(code)
    except ValueError:
        raise RulesDatasetError(f"Unknown state code in dataset: {code!r}")

    try:
        interval = FilingInterval(record["interval"])
    except KeyError:
        raise RulesDatasetError(f"{code}: missing 'interval'")
    except ValueError:
        raise RulesDatasetError(f"{code}: unknown interval {record['interval']!r}")

    for key in ("due_date", "fee"):
        if key not in record:
            raise RulesDatasetError(f"{code}: missing {key!r}")

    return JurisdictionRequirement(
        state_code=state_code,
        state_name=record.get("name", code),
        due_date_rule=record["due_date"],
        base_fee_cents=parse_fee_cents(record["fee"]),
        interval=interval,
    )


def _parse_entity_type(label: str, record: Dict[str, Any]) -> EntityTypeModifier:
    try:
        entity_type = EntityType(label)
    except ValueError:
        raise RulesDatasetError(f"Unknown entity type in dataset: {label!r}")

    # Multipliers are kept as Decimal from their string form so 1.3 stays 1.3
    try:
        multiplier = Decimal(str(record["multiplier"]))
    except KeyError:
        raise RulesDatasetError(f"{label}: missing 'multiplier'")
    except InvalidOperation:
        raise RulesDatasetError(f"{label}: invalid multiplier {record['multiplier']!r}")

    if not multiplier.is_finite() or multiplier <= 0:
        raise RulesDatasetError(f"{label}: multiplier must be positive, got {multiplier}")

    return EntityTypeModifier(
        entity_type=entity_type,
        multiplier=multiplier,
        description=record.get("description", label),
    )


def build_rules_table(data: Dict[str, Any]) -> RulesTable:
    """Validate a decoded dataset and freeze it into a RulesTable."""
    if "states" not in data or "entity_types" not in data:
        raise RulesDatasetError("Dataset must define 'states' and 'entity_types'")

    states = {}
    for code, record in data["states"].items():
        requirement = _parse_state(code, record)
        states[requirement.state_code] = requirement

    entity_types = {}
    for label, record in data["entity_types"].items():
        modifier = _parse_entity_type(label, record)
        entity_types[modifier.entity_type] = modifier

    missing_states = sorted(s.value for s in StateCode if s not in states)
    if missing_states:
        raise RulesDatasetError(f"Dataset missing states: {', '.join(missing_states)}")

    missing_entities = sorted(e.value for e in EntityType if e not in entity_types)
    if missing_entities:
        raise RulesDatasetError(f"Dataset missing entity types: {', '.join(missing_entities)}")

    return RulesTable(
        version=str(data.get("version", "unversioned")),
        currency=data.get("currency", "USD"),
        states=MappingProxyType(states),
        entity_types=MappingProxyType(entity_types),
    )


def load_rules_table(path: Optional[Union[str, Path]] = None) -> RulesTable:
    """Read and validate a rules dataset from disk."""
    path = Path(path) if path else RULES_PATH
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        raise RulesDatasetError(f"Rules dataset not found: {path}")
    except json.JSONDecodeError as e:
        raise RulesDatasetError(f"Rules dataset is not valid JSON: {path}: {e}")

    table = build_rules_table(data)
    logger.info(
        f"Loaded annual report rules v{table.version}: "
        f"{len(table.states)} states, {len(table.entity_types)} entity types"
    )
    return table


@lru_cache(maxsize=1)
def get_rules_table() -> RulesTable:
    """Process-wide rules table, loaded on first use."""
    return load_rules_table()

"""
Fee Selection State

The currently chosen (state, entity type) pair. Each change produces a new
selection; the other field is never reset.
"""
from dataclasses import dataclass, replace
from typing import Optional

from ...models.compliance import StateCode, EntityType, FeeDerivation, LookupResult
from .fee_engine import derive
from .rules_table import RulesTable


DEFAULT_STATE = StateCode.CA
DEFAULT_ENTITY_TYPE = EntityType.LLC


@dataclass(frozen=True)
class FeeSelection:
    state_code: StateCode = DEFAULT_STATE
    entity_type: EntityType = DEFAULT_ENTITY_TYPE

    def with_state(self, state_code: StateCode) -> "FeeSelection":
        return replace(self, state_code=state_code)

    def with_entity_type(self, entity_type: EntityType) -> "FeeSelection":
        return replace(self, entity_type=entity_type)

    def derive(self, table: Optional[RulesTable] = None) -> LookupResult[FeeDerivation]:
        return derive(self.state_code, self.entity_type, table)

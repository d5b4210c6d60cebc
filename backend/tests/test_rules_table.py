"""
Tests for the annual report rules dataset loader.
"""
import copy
import json
from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from app.models.compliance import StateCode, EntityType, FilingInterval
from app.services.compliance.rules_table import (
    DEFAULT_RULES_PATH, RulesDatasetError,
    build_rules_table, get_rules_table, load_rules_table, parse_fee_cents,
)


@pytest.fixture
def dataset():
    return json.loads(DEFAULT_RULES_PATH.read_text(encoding="utf-8"))


class TestBundledDataset:

    def test_covers_every_state_and_entity_type(self):
        table = get_rules_table()

        assert len(table.states) == 50
        assert set(table.states) == set(StateCode)
        assert set(table.entity_types) == set(EntityType)

    def test_version_and_currency(self):
        table = get_rules_table()

        assert table.version == "2024.1"
        assert table.currency == "USD"

    def test_known_entries(self):
        table = get_rules_table()

        california = table.states[StateCode.CA]
        assert california.state_name == "California"
        assert california.due_date_rule == "Within 90 days of incorporation anniversary"
        assert california.base_fee_cents == 2500
        assert california.interval == FilingInterval.BIENNIAL

        assert table.states[StateCode.NV].base_fee_cents == 35000
        assert table.entity_types[EntityType.PROFESSIONAL_CORPORATION].multiplier == Decimal("1.3")

    def test_table_is_cached(self):
        assert get_rules_table() is get_rules_table()

    def test_tables_are_read_only(self):
        table = get_rules_table()

        with pytest.raises(TypeError):
            table.states[StateCode.CA] = None
        with pytest.raises(FrozenInstanceError):
            table.states[StateCode.CA].base_fee_cents = 0
        with pytest.raises(FrozenInstanceError):
            table.version = "tampered"


class TestDatasetValidation:

    def test_missing_state_rejected(self, dataset):
        del dataset["states"]["WY"]

        with pytest.raises(RulesDatasetError, match="WY"):
            build_rules_table(dataset)

    def test_unknown_state_rejected(self, dataset):
        dataset["states"]["PR"] = copy.deepcopy(dataset["states"]["CA"])

        with pytest.raises(RulesDatasetError, match="PR"):
            build_rules_table(dataset)

    def test_missing_entity_type_rejected(self, dataset):
        del dataset["entity_types"]["Non-Profit"]

        with pytest.raises(RulesDatasetError, match="Non-Profit"):
            build_rules_table(dataset)

    def test_unknown_interval_rejected(self, dataset):
        dataset["states"]["CA"]["interval"] = "Quarterly"

        with pytest.raises(RulesDatasetError, match="Quarterly"):
            build_rules_table(dataset)

    def test_malformed_fee_rejected(self, dataset):
        dataset["states"]["CA"]["fee"] = "$25-$100"

        with pytest.raises(RulesDatasetError, match="Malformed fee"):
            build_rules_table(dataset)

    def test_fractional_fee_rejected(self, dataset):
        """A cents part would make LLC round away from its base fee."""
        dataset["states"]["NY"]["fee"] = "$9.50"

        with pytest.raises(RulesDatasetError, match="whole dollars"):
            build_rules_table(dataset)

    @pytest.mark.parametrize("multiplier", ["0", "-1.2", "abc", "NaN"])
    def test_bad_multiplier_rejected(self, dataset, multiplier):
        dataset["entity_types"]["Corporation"]["multiplier"] = multiplier

        with pytest.raises(RulesDatasetError):
            build_rules_table(dataset)

    def test_missing_sections_rejected(self):
        with pytest.raises(RulesDatasetError):
            build_rules_table({"version": "1"})


class TestLoadFromDisk:

    def test_load_alternate_dataset(self, dataset, tmp_path):
        dataset["version"] = "2025.2"
        dataset["states"]["CA"]["fee"] = "$30"
        path = tmp_path / "rules.json"
        path.write_text(json.dumps(dataset), encoding="utf-8")

        table = load_rules_table(path)

        assert table.version == "2025.2"
        assert table.states[StateCode.CA].base_fee_cents == 3000

    def test_missing_file(self, tmp_path):
        with pytest.raises(RulesDatasetError, match="not found"):
            load_rules_table(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(RulesDatasetError, match="not valid JSON"):
            load_rules_table(path)


class TestParseFeeCents:

    @pytest.mark.parametrize("display,cents", [
        ("$0", 0),
        ("$25", 2500),
        ("$1,000", 100000),
        ("$25.00", 2500),
        ("$9.0", 900),
        ("350", 35000),
    ])
    def test_valid(self, display, cents):
        assert parse_fee_cents(display) == cents

    @pytest.mark.parametrize("display", ["", "free", "$25-$100", "$1.234", "-$5", "$9.50", "$138.75"])
    def test_invalid(self, display):
        with pytest.raises(RulesDatasetError):
            parse_fee_cents(display)

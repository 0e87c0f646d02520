"""
JSON Schema Contract Validators

Validates raw records at the storage boundary (files, HTTP payloads,
exported bundles) against the formal JSON Schema contracts.
Uses the jsonschema library (Draft 2020-12).

The engine does not call these validators: mappings passed to
calculate_settlements() are checked by the pydantic domain models only.
Field rules (required fields, non-empty ids, positive amounts, non-empty
unique sharer lists) are the same on both sides. The schemas are also
strict about types and unknown fields. Cross-field rules such as
self-payment exist in the models only.

Schemas (splitledger/core/contracts/schema/):
- participant.json
- activity.json
- settlement.json
- event_data.json
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Loader for JSON Schema files.

    Schemas ship with the package, next to this module.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Cache of loaded schemas
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'activity')

        Returns:
            Loaded schema as dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            ValueError: If the file is not a valid JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation of the schema itself
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Base class for contract validators.

    Wraps validation of raw data against one JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(
            self.schema, format_checker=Draft202012Validator.FORMAT_CHECKER
        )

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Validate data against the schema.

        Raises:
            ValidationError: If the data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Check validity without raising"""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Iterate over all validation errors"""
        return self.validator.iter_errors(data)


class ParticipantValidator(ContractValidator):
    def __init__(self):
        super().__init__("participant")


class ActivityValidator(ContractValidator):
    def __init__(self):
        super().__init__("activity")


class SettlementValidator(ContractValidator):
    def __init__(self):
        super().__init__("settlement")


class EventDataValidator(ContractValidator):
    def __init__(self):
        super().__init__("event_data")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_participant(data: Dict[str, Any]) -> None:
    """
    Validate a participant record.

    Raises:
        ValidationError: If the data does not match the schema
    """
    ParticipantValidator().validate(data)


def validate_activity(data: Dict[str, Any]) -> None:
    """
    Validate an activity record.

    Raises:
        ValidationError: If the data does not match the schema
    """
    ActivityValidator().validate(data)


def validate_settlement(data: Dict[str, Any]) -> None:
    """
    Validate a settlement record ('from', 'to', 'amount').

    Raises:
        ValidationError: If the data does not match the schema
    """
    SettlementValidator().validate(data)


def validate_event_data(data: Dict[str, Any]) -> None:
    """
    Validate a full event bundle.

    Raises:
        ValidationError: If the data does not match the schema
    """
    EventDataValidator().validate(data)

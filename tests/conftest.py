"""Shared test fixtures for data-validator.

Provides schema documents and a compiled validator used across the unit
tests.
"""

import pytest

from data_validator.schema import SchemaValidator
from data_validator.settings import Settings

# =============================================================================
# SCHEMAS
# =============================================================================


TEAM_SCHEMA = "\n".join(
    [
        "description: Test schema object",
        "used_by:",
        "  - 18F/data-validator",
        "primary_key: name",
        "properties:",
        "  name:",
        "    type: String",
        "    description: A sample object's name",
        "  projects:",
        "    type: Array",
        "    description: A sample object's references to project objects",
        "    key_into: projects",
        "  pif-round:",
        "    type: Fixnum",
        "    description: PIF class, if applicable",
        "  18f:",
        "    type: Boolean",
        "    description: Determines whether a member is full-time 18F",
    ]
)


@pytest.fixture
def team_schema() -> str:
    """Well-formed schema with every supported property type."""
    return TEAM_SCHEMA


@pytest.fixture
def validator(team_schema: str) -> SchemaValidator:
    """Validator compiled from the team schema."""
    return SchemaValidator(team_schema)


# =============================================================================
# SETTINGS
# =============================================================================


@pytest.fixture
def test_settings() -> Settings:
    """Provide test settings with safe defaults."""
    return Settings(debug=False, log_level="WARNING")


@pytest.fixture
def mock_settings(test_settings: Settings, monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Mock get_settings() to return test settings."""
    from data_validator import logging_config

    monkeypatch.setattr(logging_config, "get_settings", lambda: test_settings)
    return test_settings

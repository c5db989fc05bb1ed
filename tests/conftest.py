"""
Test Configuration
==================

Pytest configuration with fixtures shared by all test types.
Provides test settings and ready-made page configurations.
"""

import pytest
from typing import Any, Dict
from unittest.mock import patch

from pydantic_settings import SettingsConfigDict

from pagelayout.config.logging import setup_logging
from pagelayout.config.settings import Settings
from pagelayout.models.schemas import FieldConfig, PageConfig, PageOptions


# Test settings override
class TestSettings(Settings):
    """Test-specific settings."""

    environment: str = "testing"
    debug: bool = True
    log_level: str = "DEBUG"

    model_config = SettingsConfigDict(env_file=".env.test")


@pytest.fixture(scope="session")
def test_settings() -> TestSettings:
    """Test settings fixture."""
    return TestSettings()


@pytest.fixture(scope="session", autouse=True)
def override_settings(test_settings: TestSettings):
    """Override library settings for testing."""
    with patch("pagelayout.config.settings.settings", test_settings):
        setup_logging(test_settings)
        yield test_settings


@pytest.fixture
def page_config() -> PageConfig:
    """An empty page named 'crossbeams'."""
    return PageConfig(name="crossbeams")


@pytest.fixture
def make_page_config():
    """Build a page config from plain field option dictionaries."""

    def _make(
        fields: Dict[str, Dict[str, Any]] = None,
        form_object: Dict[str, Any] = None,
        name: str = "crossbeams",
        **kwargs: Any,
    ) -> PageConfig:
        options = PageOptions(
            fields={field: FieldConfig(**config) for field, config in (fields or {}).items()},
            behaviours=kwargs.pop("behaviours", []),
        )
        return PageConfig(name=name, form_object=form_object or {}, options=options, **kwargs)

    return _make


@pytest.fixture
def user_page_definition() -> Dict[str, Any]:
    """A small page definition with a section, a form and a row of columns."""
    return {
        "name": "user",
        "fields": {
            "email": {"renderer": "email", "required": True},
            "role_id": {"renderer": "select", "options": [["Admin", 1], ["Clerk", 2]]},
            "notes": {"renderer": "textarea", "rows": 4},
        },
        "form_object": {"email": "a@b.com", "role_id": 2, "notes": ""},
        "nodes": [
            {
                "type": "section",
                "caption": "User",
                "nodes": [
                    {
                        "type": "form",
                        "action": "/users/1",
                        "method": "update",
                        "nodes": [
                            {
                                "type": "row",
                                "nodes": [
                                    {
                                        "type": "column",
                                        "size": "half",
                                        "nodes": [
                                            {"type": "field", "name": "email"},
                                            {"type": "field", "name": "role_id"},
                                        ],
                                    },
                                    {
                                        "type": "column",
                                        "size": "half",
                                        "nodes": [{"type": "field", "name": "notes"}],
                                    },
                                ],
                            }
                        ],
                    }
                ],
            }
        ],
    }

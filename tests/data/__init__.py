"""
Test Data Package
=================

Sample page definitions for tests.
"""

from .sample_page_definitions import (
    ALL_VALID_DEFINITIONS,
    INVALID_DEFINITIONS,
    MAINTENANCE_PAGE_YAML,
    SIMPLE_FORM_PAGE,
    SIMPLE_TEXT_PAGE,
    get_invalid_definitions,
)

__all__ = [
    "ALL_VALID_DEFINITIONS",
    "INVALID_DEFINITIONS",
    "MAINTENANCE_PAGE_YAML",
    "SIMPLE_FORM_PAGE",
    "SIMPLE_TEXT_PAGE",
    "get_invalid_definitions",
]

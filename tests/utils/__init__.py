"""
Test Utilities
==============

Helpers and assertions shared across the test suite.
"""

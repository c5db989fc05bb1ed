"""
Test Suite
==========

Test suite matching the pagelayout package structure.

Test Categories:
- unit: Unit tests for settings, renderers, page nodes and the parser
- integration: Whole pages built from definitions and the Python DSL
"""

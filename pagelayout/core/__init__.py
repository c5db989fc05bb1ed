"""
Core Business Logic
==================

Core modules for rendering page node trees to HTML.

Modules:
- rendering: field renderers and the field-type registry
- layout: page nodes and container templates
- dsl: JSON/YAML page-definition loading
"""

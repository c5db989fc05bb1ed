"""
Rendering Module
===============

Field renderers: strategy objects turning a field's declared type and
configuration into an HTML control.

Components:
- base: shared attribute building (ids, names, errors, hints, behaviours)
- input, datetime, checkbox, hidden, label, select, multi, textarea, list, lookup
- field_types: the fixed field-type to renderer mapping
- icon: inline SVG icons
"""

"""
Data Models
===========

Pydantic data models for page and field configuration.

Models:
- schemas: field configs, page configs, behaviour rules, enums and parse results
"""

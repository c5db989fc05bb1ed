"""
Configuration Management
=======================

Environment-based configuration using Pydantic Settings.

Components:
- settings: Library settings (default captions, page name, grid height)
- logging: Structured logging configuration
"""

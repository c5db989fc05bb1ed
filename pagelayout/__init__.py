"""
Page Layout DSL
===============

A declarative DSL for composing server-rendered HTML pages from a tree of
page nodes. Each node knows how to render itself and its children.

This package provides:
- Page nodes (page, section, fold-up, form, row, column, field, grid, link, text)
- Field renderers dispatched from a fixed field-type registry
- A JSON/YAML page-definition loader that builds node trees
"""

__version__ = "1.0.0"
__author__ = "Page Layout Team"

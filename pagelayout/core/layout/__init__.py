"""
Page layout nodes.

Build a page with the Python DSL starting from ``Page``, or load one from a
JSON/YAML definition with ``pagelayout.core.dsl``.
"""

"""
Page definition loading.

Declarative JSON/YAML page definitions are validated and built into page
node trees.
"""
